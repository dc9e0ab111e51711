"""
Shared fixtures for adversarial tests.

Provides a registration service over the in-memory repository with a
cheap bcrypt cost so many concurrent signups stay fast.
"""

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.activation import ActivationService
from src.domain.registration import RegistrationService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def registration_service(
    repository: InMemoryUserRepository, email_sender
) -> RegistrationService:
    """Registration service wired to the shared in-memory repository."""
    return RegistrationService(repository=repository, email_sender=email_sender, bcrypt_cost=4)


@pytest.fixture
def activation_service(repository: InMemoryUserRepository) -> ActivationService:
    """Activation service wired to the shared in-memory repository."""
    return ActivationService(repository=repository)
