"""
Adversarial tests for race condition attack prevention.

Verifies that concurrent operations on the same email or token are handled
atomically, preventing attackers from exploiting race conditions to:
- Create duplicate accounts for one email
- Redeem a single activation token more than once

Both the service's duplicate pre-check and the store's uniqueness
constraint are in play; whichever catches the race, callers see a
ValidationError on the email field.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.activation import ActivationService
from src.domain.exceptions import InvalidTokenError, ValidationError
from src.domain.models import SignupCandidate
from src.domain.registration import RegistrationService

# Apply adversarial marker to all tests in this module
pytestmark = pytest.mark.adversarial


class TestRaceConditionAttacks:
    """
    Adversarial tests simulating race condition attacks.

    These tests simulate an attacker rapidly submitting concurrent
    requests hoping to slip past the duplicate and single-use checks.
    """

    @pytest.mark.parametrize("num_attackers", [5, 20])
    def test_concurrent_registration_exactly_one_succeeds(
        self,
        registration_service: RegistrationService,
        repository: InMemoryUserRepository,
        num_attackers: int,
    ) -> None:
        """
        Concurrent signups for one email create exactly one account.

        Expected defense: all losers fail with email_inuse, one row remains.
        """
        results: list[str] = []
        results_lock = threading.Lock()

        def attack_register(i: int) -> None:
            candidate = SignupCandidate(
                username=f"attacker{i}", email="attack@example.com", password="P4ssword"
            )
            try:
                registration_service.register(candidate)
                outcome = "created"
            except ValidationError as e:
                outcome = e.errors.get("email", "other")
            with results_lock:
                results.append(outcome)

        with ThreadPoolExecutor(max_workers=num_attackers) as executor:
            futures = [executor.submit(attack_register, i) for i in range(num_attackers)]
            for f in futures:
                f.result()

        assert results.count("created") == 1, (
            f"Race condition vulnerability: {results.count('created')} registrations succeeded"
        )
        assert results.count("email_inuse") == num_attackers - 1
        assert repository.count() == 1

    def test_concurrent_activation_token_redeemed_once(
        self,
        registration_service: RegistrationService,
        activation_service: ActivationService,
        email_sender,
    ) -> None:
        """
        Concurrent activations with the same token succeed exactly once.
        """
        registration_service.register(
            SignupCandidate(username="victim", email="victim@example.com", password="P4ssword")
        )
        _, token = email_sender.sent[0]
        results: list[bool] = []
        results_lock = threading.Lock()

        def attack_activate() -> None:
            try:
                activation_service.activate(token)
                ok = True
            except InvalidTokenError:
                ok = False
            with results_lock:
                results.append(ok)

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(attack_activate) for _ in range(10)]
            for f in futures:
                f.result()

        assert results.count(True) == 1
        assert results.count(False) == 9
