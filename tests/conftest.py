"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory user repository
- Recording and failing email senders
- Test client wired to the real application
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryUserRepository
from src.api.main import app
from src.domain.exceptions import EmailDeliveryError


class RecordingEmailSender:
    """EmailSender that remembers every (email, token) it was asked to send."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send_activation_email(self, email: str, token: str) -> None:
        self.sent.append((email, token))


class FailingEmailSender:
    """EmailSender whose delivery always fails."""

    def __init__(self) -> None:
        self.attempts = 0

    def send_activation_email(self, email: str, token: str) -> None:
        self.attempts += 1
        raise EmailDeliveryError(email)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    """Email sender that records deliveries."""
    return RecordingEmailSender()


@pytest.fixture
def failing_email_sender() -> FailingEmailSender:
    """Email sender that always fails."""
    return FailingEmailSender()


@pytest.fixture
def client(
    repository: InMemoryUserRepository, email_sender: RecordingEmailSender
) -> Generator[TestClient, None, None]:
    """Create test client with in-memory repository and recording email sender."""
    app.state.repository = repository
    app.state.email_sender = email_sender
    yield TestClient(app)
    app.dependency_overrides.clear()
