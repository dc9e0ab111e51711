"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from contextlib import AbstractContextManager
from typing import Protocol

from .models import NewUser, User


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def find_by_email(self, email: str) -> User | None:
        """Return the user stored under a normalized email, if any."""
        ...

    def create(self, user: NewUser) -> AbstractContextManager[int]:
        """
        Persist a new inactive user within a transaction scope.

        The returned context manager yields the new user's id. The row is
        committed only when the block exits cleanly; any exception raised
        inside the block discards it.

        Raises:
            EmailAlreadyInUse: If the email violates the uniqueness constraint
        """
        ...

    def activate(self, token: str) -> int | None:
        """
        Atomically activate the user holding a token and clear the token.

        Returns:
            The activated user's id, or None if no user holds the token
        """
        ...

    def count(self) -> int:
        """Return the number of stored users."""
        ...

    def delete_all(self) -> None:
        """Remove every user (test truncation only)."""
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    def send_activation_email(self, email: str, token: str) -> None:
        """
        Send the activation token to an email address.

        Args:
            email: Recipient email address
            token: Activation token

        Raises:
            EmailDeliveryError: If the message could not be delivered
        """
        ...
