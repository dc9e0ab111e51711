"""
Domain models - Plain dataclasses for users and signup candidates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SignupCandidate:
    """Raw signup input as submitted by the client. Any field may be missing."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class NewUser:
    """A validated user ready to be persisted (always inactive)."""

    username: str
    email: str
    password_hash: str
    activation_token: str


@dataclass(frozen=True)
class User:
    """
    Persisted user record.

    Lifecycle:
    - Created inactive with a non-null activation token
    - Activation sets inactive=False and clears the token
    """

    id: int
    username: str
    email: str
    password_hash: str
    activation_token: str | None
    inactive: bool
