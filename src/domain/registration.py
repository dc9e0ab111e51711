"""
Registration domain service - Signup with email activation.

This module contains the core business logic for user registration:

    validate -> check duplicate email -> hash password -> issue token
             -> persist (inactive) -> send activation email

Persistence and email delivery share one repository transaction scope.
The new row is only committed once the activation email has been handed
to the email sender; a delivery failure rolls the row back so no orphan
inactive account survives.
"""

import logging
import secrets
from dataclasses import dataclass, replace

import bcrypt

from .exceptions import EmailAlreadyInUse, EmailDeliveryError, ValidationError
from .models import NewUser, SignupCandidate
from .ports import EmailSender, UserRepository
from .validation import validate_candidate

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: email normalization, validation,
    duplicate detection, password hashing, token generation, persistence
    and activation email delivery.
    """

    repository: UserRepository
    email_sender: EmailSender
    bcrypt_cost: int = 10
    token_bytes: int = 16

    def register(self, candidate: SignupCandidate) -> int:
        """
        Register a new inactive user and send the activation email.

        Args:
            candidate: Raw signup input (username, email, password)

        Returns:
            Id of the newly created user

        Raises:
            ValidationError: If any field fails validation or the email is in use
            EmailDeliveryError: If the activation email could not be sent
        """
        if candidate.email is not None:
            candidate = replace(candidate, email=self._normalize_email(candidate.email))

        errors = validate_candidate(candidate)
        if "email" not in errors and self.repository.find_by_email(candidate.email) is not None:
            errors["email"] = "email_inuse"
            errors = self._in_field_order(errors)
        if errors:
            raise ValidationError(errors)

        new_user = NewUser(
            username=candidate.username,
            email=candidate.email,
            password_hash=self._hash_password(candidate.password),
            activation_token=self._generate_activation_token(),
        )

        try:
            with self.repository.create(new_user) as user_id:
                self.email_sender.send_activation_email(new_user.email, new_user.activation_token)
        except EmailAlreadyInUse:
            # Lost a race with a concurrent signup for the same email
            raise ValidationError({"email": "email_inuse"}) from None
        except EmailDeliveryError:
            logger.warning("Activation email failed, registration rolled back for %s", new_user.email)
            raise

        logger.info("Registered user %s (id=%s)", new_user.email, user_id)
        return user_id

    def _in_field_order(self, errors: dict[str, str]) -> dict[str, str]:
        order = ("username", "email", "password")
        return {field: errors[field] for field in order if field in errors}

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()

    def _generate_activation_token(self) -> str:
        """Generate a cryptographically secure hex activation token."""
        return secrets.token_hex(self.token_bytes)

    def _hash_password(self, password: str) -> str:
        """Hash password using salted bcrypt."""
        secret = password.encode()[:_BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
