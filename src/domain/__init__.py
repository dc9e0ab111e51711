"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for user signup and
account activation. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .activation import ActivationService
from .exceptions import (
    EmailAlreadyInUse,
    EmailDeliveryError,
    InvalidTokenError,
    RegistrationError,
    ValidationError,
)
from .models import NewUser, SignupCandidate, User
from .ports import EmailSender, UserRepository
from .registration import RegistrationService
from .validation import SIGNUP_RULES, FieldRule, validate_candidate

__all__ = [
    "SIGNUP_RULES",
    "ActivationService",
    "EmailAlreadyInUse",
    "EmailDeliveryError",
    "EmailSender",
    "FieldRule",
    "InvalidTokenError",
    "NewUser",
    "RegistrationError",
    "RegistrationService",
    "SignupCandidate",
    "User",
    "UserRepository",
    "ValidationError",
    "validate_candidate",
]
