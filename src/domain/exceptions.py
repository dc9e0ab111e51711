"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Message keys are resolved to localized text by the API layer.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationError(RegistrationError):
    """
    One or more signup fields failed their rules.

    Attributes:
        errors: Ordered mapping of field name to message key
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("validation_failure")
        self.errors = dict(errors)


class EmailAlreadyInUse(RegistrationError):
    """Email is already stored for another user (raised by repositories)."""

    pass


class EmailDeliveryError(RegistrationError):
    """Activation email could not be delivered."""

    pass


class InvalidTokenError(RegistrationError):
    """No inactive user holds the presented activation token."""

    pass
