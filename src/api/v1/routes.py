"""
API v1 routes.

Defines REST endpoints for user signup and account activation.

Handlers are plain ``def`` functions: password hashing, persistence and
email delivery are blocking, so FastAPI runs them in its worker threads.
Failures raise domain exceptions that the error responder turns into the
JSON error envelope.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import (
    get_activation_service,
    get_locale,
    get_registration_service,
)
from src.api.models import ErrorResponse, MessageResponse, RegisterRequest
from src.domain.activation import ActivationService
from src.domain.models import SignupCandidate
from src.domain.registration import RegistrationService
from src.i18n import Translator, get_translator

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation failure"},
        502: {"model": ErrorResponse, "description": "Activation email could not be sent"},
    },
    summary="Register a new user",
    description="Submit username, email and password to sign up. "
    "The account is created inactive and an activation token is emailed.",
)
def register(
    request_data: RegisterRequest,
    locale: str = Depends(get_locale),
    translator: Translator = Depends(get_translator),
    service: RegistrationService = Depends(get_registration_service),
) -> MessageResponse:
    """
    Register a new inactive user and send the activation email.

    - **username**: 4 to 32 characters
    - **email**: Valid, unused email address
    - **password**: At least 6 characters with an uppercase, a lowercase and a number
    """
    service.register(
        SignupCandidate(
            username=request_data.username,
            email=request_data.email,
            password=request_data.password,
        )
    )
    return MessageResponse(message=translator.translate("user_create_success", locale))


@router.post(
    "/users/token/{token}",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid or already used token"},
    },
    summary="Activate account with token",
    description="Redeem the activation token received by email.",
)
def activate(
    token: str,
    locale: str = Depends(get_locale),
    translator: Translator = Depends(get_translator),
    service: ActivationService = Depends(get_activation_service),
) -> MessageResponse:
    """Activate the account holding the token. Tokens are single use."""
    service.activate(token)
    return MessageResponse(message=translator.translate("account_activation_success", locale))
