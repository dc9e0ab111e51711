"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request

from src.adapters.smtp import ConsoleEmailSender, SmtpEmailSender
from src.config.settings import Settings, get_settings
from src.domain.activation import ActivationService
from src.domain.ports import EmailSender, UserRepository
from src.domain.registration import RegistrationService
from src.i18n import Translator, get_translator


def build_email_sender(settings: Settings) -> EmailSender:
    """Create the configured email sender adapter."""
    if settings.email_backend == "smtp":
        return SmtpEmailSender(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.mail_from,
            activation_url=settings.activation_url,
            username=settings.smtp_username,
            password=settings.smtp_password,
            start_tls=settings.smtp_start_tls,
            timeout=settings.smtp_timeout,
        )
    return ConsoleEmailSender()


def get_repository(request: Request) -> UserRepository:
    """
    Get user repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_email_sender(request: Request) -> EmailSender:
    """Get email sender from app state."""
    return request.app.state.email_sender


def get_registration_service(
    repository: UserRepository = Depends(get_repository),
    email_sender: EmailSender = Depends(get_email_sender),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository and email sender for the domain service.
    """
    settings = get_settings()
    return RegistrationService(
        repository=repository,
        email_sender=email_sender,
        bcrypt_cost=settings.bcrypt_cost,
        token_bytes=settings.activation_token_bytes,
    )


def get_activation_service(
    repository: UserRepository = Depends(get_repository),
) -> ActivationService:
    """Create activation service with injected repository."""
    return ActivationService(repository=repository)


def get_locale(
    request: Request, translator: Translator = Depends(get_translator)
) -> str:
    """Negotiate the response locale from the Accept-Language header."""
    return translator.negotiate(request.headers.get("accept-language"))
