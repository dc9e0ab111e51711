"""
Error responder - Maps domain failures to the JSON error envelope.

Every error body has the shape::

    {"path": ..., "timestamp": ..., "message": ..., "validationErrors": {...}}

where ``validationErrors`` is only present for validation failures.
Messages are localized for the locale negotiated from Accept-Language.
"""

import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import EmailDeliveryError, InvalidTokenError, ValidationError
from src.domain.models import SignupCandidate
from src.domain.validation import validate_candidate
from src.i18n import get_translator

_SIGNUP_FIELDS = ("username", "email", "password")


def error_response(
    request: Request,
    status_code: int,
    message_key: str,
    validation_errors: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a localized error envelope for the current request."""
    translator = get_translator()
    locale = translator.negotiate(request.headers.get("accept-language"))

    body: dict = {
        "path": request.url.path,
        "timestamp": int(time.time() * 1000),
        "message": translator.translate(message_key, locale),
    }
    if validation_errors is not None:
        body["validationErrors"] = translator.translate_all(validation_errors, locale)
    return JSONResponse(status_code=status_code, content=body)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "validation_failure", exc.errors
    )


async def email_delivery_error_handler(request: Request, exc: EmailDeliveryError) -> JSONResponse:
    return error_response(request, status.HTTP_502_BAD_GATEWAY, "email_failure")


async def invalid_token_error_handler(request: Request, exc: InvalidTokenError) -> JSONResponse:
    return error_response(request, status.HTTP_400_BAD_REQUEST, "account_activation_failure")


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Malformed JSON or wrongly typed fields (e.g. a number as username).

    A missing body, or a JSON body that is not an object, is validated as
    a candidate with every field null.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        if loc == ("body",):
            errors = validate_candidate(SignupCandidate())
            break
        if len(loc) >= 2 and loc[0] == "body" and loc[1] in _SIGNUP_FIELDS:
            errors.setdefault(loc[1], "invalid_value")
    ordered = {field: errors[field] for field in _SIGNUP_FIELDS if field in errors}
    return error_response(request, status.HTTP_400_BAD_REQUEST, "validation_failure", ordered)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error responder on an application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(EmailDeliveryError, email_delivery_error_handler)
    app.add_exception_handler(InvalidTokenError, invalid_token_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
