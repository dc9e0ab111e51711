"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field rules (presence, length, format) are enforced by the domain validation
layer so that every failing field is reported with a localized message;
these models only pin down the JSON types.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegisterRequest(BaseModel):
    """Request model for user registration. Unknown fields such as ``inactive`` are ignored."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = Field(None, description="Username (4-32 characters)")
    email: str | None = Field(None, description="Email address")
    password: str | None = Field(
        None,
        description="Password (min 6 characters, 1 uppercase, 1 lowercase, 1 number)",
    )

    @field_validator("username", "email", "password")
    @classmethod
    def must_be_utf8_encodable(cls, value: str | None) -> str | None:
        """Reject lone surrogates (e.g. a JSON "\\ud800" escape) that cannot be stored."""
        if value is not None:
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ValueError("must be valid UTF-8 text") from e
        return value


class MessageResponse(BaseModel):
    """Response model for successful operations."""

    message: str


class ErrorResponse(BaseModel):
    """Uniform error envelope."""

    path: str
    timestamp: int = Field(..., description="Milliseconds since epoch")
    message: str
    validationErrors: dict[str, str] | None = Field(  # noqa: N815
        None, description="Per-field messages, present only for validation failures"
    )
