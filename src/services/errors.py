"""Typed workflow errors surfaced to GraphQL clients."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Machine-readable error codes returned in ``extensions.code``."""

    SESSION_EXPIRED = "SESSION_EXPIRED"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_USERNAME = "INVALID_USERNAME"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    INVALID_AVATAR = "INVALID_AVATAR"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    USERNAME_ALREADY_EXISTS = "USERNAME_ALREADY_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_CODESPACE_INPUT = "INVALID_CODESPACE_INPUT"
    CODESPACE_ALREADY_EXISTS = "CODESPACE_ALREADY_EXISTS"
    CODESPACE_NOT_FOUND = "CODESPACE_NOT_FOUND"
    CODESPACES_NOT_FOUND = "CODESPACES_NOT_FOUND"
    SOMETHING_WENT_WRONG = "SOMETHING_WENT_WRONG"
    CONFLICT = "CONFLICT"
    FORBIDDEN = "FORBIDDEN"


class ResolverError(Exception):
    """A workflow failure with a code and optional per-field messages.

    graphql-core copies ``extensions`` from the original exception onto the
    located GraphQL error, so clients receive::

        {"message": ..., "extensions": {"code": ..., "errors": [{"field", "message"}]}}
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SOMETHING_WENT_WRONG,
        errors: list[dict[str, str]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str, code: ErrorCode) -> "ResolverError":
        """Build an error flagging a single input field."""
        return cls(message, code, [{"field": field, "message": message}])

    @property
    def extensions(self) -> dict[str, Any]:
        extensions: dict[str, Any] = {"code": str(self.code)}
        if self.errors:
            extensions["errors"] = self.errors
        return extensions
