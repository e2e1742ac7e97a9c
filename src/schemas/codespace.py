"""Codespace schemas."""

from pydantic import BaseModel


class CodespaceCreate(BaseModel):
    """Create a new codespace. ``code`` is the plain, unencoded source."""

    title: str | None = None
    code: str | None = None
    language: str | None = None
    description: str | None = None
    is_public: bool | None = None


class CodespaceUpdate(BaseModel):
    """Update a codespace. Fields left as None are not changed."""

    title: str | None = None
    code: str | None = None
    language: str | None = None
    description: str | None = None
    is_public: bool | None = None
