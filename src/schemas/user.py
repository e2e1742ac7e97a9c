"""User schemas."""

from pydantic import BaseModel


class UserCreate(BaseModel):
    """Signup request. Field rules are enforced by UserService."""

    name: str | None = None
    username: str | None = None
    email: str | None = None
    password: str | None = None


class UserUpdate(BaseModel):
    """Profile update. Fields left as None are not changed."""

    name: str | None = None
    username: str | None = None
    email: str | None = None
    password: str | None = None
    avatar: str | None = None
