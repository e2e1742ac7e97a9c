"""Pydantic schemas for workflow inputs."""

from src.schemas.codespace import CodespaceCreate, CodespaceUpdate
from src.schemas.user import UserCreate, UserUpdate

__all__ = [
    "UserCreate",
    "UserUpdate",
    "CodespaceCreate",
    "CodespaceUpdate",
]
