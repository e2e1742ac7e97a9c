"""SQLAlchemy models."""

from src.models.codespace import Codespace
from src.models.user import User

__all__ = [
    "User",
    "Codespace",
]
