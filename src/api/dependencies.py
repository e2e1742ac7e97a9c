"""FastAPI dependencies for the GraphQL context."""

from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.types import Info

from src.database import get_db
from src.services.auth import get_session_user_id
from src.services.codespace_service import CodespaceService
from src.services.user_service import UserService


async def get_context(db: Annotated[Session, Depends(get_db)]) -> dict[str, Any]:
    """Build the per-request GraphQL context.

    Strawberry merges this with its default ``request``/``response`` entries.
    """
    return {
        "user_service": UserService(db),
        "codespace_service": CodespaceService(db),
    }


def get_session_user(info: Info) -> int:
    """Get the id of the user the request's session cookie belongs to."""
    return get_session_user_id(info.context["request"])
