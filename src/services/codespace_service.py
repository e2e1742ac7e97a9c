"""Codespace service for creating, updating and finding code snippets."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.codespace import Codespace
from src.models.user import User
from src.schemas.codespace import CodespaceCreate, CodespaceUpdate
from src.services.errors import ErrorCode, ResolverError
from src.services.validation import check_language, clean_title
from src.utils import encode

logger = logging.getLogger(__name__)


class CodespaceService:
    """Service for codespace operations."""

    def __init__(self, db: Session):
        self.db = db

    def create_codespace(self, user_id: int, data: CodespaceCreate) -> Codespace:
        """Validate and store a new codespace for the session user."""
        if not data.title or not data.code or not data.language:
            raise ResolverError(
                "Title, code or language is missing", ErrorCode.INVALID_CODESPACE_INPUT
            )

        title = clean_title(data.title)
        check_language(data.language)

        owner = self.db.query(User).filter(User.id == user_id).first()
        if owner is None:
            # Valid session token for an account that no longer exists
            raise ResolverError("Something went wrong", ErrorCode.SOMETHING_WENT_WRONG)

        if self._find_owned(owner.id, title):
            raise ResolverError.for_field(
                "title", "Codespace already exists", ErrorCode.CODESPACE_ALREADY_EXISTS
            )

        codespace = Codespace(
            title=title,
            description=data.description or "",
            code=encode(data.code),
            language=data.language,
            owner_id=owner.id,
            is_public=bool(data.is_public),
        )
        self.db.add(codespace)
        owner.codespaces_count += 1
        self._commit()
        self.db.refresh(codespace)
        logger.info(f"Created codespace {codespace.id} '{title}' for user {owner.id}")
        return codespace

    def update_codespace(self, user_id: int, title: str | None, data: CodespaceUpdate) -> Codespace:
        """Apply the supplied fields to one of the session user's codespaces."""
        codespace = self.get_for_user(user_id, title)
        changes: dict[str, str | bool] = {}

        # Every field is checked before any is assigned
        if data.title is not None:
            new_title = clean_title(data.title)
            if new_title != codespace.title and self._find_owned(user_id, new_title):
                raise ResolverError.for_field(
                    "title", "Codespace already exists", ErrorCode.CODESPACE_ALREADY_EXISTS
                )
            changes["title"] = new_title

        if data.description is not None:
            changes["description"] = data.description

        if data.code is not None:
            if not data.code:
                raise ResolverError.for_field(
                    "code", "Code cannot be empty", ErrorCode.INVALID_CODESPACE_INPUT
                )
            changes["code"] = encode(data.code)

        if data.language is not None:
            check_language(data.language)
            changes["language"] = data.language

        if data.is_public is not None:
            changes["is_public"] = data.is_public

        for field, value in changes.items():
            setattr(codespace, field, value)
        self._commit()
        self.db.refresh(codespace)
        logger.info(f"Updated codespace {codespace.id} for user {user_id}")
        return codespace

    def delete_codespace(self, user_id: int, title: str | None) -> bool:
        """Delete one of the session user's codespaces."""
        codespace = self.get_for_user(user_id, title)
        codespace_id = codespace.id
        owner = codespace.owner
        self.db.delete(codespace)
        if owner.codespaces_count > 0:
            owner.codespaces_count -= 1
        self._commit()
        logger.info(f"Deleted codespace {codespace_id} for user {user_id}")
        return True

    def get_for_user(self, user_id: int, title: str | None) -> Codespace:
        """Exact title lookup scoped to the owner."""
        if not title or not title.strip():
            raise ResolverError.for_field(
                "title", "Title is missing", ErrorCode.INVALID_CODESPACE_INPUT
            )

        codespace = self._find_owned(user_id, title.strip())
        if codespace is None:
            raise ResolverError("Codespace not found", ErrorCode.CODESPACE_NOT_FOUND)
        return codespace

    def search_public_by_title(self, title: str | None) -> list[Codespace]:
        """Public codespaces whose title matches exactly."""
        if not title or not title.strip():
            raise ResolverError.for_field(
                "title", "Title is missing", ErrorCode.INVALID_CODESPACE_INPUT
            )

        codespaces = (
            self.db.query(Codespace)
            .filter(
                Codespace.title == title.strip(),
                Codespace.is_public == True,  # noqa: E712
            )
            .order_by(Codespace.created_at.desc(), Codespace.id.desc())
            .all()
        )
        if not codespaces:
            raise ResolverError("No codespaces found", ErrorCode.CODESPACES_NOT_FOUND)
        return codespaces

    def list_for_user(self, user_id: int) -> list[Codespace]:
        """All codespaces owned by a user, newest first."""
        return (
            self.db.query(Codespace)
            .filter(Codespace.owner_id == user_id)
            .order_by(Codespace.created_at.desc(), Codespace.id.desc())
            .all()
        )

    def _find_owned(self, owner_id: int, title: str) -> Codespace | None:
        return (
            self.db.query(Codespace)
            .filter(Codespace.owner_id == owner_id, Codespace.title == title)
            .first()
        )

    def _commit(self) -> None:
        """Commit, turning unique-key races into a typed conflict."""
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Integrity conflict while saving codespace")
            raise ResolverError(
                "A codespace with this title already exists", ErrorCode.CONFLICT
            ) from None
