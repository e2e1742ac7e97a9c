"""User service for signup, login and profile management."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.user import User
from src.schemas.user import UserCreate, UserUpdate
from src.services.auth import get_password_hash, verify_password
from src.services.errors import ErrorCode, ResolverError
from src.services.validation import (
    EmailIdentifier,
    UsernameIdentifier,
    check_avatar,
    check_email,
    check_name,
    check_password,
    check_username,
    parse_login_identifier,
)

logger = logging.getLogger(__name__)

settings = get_settings()

SEARCH_LIMIT = 50

# Largest value the users.id INTEGER column can hold
MAX_USER_ID = 2**31 - 1


class UserService:
    """Service for user account operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, data: UserCreate) -> User:
        """Validate a signup request and insert the new user."""
        if not data.username or not data.email or not data.password:
            raise ResolverError("Username, email or password is missing", ErrorCode.INVALID_INPUT)

        check_email(data.email)
        check_username(data.username)
        check_password(data.password)
        if data.name is not None:
            check_name(data.name)

        if self.get_by_email(data.email):
            raise ResolverError.for_field(
                "email", "Email already exists", ErrorCode.EMAIL_ALREADY_EXISTS
            )
        if self.get_by_username(data.username):
            raise ResolverError.for_field(
                "username", "Username already exists", ErrorCode.USERNAME_ALREADY_EXISTS
            )

        user = User(
            name=data.name,
            username=data.username,
            email=data.email,
            password_hash=get_password_hash(data.password),
            avatar=settings.default_avatar,
            followers=0,
            codespaces_count=0,
        )
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def authenticate(self, identifier: str | None, password: str | None) -> User:
        """Check login credentials, where the identifier is an email or a username."""
        if not identifier or not password:
            raise ResolverError("Identifier or password is missing", ErrorCode.INVALID_INPUT)

        parsed = parse_login_identifier(identifier)
        check_password(password)

        match parsed:
            case EmailIdentifier(email=email):
                user = self.get_by_email(email)
            case UsernameIdentifier(username=username):
                user = self.get_by_username(username)

        if not verify_password(password, user.password_hash if user else None):
            logger.warning(f"Failed login for {type(parsed).__name__}")
            message = "Invalid credentials"
            raise ResolverError(
                message,
                ErrorCode.INVALID_CREDENTIALS,
                [
                    {"field": "identifier", "message": message},
                    {"field": "password", "message": message},
                ],
            )

        logger.info(f"User {user.id} logged in")
        return user

    def get_current_user(self, user_id: int) -> User:
        """Load the user a session points to."""
        user = self.get_by_id(user_id)
        if user is None:
            raise ResolverError("User not found", ErrorCode.USER_NOT_FOUND)
        return user

    def get_user(self, raw_id: str) -> User:
        """Look a user up by a client-supplied identifier."""
        try:
            user_id = int(raw_id)
        except (TypeError, ValueError):
            raise ResolverError.for_field("id", "Invalid id", ErrorCode.INVALID_ID) from None
        if not 0 < user_id <= MAX_USER_ID:
            raise ResolverError.for_field("id", "Invalid id", ErrorCode.INVALID_ID)

        user = self.get_by_id(user_id)
        if user is None:
            raise ResolverError.for_field("id", "User not found", ErrorCode.USER_NOT_FOUND)
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> bool:
        """Apply the supplied profile fields.

        Returns False without writing when nothing actually changes.
        """
        user = self.get_current_user(user_id)
        changes: dict[str, str] = {}

        if data.name is not None and data.name != user.name:
            check_name(data.name)
            changes["name"] = data.name

        if data.username is not None and data.username != user.username:
            check_username(data.username)
            taken = (
                self.db.query(User)
                .filter(User.username == data.username, User.id != user.id)
                .first()
            )
            if taken:
                raise ResolverError.for_field(
                    "username", "Username already exists", ErrorCode.USERNAME_ALREADY_EXISTS
                )
            changes["username"] = data.username

        if data.email is not None and data.email != user.email:
            check_email(data.email)
            taken = self.db.query(User).filter(User.email == data.email, User.id != user.id).first()
            if taken:
                raise ResolverError.for_field(
                    "email", "Email already exists", ErrorCode.EMAIL_ALREADY_EXISTS
                )
            changes["email"] = data.email

        if data.password is not None:
            check_password(data.password)
            if not verify_password(data.password, user.password_hash):
                changes["password_hash"] = get_password_hash(data.password)

        if data.avatar is not None and data.avatar != user.avatar:
            check_avatar(data.avatar)
            changes["avatar"] = data.avatar

        if not changes:
            logger.debug(f"No profile changes for user {user.id}")
            return False

        for field, value in changes.items():
            setattr(user, field, value)
        self._commit()
        logger.info(f"Updated user {user.id}: {sorted(changes)}")
        return True

    def delete_user(self, user_id: int, username: str | None) -> bool:
        """Delete the session user's own account along with its codespaces."""
        if not username:
            raise ResolverError.for_field("username", "Username is missing", ErrorCode.INVALID_INPUT)

        user = self.get_by_id(user_id)
        if user is None:
            # Already gone; nothing to delete.
            return True
        if user.username != username:
            raise ResolverError.for_field(
                "username", "You can only delete your own account", ErrorCode.FORBIDDEN
            )

        self.db.delete(user)
        self._commit()
        logger.info(f"Deleted user {user_id} ({username})")
        return True

    def search_users(self, fragment: str | None) -> list[User]:
        """Find users whose username contains a fragment, case-insensitively."""
        if not fragment:
            raise ResolverError.for_field("username", "Username is missing", ErrorCode.INVALID_INPUT)
        return (
            self.db.query(User)
            .filter(User.username.icontains(fragment, autoescape=True))
            .order_by(User.username)
            .limit(SEARCH_LIMIT)
            .all()
        )

    def _commit(self) -> None:
        """Commit, turning unique-key races into a typed conflict."""
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Integrity conflict while saving user")
            raise ResolverError(
                "A user with this username or email already exists", ErrorCode.CONFLICT
            ) from None
