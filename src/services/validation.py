"""Field validation shared by the user and codespace workflows."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from src.services.errors import ErrorCode, ResolverError
from src.utils import is_image

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 50
TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 50
LANGUAGE_MAX_LENGTH = 50
NAME_MAX_LENGTH = 255
AVATAR_MAX_LENGTH = 2048


@dataclass(frozen=True)
class EmailIdentifier:
    """Login identifier that looks like an email address."""

    email: str


@dataclass(frozen=True)
class UsernameIdentifier:
    """Login identifier treated as a username."""

    username: str


LoginIdentifier = EmailIdentifier | UsernameIdentifier


def is_email(value: str) -> bool:
    """Check email syntax only; no DNS lookups."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def check_email(email: str) -> None:
    if not is_email(email):
        raise ResolverError.for_field("email", "Invalid email", ErrorCode.INVALID_EMAIL)


def check_username(username: str) -> None:
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise ResolverError.for_field(
            "username",
            f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters",
            ErrorCode.INVALID_USERNAME,
        )


def check_password(password: str) -> None:
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise ResolverError.for_field(
            "password",
            f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters",
            ErrorCode.INVALID_PASSWORD,
        )


def check_name(name: str) -> None:
    if len(name) > NAME_MAX_LENGTH:
        raise ResolverError.for_field(
            "name", f"Name must be at most {NAME_MAX_LENGTH} characters", ErrorCode.INVALID_INPUT
        )


def check_avatar(avatar: str) -> None:
    if len(avatar) > AVATAR_MAX_LENGTH:
        raise ResolverError.for_field(
            "avatar",
            f"Avatar URL must be at most {AVATAR_MAX_LENGTH} characters",
            ErrorCode.INVALID_AVATAR,
        )
    if not is_image(avatar):
        raise ResolverError.for_field(
            "avatar", "Avatar must be a jpeg, jpg, gif or png URL", ErrorCode.INVALID_AVATAR
        )


def parse_login_identifier(identifier: str) -> LoginIdentifier:
    """Decide once whether a login identifier is an email or a username."""
    if is_email(identifier):
        return EmailIdentifier(email=identifier)
    check_username(identifier)
    return UsernameIdentifier(username=identifier)


def clean_title(title: str | None) -> str:
    """Trim a codespace title and enforce its length bounds."""
    title = (title or "").strip()
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        raise ResolverError.for_field(
            "title",
            f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters",
            ErrorCode.INVALID_CODESPACE_INPUT,
        )
    return title


def check_language(language: str) -> None:
    if not language.strip() or len(language) > LANGUAGE_MAX_LENGTH:
        raise ResolverError.for_field(
            "language",
            f"Language must be between 1 and {LANGUAGE_MAX_LENGTH} characters",
            ErrorCode.INVALID_CODESPACE_INPUT,
        )
