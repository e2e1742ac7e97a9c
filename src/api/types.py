"""GraphQL object and input types."""

from datetime import datetime

import strawberry

from src.models.codespace import Codespace
from src.models.user import User


@strawberry.type(name="User", description="User object structure")
class UserType:
    id: strawberry.ID
    name: str | None
    username: str
    email: str
    avatar: str
    followers: int
    codespaces_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(str(user.id)),
            name=user.name,
            username=user.username,
            email=user.email,
            avatar=user.avatar,
            followers=user.followers,
            codespaces_count=user.codespaces_count,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@strawberry.type(name="Profile", description="Public user profile")
class ProfileType:
    name: str | None
    username: str
    email: str
    avatar: str
    followers: int
    codespaces_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, user: User) -> "ProfileType":
        return cls(
            name=user.name,
            username=user.username,
            email=user.email,
            avatar=user.avatar,
            followers=user.followers,
            codespaces_count=user.codespaces_count,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@strawberry.type(name="Codespace", description="Codespace structure; code is base64-encoded")
class CodespaceType:
    id: strawberry.ID
    title: str
    description: str
    code: str
    language: str
    owner: strawberry.ID
    is_public: bool
    stars: int
    views: int
    downloads: int
    contributors: int
    commits: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, codespace: Codespace) -> "CodespaceType":
        return cls(
            id=strawberry.ID(str(codespace.id)),
            title=codespace.title,
            description=codespace.description,
            code=codespace.code,
            language=codespace.language,
            owner=strawberry.ID(str(codespace.owner_id)),
            is_public=codespace.is_public,
            stars=codespace.stars,
            views=codespace.views,
            downloads=codespace.downloads,
            contributors=codespace.contributors,
            commits=codespace.commits,
            created_at=codespace.created_at,
            updated_at=codespace.updated_at,
        )


@strawberry.input
class CreateUserInput:
    username: str
    email: str
    password: str
    name: str | None = None


@strawberry.input
class UpdateUserInput:
    name: str | None = None
    username: str | None = None
    email: str | None = None
    password: str | None = None
    avatar: str | None = None


@strawberry.input
class CreateCodespaceInput:
    title: str | None = None
    code: str | None = None
    language: str | None = None
    description: str | None = None
    is_public: bool | None = None


@strawberry.input
class UpdateCodespaceInput:
    title: str | None = None
    code: str | None = None
    language: str | None = None
    description: str | None = None
    is_public: bool | None = None
