"""User GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from src.api.dependencies import get_session_user
from src.api.types import CreateUserInput, ProfileType, UpdateUserInput, UserType
from src.schemas.user import UserCreate, UserUpdate
from src.services.auth import clear_session_cookie, set_session_cookie


@strawberry.type
class UserQuery:
    @strawberry.field(description="Get the logged-in user")
    def me(self, info: Info) -> UserType:
        user = info.context["user_service"].get_current_user(get_session_user(info))
        return UserType.from_model(user)

    @strawberry.field(description="Get a user by id")
    def get_user(self, info: Info, id: strawberry.ID) -> UserType:  # noqa: A002
        return UserType.from_model(info.context["user_service"].get_user(id))

    @strawberry.field(description="Search profiles by username fragment")
    def search_users(self, info: Info, username: str) -> list[ProfileType]:
        users = info.context["user_service"].search_users(username)
        return [ProfileType.from_model(user) for user in users]


@strawberry.type
class UserMutation:
    @strawberry.mutation(description="Sign up")
    def create_user(self, info: Info, input: CreateUserInput) -> bool:  # noqa: A002
        info.context["user_service"].create_user(
            UserCreate(
                name=input.name,
                username=input.username,
                email=input.email,
                password=input.password,
            )
        )
        return True

    @strawberry.mutation(description="Log in with an email or username")
    def login(self, info: Info, identifier: str, password: str) -> UserType:
        user = info.context["user_service"].authenticate(identifier, password)
        set_session_cookie(info.context["response"], user.id)
        return UserType.from_model(user)

    @strawberry.mutation(description="Update the logged-in user's profile")
    def update_user(self, info: Info, input: UpdateUserInput) -> bool:  # noqa: A002
        return info.context["user_service"].update_user(
            get_session_user(info),
            UserUpdate(
                name=input.name,
                username=input.username,
                email=input.email,
                password=input.password,
                avatar=input.avatar,
            ),
        )

    @strawberry.mutation(description="Delete the logged-in user's account")
    def delete_user(self, info: Info, username: str) -> bool:
        deleted = info.context["user_service"].delete_user(get_session_user(info), username)
        clear_session_cookie(info.context["response"])
        return deleted

    @strawberry.mutation
    def logout(self, info: Info) -> bool:
        clear_session_cookie(info.context["response"])
        return True
