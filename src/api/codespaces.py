"""Codespace GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from src.api.dependencies import get_session_user
from src.api.types import CodespaceType, CreateCodespaceInput, UpdateCodespaceInput
from src.schemas.codespace import CodespaceCreate, CodespaceUpdate


def find_owned_codespace(info: Info, title: str) -> CodespaceType:
    user_id = get_session_user(info)
    codespace = info.context["codespace_service"].get_for_user(user_id, title)
    return CodespaceType.from_model(codespace)


@strawberry.type
class CodespaceQuery:
    @strawberry.field(description="Get one of the logged-in user's codespaces by title")
    def get_codespace(self, info: Info, title: str) -> CodespaceType:
        return find_owned_codespace(info, title)

    @strawberry.field(description="Alias of getCodespace")
    def search_codespace_for_user_by_title(self, info: Info, title: str) -> CodespaceType:
        return find_owned_codespace(info, title)

    @strawberry.field(description="Public codespaces with an exact title match")
    def search_codespaces_by_title(self, info: Info, title: str) -> list[CodespaceType]:
        codespaces = info.context["codespace_service"].search_public_by_title(title)
        return [CodespaceType.from_model(c) for c in codespaces]

    @strawberry.field(description="All codespaces of the logged-in user")
    def get_codespaces_for_user(self, info: Info) -> list[CodespaceType]:
        user_id = get_session_user(info)
        codespaces = info.context["codespace_service"].list_for_user(user_id)
        return [CodespaceType.from_model(c) for c in codespaces]


@strawberry.type
class CodespaceMutation:
    @strawberry.mutation
    def create_codespace(self, info: Info, input: CreateCodespaceInput) -> CodespaceType:  # noqa: A002
        user_id = get_session_user(info)
        codespace = info.context["codespace_service"].create_codespace(
            user_id,
            CodespaceCreate(
                title=input.title,
                code=input.code,
                language=input.language,
                description=input.description,
                is_public=input.is_public,
            ),
        )
        return CodespaceType.from_model(codespace)

    @strawberry.mutation
    def update_codespace(
        self,
        info: Info,
        title: str,
        input: UpdateCodespaceInput,  # noqa: A002
    ) -> CodespaceType:
        user_id = get_session_user(info)
        codespace = info.context["codespace_service"].update_codespace(
            user_id,
            title,
            CodespaceUpdate(
                title=input.title,
                code=input.code,
                language=input.language,
                description=input.description,
                is_public=input.is_public,
            ),
        )
        return CodespaceType.from_model(codespace)

    @strawberry.mutation
    def delete_codespace(self, info: Info, title: str) -> bool:
        user_id = get_session_user(info)
        return info.context["codespace_service"].delete_codespace(user_id, title)
