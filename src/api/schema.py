"""GraphQL schema and router."""

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.tools import merge_types

from src.api.codespaces import CodespaceMutation, CodespaceQuery
from src.api.dependencies import get_context
from src.api.users import UserMutation, UserQuery

Query = merge_types("Query", (UserQuery, CodespaceQuery))
Mutation = merge_types("Mutation", (UserMutation, CodespaceMutation))

schema = strawberry.Schema(query=Query, mutation=Mutation)

router = GraphQLRouter(schema, context_getter=get_context)
