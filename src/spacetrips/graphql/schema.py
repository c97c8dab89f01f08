"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..auth.context import resolve_auth_user
from ..datasources.launch import LaunchAPI
from ..datasources.user import UserAPI
from ..logging import bind_user_id, get_logger
from .context import RequestContext
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast
    instead of erroring at request time.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def get_context(request: Request) -> RequestContext:
    """Build the per-request context from the Authorization header and app state."""
    store = request.app.state.store
    user = await resolve_auth_user(request.headers.get("authorization"), store)
    if user is not None:
        bind_user_id(str(user.id))

    return RequestContext(
        launch_api=LaunchAPI(request.app.state.http_client),
        user_api=UserAPI(store, user),
        user=user,
    )


def create_graphql_router() -> GraphQLRouter[RequestContext, None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql",
        context_getter=get_context,
    )
