"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from ..logging import get_logger
from ..store import ParticipantMatch
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


def create_schema(mutations_enabled: bool = True) -> strawberry.Schema:
    """Build the schema, with or without the Mutation type.

    Field names are kept as declared (``location_id``, ``user_id``) rather
    than camel-cased.
    """
    return strawberry.Schema(
        query=Query,
        mutation=Mutation if mutations_enabled else None,
        config=StrawberryConfig(auto_camel_case=False),
    )


# Read-write schema used by default
schema = create_schema()


def validate_schema(target: strawberry.Schema | None = None) -> None:
    """Validate a GraphQL schema at startup.

    Runs graphql-core structural validation and an introspection query so
    unresolvable type references fail at startup instead of on first request.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    target = target or schema
    try:
        graphql_schema = target._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    target: strawberry.Schema | None = None, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Resolvers read the store from ``request.app.state.store``.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        state = request.app.state
        return build_context(
            state.store,
            getattr(state, "participant_match", ParticipantMatch.USER),
            request=request,
        )

    return GraphQLRouter(
        target or schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
