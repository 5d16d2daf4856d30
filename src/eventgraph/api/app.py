"""
Main FastAPI application for the eventgraph API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import EntityStore, load_default_store

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting eventgraph API...",
        mutations_enabled=app.state.settings.mutations_enabled,
        **app.state.store.counts(),
    )

    yield

    logger.info("Shutting down eventgraph API...")


def build_store(app_settings: Settings) -> EntityStore:
    """Create the entity store an app instance serves from."""
    if not app_settings.seed_on_startup:
        logger.info("Seeding disabled, starting with an empty store")
        return EntityStore()

    store = load_default_store(app_settings.seed_path)
    logger.info("Store seeded", seed_path=app_settings.seed_path or "bundled", **store.counts())
    return store


def create_app(app_settings: Settings | None = None, store: EntityStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use instead of the global ones
        store: Pre-built store; seeded from configuration when omitted
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="eventgraph API",
        description="GraphQL API for users, events, locations and participants",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )

    app.state.settings = app_settings
    app.state.store = store if store is not None else build_store(app_settings)
    app.state.participant_match = app_settings.event_participants_match

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "mutations_enabled": app_settings.mutations_enabled,
            "records": app.state.store.counts(),
        }

    try:
        from ..graphql.schema import create_graphql_router, create_schema, validate_schema

        graphql_schema = create_schema(mutations_enabled=app_settings.mutations_enabled)

        # Fail fast: the server should not start with a broken schema
        logger.info("Validating GraphQL schema...")
        validate_schema(graphql_schema)

        graphql_router = create_graphql_router(graphql_schema, graphiql=app_settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "eventgraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
