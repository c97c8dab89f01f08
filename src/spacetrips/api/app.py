"""
Main FastAPI application for the Space Trips backend
"""

import os
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import Store, init_database
from ..database.connection import dispose_database, test_database_connection
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Space Trips API...")
    init_database()

    ok, error = await test_database_connection()
    if not ok:
        logger.error("Database check failed", error=error)
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError(error)

    owns_client = getattr(app.state, "http_client", None) is None
    if owns_client:
        app.state.http_client = httpx.AsyncClient(timeout=settings.launch_api_timeout)

    yield

    logger.info("Shutting down Space Trips API...")
    if owns_client:
        await app.state.http_client.aclose()
        app.state.http_client = None
    await dispose_database()


def create_app(
    http_client: httpx.AsyncClient | None = None, store: Store | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        http_client: Client used to reach the launch provider. When omitted,
            one is opened and closed by the application lifespan.
        store: Relational store; defaults to the SQL-backed store.
    """
    app = FastAPI(
        title="Space Trips API",
        description="Browse SpaceX launches and book trips on them",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.http_client = http_client
    app.state.store = store or Store.create()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # GraphQL endpoint (allow disabling for tests)
    if not os.getenv("SPACETRIPS_DISABLE_GRAPHQL"):
        try:
            from ..graphql.schema import create_graphql_router, validate_schema

            logger.info("Validating GraphQL schema...")
            validate_schema()

            app.include_router(create_graphql_router(), prefix="")
            logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize GraphQL endpoint", error=str(e))
            raise

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "spacetrips.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
