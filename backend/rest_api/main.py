"""
REST API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import FastAPI

from rest_api.core.cors import configure_cors
from rest_api.core.errors import register_exception_handlers
from rest_api.core.lifespan import lifespan
from rest_api.routers.itsm import router as itsm_router
from rest_api.routers.public import health_router
from shared.config.settings import settings
from shared.infrastructure.correlation import CorrelationIdMiddleware


# Create FastAPI application
app = FastAPI(
    title="ITSM REST API",
    description="IT service management: configuration items, incidents, problems and changes",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/swagger-ui",
    redoc_url=None,
    openapi_url="/apidoc/openapi.json",
)

# Middlewares (last added runs first)
configure_cors(app)
app.add_middleware(CorrelationIdMiddleware)

# Exception handlers
register_exception_handlers(app)


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router)
app.include_router(itsm_router, prefix=settings.api_prefix)


# =============================================================================
# Development entry point
# =============================================================================


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "rest_api.main:app",
        host=settings.rest_api_host,
        port=settings.rest_api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
