"""
Health check endpoints for the REST API.
Provides basic and detailed health status of the service and its database.
"""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from shared.config.settings import settings
from shared.infrastructure.db import get_db

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.api_route("/health", methods=["GET", "HEAD"])
def health_check():
    """
    Basic health check endpoint.
    Returns service status without checking dependencies.
    """
    return {
        "status": "healthy",
        "service": "rest-api",
        "environment": settings.environment,
    }


@router.get("/health/detailed")
def detailed_health_check(db: Session = Depends(get_db)):
    """
    Detailed health check that verifies database connectivity.

    Returns 503 Service Unavailable if the database is unreachable.
    """
    start_time = time.perf_counter()
    try:
        db.execute(text("SELECT 1"))
        database = {"status": "healthy"}
    except SQLAlchemyError as e:
        logger.warning("Health check failed", component="database", error=str(e))
        database = {"status": "unhealthy", "error": type(e).__name__}
    database["latency_ms"] = round((time.perf_counter() - start_time) * 1000, 2)

    checks = {
        "service": "rest-api",
        "environment": settings.environment,
        "status": database["status"],
        "dependencies": {"database": database},
    }

    if database["status"] != "healthy":
        return JSONResponse(content=checks, status_code=503)

    return checks
