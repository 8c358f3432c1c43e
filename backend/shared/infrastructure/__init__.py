"""
Infrastructure module: Database sessions and request correlation.

Provides:
- Database engine, sessions and transactions (db.py)
- Correlation IDs for request logging (correlation.py)
"""

from shared.infrastructure.db import (
    engine,
    SessionLocal,
    create_db_engine,
    get_db,
    get_db_context,
    safe_commit,
    storage_errors,
)
from shared.infrastructure.correlation import (
    CorrelationIdMiddleware,
    CorrelationIdFilter,
    get_request_id,
)

__all__ = [
    # db
    "engine",
    "SessionLocal",
    "create_db_engine",
    "get_db",
    "get_db_context",
    "safe_commit",
    "storage_errors",
    # correlation
    "CorrelationIdMiddleware",
    "CorrelationIdFilter",
    "get_request_id",
]
