"""
Shared module for common utilities used by the REST API.

CLEAN ARCHITECTURE STRUCTURE:
- shared.infrastructure: Database and request plumbing
  - db.py: SQLAlchemy engine and sessions, safe_commit(), storage_errors()
  - correlation.py: X-Request-ID middleware and logging filter

- shared.config: Configuration
  - settings.py: Environment config (Pydantic)
  - logging.py: Structured logging
  - constants.py: Entity enums, create defaults, limits

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - patch.py: Tri-state patch fields for partial updates
  - priority.py: Incident priority matrix
  - schemas.py: Pydantic createsets, updatesets and outputs

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import IncidentStatus, CIStatus
    from shared.utils.exceptions import NotFoundError, ValidationError
    from shared.utils.patch import PatchField, UpdateSet
"""

# This module provides no re-exports.
# All imports should use the canonical paths as documented above.
