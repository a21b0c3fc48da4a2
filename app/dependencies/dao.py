"""
FastAPI dependency for VPCRepository injection.

Routes declare `repo: VPCRepository = Depends(get_vpc_repository)` and
receive the backend selected by ``STORE_BACKEND`` at runtime.

Swapping the backend (e.g. for tests) only requires overriding this one
dependency — no service or route code changes are needed:

    app.dependency_overrides[get_vpc_repository] = lambda: InMemoryVPCRepository()
"""

import logging

from app.config import settings
from app.dao.base import VPCRepository
from app.dao.dynamodb import DynamoDBVPCRepository
from app.dao.memory import InMemoryVPCRepository

logger = logging.getLogger(__name__)


def build_repository(backend: str) -> VPCRepository:
    """Instantiate the repository named by *backend*."""
    if backend == "dynamodb":
        return DynamoDBVPCRepository()
    if backend == "memory":
        return InMemoryVPCRepository()
    raise ValueError(f"Unknown STORE_BACKEND '{backend}' (expected 'dynamodb' or 'memory').")


# A single, module-level instance is sufficient — DynamoDBVPCRepository is
# stateless apart from the cached table handle, and the in-memory store must
# be shared across requests to be useful at all.
_repository = build_repository(settings.store_backend)
logger.info("Using '%s' record store.", settings.store_backend)


def get_vpc_repository() -> VPCRepository:
    """Return the active VPCRepository implementation."""
    return _repository
