"""
In-memory implementation of VPCRepository.

Used for local development (``STORE_BACKEND=memory``) and by the test suite.
Records live in a process-local dict and disappear on restart.
"""

import copy
import logging
import threading
from typing import Any, Optional

from app.dao.base import VPCRepository

logger = logging.getLogger(__name__)


class InMemoryVPCRepository(VPCRepository):
    """VPCRepository backed by a dict; list order is insertion order."""

    def __init__(self) -> None:
        self._records: dict[str, dict] = {}
        # FastAPI runs sync routes in a threadpool.
        self._lock = threading.Lock()

    def insert(self, record: dict) -> None:
        stored = {k: v for k, v in record.items() if v is not None}
        with self._lock:
            self._records[record["id"]] = stored
        logger.info("Saved VPC record '%s'.", record["id"])

    def get(self, vpc_id: str) -> Optional[dict]:
        with self._lock:
            record = self._records.get(vpc_id)
            return copy.deepcopy(record) if record is not None else None

    def list_all(self) -> list[dict]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._records.values()]

    def update(self, vpc_id: str, changes: dict[str, Any]) -> Optional[dict]:
        with self._lock:
            record = self._records.get(vpc_id)
            if record is None:
                logger.warning("Update called for non-existent VPC '%s'.", vpc_id)
                return None
            for key, value in changes.items():
                if value is None:
                    record.pop(key, None)
                else:
                    record[key] = value
            logger.info("Updated VPC record '%s'.", vpc_id)
            return copy.deepcopy(record)

    def delete(self, vpc_id: str) -> bool:
        with self._lock:
            existed = self._records.pop(vpc_id, None) is not None
        if existed:
            logger.info("Deleted VPC record '%s'.", vpc_id)
        else:
            logger.warning("Delete called for non-existent VPC '%s'.", vpc_id)
        return existed
