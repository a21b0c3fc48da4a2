"""
VPC service layer — the record-store operations on top of the DAO.

Each function receives a `VPCRepository` instance (injected by the router via
FastAPI's dependency system).  The service has no knowledge of which storage
backend is in use — DynamoDB, in-memory, or any future alternative.

Inputs arrive already validated (`VPCCreate` / `VPCUpdate`), so nothing here
can write a record that breaks a field rule.  Missing records are reported
with `VPCNotFoundError`; store failures propagate as `StoreError`.
"""

import logging
import uuid
from datetime import datetime, timezone

from app.dao.base import VPCRepository
from app.exceptions import VPCNotFoundError
from app.schemas.vpc import VPCCreate, VPCRecord, VPCUpdate

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_vpc(request: VPCCreate, repo: VPCRepository) -> VPCRecord:
    """
    Assign an id and timestamps to a validated candidate and persist it.

    Parameters
    ----------
    request : VPCCreate
        Validated record fields from the caller.
    repo : VPCRepository
        DAO used to persist the record.

    Returns
    -------
    VPCRecord
        The record exactly as stored.
    """
    timestamp = _now()
    record = request.model_dump(mode="json")
    record.update(
        {
            "id": str(uuid.uuid4()),
            "created_at": timestamp,
            "updated_at": timestamp,
        }
    )

    logger.info(
        "Creating VPC record '%s' (%s) in %s.",
        request.name,
        request.cidr_block,
        request.region,
    )
    repo.insert(record)
    return VPCRecord(**record)


def fetch_vpc(vpc_id: str, repo: VPCRepository) -> VPCRecord:
    """Retrieve a VPC record by id; raises `VPCNotFoundError` if absent."""
    record = repo.get(vpc_id)
    if record is None:
        raise VPCNotFoundError(vpc_id)
    return VPCRecord(**record)


def fetch_all_vpcs(repo: VPCRepository) -> list[VPCRecord]:
    """Return all stored VPC records."""
    return [VPCRecord(**r) for r in repo.list_all()]


def update_vpc(vpc_id: str, request: VPCUpdate, repo: VPCRepository) -> VPCRecord:
    """
    Merge the fields the caller sent into an existing record.

    Only fields explicitly present in *request* are changed; ``updated_at``
    is always refreshed.  Raises `VPCNotFoundError` when the id is unknown,
    in which case nothing is written.
    """
    changes = request.model_dump(mode="json", exclude_unset=True)
    changes["updated_at"] = _now()

    logger.info("Updating VPC record '%s' fields %s.", vpc_id, sorted(changes))
    record = repo.update(vpc_id, changes)
    if record is None:
        raise VPCNotFoundError(vpc_id)
    return VPCRecord(**record)


def remove_vpc(vpc_id: str, repo: VPCRepository) -> None:
    """Delete a VPC record; raises `VPCNotFoundError` if it did not exist."""
    if not repo.delete(vpc_id):
        raise VPCNotFoundError(vpc_id)
    logger.info("VPC record '%s' removed.", vpc_id)
