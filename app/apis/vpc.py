"""
VPC router — all endpoints under /vpcs.

The VPCRepository is injected via `get_vpc_repository`.  Swapping the
storage backend (e.g. an in-memory repo for tests) only requires overriding
that single dependency — no route or service code changes are needed.

Request bodies are run through the validation layer before the service is
called, so a rejected body never reaches the store.  Errors raised below
(`VPCValidationError`, `VPCNotFoundError`, `StoreError`) are translated to
400 / 404 / 500 with an ``{"error": ...}`` body by the handlers in
`app.main`.

Endpoints
─────────
  GET    /vpcs           List all stored VPC records
  GET    /vpcs/{vpc_id}  Get a single VPC record by id
  POST   /vpcs           Create a new VPC record
  PUT    /vpcs/{vpc_id}  Update fields of an existing record
  DELETE /vpcs/{vpc_id}  Remove a VPC record
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.dao.base import VPCRepository
from app.dependencies.dao import get_vpc_repository
from app.schemas.vpc import DeleteResponse, ErrorResponse, VPCRecord
from app.services.validation import validate_create, validate_update
from app.services.vpc import create_vpc, fetch_all_vpcs, fetch_vpc, remove_vpc, update_vpc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vpcs", tags=["VPC Records"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "VPC not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Validation failed"}}
_STORE_ERROR = {500: {"model": ErrorResponse, "description": "Record store failure"}}


@router.get(
    "",
    response_model=list[VPCRecord],
    summary="List all VPC records",
    responses={**_STORE_ERROR},
)
def list_vpcs(repo: VPCRepository = Depends(get_vpc_repository)) -> list[VPCRecord]:
    """Return every stored VPC record."""
    logger.info("GET /vpcs called")
    return fetch_all_vpcs(repo=repo)


@router.get(
    "/{vpc_id}",
    response_model=VPCRecord,
    summary="Get a VPC record by id",
    responses={**_NOT_FOUND, **_STORE_ERROR},
)
def get_vpc(vpc_id: str, repo: VPCRepository = Depends(get_vpc_repository)) -> VPCRecord:
    """Retrieve a single VPC record."""
    logger.info("GET /vpcs/%s called", vpc_id)
    return fetch_vpc(vpc_id=vpc_id, repo=repo)


@router.post(
    "",
    response_model=VPCRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Create a VPC record",
    description=(
        "Stores a new VPC record. `name`, `cidrBlock` and `region` are required; "
        "`status` defaults to `pending`. The CIDR block is format-checked only."
    ),
    responses={**_BAD_REQUEST, **_STORE_ERROR},
)
def post_vpc(
    body: dict[str, Any] = Body(
        ...,
        examples=[{"name": "prod", "cidrBlock": "10.0.0.0/16", "region": "us-east-1"}],
    ),
    repo: VPCRepository = Depends(get_vpc_repository),
) -> VPCRecord:
    """Validate the candidate record and persist it."""
    logger.info("POST /vpcs called")
    request = validate_create(body)
    return create_vpc(request=request, repo=repo)


@router.put(
    "/{vpc_id}",
    response_model=VPCRecord,
    summary="Update a VPC record",
    description="Changes only the fields present in the body. `id` and timestamps are ignored.",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_STORE_ERROR},
)
def put_vpc(
    vpc_id: str,
    body: dict[str, Any] = Body(..., examples=[{"status": "available"}]),
    repo: VPCRepository = Depends(get_vpc_repository),
) -> VPCRecord:
    """Validate the changed fields and merge them into the record."""
    logger.info("PUT /vpcs/%s called", vpc_id)
    request = validate_update(body)
    return update_vpc(vpc_id=vpc_id, request=request, repo=repo)


@router.delete(
    "/{vpc_id}",
    response_model=DeleteResponse,
    summary="Delete a VPC record",
    responses={**_NOT_FOUND, **_STORE_ERROR},
)
def delete_vpc(vpc_id: str, repo: VPCRepository = Depends(get_vpc_repository)) -> DeleteResponse:
    """Remove the stored record permanently."""
    logger.info("DELETE /vpcs/%s called", vpc_id)
    remove_vpc(vpc_id=vpc_id, repo=repo)
    return DeleteResponse()
