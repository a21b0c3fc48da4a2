"""
Pydantic schemas for the VPC API endpoints.

Separating request/response models from route logic keeps routes thin and
makes the OpenAPI docs (Swagger UI) accurate and self-documenting.

Fields are snake_case in Python and in the store, camelCase on the wire
(``cidrBlock``, ``createdAt`` …).  Both spellings are accepted on input.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Syntax-only check: octets are not range-checked, so 999.0.0.0/16 passes.
# ASCII digits only; `\d` would also accept other Unicode decimal digits.
CIDR_PATTERN = re.compile(r"^([0-9]{1,3}\.){3}[0-9]{1,3}/[0-9]{1,2}$")


class VPCStatus(str, Enum):
    """Lifecycle status of a VPC record.  Nothing moves records between them."""

    PENDING = "pending"
    AVAILABLE = "available"
    DELETING = "deleting"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Shared field rules ────────────────────────────────────────────────────────

def _require_text(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be empty")
    return v


def _require_cidr(v: str) -> str:
    if not CIDR_PATTERN.fullmatch(v):
        raise ValueError("Invalid CIDR block format")
    return v


def _strip_optional(v: Optional[str]) -> Optional[str]:
    return v.strip() if isinstance(v, str) else v


# ── Request models ────────────────────────────────────────────────────────────

class VPCCreate(_CamelModel):
    """Request body for POST /vpcs."""

    name: str = Field(
        ...,
        examples=["production-vpc"],
        description="Human-readable VPC name.",
    )
    cidr_block: str = Field(
        ...,
        examples=["10.0.0.0/16"],
        description="IPv4 CIDR block in A.B.C.D/N notation (format-checked only).",
    )
    region: str = Field(
        ...,
        examples=["us-east-1"],
        description="Region the VPC belongs to.",
    )
    status: VPCStatus = Field(
        VPCStatus.PENDING,
        description="Record status; defaults to `pending`.",
    )
    description: Optional[str] = Field(
        None,
        examples=["Primary production network"],
        description="Free-form description.",
    )

    @field_validator("name", "region")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _require_text(v)

    @field_validator("cidr_block")
    @classmethod
    def validate_cidr(cls, v: str) -> str:
        return _require_cidr(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)


class VPCUpdate(_CamelModel):
    """
    Request body for PUT /vpcs/{id}.

    Every field is optional; only the ones sent are changed.  Required
    record fields may not be cleared, ``description`` may be set to null.
    ``id`` and the timestamps are not fields here and are ignored if sent.
    """

    name: Optional[str] = Field(None, examples=["staging-vpc"])
    cidr_block: Optional[str] = Field(None, examples=["10.1.0.0/16"])
    region: Optional[str] = Field(None, examples=["eu-west-1"])
    status: Optional[VPCStatus] = None
    description: Optional[str] = None

    @field_validator("name", "cidr_block", "region", "status", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator("name", "region")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _require_text(v)

    @field_validator("cidr_block")
    @classmethod
    def validate_cidr(cls, v: str) -> str:
        return _require_cidr(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return _strip_optional(v)


# ── Response models ───────────────────────────────────────────────────────────

class VPCRecord(_CamelModel):
    """A stored VPC record as returned by every read or write."""

    id: str
    name: str
    cidr_block: str
    region: str
    status: VPCStatus
    description: Optional[str] = None
    created_at: str
    updated_at: str


class DeleteResponse(BaseModel):
    message: str = "VPC deleted successfully"


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str
