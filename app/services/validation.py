"""
Validation layer — turns raw record payloads into validated schemas.

The field rules themselves live on the Pydantic models in
`app.schemas.vpc`; this module is the single place where a failed parse is
converted into a `VPCValidationError` with one human-readable message, e.g.

    VPC validation failed: cidrBlock: Invalid CIDR block format

The same formatter is used by the FastAPI request-validation handler, so a
bad body produces the identical message whether it arrives over HTTP or is
validated directly by a caller of the service layer.
"""

from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from app.exceptions import VPCValidationError
from app.schemas.vpc import VPCCreate, VPCUpdate

_PREFIX = "VPC validation failed"


def _describe(error: Mapping[str, Any]) -> str:
    # FastAPI prefixes body errors with ("body", ...); drop transport segments.
    loc = [p for p in error.get("loc", ()) if p not in ("body", "query", "path")]
    if error.get("type") == "json_invalid":
        # The location of a decode error is a character offset, not a field.
        loc = [p for p in loc if not isinstance(p, int)]
    loc = [str(p) for p in loc]
    msg = str(error.get("msg", "invalid value"))
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    if error.get("type") == "missing":
        msg = "is required" if loc else "request body is required"
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Collapse a list of pydantic error dicts into a single message."""
    details = [_describe(e) for e in errors]
    if not details:
        return _PREFIX
    return f"{_PREFIX}: " + "; ".join(details)


def validate_create(data: Mapping[str, Any]) -> VPCCreate:
    """Validate a candidate record; raises `VPCValidationError` on failure."""
    if not isinstance(data, Mapping):
        raise VPCValidationError(f"{_PREFIX}: request body must be a JSON object")
    try:
        return VPCCreate.model_validate(dict(data))
    except ValidationError as exc:
        raise VPCValidationError(format_validation_errors(exc.errors())) from exc


def validate_update(data: Mapping[str, Any]) -> VPCUpdate:
    """Validate a partial record; raises `VPCValidationError` on failure."""
    if not isinstance(data, Mapping):
        raise VPCValidationError(f"{_PREFIX}: request body must be a JSON object")
    try:
        return VPCUpdate.model_validate(dict(data))
    except ValidationError as exc:
        raise VPCValidationError(format_validation_errors(exc.errors())) from exc
