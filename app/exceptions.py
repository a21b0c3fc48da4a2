"""
Error taxonomy shared by the service layer, the DAO and the routers.

Each error carries the HTTP status it maps to at the API boundary, so the
exception handlers in `app.main` can translate any of them without a
lookup table:

  VPCValidationError   malformed or missing field     → 400
  VPCNotFoundError     id does not resolve to a record → 404
  StoreError           persistence backend failure     → 500
"""

from fastapi import status


class VPCServiceError(Exception):
    """Base class for every error reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class VPCValidationError(VPCServiceError):
    """The caller sent a record that breaks a field rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class VPCNotFoundError(VPCServiceError):
    """No record exists for the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, vpc_id: str) -> None:
        super().__init__("VPC not found")
        self.vpc_id = vpc_id


class StoreError(VPCServiceError):
    """The record store could not complete an operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
