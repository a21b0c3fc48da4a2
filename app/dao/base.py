"""
Abstract DAO (Data Access Object) for VPC records.

`VPCRepository` defines the persistence contract that the service layer depends
on.  Concrete implementations (DynamoDB, in-memory) must fulfil this interface
without the service or router knowing which backend is in use.

Records are plain dicts with snake_case keys (``id``, ``name``,
``cidr_block``, ``region``, ``status``, ``description``, ``created_at``,
``updated_at``).  Validation happens before a record reaches the DAO;
implementations only store what they are given.

Backend failures must be raised as `app.exceptions.StoreError` so callers
never see driver-specific exception types.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class VPCRepository(ABC):
    """Persistence interface for VPC records."""

    @abstractmethod
    def insert(self, record: dict) -> None:
        """
        Persist a new VPC record.

        Parameters
        ----------
        record : dict
            The full record to store.  Must contain an ``id`` string key that
            serves as the unique identifier.
        """

    @abstractmethod
    def get(self, vpc_id: str) -> Optional[dict]:
        """
        Retrieve a single VPC record by its id.

        Returns ``None`` when no matching record is found.
        """

    @abstractmethod
    def list_all(self) -> list[dict]:
        """Return every stored VPC record."""

    @abstractmethod
    def update(self, vpc_id: str, changes: dict[str, Any]) -> Optional[dict]:
        """
        Merge *changes* into the record with the given *vpc_id*.

        A ``None`` value removes that attribute from the record.  Returns the
        merged record, or ``None`` if no matching record was found (in which
        case nothing is written).
        """

    @abstractmethod
    def delete(self, vpc_id: str) -> bool:
        """
        Delete the record with the given *vpc_id*.

        Returns ``True`` if the record existed and was removed,
        ``False`` if no matching record was found.
        """
