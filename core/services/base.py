# =============================================================================
# core/services/base.py - Shared CRUD Service
# =============================================================================
# Most site content is a plain table edited from the dashboard. RecordService
# holds the list/get/create/update/delete flow once; each resource subclass
# only names its table and ordering, and overrides a hook where it needs to.
#
# Database failures are logged and re-raised as DatabaseError (500);
# missing rows become RecordNotFoundError (404).
# =============================================================================

import logging
from typing import Any, ClassVar

from lib.supabase_client import SupabaseClient, SupabaseClientError
from app.exceptions import (
    DatabaseError,
    DuplicateRecordError,
    NoFieldsToUpdateError,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)


class RecordService:
    """
    Base service for a single-table resource.

    Subclasses set:
        table: Table name
        resource: Display name used in errors ("Game")
        order_by / descending: Default list ordering
        unique_field: Column a duplicate insert collides on (409)
    """

    table: ClassVar[str] = ""
    resource: ClassVar[str] = "Record"
    order_by: ClassVar[str | None] = "id"
    descending: ClassVar[bool] = False
    unique_field: ClassVar[str] = "id"

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    @classmethod
    def prepare_create(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Fill in generated columns before insert. Default: unchanged."""
        return data

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    @classmethod
    def list_records(cls, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """
        List rows in the default order.

        Raises:
            DatabaseError: If the query fails
        """
        try:
            return SupabaseClient.fetch_rows(
                cls.table,
                filters=filters,
                order_by=cls.order_by,
                desc=cls.descending,
            )
        except SupabaseClientError as e:
            logger.error(f"Failed to list {cls.table}: {e}")
            raise DatabaseError(f"list {cls.resource.lower()} records", e.message)

    @classmethod
    def get_record(cls, record_id: Any) -> dict[str, Any]:
        """
        Get one row by id.

        Raises:
            RecordNotFoundError: If no row has this id
            DatabaseError: If the query fails
        """
        try:
            record = SupabaseClient.fetch_row(cls.table, record_id)
        except SupabaseClientError as e:
            logger.error(f"Failed to fetch {cls.table} {record_id}: {e}")
            raise DatabaseError(f"fetch {cls.resource.lower()}", e.message)

        if not record:
            raise RecordNotFoundError(cls.resource, record_id)
        return record

    @classmethod
    def create_record(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it as stored.

        Raises:
            DuplicateRecordError: If unique_field is already taken
            DatabaseError: If the insert fails
        """
        data = cls.prepare_create(dict(data))

        try:
            record = SupabaseClient.insert_row(cls.table, data)
        except SupabaseClientError as e:
            if e.code == "DUPLICATE_KEY":
                raise DuplicateRecordError(
                    cls.resource, cls.unique_field, str(data.get(cls.unique_field, ""))
                )
            logger.error(f"Failed to create {cls.table} record: {e}")
            raise DatabaseError(f"create {cls.resource.lower()}", e.message)

        logger.info(f"Created {cls.table} record: {record.get('id')}")
        return record

    @classmethod
    def update_record(cls, record_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        """
        Apply a partial update.

        Args:
            record_id: Row id
            data: Only the fields to change

        Raises:
            NoFieldsToUpdateError: If data is empty
            RecordNotFoundError: If no row has this id
            DatabaseError: If the update fails
        """
        if not data:
            raise NoFieldsToUpdateError(cls.resource)

        try:
            record = SupabaseClient.update_row(cls.table, record_id, data)
        except SupabaseClientError as e:
            logger.error(f"Failed to update {cls.table} {record_id}: {e}")
            raise DatabaseError(f"update {cls.resource.lower()}", e.message)

        if not record:
            raise RecordNotFoundError(cls.resource, record_id)

        logger.info(f"Updated {cls.table} record: {record_id}")
        return record

    @classmethod
    def delete_record(cls, record_id: Any) -> None:
        """
        Delete a row by id.

        Raises:
            RecordNotFoundError: If no row has this id
            DatabaseError: If the delete fails
        """
        try:
            deleted = SupabaseClient.delete_row(cls.table, record_id)
        except SupabaseClientError as e:
            logger.error(f"Failed to delete {cls.table} {record_id}: {e}")
            raise DatabaseError(f"delete {cls.resource.lower()}", e.message)

        if not deleted:
            raise RecordNotFoundError(cls.resource, record_id)

        logger.info(f"Deleted {cls.table} record: {record_id}")
