# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides table-agnostic helpers used by every content service:
# - Fetching rows (lists, single rows by id)
# - Inserting, updating, upserting and deleting rows
# - Creating short-lived anon-key clients for password sign-in
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   games = SupabaseClient.fetch_rows("games", order_by="id")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code for "no rows" when a single row was requested
NO_ROWS_CODE = "PGRST116"

# Postgres unique_violation
UNIQUE_VIOLATION_CODE = "23505"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a code and an actionable suggestion alongside the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one service-role client instance is shared
    across the application. All methods are class methods for easy access
    without instantiation.

    Example:
        # Fetch active team members in display order
        members = SupabaseClient.fetch_rows(
            "team_members",
            filters={"is_active": True},
            order_by="display_order",
        )

        # Fetch one game, None if it doesn't exist
        game = SupabaseClient.fetch_row("games", 7)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Every mutating endpoint is admin-gated before reaching this client.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def create_auth_client(cls) -> Client:
        """
        Create a fresh anon-key client for a single sign-in/sign-out.

        Password sign-in stores the session on the client object, so it
        must never happen on the shared service-role instance.
        """
        try:
            return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase auth client: {e}",
                code="AUTH_CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            )

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        order_by: str | None = "id",
        desc: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch rows from a table.

        Args:
            table: Table name
            columns: PostgREST column selection
            filters: Equality filters, column -> value
            order_by: Column to sort on (None for database order)
            desc: Sort descending
            limit: Maximum number of rows

        Returns:
            List of row dicts (empty if none match)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            query = client.table(table).select(columns)
            for column, value in (filters or {}).items():
                query = query.eq(column, value)
            if order_by:
                query = query.order(order_by, desc=desc)
            if limit:
                query = query.limit(limit)

            response = query.execute()
            rows = response.data or []

            logger.debug(f"Fetched {len(rows)} rows from {table}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch rows from {table}: {e}",
                code="FETCH_ROWS_FAILED",
                suggestion=f"Check that the {table} table exists and is accessible",
                details={"table": table, "filters": filters or {}}
            )

    @classmethod
    def fetch_row(
        cls,
        table: str,
        row_id: Any,
        id_column: str = "id",
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row by its id.

        Returns:
            Row dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .select(columns)
                .eq(id_column, row_id)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch row from {table}: {e}",
                code="FETCH_ROW_FAILED",
                details={"table": table, id_column: str(row_id)}
            )

    @classmethod
    def count_rows(cls, table: str, filters: dict[str, Any] | None = None) -> int:
        """Count rows matching equality filters."""
        client = cls.get_client()

        try:
            query = client.table(table).select("id", count="exact")
            for column, value in (filters or {}).items():
                query = query.eq(column, value)
            response = query.execute()
            return response.count or 0

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to count rows in {table}: {e}",
                code="COUNT_ROWS_FAILED",
                details={"table": table, "filters": filters or {}}
            )

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with generated columns filled in.

        Raises:
            SupabaseClientError: If insert fails
        """
        client = cls.get_client()

        try:
            response = client.table(table).insert(data).execute()

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="DUPLICATE_KEY" if UNIQUE_VIOLATION_CODE in str(e) else "INSERT_FAILED",
                details={"table": table}
            )

    @classmethod
    def update_row(
        cls,
        table: str,
        row_id: Any,
        data: dict[str, Any],
        id_column: str = "id",
    ) -> dict[str, Any] | None:
        """
        Update a row by id.

        Returns:
            Updated row dict, or None if no row matched

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .update(data)
                .eq(id_column, row_id)
                .execute()
            )

            if response.data:
                return response.data[0]
            return None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code="UPDATE_FAILED",
                details={"table": table, id_column: str(row_id)}
            )

    @classmethod
    def upsert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert or update a row keyed by its primary key."""
        client = cls.get_client()

        try:
            response = client.table(table).upsert(data).execute()

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Upsert returned no data",
                code="UPSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to upsert into {table}: {e}",
                code="UPSERT_FAILED",
                details={"table": table}
            )

    @classmethod
    def delete_row(cls, table: str, row_id: Any, id_column: str = "id") -> bool:
        """
        Delete a row by id.

        Returns:
            True if a row was deleted, False if none matched

        Raises:
            SupabaseClientError: If delete fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .delete()
                .eq(id_column, row_id)
                .execute()
            )
            return bool(response.data)

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                details={"table": table, id_column: str(row_id)}
            )

    @classmethod
    def delete_rows_in(cls, table: str, column: str, values: list[Any]) -> int:
        """
        Delete every row whose column is in values.

        Returns:
            Number of deleted rows
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .delete()
                .in_(column, values)
                .execute()
            )
            return len(response.data or [])

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                details={"table": table, "column": column, "count": len(values)}
            )
