# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and exposes small table-generic helpers used by the service layer:
# - fetch_one / fetch_rows for reads (equality and IN filters, ordering)
# - insert_row / insert_rows / update_rows / delete_rows for writes
# - adjust_counter for atomic `counter = counter + delta` updates
#
# Unique-constraint violations (Postgres 23505) are raised as
# UniqueViolationError so services can turn them into 409 Conflict.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   project = SupabaseClient.fetch_one("projects", {"id": project_id})
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages: what failed and how to fix it.
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


class UniqueViolationError(SupabaseClientError):
    """A write hit a unique constraint (duplicate row)."""

    def __init__(self, table: str, error: str):
        super().__init__(
            message=f"Duplicate row in {table}: {error}",
            code="UNIQUE_VIOLATION",
            details={"table": table},
        )
        self.table = table


Filters = dict[str, Any]


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # Last four projects by upvotes
        top = SupabaseClient.fetch_rows(
            "projects", order_by="upvotes", desc=True, limit=4
        )

        # Atomically bump a counter
        project = SupabaseClient.adjust_counter("projects", "upvotes", project_id, 1)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

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
    def _normalize(cls, value: Any) -> Any:
        """Convert UUIDs to strings for queries."""
        return str(value) if isinstance(value, UUID) else value

    @classmethod
    def _apply_filters(
        cls,
        query: Any,
        filters: Filters | None,
        in_filters: dict[str, list[Any]] | None = None,
    ) -> Any:
        for column, value in (filters or {}).items():
            if value is None:
                query = query.is_(column, "null")
            else:
                query = query.eq(column, cls._normalize(value))
        for column, values in (in_filters or {}).items():
            query = query.in_(column, [cls._normalize(v) for v in values])
        return query

    @classmethod
    def _wrap(cls, table: str, action: str, e: Exception, details: dict[str, Any]) -> SupabaseClientError:
        """Translate a PostgREST failure into our error types."""
        if isinstance(e, APIError) and e.code == UNIQUE_VIOLATION:
            return UniqueViolationError(table, e.message or str(e))
        return SupabaseClientError(
            message=f"Failed to {action} {table}: {e}",
            code=f"{action.upper()}_FAILED",
            details={"table": table, **details},
        )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        filters: Filters | None = None,
        *,
        in_filters: dict[str, list[Any]] | None = None,
        columns: str = "*",
        order_by: str | None = None,
        desc: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch rows matching equality / IN filters.

        Args:
            table: Table name
            filters: column -> value; None matches SQL NULL
            in_filters: column -> list of accepted values
            columns: PostgREST select string
            order_by: Optional column to sort on
            desc: Sort descending
            limit: Optional max rows

        Returns:
            List of row dicts (empty when nothing matches)

        Raises:
            SupabaseClientError: If query fails
        """
        if in_filters and any(not values for values in in_filters.values()):
            return []

        client = cls.get_client()

        try:
            query = client.table(table).select(columns)
            query = cls._apply_filters(query, filters, in_filters)
            if order_by:
                query = query.order(order_by, desc=desc)
            if limit is not None:
                query = query.limit(limit)

            response = query.execute()
            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} rows from {table}")
            return rows

        except Exception as e:
            raise cls._wrap(table, "fetch", e, {"filters": str(filters)})

    @classmethod
    def fetch_one(
        cls,
        table: str,
        filters: Filters,
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """Fetch the first row matching filters, or None if there is none."""
        rows = cls.fetch_rows(table, filters, columns=columns, limit=1)
        return rows[0] if rows else None

    @classmethod
    def exists(cls, table: str, filters: Filters) -> bool:
        """Check whether any row matches filters."""
        return cls.fetch_one(table, filters, columns="id") is not None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert_rows(cls, table: str, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """
        Insert rows and return them as stored (with generated id/created_at).

        Raises:
            UniqueViolationError: If a unique constraint is hit
            SupabaseClientError: If insert fails otherwise
        """
        if not rows:
            return []

        client = cls.get_client()
        payload = [{k: cls._normalize(v) for k, v in row.items()} for row in rows]

        try:
            response = client.table(table).insert(payload).execute()
            return response.data or []
        except Exception as e:
            raise cls._wrap(table, "insert", e, {"count": len(rows)})

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a single row and return it."""
        inserted = cls.insert_rows(table, [data])
        if not inserted:
            raise SupabaseClientError(
                message=f"Insert into {table} returned no data",
                code="INSERT_NO_DATA",
                details={"table": table},
            )
        return inserted[0]

    @classmethod
    def update_rows(cls, table: str, data: dict[str, Any], filters: Filters) -> list[dict[str, Any]]:
        """Update matching rows and return them after the update."""
        client = cls.get_client()
        payload = {k: cls._normalize(v) for k, v in data.items()}

        try:
            query = cls._apply_filters(client.table(table).update(payload), filters)
            response = query.execute()
            return response.data or []
        except Exception as e:
            raise cls._wrap(table, "update", e, {"filters": str(filters)})

    @classmethod
    def delete_rows(
        cls,
        table: str,
        filters: Filters,
        *,
        in_filters: dict[str, list[Any]] | None = None,
    ) -> list[dict[str, Any]]:
        """Delete matching rows and return what was deleted."""
        if not filters and not in_filters:
            # PostgREST refuses unfiltered deletes; so do we
            raise SupabaseClientError(
                message=f"Refusing to delete every row of {table}",
                code="UNFILTERED_DELETE",
                details={"table": table},
            )
        if in_filters and any(not values for values in in_filters.values()):
            return []

        client = cls.get_client()

        try:
            query = cls._apply_filters(client.table(table).delete(), filters, in_filters)
            response = query.execute()
            return response.data or []
        except Exception as e:
            raise cls._wrap(table, "delete", e, {"filters": str(filters)})

    # -------------------------------------------------------------------------
    # Counters
    # -------------------------------------------------------------------------

    @classmethod
    def adjust_counter(
        cls,
        table: str,
        column: str,
        row_id: str | UUID,
        delta: int,
    ) -> dict[str, Any] | None:
        """
        Atomically run `UPDATE table SET column = column + delta WHERE id = row_id`.

        Backed by the `adjust_counter` SQL function so concurrent requests
        never lose updates.

        Returns:
            The updated row, or None if no row has that id

        Raises:
            SupabaseClientError: If the RPC fails
        """
        client = cls.get_client()
        params = {
            "target_table": table,
            "counter_column": column,
            "row_id": cls._normalize(row_id),
            "delta": delta,
        }

        try:
            response = client.rpc("adjust_counter", params).execute()
            row = response.data or None
            logger.debug(f"Adjusted {table}.{column} by {delta} for {params['row_id']}")
            return row
        except Exception as e:
            raise cls._wrap(table, "adjust", e, {"column": column, "row_id": params["row_id"]})
