"""
pgsimple/db/database.py
-----------------------
Facade that renders a Query, runs it and shapes the result.

Every call performs exactly one round trip. Driver errors propagate
unchanged; zero rows where one was required raises UnexpectedResultType.
"""

from typing import Any, Optional, Sequence, TypeVar

from pgsimple.db.executor import execute
from pgsimple.errors import UnexpectedResultType
from pgsimple.models.schema import Schema
from pgsimple.query.builder import Query, insert_sql

T = TypeVar("T")


class Database:
    """
    Runs queries against a caller-owned psycopg2 connection.

    The connection is borrowed: it is never committed, rolled back or
    closed here. Transaction control belongs to whoever opened it.
    """

    def __init__(self, connection):
        self.connection = connection

    def _run(self, sql: str, bindings: Sequence[Any], schema: Schema[T]) -> list[T]:
        return execute(sql, self.connection, bindings, schema.decoder, schema.table)

    @staticmethod
    def _first(rows: list[T], statement: str) -> T:
        if not rows:
            raise UnexpectedResultType(f"one row returned from {statement}", "no rows")
        return rows[0]

    # ── READ ──────────────────────────────────────────────

    def all(self, query: Query[T]) -> list[T]:
        """Return every matching row, decoded, in result order."""
        return self._run(query.build(), query.bindings, query.from_schema)

    def one(self, query: Query[T]) -> Optional[T]:
        """
        Return the first matching row.

        Returns:
            The decoded row, or None when nothing matched. Execution
            failures raise instead of returning None.
        """
        rows = self.all(query)
        return rows[0] if rows else None

    # ── WRITE ─────────────────────────────────────────────

    def insert(self, schema: Schema[T], values: Sequence[Any]) -> T:
        """
        Insert one row and return it as stored.

        Args:
            schema: Target table.
            values: One value per non-primary-key field, in field order.
        """
        rows = self._run(insert_sql(schema), list(values), schema)
        return self._first(rows, "INSERT")

    def update(self, query: Query[T], fields: Sequence[tuple[str, Any]]) -> T:
        """
        Update matching rows and return the first one returned.

        Args:
            query: Supplies the table and where clause.
            fields: ``(column, value)`` pairs to SET, in order.
        """
        bindings = list(query.bindings) + [value for _, value in fields]
        rows = self._run(query.update_sql(fields), bindings, query.from_schema)
        return self._first(rows, "UPDATE")

    def delete(self, query: Query[T]) -> T:
        """Delete matching rows and return the first one returned."""
        rows = self._run(query.delete_sql(), query.bindings, query.from_schema)
        return self._first(rows, "DELETE")
