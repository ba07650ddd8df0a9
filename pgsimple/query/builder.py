"""
pgsimple/query/builder.py
-------------------------
Accumulates select columns, where fragments and bound values against a
Schema and renders them as SQL text.

Where fragments are literal SQL (e.g. ``"id = $1"``). The builder does not
renumber placeholders in select/where: callers number them relative to the
bindings already on the query. Only ``update`` computes placeholder numbers
itself, continuing after the existing bindings.

Every method returns a new Query; a Query is never mutated in place.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Generic, Iterable, Sequence, TypeVar

from pgsimple.models.schema import Schema

T = TypeVar("T")

RETURNING = " RETURNING *"


@dataclass(frozen=True)
class Query(Generic[T]):
    """
    An immutable SELECT/UPDATE/DELETE under construction.

    Attributes:
        from_schema: Schema the query targets.
        select: Column names (or ``"*"``) in the order they will be rendered.
        where: Predicate fragments, joined with AND when rendered.
        bindings: Values for the ``$n`` placeholders, in placeholder order.
    """
    from_schema: Schema[T]
    select: tuple[str, ...] = field(default_factory=tuple)
    where: tuple[str, ...] = field(default_factory=tuple)
    bindings: tuple[Any, ...] = field(default_factory=tuple)

    @classmethod
    def from_(cls, schema: Schema[T]) -> "Query[T]":
        """Start an empty query scoped to `schema`."""
        return cls(from_schema=schema)

    # ── BUILDING ──────────────────────────────────────────

    def selecting(self, fields: Iterable[str]) -> "Query[T]":
        """Append `fields` to the select list. Duplicates are kept."""
        return replace(self, select=self.select + tuple(fields))

    def filtered(self, clauses: Iterable[tuple[str, Sequence[Any]]]) -> "Query[T]":
        """
        Append where fragments and their values.

        Args:
            clauses: ``(fragment, values)`` pairs. Each fragment is added to
                the where list and its values are flattened onto the bindings,
                both in call order.
        """
        where = list(self.where)
        bindings = list(self.bindings)
        for fragment, values in clauses:
            where.append(fragment)
            bindings.extend(values)
        return replace(self, where=tuple(where), bindings=tuple(bindings))

    # ── RENDERING ─────────────────────────────────────────

    def _where_clause(self) -> str:
        if not self.where:
            return ""
        return " WHERE " + " AND ".join(self.where)

    def build(self) -> str:
        """Render ``SELECT <cols> FROM <table> [WHERE ...]``."""
        # An empty select list renders "SELECT  FROM ..." unchanged.
        return (
            f"SELECT {', '.join(self.select)} FROM {self.from_schema.table}"
            + self._where_clause()
        )

    def update_sql(self, fields: Sequence[tuple[str, Any]]) -> str:
        """
        Render ``UPDATE <table> SET a = $k+1, ... [WHERE ...] RETURNING *``.

        SET placeholders continue after the query's own bindings, so the
        values from `fields` must be passed after ``self.bindings``.
        """
        offset = len(self.bindings)
        assignments = ", ".join(
            f"{name} = ${offset + i}" for i, (name, _) in enumerate(fields, start=1)
        )
        return (
            f"UPDATE {self.from_schema.table} SET {assignments}"
            + self._where_clause()
            + RETURNING
        )

    def delete_sql(self) -> str:
        """Render ``DELETE FROM <table> [WHERE ...] RETURNING *``."""
        return f"DELETE FROM {self.from_schema.table}" + self._where_clause() + RETURNING


def insert_sql(schema: Schema) -> str:
    """
    Render ``INSERT INTO <table>(<cols>) VALUES ($1, ...) RETURNING *``.

    The primary key column is left out. Values passed at execution time must
    follow the remaining fields' declaration order.
    """
    columns = [f.name for f in schema.insertable_fields]
    placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
    return f"INSERT INTO {schema.table}({', '.join(columns)}) VALUES ({placeholders})" + RETURNING


# ── Functional interface ──────────────────────────────────

def from_(schema: Schema[T]) -> Query[T]:
    return Query.from_(schema)


def select(query: Query[T], fields: Iterable[str]) -> Query[T]:
    return query.selecting(fields)


def where(query: Query[T], clauses: Iterable[tuple[str, Sequence[Any]]]) -> Query[T]:
    return query.filtered(clauses)


def build(query: Query) -> str:
    return query.build()


def insert(schema: Schema) -> str:
    return insert_sql(schema)


def update(query: Query, fields: Sequence[tuple[str, Any]]) -> str:
    return query.update_sql(fields)


def delete(query: Query) -> str:
    return query.delete_sql()
