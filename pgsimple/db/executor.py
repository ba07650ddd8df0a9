"""
pgsimple/db/executor.py
-----------------------
The single point where SQL reaches the driver.

Rendered statements use 1-indexed ``$n`` placeholders. psycopg2 speaks
pyformat, so each ``$n`` is rewritten to ``%(pn)s`` and the bindings are
passed as a mapping. A placeholder may be referenced more than once.
"""

import re
from typing import Any, Callable, Sequence, TypeVar

import psycopg2
from psycopg2 import extras

from pgsimple.errors import DecodeError
from pgsimple.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_PLACEHOLDER = re.compile(r"\$(\d+)")


def to_pyformat(sql: str, bindings: Sequence[Any]) -> tuple[str, dict]:
    """
    Translate ``$n`` placeholders into psycopg2 named parameters.

    Args:
        sql: Statement using ``$1``, ``$2``, ... placeholders.
        bindings: Values in placeholder order.

    Returns:
        The rewritten statement and a ``{"p1": ..., "p2": ...}`` mapping.
    """
    escaped = sql.replace("%", "%%")
    rewritten = _PLACEHOLDER.sub(lambda m: f"%(p{m.group(1)})s", escaped)
    params = {f"p{i}": value for i, value in enumerate(bindings, start=1)}
    return rewritten, params


def _decode(decoder: Callable[[dict], T], row: dict, table: str) -> T:
    try:
        return decoder(row)
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(table, row, str(e)) from e


def execute(
    sql: str,
    connection,
    bindings: Sequence[Any],
    decoder: Callable[[dict], T],
    table: str = "?",
) -> list[T]:
    """
    Run one statement and decode every returned row.

    Args:
        sql: Statement with ``$n`` placeholders.
        connection: Caller-owned psycopg2 connection. Never committed here.
        bindings: Placeholder values in order.
        decoder: Maps a row dict to a value.
        table: Table name, used only in DecodeError messages.

    Returns:
        Decoded rows in result order; empty when the statement returned no
        result set.

    Raises:
        psycopg2.Error: Any driver failure, unchanged.
        DecodeError: If `decoder` rejects a row.
    """
    statement, params = to_pyformat(sql, bindings)
    logger.debug(f"Executing: {sql} ({len(bindings)} bindings)")
    try:
        with connection.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(statement, params)
            if cur.description is None:
                return []
            rows = cur.fetchall()
    except psycopg2.Error as e:
        logger.error(f"Query failed: {sql} | {e}")
        raise
    return [_decode(decoder, dict(row), table) for row in rows]
