"""
pgsimple/errors.py
------------------
Errors raised by this package itself.

Driver failures (``psycopg2.Error`` and its subclasses) are not wrapped:
they reach the caller exactly as psycopg2 raised them.
"""


class QueryError(Exception):
    """Base class for errors synthesized by pgsimple."""


class UnexpectedResultType(QueryError):
    """Raised when a statement returned a different result shape than expected."""

    def __init__(self, expected: str, got: str):
        super().__init__(f"Expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class DecodeError(QueryError):
    """Raised when a schema decoder cannot turn a row into a value."""

    def __init__(self, table: str, row: dict, reason: str):
        super().__init__(f"Could not decode row from '{table}': {reason}")
        self.table = table
        self.row = row
        self.reason = reason
