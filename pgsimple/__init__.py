"""
pgsimple
========
A small convenience layer over psycopg2: renders SELECT/INSERT/UPDATE/DELETE
statements from a declarative table Schema and decodes returned rows into
typed values.

Not intended for use in any real world application.
"""

from pgsimple.db.database import Database
from pgsimple.errors import DecodeError, QueryError, UnexpectedResultType
from pgsimple.models.schema import Field, FieldType, Schema
from pgsimple.query.builder import Query

__all__ = [
    "Database",
    "DecodeError",
    "Field",
    "FieldType",
    "Query",
    "QueryError",
    "Schema",
    "UnexpectedResultType",
]
