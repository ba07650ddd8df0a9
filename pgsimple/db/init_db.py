"""
pgsimple/db/init_db.py
----------------------
Creates tables from Schema descriptions if they do not already exist.
Run this module directly to create the example ``notes`` table:
    python -m pgsimple.db.init_db
"""

from typing import Iterable

from pgsimple.models.schema import FieldType, Schema
from pgsimple.utils.logger import get_logger

logger = get_logger(__name__)

_COLUMN_TYPES = {
    FieldType.INTEGER: "INTEGER",
    FieldType.STRING: "TEXT",
}

_PRIMARY_KEY_TYPES = {
    FieldType.INTEGER: "SERIAL PRIMARY KEY",
    FieldType.STRING: "TEXT PRIMARY KEY",
}


def create_table_sql(schema: Schema) -> str:
    """
    Render a ``CREATE TABLE IF NOT EXISTS`` statement for `schema`.

    Columns appear in field order; the primary key column gets
    ``SERIAL PRIMARY KEY`` (integer) or ``TEXT PRIMARY KEY`` (string).
    """
    columns = []
    for f in schema.fields:
        types = _PRIMARY_KEY_TYPES if f.name == schema.primary_key else _COLUMN_TYPES
        columns.append(f"{f.name} {types[f.type]}")
    return f"CREATE TABLE IF NOT EXISTS {schema.table} ({', '.join(columns)})"


def create_tables(conn, schemas: Iterable[Schema]) -> None:
    """
    Execute the DDL for every schema and commit.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with conn.cursor() as cur:
            for schema in schemas:
                cur.execute(create_table_sql(schema))
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from pgsimple.db.connection import connection
    from pgsimple.models.note import NOTES

    with connection() as conn:
        create_tables(conn, [NOTES])
    print("Database schema created successfully.")
