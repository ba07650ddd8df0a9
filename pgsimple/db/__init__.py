"""
db/ - Database Layer
====================
Runs rendered SQL through psycopg2 and decodes the returned rows.
Connections are always supplied by the caller; nothing here pools,
commits on behalf of, or closes them, except the helpers in
``connection.py`` and ``init_db.py`` which say so explicitly.
"""
