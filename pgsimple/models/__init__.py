"""
models/ - Table Descriptions
============================
Static descriptions of database tables and the domain objects decoded
from their rows.
"""
