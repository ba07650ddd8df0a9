"""
query/ - SQL Rendering
======================
Pure, side-effect free construction of SQL statement text.
Nothing in this package touches a database connection.
"""
