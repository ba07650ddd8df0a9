"""
repositories/ - Data Access Layer
==================================
Each repository wraps the Database facade for one entity and owns the
commit/rollback around its writes.
"""
