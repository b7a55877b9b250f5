"""
db/ - Storage Plumbing
======================
Opens and closes the PostgreSQL connection, creates the `department`
and `seller` tables, and defines DataAccessError, the one error type
the repositories raise.
"""
