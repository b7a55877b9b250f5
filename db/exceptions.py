"""
db/exceptions.py
----------------
The single error kind raised by the data-access layer.
"""


class DataAccessError(Exception):
    """
    Raised when the database rejects an operation or a write
    unexpectedly affects no rows.

    Attributes:
        message: Human-readable description, including the
            database's own error text when there is one.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
