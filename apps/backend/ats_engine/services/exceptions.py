from typing import Optional


class InputError(ValueError):
    """Raised when the resume text to analyse is empty or whitespace-only."""

    def __init__(self, message: str = "Missing resume content"):
        super().__init__(message)


class PersistenceError(Exception):
    """
    Raised when the history store cannot read, write or delete a record.

    Attributes:
        operation: the store operation that failed ("append", "delete", ...)
        original_error: message of the underlying exception
    """

    def __init__(
        self,
        operation: Optional[str] = None,
        original_error: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.operation = operation
        self.original_error = original_error
        if message is None:
            if operation:
                message = f"History store '{operation}' failed"
            else:
                message = "History store operation failed"
            if original_error:
                message = f"{message}: {original_error}"
        super().__init__(message)


class NotFoundError(Exception):
    """Raised when an analysis record does not exist or belongs to another user."""

    def __init__(self, record_id: str, message: Optional[str] = None):
        self.record_id = record_id
        super().__init__(message or f"Analysis record '{record_id}' not found")
