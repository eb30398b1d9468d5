"""
Custom exception classes for the application.

The query layer itself raises none of these: a missing row is None, and
database errors propagate as SQLAlchemy exceptions. These are raised by
the API layer and translated to HTTP responses by utils.error_handlers.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when request parameters fail validation"""

    def __init__(self, message: str, errors: list[str] | None = None):
        details = {"errors": errors} if errors else {}
        super().__init__(message, details)

    @property
    def errors(self) -> list[str]:
        return self.details.get("errors", [])


class NotFoundError(ApplicationError):
    """Raised when a requested entity does not exist"""

    def __init__(self, entity: str, entity_id: object, message: str | None = None):
        details = {"entity": entity, "id": entity_id}
        msg = message or f"{entity} '{entity_id}' not found"
        super().__init__(msg, details)


class BasketError(ApplicationError):
    """Raised when the basket store refuses an operation"""

    def __init__(self, basket_id: str, message: str):
        details = {"basket_id": basket_id}
        super().__init__(message, details)
