"""
Error handling decorators for API endpoints.

Repositories let failures propagate untouched; this module is where they
become HTTP status codes. Bodies are shaped by the exception handlers in
main.py.
"""

from functools import wraps
from typing import Callable
import inspect
import logging

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from constants import HTTPStatus
from exceptions import ApplicationError, BasketError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, e: Exception) -> HTTPException:
    """Map an exception raised inside an endpoint to an HTTPException."""
    if isinstance(e, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {e.message}")
        # A list detail is rendered as a validation error body
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=e.errors or [e.message])
    if isinstance(e, NotFoundError):
        logger.info(f"{operation_name} - Not found: {e.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=e.message)
    if isinstance(e, BasketError):
        logger.warning(f"{operation_name} - Basket error: {e.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=e.message)
    if isinstance(e, SQLAlchemyError):
        logger.error(f"{operation_name} - Database error: {e}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            detail="Catalog store is unavailable"
        )
    logger.error(f"{operation_name} - Application error: {e}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed: {e}"
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Application exceptions and SQLAlchemy errors become HTTPExceptions.
    HTTPExceptions and anything unexpected pass through unchanged; the
    latter reach the catch-all handler in main.py.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get products")

    Example:
        @router.get("/products/{product_id}")
        @handle_api_errors("Get product")
        def get_product(...):
            ...
    """
    handled = (ApplicationError, SQLAlchemyError)

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except handled as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except handled as e:
                raise _to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
