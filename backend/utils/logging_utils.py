"""
Structured logging for the catalog and basket layers.

Request middleware stores request-scoped fields (request id, path) in a
ContextVar; StructuredLogger merges them into every record's ``extra`` so
they reach the formatter alongside per-call fields such as ``basket_id``.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


class StructuredLogger:
    """
    Logger that attaches the current request context to each record.

    Usage:
        logger = StructuredLogger(__name__)
        logger.warning("Basket write refused", extra={"basket_id": basket.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _with_context(self, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        merged = dict(_logging_context.get())
        if extra:
            merged.update(extra)
        return merged

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._with_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._with_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._with_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._with_context(extra), exc_info=exc_info)


def set_logging_context(**fields):
    """
    Add fields to the logging context of the current request.

    Example:
        set_logging_context(request_id="abc-123", path="/api/products")
    """
    _logging_context.set({**_logging_context.get(), **fields})


def clear_logging_context():
    """Reset the logging context at the end of a request."""
    _logging_context.set({})


def _operation_context(operation_name: str, signature: inspect.Signature, args, kwargs) -> Dict[str, Any]:
    """
    Build the log context for one call of a decorated operation.

    The basket id is read from a ``basket_id`` argument, or from the ``id``
    of a ``basket`` argument, whether passed positionally or by keyword.
    """
    context: Dict[str, Any] = {"operation": operation_name}
    arguments = signature.bind_partial(*args, **kwargs).arguments

    if "basket_id" in arguments:
        context["basket_id"] = arguments["basket_id"]
    elif getattr(arguments.get("basket"), "id", None) is not None:
        context["basket_id"] = arguments["basket"].id

    return context


def log_operation(operation_name: str):
    """
    Decorator to log start, completion and failure of an async operation.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("get_basket")
        async def get_basket(self, basket_id: str):
            ...
    """
    def decorator(func):
        signature = inspect.signature(func)
        logger = StructuredLogger(func.__module__)

        @wraps(func)
        async def wrapper(*args, **kwargs):
            context = _operation_context(operation_name, signature, args, kwargs)
            logger.info(f"Starting {operation_name}", extra=context)

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise

            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
