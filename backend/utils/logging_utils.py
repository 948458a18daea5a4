"""
Structured logging helpers.

Request-scoped fields (request ID, HTTP method) live in a ContextVar and are
attached to every record emitted through StructuredLogger. The
`log_operation` decorator wraps use case entry points so each call logs its
start, completion or failure together with the category it concerns.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


_logging_context: ContextVar[Dict[str, Any]] = ContextVar('catalog_logging_context', default={})

# Argument names whose values are copied into the log context by log_operation
_CONTEXT_KEYS = ("category_id", "id", "request_id")


class StructuredLogger:
    """
    stdlib logger that merges the current request context into `extra`.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Category created", extra={"category_id": output.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _merge(self, extra: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        merged = get_logging_context()
        if extra:
            merged.update(extra)
        return merged

    def _log(self, level: int, message: str, extra: Optional[Dict[str, Any]], exc_info: bool = False):
        self.logger.log(level, message, extra=self._merge(extra), exc_info=exc_info)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self._log(logging.ERROR, message, extra, exc_info)


def set_logging_context(**fields):
    """
    Add fields to the context of the current request.

    Fields accumulate until `clear_logging_context` is called; the HTTP
    middleware clears them once the response has been produced.

    Example:
        set_logging_context(request_id="abc-123", method="GET")
    """
    updated = get_logging_context()
    updated.update(fields)
    _logging_context.set(updated)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return dict(_logging_context.get())


def clear_logging_context():
    """Drop every request-scoped field."""
    _logging_context.set({})


def _operation_context(operation_name: str, func, args, kwargs) -> Dict[str, Any]:
    context = {"operation": operation_name}
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs).arguments
    except TypeError:
        bound = kwargs
    for key in _CONTEXT_KEYS:
        value = bound.get(key)
        if isinstance(value, (str, int)):
            context[key] = value
    command = bound.get("command")
    if command is not None and isinstance(getattr(command, "id", None), str):
        context["category_id"] = command.id
    return context


def _failure(context: Dict[str, Any], exc: Exception) -> Dict[str, Any]:
    return {**context, "error": str(exc), "error_type": type(exc).__name__}


def log_operation(operation_name: str):
    """
    Log a use case call: debug on entry and exit, warning on failure.

    Exceptions are re-raised unchanged; Left results are ordinary return
    values and log as completed.

    Args:
        operation_name: Name recorded in the `operation` field

    Example:
        @log_operation("get_category")
        def execute(self, id: str) -> CategoryOutput:
            ...
    """
    def decorator(func):
        logger = StructuredLogger(func.__module__)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            context = _operation_context(operation_name, func, args, kwargs)
            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.warning(f"Failed {operation_name}: {e}", extra=_failure(context, e))
                raise
            logger.debug(f"Completed {operation_name}", extra=context)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            context = _operation_context(operation_name, func, args, kwargs)
            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.warning(f"Failed {operation_name}: {e}", extra=_failure(context, e))
                raise
            logger.debug(f"Completed {operation_name}", extra=context)
            return result

        return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper

    return decorator
