# app/core/exceptions.py
"""Application-level exceptions used across services.

Each exception carries an explicit ``code`` and ``status_code`` and is
serializable via ``to_dict`` so routers can return it as-is and logs keep
the same structure.
"""
from __future__ import annotations

from typing import Optional, Any, Dict
from datetime import datetime, timezone


class AppError(Exception):
    """Base application exception with structured metadata.

    Attributes
    ----------
    message
        Human readable message.
    code
        Machine friendly error code (snake_case).
    status_code
        Suggested HTTP status code for API responses.
    details
        Arbitrary extra data useful for debugging or UX.
    timestamp
        UTC ISO timestamp when the exception was created.
    cause
        Optional underlying exception instance.
    context
        Optional lightweight context dict (ids, counts).
    """

    code: str = "app_error"
    status_code: int = 500

    def __init__(
        self,
        message: str = "An application error occurred",
        *,
        details: Optional[Any] = None,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.cause = cause
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}({self.code}): {self.message}"
        if self.context:
            base += f" | context={self.context}"
        if self.details is not None:
            base += f" | details={self.details}"
        if self.cause is not None:
            base += f" | cause={repr(self.cause)}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Return a serializable representation suitable for API responses.

        Note: ``cause`` is deliberately left out; it may hold driver messages.
        """
        return {
            "error": {
                "type": self.__class__.__name__,
                "code": self.code,
                "message": self.message,
                "status_code": self.status_code,
                "details": self.details,
                "context": self.context,
                "timestamp": self.timestamp,
            }
        }

    def with_context(self, **ctx: Any) -> "AppError":
        """Return self after extending the context dict. Useful for chaining.

        Example:
        raise err.with_context(session_id=session_id)
        """
        self.context.update({k: v for k, v in ctx.items() if v is not None})
        return self

    @classmethod
    def from_exception(
        cls, exc: BaseException, message: Optional[str] = None
    ) -> "AppError":
        """Wrap a generic exception into an AppError preserving the cause."""
        return cls(message or str(exc), cause=exc)


class NotFoundError(AppError):
    """Raised when a requested record (session, exam) does not exist."""

    code = "not_found"
    status_code = 404

    def __init__(
        self,
        entity: str,
        entity_id: Optional[Any] = None,
        message: Optional[str] = None,
        *,
        details: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        msg = message or (
            f"{entity} {entity_id} not found" if entity_id is not None else f"{entity} not found"
        )
        super().__init__(msg, details=details, context=context)
        self.context.setdefault("entity", entity)
        if entity_id is not None:
            self.context.setdefault("entity_id", str(entity_id))


class DataRetrievalError(AppError):
    """Raised when rows cannot be read from the data store.

    Wraps driver/ORM errors so callers see a stable code instead of
    SQLAlchemy internals.
    """

    code = "data_retrieval_error"
    status_code = 503

    def __init__(
        self,
        message: str = "Failed to read from the data store",
        *,
        table: Optional[str] = None,
        details: Optional[Any] = None,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details, cause=cause, context=context)
        if table:
            self.context.setdefault("table", table)


__all__ = [
    "AppError",
    "NotFoundError",
    "DataRetrievalError",
]
