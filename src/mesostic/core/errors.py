"""
Error taxonomy for mesostic composition.

Every failure the engine can report is an *input or feasibility* problem:
the caller handed over text that cannot carry the requested spine.  None of
them are transient, so none are retryable.  Errors are carried inside
:class:`~mesostic.core.result.Err` values rather than raised, and the
transport layer maps :attr:`MesosticError.code` to a response.

Manifesto:
    - **Typed failures:** callers match on the class, not on message text
    - **Stable codes:** ``code`` is the machine-readable contract
    - **Serialisable:** ``to_dict()`` feeds structured logs and HTTP bodies

Tags:
    mesostic, errors, error-hierarchy, result-pattern

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Coarse classification used for routing and status mapping.

    Attributes:
        VALIDATION: The input itself is unusable (empty source, empty spine).
        FEASIBILITY: The input is well-formed but cannot carry the spine.
        RESOURCE: The request exceeds a size or time limit of the service.
        INTERNAL: Bugs, unexpected state.
    """

    VALIDATION = "VALIDATION"
    FEASIBILITY = "FEASIBILITY"
    RESOURCE = "RESOURCE"
    INTERNAL = "INTERNAL"


class MesosticError(Exception):
    """Base exception for all mesostic errors.

    All instances carry:
    - **code:** stable machine-readable identifier (``EMPTY_SOURCE`` ...)
    - **category:** :class:`ErrorCategory` for classification
    - **retryable:** always ``False`` for engine errors
    - **context:** free-form structured metadata

    Subclasses set ``default_code`` and ``default_category``.

    Examples:
        >>> err = MesosticError("boom")
        >>> err.code
        'INTERNAL'
        >>> err.to_dict()["category"]
        'INTERNAL'
    """

    default_code: str = "INTERNAL"
    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.category = category or self.default_category
        self.retryable = False
        self.context = dict(context or {})

    def with_context(self, **kwargs: Any) -> MesosticError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        if self.context:
            result["context"] = dict(self.context)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MesosticError):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, code={self.code})"


# =============================================================================
# INPUT ERRORS
# =============================================================================


class EmptySourceError(MesosticError):
    """Source text has no non-empty line."""

    default_code = "EMPTY_SOURCE"
    default_category = ErrorCategory.VALIDATION

    def __init__(self, message: str = "Source text has no content"):
        super().__init__(message)


class EmptySpineError(MesosticError):
    """Spine has no alphabetic characters."""

    default_code = "EMPTY_SPINE"
    default_category = ErrorCategory.VALIDATION

    def __init__(self, message: str = "Spine has no alphabetic characters"):
        super().__init__(message)


# =============================================================================
# FEASIBILITY ERRORS
# =============================================================================


class SpineExhaustsSourceError(MesosticError):
    """No remaining source line contains the needed spine letter.

    ``position`` is the index of the letter among the spine's alphabetic
    characters; ``offset`` is its index in the raw spine string.
    """

    default_code = "SPINE_EXHAUSTS_SOURCE"
    default_category = ErrorCategory.FEASIBILITY

    def __init__(self, position: int, letter: str, offset: int | None = None):
        self.position = position
        self.letter = letter
        self.offset = position if offset is None else offset
        super().__init__(
            f"No remaining source line contains {letter!r} (spine position {position})",
            context={"position": position, "letter": letter, "offset": self.offset},
        )


# =============================================================================
# RESOURCE ERRORS (raised by the request handler, never by the engine)
# =============================================================================


class SourceTooLargeError(MesosticError):
    """Submitted source text is longer than the configured limit."""

    default_code = "SOURCE_TOO_LARGE"
    default_category = ErrorCategory.RESOURCE

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Source text has {size} characters; the limit is {limit}",
            context={"size": size, "limit": limit},
        )


class CompositionTimeoutError(MesosticError):
    """A composition did not finish within the configured time."""

    default_code = "COMPOSE_TIMEOUT"
    default_category = ErrorCategory.RESOURCE

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Composition did not finish within {timeout_seconds}s",
            context={"timeout_seconds": timeout_seconds},
        )


__all__ = [
    "ErrorCategory",
    "MesosticError",
    "EmptySourceError",
    "EmptySpineError",
    "SpineExhaustsSourceError",
    "SourceTooLargeError",
    "CompositionTimeoutError",
]
