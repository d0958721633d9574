"""Exceptions raised by the classification engine.

All engine errors inherit from TabsenseMLError so the host process can
handle them in one place. Per-tab classification failures are recovered
inside the orchestrator; model load failures and cancellations reach the
caller.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients."""

    MODEL_LOAD_FAILED = "MODEL_LOAD_FAILED"
    CLASSIFICATION_FAILED = "CLASSIFICATION_FAILED"
    RUN_CANCELLED = "RUN_CANCELLED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TabsenseMLError(Exception):  # NOQA: N818
    """Base exception for all engine errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged, not shown to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ModelLoadError(TabsenseMLError):
    """Raised when the zero-shot classifier could not be initialized."""

    def __init__(self, model_name: str, reason: str) -> None:
        super().__init__(
            message=f"Failed to load classifier model {model_name!r}: {reason}",
            code=ErrorCode.MODEL_LOAD_FAILED,
            details={"model_name": model_name, "reason": reason},
        )


class ClassificationError(TabsenseMLError):
    """Raised when one or more dimension calls for a tab failed."""

    def __init__(self, failures: dict[str, str], tab_id: str | None = None) -> None:
        dims = ", ".join(sorted(failures))
        super().__init__(
            message=f"Classification failed for dimension(s): {dims}",
            code=ErrorCode.CLASSIFICATION_FAILED,
            details={"tab_id": tab_id, "failures": failures},
        )
        self.failures = failures


class RunCancelledError(TabsenseMLError):
    """Raised at a batch boundary when a classification run was cancelled."""

    def __init__(self, phase: str, processed: int, total: int) -> None:
        super().__init__(
            message=f"Classification run cancelled during {phase} ({processed}/{total})",
            code=ErrorCode.RUN_CANCELLED,
            details={"phase": phase, "processed": processed, "total": total},
        )
