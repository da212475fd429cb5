"""Error hierarchy for design_copier."""
from __future__ import annotations

from enum import StrEnum


class DesignCopierError(Exception):
    """Base error for all design_copier errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class CompilerError(DesignCopierError):
    """The Tailwind compiler could not be run or rejected the stylesheet."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.returncode = returncode
        self.stderr = stderr


class CaptureError(DesignCopierError):
    """A page could not be loaded or its styles could not be read."""


class InvalidArgumentError(DesignCopierError, ValueError):
    """A caller supplied an argument the operation cannot accept."""


class UnsupportedTargetError(InvalidArgumentError):
    """An emitter was asked for a format or framework it does not implement."""


class TransportError(DesignCopierError):
    """The HTTP transport could not be reached."""


# ---------------------------------------------------------------------------
# Tool errors
# ---------------------------------------------------------------------------


class ErrorCode(StrEnum):
    INVALID_PARAMS = "invalid_params"
    METHOD_NOT_FOUND = "method_not_found"
    INTERNAL_ERROR = "internal_error"


class ToolError(DesignCopierError):
    """A tool call failed; ``code`` says whether the caller or the tool is at fault."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.code = code
