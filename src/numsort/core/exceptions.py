"""Custom exception hierarchy for numsort.

Every error raised by the parser, the writer dispatcher or the pipeline
derives from NumsortError, so callers can catch one type and still get a
message that names the offending token, format or path.
"""

from typing import Any


class NumsortError(Exception):
    """Base exception for all numsort errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Input Errors
# =============================================================================


class ParseError(NumsortError):
    """Raised when a token of the number list is not a base-10 integer."""

    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        # Truncate for display; the full token stays on the exception
        shown = token[:40] + "..." if len(token) > 40 else token
        message = f"Invalid integer {shown!r}"
        super().__init__(message, {"position": position})


class UnsupportedFormatError(NumsortError):
    """Raised when the format token is not one of the supported formats."""

    def __init__(self, token: str, supported: list[str] | None = None):
        self.token = token
        self.supported = supported or []
        message = f"Unsupported file format {token!r}"
        details = {}
        if self.supported:
            details["supported"] = "/".join(self.supported)
        super().__init__(message, details)


# =============================================================================
# Output Errors
# =============================================================================


class OutputWriteError(NumsortError):
    """Raised when the output file cannot be written."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        details = {"path": path}
        if cause:
            details["cause"] = str(cause)
        super().__init__("Could not write output file", details)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NumsortError):
    """Raised when configuration is invalid."""

    def __init__(self, setting: str, message: str, value: Any = None):
        self.setting = setting
        self.value = value
        details = {"setting": setting}
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
