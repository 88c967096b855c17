"""
Error taxonomy for Param Permuter.

Configuration errors are raised before any URL is processed, processing
errors while generating, and I/O errors wrap the underlying OSError.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Searchable error codes."""

    # Config errors
    CONFIG_INVALID = "CONFIG_001"
    CONFIG_MISSING_REQUIRED = "CONFIG_002"
    CONFIG_FILE_NOT_FOUND = "CONFIG_003"
    CONFIG_OUTPUT_EXISTS = "CONFIG_004"

    # Processing errors
    URL_INVALID = "PROC_001"
    CHUNK_TOO_SMALL = "PROC_002"

    # I/O errors
    IO_READ_FAILED = "IO_001"
    IO_WRITE_FAILED = "IO_002"


class ParamPermuterError(Exception):
    """Base class for all Param Permuter errors."""

    def __init__(
            self,
            code: ErrorCode,
            message: str,
            details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ParamPermuterError):
    """Missing or invalid run configuration."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFIG_INVALID, **details):
        super().__init__(code, message, details)


class ProcessingError(ParamPermuterError):
    """Raised while generating URLs for a single input URL."""

    def __init__(self, code: ErrorCode, message: str, url: str, **details):
        super().__init__(code, message, {"url": url, **details})
        self.url = url


class InvalidURLError(ProcessingError):
    """The input string is not a syntactically valid URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(ErrorCode.URL_INVALID, f"Invalid URL {url!r}: {reason}", url, reason=reason)
        self.reason = reason


class ChunkTooSmallError(ProcessingError):
    """The chunk size leaves no room for new parameters on this URL."""

    def __init__(self, url: str, chunk: int, existing: int):
        super().__init__(
            ErrorCode.CHUNK_TOO_SMALL,
            f"Chunk size {chunk} must be greater than the {existing} existing parameters of {url!r}",
            url,
            chunk=chunk,
            existing=existing,
        )
        self.chunk = chunk
        self.existing = existing


class InputOutputError(ParamPermuterError):
    """Reading an input file or writing the output failed."""

    def __init__(self, code: ErrorCode, path: str, cause: Exception):
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(code, f"{path}: {reason}", {"path": path})
        self.path = path
