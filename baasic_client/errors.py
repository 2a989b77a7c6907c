"""
Baasic Client Error Classes

Errors raised by the client facade itself. Transport and JSON parse errors
from the default HTTP client are never wrapped and surface unchanged.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .types import HttpResponse


class BaasicError(Exception):
    """Base error class for the Baasic client."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 0,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "name": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationError(BaasicError):
    """Configuration error (missing API key, missing SDK factory)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, 0, details)


class HttpResponseError(BaasicError):
    """Non-success HTTP status returned through the pooled transport."""

    def __init__(self, response: "HttpResponse"):
        data = response.data if isinstance(response.data, dict) else {}
        message = (
            data.get("message")
            or data.get("error")
            or f"HTTP {response.status_code} {response.status_text}".strip()
        )
        super().__init__(
            "HTTP_ERROR",
            str(message),
            response.status_code,
            {"data": response.data} if response.data is not None else None,
        )
        self.response = response


def is_baasic_error(error: Any) -> bool:
    """Check if error is a BaasicError."""
    return isinstance(error, BaasicError)
