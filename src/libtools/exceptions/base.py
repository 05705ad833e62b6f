"""
Base exception classes for libtools.

Client-facing errors carry an HTTP-style ``status`` and a short
machine-readable ``error_code`` that host code can return to callers as-is.
"""

from typing import Any


class ToolsError(Exception):
    """Base exception for all libtools errors."""


class ClientError(ToolsError):
    """Error meant to be reported back to the client."""

    def __init__(
        self,
        status: int,
        error_code: str,
        message: str | None = None,
    ):
        super().__init__(message or error_code)
        self.status = status
        self.error_code = error_code
        self.message = message

    def __str__(self) -> str:
        parts = [self.error_code, f"(status: {self.status})"]
        if self.message:
            parts.insert(0, f"{self.message}:")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary format for API responses."""
        return {"status": self.status, "errorCode": self.error_code}


class InputError(ClientError):
    """Raised when client input fails validation. Always 422 / invalidInput."""

    def __init__(self, details: Any = None, message: str | None = None):
        super().__init__(422, "invalidInput", message)
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["details"] = self.details
        return data
