"""
Error handling utilities for the envoi resolver.

This module defines the exception hierarchy used by the resolvers and
configuration layer. Backend failures are normalized to empty results by the
resolvers themselves, so only programmer and configuration errors are expected
to reach callers.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes for the envoi resolver."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    ENCODING_ERROR = "ENCODING_ERROR"
    CONTRACT_CALL_ERROR = "CONTRACT_CALL_ERROR"


class EnvoiError(Exception):
    """Base exception for all envoi resolver errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a new envoi error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the error to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(EnvoiError):
    """Exception for invalid or missing configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=ErrorCode.CONFIGURATION_ERROR, details=details)


class InvalidAddressError(EnvoiError, ValueError):
    """Exception raised when a string is not a usable chain address."""

    def __init__(self, address: str, reason: str = "malformed address"):
        super().__init__(
            f"Invalid address: {address} ({reason})",
            code=ErrorCode.INVALID_ADDRESS,
            details={"address": address, "reason": reason}
        )
        self.address = address


class EncodingError(EnvoiError, ValueError):
    """Exception raised when a value cannot be encoded as a fixed-width key."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=ErrorCode.ENCODING_ERROR, details=details)


class ContractCallError(EnvoiError):
    """Exception raised when the algod node cannot be reached or rejects a call."""

    def __init__(self, message: str, app_id: int, method: str):
        super().__init__(
            message,
            code=ErrorCode.CONTRACT_CALL_ERROR,
            details={"app_id": app_id, "method": method}
        )
        self.app_id = app_id
        self.method = method
