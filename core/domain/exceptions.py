"""
Domain exceptions.

Domain exceptions represent business rule violations
and provider-specific error conditions.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ProvisionFunctionError(DomainException):
    """
    Base exception for provision function failures.

    Carries a data mapping with whatever context the caller needs
    for diagnostics, usually the raw or decoded provider response.
    """

    default_message = "Provision function error"
    default_code = "PROVISION_FUNCTION_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        code: Optional[str] = None,
    ):
        """
        Initialize provision function error.

        Args:
            message: Human-readable error message
            data: Diagnostic data attached to the error
            code: Machine-readable error code
        """
        super().__init__(
            message or self.default_message, code=code or self.default_code
        )
        self.data = dict(data or {})

    def to_dict(self) -> Dict[str, Any]:
        """Return the error in the API error envelope format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "data": self.data,
            }
        }


class ValidationError(ProvisionFunctionError):
    """Raised when a required input field is missing or invalid."""

    default_message = "Invalid parameters"
    default_code = "VALIDATION_ERROR"


class UnsupportedOperationError(ProvisionFunctionError):
    """Raised when the provider has no equivalent for an operation."""

    default_message = "Operation not supported"
    default_code = "OPERATION_NOT_SUPPORTED"


class RemoteProtocolError(ProvisionFunctionError):
    """Raised when a provider response cannot be decoded."""

    default_message = "Unknown Provider API Error"
    default_code = "UNKNOWN_PROVIDER_ERROR"


class RemoteOperationError(ProvisionFunctionError):
    """Raised when the provider reports that an operation failed."""

    default_message = "Unknown Provider API Error"
    default_code = "PROVIDER_ERROR"


class LicenseNotFoundError(RemoteOperationError):
    """Raised when the provider does not know the license."""

    default_message = "License does not exist"
    default_code = "LICENSE_NOT_FOUND"
