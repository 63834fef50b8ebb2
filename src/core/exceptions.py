"""
Exception hierarchy for Scanboard.

Provides a standardized exception hierarchy for consistent error handling
across the application. All exceptions inherit from ScanboardException.
"""


class ScanboardException(Exception):
    """Base exception for all Scanboard errors."""
    pass


class ValidationException(ScanboardException):
    """Input validation failed."""

    def __init__(self, message: str, field: str = None):
        """
        Initialize validation exception.

        Args:
            message: Validation error message
            field: Field that failed validation (optional)
        """
        self.field = field
        if field:
            super().__init__(f"Validation failed for {field}: {message}")
        else:
            super().__init__(f"Validation failed: {message}")


class IntegrationException(ScanboardException):
    """External data source failed."""

    def __init__(self, service: str, reason: str):
        """
        Initialize integration exception.

        Args:
            service: Service or location that failed
            reason: Reason for failure
        """
        self.service = service
        self.reason = reason
        super().__init__(f"{service} integration failed: {reason}")


class OutputException(ScanboardException):
    """Output generation failed."""

    def __init__(self, format_type: str, reason: str):
        """
        Initialize output exception.

        Args:
            format_type: Output format (html, xlsx, etc.)
            reason: Reason for failure
        """
        self.format_type = format_type
        self.reason = reason
        super().__init__(f"Failed to generate {format_type} output: {reason}")


class ConfigurationException(ScanboardException):
    """Configuration is invalid or missing."""
    pass


__all__ = [
    "ScanboardException",
    "ValidationException",
    "IntegrationException",
    "OutputException",
    "ConfigurationException",
]
