"""
Axiom client exceptions.

Provides a hierarchy of exceptions for the error scenarios of the Axiom HTTP API.
"""

from typing import Any


class AxiomError(Exception):
    """Base exception for all Axiom client errors."""

    def __init__(self, message: str, details: Any = None):
        """
        Initialize AxiomError.

        Args:
            message: Human-readable error message
            details: Additional error details (status code, response body, etc.)
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class AxiomConfigurationError(AxiomError):
    """Exception for configuration errors (missing or malformed token, missing org id)."""

    def __init__(self, message: str, config_key: str = None):
        """
        Initialize AxiomConfigurationError.

        Args:
            message: Human-readable error message
            config_key: The environment variable that is missing or invalid
        """
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)


class AxiomAPIError(AxiomError):
    """Exception for HTTP error responses from the Axiom API."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response_data: Any = None,
    ):
        """
        Initialize AxiomAPIError.

        Args:
            status_code: HTTP status code
            message: Error message extracted from the response
            response_data: Raw response body, if any
        """
        self.status_code = status_code
        self.response_data = response_data
        details = {"status_code": status_code, "response": response_data}
        super().__init__(message, details)

    def __str__(self):
        return f"{self.message} | status={self.status_code}"


class AxiomDecodeError(AxiomAPIError):
    """Exception for successful responses whose body cannot be decoded."""

    EMPTY_RESPONSE = "Response is empty."

    def __init__(self, status_code: int, response_data: Any = None):
        super().__init__(status_code, self.EMPTY_RESPONSE, response_data)


class AxiomTimeoutError(AxiomError):
    """Exception for timeout errors."""

    def __init__(self, message: str, timeout: float = None, operation: str = None):
        """
        Initialize AxiomTimeoutError.

        Args:
            message: Human-readable error message
            timeout: Timeout value in seconds
            operation: Operation that timed out
        """
        self.timeout = timeout
        self.operation = operation
        details = {"timeout": timeout, "operation": operation}
        super().__init__(message, details)


class AxiomConnectionError(AxiomError):
    """Exception for connection errors."""

    def __init__(self, message: str, base_url: str = None, cause: Exception = None):
        """
        Initialize AxiomConnectionError.

        Args:
            message: Human-readable error message
            base_url: The URL that failed to connect
            cause: The underlying exception that caused the connection error
        """
        self.base_url = base_url
        self.cause = cause
        details = {"base_url": base_url, "cause": str(cause) if cause else None}
        super().__init__(message, details)
