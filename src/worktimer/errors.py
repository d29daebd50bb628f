"""Error types and codes."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes."""

    UNKNOWN = "UNKNOWN"
    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class ResourceError(Exception):
    """Base class for errors raised before a request reaches the registry."""

    def __init__(
        self, message: str, code: ErrorCode = ErrorCode.UNKNOWN
    ) -> None:
        """Initialize error.

        Args:
            message: Error message
            code: Error code
        """
        super().__init__(message)
        self.code = code
        self.message = message


class ValidationError(ResourceError):
    """Arguments failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.VALIDATION_ERROR)


class InvalidRequestError(ResourceError):
    """Request names an operation that does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_REQUEST)


class ConfigurationError(ResourceError):
    """Configuration error."""

    def __init__(self, message: str) -> None:
        """Initialize error.

        Args:
            message: Error message
        """
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR)
