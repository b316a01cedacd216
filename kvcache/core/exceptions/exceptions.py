"""Custom exceptions for the cache client."""

from typing import Any, Dict, Optional

from kvcache.core.constants import ErrorCodes, ErrorMessages


class AppError(Exception):
    """Base application exception."""

    message: str = ErrorMessages.INTERNAL_ERROR
    error_code: str = ErrorCodes.GENERAL_ERROR_CODE

    def __init__(
        self,
        detail: Optional[str] = None,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
    ) -> None:
        if message is not None:
            self.message = message
        if error_code is not None:
            self.error_code = error_code
        self.detail = detail or self.message
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a plain dictionary.

        Returns:
            Dict with the error code, message and the class name.
        """
        return {
            "error_code": self.error_code,
            "message": self.detail,
            "type": self.__class__.__name__,
        }


# Cache Exceptions
class CacheError(AppError):
    """Base exception for cache-related errors."""

    message = ErrorMessages.CACHE_ERROR
    error_code = ErrorCodes.CACHE_ERROR_CODE


class CacheOperationError(CacheError):
    """Raised when cache read/write operation fails."""

    message = ErrorMessages.CACHE_OPERATION_ERROR
    error_code = ErrorCodes.CACHE_OPERATION_ERROR_CODE


class CacheConnectionError(CacheError):
    """Raised when connection to cache fails."""

    message = ErrorMessages.CACHE_CONNECTION_ERROR
    error_code = ErrorCodes.CACHE_CONNECTION_ERROR_CODE
