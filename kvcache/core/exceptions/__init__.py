from .exceptions import (
    AppError,
    CacheConnectionError,
    CacheError,
    CacheOperationError,
)

__all__ = [
    "AppError",
    "CacheError",
    "CacheConnectionError",
    "CacheOperationError",
]
