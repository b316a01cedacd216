"""Application constants."""


# General
class AppConfig:
    """Application configuration."""

    REDIS_SOCKET_CONNECT_TIMEOUT = 5
    REDIS_SOCKET_TIMEOUT = 5
    REDIS_SOCKET_KEEPALIVE = True
    REDIS_HEALTH_CHECK_INTERVAL = 10
    REDIS_DECODE_RESPONSES = True


class LogMessages:
    """Log message templates."""

    CLIENT_ERROR = "Redis Client Error: {message}"
    CONNECTED = "Connected to Redis at {address}"
    GET_FAILED = 'Error retrieving key "{key}": {message}'
    SET_FAILED = 'Error setting key "{key}" with value "{value}": {message}'
    DELETE_FAILED = 'Error deleting key "{key}": {message}'
    JSON_DECODE_FAILED = 'Error decoding cached value for key "{key}": {message}'
    JSON_ENCODE_FAILED = 'Error encoding value for key "{key}": {message}'


class ErrorCodes:
    """Error codes."""

    GENERAL_ERROR_CODE = "KV00"
    CACHE_ERROR_CODE = "KV12"
    CACHE_OPERATION_ERROR_CODE = "KV14"
    CACHE_CONNECTION_ERROR_CODE = "KV15"


class ErrorMessages:
    """Error messages."""

    INTERNAL_ERROR = "Internal error"
    CACHE_ERROR = "Cache operation failed"
    CACHE_OPERATION_ERROR = "Cache operational error occurred"
    CACHE_CONNECTION_ERROR = "Failed to connect to cache"
