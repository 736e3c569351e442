from typing import Optional, Any


class StoreError(Exception):
    """
    Base exception for the storefront API.
    """
    def __init__(self, message: str, status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(StoreError):
    """
    Raised when input validation fails.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, status_code=400, details=details)


class ResourceNotFoundError(StoreError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, status_code=404, details=details)


class InternalError(StoreError):
    """
    Raised when a persistence operation fails.
    """
    def __init__(self, message: str = "Internal server error", details: Optional[Any] = None):
        super().__init__(message, status_code=500, details=details)


class ExternalServiceError(StoreError):
    """
    Raised when an external service (the mail relay) fails.
    """
    def __init__(self, message: str = "External service error", details: Optional[Any] = None):
        super().__init__(message, status_code=500, details=details)
