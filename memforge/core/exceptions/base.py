from typing import Dict, Optional


class AppError(Exception):
    """Base exception class for application-specific errors"""

    def __init__(self, message: str, error_code: str, details: Optional[Dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Caller-supplied input violates an invariant"""

    def __init__(self, message: str, field: str, details: Optional[Dict] = None):
        super().__init__(message=message, error_code="VALIDATION_ERROR", details={"field": field, **(details or {})})


class NotFoundError(AppError):
    """Referenced resource does not exist"""

    def __init__(self, resource_type: str, resource_id: str, details: Optional[Dict] = None):
        super().__init__(
            message=f"{resource_type} not found",
            error_code="NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id, **(details or {})},
        )


class ConfigurationError(AppError):
    """Deployment misconfiguration, fixable by the operator"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ExternalServiceError(AppError):
    """External service communication errors"""

    def __init__(self, service: str, message: str, error_code: str, details: Optional[Dict] = None):
        self.service = service
        super().__init__(message=message, error_code=error_code, details={"service": service, **(details or {})})
