"""
Custom exceptions for the lead capture API.
Each exception carries the HTTP status it maps to; main.py renders them
into the standard error envelope.
"""
from typing import List, Optional


class LeadCaptureException(Exception):
    """Base exception for the lead capture API"""
    status_code: int = 500

    def __init__(self, message: str = "An error occurred", extra: Optional[dict] = None):
        self.message = message
        self.extra = extra or {}
        super().__init__(self.message)


class InputError(LeadCaptureException):
    """Malformed or missing request body"""
    status_code = 400

    def __init__(self, message: str = "Invalid JSON data", extra: Optional[dict] = None):
        super().__init__(message, extra)


class ValidationError(LeadCaptureException):
    """Field constraint failures"""
    status_code = 422

    def __init__(self, errors: List[str], message: str = "Validation failed"):
        self.errors = list(errors)
        super().__init__(message, {"validation_errors": self.errors})


class NotFoundError(LeadCaptureException):
    """Resource not found"""
    status_code = 404

    def __init__(self, resource: str = "Resource", resource_id: str = None):
        # resource_id is kept for logging only, the message stays generic
        self.resource_id = resource_id
        super().__init__(f"{resource} not found")


class StateError(LeadCaptureException):
    """Invalid lifecycle transition target"""
    status_code = 400

    def __init__(self, allowed: List[str], message: str = None):
        self.allowed = list(allowed)
        if message is None:
            message = "Invalid status. Must be one of: " + ", ".join(self.allowed)
        super().__init__(message)


class RateLimitError(LeadCaptureException):
    """Too many requests from one client"""
    status_code = 429

    def __init__(
        self,
        message: str = "Too many requests. Please try again later.",
        retry_after: int = 0,
        limit: int = 0,
        remaining: int = 0
    ):
        self.retry_after = retry_after
        self.limit = limit
        self.remaining = remaining
        super().__init__(message)


class InfrastructureError(LeadCaptureException):
    """Persistence or transport failure"""
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


# Helpers
def raise_not_found(resource: str = "Resource", resource_id: str = None):
    """Raise 404"""
    raise NotFoundError(resource, resource_id)


def raise_validation_error(errors: List[str]):
    """Raise 422 with itemized messages"""
    raise ValidationError(errors)


def raise_invalid_status(allowed: List[str]):
    """Raise 400 for an unknown status value"""
    raise StateError(allowed)
