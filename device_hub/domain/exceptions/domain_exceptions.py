"""
Domain Exceptions - Custom exceptions for registry and alerting errors.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Every failure the core reports derives from this class, so the API layer
    can turn any of them into the response envelope with a single handler.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class EntityNotFoundException(DomainException):
    """Raised when a referenced device or alert does not exist in current state."""

    def __init__(
        self,
        entity_type: str,
        entity_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message=message or f"{entity_type} not found",
            code='ENTITY_NOT_FOUND',
            details={'entity_type': entity_type, 'entity_id': entity_id}
        )


class DeviceNotFoundException(EntityNotFoundException):
    """Raised when a device id is not registered."""

    def __init__(self, device_id: str):
        super().__init__('Device', device_id)


class AlertNotFoundException(EntityNotFoundException):
    """Raised when an alert id is unknown or has been evicted from the sink."""

    def __init__(self, alert_id: str):
        super().__init__('Alert', alert_id)
