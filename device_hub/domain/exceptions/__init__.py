# Domain Exceptions
from .domain_exceptions import (
    DomainException,
    EntityNotFoundException,
    DeviceNotFoundException,
    AlertNotFoundException,
)

__all__ = [
    'DomainException',
    'EntityNotFoundException',
    'DeviceNotFoundException',
    'AlertNotFoundException',
]
