"""
Shared Pydantic base classes for API schemas.

The wire format uses camelCase field names; Python code uses snake_case.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase aliases, populated from attributes or field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EnvelopeResponse(CamelModel):
    """Every response carries a ``success`` flag."""
    success: bool = True


class MessageResponse(EnvelopeResponse):
    """Response for operations without a payload."""
    message: str
