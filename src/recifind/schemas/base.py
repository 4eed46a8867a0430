"""Base schema configuration for all Pydantic models.

The mobile client speaks camelCase JSON, so every schema aliases its
snake_case fields with ``to_camel`` and accepts either spelling on input.

Usage:
    - APIRequest: incoming API request bodies
    - APIResponse: outgoing API response bodies
    - DownstreamResponse: payloads received from the AI collaborator
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas.

    Unknown properties from clients are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas.

    Only explicitly defined properties are returned.
    """

    model_config = ConfigDict(
        extra="forbid",
    )


class DownstreamResponse(_BaseSchema):
    """Base class for structured data produced by an external service.

    Extra properties are ignored so that additive upstream changes do not
    break parsing.
    """

    model_config = ConfigDict(
        extra="ignore",
    )
