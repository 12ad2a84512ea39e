"""Shared schema primitives."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class CamelSchema(BaseSchema):
    """Accepts snake_case or camelCase on input; dumps camelCase with by_alias=True."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
