"""
EVPlanner - Shared schema configuration
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema for the public JSON contract.

    Fields are snake_case in Python and camelCase on the wire; both
    spellings are accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )


class DeleteResponse(BaseModel):
    """Response for hard deletes."""
    message: str
    id: int
