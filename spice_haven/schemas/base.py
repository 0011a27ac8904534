"""
Shared Pydantic configuration for API schemas.

Fields are snake_case in Python and camelCase on the wire, matching what the
website client sends and expects.
"""
from typing import ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting either spelling."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """
    Base for partial-update payloads.

    Every field is optional; only fields the caller actually sent are merged.
    Subclasses list the fields that may be explicitly cleared in NULLABLE.
    """

    NULLABLE: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.NULLABLE:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self

    def changes(self) -> dict:
        """Fields supplied by the caller, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
