"""
Shared base for internal models
"""

from typing import ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialUpdate(CamelModel):
    """
    Partial update payload

    Fields left out are not written. Fields named in ``non_nullable`` may be
    omitted but never explicitly set to None; the remaining fields may be
    cleared with None.
    """
    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "PartialUpdate":
        nulled = sorted(
            field for field in self.model_fields_set & self.non_nullable
            if getattr(self, field) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be cleared: {', '.join(nulled)}")
        return self
