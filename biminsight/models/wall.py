"""WallRecord — the per-wall tuple serialised into the analysis prompt.

A record is created once per wall during collection, rendered to a single
prompt line and then discarded.  Lengths are in feet, areas in square feet.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from biminsight.config import NOT_AVAILABLE


class WallRecord(BaseModel):
    """Identifier, type name, length, area and level of one wall."""

    element_id: str = NOT_AVAILABLE
    type_name: str = NOT_AVAILABLE
    length: float = 0.0
    area: float = 0.0
    level_name: str = NOT_AVAILABLE

    @field_validator("element_id", "type_name", "level_name", mode="before")
    @classmethod
    def _default_text(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return NOT_AVAILABLE
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("length", "area", mode="before")
    @classmethod
    def _default_number(cls, value: object) -> object:
        return 0.0 if value is None else value

    def to_prompt_line(self) -> str:
        """Return ``id, typeName, length ft, area sq.ft, levelName``."""
        return (
            f"{self.element_id}, {self.type_name}, "
            f"{self.length:.2f} ft, {self.area:.2f} sq.ft, {self.level_name}"
        )
