"""Data models for decoded OCR matches.

``MatchRecord`` mirrors one object emitted by the screen OCR script. Python
attributes are snake_case while the aliases keep the script's key spelling,
so ``model_dump(by_alias=True)`` round-trips to the upstream shape.
Pydantic is used for construction and serialisation only; values are not
range-checked because they pass through whatever the OCR tool produced.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

FieldValue = Union[str, int, float]


class FieldKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"

    @property
    def zero(self) -> FieldValue:
        """Value substituted when a field is absent or malformed."""
        if self is FieldKind.TEXT:
            return ""
        if self is FieldKind.INTEGER:
            return 0
        return 0.0


class FieldSpec(NamedTuple):
    key: str
    attribute: str
    kind: FieldKind


MATCH_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("Text", "text", FieldKind.TEXT),
    FieldSpec("Left", "left", FieldKind.INTEGER),
    FieldSpec("Top", "top", FieldKind.INTEGER),
    FieldSpec("Width", "width", FieldKind.INTEGER),
    FieldSpec("Height", "height", FieldKind.INTEGER),
    FieldSpec("CenterX", "center_x", FieldKind.INTEGER),
    FieldSpec("CenterY", "center_y", FieldKind.INTEGER),
    FieldSpec("Confidence", "confidence", FieldKind.FLOAT),
    FieldSpec("Type", "category", FieldKind.TEXT),
    FieldSpec("WordCount", "word_count", FieldKind.INTEGER),
)


class MatchRecord(BaseModel):
    """One recognised region of interest on screen."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field("", alias="Text")
    left: int = Field(0, alias="Left")
    top: int = Field(0, alias="Top")
    width: int = Field(0, alias="Width")
    height: int = Field(0, alias="Height")
    center_x: int = Field(0, alias="CenterX")
    center_y: int = Field(0, alias="CenterY")
    confidence: float = Field(0.0, alias="Confidence")
    category: str = Field("", alias="Type")
    word_count: int = Field(0, alias="WordCount")

    @property
    def center(self) -> Tuple[int, int]:
        return (self.center_x, self.center_y)

    @property
    def box(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.width, self.height)
