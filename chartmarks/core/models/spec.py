from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from chartmarks.constants import (
    DEFAULT_BAND_WIDTH,
    DEFAULT_FONT_SIZE,
    DEFAULT_NUMBER_FORMAT,
    DEFAULT_STROKE_WIDTH,
)
from chartmarks.core.enums import (
    Channel,
    FieldType,
    MarkKind,
    Orient,
    ScaleType,
    StackOffset,
    StackSort,
)
from chartmarks.core.exceptions import InvalidSpecException


class SpecModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class ScaleDef(SpecModel):
    band_width: int | float = DEFAULT_BAND_WIDTH
    type: ScaleType | None = None


class FieldDef(SpecModel):
    field: str | None = None
    type: FieldType | None = None
    aggregate: str | None = None
    bin: bool = False
    value: Any = None
    format: str | None = None
    scale: ScaleDef = Field(default_factory=ScaleDef)


class Encoding(SpecModel):
    x: FieldDef | None = None
    y: FieldDef | None = None
    color: FieldDef | None = None
    size: FieldDef | None = None
    shape: FieldDef | None = None
    detail: FieldDef | None = None
    text: FieldDef | None = None
    row: FieldDef | None = None
    column: FieldDef | None = None
    label: FieldDef | None = None

    def get(self, channel: Channel) -> FieldDef | None:
        return getattr(self, channel.value)


class MarksConfig(SpecModel):
    filled: bool | None = None
    stroke_width: int | float = DEFAULT_STROKE_WIDTH
    opacity: float | None = None
    orient: Orient | None = None
    interpolate: str | None = None
    tension: float | None = None
    font_size: int | float = DEFAULT_FONT_SIZE
    format: str | None = None
    angle: float | None = None
    align: str | None = None
    baseline: str | None = None
    dx: float | None = None
    dy: float | None = None
    fill: str | None = None
    font: str | None = None
    font_weight: str | int | None = None
    font_style: str | None = None
    radius: float | None = None
    theta: float | None = None

    def value_for(self, key: str) -> Any:
        """Look up a config value by its output property name (camelCase)."""
        return self.model_dump(by_alias=True, mode="json").get(key)


class StackConfig(SpecModel):
    enabled: bool = True
    sort: StackSort | list[str] = StackSort.ASCENDING
    offset: StackOffset | None = None


class ChartConfig(SpecModel):
    marks: MarksConfig = Field(default_factory=MarksConfig)
    stack: StackConfig = Field(default_factory=StackConfig)
    sort_line_by: str | None = None
    number_format: str = DEFAULT_NUMBER_FORMAT


class Spec(SpecModel):
    name: str | None = None
    mark: MarkKind
    encoding: Encoding = Field(default_factory=Encoding)
    config: ChartConfig = Field(default_factory=ChartConfig)


def parse_spec(data: dict[str, Any]) -> Spec:
    try:
        return Spec.model_validate(data)
    except ValidationError as e:
        raise InvalidSpecException(
            f"Invalid chart spec: {e.error_count()} validation error(s)\n{e}",
            errors=e.errors(),
        ) from e
