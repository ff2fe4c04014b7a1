from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from chartmarks.core.enums import GroupDimension, PrimitiveType


class OutputModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# property bindings: each shape carries exactly one source of value


class ScaleFieldBinding(OutputModel):
    scale: str
    field: str
    offset: int | float | None = None


class ScaleValueBinding(OutputModel):
    scale: str
    value: Any


class ValueBinding(OutputModel):
    value: Any
    offset: int | float | None = None


class GroupReference(OutputModel):
    group: GroupDimension


class GroupBinding(OutputModel):
    field: GroupReference
    offset: int | float | None = None


class FieldBinding(OutputModel):
    field: str


class TemplateBinding(OutputModel):
    template: str


PropertyBinding = Union[
    ScaleFieldBinding,
    ScaleValueBinding,
    ValueBinding,
    GroupBinding,
    FieldBinding,
    TemplateBinding,
]

PropertyMap = dict[str, PropertyBinding]


# transforms


class SortTransform(OutputModel):
    type: Literal["sort"] = "sort"
    by: str


class FacetTransform(OutputModel):
    type: Literal["facet"] = "facet"
    groupby: list[str]


class StackOutput(OutputModel):
    start: str
    end: str


class StackTransform(OutputModel):
    type: Literal["stack"] = "stack"
    groupby: list[str]
    field: str
    sortby: list[str]
    output: StackOutput
    offset: str | None = None


class ImputeTransform(OutputModel):
    type: Literal["impute"] = "impute"
    field: str
    groupby: list[str]
    orderby: list[str]
    method: str = "value"
    value: Any = 0


Transform = Union[SortTransform, FacetTransform, StackTransform, ImputeTransform]


# mark tree


class From(OutputModel):
    data: str | None = None
    transform: list[Transform] | None = None

    @property
    def is_empty(self) -> bool:
        return self.data is None and not self.transform


class Properties(OutputModel):
    update: PropertyMap = Field(default_factory=dict)


class MarkNode(OutputModel):
    name: str | None = None
    type: PrimitiveType
    from_: From | None = Field(default=None, alias="from")
    properties: Properties = Field(default_factory=Properties)
    marks: list[MarkNode] | None = None
