"""Constructors for the property bindings every encoder emits.

A channel is either bound, in which case the property reads its value through
the channel's scale, or unbound, in which case the property is a literal taken
from the channel's fallback value.
"""

from typing import Any

from chartmarks.constants import STACK_END_SUFFIX, STACK_START_SUFFIX
from chartmarks.core.enums import Channel, GroupDimension
from chartmarks.core.exceptions import DuplicatePropertyException
from chartmarks.core.model import Model
from chartmarks.core.models.marks import (
    FieldBinding,
    GroupBinding,
    GroupReference,
    PropertyMap,
    ScaleFieldBinding,
    ScaleValueBinding,
    TemplateBinding,
    ValueBinding,
)


def scale_field(
    model: Model,
    channel: Channel,
    bin_suffix: str | None = None,
    offset: int | float | None = None,
) -> ScaleFieldBinding:
    return ScaleFieldBinding(
        scale=model.scale(channel),
        field=model.field(channel, bin_suffix=bin_suffix),
        offset=offset,
    )


def stacked_start(model: Model, channel: Channel) -> ScaleFieldBinding:
    return ScaleFieldBinding(
        scale=model.scale(channel), field=model.field(channel) + STACK_START_SUFFIX
    )


def stacked_end(model: Model, channel: Channel) -> ScaleFieldBinding:
    return ScaleFieldBinding(
        scale=model.scale(channel), field=model.field(channel) + STACK_END_SUFFIX
    )


def scale_value(model: Model, channel: Channel, value: Any) -> ScaleValueBinding:
    """A literal in the channel's domain; needs only the scale name."""
    return ScaleValueBinding(scale=model.scale_name(channel), value=value)


def literal(value: Any, offset: int | float | None = None) -> ValueBinding:
    return ValueBinding(value=value, offset=offset)


def group_ref(
    dimension: GroupDimension | str, offset: int | float | None = None
) -> GroupBinding:
    return GroupBinding(
        field=GroupReference(group=GroupDimension(dimension)), offset=offset
    )


def field_ref(field: str) -> FieldBinding:
    return FieldBinding(field=field)


def template(text: str) -> TemplateBinding:
    return TemplateBinding(template=text)


def channel_or_value(
    model: Model, channel: Channel, bin_suffix: str | None = None
) -> ScaleFieldBinding | ValueBinding:
    """Scale binding when the channel is bound, else its fallback value."""
    if model.has(channel):
        return scale_field(model, channel, bin_suffix=bin_suffix)
    return literal(model.field_def(channel).value)


def half_band(model: Model, channel: Channel) -> ValueBinding:
    return literal(model.field_def(channel).scale.band_width / 2)


def merge_properties(*groups: PropertyMap) -> PropertyMap:
    """Combine property groups into one map; a key may only be set once."""
    merged: PropertyMap = {}
    for group in groups:
        for key, binding in group.items():
            if key in merged:
                raise DuplicatePropertyException(
                    f"Property '{key}' bound by more than one property group",
                    key=key,
                )
            merged[key] = binding
    return merged
