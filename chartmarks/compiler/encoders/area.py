from chartmarks.compiler.bindings import (
    literal,
    merge_properties,
    scale_field,
    scale_value,
    stacked_end,
    stacked_start,
)
from chartmarks.compiler.encoders.base import MarkEncoder
from chartmarks.compiler.encoders.line import PATH_STYLE_KEYS
from chartmarks.compiler.mixins import (
    color_mixins,
    marks_config_properties,
    opacity_mixin,
)
from chartmarks.constants import BIN_MID_SUFFIX
from chartmarks.core.enums import Channel, Orient
from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap


def _is_stacked_on(model: Model, channel: Channel) -> bool:
    stack = model.stack()
    return stack is not None and stack.field_channel == channel


def _position(model: Model, channel: Channel) -> PropertyMap:
    key = channel.value
    if _is_stacked_on(model, channel):
        return {key: stacked_start(model, channel)}
    if model.is_measure(channel):
        return {key: scale_field(model, channel)}
    if model.is_dimension(channel):
        return {key: scale_field(model, channel, bin_suffix=BIN_MID_SUFFIX)}
    return {}


def _baseline(model: Model, channel: Channel) -> PropertyMap:
    key = channel.value + "2"
    if _is_stacked_on(model, channel):
        return {key: stacked_end(model, channel)}
    return {key: scale_value(model, channel, 0)}


def area_position(model: Model, orient: Orient | None) -> PropertyMap:
    # a horizontal area fills toward x2, anything else toward y2
    baseline_channel = Channel.X if orient == Orient.HORIZONTAL else Channel.Y
    return merge_properties(
        _position(model, Channel.X),
        _position(model, Channel.Y),
        _baseline(model, baseline_channel),
    )


class AreaEncoder(MarkEncoder):
    def properties(self, model: Model) -> PropertyMap:
        marks = model.config.marks
        orient = marks.orient
        return merge_properties(
            {"orient": literal(orient.value)} if orient is not None else {},
            area_position(model, orient),
            color_mixins(model),
            opacity_mixin(model),
            marks_config_properties(marks, PATH_STYLE_KEYS),
        )
