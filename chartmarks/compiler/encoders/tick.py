from chartmarks.compiler.bindings import (
    channel_or_value,
    literal,
    merge_properties,
    scale_field,
)
from chartmarks.compiler.encoders.base import MarkEncoder
from chartmarks.compiler.mixins import opacity_mixin
from chartmarks.constants import (
    BIN_MID_SUFFIX,
    TICK_OFFSET_BAND_DIVISOR,
    TICK_SIZE_BAND_DIVISOR,
)
from chartmarks.core.enums import Channel
from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap

TICK_THICKNESS = 1


def _band_width(model: Model, channel: Channel):
    return model.field_def(channel).scale.band_width


def tick_position(model: Model, channel: Channel):
    if not model.has(channel):
        return literal(0)
    offset = None
    if model.is_dimension(channel):
        offset = -_band_width(model, channel) / TICK_OFFSET_BAND_DIVISOR
    return scale_field(model, channel, bin_suffix=BIN_MID_SUFFIX, offset=offset)


def tick_extent(model: Model, channel: Channel):
    if not model.has(channel) or model.is_dimension(channel):
        return literal(_band_width(model, channel) / TICK_SIZE_BAND_DIVISOR)
    return literal(TICK_THICKNESS)


class TickEncoder(MarkEncoder):
    def properties(self, model: Model) -> PropertyMap:
        return merge_properties(
            {
                "x": tick_position(model, Channel.X),
                "y": tick_position(model, Channel.Y),
                "width": tick_extent(model, Channel.X),
                "height": tick_extent(model, Channel.Y),
            },
            {"fill": channel_or_value(model, Channel.COLOR)},
            opacity_mixin(model),
        )
