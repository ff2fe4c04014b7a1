from chartmarks.compiler.bindings import (
    channel_or_value,
    half_band,
    literal,
    merge_properties,
    scale_field,
)
from chartmarks.compiler.encoders.base import MarkEncoder
from chartmarks.compiler.mixins import color_mixins, opacity_mixin
from chartmarks.constants import BIN_MID_SUFFIX
from chartmarks.core.enums import Channel
from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap


def centered_position(model: Model, channel: Channel):
    """Bin midpoint through the scale, else the middle of an ordinal band."""
    if model.has(channel):
        return scale_field(model, channel, bin_suffix=BIN_MID_SUFFIX)
    return half_band(model, channel)


def symbol_position(model: Model) -> PropertyMap:
    return {
        "x": centered_position(model, Channel.X),
        "y": centered_position(model, Channel.Y),
        "size": channel_or_value(model, Channel.SIZE),
    }


class PointEncoder(MarkEncoder):
    def properties(self, model: Model) -> PropertyMap:
        return merge_properties(
            symbol_position(model),
            {"shape": channel_or_value(model, Channel.SHAPE)},
            color_mixins(model),
            opacity_mixin(model),
        )


class FilledPointEncoder(MarkEncoder):
    """Symbols with a fixed shape that are always filled, never stroked."""

    def __init__(self, shape: str):
        self.shape = shape

    def properties(self, model: Model) -> PropertyMap:
        return merge_properties(
            symbol_position(model),
            {"shape": literal(self.shape)},
            {"fill": channel_or_value(model, Channel.COLOR)},
            opacity_mixin(model),
        )
