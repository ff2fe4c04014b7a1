from chartmarks.compiler.bindings import (
    group_ref,
    literal,
    merge_properties,
    scale_field,
    stacked_end,
    stacked_start,
)
from chartmarks.compiler.encoders.base import MarkEncoder
from chartmarks.compiler.mixins import color_mixins, opacity_mixin
from chartmarks.constants import BAND_INSET, BIN_END_SUFFIX, BIN_START_SUFFIX
from chartmarks.core.enums import Channel, GroupDimension
from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap

X = Channel.X
Y = Channel.Y

# bars across a continuous x axis have no band to fill
CONTINUOUS_BAR_WIDTH = 2


def _band_size(model: Model, channel: Channel):
    if model.has(Channel.SIZE):
        return scale_field(model, Channel.SIZE)
    return literal(model.field_def(channel).scale.band_width, offset=BAND_INSET)


def x_properties(model: Model) -> PropertyMap:
    stack = model.stack()
    if stack and stack.field_channel == X:
        return {"x": stacked_start(model, X), "x2": stacked_end(model, X)}
    if model.field_def(X).bin:
        return {
            "x": scale_field(model, X, bin_suffix=BIN_START_SUFFIX, offset=1),
            "x2": scale_field(model, X, bin_suffix=BIN_END_SUFFIX),
        }
    if model.is_measure(X):
        if not model.has(Y) or model.is_dimension(Y):
            # bars grow from zero
            return {"x": scale_field(model, X), "x2": literal(0)}
        return {"x": scale_field(model, X)}
    if model.has(X):
        return {"xc": scale_field(model, X)}
    return {"x": literal(0, offset=1)}


def width_properties(model: Model, x_props: PropertyMap) -> PropertyMap:
    if "x2" in x_props:
        return {}
    if not model.has(X) or model.is_ordinal_scale(X):
        return {"width": _band_size(model, X)}
    return {"width": literal(CONTINUOUS_BAR_WIDTH)}


def y_properties(model: Model) -> PropertyMap:
    stack = model.stack()
    if stack and stack.field_channel == Y:
        return {"y": stacked_start(model, Y), "y2": stacked_end(model, Y)}
    if model.field_def(Y).bin:
        return {
            "y": scale_field(model, Y, bin_suffix=BIN_START_SUFFIX),
            "y2": scale_field(model, Y, bin_suffix=BIN_END_SUFFIX, offset=1),
        }
    if model.is_measure(Y):
        return {"y": scale_field(model, Y), "y2": group_ref(GroupDimension.HEIGHT)}
    if model.has(Y):
        position: PropertyMap = {"yc": scale_field(model, Y)}
    else:
        position = {"y2": group_ref(GroupDimension.HEIGHT, offset=BAND_INSET)}
    return {**position, "height": _band_size(model, Y)}


class BarEncoder(MarkEncoder):
    def properties(self, model: Model) -> PropertyMap:
        x_props = x_properties(model)
        return merge_properties(
            x_props,
            width_properties(model, x_props),
            y_properties(model),
            color_mixins(model),
            opacity_mixin(model),
        )
