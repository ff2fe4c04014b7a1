from chartmarks.compiler.bindings import (
    channel_or_value,
    group_ref,
    literal,
    merge_properties,
    scale_field,
)
from chartmarks.compiler.encoders.base import MarkEncoder
from chartmarks.compiler.mixins import marks_config_properties, opacity_mixin
from chartmarks.constants import BIN_MID_SUFFIX
from chartmarks.core.enums import Channel, GroupDimension
from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap

PATH_STYLE_KEYS = ["interpolate", "tension"]


def line_position(model: Model) -> PropertyMap:
    if model.has(Channel.X):
        x = scale_field(model, Channel.X, bin_suffix=BIN_MID_SUFFIX)
    else:
        x = literal(0)
    if model.has(Channel.Y):
        y = scale_field(model, Channel.Y, bin_suffix=BIN_MID_SUFFIX)
    else:
        # no y: draw along the bottom of the group
        y = group_ref(GroupDimension.HEIGHT)
    return {"x": x, "y": y}


class LineEncoder(MarkEncoder):
    def properties(self, model: Model) -> PropertyMap:
        marks = model.config.marks
        return merge_properties(
            line_position(model),
            {
                "stroke": channel_or_value(model, Channel.COLOR),
                "strokeWidth": literal(marks.stroke_width),
            },
            opacity_mixin(model),
            marks_config_properties(marks, PATH_STYLE_KEYS),
        )
