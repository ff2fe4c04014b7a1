from chartmarks.compiler.bindings import (
    field_ref,
    group_ref,
    half_band,
    literal,
    merge_properties,
    scale_field,
    template,
)
from chartmarks.compiler.encoders.base import MarkEncoder
from chartmarks.compiler.encoders.point import centered_position
from chartmarks.compiler.mixins import marks_config_properties, opacity_mixin
from chartmarks.constants import BIN_MID_SUFFIX, TEXT_QUANTITATIVE_X_OFFSET
from chartmarks.core.enums import Channel, FieldType, GroupDimension
from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap

TEXT_STYLE_KEYS = [
    "angle",
    "align",
    "baseline",
    "dx",
    "dy",
    "fill",
    "font",
    "fontWeight",
    "fontStyle",
    "radius",
    "theta",
]


def _has_quantitative_text(model: Model) -> bool:
    return (
        model.has(Channel.TEXT)
        and model.field_def(Channel.TEXT).type == FieldType.QUANTITATIVE
    )


def number_template(model: Model) -> str:
    number_format = model.config.marks.format
    if number_format is None:
        number_format = model.number_format(Channel.TEXT)
    field = model.field(Channel.TEXT, datum=True)
    return "{{" + field + " | number:'" + number_format + "'}}"


def text_position(model: Model) -> PropertyMap:
    if model.has(Channel.X):
        x = scale_field(model, Channel.X, bin_suffix=BIN_MID_SUFFIX)
    elif _has_quantitative_text(model):
        # numbers line up against the right edge of the cell
        x = group_ref(GroupDimension.WIDTH, offset=TEXT_QUANTITATIVE_X_OFFSET)
    else:
        x = half_band(model, Channel.X)
    return {"x": x, "y": centered_position(model, Channel.Y)}


def text_content(model: Model) -> PropertyMap:
    if not model.has(Channel.TEXT):
        return {"text": literal(model.field_def(Channel.TEXT).value)}
    if _has_quantitative_text(model):
        return {"text": template(number_template(model))}
    return {"text": field_ref(model.field(Channel.TEXT))}


class TextEncoder(MarkEncoder):
    def background(self, model: Model) -> PropertyMap:
        return {
            "x": literal(0),
            "y": literal(0),
            "width": group_ref(GroupDimension.WIDTH),
            "height": group_ref(GroupDimension.HEIGHT),
            "fill": scale_field(model, Channel.COLOR),
        }

    def properties(self, model: Model) -> PropertyMap:
        marks = model.config.marks
        if model.has(Channel.SIZE):
            font_size = scale_field(model, Channel.SIZE)
        else:
            font_size = literal(marks.font_size)
        return merge_properties(
            text_position(model),
            {"fontSize": font_size},
            opacity_mixin(model),
            text_content(model),
            marks_config_properties(marks, TEXT_STYLE_KEYS),
        )
