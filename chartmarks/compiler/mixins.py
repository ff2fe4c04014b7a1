from typing import Iterable

from chartmarks.compiler.bindings import channel_or_value, literal
from chartmarks.core.enums import Channel
from chartmarks.core.model import Model
from chartmarks.core.models.marks import PropertyMap
from chartmarks.core.models.spec import MarksConfig


def color_mixins(model: Model) -> PropertyMap:
    """Map the color channel to fill for filled marks, else to stroke."""
    color = channel_or_value(model, Channel.COLOR)
    marks = model.config.marks
    if marks.filled:
        return {"fill": color}
    return {"stroke": color, "strokeWidth": literal(marks.stroke_width)}


def opacity_mixin(model: Model) -> PropertyMap:
    opacity = model.config.marks.opacity
    # zero means unset, the renderer default applies
    if not opacity:
        return {}
    return {"opacity": literal(opacity)}


def apply_marks_config(
    properties: PropertyMap, marks_config: MarksConfig, keys: Iterable[str]
) -> PropertyMap:
    """Return properties extended with a literal for every configured key."""
    applied = dict(properties)
    for key in keys:
        value = marks_config.value_for(key)
        if value is not None:
            applied[key] = literal(value)
    return applied


def marks_config_properties(
    marks_config: MarksConfig, keys: Iterable[str]
) -> PropertyMap:
    return apply_marks_config({}, marks_config, keys)
