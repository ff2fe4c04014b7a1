from typing import Any, Mapping

from chartmarks.compiler.bindings import group_ref
from chartmarks.compiler.detail import detail_fields
from chartmarks.compiler.encoders import ENCODERS, MarkEncoder
from chartmarks.compiler.stack import impute_transform, stack_transform
from chartmarks.constants import LOGGER_PREFIX, logger
from chartmarks.core.enums import (
    Channel,
    GroupDimension,
    MarkKind,
    Orient,
    PrimitiveType,
)
from chartmarks.core.model import Model
from chartmarks.core.models.marks import (
    FacetTransform,
    From,
    MarkNode,
    Properties,
    PropertyMap,
    SortTransform,
    Transform,
)


def _node_name(model: Model, suffix: str) -> str | None:
    if model.name:
        return f"{model.name}-{suffix}"
    return None


def _from(data: str | None, transform: list[Transform] | None = None) -> From | None:
    source = From(data=data, transform=transform or None)
    if source.is_empty:
        return None
    return source


def build_mark_node(
    type: PrimitiveType,
    properties: PropertyMap,
    name: str | None = None,
    source: From | None = None,
    marks: list[MarkNode] | None = None,
) -> MarkNode:
    return MarkNode(
        name=name,
        type=type,
        from_=source,
        properties=Properties(update=properties),
        marks=marks,
    )


def path_sort(model: Model) -> SortTransform | None:
    """Sort path marks along their dimension, descending."""
    if model.mark == MarkKind.LINE and model.config.sort_line_by:
        return SortTransform(by=model.config.sort_line_by)
    horizontal = model.config.marks.orient == Orient.HORIZONTAL
    channel = Channel.Y if horizontal else Channel.X
    if not model.has(channel):
        logger.debug(
            f"{LOGGER_PREFIX} no {channel.value} channel to sort {model.mark.value} by"
        )
        return None
    return SortTransform(by="-" + model.field(channel))


def _compile_path_marks(model: Model, encoder: MarkEncoder) -> list[MarkNode]:
    details = detail_fields(model)
    faceted = model.is_faceted()
    sort = path_sort(model)
    # faceted models and detail groups get their data from the enclosing group
    path_data = None if faceted or details else model.data_table()
    path = build_mark_node(
        model.mark.primitive,
        encoder.properties(model),
        name=_node_name(model, "marks"),
        source=_from(path_data, [sort] if sort else None),
    )
    if not details:
        logger.debug(f"{LOGGER_PREFIX} single {model.mark.value} path")
        return [path]

    transform: list[Transform] = [FacetTransform(groupby=details)]
    if model.mark == MarkKind.AREA and model.stack():
        transform = [impute_transform(model), stack_transform(model), *transform]
    logger.debug(
        f"{LOGGER_PREFIX} grouping {model.mark.value} paths by detail fields {details}"
    )
    group_name = f"{model.name}-" if model.name else ""
    group = build_mark_node(
        PrimitiveType.GROUP,
        {
            "width": group_ref(GroupDimension.WIDTH),
            "height": group_ref(GroupDimension.HEIGHT),
        },
        name=group_name + f"{model.mark.value}-facet",
        source=_from(None if faceted else model.data_table(), transform),
        marks=[path],
    )
    return [group]


def _compile_discrete_marks(model: Model, encoder: MarkEncoder) -> list[MarkNode]:
    faceted = model.is_faceted()
    stack = model.stack()
    data = None if faceted else model.data_table()
    marks: list[MarkNode] = []

    if model.mark == MarkKind.TEXT and model.has(Channel.COLOR):
        background = encoder.background(model)
        if background:
            marks.append(
                build_mark_node(
                    PrimitiveType.RECT,
                    background,
                    name=_node_name(model, "background"),
                    source=_from(data),
                )
            )

    source = None
    if not faceted or stack:
        source = _from(data, [stack_transform(model)] if stack else None)
    marks.append(
        build_mark_node(
            model.mark.primitive,
            encoder.properties(model),
            name=_node_name(model, "marks"),
            source=source,
        )
    )

    if model.has(Channel.LABEL):
        labels = encoder.labels(model)
        if labels:
            marks.append(
                build_mark_node(
                    PrimitiveType.TEXT,
                    labels,
                    name=_node_name(model, "label"),
                    source=_from(data),
                )
            )
        else:
            logger.debug(
                f"{LOGGER_PREFIX} {model.mark.value} marks have no label support"
            )
    return marks


def compile_marks(
    model: Model, encoders: Mapping[MarkKind, MarkEncoder] = ENCODERS
) -> list[MarkNode]:
    """Translate a resolved model into its ordered list of output marks:
    background, then the marks themselves, then any label overlay."""
    encoder = encoders[model.mark]
    logger.debug(
        f"{LOGGER_PREFIX} compiling {model.mark.value} marks"
        f" (faceted={model.is_faceted()}, stacked={model.stack() is not None})"
    )
    if model.mark.is_path:
        return _compile_path_marks(model, encoder)
    return _compile_discrete_marks(model, encoder)


def compile_marks_to_dicts(
    model: Model, encoders: Mapping[MarkKind, MarkEncoder] = ENCODERS
) -> list[dict[str, Any]]:
    return [node.to_dict() for node in compile_marks(model, encoders)]
