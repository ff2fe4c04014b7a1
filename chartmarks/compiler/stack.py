from chartmarks.constants import STACK_END_SUFFIX, STACK_START_SUFFIX
from chartmarks.core.enums import StackSort
from chartmarks.core.exceptions import MissingCapabilityException
from chartmarks.core.model import Model, StackInfo
from chartmarks.core.models.marks import ImputeTransform, StackOutput, StackTransform


def _require_stack(model: Model) -> StackInfo:
    stack = model.stack()
    if stack is None:
        raise MissingCapabilityException(
            f"Stack transform requested for unstacked {model.mark.value} mark"
        )
    return stack


def stack_sort_by(stack: StackInfo) -> list[str]:
    if isinstance(stack.config.sort, list):
        return list(stack.config.sort)
    if stack.config.sort == StackSort.DESCENDING:
        return ["-" + field for field in stack.stack_fields]
    return list(stack.stack_fields)


def stack_transform(model: Model) -> StackTransform:
    stack = _require_stack(model)
    value_field = model.field(stack.field_channel)
    return StackTransform(
        groupby=[model.field(stack.groupby_channel)],
        field=value_field,
        sortby=stack_sort_by(stack),
        output=StackOutput(
            start=value_field + STACK_START_SUFFIX,
            end=value_field + STACK_END_SUFFIX,
        ),
        offset=stack.config.offset.value if stack.config.offset else None,
    )


def impute_transform(model: Model) -> ImputeTransform:
    """Fill missing series values with zero so stacked areas have no gaps."""
    stack = _require_stack(model)
    return ImputeTransform(
        field=model.field(stack.field_channel),
        groupby=list(stack.stack_fields),
        orderby=[model.field(stack.groupby_channel)],
        method="value",
        value=0,
    )
