from dataclasses import dataclass
from typing import Any, Mapping

from chartmarks.constants import (
    BIN_START_SUFFIX,
    DEFAULT_COLOR,
    DEFAULT_SHAPE,
    DEFAULT_SIZE,
    DEFAULT_TEXT,
)
from chartmarks.core.enums import (
    Channel,
    DataTable,
    FieldType,
    MarkKind,
    ScaleType,
)
from chartmarks.core.exceptions import MissingCapabilityException
from chartmarks.core.models.spec import ChartConfig, FieldDef, Spec, StackConfig

COUNT_AGGREGATE = "count"

CHANNEL_DEFAULT_VALUES: dict[Channel, Any] = {
    Channel.COLOR: DEFAULT_COLOR,
    Channel.SIZE: DEFAULT_SIZE,
    Channel.SHAPE: DEFAULT_SHAPE,
    Channel.TEXT: DEFAULT_TEXT,
}

# stack channels in priority order
STACK_CHANNELS = [Channel.COLOR, Channel.DETAIL]

DETAIL_CHANNELS = [Channel.COLOR, Channel.DETAIL, Channel.SHAPE]

STACKABLE_MARKS = [MarkKind.BAR, MarkKind.AREA]

UNFILLED_MARKS = [MarkKind.POINT, MarkKind.LINE]


@dataclass(frozen=True)
class StackInfo:
    groupby_channel: Channel
    field_channel: Channel
    stack_channel: Channel
    stack_fields: tuple[str, ...]
    config: StackConfig


def _resolve_field_def(channel: Channel, field_def: FieldDef | None) -> FieldDef:
    default = CHANNEL_DEFAULT_VALUES.get(channel)
    if field_def is None:
        return FieldDef(value=default)
    if field_def.value is None and default is not None:
        return field_def.model_copy(update={"value": default})
    return field_def


class Model:
    """Read-only view over a validated spec, answering the questions the mark
    compiler asks about each channel."""

    def __init__(self, spec: Spec, scales: Mapping[Channel, str] | None = None):
        self._spec = spec
        self._scales = dict(scales) if scales is not None else None
        self._field_defs = {
            channel: _resolve_field_def(channel, spec.encoding.get(channel))
            for channel in Channel
        }
        marks = spec.config.marks
        if marks.filled is None:
            marks = marks.model_copy(
                update={"filled": spec.mark not in UNFILLED_MARKS}
            )
        self._config = spec.config.model_copy(update={"marks": marks})
        self._stack = self._compile_stack()

    @property
    def spec(self) -> Spec:
        return self._spec

    @property
    def mark(self) -> MarkKind:
        return self._spec.mark

    @property
    def name(self) -> str | None:
        return self._spec.name

    @property
    def config(self) -> ChartConfig:
        return self._config

    def has(self, channel: Channel) -> bool:
        field_def = self._spec.encoding.get(channel)
        if field_def is None:
            return False
        return field_def.field is not None or field_def.aggregate == COUNT_AGGREGATE

    def field_def(self, channel: Channel) -> FieldDef:
        return self._field_defs[channel]

    def field(
        self, channel: Channel, bin_suffix: str | None = None, datum: bool = False
    ) -> str:
        field_def = self.field_def(channel)
        prefix = "datum." if datum else ""
        if field_def.aggregate == COUNT_AGGREGATE:
            return prefix + COUNT_AGGREGATE
        if field_def.field is None:
            raise MissingCapabilityException(
                f"Channel {channel.value} has no field to reference", channel=channel
            )
        if field_def.bin:
            return f"{prefix}bin_{field_def.field}{bin_suffix or BIN_START_SUFFIX}"
        if field_def.aggregate:
            return f"{prefix}{field_def.aggregate}_{field_def.field}"
        return prefix + field_def.field

    def scale_name(self, channel: Channel) -> str:
        """Name of the scale a channel would use, whether or not it is bound."""
        if self._scales is not None and channel in self._scales:
            return self._scales[channel]
        return channel.value

    def scale(self, channel: Channel) -> str:
        if not self.has(channel):
            raise MissingCapabilityException(
                f"Channel {channel.value} is not bound and has no scale",
                channel=channel,
            )
        if self._scales is None:
            return channel.value
        try:
            return self._scales[channel]
        except KeyError as e:
            raise MissingCapabilityException(
                f"No scale resolved for bound channel {channel.value}",
                channel=channel,
            ) from e

    def is_dimension(self, channel: Channel) -> bool:
        if not self.has(channel):
            return False
        field_def = self.field_def(channel)
        return field_def.bin or field_def.type in (FieldType.NOMINAL, FieldType.ORDINAL)

    def is_measure(self, channel: Channel) -> bool:
        return self.has(channel) and not self.is_dimension(channel)

    def is_ordinal_scale(self, channel: Channel) -> bool:
        if not self.has(channel):
            return False
        field_def = self.field_def(channel)
        if field_def.bin:
            return False
        if field_def.scale.type is not None:
            return field_def.scale.type == ScaleType.ORDINAL
        return field_def.type in (FieldType.NOMINAL, FieldType.ORDINAL)

    def is_aggregate(self) -> bool:
        return any(
            self.has(channel) and self.field_def(channel).aggregate
            for channel in Channel
        )

    def is_faceted(self) -> bool:
        return self.has(Channel.ROW) or self.has(Channel.COLUMN)

    def data_table(self) -> str:
        if self.is_aggregate():
            return DataTable.SUMMARY.value
        return DataTable.SOURCE.value

    def number_format(self, channel: Channel) -> str:
        return self.field_def(channel).format or self._config.number_format

    def stack(self) -> StackInfo | None:
        return self._stack

    def _compile_stack(self) -> StackInfo | None:
        if self.mark not in STACKABLE_MARKS or not self._config.stack.enabled:
            return None
        stack_channel = next(
            (
                channel
                for channel in STACK_CHANNELS
                if self.has(channel) and not self.field_def(channel).aggregate
            ),
            None,
        )
        if stack_channel is None:
            return None
        if self.is_measure(Channel.X) and self.is_dimension(Channel.Y):
            field_channel, groupby_channel = Channel.X, Channel.Y
        elif self.is_measure(Channel.Y) and self.is_dimension(Channel.X):
            field_channel, groupby_channel = Channel.Y, Channel.X
        else:
            return None
        stack_fields = tuple(
            self.field(channel)
            for channel in DETAIL_CHANNELS
            if self.has(channel) and not self.field_def(channel).aggregate
        )
        return StackInfo(
            groupby_channel=groupby_channel,
            field_channel=field_channel,
            stack_channel=stack_channel,
            stack_fields=stack_fields,
            config=self._config.stack,
        )
