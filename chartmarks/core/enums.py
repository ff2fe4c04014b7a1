from enum import Enum


class Channel(Enum):
    X = "x"
    Y = "y"
    COLOR = "color"
    SIZE = "size"
    SHAPE = "shape"
    DETAIL = "detail"
    TEXT = "text"
    ROW = "row"
    COLUMN = "column"
    LABEL = "label"


class MarkKind(Enum):
    BAR = "bar"
    TICK = "tick"
    POINT = "point"
    LINE = "line"
    AREA = "area"
    TEXT = "text"
    CIRCLE = "circle"
    SQUARE = "square"

    @property
    def primitive(self) -> "PrimitiveType":
        return MARK_PRIMITIVES[self]

    @property
    def is_path(self) -> bool:
        return self in (MarkKind.LINE, MarkKind.AREA)


class PrimitiveType(Enum):
    RECT = "rect"
    SYMBOL = "symbol"
    LINE = "line"
    AREA = "area"
    TEXT = "text"
    GROUP = "group"


MARK_PRIMITIVES: dict[MarkKind, PrimitiveType] = {
    MarkKind.BAR: PrimitiveType.RECT,
    MarkKind.TICK: PrimitiveType.RECT,
    MarkKind.POINT: PrimitiveType.SYMBOL,
    MarkKind.CIRCLE: PrimitiveType.SYMBOL,
    MarkKind.SQUARE: PrimitiveType.SYMBOL,
    MarkKind.LINE: PrimitiveType.LINE,
    MarkKind.AREA: PrimitiveType.AREA,
    MarkKind.TEXT: PrimitiveType.TEXT,
}


class FieldType(Enum):
    QUANTITATIVE = "quantitative"
    ORDINAL = "ordinal"
    TEMPORAL = "temporal"
    NOMINAL = "nominal"

    @classmethod
    def _missing_(cls, value):
        shorthand = {"Q": "quantitative", "O": "ordinal", "T": "temporal", "N": "nominal"}
        if isinstance(value, str) and value.upper() in shorthand:
            return cls(shorthand[value.upper()])
        return super()._missing_(value)


class ScaleType(Enum):
    ORDINAL = "ordinal"
    LINEAR = "linear"
    LOG = "log"
    POW = "pow"
    SQRT = "sqrt"
    TIME = "time"


class Orient(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class DataTable(Enum):
    SOURCE = "source"
    SUMMARY = "summary"


class StackSort(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class StackOffset(Enum):
    ZERO = "zero"
    CENTER = "center"
    NORMALIZE = "normalize"
    NONE = "none"


class GroupDimension(Enum):
    WIDTH = "width"
    HEIGHT = "height"
