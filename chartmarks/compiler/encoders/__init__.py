from chartmarks.compiler.encoders.area import AreaEncoder
from chartmarks.compiler.encoders.bar import BarEncoder
from chartmarks.compiler.encoders.base import MarkEncoder
from chartmarks.compiler.encoders.line import LineEncoder
from chartmarks.compiler.encoders.point import FilledPointEncoder, PointEncoder
from chartmarks.compiler.encoders.text import TextEncoder
from chartmarks.compiler.encoders.tick import TickEncoder
from chartmarks.core.enums import MarkKind

ENCODERS: dict[MarkKind, MarkEncoder] = {
    MarkKind.BAR: BarEncoder(),
    MarkKind.TICK: TickEncoder(),
    MarkKind.POINT: PointEncoder(),
    MarkKind.LINE: LineEncoder(),
    MarkKind.AREA: AreaEncoder(),
    MarkKind.TEXT: TextEncoder(),
    MarkKind.CIRCLE: FilledPointEncoder("circle"),
    MarkKind.SQUARE: FilledPointEncoder("square"),
}

_missing = set(MarkKind) - set(ENCODERS)
if _missing:
    raise NotImplementedError(
        f"No encoder registered for mark kinds {sorted(m.value for m in _missing)}"
    )

__all__ = [
    "ENCODERS",
    "AreaEncoder",
    "BarEncoder",
    "FilledPointEncoder",
    "LineEncoder",
    "MarkEncoder",
    "PointEncoder",
    "TextEncoder",
    "TickEncoder",
]
