from chartmarks.compiler import ENCODERS, compile_marks, compile_marks_to_dicts
from chartmarks.core.enums import Channel, MarkKind
from chartmarks.core.model import Model
from chartmarks.core.models.spec import Spec, parse_spec

__version__ = "0.1.0"

__all__ = [
    "Channel",
    "ENCODERS",
    "MarkKind",
    "Model",
    "Spec",
    "compile_marks",
    "compile_marks_to_dicts",
    "parse_spec",
]
