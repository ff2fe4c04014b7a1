from chartmarks.compiler.detail import detail_fields
from chartmarks.compiler.encoders import ENCODERS, MarkEncoder
from chartmarks.compiler.marks import compile_marks, compile_marks_to_dicts

__all__ = [
    "ENCODERS",
    "MarkEncoder",
    "compile_marks",
    "compile_marks_to_dicts",
    "detail_fields",
]
