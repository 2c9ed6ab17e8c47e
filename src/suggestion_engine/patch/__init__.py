"""Line modifications and the applicator that merges them into buffers."""

from .applicator import MalformedPatch, apply_modifications, normalize, shift_line
from .diff import diff_lines
from .modification import (
    Delete,
    Insert,
    LineRange,
    Modification,
    Replace,
    deleted,
    inserted,
    replaced,
)

__all__ = [
    "Delete",
    "Insert",
    "LineRange",
    "MalformedPatch",
    "Modification",
    "Replace",
    "apply_modifications",
    "deleted",
    "diff_lines",
    "inserted",
    "normalize",
    "replaced",
    "shift_line",
]
