"""Text offsets and ranges."""

from traderfmt.text.text import TextRange, TextSize, line_column, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "line_column",
    "slice_text_range",
]
