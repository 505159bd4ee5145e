"""Report formatting: console change log, colors, markdown comment."""

from report.comment_format import append_comment, format_comment
from report.diff_format import format_diff, format_diff_lines, order_by_magnitude
from report.ux import format_bytes, format_sign, should_use_color

__all__ = [
    "append_comment",
    "format_bytes",
    "format_comment",
    "format_diff",
    "format_diff_lines",
    "format_sign",
    "order_by_magnitude",
    "should_use_color",
]
