"""Code listing and text rendering for traces."""

from schedule_trace.display.listing import (
    CANONICAL_LISTING,
    INSTRUCTION_LINES,
    line_for,
    render_listing,
    variable_line,
)
from schedule_trace.display.report import (
    dequeue_order,
    format_step,
    format_summary,
    stuck_nodes,
)

__all__ = [
    "CANONICAL_LISTING",
    "INSTRUCTION_LINES",
    "dequeue_order",
    "format_step",
    "format_summary",
    "line_for",
    "render_listing",
    "stuck_nodes",
    "variable_line",
]
