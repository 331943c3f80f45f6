"""User-input acceptance and sample graph generation."""

from schedule_trace.intake.parser import (
    DEFAULT_LIMITS,
    InputError,
    InputLimits,
    parse_course_count,
    parse_prerequisites,
    validate_edges,
)
from schedule_trace.intake.random_dag import random_dag

__all__ = [
    "DEFAULT_LIMITS",
    "InputError",
    "InputLimits",
    "parse_course_count",
    "parse_prerequisites",
    "random_dag",
    "validate_edges",
]
