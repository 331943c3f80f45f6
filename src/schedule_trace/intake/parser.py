"""Input acceptance for course counts and prerequisite lists.

The trace generator trusts its input completely.  Anything typed by a
user goes through here first: the course count must be an integer in
range, and the prerequisites must be a JSON array of ``[a, b]`` integer
pairs with both ends in ``[0, count)``.  JSON has one number type, so a
whole float such as ``1.0`` is taken as the integer 1.  Self-loops and
repeated pairs are rejected by default because they make the
visualization confusing, not because the algorithm cannot handle them.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from schedule_trace.domain.types import Edge

log = logging.getLogger(__name__)


class InputError(ValueError):
    """Raised when user input cannot be turned into a valid graph.

    ``position`` is the 1-based index of the offending prerequisite
    pair, or None when the problem is not tied to one pair.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)


@dataclass(slots=True, frozen=True)
class InputLimits:
    min_courses: int = 1
    max_courses: int = 20
    allow_self_loops: bool = False
    allow_duplicates: bool = False


DEFAULT_LIMITS = InputLimits()


def _reject(message: str, position: int | None = None) -> InputError:
    log.debug("rejected input: %s", message)
    return InputError(message, position)


def _as_course_id(value: object) -> int | None:
    """*value* as an int course id, or None if it is not a whole number.

    JSON has a single number type, so ``1.0`` is accepted as course 1.
    bool is an int subclass; JSON true/false are not course ids.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def parse_course_count(text: str, limits: InputLimits = DEFAULT_LIMITS) -> int:
    """Parse the number of courses from *text*."""
    trimmed = text.strip()
    if not trimmed:
        raise _reject("Enter the number of courses")
    try:
        count = int(trimmed)
    except ValueError:
        raise _reject(f"Number of courses must be an integer, got {trimmed!r}") from None
    if not limits.min_courses <= count <= limits.max_courses:
        raise _reject(
            f"Number of courses must be between {limits.min_courses} "
            f"and {limits.max_courses}"
        )
    return count


def validate_edges(
    count: int,
    edges: Iterable[Sequence[object]],
    limits: InputLimits = DEFAULT_LIMITS,
) -> list[Edge]:
    """Check already-structured pairs and return them as tuples."""
    seen: set[Edge] = set()
    result: list[Edge] = []
    for pos, pair in enumerate(edges, start=1):
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise _reject(f"Prerequisite {pos} must be a pair [a, b]", pos)
        a, b = _as_course_id(pair[0]), _as_course_id(pair[1])
        if a is None or b is None:
            raise _reject(f"Course ids in prerequisite {pos} must be integers", pos)
        for course in (a, b):
            if not 0 <= course < count:
                raise _reject(
                    f"Course {course} in prerequisite {pos} is out of range "
                    f"(0-{count - 1})",
                    pos,
                )
        edge = (a, b)
        if a == b and not limits.allow_self_loops:
            raise _reject(f"Course in prerequisite {pos} cannot depend on itself", pos)
        if edge in seen and not limits.allow_duplicates:
            raise _reject(f"Duplicate prerequisite [{a}, {b}]", pos)
        seen.add(edge)
        result.append(edge)
    return result


def parse_prerequisites(
    text: str,
    count: int,
    limits: InputLimits = DEFAULT_LIMITS,
) -> list[Edge]:
    """Parse a JSON array of ``[from, to]`` pairs from *text*."""
    trimmed = text.strip()
    if not trimmed:
        raise _reject("Enter the prerequisite array")
    try:
        data = json.loads(trimmed)
    except json.JSONDecodeError:
        raise _reject(
            "Prerequisites must be a JSON array, e.g. [[1,0],[2,1]]"
        ) from None
    if not isinstance(data, list):
        raise _reject("Prerequisites must be an array, e.g. [[1,0],[2,1]]")
    return validate_edges(count, data, limits)
