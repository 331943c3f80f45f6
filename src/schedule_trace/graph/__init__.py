"""Graph algorithms: normalizer, traced Kahn's sort, oracle, cycle finder."""

from schedule_trace.graph.adjacency import PrerequisiteGraph, normalize
from schedule_trace.graph.cycle_detector import CycleResult, detect_cycle
from schedule_trace.graph.oracle import (
    can_finish,
    compute_initial_in_degree,
    learn_order,
)
from schedule_trace.graph.trace_generator import Trace, generate_trace

__all__ = [
    "CycleResult",
    "PrerequisiteGraph",
    "Trace",
    "can_finish",
    "compute_initial_in_degree",
    "detect_cycle",
    "generate_trace",
    "learn_order",
    "normalize",
]
