"""Domain model for schedule-trace.

Re-exports all public types for convenient access:
    from schedule_trace.domain import Step, NodeState, Instruction
"""
from schedule_trace.domain.node_state import (
    InvalidTransition,
    VALID_TRANSITIONS,
    is_forward,
    transition,
)
from schedule_trace.domain.step import ActiveEdge, Step, VariableBinding
from schedule_trace.domain.types import Edge, Instruction, NodeId, NodeState

__all__ = [
    "ActiveEdge",
    "Edge",
    "Instruction",
    "InvalidTransition",
    "NodeId",
    "NodeState",
    "Step",
    "VALID_TRANSITIONS",
    "VariableBinding",
    "is_forward",
    "transition",
]
