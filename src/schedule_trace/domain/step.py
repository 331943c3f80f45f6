"""Step -- one frozen snapshot of the algorithm's state.

A Step is what the playback and rendering layers see.  The generator
owns a handful of mutable working structures (in-degree list, queue,
node-state dict) and mutates them in place; every Step takes its own
copy at the moment it is emitted.  Containers are stored as tuples and
a read-only mapping proxy, so a Step cannot be changed after the fact
and nothing the generator does later can leak into it.

Two helpers:
  - ``Step.capture`` -- build a Step from live working state (copies)
  - ``Step.to_dict`` -- JSON-ready representation for external players
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from schedule_trace.domain.types import Instruction, NodeId, NodeState


@dataclass(frozen=True, slots=True)
class VariableBinding:
    """A name=value pair shown next to the listing line of *instruction*."""
    name: str
    value: str
    instruction: Instruction


@dataclass(frozen=True, slots=True)
class ActiveEdge:
    source: NodeId
    target: NodeId


@dataclass(frozen=True, slots=True)
class Step:
    sequence_id: int
    description: str
    instruction: Instruction
    variables: tuple[VariableBinding, ...]
    node_states: Mapping[NodeId, NodeState]
    highlighted_edge: ActiveEdge | None
    in_degree: tuple[int, ...]
    queue: tuple[NodeId, ...]
    learn_count: int

    # node_states is a mapping proxy, so Steps compare by value but are not hashable
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def capture(
        cls,
        sequence_id: int,
        description: str,
        instruction: Instruction,
        *,
        node_states: Mapping[NodeId, NodeState],
        in_degree: Iterable[int],
        queue: Iterable[NodeId],
        learn_count: int,
        variables: Iterable[VariableBinding] = (),
        highlighted_edge: ActiveEdge | None = None,
    ) -> Step:
        """Build a Step from live working structures, copying each one."""
        return cls(
            sequence_id=sequence_id,
            description=description,
            instruction=instruction,
            variables=tuple(variables),
            node_states=MappingProxyType(dict(node_states)),
            highlighted_edge=highlighted_edge,
            in_degree=tuple(in_degree),
            queue=tuple(queue),
            learn_count=learn_count,
        )

    def binding(self, name: str) -> str:
        """Value of the variable binding called *name*.

        Raises KeyError if this Step has no such binding.
        """
        for v in self.variables:
            if v.name == name:
                return v.value
        raise KeyError(name)

    def to_dict(self) -> dict[str, Any]:
        edge = self.highlighted_edge
        return {
            "sequenceId": self.sequence_id,
            "description": self.description,
            "instruction": self.instruction.name,
            "variables": [
                {"name": v.name, "value": v.value, "instruction": v.instruction.name}
                for v in self.variables
            ],
            "nodeStates": {
                str(node): state.value for node, state in self.node_states.items()
            },
            "highlightedEdge": (
                None if edge is None
                else {"source": edge.source, "target": edge.target}
            ),
            "inDegree": list(self.in_degree),
            "queue": list(self.queue),
            "learnCount": self.learn_count,
        }
