"""Tests for Step snapshots."""
import dataclasses
import json
from collections import deque

import pytest

from schedule_trace.domain.step import ActiveEdge, Step, VariableBinding
from schedule_trace.domain.types import Instruction, NodeState


def _capture(states, in_deg, queue, **kwargs):
    return Step.capture(
        0, "test", Instruction.RELAX_EDGE,
        node_states=states, in_degree=in_deg, queue=queue, learn_count=1,
        **kwargs,
    )


def test_capture_copies_containers():
    states = {0: NodeState.COMPLETED, 1: NodeState.UNVISITED}
    in_deg = [0, 1]
    queue = deque([1])
    step = _capture(states, in_deg, queue)

    states[1] = NodeState.IN_QUEUE
    in_deg[1] = 0
    queue.append(0)

    assert step.node_states[1] is NodeState.UNVISITED
    assert step.in_degree == (0, 1)
    assert step.queue == (1,)


def test_containers_are_immutable():
    step = _capture({0: NodeState.UNVISITED}, [0], [])
    assert isinstance(step.in_degree, tuple)
    assert isinstance(step.queue, tuple)
    assert isinstance(step.variables, tuple)
    with pytest.raises(TypeError):
        step.node_states[0] = NodeState.COMPLETED


def test_frozen():
    step = _capture({}, [], [])
    with pytest.raises(dataclasses.FrozenInstanceError):
        step.description = "changed"


def test_equal_captures_compare_equal():
    a = _capture({0: NodeState.IN_QUEUE}, [0], [0])
    b = _capture({0: NodeState.IN_QUEUE}, [0], [0])
    assert a == b


def test_to_dict_is_json_ready():
    step = _capture(
        {0: NodeState.COMPLETED, 1: NodeState.IN_QUEUE},
        [0, 0],
        [1],
        variables=[VariableBinding("toCourse", "1", Instruction.RELAX_EDGE)],
        highlighted_edge=ActiveEdge(0, 1),
    )
    data = step.to_dict()
    assert data == {
        "sequenceId": 0,
        "description": "test",
        "instruction": "RELAX_EDGE",
        "variables": [
            {"name": "toCourse", "value": "1", "instruction": "RELAX_EDGE"},
        ],
        "nodeStates": {"0": "completed", "1": "in-queue"},
        "highlightedEdge": {"source": 0, "target": 1},
        "inDegree": [0, 0],
        "queue": [1],
        "learnCount": 1,
    }
    json.dumps(data)


def test_to_dict_without_edge():
    step = _capture({}, [], [])
    assert step.to_dict()["highlightedEdge"] is None


def test_steps_are_unhashable():
    step = _capture({0: NodeState.UNVISITED}, [0], [])
    assert Step.__hash__ is None
    with pytest.raises(TypeError, match="unhashable type: 'Step'"):
        hash(step)


def test_binding_lookup_by_name():
    step = _capture(
        {}, [], [],
        variables=[
            VariableBinding("toCourse", "2", Instruction.RELAX_EDGE),
            VariableBinding("ingressCount[toCourse]", "0", Instruction.RELAX_EDGE),
        ],
    )
    assert step.binding("ingressCount[toCourse]") == "0"
    assert step.binding("toCourse") == "2"
    with pytest.raises(KeyError):
        step.binding("course")
