"""Canonical code listing and instruction -> line mapping.

Steps carry an Instruction tag, not a line number.  This module owns
one concrete listing (the classic Java ``canFinish`` solution) and
decides which of its lines each tag and each variable binding points
at.  A different front end can ship its own listing and table without
touching the generator.
"""
from __future__ import annotations

from schedule_trace.domain.step import Step, VariableBinding
from schedule_trace.domain.types import Instruction

CANONICAL_LISTING: tuple[str, ...] = tuple("""\
class Solution {
    public boolean canFinish(int numCourses, int[][] prerequisites) {
        // topological sort
        // build the adjacency list and count in-degrees
        Map<Integer, List<Integer>> nextMap = new HashMap<>();
        int[] ingressCount = new int[numCourses];
        Arrays.fill(ingressCount, 0);
        for (int[] p : prerequisites) {
            int from = p[0];
            int to = p[1];
            ingressCount[to]++;
            List<Integer> nextList = nextMap.getOrDefault(from, new ArrayList<>());
            nextList.add(to);
            nextMap.put(from, nextList);
        }
        // start the topological sort
        Queue<Integer> queue = new LinkedList<>();
        for (int i = 0; i < ingressCount.length; i++) {
            if (ingressCount[i] == 0) {
                queue.offer(i);
            }
        }
        int learnCount = 0;
        while (!queue.isEmpty()) {
            int course = queue.poll();
            List<Integer> nextList = nextMap.get(course);
            if (nextList != null) {
                for (int toCourse : nextList) {
                    ingressCount[toCourse]--;
                    if (ingressCount[toCourse] == 0) {
                        queue.offer(toCourse);
                    }
                }
            }
            learnCount++;
        }
        return learnCount == numCourses;
    }
}""".split("\n"))

# 1-indexed line numbers into CANONICAL_LISTING
INSTRUCTION_LINES: dict[Instruction, int] = {
    Instruction.INIT: 5,
    Instruction.REGISTER_EDGE: 11,
    Instruction.BEGIN_SCAN: 17,
    Instruction.SEED_QUEUE: 20,
    Instruction.DEQUEUE: 25,
    Instruction.RELAX_EDGE: 29,
    Instruction.ENQUEUE: 31,
    Instruction.ADVANCE_COUNT: 35,
    Instruction.TERMINAL: 37,
}

# bindings shown somewhere other than their instruction's own line
_VARIABLE_LINES: dict[tuple[Instruction, str], int] = {
    (Instruction.INIT, "numCourses"): 2,
    (Instruction.REGISTER_EDGE, "from"): 9,
    (Instruction.REGISTER_EDGE, "to"): 10,
    (Instruction.SEED_QUEUE, "i"): 18,
    (Instruction.SEED_QUEUE, "ingressCount[i]"): 19,
    (Instruction.RELAX_EDGE, "toCourse"): 28,
    (Instruction.ENQUEUE, "toCourse"): 28,
    (Instruction.ENQUEUE, "ingressCount[toCourse]"): 30,
}


def line_for(instruction: Instruction) -> int:
    return INSTRUCTION_LINES[instruction]


def variable_line(binding: VariableBinding) -> int:
    """Listing line a binding is displayed against."""
    return _VARIABLE_LINES.get(
        (binding.instruction, binding.name), line_for(binding.instruction)
    )


def render_listing(step: Step) -> str:
    """The listing with the active line marked and bindings annotated."""
    active = line_for(step.instruction)
    by_line: dict[int, list[str]] = {}
    for binding in step.variables:
        by_line.setdefault(variable_line(binding), []).append(
            f"{binding.name}={binding.value}"
        )

    out = []
    for lineno, text in enumerate(CANONICAL_LISTING, start=1):
        marker = ">" if lineno == active else " "
        line = f"{marker} {lineno:>3}  {text}"
        if lineno in by_line:
            line += "    // " + ", ".join(by_line[lineno])
        out.append(line)
    return "\n".join(out)
