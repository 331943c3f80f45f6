"""schedule-trace: replayable step-by-step trace of Kahn's topological sort.

    from schedule_trace.graph import generate_trace, can_finish
"""

__version__ = "0.1.0"
