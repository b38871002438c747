"""Optional forward-only rule for pipeline stage moves.

Stage is a free classification: the store accepts any of the five values.
This module is only consulted when ``settings.enforce_forward_stages`` is on.
"""
from hiretrack.models.candidate import Stage, STAGE_ORDER
from hiretrack.utils.exceptions import StageTransitionError


def is_forward_transition(current: Stage, new: Stage) -> bool:
    """True when ``new`` is the same stage or later in the pipeline."""
    return STAGE_ORDER.index(Stage(new)) >= STAGE_ORDER.index(Stage(current))


def check_forward_transition(current: Stage, new: Stage) -> None:
    if not is_forward_transition(current, new):
        raise StageTransitionError(
            f"Cannot move candidate back from {Stage(current).value} to {Stage(new).value}"
        )
