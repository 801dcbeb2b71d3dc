"""
Progress pipeline functions.

Stateless helpers for checkable item ids and completion figures.
"""

import math
from typing import Dict, Iterator, List, Optional

from skillup.schemas.progress import RoadmapProgressData
from skillup.schemas.roadmap import StepData

TASK = "task"
RESOURCE = "resource"


def item_id(step_index: int, kind: str, item_index: int) -> str:
    """
    Build the id of a checkable item.

    Ids are positional, so they only stay valid while the roadmap keeps its
    order.

    Args:
        step_index: Position of the step in the roadmap
        kind: TASK or RESOURCE
        item_index: Position of the item within that kind in the step
    """
    if kind not in (TASK, RESOURCE):
        raise ValueError(f"Unknown item kind: {kind}")
    return f"{kind}-{step_index}-{item_index}"


def step_item_ids(step: StepData, step_index: int) -> List[str]:
    """Ids of one step's sub-tasks followed by its resources."""
    ids = [item_id(step_index, TASK, i) for i in range(len(step.subTasks))]
    ids.extend(item_id(step_index, RESOURCE, i) for i in range(len(step.resources)))
    return ids


def iter_item_ids(roadmap: List[StepData]) -> Iterator[str]:
    """Yield every checkable id of a roadmap in display order."""
    for index, step in enumerate(roadmap):
        yield from step_item_ids(step, index)


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 12.5 must become 13
    return int(math.floor(value + 0.5))


def calculate_progress(progress: Optional[RoadmapProgressData]) -> Dict[str, int]:
    """
    Compute completion figures for a saved roadmap.

    ``completed`` counts the true values in ``checkedItems``; ``total`` is
    the number of sub-tasks and resources across all steps.

    Returns:
        Dict with total, completed and percentage (0 when total is 0)
    """
    if progress is None or not progress.roadmap:
        return {"total": 0, "completed": 0, "percentage": 0}

    total = sum(len(step.subTasks) + len(step.resources) for step in progress.roadmap)
    completed = sum(1 for checked in progress.checkedItems.values() if checked)
    percentage = round_half_up(completed / total * 100) if total > 0 else 0

    return {"total": total, "completed": completed, "percentage": percentage}
