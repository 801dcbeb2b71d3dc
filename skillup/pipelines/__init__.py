"""
SkillUp pipelines.

Stateless orchestration between services and the views/routers.
"""

from skillup.pipelines.actions import (
    ActionResult,
    GenerationActions,
    generate_ai_advice,
    generate_dynamic_roadmap,
)
from skillup.pipelines.progress import (
    item_id,
    step_item_ids,
    iter_item_ids,
    calculate_progress,
)

__all__ = [
    "ActionResult",
    "GenerationActions",
    "generate_ai_advice",
    "generate_dynamic_roadmap",
    "item_id",
    "step_item_ids",
    "iter_item_ids",
    "calculate_progress",
]
