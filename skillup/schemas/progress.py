"""
Pydantic models for saved roadmap progress.

The stored shape of the ``roadmapProgress`` field is exactly
RoadmapProgressData; nothing else in the user document is read or written.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from skillup.schemas.roadmap import StepData


class RoadmapProgressData(BaseModel):
    """PUT /api/progress, and the persisted snapshot."""
    roadmap: List[StepData]
    checkedItems: Dict[str, bool] = Field(default_factory=dict)
    goal: str
    currentSkills: str = ""


# =============================================================================
# Response Schemas (used inside success_response data)
# =============================================================================

class ProgressSummary(BaseModel):
    """Completion figures for a saved roadmap."""
    total: int = 0
    completed: int = 0
    percentage: int = 0


class ProgressResponse(BaseModel):
    roadmapProgress: Optional[RoadmapProgressData] = None
    summary: ProgressSummary = Field(default_factory=ProgressSummary)
