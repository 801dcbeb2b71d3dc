"""
SkillUp request/response schemas.
"""

from skillup.schemas.roadmap import (
    ICON_NAMES,
    FALLBACK_ICON,
    AdviceInput,
    AdviceOutput,
    RoadmapInput,
    RoadmapOutput,
    RoadmapStep,
    StepData,
    MIN_GOAL_LENGTH,
    SubTask,
    Resource,
)
from skillup.schemas.progress import RoadmapProgressData, ProgressSummary, ProgressResponse
from skillup.schemas.auth import AuthUser, GoogleSignInRequest
from skillup.schemas.notice import Notice

__all__ = [
    "ICON_NAMES",
    "FALLBACK_ICON",
    "AdviceInput",
    "AdviceOutput",
    "RoadmapInput",
    "RoadmapOutput",
    "RoadmapStep",
    "StepData",
    "MIN_GOAL_LENGTH",
    "SubTask",
    "Resource",
    "RoadmapProgressData",
    "ProgressSummary",
    "ProgressResponse",
    "AuthUser",
    "GoogleSignInRequest",
    "Notice",
]
