"""
SkillUp API Routers.

All routers are imported here for easy access.
"""

from skillup.routers.auth import router as auth_router
from skillup.routers.roadmap import router as roadmap_router
from skillup.routers.progress import router as progress_router
from skillup.routers.profile import router as profile_router

__all__ = [
    "auth_router",
    "roadmap_router",
    "progress_router",
    "profile_router",
]
