"""
View-models for the home and profile pages.
"""

from skillup.ui.step_view import StepView
from skillup.ui.roadmap_view import RoadmapView, ViewMode
from skillup.ui.profile_view import ProfileView

__all__ = ["StepView", "RoadmapView", "ViewMode", "ProfileView"]
