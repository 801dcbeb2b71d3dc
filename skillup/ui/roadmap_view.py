"""
View-model for the home page: roadmap form, generated roadmap display and
the saved-progress card.

All state here belongs to one client. Checkbox changes stay local until
``save`` writes the whole snapshot.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from skillup.pipelines.actions import GenerationActions
from skillup.pipelines.progress import calculate_progress
from skillup.schemas import notice
from skillup.schemas.auth import AuthUser
from skillup.schemas.notice import Notice
from skillup.schemas.progress import RoadmapProgressData
from skillup.schemas.roadmap import MIN_GOAL_LENGTH, RoadmapInput, StepData
from skillup.services.auth import AuthSession
from skillup.services.progress import ProgressStore, ProgressStoreError
from skillup.ui.step_view import StepView

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    FORM = "form"
    DISPLAY = "display"


class RoadmapView:
    """
    Form mode until a roadmap is generated or a saved one is resumed, then
    display mode until ``start_over``.
    """

    def __init__(
        self,
        actions: GenerationActions,
        store: ProgressStore,
        session: AuthSession,
    ):
        self._actions = actions
        self._store = store
        self._session = session

        self.roadmap: Optional[List[StepData]] = None
        self.steps: List[StepView] = []
        self.goal = ""
        self.current_skills = ""
        self.checked_items: Dict[str, bool] = {}

        self.saved_progress: Optional[RoadmapProgressData] = None
        self.is_loading = False
        self.is_loading_saved = False
        self.field_errors: Dict[str, str] = {}
        self.notices: List[Notice] = []

        self._unsubscribe = session.subscribe(self._on_user_change)

    @property
    def mode(self) -> ViewMode:
        return ViewMode.DISPLAY if self.roadmap is not None else ViewMode.FORM

    def close(self) -> None:
        """Stop following the session."""
        self._unsubscribe()

    def _notify(self, item: Notice) -> None:
        self.notices.append(item)

    def _on_user_change(self, user: Optional[AuthUser]) -> None:
        if user is None:
            self.saved_progress = None

    # ==========================================================================
    # Saved progress card
    # ==========================================================================

    async def load_saved(self) -> Optional[RoadmapProgressData]:
        """Load the signed-in user's snapshot for the "continue" card."""
        user = self._session.user
        if user is None:
            self.saved_progress = None
            return None

        self.is_loading_saved = True
        try:
            self.saved_progress = await self._store.load(user.uid)
        except ProgressStoreError as e:
            self._notify(notice.error("Error", e.message))
        finally:
            self.is_loading_saved = False

        return self.saved_progress

    def saved_summary(self) -> Dict[str, int]:
        return calculate_progress(self.saved_progress)

    def resume_saved(self) -> bool:
        """Show the saved roadmap with its checked items."""
        saved = self.saved_progress
        if saved is None:
            return False

        self._show(saved.roadmap, saved.goal, saved.currentSkills, dict(saved.checkedItems))
        return True

    # ==========================================================================
    # Form
    # ==========================================================================

    async def generate(self, current_skills: str, goal: str) -> bool:
        """
        Submit the form.

        Returns:
            True when a roadmap is now displayed
        """
        self.field_errors = {}
        if len(goal.strip()) < MIN_GOAL_LENGTH:
            self.field_errors["goal"] = "Please enter a valid goal."
            return False

        self.is_loading = True
        self.saved_progress = None

        result = await self._actions.roadmap(RoadmapInput(currentSkills=current_skills, goal=goal))

        if result.success and result.data is not None:
            self._show(result.data.roadmap, goal, current_skills, {})
        else:
            self._notify(
                notice.error(
                    "Generation Failed",
                    result.error or "An unexpected error occurred while generating the roadmap.",
                )
            )

        self.is_loading = False
        return result.success

    def _show(
        self,
        roadmap: List[StepData],
        goal: str,
        current_skills: str,
        checked_items: Dict[str, bool],
    ) -> None:
        self.roadmap = roadmap
        self.goal = goal
        self.current_skills = current_skills
        self.checked_items = checked_items
        self.steps = [
            StepView(step, index, self._actions, current_skills, goal)
            for index, step in enumerate(roadmap)
        ]

    # ==========================================================================
    # Display
    # ==========================================================================

    def toggle(self, item_id: str, checked: bool) -> None:
        self.checked_items[item_id] = checked

    def is_checked(self, item_id: str) -> bool:
        return self.checked_items.get(item_id, False)

    async def save(self) -> Notice:
        """Write the displayed roadmap and checked items as the user's snapshot."""
        user = self._session.user
        if user is None:
            result = notice.error("Not Signed In", "Please sign in to save your progress.")
            self._notify(result)
            return result

        if self.roadmap is None:
            raise RuntimeError("No roadmap is displayed")

        progress = RoadmapProgressData(
            goal=self.goal,
            currentSkills=self.current_skills,
            checkedItems=dict(self.checked_items),
            roadmap=self.roadmap,
        )

        try:
            await self._store.save(user.uid, progress)
        except ProgressStoreError as e:
            result = notice.error("Save Error", e.message)
        else:
            result = notice.info(
                "Progress Saved!", "Your roadmap progress has been saved to your account."
            )

        self._notify(result)
        return result

    def start_over(self) -> None:
        """Drop the displayed roadmap and go back to the empty form."""
        self.roadmap = None
        self.steps = []
        self.goal = ""
        self.current_skills = ""
        self.checked_items = {}
        self.field_errors = {}
