"""
View-model for a single roadmap step card.
"""

import logging
from typing import List, Optional

from skillup.pipelines.actions import GenerationActions, UNKNOWN_ERROR_MESSAGE
from skillup.pipelines.progress import RESOURCE, TASK, item_id, step_item_ids
from skillup.schemas.roadmap import FALLBACK_ICON, ICON_NAMES, AdviceInput, AdviceOutput, StepData

logger = logging.getLogger(__name__)


class StepView:
    """
    One step of a displayed roadmap.

    Advice is fetched lazily on the first request and kept on this step
    only; later requests just open or close the advice panel.
    """

    def __init__(
        self,
        step: StepData,
        index: int,
        actions: GenerationActions,
        user_skills: str,
        goal: str,
    ):
        self.step = step
        self.index = index
        self._actions = actions
        self._user_skills = user_skills
        self._goal = goal

        self.advice: Optional[AdviceOutput] = None
        self.error = ""
        self.is_loading = False
        self.advice_open = False

    @property
    def icon_name(self) -> str:
        return self.step.icon if self.step.icon in ICON_NAMES else FALLBACK_ICON

    def item_ids(self) -> List[str]:
        return step_item_ids(self.step, self.index)

    def task_id(self, task_index: int) -> str:
        return item_id(self.index, TASK, task_index)

    def resource_id(self, resource_index: int) -> str:
        return item_id(self.index, RESOURCE, resource_index)

    async def get_advice(self) -> Optional[AdviceOutput]:
        """
        Fetch advice once, or toggle the panel when it is already cached.

        A failure leaves the error text on the step and closes the panel.
        """
        if self.advice is not None:
            self.advice_open = not self.advice_open
            return self.advice

        self.is_loading = True
        self.error = ""
        self.advice_open = True

        result = await self._actions.advice(
            AdviceInput(
                roadmapStep=self.step.title,
                userSkills=self._user_skills,
                goal=self._goal,
            )
        )

        if result.success and result.data is not None:
            self.advice = result.data
        else:
            self.error = result.error or UNKNOWN_ERROR_MESSAGE
            self.advice_open = False
            logger.debug(f"Advice for step {self.index} failed: {self.error}")

        self.is_loading = False
        return self.advice
