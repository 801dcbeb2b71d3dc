"""
View-model for the profile page.
"""

import logging
from typing import Dict, List, Optional

from skillup.pipelines.progress import calculate_progress
from skillup.schemas import notice
from skillup.schemas.notice import Notice
from skillup.schemas.progress import RoadmapProgressData
from skillup.services.auth import AuthSession
from skillup.services.progress import ProgressStore, ProgressStoreError

logger = logging.getLogger(__name__)


class ProfileView:
    """Saved progress summary, progress deletion and sign-out."""

    def __init__(self, store: ProgressStore, session: AuthSession):
        self._store = store
        self._session = session

        self.progress: Optional[RoadmapProgressData] = None
        self.is_loading = False
        self.is_deleting = False
        self.notices: List[Notice] = []

    @property
    def redirect_home(self) -> bool:
        """Signed-out visitors are sent back to the home page."""
        return not self._session.is_authenticated

    async def load(self) -> Optional[RoadmapProgressData]:
        user = self._session.user
        if user is None:
            return None

        self.is_loading = True
        try:
            self.progress = await self._store.load(user.uid)
        except ProgressStoreError:
            self.notices.append(
                notice.error("Loading Error", "Could not load your roadmap progress.")
            )
        finally:
            self.is_loading = False

        return self.progress

    def summary(self) -> Dict[str, int]:
        return calculate_progress(self.progress)

    async def delete_progress(self, confirmed: bool) -> bool:
        """
        Delete the saved snapshot. Irreversible, so it only runs when the
        user confirmed.

        Local state is cleared only after the store accepted the delete.

        Returns:
            True if the snapshot was deleted
        """
        user = self._session.user
        if not confirmed or user is None:
            return False

        self.is_deleting = True
        try:
            await self._store.delete(user.uid)
        except ProgressStoreError as e:
            self.notices.append(notice.error("Deletion Error", e.message))
            return False
        finally:
            self.is_deleting = False

        self.progress = None
        self.notices.append(
            notice.info(
                "Progress Deleted",
                "Your saved roadmap progress has been successfully deleted.",
            )
        )
        return True

    async def sign_out(self) -> Notice:
        result = await self._session.sign_out()
        self.notices.append(result)
        return result
