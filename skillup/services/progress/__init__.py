"""Progress services."""

from skillup.services.progress.progress_store import ProgressStore, ProgressStoreError

__all__ = [
    "ProgressStore",
    "ProgressStoreError",
]
