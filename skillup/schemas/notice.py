"""
User-facing notices (toasts) raised by sessions and views.
"""

from typing import Literal, Optional

from pydantic import BaseModel


class Notice(BaseModel):
    """A short message shown to the user."""
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"
    duration: Optional[int] = None  # ms; None uses the client default

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


def info(title: str, description: str) -> Notice:
    return Notice(title=title, description=description)


def error(title: str, description: str, duration: Optional[int] = None) -> Notice:
    return Notice(title=title, description=description, variant="destructive", duration=duration)
