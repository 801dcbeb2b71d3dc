"""Shared test fixtures for SkillUp backend tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from skillup.schemas.auth import AuthUser
from skillup.schemas.progress import RoadmapProgressData
from skillup.schemas.roadmap import RoadmapOutput, RoadmapStep


def make_step(n: int, icon: str = "BookOpen", sub_tasks: int = 4, resources: int = 2) -> dict:
    """A roadmap step dict in the stored/wire shape."""
    return {
        "title": f"Step {n}",
        "duration": "2-3 Weeks",
        "description": f"Description of step {n}.",
        "icon": icon,
        "subTasks": [{"title": f"Task {n}.{i}"} for i in range(sub_tasks)],
        "focusTechniques": ["Use the Pomodoro Technique", "Timebox research to 1 hour"],
        "resources": [
            {"title": f"Resource {n}.{i}", "url": f"https://example.com/{n}/{i}"}
            for i in range(resources)
        ],
    }


@pytest.fixture
def sample_user_id():
    return "firebase-uid-123"


@pytest.fixture
def auth_user(sample_user_id):
    return AuthUser(
        uid=sample_user_id,
        displayName="Ada Lovelace",
        email="ada@example.com",
        photoURL="https://example.com/ada.png",
        idToken="id-token-abc",
    )


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, update_one
    # etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def roadmap_dict():
    """Three steps, each with 4 sub-tasks and 2 resources (18 items)."""
    return {"roadmap": [make_step(0, "Target"), make_step(1, "Layers"), make_step(2, "Rocket")]}


@pytest.fixture
def roadmap_output(roadmap_dict):
    return RoadmapOutput.model_validate(roadmap_dict)


@pytest.fixture
def roadmap_steps(roadmap_output):
    return roadmap_output.roadmap


@pytest.fixture
def progress_dict(roadmap_dict):
    return {
        "roadmap": roadmap_dict["roadmap"],
        "checkedItems": {"task-0-0": True, "task-0-1": True, "resource-1-0": True, "task-2-3": False},
        "goal": "Become a freelance web developer",
        "currentSkills": "3 years marketing experience",
    }


@pytest.fixture
def sample_progress(progress_dict):
    return RoadmapProgressData.model_validate(progress_dict)


@pytest.fixture
def single_step() -> RoadmapStep:
    return RoadmapStep.model_validate(make_step(0, "BrainCircuit", sub_tasks=5, resources=3))


@pytest.fixture
def step_factory():
    return make_step
