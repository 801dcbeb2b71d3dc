"""
Pydantic models for the two generation operations (advice, roadmap).

These are both the request/response contracts of the API and the output
schemas handed to the AI provider, so field descriptions double as
instructions to the model.
"""

from typing import List, Literal, get_args

from pydantic import BaseModel, Field


IconName = Literal[
    "BookOpen",
    "Target",
    "ListTodo",
    "BrainCircuit",
    "Layers",
    "Palette",
    "PenTool",
    "Milestone",
    "Flag",
    "ClipboardCheck",
    "TrendingUp",
    "Rocket",
]

ICON_NAMES = get_args(IconName)

# Shown by the views when a stored step carries an unknown icon name
FALLBACK_ICON = "Code"


# =============================================================================
# Advice
# =============================================================================

class AdviceInput(BaseModel):
    """POST /api/roadmap/advice"""
    roadmapStep: str = Field(
        description="The specific step in the roadmap for which advice is needed."
    )
    userSkills: str = Field(description="The current skills of the user.")
    goal: str = Field(description="The ultimate goal the user is aiming for.")


class AdviceOutput(BaseModel):
    """Personalized advice for one roadmap step."""
    advice: str = Field(
        description="AI-generated personalized advice for the roadmap step, as a single paragraph."
    )
    focusTechniques: List[str] = Field(
        min_length=2,
        max_length=3,
        description=(
            "A list of 2-3 actionable focus techniques tailored to the learning step, "
            'like "Use the Pomodoro Technique for focused sessions".'
        ),
    )


# =============================================================================
# Roadmap
# =============================================================================

class RoadmapInput(BaseModel):
    """POST /api/roadmap/generate"""
    currentSkills: str = Field(
        default="", description="The current skills and background of the user."
    )
    goal: str = Field(description="The goal the user wants to achieve.")


# Goals shorter than this (after trimming) are rejected before generation
MIN_GOAL_LENGTH = 2


class SubTask(BaseModel):
    title: str


class Resource(BaseModel):
    title: str = Field(description="The title of the resource.")
    url: str = Field(description="The URL for the resource.")


class StepData(BaseModel):
    """
    A roadmap step as saved and displayed.

    Saved snapshots are read back with no count or icon checks; views
    replace an unknown icon with FALLBACK_ICON.
    """
    title: str
    duration: str
    description: str
    icon: str
    subTasks: List[SubTask]
    focusTechniques: List[str]
    resources: List[Resource]


class RoadmapStep(StepData):
    """One step of a learning roadmap, as the model must produce it."""
    title: str = Field(description="The title of this step in the roadmap.")
    duration: str = Field(
        min_length=1,
        description="An estimated duration for this step (e.g., '2-3 Weeks').",
    )
    description: str = Field(
        description="A concise, one-sentence description of this roadmap step."
    )
    icon: IconName = Field(
        description="An icon name that best represents this step from the provided list."
    )
    subTasks: List[SubTask] = Field(
        min_length=4,
        max_length=6,
        description="A list of 4-6 specific, actionable sub-tasks for this step.",
    )
    focusTechniques: List[str] = Field(
        min_length=2,
        max_length=3,
        description="A list of 2-3 practical focus techniques relevant to this step.",
    )
    resources: List[Resource] = Field(
        min_length=2,
        max_length=3,
        description=(
            "A list of 2-3 high-quality online resources "
            "(articles, tutorials, docs, videos) for this step."
        ),
    )


class RoadmapOutput(BaseModel):
    """A personalized learning roadmap."""
    roadmap: List[RoadmapStep] = Field(
        min_length=3,
        max_length=5,
        description="The generated roadmap, consisting of 3 to 5 distinct steps.",
    )
