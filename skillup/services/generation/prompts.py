"""
Prompt templates for the generation operations.

Templates are rendered with ``str.format``; user text is only ever passed
as a format argument.
"""

from skillup.schemas.roadmap import ICON_NAMES

ADVICE_SYSTEM_PROMPT = (
    "You are an expert mentor and strategist providing personalized advice "
    "to a user on their learning roadmap."
)

ADVICE_PROMPT = """The user is currently at the following step in their roadmap: {roadmap_step}
The user's current skills are: {user_skills}
The user's ultimate goal is: {goal}

Provide concise and actionable advice to help the user succeed in this step. Also, intelligently and naturally weave in some words of encouragement to keep the user motivated; focus on the psychological aspects of learning, not just the technical aspects.
Ensure that the advice is tailored to their current skills and ultimate goal.
Keep the advice succinct and easy to follow.
Format the advice as a single paragraph of text.

In addition to the advice, provide a list of 2-3 specific and actionable focus techniques that would be particularly helpful for this learning stage. These should be short, practical tips."""

ROADMAP_SYSTEM_PROMPT = (
    "You are an expert strategist and mentor. Your task is to generate a "
    "structured, actionable, and personalized roadmap for a user who wants "
    "to achieve a specific goal."
)

ROADMAP_PROMPT = """The user's goal is: **{goal}**
The user's current skills and background are: **{current_skills}**

Based on this, create a realistic roadmap with 3 to 5 distinct steps. Each step must be a JSON object with the following fields:
- title: A clear and concise title for the step (e.g., "Mastering Foundational Skills").
- duration: A realistic time estimate (e.g., "4-6 Weeks").
- description: A short, encouraging one-sentence overview of the step's goal.
- icon: Choose the most fitting icon name from this list: {icon_names}.
- subTasks: A list of 4-6 specific sub-tasks, each an object with a "title". These should be concrete actions (e.g., "Learn about core principles", "Build a simple prototype").
- focusTechniques: A list of 2-3 actionable focus techniques tailored to the learning content of the step (e.g., "Use the Pomodoro Technique for focused work sessions", "Timebox research on new topics to 1 hour").
- resources: A list of 2-3 real, high-quality, and publicly accessible online resources (e.g., articles, tutorials, documentation, videos). Each resource must have a title and a valid URL.

Generate the output as a single JSON object with a "roadmap" key, which contains the array of steps."""


def build_advice_prompt(roadmap_step: str, user_skills: str, goal: str) -> str:
    return ADVICE_PROMPT.format(
        roadmap_step=roadmap_step,
        user_skills=user_skills,
        goal=goal,
    )


def build_roadmap_prompt(current_skills: str, goal: str) -> str:
    return ROADMAP_PROMPT.format(
        goal=goal,
        current_skills=current_skills,
        icon_names=", ".join(ICON_NAMES),
    )
