"""Profile detection from the three quiz answers."""

from __future__ import annotations

from collections.abc import Mapping

from resume_builder.models.profile import QuizAnswers, UserProfile

PROFILE_LABELS: dict[str, str] = {
    "first-job": "First Job",
    "junior": "Junior",
    "mid-level": "Mid-Level",
    "senior": "Senior",
    "executive": "Executive / C-Level",
    "freelancer": "Freelancer",
    "career-transition": "Career Transition",
    "career-return": "Returning to the Market",
}


def detect_profile(answers: QuizAnswers | Mapping[str, object]) -> UserProfile:
    """Classify quiz answers into a profile.

    Rules are checked in order and the first match wins: stated career
    intent (goal) outranks tenure, except that either signal alone is
    enough for ``first-job``. Missing answers fall through to ``junior``.
    """
    if not isinstance(answers, QuizAnswers):
        answers = QuizAnswers(
            goal=_as_text(answers.get("goal")),
            experience_level=_as_text(
                answers.get("experienceLevel", answers.get("experience_level"))
            ),
            career_area=_as_text(answers.get("careerArea", answers.get("career_area"))),
        )

    goal = answers.goal
    experience = answers.experience_level

    if goal == "first-job-internship" or experience == "no-experience":
        return "first-job"
    if goal == "career-transition":
        return "career-transition"
    if goal == "market-return":
        return "career-return"
    if goal == "freelance-consulting":
        return "freelancer"
    if experience in ("c-level", "15-plus-years"):
        return "executive"
    if experience == "7-15-years":
        return "senior"
    if experience == "3-7-years":
        return "mid-level"
    return "junior"


def profile_label(profile: str) -> str:
    """Human-readable label for a profile tag."""
    return PROFILE_LABELS.get(profile, profile)


def _as_text(value: object) -> str | None:
    return value if isinstance(value, str) else None
