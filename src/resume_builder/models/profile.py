"""Pydantic models for the profile quiz."""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

UserProfile = Literal[
    "first-job",
    "junior",
    "mid-level",
    "senior",
    "executive",
    "freelancer",
    "career-transition",
    "career-return",
]

PROFILES: tuple[str, ...] = get_args(UserProfile)

RESUME_GOALS: dict[str, str] = {
    "first-job-internship": "First job / internship",
    "job-change-same-area": "Job change (same area)",
    "career-transition": "Career transition",
    "internal-promotion": "Internal promotion",
    "freelance-consulting": "Freelance / consulting",
    "market-return": "Returning to the job market",
}

EXPERIENCE_LEVELS: dict[str, str] = {
    "no-experience": "No experience",
    "less-than-1-year": "Less than 1 year",
    "1-3-years": "1-3 years",
    "3-7-years": "3-7 years",
    "7-15-years": "7-15 years",
    "15-plus-years": "15+ years",
    "c-level": "C-level / executive",
}

CAREER_AREAS: tuple[str, ...] = (
    "Technology / IT",
    "Marketing / Communication",
    "Sales",
    "Human Resources",
    "Finance / Accounting",
    "Administration / Management",
    "Engineering",
    "Health / Medicine",
    "Education",
    "Design / Creative",
    "Legal",
    "Logistics / Supply Chain",
    "Customer Service",
    "Production / Operations",
    "Consulting",
    "Other",
)


class QuizAnswers(BaseModel):
    """Answers collected by the three-step quiz. Any answer may be missing."""

    goal: str | None = None
    experience_level: str | None = None
    career_area: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
