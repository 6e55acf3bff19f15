"""Data models for the resume builder."""

from resume_builder.models.generation import (
    GeneratedContent,
    GeneratedExperience,
    GenerationResult,
)
from resume_builder.models.profile import (
    CAREER_AREAS,
    EXPERIENCE_LEVELS,
    PROFILES,
    RESUME_GOALS,
    QuizAnswers,
    UserProfile,
)
from resume_builder.models.resume import (
    Certification,
    Education,
    Experience,
    LanguageSkill,
    PersonalInfo,
    ResumeData,
)

__all__ = [
    "CAREER_AREAS",
    "Certification",
    "EXPERIENCE_LEVELS",
    "Education",
    "Experience",
    "GeneratedContent",
    "GeneratedExperience",
    "GenerationResult",
    "LanguageSkill",
    "PROFILES",
    "PersonalInfo",
    "QuizAnswers",
    "RESUME_GOALS",
    "ResumeData",
    "UserProfile",
]
