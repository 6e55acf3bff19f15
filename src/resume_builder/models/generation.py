"""Pydantic models for generated content and generation results."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from resume_builder.models.profile import UserProfile
from resume_builder.models.resume import ResumeData


class GeneratedExperience(BaseModel):
    bullets: list[str] = []


class GeneratedContent(BaseModel):
    """Structured reply from the text-generation service.

    ``experiences`` is positionally aligned with ``ResumeData.experiences``.
    """

    summary: str
    experiences: list[GeneratedExperience]

    @field_validator("summary")
    @classmethod
    def _summary_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("summary must not be blank")
        return value.strip()


class GenerationResult(BaseModel):
    resume_data: ResumeData
    profile: UserProfile
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    tokens_used: int = 0
