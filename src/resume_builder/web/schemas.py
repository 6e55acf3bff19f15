"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from resume_builder.models.profile import UserProfile
from resume_builder.models.resume import ResumeData


class _CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class GenerateResumeRequest(_CamelModel):
    profile: UserProfile
    resume_data: ResumeData = Field(default_factory=ResumeData)


class GenerateResumeSuccess(_CamelModel):
    success: bool = True
    resume_data: ResumeData
    profile: UserProfile
    generated_at: datetime
    tokens_used: int


class GenerateResumeFailure(_CamelModel):
    success: bool = False
    error: str
    error_kind: str
    retryable: bool
    resume_data: ResumeData | None = None


class DetectProfileResponse(_CamelModel):
    profile: UserProfile
    label: str
