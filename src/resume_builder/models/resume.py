"""Pydantic models for the resume aggregate collected by the wizard."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class _CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class PersonalInfo(_CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linked_in: str | None = None
    portfolio: str | None = None
    github: str | None = None
    photo: str | None = None  # data URL (base64-encoded image)


class _DatedEntry(_CamelModel):
    id: str = Field(default_factory=_new_id)
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    description: str | None = None

    @model_validator(mode="after")
    def _drop_end_date_when_current(self):
        if self.current:
            self.end_date = None
        return self


class Experience(_DatedEntry):
    company: str = ""
    position: str = ""
    location: str | None = None


class Education(_DatedEntry):
    institution: str = ""
    degree: str = ""
    field: str = ""


class LanguageSkill(_CamelModel):
    language: str
    level: str


class Certification(_CamelModel):
    id: str = Field(default_factory=_new_id)
    name: str
    issuer: str = ""
    date: str = ""


class ResumeData(_CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experiences: list[Experience] = []
    education: list[Education] = []
    skills: list[str] = []
    languages: list[LanguageSkill] = []
    certifications: list[Certification] = []
    summary: str = ""

    def to_wire(self) -> dict:
        """Dump with the camelCase keys the web client expects."""
        return self.model_dump(mode="json", by_alias=True)
