"""Wizard state as an immutable value.

Every transition returns a new ``WizardState``; nothing is edited in place,
so the UI can keep the previous value (and the original resume data) around.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Literal

from resume_builder.models.profile import QuizAnswers, UserProfile
from resume_builder.models.resume import PersonalInfo, ResumeData
from resume_builder.pipeline.profile_classifier import detect_profile

Stage = Literal["landing", "quiz", "data-collection", "generator"]

QUIZ_FIELDS: tuple[str, ...] = ("goal", "experience_level", "career_area")

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class WizardError(ValueError):
    """Raised for a transition that is not allowed from the current state."""


@dataclass(frozen=True)
class WizardState:
    stage: Stage = "landing"
    quiz_step: int = 0
    answers: QuizAnswers = field(default_factory=QuizAnswers)
    profile: UserProfile | None = None
    resume_data: ResumeData | None = None
    generated: ResumeData | None = None
    error: str | None = None

    @property
    def total_quiz_steps(self) -> int:
        return len(QUIZ_FIELDS)

    @property
    def current_field(self) -> str:
        return QUIZ_FIELDS[self.quiz_step]

    @property
    def can_proceed(self) -> bool:
        if self.stage != "quiz":
            return False
        return bool(getattr(self.answers, self.current_field))

    @property
    def display_data(self) -> ResumeData | None:
        """Generated data when available, otherwise what the user entered."""
        return self.generated if self.generated is not None else self.resume_data


def start(state: WizardState) -> WizardState:
    return replace(state, stage="quiz", quiz_step=0)


def answer(state: WizardState, value: str) -> WizardState:
    if state.stage != "quiz":
        raise WizardError(f"cannot answer the quiz from stage {state.stage!r}")
    answers = state.answers.model_copy(update={state.current_field: value})
    return replace(state, answers=answers)


def next_step(state: WizardState) -> WizardState:
    if not state.can_proceed:
        raise WizardError(f"quiz step {state.quiz_step} has no answer")
    if state.quiz_step < state.total_quiz_steps - 1:
        return replace(state, quiz_step=state.quiz_step + 1)
    return replace(state, stage="data-collection", profile=detect_profile(state.answers))


def back(state: WizardState) -> WizardState:
    if state.stage == "quiz":
        if state.quiz_step == 0:
            return replace(state, stage="landing")
        return replace(state, quiz_step=state.quiz_step - 1)
    if state.stage == "data-collection":
        return replace(state, stage="quiz", quiz_step=state.total_quiz_steps - 1)
    if state.stage == "generator":
        return replace(state, stage="data-collection", generated=None, error=None)
    return state


def submit_resume(state: WizardState, resume: ResumeData) -> WizardState:
    if state.profile is None:
        raise WizardError("profile must be detected before submitting resume data")
    return replace(state, stage="generator", resume_data=resume, generated=None, error=None)


def generation_succeeded(state: WizardState, generated: ResumeData) -> WizardState:
    return replace(state, generated=generated, error=None)


def generation_failed(state: WizardState, message: str) -> WizardState:
    return replace(state, generated=None, error=message)


def dismiss_error(state: WizardState) -> WizardState:
    return replace(state, error=None)


def validate_personal_info(info: PersonalInfo) -> dict[str, str]:
    """Field errors for the personal info step, keyed by field name."""
    errors: dict[str, str] = {}
    if not info.full_name.strip():
        errors["full_name"] = "Full name is required"
    if not info.email.strip():
        errors["email"] = "Email is required"
    elif not _EMAIL_RE.match(info.email.strip()):
        errors["email"] = "Invalid email"
    if not info.phone.strip():
        errors["phone"] = "Phone is required"
    return errors


def validate_resume(resume: ResumeData) -> dict[str, str]:
    """Errors that block submitting the collected data for generation."""
    errors = validate_personal_info(resume.personal_info)
    if not resume.education:
        errors["education"] = "Add at least one education entry"
    if not resume.skills:
        errors["skills"] = "Add at least one skill"
    return errors
