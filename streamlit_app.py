"""Streamlit Web UI for resume-builder.

Wizard: landing → 3-question profile quiz → resume data → AI generation + PDF download.
The wizard state is a single immutable value in ``st.session_state["wizard"]``
that is replaced on every transition.
"""

from __future__ import annotations

import asyncio
import base64
import os

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets → os.environ so the LLM client can read it
if "ANTHROPIC_API_KEY" not in os.environ:
    try:
        os.environ["ANTHROPIC_API_KEY"] = st.secrets["ANTHROPIC_API_KEY"]
    except (KeyError, FileNotFoundError):
        pass

from resume_builder.config import load_config, resolve_api_key
from resume_builder.export.pdf_renderer import render_pdf
from resume_builder.models.profile import CAREER_AREAS, EXPERIENCE_LEVELS, RESUME_GOALS
from resume_builder.models.resume import (
    Certification,
    Education,
    Experience,
    LanguageSkill,
    PersonalInfo,
    ResumeData,
)
from resume_builder.pipeline.profile_classifier import profile_label
from resume_builder.wizard import state as wz
from resume_builder.wizard.generation import run_generation

st.set_page_config(
    page_title="Resume Builder",
    page_icon=":page_facing_up:",
    layout="wide",
)

QUIZ_QUESTIONS = {
    "goal": ("What is the goal of this resume?", RESUME_GOALS),
    "experience_level": ("How much professional experience do you have?", EXPERIENCE_LEVELS),
    "career_area": ("Which career area are you in?", {a: a for a in CAREER_AREAS}),
}

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _state() -> wz.WizardState:
    if "wizard" not in st.session_state:
        st.session_state["wizard"] = wz.WizardState()
    return st.session_state["wizard"]


def _transition(new_state: wz.WizardState) -> None:
    st.session_state["wizard"] = new_state
    st.rerun()


def _photo_data_url(uploaded_file) -> str | None:
    if uploaded_file is None:
        return None
    encoded = base64.b64encode(uploaded_file.getvalue()).decode("ascii")
    return f"data:{uploaded_file.type};base64,{encoded}"


def _run_generation(state: wz.WizardState) -> wz.WizardState:
    """Call the generator once; on failure keep the original data and record the error."""
    config = load_config()
    return asyncio.run(run_generation(state, config.llm, resolve_api_key()))


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def _landing(state: wz.WizardState) -> None:
    st.title("Your resume, written with AI")
    st.markdown(
        "Answer 3 questions, fill in your details and get a polished resume "
        "adapted to your career level, from first job to C-level."
    )
    if st.button("Start", type="primary"):
        _transition(wz.start(state))


def _quiz(state: wz.WizardState) -> None:
    st.progress((state.quiz_step + 1) / state.total_quiz_steps)
    st.caption(f"Question {state.quiz_step + 1} of {state.total_quiz_steps}")

    question, options = QUIZ_QUESTIONS[state.current_field]
    keys = list(options)
    current = getattr(state.answers, state.current_field)
    choice = st.radio(
        question,
        keys,
        index=keys.index(current) if current in keys else None,
        format_func=lambda k: options[k],
        key=f"quiz_{state.current_field}",
    )
    if choice and choice != current:
        state = wz.answer(state, choice)
        st.session_state["wizard"] = state

    col_back, col_next = st.columns(2)
    if col_back.button("Back"):
        _transition(wz.back(state))
    if col_next.button("Continue", type="primary", disabled=not state.can_proceed):
        _transition(wz.next_step(state))


def _data_collection(state: wz.WizardState) -> None:
    st.header("Your details")
    st.info(f"Detected profile: **{profile_label(state.profile)}**")
    prev = state.resume_data or ResumeData()

    with st.form("resume_form"):
        st.subheader("Personal info")
        info = prev.personal_info
        full_name = st.text_input("Full name *", value=info.full_name)
        email = st.text_input("Email *", value=info.email)
        phone = st.text_input("Phone *", value=info.phone)
        location = st.text_input("Location", value=info.location)
        linked_in = st.text_input("LinkedIn", value=info.linked_in or "")
        portfolio = st.text_input("Portfolio", value=info.portfolio or "")
        github = st.text_input("GitHub", value=info.github or "")
        photo = st.file_uploader("Photo", type=["png", "jpg", "jpeg"])

        st.subheader("Experience")
        experiences = []
        for i in range(st.session_state.get("n_experiences", max(len(prev.experiences), 1))):
            old = prev.experiences[i] if i < len(prev.experiences) else Experience()
            c1, c2, c3 = st.columns(3)
            position = c1.text_input("Position", value=old.position, key=f"exp_pos_{i}")
            company = c2.text_input("Company", value=old.company, key=f"exp_co_{i}")
            exp_location = c3.text_input("Location", value=old.location or "", key=f"exp_loc_{i}")
            c4, c5, c6 = st.columns(3)
            start = c4.text_input("Start", value=old.start_date, key=f"exp_start_{i}")
            end = c5.text_input("End", value=old.end_date or "", key=f"exp_end_{i}")
            current = c6.checkbox("Current job", value=old.current, key=f"exp_cur_{i}")
            description = st.text_area("Description", value=old.description or "", key=f"exp_desc_{i}")
            if position or company:
                experiences.append(
                    Experience(
                        id=old.id, position=position, company=company,
                        location=exp_location or None, start_date=start, end_date=end or None,
                        current=current, description=description or None,
                    )
                )

        st.subheader("Education *")
        education = []
        for i in range(st.session_state.get("n_education", max(len(prev.education), 1))):
            old = prev.education[i] if i < len(prev.education) else Education()
            c1, c2, c3 = st.columns(3)
            degree = c1.text_input("Degree", value=old.degree, key=f"edu_deg_{i}")
            field = c2.text_input("Field", value=old.field, key=f"edu_field_{i}")
            institution = c3.text_input("Institution", value=old.institution, key=f"edu_inst_{i}")
            c4, c5, c6 = st.columns(3)
            start = c4.text_input("Start", value=old.start_date, key=f"edu_start_{i}")
            end = c5.text_input("End", value=old.end_date or "", key=f"edu_end_{i}")
            current = c6.checkbox("In progress", value=old.current, key=f"edu_cur_{i}")
            if institution or degree:
                education.append(
                    Education(
                        id=old.id, degree=degree, field=field, institution=institution,
                        start_date=start, end_date=end or None, current=current,
                    )
                )

        st.subheader("Skills, languages, certifications")
        skills = st.text_input("Skills * (comma separated)", value=", ".join(prev.skills))
        languages = st.text_input(
            "Languages (e.g. English: Fluent, Spanish: Basic)",
            value=", ".join(f"{l.language}: {l.level}" for l in prev.languages),
        )
        certifications = st.text_area(
            "Certifications (one per line: name | issuer | date)",
            value="\n".join(f"{c.name} | {c.issuer} | {c.date}" for c in prev.certifications),
        )
        summary = st.text_area("Professional summary", value=prev.summary)

        submitted = st.form_submit_button("Finish", type="primary")

    c1, c2, c3 = st.columns(3)
    if c1.button("+ Experience"):
        st.session_state["n_experiences"] = st.session_state.get("n_experiences", 1) + 1
        st.rerun()
    if c2.button("+ Education"):
        st.session_state["n_education"] = st.session_state.get("n_education", 1) + 1
        st.rerun()
    if c3.button("Back to quiz"):
        _transition(wz.back(state))

    if not submitted:
        return

    resume = ResumeData(
        personal_info=PersonalInfo(
            full_name=full_name, email=email, phone=phone, location=location,
            linked_in=linked_in or None, portfolio=portfolio or None, github=github or None,
            photo=_photo_data_url(photo) or info.photo,
        ),
        experiences=experiences,
        education=education,
        skills=[s.strip() for s in skills.split(",") if s.strip()],
        languages=[
            LanguageSkill(language=name.strip(), level=level.strip())
            for name, _, level in (item.partition(":") for item in languages.split(","))
            if name.strip()
        ],
        certifications=[
            Certification(name=parts[0], issuer=parts[1] if len(parts) > 1 else "",
                          date=parts[2] if len(parts) > 2 else "")
            for parts in ([p.strip() for p in line.split("|")] for line in certifications.splitlines())
            if parts[0]
        ],
        summary=summary,
    )
    errors = wz.validate_resume(resume)
    if errors:
        for message in errors.values():
            st.error(message)
        return
    _transition(wz.submit_resume(state, resume))


def _generator(state: wz.WizardState) -> None:
    st.header("Your resume")

    if state.generated is None and state.error is None:
        if st.button("Generate with AI", type="primary"):
            with st.spinner("Writing your summary and experience bullets..."):
                new_state = _run_generation(state)
            _transition(new_state)

    if state.error:
        st.warning(f"{state.error} Showing your original content.")
        c1, c2 = st.columns(2)
        if c1.button("Retry"):
            with st.spinner("Writing your summary and experience bullets..."):
                new_state = _run_generation(wz.dismiss_error(state))
            _transition(new_state)
        if c2.button("Dismiss"):
            _transition(wz.dismiss_error(state))

    data = state.display_data
    st.subheader(profile_label(state.profile))
    st.markdown(data.summary or "_No summary yet._")
    for exp in data.experiences:
        st.markdown(f"**{exp.position}** at {exp.company}")
        st.text(exp.description or "")

    c1, c2, c3 = st.columns(3)
    for col, template in ((c1, "simple"), (c2, "premium")):
        col.download_button(
            f"Download PDF ({template})",
            data=render_pdf(data, template, state.profile),
            file_name=f"resume-{template}.pdf",
            mime="application/pdf",
        )
    if c3.button("Edit details"):
        _transition(wz.back(state))


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

STAGES = {
    "landing": _landing,
    "quiz": _quiz,
    "data-collection": _data_collection,
    "generator": _generator,
}

STAGES[_state().stage](_state())
