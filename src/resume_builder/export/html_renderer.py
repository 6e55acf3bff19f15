"""Render resume data into the simple and premium HTML templates."""

from __future__ import annotations

import html
import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from resume_builder.models.resume import ResumeData
from resume_builder.pipeline.profile_classifier import profile_label

TEMPLATES_DIR = Path(__file__).parent / "templates"

AVAILABLE_TEMPLATES = ("simple", "premium")

PLACEHOLDER_SUMMARY = (
    "Dedicated professional with proven experience and strong interpersonal "
    "skills, looking to deliver meaningful results through commitment and initiative."
)

_BULLET_LINE = re.compile(r"^\s*[•\-*]\s+")

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_html(
    resume: ResumeData,
    template: str = "premium",
    profile: str | None = None,
    title: str | None = None,
) -> str:
    """Render resume data to a standalone HTML document."""
    if template not in AVAILABLE_TEMPLATES:
        raise ValueError(
            f"Unknown template {template!r}; expected one of {', '.join(AVAILABLE_TEMPLATES)}"
        )
    return _env.get_template(f"{template}.html").render(
        **build_context(resume, profile),
        title=title or f"{resume.personal_info.full_name or 'Resume'} - Resume",
    )


def build_context(resume: ResumeData, profile: str | None = None) -> dict:
    """Flatten resume data into the values both templates display."""
    info = resume.personal_info
    return {
        "info": info,
        "tagline": profile_label(profile) if profile else None,
        "contact": [v for v in (info.email, info.phone, info.location) if v],
        "links": [v for v in (info.linked_in, info.portfolio, info.github) if v],
        "summary": resume.summary.strip() or PLACEHOLDER_SUMMARY,
        "experiences": [
            {
                "position": exp.position,
                "company": exp.company,
                "location": exp.location,
                "period": _period(exp.start_date, exp.end_date, exp.current, "Present"),
                **_split_description(exp.description),
            }
            for exp in resume.experiences
        ],
        "education": [
            {
                "degree": edu.degree,
                "field": edu.field,
                "institution": edu.institution,
                "period": _period(edu.start_date, edu.end_date, edu.current, "In progress"),
                "description": edu.description,
            }
            for edu in resume.education
        ],
        "skills": resume.skills,
        "languages": [f"{lang.language} ({lang.level})" for lang in resume.languages],
        "languages_detail": resume.languages,
        "certifications": resume.certifications,
    }


def extract_text(html_content: str) -> list[str]:
    """Return the visible text blocks of a rendered document, in order."""
    body = re.search(r"<body>(.*?)</body>", html_content, re.DOTALL)
    body_html = body.group(1) if body else html_content
    blocks = re.split(r"<[^>]+>", body_html)
    return [html.unescape(b).strip() for b in blocks if b.strip()]


def _split_description(description: str | None) -> dict:
    bullets: list[str] = []
    paragraphs: list[str] = []
    for line in (description or "").splitlines():
        if not line.strip():
            continue
        if _BULLET_LINE.match(line):
            bullets.append(_BULLET_LINE.sub("", line).strip())
        else:
            paragraphs.append(line.strip())
    return {"bullets": bullets, "paragraphs": paragraphs}


def _period(start: str, end: str | None, current: bool, ongoing: str) -> str:
    finish = ongoing if current else (end or "N/A")
    return f"{start or 'N/A'} - {finish}"
