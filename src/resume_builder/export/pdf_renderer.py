from __future__ import annotations

import logging

from resume_builder.export.html_renderer import render_html
from resume_builder.models.resume import ResumeData

logger = logging.getLogger(__name__)


def render_pdf(
    resume: ResumeData,
    template: str = "premium",
    profile: str | None = None,
) -> bytes:
    """Render resume data to PDF bytes using the given visual template."""
    return html_to_pdf(render_html(resume, template, profile))


def html_to_pdf(html: str) -> bytes:
    """Convert HTML string to PDF bytes using WeasyPrint, with fpdf2 fallback."""
    try:
        from weasyprint import HTML
        return HTML(string=html).write_pdf()
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        from resume_builder.export.pdf_fallback import html_to_pdf_fpdf2
        return html_to_pdf_fpdf2(html)
