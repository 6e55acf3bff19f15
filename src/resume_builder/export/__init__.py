"""Resume export: HTML templates and PDF rendering."""
from resume_builder.export.html_renderer import (
    AVAILABLE_TEMPLATES,
    extract_text,
    render_html,
)
from resume_builder.export.pdf_renderer import render_pdf

__all__ = ["AVAILABLE_TEMPLATES", "extract_text", "render_html", "render_pdf"]
