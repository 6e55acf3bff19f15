"""Fallback PDF renderer using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

logger = logging.getLogger(__name__)

# Unicode-capable font search paths (Linux, macOS, Windows)
_UNICODE_FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

_LATIN1_REPLACEMENTS = str.maketrans({"•": "-", "–": "-", "—": "-", "’": "'", "“": '"', "”": '"'})


def _find_unicode_font() -> str | None:
    for path in _UNICODE_FONT_PATHS:
        if Path(path).exists():
            return path
    return None


def html_to_pdf_fpdf2(html_content: str) -> bytes:
    """Fallback PDF generation using fpdf2 when WeasyPrint is unavailable.

    Layout is flattened to a single column; styling and photos are dropped.
    """
    body_match = re.search(r"<body>(.*?)</body>", html_content, re.DOTALL)
    body = body_match.group(1) if body_match else html_content

    pdf = FPDF(format="A4")
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.add_page()

    font_name = "Helvetica"
    unicode_font = _find_unicode_font()
    if unicode_font:
        try:
            pdf.add_font("ResumeFont", "", unicode_font)
            font_name = "ResumeFont"
        except (OSError, RuntimeError):
            logger.debug("Failed to load font %s", unicode_font)

    pdf.set_font(font_name, size=10)

    for line_type, text in _parse_html_to_lines(body):
        safe_text = _safe_text(text, pdf)
        if line_type == "h1":
            pdf.set_font_size(18)
            _write(pdf, 10, safe_text)
            pdf.set_font_size(10)
        elif line_type == "h2":
            pdf.ln(3)
            pdf.set_font_size(12)
            _write(pdf, 8, safe_text)
            pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
            pdf.ln(2)
            pdf.set_font_size(10)
        elif line_type == "h3":
            pdf.ln(1)
            pdf.set_font_size(11)
            _write(pdf, 6, safe_text)
            pdf.set_font_size(10)
        elif line_type == "bullet":
            _write(pdf, 5, f"  {_safe_text('•', pdf)} {safe_text}")
        elif line_type == "text":
            _write(pdf, 5, safe_text)

    return bytes(pdf.output())


def _write(pdf: FPDF, height: float, text: str) -> None:
    pdf.multi_cell(0, height, text, new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def _safe_text(text: str, pdf: FPDF) -> str:
    """Ensure text is encodable by the current font. Replace if needed."""
    if pdf.is_ttf_font:
        return text
    text = text.translate(_LATIN1_REPLACEMENTS)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _parse_html_to_lines(body_html: str) -> list[tuple[str, str]]:
    """Parse template HTML into (type, text) pairs."""
    body_html = re.sub(r"<style.*?</style>", "", body_html, flags=re.DOTALL)
    lines: list[tuple[str, str]] = []
    parts = re.split(r"(</?(?:h[1-3]|p|li|div)\b[^>]*>)", body_html)
    current_tag = "text"
    for part in parts:
        tag_match = re.match(r"<(/?)(h[1-3]|p|li|div)\b", part)
        if tag_match:
            closing = tag_match.group(1) == "/"
            tag = tag_match.group(2)
            if closing:
                current_tag = "text"
            elif tag in ("h1", "h2", "h3"):
                current_tag = tag
            elif tag == "li":
                current_tag = "bullet"
            else:
                current_tag = "text"
            continue
        text = _strip_html(part)
        if text:
            lines.append((current_tag, text))
    return lines


def _strip_html(text: str) -> str:
    """Remove HTML tags, decode entities and collapse whitespace."""
    text = re.sub(r"<[^>]+>", " ", text)
    return re.sub(r"\s+", " ", html.unescape(text)).strip()
