"""Content generation: prompt, single LLM call, validation, merge."""

from __future__ import annotations

import logging
import re

from pydantic import ValidationError

from resume_builder.clients.llm_client import DEFAULT_MODEL, LLMClient, TextGenerator
from resume_builder.config import LLMConfig
from resume_builder.errors import MalformedResponse
from resume_builder.models.generation import GeneratedContent, GenerationResult
from resume_builder.models.profile import UserProfile
from resume_builder.models.resume import ResumeData
from resume_builder.pipeline.prompts import SYSTEM_PROMPT, build_user_prompt
from resume_builder.utils.json_parser import extract_json_object

logger = logging.getLogger(__name__)

MIN_PAYLOAD_LENGTH = 50
BULLET_GLYPH = "•"
# "-" and "*" count as glyphs only when followed by a space, so "-30%" survives
_LEADING_GLYPHS = re.compile(r"^\s*(?:[•·–]\s*|[-*]\s+)+")


class ContentGenerator:
    """Generate polished summary and experience bullets for a resume."""

    def __init__(
        self,
        llm: TextGenerator,
        *,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_config(cls, config: LLMConfig, api_key: str) -> ContentGenerator:
        llm = LLMClient(api_key=api_key, timeout=config.timeout)
        return cls(
            llm,
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    async def generate(self, profile: UserProfile, resume: ResumeData) -> GenerationResult:
        """Run one generation and return the merged resume.

        Raises a GenerationError subclass on any failure; ``resume`` is left
        untouched so the caller can fall back to it.
        """
        prompt = build_user_prompt(profile, resume)
        logger.info(
            "Generating content: profile=%s experiences=%d",
            profile,
            len(resume.experiences),
        )
        response = await self.llm.generate(
            prompt=prompt,
            system=SYSTEM_PROMPT,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        content = parse_generated_content(response.text)
        merged = merge_generated_content(resume, content)
        logger.info(
            "Content generated: %d tokens, %d/%d experiences rewritten",
            response.total_tokens,
            sum(1 for e in content.experiences if _clean_bullets(e.bullets)),
            len(resume.experiences),
        )
        return GenerationResult(
            resume_data=merged,
            profile=profile,
            tokens_used=response.total_tokens,
        )


def parse_generated_content(text: str) -> GeneratedContent:
    """Validate the raw model output as a GeneratedContent envelope."""
    payload = (text or "").strip()
    if len(payload) < MIN_PAYLOAD_LENGTH:
        logger.error(
            "Generated content too short (%d chars): %r", len(payload), payload[:200]
        )
        raise MalformedResponse("Generated content is empty or too short.")

    try:
        data = extract_json_object(payload)
    except ValueError:
        logger.error("Generated content is not valid JSON: %r", payload[:200])
        raise MalformedResponse() from None

    try:
        return GeneratedContent.model_validate(data)
    except ValidationError as exc:
        logger.error(
            "Generated content does not match schema (%s): %r",
            "; ".join(err["msg"] for err in exc.errors()),
            payload[:200],
        )
        raise MalformedResponse() from exc


def merge_generated_content(resume: ResumeData, content: GeneratedContent) -> ResumeData:
    """Return a copy of ``resume`` with generated text merged in.

    The summary is replaced. Experience ``i`` gets the bullets at index ``i``
    when there are any; otherwise its original description is kept.
    """
    experiences = []
    for i, exp in enumerate(resume.experiences):
        bullets = _clean_bullets(content.experiences[i].bullets) if i < len(content.experiences) else []
        if bullets:
            description = "\n".join(f"{BULLET_GLYPH} {b}" for b in bullets)
            experiences.append(exp.model_copy(update={"description": description}))
        else:
            experiences.append(exp.model_copy())

    merged = resume.model_copy(deep=True)
    merged.summary = content.summary
    merged.experiences = experiences
    return merged


def _clean_bullets(bullets: list[str]) -> list[str]:
    # one line per bullet: inner newlines would break the glyph-per-line layout
    cleaned = (" ".join(_LEADING_GLYPHS.sub("", b).split()) for b in bullets)
    return [b for b in cleaned if b]
