"""Run content generation for the wizard and fold the outcome into its state."""

from __future__ import annotations

import logging
from collections.abc import Callable

from resume_builder.config import LLMConfig
from resume_builder.errors import GenerationError, MissingCredentials, NetworkOrUnknown
from resume_builder.pipeline.content_generator import ContentGenerator
from resume_builder.wizard import state as wz

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error while generating the resume."


async def run_generation(
    state: wz.WizardState,
    config: LLMConfig,
    api_key: str | None,
    generator_factory: Callable[[LLMConfig, str], ContentGenerator] = ContentGenerator.from_config,
) -> wz.WizardState:
    """Generate once and return the next state.

    Always lands on a usable state: the generated data on success, or the
    original data with an error message on any failure.
    """
    try:
        if api_key is None:
            raise MissingCredentials()
        generator = generator_factory(config, api_key)
        result = await generator.generate(state.profile, state.resume_data)
    except GenerationError as e:
        logger.warning("Generation failed: %s", e.kind)
        return wz.generation_failed(state, e.message)
    except Exception:
        logger.exception("Unexpected error during resume generation")
        return wz.generation_failed(state, NetworkOrUnknown(UNEXPECTED_ERROR_MESSAGE).message)
    return wz.generation_succeeded(state, result.resume_data)
