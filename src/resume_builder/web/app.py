"""FastAPI app exposing profile detection, content generation and PDF export."""

from __future__ import annotations

import logging
from collections.abc import Callable
from time import perf_counter

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from resume_builder import __version__
from resume_builder.config import AppConfig, LLMConfig, load_config, resolve_api_key
from resume_builder.errors import GenerationError, MissingCredentials, NetworkOrUnknown
from resume_builder.export.html_renderer import AVAILABLE_TEMPLATES
from resume_builder.export.pdf_renderer import render_pdf
from resume_builder.models.profile import QuizAnswers
from resume_builder.models.resume import ResumeData
from resume_builder.pipeline.content_generator import ContentGenerator
from resume_builder.pipeline.profile_classifier import detect_profile, profile_label
from resume_builder.web.schemas import (
    DetectProfileResponse,
    GenerateResumeFailure,
    GenerateResumeRequest,
    GenerateResumeSuccess,
)

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[LLMConfig, str], ContentGenerator]


def create_app(
    config: AppConfig | None = None,
    generator_factory: GeneratorFactory | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``generator_factory`` builds the ContentGenerator for a request once the
    credential is known; tests pass one wired to a stub client.
    """
    config = config or load_config()
    factory = generator_factory or ContentGenerator.from_config

    app = FastAPI(title="Resume Builder API", version=__version__)
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        response = await call_next(request)
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            (perf_counter() - start) * 1000,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "success": False,
                "error": "Invalid request payload",
                "details": jsonable_errors(exc),
            },
        )

    router = APIRouter(prefix="/api")

    @router.get("/health")
    async def health() -> dict:
        return {"status": "ok", "configured": resolve_api_key() is not None}

    @router.post("/detect-profile", response_model=DetectProfileResponse)
    async def detect(answers: QuizAnswers) -> DetectProfileResponse:
        profile = detect_profile(answers)
        return DetectProfileResponse(profile=profile, label=profile_label(profile))

    @router.post("/generate-resume")
    async def generate_resume(body: GenerateResumeRequest) -> JSONResponse:
        logger.info(
            "Resume generation requested: profile=%s experiences=%d",
            body.profile,
            len(body.resume_data.experiences),
        )
        try:
            api_key = resolve_api_key()
            if api_key is None:
                raise MissingCredentials()
            generator = factory(config.llm, api_key)
            result = await generator.generate(body.profile, body.resume_data)
        except GenerationError as exc:
            logger.warning("Resume generation failed: %s (%s)", exc.kind, exc.message)
            return _failure(exc, body.resume_data)
        except Exception:
            logger.exception("Unexpected error during resume generation")
            unexpected = NetworkOrUnknown("Unexpected error while generating the resume.")
            return _failure(unexpected, body.resume_data)

        payload = GenerateResumeSuccess(
            resume_data=result.resume_data,
            profile=result.profile,
            generated_at=result.generated_at,
            tokens_used=result.tokens_used,
        )
        return JSONResponse(content=payload.model_dump(mode="json", by_alias=True))

    @router.post("/render/{template}")
    def render(template: str, resume: ResumeData, profile: str | None = None) -> Response:
        if template not in AVAILABLE_TEMPLATES:
            return JSONResponse(
                status_code=404,
                content={"success": False, "error": f"Unknown template: {template}"},
            )
        pdf = render_pdf(resume, template, profile)
        filename = f"resume-{template}.pdf"
        return Response(
            content=pdf,
            media_type="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    app.include_router(router)
    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the raw input, which may hold a photo."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def _failure(exc: GenerationError, original: ResumeData) -> JSONResponse:
    payload = GenerateResumeFailure(
        error=exc.message,
        error_kind=exc.kind,
        retryable=exc.retryable,
        resume_data=original,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=payload.model_dump(mode="json", by_alias=True),
    )
