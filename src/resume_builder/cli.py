"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from resume_builder.config import load_config, resolve_api_key
from resume_builder.errors import GenerationError, MissingCredentials, NetworkOrUnknown
from resume_builder.export.html_renderer import AVAILABLE_TEMPLATES
from resume_builder.export.pdf_renderer import render_pdf
from resume_builder.models.profile import (
    EXPERIENCE_LEVELS,
    PROFILES,
    RESUME_GOALS,
    QuizAnswers,
)
from resume_builder.models.resume import ResumeData
from resume_builder.pipeline.content_generator import ContentGenerator
from resume_builder.pipeline.profile_classifier import detect_profile, profile_label

app = typer.Typer(
    name="resume-builder",
    help="AI-assisted resume builder",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)


def _load_resume(path: Path) -> ResumeData:
    if not path.exists():
        console.print(f"[red]Resume data file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return ResumeData.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        console.print(f"[red]Invalid resume data in {path}:[/red]\n{e}")
        raise typer.Exit(1) from e


def _check_template(template: str) -> None:
    if template not in AVAILABLE_TEMPLATES:
        console.print(
            f"[red]Unknown template {template!r}. Choose one of: "
            f"{', '.join(AVAILABLE_TEMPLATES)}[/red]"
        )
        raise typer.Exit(1)


@app.command()
def classify(
    goal: str = typer.Option(None, "--goal", "-g", help=f"One of: {', '.join(RESUME_GOALS)}"),
    experience: str = typer.Option(
        None, "--experience", "-e", help=f"One of: {', '.join(EXPERIENCE_LEVELS)}"
    ),
    area: str = typer.Option(None, "--area", "-a", help="Career area"),
) -> None:
    """Detect the resume profile from the three quiz answers."""
    answers = QuizAnswers(goal=goal, experience_level=experience, career_area=area)
    profile = detect_profile(answers)
    console.print(f"[bold]{profile}[/bold] ({profile_label(profile)})")


@app.command()
def generate(
    data: Path = typer.Argument(help="Resume data JSON file (camelCase keys)"),
    profile: str = typer.Option(..., "--profile", "-p", help=f"One of: {', '.join(PROFILES)}"),
    output: Path = typer.Option(None, "--output", "-o", help="Where to write the merged JSON"),
    pdf: Path = typer.Option(None, "--pdf", help="Also render a PDF to this path"),
    template: str = typer.Option("premium", "--template", "-t", help="simple | premium"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Polish the summary and experience bullets with the LLM."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    if profile not in PROFILES:
        console.print(f"[red]Unknown profile {profile!r}. Choose one of: {', '.join(PROFILES)}[/red]")
        raise typer.Exit(1)
    _check_template(template)

    resume = _load_resume(data)
    if output is None:
        output = data.with_name(f"{data.stem}.generated.json")

    config = load_config()
    failure: GenerationError | None = None
    result_data = resume
    try:
        api_key = resolve_api_key()
        if api_key is None:
            raise MissingCredentials()
        generator = ContentGenerator.from_config(config.llm, api_key)
        with console.status("Generating resume content..."):
            result = asyncio.run(generator.generate(profile, resume))
        result_data = result.resume_data
        console.print(f"[green]Content generated ({result.tokens_used} tokens)[/green]")
    except GenerationError as e:
        failure = e
    except Exception:
        logger.exception("Unexpected error during resume generation")
        failure = NetworkOrUnknown("Unexpected error while generating the resume.")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(result_data.to_wire(), indent=2, ensure_ascii=False), encoding="utf-8")
    console.print(f"[green]Resume data saved: {output}[/green]")

    if pdf:
        pdf.parent.mkdir(parents=True, exist_ok=True)
        pdf.write_bytes(render_pdf(result_data, template, profile))
        console.print(f"[green]PDF saved: {pdf}[/green]")

    if failure is not None:
        hint = "You can run the command again." if failure.retryable else "Fix the configuration first."
        console.print(
            Panel(
                f"{failure.message}\nThe original content was kept. {hint}",
                title=failure.kind,
                border_style="red",
            )
        )
        raise typer.Exit(2)


@app.command()
def render(
    data: Path = typer.Argument(help="Resume data JSON file"),
    output: Path = typer.Argument(help="Output PDF path"),
    template: str = typer.Option("premium", "--template", "-t", help="simple | premium"),
    profile: str = typer.Option(None, "--profile", "-p", help="Profile shown as the tagline"),
) -> None:
    """Render resume data to PDF without calling the LLM."""
    _check_template(template)
    resume = _load_resume(data)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(render_pdf(resume, template, profile))
    console.print(f"[green]PDF saved: {output}[/green]")


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address"),
    port: int = typer.Option(None, "--port", help="Bind port"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from resume_builder.web.app import create_app

    config = load_config()
    logging.basicConfig(level=logging.INFO)
    if resolve_api_key() is None:
        console.print("[yellow]ANTHROPIC_API_KEY is not set; generation requests will fail.[/yellow]")
    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
    )


if __name__ == "__main__":
    app()
