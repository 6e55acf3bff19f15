"""Tests for the typer CLI."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from typer.testing import CliRunner

from resume_builder import cli
from resume_builder.models.resume import ResumeData

runner = CliRunner()


@pytest.fixture
def data_file(tmp_path, sample_resume):
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(sample_resume.to_wire()), encoding="utf-8")
    return path


def test_classify():
    result = runner.invoke(cli.app, ["classify", "--goal", "first-job-internship", "-e", "c-level"])
    assert result.exit_code == 0
    assert "first-job" in result.output


def test_classify_without_answers():
    result = runner.invoke(cli.app, ["classify"])
    assert result.exit_code == 0
    assert "junior" in result.output


def test_generate_without_key_keeps_original(data_file, sample_resume, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    output = data_file.with_name("out.json")

    result = runner.invoke(cli.app, ["generate", str(data_file), "-p", "senior", "-o", str(output)])

    assert result.exit_code == 2
    assert "MissingCredentials" in result.output
    saved = ResumeData.model_validate_json(output.read_text(encoding="utf-8"))
    assert saved == sample_resume


def test_generate_unknown_profile(data_file):
    result = runner.invoke(cli.app, ["generate", str(data_file), "-p", "wizard"])
    assert result.exit_code == 1


def test_generate_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    result = runner.invoke(cli.app, ["generate", str(tmp_path / "nope.json"), "-p", "senior"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_render_unknown_template(data_file, tmp_path):
    result = runner.invoke(cli.app, ["render", str(data_file), str(tmp_path / "out.pdf"), "-t", "fancy"])
    assert result.exit_code == 1


def test_generate_unexpected_error_keeps_original(data_file, sample_resume, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    generator_cls = MagicMock()
    generator_cls.from_config.return_value.generate = AsyncMock(side_effect=RuntimeError("boom"))
    monkeypatch.setattr(cli, "ContentGenerator", generator_cls)
    output = data_file.with_name("out.json")

    result = runner.invoke(cli.app, ["generate", str(data_file), "-p", "senior", "-o", str(output)])

    assert result.exit_code == 2
    assert "NetworkOrUnknown" in result.output
    saved = ResumeData.model_validate_json(output.read_text(encoding="utf-8"))
    assert saved == sample_resume
