"""Tests for the FastAPI application."""

from __future__ import annotations

import inspect
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from resume_builder.clients.llm_client import LLMResponse
from resume_builder.config import AppConfig
from resume_builder.errors import AuthenticationFailed, RateLimited, UpstreamServiceError
from resume_builder.pipeline.content_generator import ContentGenerator
from resume_builder.web import app as web_app
from resume_builder.web.app import create_app


@pytest.fixture
def factory(mock_llm_client):
    return MagicMock(side_effect=lambda config, api_key: ContentGenerator(mock_llm_client))


@pytest.fixture
def client(monkeypatch, factory):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    return TestClient(create_app(AppConfig(), generator_factory=factory))


@pytest.fixture
def request_body(sample_resume):
    return {"profile": "mid-level", "resumeData": sample_resume.to_wire()}


class TestGenerateResume:
    def test_success_shape(self, client, request_body, generated_payload):
        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        assert data["profile"] == "mid-level"
        assert data["tokensUsed"] == 1200
        assert data["generatedAt"]
        assert data["resumeData"]["summary"] == generated_payload["summary"]
        assert data["resumeData"]["experiences"][0]["description"].startswith("• Designed")
        assert data["resumeData"]["personalInfo"]["fullName"] == "Maria Silva"

    def test_factory_receives_config_and_key(self, client, request_body, factory):
        client.post("/api/generate-resume", json=request_body)
        config, api_key = factory.call_args.args
        assert config.temperature == 0.7
        assert api_key == "test-key"

    def test_missing_credentials(self, client, request_body, factory, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY")

        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 500
        data = resp.json()
        assert data["success"] is False
        assert data["errorKind"] == "MissingCredentials"
        assert data["retryable"] is False
        assert "ANTHROPIC_API_KEY" in data["error"]
        factory.assert_not_called()

    def test_rate_limited_returns_original_data(self, client, request_body, mock_llm_client):
        mock_llm_client.generate.side_effect = RateLimited()

        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 429
        data = resp.json()
        assert data["success"] is False
        assert data["errorKind"] == "RateLimited"
        assert data["retryable"] is True
        assert data["resumeData"] == request_body["resumeData"]
        mock_llm_client.generate.assert_awaited_once()

    def test_authentication_failed(self, client, request_body, mock_llm_client):
        mock_llm_client.generate.side_effect = AuthenticationFailed()

        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 401
        assert resp.json()["retryable"] is False

    def test_upstream_error(self, client, request_body, mock_llm_client):
        mock_llm_client.generate.side_effect = UpstreamServiceError()

        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 500
        assert resp.json()["errorKind"] == "UpstreamServiceError"

    def test_malformed_success_response(self, client, request_body, mock_llm_client):
        mock_llm_client.generate.return_value = LLMResponse(
            text="I am sorry, but I can only answer in plain prose for this request.",
            input_tokens=100,
            output_tokens=20,
        )

        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 500
        data = resp.json()
        assert data["errorKind"] == "MalformedResponse"
        assert data["retryable"] is True
        assert data["resumeData"]["summary"] == "Backend developer with 5 years of experience."

    def test_unexpected_exception(self, client, request_body, mock_llm_client):
        mock_llm_client.generate.side_effect = RuntimeError("boom")

        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 500
        data = resp.json()
        assert data["errorKind"] == "NetworkOrUnknown"
        assert "boom" not in data["error"]

    def test_invalid_profile(self, client, request_body):
        request_body["profile"] = "wizard"

        resp = client.post("/api/generate-resume", json=request_body)

        assert resp.status_code == 422
        assert resp.json()["success"] is False

    def test_empty_resume_data(self, client):
        resp = client.post("/api/generate-resume", json={"profile": "first-job", "resumeData": {}})
        assert resp.status_code == 200
        assert resp.json()["resumeData"]["experiences"] == []


class TestOtherRoutes:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.json() == {"status": "ok", "configured": True}

    def test_health_without_key(self, client, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY")
        assert client.get("/api/health").json()["configured"] is False

    def test_detect_profile(self, client):
        resp = client.post(
            "/api/detect-profile",
            json={"goal": "freelance-consulting", "experienceLevel": "7-15-years"},
        )
        assert resp.status_code == 200
        assert resp.json()["profile"] == "freelancer"
        assert resp.json()["label"]

    def test_detect_profile_empty_answers(self, client):
        resp = client.post("/api/detect-profile", json={})
        assert resp.json()["profile"] == "junior"

    def test_render_pdf(self, client, sample_resume, monkeypatch):
        render = MagicMock(return_value=b"%PDF-1.7 test")
        monkeypatch.setattr(web_app, "render_pdf", render)

        resp = client.post("/api/render/simple", json=sample_resume.to_wire())

        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert "resume-simple.pdf" in resp.headers["content-disposition"]
        assert resp.content == b"%PDF-1.7 test"
        assert render.call_args.args[1] == "simple"

    def test_render_unknown_template(self, client, sample_resume):
        resp = client.post("/api/render/fancy", json=sample_resume.to_wire())
        assert resp.status_code == 404
        assert resp.json()["success"] is False

    def test_render_runs_off_the_event_loop(self, client):
        route = next(r for r in client.app.routes if getattr(r, "path", "") == "/api/render/{template}")
        # sync endpoints are dispatched to the threadpool
        assert not inspect.iscoroutinefunction(route.endpoint)
