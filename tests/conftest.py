"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from resume_builder.clients.llm_client import LLMClient, LLMResponse
from resume_builder.models.resume import (
    Certification,
    Education,
    Experience,
    LanguageSkill,
    PersonalInfo,
    ResumeData,
)


@pytest.fixture
def sample_resume() -> ResumeData:
    return ResumeData(
        personal_info=PersonalInfo(
            full_name="Maria Silva",
            email="maria@example.com",
            phone="+55 11 91234-5678",
            location="São Paulo, SP",
            linked_in="linkedin.com/in/mariasilva",
        ),
        experiences=[
            Experience(
                id="exp-1",
                company="Acme Corp",
                position="Backend Developer",
                location="São Paulo",
                start_date="2021-03",
                current=True,
                description="Built APIs in Python",
            ),
            Experience(
                id="exp-2",
                company="Startup XYZ",
                position="Junior Developer",
                start_date="2019-01",
                end_date="2021-02",
                description="Maintained Django apps",
            ),
        ],
        education=[
            Education(
                id="edu-1",
                institution="Universidade de São Paulo",
                degree="BSc",
                field="Computer Science",
                start_date="2015",
                end_date="2019",
            ),
        ],
        skills=["Python", "Django", "PostgreSQL"],
        languages=[LanguageSkill(language="English", level="Fluent")],
        certifications=[
            Certification(id="cert-1", name="AWS Cloud Practitioner", issuer="AWS", date="2022")
        ],
        summary="Backend developer with 5 years of experience.",
    )


@pytest.fixture
def generated_payload() -> dict:
    return {
        "summary": "Backend developer with 5 years building high-traffic Python APIs.",
        "experiences": [
            {
                "bullets": [
                    "Designed REST APIs serving 1M requests per day",
                    "Cut query latency by 40% through indexing",
                ]
            },
            {"bullets": ["Maintained 12 Django applications with 99.9% uptime"]},
        ],
    }


@pytest.fixture
def mock_llm_client(generated_payload) -> LLMClient:
    """Create a mock LLM client that returns the generated payload."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(
            text=json.dumps(generated_payload), input_tokens=900, output_tokens=300
        )
    )
    return client
