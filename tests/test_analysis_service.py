"""Tests for the analysis service."""

import asyncio
import json

import pytest

from growth_tracker.domain.entries import Domain, TransactionType
from growth_tracker.errors import AnalysisFailedError, MissingCredentialError
from growth_tracker.services.analysis import AnalysisService, build_analysis_prompt
from tests.conftest import (
    FailingStructuredClient,
    FakeStructuredClient,
    MissingKeyClient,
    mind_log,
    muscle_log,
    transaction,
)


def test_analyze_returns_summary_and_tips(model_options) -> None:
    client = FakeStructuredClient()
    service = AnalysisService(client=client, options=model_options)
    logs = [muscle_log("2025-11-17"), muscle_log("2025-11-18")]

    analysis = asyncio.run(service.analyze(Domain.MUSCLE, logs))

    assert analysis.summary == "Solid week."
    assert len(analysis.tips) == 3
    [call] = client.calls
    assert call["model"] == "gpt-5.2"
    assert call["schema_name"] == "muscle_analysis"


def test_prompt_embeds_entries_as_camel_case_json() -> None:
    logs = [mind_log("2025-11-17", top_apps="Kindle", screen_time_minutes=90)]

    prompt = build_analysis_prompt(Domain.MIND, logs)

    assert "psychologist" in prompt
    _, data = prompt.split("\n\nData: ")
    assert json.loads(data) == [
        {
            "id": "mind-2025-11-17",
            "date": "2025-11-17",
            "mindScore": 5,
            "meditationMinutes": 0,
            "bookName": "",
            "pagesRead": 0,
            "screenTimeMinutes": 90,
            "topApps": "Kindle",
            "digitalDetox": False,
            "podcast": "",
        }
    ]


def test_prompts_differ_per_domain() -> None:
    muscle = build_analysis_prompt(Domain.MUSCLE, [])
    money = build_analysis_prompt(
        Domain.MONEY, [transaction("2025-11-01", TransactionType.EXPENSE, -50)]
    )

    assert "fitness coach" in muscle
    assert muscle.endswith("Data: []")
    assert "financial strategist" in money
    assert '"amount": -50.0' in money


def test_invalid_payload_raises_analysis_failed(model_options) -> None:
    client = FakeStructuredClient(payload={"summary": "No tips here"})
    service = AnalysisService(client=client, options=model_options)

    with pytest.raises(AnalysisFailedError):
        asyncio.run(service.analyze(Domain.MIND, [mind_log("2025-11-17")]))


def test_transport_error_raises_analysis_failed(model_options) -> None:
    service = AnalysisService(client=FailingStructuredClient(), options=model_options)

    with pytest.raises(AnalysisFailedError) as exc_info:
        asyncio.run(service.analyze(Domain.MUSCLE, [muscle_log("2025-11-17")]))

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_missing_credential_propagates(model_options) -> None:
    service = AnalysisService(client=MissingKeyClient(), options=model_options)

    with pytest.raises(MissingCredentialError):
        asyncio.run(service.analyze(Domain.MUSCLE, [muscle_log("2025-11-17")]))
