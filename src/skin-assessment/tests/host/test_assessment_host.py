"""Tests for AssessmentHost wiring."""

import json
from pathlib import Path

import httpx
import pytest

from skin_assessment.config.domain.booking import BookingConfig
from skin_assessment.config.domain.config import AssessmentConfig
from skin_assessment.config.domain.pacing import PacingConfig
from skin_assessment.config.domain.webhook import WebhookConfig
from skin_assessment.config.infrastructure.errors import MissingEnvVarsError
from skin_assessment.host.assessment_host import AssessmentHost
from skin_assessment.session.domain.phase import ShowingResults
from tests.analytics.fake_tracker import FakeAnalyticsTracker

FIXTURES = Path(__file__).parent.parent / "fixtures"

_CONFIG = AssessmentConfig(
    name="clinic",
    webhook=WebhookConfig(url="https://hooks.example/lead"),
    booking=BookingConfig(
        suitable_url="https://clinic.example/book",
        alternative_url="https://clinic.example/consult",
    ),
    pacing=PacingConfig(answer_delay_seconds=0),
)


def _recording_client(requests: list[httpx.Request], status: int = 200) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _complete(session) -> None:
    for _ in range(6):
        session.select_answer(option_index=1)
    session.update_contact(field="first_name", value="Ann")
    session.update_contact(field="email", value="a@b.co")
    session.update_contact(field="phone", value="07000")
    session.submit_lead()


class TestNewSession:
    async def test_sessions_are_independent(self) -> None:
        host = AssessmentHost.from_config(config=_CONFIG, client=_recording_client([]))

        first = host.new_session()
        second = host.new_session()
        first.select_answer(option_index=4)

        assert first.session_id != second.session_id
        assert second.answers == {}
        await host.aclose()

    async def test_extra_trackers_receive_checkpoints(self) -> None:
        tracker = FakeAnalyticsTracker()
        host = AssessmentHost.from_config(
            config=_CONFIG, client=_recording_client([]), trackers=[tracker]
        )

        session = host.new_session()
        _complete(session)
        await host.aclose()

        assert tracker.started == [session.session_id]
        assert [lead.fitzpatrick_type for lead in tracker.leads] == [1]


class TestEndToEnd:
    async def test_completed_session_posts_one_lead(self) -> None:
        requests: list[httpx.Request] = []
        host = AssessmentHost.from_config(
            config=_CONFIG, client=_recording_client(requests)
        )

        session = host.new_session()
        _complete(session)
        await host.aclose()

        assert isinstance(session.phase, ShowingResults)
        assert len(requests) == 1
        body = json.loads(requests[0].content)
        # Six answers of 1 total 6, the top of Type I.
        assert body["fitzpatrick_type"] == 1
        assert body["tags"] == "CO2 Laser - Qualified"
        assert body["firstName"] == "Ann"
        assert body["lastName"] == ""

    async def test_webhook_outage_does_not_affect_results(self) -> None:
        requests: list[httpx.Request] = []
        host = AssessmentHost.from_config(
            config=_CONFIG, client=_recording_client(requests, status=502)
        )

        session = host.new_session()
        _complete(session)
        await host.aclose()

        assert isinstance(session.phase, ShowingResults)
        assert len(requests) == 1

    async def test_aclose_closes_live_sessions(self) -> None:
        host = AssessmentHost.from_config(config=_CONFIG, client=_recording_client([]))
        session = host.new_session()

        await host.aclose()

        assert session.closed


class TestFromConfigFile:
    def test_loads_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEAD_WEBHOOK_URL", "https://hooks.example/lead")

        host = AssessmentHost.from_config_file(
            path=FIXTURES / "valid_config.yaml", client=_recording_client([])
        )

        assert host.config.name == "clinic-skin-assessment"
        assert host.config.webhook.url == "https://hooks.example/lead"

    def test_config_errors_propagate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LEAD_WEBHOOK_URL", raising=False)

        with pytest.raises(MissingEnvVarsError):
            AssessmentHost.from_config_file(path=FIXTURES / "valid_config.yaml")
