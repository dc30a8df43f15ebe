"""WebhookLeadDispatcher — fire-and-forget JSON POST of completed leads via httpx."""

import asyncio
import time
from collections.abc import Callable
from datetime import UTC, datetime

import httpx

from skin_assessment.config.domain.lead import LeadConfig
from skin_assessment.config.domain.webhook import WebhookConfig
from skin_assessment.lead.domain.contact import LeadContact
from skin_assessment.scoring.domain.classification import Classification
from skin_assessment.submission.domain.observer import SubmissionObserver
from skin_assessment.submission.domain.payload import SubmissionPayload


def _utc_now() -> datetime:
    return datetime.now(UTC)


class WebhookLeadDispatcher:
    """Posts each lead once to the configured webhook on a detached asyncio task.

    `submit()` returns as soon as the task is scheduled. Non-2xx responses and
    transport errors are reported to the observer and otherwise ignored; there
    is no retry. Satisfies the LeadDispatcher protocol structurally.
    """

    def __init__(
        self,
        webhook: WebhookConfig,
        lead: LeadConfig,
        observer: SubmissionObserver,
        client: httpx.AsyncClient | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._webhook = webhook
        self._lead = lead
        self._observer = observer
        self._owns_client = client is None
        self._client = (
            client
            if client is not None
            else httpx.AsyncClient(timeout=webhook.timeout_seconds)
        )
        self._clock = clock
        # Strong references so in-flight sends are not garbage collected.
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    def submit(self, contact: LeadContact, classification: Classification) -> None:
        """Build the payload and schedule its delivery. Must be called on a running loop."""
        payload = SubmissionPayload.build(
            contact=contact,
            classification=classification,
            lead_config=self._lead,
            submitted_at=self._clock(),
        )
        task = asyncio.get_running_loop().create_task(self._send(payload))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        self._observer.dispatch_scheduled(
            fitzpatrick_type=payload.fitzpatrick_type,
            submitted_at=payload.submitted_at,
        )

    async def drain(self) -> None:
        """Wait for every in-flight send to finish. Used on shutdown and in tests."""
        while self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    async def aclose(self) -> None:
        await self.drain()
        if self._owns_client:
            await self._client.aclose()

    async def _send(self, payload: SubmissionPayload) -> None:
        start = time.monotonic()
        try:
            response = await self._client.post(
                self._webhook.url,
                json=payload.to_json_body(),
                timeout=self._webhook.timeout_seconds,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._observer.dispatch_failed(
                fitzpatrick_type=payload.fitzpatrick_type,
                reason=str(exc) or type(exc).__name__,
            )
            return

        duration_ms = int((time.monotonic() - start) * 1000)
        if response.is_success:
            self._observer.dispatch_delivered(
                fitzpatrick_type=payload.fitzpatrick_type,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
        else:
            self._observer.dispatch_rejected(
                fitzpatrick_type=payload.fitzpatrick_type,
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
