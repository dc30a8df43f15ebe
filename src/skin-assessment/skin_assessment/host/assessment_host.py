"""AssessmentHost — composition root wiring config, dispatcher, trackers, and sessions."""

import weakref
from pathlib import Path

import httpx

from skin_assessment.analytics.domain.tracker import AnalyticsTracker
from skin_assessment.analytics.infrastructure.composite_tracker import (
    CompositeAnalyticsTracker,
)
from skin_assessment.analytics.infrastructure.structlog_tracker import (
    StructlogAnalyticsTracker,
)
from skin_assessment.config.domain.config import AssessmentConfig
from skin_assessment.config.infrastructure.observer import StructlogConfigObserver
from skin_assessment.config.infrastructure.yaml_loader import YamlConfigLoader
from skin_assessment.session.application.quiz_session import QuizSession
from skin_assessment.session.domain.observer import SessionObserver
from skin_assessment.session.infrastructure.observer import StructlogSessionObserver
from skin_assessment.submission.infrastructure.observer import (
    StructlogSubmissionObserver,
)
from skin_assessment.submission.infrastructure.webhook import WebhookLeadDispatcher


class AssessmentHost:
    """Owns the process-wide collaborators and hands out one QuizSession per visitor.

    The webhook client is shared by all sessions; call `aclose()` on shutdown
    so that leads already handed to the dispatcher finish sending.
    """

    def __init__(
        self,
        config: AssessmentConfig,
        dispatcher: WebhookLeadDispatcher,
        tracker: AnalyticsTracker,
        session_observer: SessionObserver,
    ) -> None:
        self._config = config
        self._dispatcher = dispatcher
        self._tracker = tracker
        self._session_observer = session_observer
        self._sessions: weakref.WeakSet[QuizSession] = weakref.WeakSet()

    @classmethod
    def from_config(
        cls,
        config: AssessmentConfig,
        client: httpx.AsyncClient | None = None,
        trackers: list[AnalyticsTracker] | None = None,
    ) -> "AssessmentHost":
        """Wire the structlog-backed collaborators around an already loaded config.

        Extra trackers (for example a pixel forwarder) run after the log tracker.
        """
        dispatcher = WebhookLeadDispatcher(
            webhook=config.webhook,
            lead=config.lead,
            observer=StructlogSubmissionObserver(),
            client=client,
        )
        tracker = CompositeAnalyticsTracker(
            trackers=[StructlogAnalyticsTracker(), *(trackers or [])]
        )
        return cls(
            config=config,
            dispatcher=dispatcher,
            tracker=tracker,
            session_observer=StructlogSessionObserver(),
        )

    @classmethod
    def from_config_file(
        cls,
        path: Path,
        client: httpx.AsyncClient | None = None,
        trackers: list[AnalyticsTracker] | None = None,
    ) -> "AssessmentHost":
        """Load the YAML config at path and wire a host around it.

        Raises:
            SkinAssessmentError: any config loading or validation failure.
        """
        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        config = loader.load(path=path)
        return cls.from_config(config=config, client=client, trackers=trackers)

    @property
    def config(self) -> AssessmentConfig:
        return self._config

    def new_session(self) -> QuizSession:
        session = QuizSession(
            dispatcher=self._dispatcher,
            tracker=self._tracker,
            observer=self._session_observer,
            booking=self._config.booking,
            pacing=self._config.pacing,
        )
        self._sessions.add(session)
        return session

    async def aclose(self) -> None:
        """Close live sessions, then wait for in-flight lead dispatches."""
        for session in list(self._sessions):
            session.close()
        await self._dispatcher.aclose()
