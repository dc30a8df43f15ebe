"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, webhook_host: str) -> None:
        self._log.info("config.loaded", name=name, webhook_host=webhook_host)

    def config_insecure_webhook_warning(self, webhook_host: str) -> None:
        self._log.warning(
            "config.insecure_webhook_warning",
            webhook_host=webhook_host,
            message="Lead webhook is not HTTPS; contact details travel unencrypted",
        )
