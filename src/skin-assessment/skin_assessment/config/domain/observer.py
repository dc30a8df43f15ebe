"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, webhook_host: str) -> None: ...

    def config_insecure_webhook_warning(self, webhook_host: str) -> None: ...
