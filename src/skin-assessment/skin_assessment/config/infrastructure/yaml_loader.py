"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml
from pydantic import ValidationError

from skin_assessment.config.domain.config import AssessmentConfig
from skin_assessment.config.domain.observer import ConfigObserver
from skin_assessment.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from skin_assessment.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AssessmentConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AssessmentConfig:
        """
        Load, interpolate, validate, and return an AssessmentConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
            yaml.YAMLError: if the file is not valid YAML.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(interpolated=interpolate(raw))
        webhook_host = urlsplit(cfg.webhook.url).hostname or ""
        _emit_warnings(cfg=cfg, webhook_host=webhook_host, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, webhook_host=webhook_host)
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(interpolated: Any) -> AssessmentConfig:
    try:
        return AssessmentConfig.model_validate(interpolated)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(
    cfg: AssessmentConfig, webhook_host: str, observer: ConfigObserver
) -> None:
    if urlsplit(cfg.webhook.url).scheme != "https":
        observer.config_insecure_webhook_warning(webhook_host=webhook_host)
