"""Outbound lead webhook configuration model."""

from pydantic import AnyHttpUrl, BaseModel, Field, TypeAdapter, field_validator

_HTTP_URL: TypeAdapter[AnyHttpUrl] = TypeAdapter(AnyHttpUrl)


class WebhookConfig(BaseModel, frozen=True):
    """Where completed leads are posted.

    `url` stays a plain string so it is posted exactly as configured, but it
    must parse as an absolute http(s) URL.
    """

    url: str = Field(min_length=1)
    timeout_seconds: float = Field(default=10.0, gt=0.0)

    @field_validator("url")
    @classmethod
    def _require_http_url(cls, value: str) -> str:
        try:
            _HTTP_URL.validate_python(value)
        except ValueError as exc:
            raise ValueError(f"not an absolute http(s) URL: {value!r}") from exc
        return value
