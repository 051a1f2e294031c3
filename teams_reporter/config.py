"""Configuration for the Teams test reporter."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, SecretStr

from teams_reporter.models.tree import TestRun

DEFAULT_PROXY_URL = "http://enc-proxy-mi.enc.local:8080"

type WebhookType = Literal["msteams", "powerautomate"]


@dataclass(frozen=True)
class StaticUrl:
    """A URL known when the configuration is written."""

    value: str

    def resolve(self) -> str | None:
        return self.value or None


@dataclass(frozen=True)
class ComputedUrl:
    """A URL produced at composition time, e.g. from CI environment variables."""

    producer: Callable[[], object]

    def resolve(self) -> str | None:
        value = self.producer()
        if isinstance(value, str) and value:
            return value
        return None


type UrlSource = StaticUrl | ComputedUrl


def to_url_source(value: object) -> object:
    """Wrap plain strings and zero-argument callables into a ``UrlSource``."""
    if isinstance(value, str):
        return StaticUrl(value)
    if callable(value):
        return ComputedUrl(value)
    return value


OptionalUrlSource = Annotated[UrlSource | None, BeforeValidator(to_url_source)]


class ReporterConfig(BaseModel):
    """Configuration for building and delivering a test run notification."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    webhook_url: SecretStr | None = None
    webhook_type: WebhookType = "powerautomate"
    title: str = "Playwright Test Results"
    enable_emoji: bool = False
    notify_on_success: bool = True
    quiet: bool = False
    debug: bool = False
    should_run: Callable[[TestRun], bool] | None = None
    mention_on_failure: str | None = None
    mention_on_failure_text: str = "{mentions} please validate the test results."
    link_to_results_url: OptionalUrlSource = None
    link_to_results_text: str = "View test results"
    link_text_on_failure: str | None = None
    link_url_on_failure: OptionalUrlSource = None
    # None sends the request directly
    proxy_url: str | None = DEFAULT_PROXY_URL
