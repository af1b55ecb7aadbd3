"""Startup configuration loading.

The environment is read exactly once, when the process starts, and the result
is an immutable :class:`AppConfig` handed to :func:`src.main.create_app`.
Nothing else in the application reads environment variables.
"""

from dataclasses import dataclass

from pydantic import ValidationError

from src.utils.settings.app import AppSettings
from src.utils.settings.openai_images import OpenAISettings
from src.utils.settings.unkey import UnkeySettings


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid configuration: " + "; ".join(problems))


@dataclass(frozen=True)
class AppConfig:
    app: AppSettings
    unkey: UnkeySettings
    openai: OpenAISettings

    @property
    def is_production(self) -> bool:
        return self.app.is_production


def _describe(exc: ValidationError) -> list[str]:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            problems.append(f"{field} is required")
        else:
            problems.append(f"{field}: {error['msg']}")
    return problems


def load_config(env_file: str | None = ".env") -> AppConfig:
    """Read all settings groups and fail fast with every problem found."""
    problems: list[str] = []
    loaded = {}

    for name, settings_cls in (
        ("app", AppSettings),
        ("unkey", UnkeySettings),
        ("openai", OpenAISettings),
    ):
        try:
            loaded[name] = settings_cls(_env_file=env_file)
        except ValidationError as e:
            problems.extend(_describe(e))

    if problems:
        raise ConfigurationError(problems)

    return AppConfig(**loaded)
