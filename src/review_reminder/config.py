"""Application configuration via pydantic-settings.

``Settings`` is the raw environment view. ``load_config`` validates it once
into an immutable ``ReminderConfig`` that is passed explicitly through the
pipeline.
"""

import json
from functools import lru_cache

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from review_reminder.exceptions import ConfigurationError
from review_reminder.models.routing import LabelChannelMap

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def _env(name: str, *legacy: str) -> AliasChoices:
    # Plain name, GitHub Actions input form, then legacy script names.
    return AliasChoices(name, f"input_{name}", *legacy)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub
    github_token: str = Field(default="", validation_alias=_env("github_token"))
    github_repository: str = Field(default="", validation_alias=_env("github_repository"))

    # Slack
    slack_bot_token: str = Field(default="", validation_alias=_env("slack_bot_token"))

    # Routing (JSON documents)
    label_channel_map: str = Field(
        default="", validation_alias=_env("label_channel_map", "label_channel_map_json")
    )
    slack_user_map: str = Field(
        default="", validation_alias=_env("slack_user_map", "slack_user_map_json")
    )

    dry_run: str = Field(default="false", validation_alias=_env("dry_run"))

    # Scheduler
    scheduler_secret: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()


class ReminderConfig(BaseModel):
    """Validated, immutable inputs for one reminder run."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    routing: LabelChannelMap
    user_map: dict[str, str] = {}
    github_token: str
    slack_bot_token: str
    dry_run: bool = False

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_flag(value: str | None) -> bool:
    """Interpret an environment flag. Empty or unknown values are false."""
    return (value or "").strip().lower() in TRUTHY_VALUES


def _parse_json(name: str, raw: str):
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{name} is not valid JSON: {exc}") from exc


def parse_label_channel_map(raw: str) -> LabelChannelMap:
    """Parse and validate the routing table JSON.

    Raises ConfigurationError for unparsable JSON, a wrong shape, or a rule
    whose ``channel_id`` is empty.
    """
    if not raw or not raw.strip():
        raise ConfigurationError("label_channel_map is required")

    data = _parse_json("label_channel_map", raw)
    try:
        label_map = LabelChannelMap.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"label_channel_map is malformed: {exc}") from exc

    for index, rule in enumerate(label_map.rules):
        if not rule.channel_id.strip():
            raise ConfigurationError(f"label_channel_map rule #{index} has an empty channel_id")
    return label_map


def parse_slack_user_map(raw: str) -> dict[str, str]:
    """Parse the GitHub login -> Slack user ID JSON. Empty input means no mapping."""
    if not raw or not raw.strip():
        return {}

    data = _parse_json("slack_user_map", raw)
    if not isinstance(data, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    ):
        raise ConfigurationError("slack_user_map must be a JSON object of string to string")
    return data


def load_config(settings: Settings, dry_run: bool | None = None) -> ReminderConfig:
    """Validate settings into a ReminderConfig.

    Args:
        settings: Raw settings from the environment.
        dry_run: Overrides the ``dry_run`` setting when not None.

    Raises:
        ConfigurationError: If a required input is missing or malformed.
    """
    missing = [
        name
        for name in ("github_token", "github_repository", "slack_bot_token")
        if not getattr(settings, name).strip()
    ]
    if missing:
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    owner, sep, repo = settings.github_repository.strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ConfigurationError(
            f"github_repository must be 'owner/repo', got {settings.github_repository!r}"
        )

    return ReminderConfig(
        owner=owner,
        repo=repo,
        routing=parse_label_channel_map(settings.label_channel_map),
        user_map=parse_slack_user_map(settings.slack_user_map),
        github_token=settings.github_token.strip(),
        slack_bot_token=settings.slack_bot_token.strip(),
        dry_run=parse_flag(settings.dry_run) if dry_run is None else dry_run,
    )
