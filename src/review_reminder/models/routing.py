"""Label-to-channel routing table."""

from pydantic import BaseModel, ConfigDict


class LabelRule(BaseModel):
    """Routes a PR to ``channel_id`` when it carries any of ``labels_any``."""

    model_config = ConfigDict(frozen=True)

    labels_any: list[str] = []
    channel_id: str


class LabelChannelMap(BaseModel):
    """Ordered routing rules plus an optional fallback channel.

    Rules are evaluated in declaration order and the first match wins.
    """

    model_config = ConfigDict(frozen=True)

    default_channel_id: str | None = None
    rules: list[LabelRule] = []
