"""Label-based channel selection."""

from collections.abc import Iterable

from review_reminder.models.routing import LabelChannelMap


def pick_channel(labels: Iterable[str] | None, label_map: LabelChannelMap) -> str | None:
    """Return the channel of the first rule sharing a label with ``labels``.

    Falls back to ``default_channel_id``, which may itself be None.
    """
    names = {name for name in (labels or ()) if name}

    for rule in label_map.rules:
        if names.intersection(rule.labels_any):
            return rule.channel_id

    return label_map.default_channel_id
