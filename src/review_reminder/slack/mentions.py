"""GitHub login to Slack mention conversion."""

from collections.abc import Mapping


def to_slack_mention(github_login: str, slack_user_map: Mapping[str, str]) -> str:
    """Return ``<@UID>`` for a mapped login, ``@login`` as plain text otherwise."""
    uid = slack_user_map.get(github_login)
    return f"<@{uid}>" if uid else f"@{github_login}"
