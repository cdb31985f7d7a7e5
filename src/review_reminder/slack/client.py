"""Async Slack client construction.

One client per run, built from the bot token in the run's ReminderConfig
rather than a process-wide singleton.
"""

from slack_sdk.web.async_client import AsyncWebClient


def create_slack_client(token: str) -> AsyncWebClient:
    """Return an AsyncWebClient authenticated with the given bot token."""
    return AsyncWebClient(token=token)
