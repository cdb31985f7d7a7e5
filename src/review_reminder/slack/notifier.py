"""Slack delivery of rendered reminder messages.

Unlike fire-and-forget thread replies, reminder delivery is the point of the
run: a failed post raises DeliveryError and aborts the remaining deliveries.
"""

import logging

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from review_reminder.exceptions import DeliveryError

logger = logging.getLogger(__name__)


async def post_message(
    client: AsyncWebClient, channel: str, text: str, dry_run: bool = False
) -> None:
    """Post ``text`` to ``channel`` with link and media unfurling disabled.

    In dry-run mode the message is logged instead of sent. Callers chunk the
    text beforehand; its length is not checked here.

    Args:
        client: Authenticated Slack client.
        channel: Slack channel ID.
        text: Message body in Slack mrkdwn.
        dry_run: Log instead of posting.

    Raises:
        DeliveryError: If Slack responds with ``ok: false``.
    """
    if dry_run:
        logger.info("[DRY_RUN] Would post to %s:\n%s\n---", channel, text)
        return

    try:
        await client.chat_postMessage(
            channel=channel,
            text=text,
            unfurl_links=False,
            unfurl_media=False,
        )
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        logger.error(
            "Slack chat.postMessage failed for %s: %s", channel, error_code, exc_info=True
        )
        raise DeliveryError(channel, error_code or str(exc)) from exc

    logger.info("Posted reminder", extra={"channel": channel, "characters": len(text)})


class SlackNotifier:
    """Notifier that posts to Slack, or only logs when ``dry_run`` is set."""

    def __init__(self, client: AsyncWebClient, dry_run: bool = False):
        self._client = client
        self.dry_run = dry_run

    async def post(self, channel: str, text: str) -> None:
        await post_message(self._client, channel, text, dry_run=self.dry_run)
