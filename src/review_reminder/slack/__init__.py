"""Slack egress: mentions, message chunking and delivery."""

from review_reminder.slack.chunking import SLACK_MAX_CHUNK, chunk_text
from review_reminder.slack.client import create_slack_client
from review_reminder.slack.mentions import to_slack_mention
from review_reminder.slack.notifier import SlackNotifier, post_message

__all__ = [
    "SLACK_MAX_CHUNK",
    "SlackNotifier",
    "chunk_text",
    "create_slack_client",
    "post_message",
    "to_slack_mention",
]
