"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from review_reminder.app import app
from review_reminder.config import ReminderConfig
from review_reminder.models.routing import LabelChannelMap, LabelRule


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def reminder_config() -> ReminderConfig:
    """A config routing `frontend` to C1 with C0 as the default channel."""
    return ReminderConfig(
        owner="octo",
        repo="widgets",
        routing=LabelChannelMap(
            default_channel_id="C0",
            rules=[LabelRule(labels_any=["frontend"], channel_id="C1")],
        ),
        user_map={"alice": "UALICE"},
        github_token="ghp-test",
        slack_bot_token="xoxb-test",
    )
