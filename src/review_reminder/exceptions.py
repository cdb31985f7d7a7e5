"""Exceptions raised by the review reminder pipeline."""


class ReminderError(Exception):
    """Base exception for all review reminder errors."""


class ConfigurationError(ReminderError):
    """A required configuration input is absent or malformed."""


class TransportError(ReminderError):
    """The GitHub API answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"GitHub API error {status_code}: {body}")


class DeliveryError(ReminderError):
    """Slack reported a failed ``chat.postMessage`` call."""

    def __init__(self, channel: str, error: str):
        self.channel = channel
        self.error = error
        super().__init__(f"Slack chat.postMessage failed for {channel}: {error}")
