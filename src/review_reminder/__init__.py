"""Slack reminders for open pull requests, grouped by label-routed channel and reviewer."""

__version__ = "0.1.0"
