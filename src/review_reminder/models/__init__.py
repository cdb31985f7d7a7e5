"""Data models for the review reminder pipeline."""

from review_reminder.models.github import GitHubLabel, GitHubUser, PullRequest
from review_reminder.models.routing import LabelChannelMap, LabelRule
from review_reminder.models.summary import PRSummary

__all__ = [
    "GitHubLabel",
    "GitHubUser",
    "PullRequest",
    "LabelChannelMap",
    "LabelRule",
    "PRSummary",
]
