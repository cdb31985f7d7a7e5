"""GitHub egress: authenticated client and open PR listing."""

from review_reminder.github.client import create_github_client, make_headers
from review_reminder.github.pulls import GitHubPullSource, github_request, list_all_open_prs

__all__ = [
    "GitHubPullSource",
    "create_github_client",
    "github_request",
    "list_all_open_prs",
    "make_headers",
]
