"""GitHub pull request payloads as returned by the REST ``pulls`` endpoint.

Only the fields the reminder reads are modelled; everything else in the API
response is ignored.
"""

from pydantic import BaseModel, ConfigDict


class GitHubUser(BaseModel):
    """A GitHub account reference (author or requested reviewer)."""

    model_config = ConfigDict(extra="ignore")

    login: str = ""


class GitHubLabel(BaseModel):
    """A label attached to a pull request."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None


class PullRequest(BaseModel):
    """An open pull request, read-only for the duration of a run."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    number: int
    title: str | None = None
    html_url: str = ""
    draft: bool | None = None
    user: GitHubUser | None = None
    labels: list[GitHubLabel] = []
    requested_reviewers: list[GitHubUser] = []

    @property
    def label_names(self) -> list[str]:
        """Non-empty label names in API order."""
        return [label.name for label in self.labels if label.name]

    @property
    def reviewer_logins(self) -> list[str]:
        """Logins of individually requested reviewers (teams are not included)."""
        return [reviewer.login for reviewer in self.requested_reviewers if reviewer.login]

    @property
    def author(self) -> str:
        if self.user and self.user.login:
            return self.user.login
        return "unknown"
