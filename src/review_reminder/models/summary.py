"""Rendering projection of a pull request."""

from pydantic import BaseModel, ConfigDict

from review_reminder.models.github import PullRequest


class PRSummary(BaseModel):
    """The subset of a pull request shown in a Slack reminder line."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    url: str
    author: str
    labels: list[str] = []

    @classmethod
    def from_pull_request(cls, pr: PullRequest) -> "PRSummary":
        return cls(
            number=pr.number,
            title=pr.title or "",
            url=pr.html_url,
            author=pr.author,
            labels=pr.label_names,
        )
