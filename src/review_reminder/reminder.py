"""Review reminder orchestration.

Fetches open PRs, drops drafts and WIP, routes each PR to a Slack channel by
label, groups them per requested reviewer, renders one message per channel
(plus one for PRs nobody was asked to review) and posts the chunks in order.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from review_reminder.config import ReminderConfig
from review_reminder.github import GitHubPullSource, create_github_client
from review_reminder.models.github import PullRequest
from review_reminder.models.routing import LabelChannelMap
from review_reminder.models.summary import PRSummary
from review_reminder.routing import pick_channel
from review_reminder.slack import SlackNotifier, chunk_text, create_slack_client, to_slack_mention

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHANNEL_HEADER = "*PR review requests (open PRs / requested reviewers)*"
UNASSIGNED_HEADER = "*PRs without assigned reviewers*"


class PullSource(Protocol):
    async def fetch_open_prs(self, owner: str, repo: str) -> list[PullRequest]: ...


class Notifier(Protocol):
    async def post(self, channel: str, text: str) -> None: ...


@dataclass
class ReminderPlan:
    """PRs grouped for delivery: channel -> reviewer login -> PRs."""

    by_channel: dict[str, dict[str, list[PRSummary]]] = field(default_factory=dict)
    unassigned: list[PRSummary] = field(default_factory=list)
    skipped: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.by_channel and not self.unassigned


@dataclass
class ReminderResult:
    """Outcome of one run, returned to the CLI and HTTP trigger."""

    open_prs: int = 0
    skipped: int = 0
    channels_notified: list[str] = field(default_factory=list)
    messages_posted: int = 0
    unassigned: int = 0


def is_wip_or_draft(pr: PullRequest) -> bool:
    """Whether a PR is excluded from review reminders.

    True for GitHub drafts and for titles containing ``[wip]`` or starting
    with ``wip:`` (case-insensitive).
    """
    if pr.draft is True:
        return True

    title = (pr.title or "").lower()
    return "[wip]" in title or title.startswith("wip:")


def stable_sort(items: Iterable[T], key: Callable[[T], Any]) -> list[T]:
    """Return a new list sorted by ``key``; equal keys keep their input order."""
    return sorted(items, key=key)


def group_pull_requests(prs: Iterable[PullRequest], label_map: LabelChannelMap) -> ReminderPlan:
    """Filter and classify PRs into per-channel reviewer buckets.

    PRs with requested reviewers are routed by label and filed once under each
    reviewer; PRs routed nowhere are dropped. PRs without reviewers go to the
    unassigned list, but only when a default channel exists to receive them.
    """
    plan = ReminderPlan()

    for pr in prs:
        if is_wip_or_draft(pr):
            logger.debug("Skipping WIP/Draft PR #%d: %s", pr.number, pr.title)
            plan.skipped += 1
            continue

        summary = PRSummary.from_pull_request(pr)
        reviewers = list(dict.fromkeys(pr.reviewer_logins))

        if not reviewers:
            if label_map.default_channel_id:
                plan.unassigned.append(summary)
            continue

        channel_id = pick_channel(summary.labels, label_map)
        if not channel_id:
            logger.debug("No channel for PR #%d (labels: %s)", pr.number, summary.labels)
            continue

        by_reviewer = plan.by_channel.setdefault(channel_id, {})
        for login in reviewers:
            by_reviewer.setdefault(login, []).append(summary)

    return plan


def format_pr_line(summary: PRSummary) -> str:
    """Render one PR as a Slack mrkdwn bullet with link, author and labels."""
    label_text = f" [{', '.join(summary.labels)}]" if summary.labels else ""
    return (
        f"• <{summary.url}|#{summary.number} {summary.title}>"
        f" (author: {summary.author}){label_text}"
    )


def render_channel_message(
    repository: str,
    by_reviewer: Mapping[str, list[PRSummary]],
    slack_user_map: Mapping[str, str],
) -> str:
    """Build the per-channel digest: one section per reviewer, sorted by login."""
    lines: list[str] = [f"{CHANNEL_HEADER}  `{repository}`", ""]

    for login in sorted(by_reviewer):
        lines.append(f"*{to_slack_mention(login, slack_user_map)}*")
        for summary in stable_sort(by_reviewer[login], key=lambda s: s.number):
            lines.append(format_pr_line(summary))
        lines.append("")

    return "\n".join(lines).strip()


def render_unassigned_message(repository: str, summaries: Iterable[PRSummary]) -> str:
    """Build the digest of PRs that have no requested reviewer."""
    lines: list[str] = [f"{UNASSIGNED_HEADER}  `{repository}`", ""]
    lines.extend(format_pr_line(s) for s in stable_sort(summaries, key=lambda s: s.number))
    return "\n".join(lines).strip()


class ReviewReminder:
    """Runs one reminder pass against injected PR source and notifier."""

    def __init__(self, config: ReminderConfig, source: PullSource, notifier: Notifier):
        self.config = config
        self.source = source
        self.notifier = notifier

    async def _deliver(self, channel: str, message: str) -> int:
        posted = 0
        for chunk in chunk_text(message):
            await self.notifier.post(channel, chunk)
            posted += 1
        return posted

    async def run(self) -> ReminderResult:
        """Fetch, group, render and deliver.

        Any fetch or delivery error propagates; messages already posted stand.
        """
        config = self.config
        logger.info("Fetching open PRs for %s...", config.repository)
        prs = await self.source.fetch_open_prs(config.owner, config.repo)
        logger.info("Found %d open PRs", len(prs))

        plan = group_pull_requests(prs, config.routing)
        result = ReminderResult(
            open_prs=len(prs), skipped=plan.skipped, unassigned=len(plan.unassigned)
        )

        if plan.is_empty:
            logger.info("No open PRs to notify.")
            return result

        for channel_id, by_reviewer in plan.by_channel.items():
            message = render_channel_message(config.repository, by_reviewer, config.user_map)
            result.messages_posted += await self._deliver(channel_id, message)
            result.channels_notified.append(channel_id)

        if plan.unassigned:
            # Unassigned PRs are only collected when a default channel exists.
            default_channel = config.routing.default_channel_id
            message = render_unassigned_message(config.repository, plan.unassigned)
            result.messages_posted += await self._deliver(default_channel, message)
            if default_channel not in result.channels_notified:
                result.channels_notified.append(default_channel)

        logger.info(
            "PR review reminders sent",
            extra={
                "channels": len(result.channels_notified),
                "messages": result.messages_posted,
                "unassigned": result.unassigned,
                "dry_run": config.dry_run,
            },
        )
        return result


async def run_reminder(config: ReminderConfig) -> ReminderResult:
    """Run the reminder with live GitHub and Slack clients."""
    async with create_github_client(config.github_token) as github_client:
        reminder = ReviewReminder(
            config,
            source=GitHubPullSource(github_client),
            notifier=SlackNotifier(create_slack_client(config.slack_bot_token), dry_run=config.dry_run),
        )
        return await reminder.run()
