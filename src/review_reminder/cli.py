"""Command-line entry point for scheduled (CI) runs."""

import asyncio
import logging
import sys

import click

from review_reminder import __version__
from review_reminder.config import get_settings, load_config
from review_reminder.exceptions import ReminderError
from review_reminder.logging_config import configure_logging
from review_reminder.reminder import run_reminder

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--dry-run/--no-dry-run",
    default=None,
    help="Log messages instead of posting them (overrides DRY_RUN).",
)
@click.option("--log-level", default=None, help="Root log level (overrides LOG_LEVEL).")
@click.version_option(__version__, prog_name="review-reminder")
def main(dry_run: bool | None, log_level: str | None) -> None:
    """Post Slack reminders for open pull requests awaiting review."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level)

    try:
        config = load_config(settings, dry_run=dry_run)
        result = asyncio.run(run_reminder(config))
    except ReminderError as exc:
        logger.error("Review reminder failed: %s", exc, exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logger.info(
        "Review reminder finished",
        extra={"channels": result.channels_notified, "messages": result.messages_posted},
    )


if __name__ == "__main__":
    main()
