"""Open pull request listing with page-number pagination."""

import logging
from typing import Any

import httpx

from review_reminder.exceptions import TransportError
from review_reminder.models.github import PullRequest

logger = logging.getLogger(__name__)

PAGE_SIZE = 100

# Upper bound on pages fetched in one run (100,000 PRs). A server that never
# returns a short page would otherwise loop forever.
MAX_PAGES = 1000


async def github_request(
    client: httpx.AsyncClient, url: str, params: dict[str, Any] | None = None
) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Raises:
        TransportError: On a non-2xx status (carries status and raw body) or
            when the request itself fails (status 0).
    """
    try:
        response = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        raise TransportError(0, str(exc)) from exc

    if not response.is_success:
        raise TransportError(response.status_code, response.text)

    return response.json()


async def list_all_open_prs(
    client: httpx.AsyncClient, owner: str, repo: str
) -> list[PullRequest]:
    """Fetch every open PR for ``owner/repo``.

    Requests pages of PAGE_SIZE starting at 1 and stops at the first page
    shorter than PAGE_SIZE (an empty page included). A repository with an
    exact multiple of PAGE_SIZE open PRs therefore costs one extra request.
    """
    prs: list[PullRequest] = []
    page = 1

    while True:
        if page > MAX_PAGES:
            raise TransportError(0, f"Pagination exceeded {MAX_PAGES} pages for {owner}/{repo}")

        batch = await github_request(
            client,
            f"/repos/{owner}/{repo}/pulls",
            params={"state": "open", "per_page": PAGE_SIZE, "page": page},
        )
        if not isinstance(batch, list):
            raise TransportError(200, f"Expected a JSON array of pull requests, got {type(batch).__name__}")

        prs.extend(PullRequest.model_validate(item) for item in batch)
        logger.debug("Fetched page %d with %d PRs", page, len(batch))

        if len(batch) < PAGE_SIZE:
            break
        page += 1

    return prs


class GitHubPullSource:
    """PR source backed by the GitHub REST API."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def fetch_open_prs(self, owner: str, repo: str) -> list[PullRequest]:
        return await list_all_open_prs(self._client, owner, repo)
