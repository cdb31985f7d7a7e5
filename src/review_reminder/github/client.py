"""Async GitHub REST client construction."""

import httpx

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


def make_headers(token: str) -> dict[str, str]:
    """Build authentication and version headers for GitHub REST API requests."""
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


def create_github_client(
    token: str, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Return an AsyncClient bound to the GitHub API with auth headers preset.

    The caller owns the client and must close it (``async with`` or ``aclose``).
    ``transport`` is exposed so tests can substitute ``httpx.MockTransport``.
    """
    return httpx.AsyncClient(
        base_url=GITHUB_API_URL,
        headers=make_headers(token),
        transport=transport,
    )
