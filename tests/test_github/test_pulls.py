"""Tests for GitHub request handling and open PR pagination."""

import httpx
import pytest

from review_reminder.exceptions import TransportError
from review_reminder.github import GitHubPullSource, create_github_client, github_request, list_all_open_prs
from review_reminder.github import pulls


def _pr(number: int) -> dict:
    return {
        "number": number,
        "title": f"PR {number}",
        "html_url": f"https://github.com/octo/widgets/pull/{number}",
    }


def _paged_transport(pages: list[list[dict]], requests: list[httpx.Request]) -> httpx.MockTransport:
    """Serve ``pages`` by the ``page`` query parameter, recording every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        page = int(request.url.params["page"])
        return httpx.Response(200, json=pages[page - 1] if page <= len(pages) else [])

    return httpx.MockTransport(handler)


async def test_request_sends_auth_and_version_headers():
    """Every request carries the bearer token, JSON accept type and pinned API version."""
    requests: list[httpx.Request] = []
    async with create_github_client("test-token", transport=_paged_transport([[]], requests)) as client:
        await list_all_open_prs(client, "octo", "widgets")

    headers = requests[0].headers
    assert headers["Authorization"] == "Bearer test-token"
    assert headers["Accept"] == "application/vnd.github+json"
    assert headers["X-GitHub-Api-Version"] == "2022-11-28"


async def test_single_page():
    requests: list[httpx.Request] = []
    transport = _paged_transport([[_pr(1), _pr(2)]], requests)
    async with create_github_client("t", transport=transport) as client:
        prs = await list_all_open_prs(client, "octo", "widgets")

    assert [pr.number for pr in prs] == [1, 2]
    assert len(requests) == 1
    url = requests[0].url
    assert url.path == "/repos/octo/widgets/pulls"
    assert url.params["state"] == "open"
    assert url.params["per_page"] == "100"
    assert url.params["page"] == "1"


async def test_pagination_until_short_page():
    requests: list[httpx.Request] = []
    pages = [[_pr(n) for n in range(1, 101)], [_pr(101)]]
    async with create_github_client("t", transport=_paged_transport(pages, requests)) as client:
        prs = await list_all_open_prs(client, "octo", "widgets")

    assert len(prs) == 101
    assert [r.url.params["page"] for r in requests] == ["1", "2"]


async def test_exact_page_multiple_costs_one_extra_request():
    """A full first page followed by an empty one issues exactly two requests."""
    requests: list[httpx.Request] = []
    pages = [[_pr(n) for n in range(1, 101)], []]
    async with create_github_client("t", transport=_paged_transport(pages, requests)) as client:
        prs = await list_all_open_prs(client, "octo", "widgets")

    assert len(prs) == 100
    assert len(requests) == 2


async def test_empty_repository():
    requests: list[httpx.Request] = []
    async with create_github_client("t", transport=_paged_transport([[]], requests)) as client:
        prs = await list_all_open_prs(client, "octo", "widgets")

    assert prs == []
    assert len(requests) == 1


async def test_error_status_raises_transport_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(404, text="Not Found"))
    async with create_github_client("t", transport=transport) as client:
        with pytest.raises(TransportError) as exc_info:
            await list_all_open_prs(client, "octo", "widgets")

    assert exc_info.value.status_code == 404
    assert exc_info.value.body == "Not Found"
    assert str(exc_info.value) == "GitHub API error 404: Not Found"


async def test_error_status_with_empty_body():
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    async with create_github_client("t", transport=transport) as client:
        with pytest.raises(TransportError, match="GitHub API error 500: "):
            await github_request(client, "/repos/octo/widgets/pulls")


async def test_connection_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with create_github_client("t", transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError) as exc_info:
            await github_request(client, "/repos/octo/widgets/pulls")

    assert exc_info.value.status_code == 0
    assert "connection refused" in exc_info.value.body


async def test_non_list_response_is_rejected():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"message": "?"}))
    async with create_github_client("t", transport=transport) as client:
        with pytest.raises(TransportError, match="JSON array"):
            await list_all_open_prs(client, "octo", "widgets")


async def test_page_cap_stops_endless_pagination(monkeypatch: pytest.MonkeyPatch):
    """A server that only ever returns full pages is cut off at MAX_PAGES."""
    monkeypatch.setattr(pulls, "MAX_PAGES", 3)
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[_pr(n) for n in range(100)])

    async with create_github_client("t", transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError, match="exceeded 3 pages"):
            await list_all_open_prs(client, "octo", "widgets")

    assert len(requests) == 3


async def test_pull_source_delegates_to_listing():
    requests: list[httpx.Request] = []
    async with create_github_client("t", transport=_paged_transport([[_pr(7)]], requests)) as client:
        prs = await GitHubPullSource(client).fetch_open_prs("octo", "widgets")

    assert [pr.number for pr in prs] == [7]
