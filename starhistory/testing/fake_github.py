"""
In-memory GitHub API for testing.

FakeGitHub serves the endpoints star-history uses through an
``httpx.MockTransport``, so real clients can run against it unchanged::

    fake = FakeGitHub()
    fake.add_repo("octo/cat", starred_at=create_stargazer_timestamps(100))
    client = StarHistoryClient(transport=fake.transport)
"""

import re
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import httpx

API_URL = "https://api.github.com"

_STARGAZERS = re.compile(r"^/repos/([^/]+/[^/]+)/stargazers$")
_STATS = re.compile(r"^/repos/([^/]+/[^/]+)/stats/contributors$")
_REPO = re.compile(r"^/repos/([^/]+/[^/]+)$")


@dataclass
class FakeRepo:
    """A repository known to FakeGitHub."""

    full_name: str
    repo_id: int
    starred_at: list[datetime] = field(default_factory=list)
    contributors: list[dict[str, Any]] = field(default_factory=list)
    stargazers_count: int | None = None
    honour_star_media_type: bool = True
    stats_pending: bool = False
    link_override: str | None = None

    @property
    def live_count(self) -> int:
        if self.stargazers_count is not None:
            return self.stargazers_count
        return len(self.starred_at)


@dataclass
class FakeFailure:
    """A canned error response."""

    status: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)


class FakeGitHub:
    """Fake GitHub REST API with paginated stargazers and Link headers."""

    def __init__(self, per_page: int = 30) -> None:
        self.per_page = per_page
        self.repos: dict[str, FakeRepo] = {}
        self.requests: list[httpx.Request] = []
        self._failures: dict[tuple[str, int | None], FakeFailure] = {}
        self._lock = threading.Lock()

    @property
    def transport(self) -> httpx.MockTransport:
        """A transport usable by both httpx.Client and httpx.AsyncClient."""
        return httpx.MockTransport(self.handle)

    def add_repo(
        self,
        full_name: str,
        starred_at: list[datetime] | None = None,
        contributors: list[dict[str, Any]] | None = None,
        stargazers_count: int | None = None,
        honour_star_media_type: bool = True,
        stats_pending: bool = False,
        link_override: str | None = None,
    ) -> FakeRepo:
        """
        Register a repository.

        Args:
            full_name: "owner/name"
            starred_at: Stargazer timestamps; served oldest first
            contributors: Raw /stats/contributors entries
            stargazers_count: Live count reported by GET /repos/{repo}
                (default: number of stargazers)
            honour_star_media_type: When False, stargazers come back as bare
                user objects without starred_at
            stats_pending: When True, /stats/contributors answers 202
            link_override: Link header sent instead of the computed one
        """
        repo = FakeRepo(
            full_name=full_name,
            repo_id=len(self.repos) + 1,
            starred_at=sorted(starred_at or []),
            contributors=list(contributors or []),
            stargazers_count=stargazers_count,
            honour_star_media_type=honour_star_media_type,
            stats_pending=stats_pending,
            link_override=link_override,
        )
        self.repos[full_name] = repo
        return repo

    def fail(
        self,
        path: str,
        status: int,
        page: int | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Answer requests for ``path`` (and ``page``, if given) with an error.

        Args:
            path: Request path, e.g. "/repos/octo/cat/stargazers"
            status: HTTP status to return
            page: Only fail this page number (page 1 also matches no page param)
            body: JSON body (default: {"message": "HTTP <status>"})
            headers: Extra response headers
        """
        self._failures[(path, page)] = FakeFailure(
            status=status,
            body=body if body is not None else {"message": f"HTTP {status}"},
            headers=headers or {},
        )

    def requests_to(self, path: str) -> list[httpx.Request]:
        """Recorded requests whose path equals ``path``."""
        return [request for request in self.requests if request.url.path == path]

    def requested_pages(self, path: str) -> list[int]:
        """Sorted page numbers requested for ``path`` (no page param counts as 1)."""
        return sorted(_page_of(request) for request in self.requests_to(path))

    def reset(self) -> None:
        """Forget recorded requests and canned failures."""
        with self._lock:
            self.requests.clear()
        self._failures.clear()

    def handle(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)

        path = request.url.path
        page = _page_of(request)
        failure = self._failures.get((path, page)) or self._failures.get((path, None))
        if failure is not None:
            return httpx.Response(failure.status, json=failure.body, headers=failure.headers)

        for pattern, handler in (
            (_STARGAZERS, self._stargazers),
            (_STATS, self._stats),
            (_REPO, self._repo),
        ):
            match = pattern.match(path)
            if match:
                repo = self.repos.get(match.group(1))
                if repo is None:
                    return _not_found()
                return handler(repo, request)

        return _not_found()

    def _repo(self, repo: FakeRepo, request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"id": repo.repo_id, "full_name": repo.full_name, "stargazers_count": repo.live_count},
        )

    def _stargazers(self, repo: FakeRepo, request: httpx.Request) -> httpx.Response:
        per_page = int(request.url.params.get("per_page", self.per_page))
        page = _page_of(request)
        star_json = "star+json" in request.headers.get("accept", "")
        entries = []
        for offset, starred_at in enumerate(_slice(repo.starred_at, page, per_page)):
            user = {"login": f"user{(page - 1) * per_page + offset + 1}"}
            if star_json and repo.honour_star_media_type:
                entries.append({"starred_at": _iso(starred_at), "user": user})
            else:
                entries.append(user)

        link = repo.link_override
        if link is None:
            link = _link_header(
                f"{API_URL}/repositories/{repo.repo_id}/stargazers?per_page={per_page}&",
                page,
                _page_count(len(repo.starred_at), per_page),
            )
        return _json_response(entries, link)

    def _stats(self, repo: FakeRepo, request: httpx.Request) -> httpx.Response:
        if repo.stats_pending:
            return httpx.Response(202, json={})

        per_page = int(request.url.params.get("per_page", self.per_page))
        page = _page_of(request)
        link = repo.link_override
        if link is None:
            link = _link_header(
                f"{API_URL}/repositories/{repo.repo_id}/stats/contributors?per_page={per_page}&",
                page,
                _page_count(len(repo.contributors), per_page),
            )
        return _json_response(_slice(repo.contributors, page, per_page), link)


def _page_of(request: httpx.Request) -> int:
    return int(request.url.params.get("page", 1))


def _slice(items: list[Any], page: int, per_page: int) -> list[Any]:
    start = (page - 1) * per_page
    return items[start:start + per_page]


def _page_count(total: int, per_page: int) -> int:
    return max(1, -(-total // per_page))


def _link_header(base: str, page: int, last: int) -> str | None:
    if last <= 1:
        return None
    relations = []
    if page > 1:
        relations.append(f'<{base}page={page - 1}>; rel="prev"')
    if page < last:
        relations.append(f'<{base}page={page + 1}>; rel="next"')
        relations.append(f'<{base}page={last}>; rel="last"')
    if page > 1:
        relations.append(f'<{base}page=1>; rel="first"')
    return ", ".join(relations)


def _json_response(data: Any, link: str | None) -> httpx.Response:
    headers = {"Link": link} if link else {}
    return httpx.Response(200, json=data, headers=headers)


def _not_found() -> httpx.Response:
    return httpx.Response(
        404,
        json={"message": "Not Found", "documentation_url": "https://docs.github.com/rest"},
        headers={"X-GitHub-Request-Id": "FAKE:0001"},
    )


def _iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
