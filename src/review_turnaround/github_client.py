"""GitHub REST and GraphQL client for review metrics data retrieval."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

from .config import Config
from .errors import ApiError, AuthenticationError
from .models import (
    CommittedEvent,
    PullRequest,
    ReviewedEvent,
    ReviewRequestedEvent,
    TimelineEvent,
    UnrecognizedEvent,
)

logger = logging.getLogger(__name__)

# GraphQL offers no MERGED_AT ordering; UPDATED_AT is the nearest recency order,
# so the 100 returned PRs are the most recently updated merged ones.
_MERGED_PULL_REQUESTS_QUERY = """
query($owner: String!, $name: String!, $first: Int!) {
  repository(owner: $owner, name: $name) {
    pullRequests(states: MERGED, first: $first, orderBy: {field: UPDATED_AT, direction: DESC}) {
      nodes {
        number
        title
        createdAt
        author {
          login
          ... on User {
            name
          }
        }
      }
    }
  }
}
"""


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse GitHub ISO8601 timestamps into timezone-aware UTC datetimes."""
    if not value:
        return None

    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    parsed = datetime.fromisoformat(normalized)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_timeline_event(item: Dict[str, Any]) -> TimelineEvent:
    """Decode one raw timeline entry into its tagged event variant.

    Only ``committed``, ``review_requested`` and ``reviewed`` entries are
    decoded. A recognized entry missing its timestamp yields an event whose
    timestamp is ``None``.
    """
    kind = item.get("event")

    if kind == CommittedEvent.kind:
        committer = item.get("committer") or {}
        return CommittedEvent(committed_at=parse_datetime(committer.get("date")))
    if kind == ReviewRequestedEvent.kind:
        return ReviewRequestedEvent(created_at=parse_datetime(item.get("created_at")))
    if kind == ReviewedEvent.kind:
        return ReviewedEvent(submitted_at=parse_datetime(item.get("submitted_at")))

    return UnrecognizedEvent(kind=kind)


class GitHubClient:
    """Small, typed client for the GitHub pull request APIs."""

    _API_URL = "https://api.github.com"
    _API_VERSION = "2022-11-28"
    _PAGE_SIZE = 100

    def __init__(self, config: Config, timeout_seconds: int = 30) -> None:
        """Initialize an authenticated GitHub API client.

        Args:
            config: Validated runtime configuration including repository and token.
            timeout_seconds: Per-request timeout in seconds.
        """
        self._config = config
        self._timeout_seconds = timeout_seconds

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {config.token}",
                "X-GitHub-Api-Version": self._API_VERSION,
            }
        )

    def _build_url(self, path: str) -> str:
        """Build a fully qualified API URL from a path below the API root."""
        return f"{self._API_URL}/{path.lstrip('/')}"

    def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        """Execute a single request and decode its JSON body.

        Failures are never retried.

        Raises:
            AuthenticationError: If GitHub rejects the token (HTTP 401).
            ApiError: If the request fails, returns HTTP >= 400, or does not
                return valid JSON.
        """
        url = self._build_url(path)

        try:
            response = self._session.request(method, url, timeout=self._timeout_seconds, **kwargs)
        except requests.RequestException as exc:
            raise ApiError(f"GitHub request failed: {method} {url}") from exc

        status_code = response.status_code
        if status_code == 401:
            raise AuthenticationError(
                f"GitHub rejected the configured token: {method} {url} returned 401"
            )
        if status_code >= 400:
            raise ApiError(
                "GitHub API request failed: "
                f"{method} {url} returned {status_code} - {response.text}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"GitHub API returned invalid JSON: {method} {url}") from exc

    def list_merged_pull_requests(self) -> List[PullRequest]:
        """List up to 100 most recent merged pull requests of the configured repository.

        Pull requests beyond the first page are not fetched.
        """
        payload = self._request_json(
            "POST",
            "graphql",
            json={
                "query": _MERGED_PULL_REQUESTS_QUERY,
                "variables": {
                    "owner": self._config.owner,
                    "name": self._config.name,
                    "first": self._PAGE_SIZE,
                },
            },
        )

        if not isinstance(payload, dict):
            raise ApiError("GitHub GraphQL API returned unexpected payload shape.")

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(error.get("message", error)) for error in errors)
            raise ApiError(
                f"GitHub GraphQL query failed for '{self._config.repository}': {messages}"
            )

        repository = (payload.get("data") or {}).get("repository")
        if repository is None:
            raise ApiError(f"Repository '{self._config.repository}' was not found.")

        pull_requests: List[PullRequest] = []
        for node in (repository.get("pullRequests") or {}).get("nodes") or []:
            author = node.get("author") or {}
            pull_requests.append(
                PullRequest(
                    number=int(node["number"]),
                    title=str(node.get("title") or ""),
                    author_login=str(author.get("login") or "ghost"),
                    author_name=author.get("name"),
                    created_at=parse_datetime(node["createdAt"]),
                )
            )

        logger.info(
            "Fetched merged pull requests",
            extra={"repository": self._config.repository, "count": len(pull_requests)},
        )
        return pull_requests

    def list_timeline_events(self, pr_number: int) -> List[TimelineEvent]:
        """List the chronological timeline events of a pull request.

        Only the first page of up to 100 events is fetched.
        """
        payload = self._request_json(
            "GET",
            f"repos/{self._config.owner}/{self._config.name}/issues/{pr_number}/timeline",
            params={"per_page": self._PAGE_SIZE},
        )

        if not isinstance(payload, list):
            raise ApiError(
                "GitHub timeline API returned unexpected payload shape: "
                f"repository={self._config.repository}, pr={pr_number}"
            )

        return [parse_timeline_event(item) for item in payload]
