"""Pull request comment publishing via the GitHub REST API.

A report comment is identified by a marker string embedded in its body.
Publishing updates the first comment that carries the marker, or creates
a new comment when none does, so repeated runs on the same pull request
keep a single report comment. Requests are not retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import httpx
import structlog

from lcovreport.core.errors import PublishError

logger = structlog.get_logger()

DEFAULT_API_URL = "https://api.github.com"
PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class PublishResult:
    """Outcome of an upsert."""

    action: Literal["created", "updated"]
    comment_id: int
    html_url: str | None = None


class GitHubCommentPublisher:
    """Create or update the coverage comment on a pull request."""

    def __init__(
        self,
        repository: str,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.repository = repository
        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> GitHubCommentPublisher:
        return self

    def __exit__(self, exc_type, exc, traceback) -> None:  # type: ignore[no-untyped-def]
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise PublishError.transport_error(method, url, str(e)) from e
        if response.status_code >= 300:
            raise PublishError.http_error(method, url, response.status_code, response.text)
        return response.json()

    def list_comments(self, pr_number: int) -> list[dict[str, Any]]:
        """All issue comments on the pull request, oldest first."""
        url = f"/repos/{self.repository}/issues/{pr_number}/comments"
        comments: list[dict[str, Any]] = []
        page = 1
        while True:
            batch = self._request("GET", url, params={"per_page": PAGE_SIZE, "page": page})
            comments.extend(batch)
            if len(batch) < PAGE_SIZE:
                return comments
            page += 1

    def find_comment(self, pr_number: int, marker: str) -> dict[str, Any] | None:
        """First comment whose body contains the marker."""
        for comment in self.list_comments(pr_number):
            if marker in (comment.get("body") or ""):
                return comment
        return None

    def upsert_comment(self, pr_number: int, body: str, marker: str) -> PublishResult:
        """Replace the marked comment's body, or post a new comment.

        Raises:
            PublishError: On a transport failure or a non-2xx response.
        """
        existing = self.find_comment(pr_number, marker)
        if existing is not None:
            data = self._request(
                "PATCH",
                f"/repos/{self.repository}/issues/comments/{existing['id']}",
                json={"body": body},
            )
            action: Literal["created", "updated"] = "updated"
        else:
            data = self._request(
                "POST",
                f"/repos/{self.repository}/issues/{pr_number}/comments",
                json={"body": body},
            )
            action = "created"

        result = PublishResult(
            action=action,
            comment_id=data["id"],
            html_url=data.get("html_url"),
        )
        logger.info(
            f"comment.{action}",
            repository=self.repository,
            pr_number=pr_number,
            comment_id=result.comment_id,
        )
        return result
