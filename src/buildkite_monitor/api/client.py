import logging
from typing import Any

import httpx

from buildkite_monitor.api.exceptions import (
    AuthenticationError,
    NoBuildsError,
    NotFoundError,
    RateLimitError,
)
from buildkite_monitor.api.models import Build, Organization, Pipeline

logger = logging.getLogger(__name__)


class BuildkiteClient:
    """Async client for the Buildkite REST API (v2).

    Implements the BuildSource protocol. Errors are raised as-is; retrying
    rate-limited or failed requests is left to the caller.

    Usage:
        async with BuildkiteClient() as client:
            orgs = await client.organizations(token)
    """

    BASE_URL = "https://api.buildkite.com"
    PAGE_SIZE = 100
    FINISHED_STATES = ("passed", "failed")

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BuildkiteClient":
        self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(
        self, url: str, token: str, params: list[tuple[str, str]] | None = None
    ) -> httpx.Response:
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        logger.debug("GET %s", url)
        response = await self._client.get(url, params=params, headers=headers)

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "Rate limit exceeded",
                url=url,
                retry_after=float(retry_after) if retry_after else None,
            )

        if response.status_code == 401:
            raise AuthenticationError(
                "Invalid or expired access token", url=url, status_code=401
            )

        if response.status_code == 404:
            raise NotFoundError(f"Resource not found: {url}", url=url, status_code=404)

        response.raise_for_status()
        return response

    async def _get_all_pages(self, url: str, token: str) -> list[dict[str, Any]]:
        """Collect every page of a list endpoint by following ``Link: rel="next"``."""
        rows: list[dict[str, Any]] = []
        next_url: str | None = url
        params: list[tuple[str, str]] | None = [("per_page", str(self.PAGE_SIZE))]

        while next_url:
            response = await self._get(next_url, token, params=params)
            rows.extend(response.json())
            next_url = (response.links.get("next") or {}).get("url")
            # the next link already carries the query string
            params = None

        return rows

    def _builds_url(self, organization: str, pipeline: str) -> str:
        return f"{self.base_url}/v2/organizations/{organization}/pipelines/{pipeline}/builds"

    async def _first_build(
        self,
        organization: str,
        pipeline: str,
        token: str,
        states: tuple[str, ...] = (),
    ) -> Build:
        params = [("per_page", "1")] + [("state[]", state) for state in states]
        url = self._builds_url(organization, pipeline)
        response = await self._get(url, token, params=params)
        data = response.json()
        if not data:
            raise NoBuildsError(organization, pipeline, url=url)
        return Build.from_json(data[0])

    async def organizations(self, token: str) -> list[Organization]:
        rows = await self._get_all_pages(f"{self.base_url}/v2/organizations", token)
        return [Organization.from_json(row) for row in rows]

    async def pipelines(self, pipelines_url: str, token: str) -> list[Pipeline]:
        rows = await self._get_all_pages(pipelines_url, token)
        return [Pipeline.from_json(row) for row in rows]

    async def latest_build(self, organization: str, pipeline: str, token: str) -> Build:
        return await self._first_build(organization, pipeline, token)

    async def latest_finished_build(
        self, organization: str, pipeline: str, token: str
    ) -> Build:
        return await self._first_build(
            organization, pipeline, token, states=self.FINISHED_STATES
        )
