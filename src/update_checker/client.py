"""GitHub release lookup over httpx, public redirect or token-authenticated API."""

import logging

import httpx
from pydantic import BaseModel, ValidationError

from update_checker.config import (
    GITHUB_ACCEPT,
    GITHUB_API_VERSION,
    USER_AGENT,
    api_release_url,
    public_release_url,
)

logger = logging.getLogger(__name__)


class UpdateCheckError(Exception):
    """Base exception for recoverable release lookup failures."""
    pass


class RepositoryNotFoundError(UpdateCheckError):
    """Raised when the repository or its latest release cannot be found."""
    pass


class AccessDeniedError(UpdateCheckError):
    """Raised when the token is rejected or lacks read access to releases (401/403)."""
    pass


class MissingTagDataError(UpdateCheckError):
    """Raised when the response has no usable release tag."""
    pass


class TransportFailureError(UpdateCheckError):
    """Raised when the request fails before a readable response arrives."""
    pass


class ReleasePayload(BaseModel):
    """The fields read from the API's latest-release document."""

    tag_name: str
    prerelease: bool = False


class Release(BaseModel):
    """A release tag as found in the response, before version parsing."""

    tag: str
    prerelease: bool = False


def last_segment(value: str) -> str:
    """Return the part after the final ``/`` (``releases/tag/v1.2`` -> ``v1.2``)."""
    return value.rstrip("/").rsplit("/", 1)[-1]


class GitHubReleaseClient:
    """
    Async HTTP client that looks up the latest release of one repository.

    Without a token it requests the public ``releases/latest`` page and reads
    the tag from the redirect. With a token it queries the REST API.

    Usage:
        async with GitHubReleaseClient("octo", "hello", token="ghp_xxx") as client:
            release = await client.fetch_latest()
    """

    def __init__(
        self,
        author: str,
        repo_name: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.author = author
        self.repo_name = repo_name
        self.token = token
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def uri(self) -> str:
        if self.token is not None:
            return api_release_url(self.author, self.repo_name)
        return public_release_url(self.author, self.repo_name)

    @property
    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        if self.token is not None:
            headers.update({
                "Accept": GITHUB_ACCEPT,
                "Authorization": f"Bearer {self.token}",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            })
        return headers

    async def __aenter__(self) -> "GitHubReleaseClient":
        # No timeout override: httpx's default applies.
        self._client = httpx.AsyncClient(
            headers=self._headers,
            follow_redirects=False,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _handle_public_response(self, response: httpx.Response) -> Release:
        """Read the release tag from the redirect's Location header."""
        if response.status_code == 404:
            raise RepositoryNotFoundError(
                f"Could not find {self.author}/{self.repo_name}. The repository does "
                "not exist or is private; use a token for private repositories."
            )

        location = response.headers.get("location")
        if not location:
            raise MissingTagDataError(
                f"No release redirect from {response.url} (HTTP {response.status_code})"
            )

        return Release(tag=last_segment(location))

    def _handle_api_response(self, response: httpx.Response) -> Release:
        """Read tag_name and prerelease from the API's JSON body."""
        if response.status_code in (401, 403):
            raise AccessDeniedError(
                f"Access denied to releases of {self.author}/{self.repo_name} - "
                "check token permissions"
            )
        if response.status_code != 200 or not response.content:
            raise RepositoryNotFoundError(
                f"Could not get release data for {self.author}/{self.repo_name} "
                f"(HTTP {response.status_code})"
            )

        try:
            payload = ReleasePayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise MissingTagDataError(f"No release tag in response from {response.url}: {e}") from e

        return Release(tag=last_segment(payload.tag_name), prerelease=payload.prerelease)

    async def fetch_latest(self) -> Release:
        """Issue the single GET for the latest release."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")

        logger.debug(f"GET {self.uri}")
        try:
            response = await self._client.get(self.uri)
        except httpx.RequestError as e:
            raise TransportFailureError(f"Request to {self.uri} failed: {e}") from e

        if self.token is not None:
            return self._handle_api_response(response)
        return self._handle_public_response(response)
