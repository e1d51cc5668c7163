"""Shared test fixtures."""

import httpx
import pytest


class FakeGitHub:
    """Queue of canned GitHub responses served through httpx.MockTransport.

    Each request consumes the next queued response; the last one is reused.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responders = []

    def _queue(self, responder):
        self._responders.append(responder)
        return self

    def redirect_to(self, tag: str, author: str = "octo", repo: str = "hello"):
        location = f"https://github.com/{author}/{repo}/releases/tag/{tag}"
        return self._queue(lambda request: httpx.Response(302, headers={"Location": location}))

    def release(self, tag_name: str, prerelease: bool = False):
        body = {"tag_name": tag_name, "prerelease": prerelease}
        return self._queue(lambda request: httpx.Response(200, json=body))

    def respond(self, status_code: int, **kwargs):
        return self._queue(lambda request: httpx.Response(status_code, **kwargs))

    def fail(self, error: Exception):
        def responder(request):
            raise error
        return self._queue(responder)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responders) > 1:
            responder = self._responders.pop(0)
        else:
            responder = self._responders[0]
        return responder(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def github():
    """A fake GitHub with no responses queued yet."""
    return FakeGitHub()
