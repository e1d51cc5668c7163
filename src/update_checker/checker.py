"""Check a GitHub repository for a release newer than the running version."""

import asyncio
import logging
from enum import Enum

import httpx

from update_checker.client import GitHubReleaseClient, MissingTagDataError, Release
from update_checker.version import InvalidVersionFormat, Version, strip_prefix

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "There is a newer version of {name} ({latest})! Current version: {current}"


class MissingLoggerError(ValueError):
    """Raised when auto_notify is requested without a logger."""
    pass


class NoPriorCheckError(RuntimeError):
    """Raised when notifying before any check has resolved."""
    pass


class NoLoggerError(RuntimeError):
    """Raised when notifying without a logger."""
    pass


class CheckInProgressError(RuntimeError):
    """Raised when check() is called while a previous check is still pending."""
    pass


class CheckState(str, Enum):
    NOT_CHECKED = "not_checked"
    CHECKING = "checking"
    RESOLVED = "resolved"
    FAILED = "failed"


class UpdateChecker:
    """
    Update checker for one GitHub repository.

    Without a token the public ``releases/latest`` redirect is used, which only
    works for public repositories. With a token the REST API is queried, which
    also covers private repositories the token can read.

    Usage:
        checker = UpdateChecker("octo", "hello", "v1.2.0", auto_notify=True, logger=log)
        await checker.check()
        if checker.update_available:
            ...

    Only one check may be in flight at a time; ``check()`` raises
    CheckInProgressError while a previous task is pending.
    """

    def __init__(
        self,
        author: str,
        repo_name: str,
        current_version: str,
        auto_notify: bool = False,
        logger: logging.Logger | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if auto_notify and logger is None:
            raise MissingLoggerError(
                "No logger provided with auto_notify set to True. Please provide a logger!"
            )

        self.author = author
        self.repo_name = repo_name
        self.auto_notify = auto_notify
        self.logger = logger
        self.token = token
        self.transport = transport
        self._current = Version(strip_prefix(current_version))

        self._latest: Version | None = None
        self._update_available = False
        self._message: str | None = None
        self._state = CheckState.NOT_CHECKED
        self._pending: asyncio.Task | None = None

    def _client(self) -> GitHubReleaseClient:
        return GitHubReleaseClient(
            self.author,
            self.repo_name,
            token=self.token,
            transport=self.transport,
        )

    @property
    def uri(self) -> str:
        return self._client().uri

    @property
    def current(self) -> Version:
        return self._current

    @property
    def latest(self) -> Version | None:
        return self._latest

    @property
    def latest_version(self) -> str | None:
        """The latest release's version string, or None before the first resolved check."""
        return self._latest.raw if self._latest is not None else None

    @property
    def update_available(self) -> bool:
        return self._update_available

    @property
    def state(self) -> CheckState:
        return self._state

    def check(self) -> "asyncio.Task[Version]":
        """
        Start looking up the latest release and return the running task.

        Must be called from a running event loop. The status accessors are not
        updated until the task completes; await it to get the latest Version or
        the UpdateCheckError the lookup failed with.
        """
        if self._pending is not None and not self._pending.done():
            raise CheckInProgressError(
                f"A check of {self.author}/{self.repo_name} is already running"
            )

        loop = asyncio.get_running_loop()
        self._pending = loop.create_task(self._run_check())
        self._pending.add_done_callback(self._on_check_done)
        self._state = CheckState.CHECKING
        return self._pending

    def _on_check_done(self, task: asyncio.Task) -> None:
        # A task cancelled before its first step never enters _run_check.
        if task.cancelled():
            self._state = CheckState.FAILED

    async def _run_check(self) -> Version:
        try:
            async with self._client() as client:
                release = await client.fetch_latest()
            latest = self._parse_release(release)
        except Exception:
            self._state = CheckState.FAILED
            raise

        self.compare_and_store(self._current, latest)
        return latest

    @staticmethod
    def _parse_release(release: Release) -> Version:
        try:
            return Version(strip_prefix(release.tag), force_prerelease=release.prerelease)
        except InvalidVersionFormat as e:
            raise MissingTagDataError(f"Release tag {release.tag!r} is not a version: {e}") from e

    def compare_and_store(self, current: Version, latest: Version) -> None:
        """Store *latest*, record whether it is newer than *current*, notify if enabled."""
        self._latest = latest
        self._update_available = current.compare(latest) < 0
        self._state = CheckState.RESOLVED
        logger.debug(
            f"{self.repo_name}: current {current}, latest {latest}, "
            f"update available: {self._update_available}"
        )

        if self.auto_notify:
            self.notify()

    def set_message(self, message: str | None) -> None:
        """
        Set the message sent when an update is available, or None for the default.

        Placeholders:
            @name = repository name
            @latestVersion = latest version string
            @currentVersion = current version string
        """
        self._message = message

    def notification_message(self) -> str | None:
        """Build the update message without sending it. None if no update is available."""
        if self._latest is None:
            raise NoPriorCheckError(
                "There is no version to compare to! Probably due to no check done before."
            )
        if not self._update_available:
            return None

        if self._message is None:
            return DEFAULT_MESSAGE.format(
                name=self.repo_name,
                latest=self._latest.raw,
                current=self._current.raw,
            )
        return (
            self._message
            .replace("@name", self.repo_name)
            .replace("@latestVersion", self._latest.raw)
            .replace("@currentVersion", self._current.raw)
        )

    def notify(self) -> str | None:
        """Log the update message at INFO if an update is available and return it."""
        message = self.notification_message()
        if self.logger is None:
            raise NoLoggerError("There is no logger provided!")

        if message is not None:
            self.logger.info(message)
        return message
