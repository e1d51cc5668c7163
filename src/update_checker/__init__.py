"""gh-update-checker - check GitHub for a release newer than the running version."""

from update_checker.checker import (
    CheckInProgressError,
    CheckState,
    MissingLoggerError,
    NoLoggerError,
    NoPriorCheckError,
    UpdateChecker,
)
from update_checker.client import (
    AccessDeniedError,
    GitHubReleaseClient,
    MissingTagDataError,
    Release,
    RepositoryNotFoundError,
    TransportFailureError,
    UpdateCheckError,
)
from update_checker.version import (
    InvalidVersionFormat,
    Version,
    VersionKind,
    __version__,
    parse_kind,
)

__all__ = [
    "UpdateChecker",
    "CheckState",
    "MissingLoggerError",
    "NoLoggerError",
    "NoPriorCheckError",
    "CheckInProgressError",
    "GitHubReleaseClient",
    "Release",
    "UpdateCheckError",
    "RepositoryNotFoundError",
    "AccessDeniedError",
    "MissingTagDataError",
    "TransportFailureError",
    "Version",
    "VersionKind",
    "InvalidVersionFormat",
    "parse_kind",
]
