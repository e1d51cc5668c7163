"""Endpoints and token handling for gh-update-checker."""
from update_checker.version import __version__

GITHUB_WEB_URL = "https://github.com"
GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_ACCEPT = "application/vnd.github+json"

USER_AGENT = f"gh-update-checker/{__version__}"


def public_release_url(author: str, repo_name: str) -> str:
    """Web URL that redirects to the tag page of the latest release."""
    return f"{GITHUB_WEB_URL}/{author}/{repo_name}/releases/latest"


def api_release_url(author: str, repo_name: str) -> str:
    """REST API URL describing the latest release."""
    return f"{GITHUB_API_URL}/repos/{author}/{repo_name}/releases/latest"


def mask_token(token: str) -> str:
    """Return masked token for display (last 4 chars visible)."""
    if len(token) <= 4:
        return "****"
    return "*" * (len(token) - 4) + token[-4:]
