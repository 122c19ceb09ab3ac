"""GitHub Contents API client used to publish uploaded files."""

import base64
from urllib.parse import quote

import requests
import structlog

from blogdesk.errors import UpstreamError

logger = structlog.get_logger(__name__)

GITHUB_API_URL = "https://api.github.com"
REQUEST_TIMEOUT_SECONDS = 30.0


def put_repository_file(token: str, repo: str, branch: str, path: str, content: bytes) -> None:
    """Create a file in a GitHub repository.

    Blocking; call through asyncio.to_thread from async code.

    Args:
        token: GitHub API token with contents:write access
        repo: Repository as 'owner/repo'
        branch: Target branch
        path: File path inside the repository
        content: Raw file bytes

    Raises:
        UpstreamError: If the request fails or GitHub rejects it
    """
    url = f"{GITHUB_API_URL}/repos/{repo}/contents/{quote(path)}"
    body = {
        "message": f"upload {path}",
        "content": base64.b64encode(content).decode("ascii"),
        "branch": branch,
    }
    headers = {
        "Authorization": f"token {token}",
        "Accept": "application/vnd.github+json",
    }
    try:
        response = requests.put(url, json=body, headers=headers, timeout=REQUEST_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        logger.exception("github_upload_error", repo=repo, path=path)
        raise UpstreamError(f"GitHub upload failed: {e}") from e

    if not response.ok:
        logger.error("github_upload_failed", repo=repo, path=path, status_code=response.status_code)
        raise UpstreamError(f"GitHub upload failed: {response.status_code} {response.text}")

    logger.debug("github_upload_done", repo=repo, path=path)
