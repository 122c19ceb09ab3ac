import asyncio

import structlog

from blogdesk.core.core import Service
from blogdesk.core.modules.upload.relay import put_repository_file
from blogdesk.core.modules.upload.utils import build_asset_path, build_raw_url
from blogdesk.errors import NotConfiguredError
from blogdesk.utils import unix_now_ms

logger = structlog.get_logger(__name__)


class UploadService(Service):
    """Relays uploaded files to a GitHub repository and returns their public URL."""

    def ensure_configured(self) -> tuple[str, str]:
        """Return (token, repo), or raise NotConfiguredError when either is missing."""
        config = self.core.config
        if not (config.github_token and config.github_repo):
            raise NotConfiguredError(
                "Upload not configured on server. Set BLOGDESK_GITHUB_TOKEN and BLOGDESK_GITHUB_REPO."
            )
        return config.github_token, config.github_repo

    async def store(self, filename: str | None, content: bytes, content_type: str) -> str:
        """Publish a file and return its raw.githubusercontent.com URL.

        Raises:
            NotConfiguredError: If GitHub credentials are not configured
            UpstreamError: If the GitHub API call fails
        """
        token, repo = self.ensure_configured()
        branch = self.core.config.github_branch

        path = build_asset_path(filename, unix_now_ms())
        logger.info("upload_started", path=path, size=len(content), content_type=content_type)
        await asyncio.to_thread(put_repository_file, token, repo, branch, path, content)
        return build_raw_url(repo, branch, path)
