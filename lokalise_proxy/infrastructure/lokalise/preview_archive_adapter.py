"""
Adapter: Preview bundle downloader.

Implements PreviewArchivePort.
Downloads the whole bundle into memory, then hands it to the domain
extractor. The download status is not checked; an error page simply
fails to open as a ZIP.
"""

import logging

import httpx

from lokalise_proxy.domain.lokalise.archive import extract_first_file
from lokalise_proxy.domain.lokalise.errors import CantReachPreviewDownloadError
from lokalise_proxy.domain.lokalise.ports import PreviewArchivePort

logger = logging.getLogger(__name__)


class PreviewArchiveAdapter(PreviewArchivePort):
    """Concrete adapter fetching preview bundles over HTTP."""

    def __init__(self, timeout: float) -> None:
        self._timeout = timeout

    async def extract(self, url: str) -> bytes:
        """Download the bundle at ``url`` and return its first non-empty file."""
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.error("Preview bundle download failed: %s", exc)
            raise CantReachPreviewDownloadError() from exc

        archive = response.content
        logger.info("Downloaded preview bundle of %d bytes", len(archive))
        return extract_first_file(archive)
