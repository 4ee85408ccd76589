"""
Use case: Fetch the preview of a project file.

Input: PreviewQuery (api_token, project_id, filename, fileformat, lang_iso)
Output: PreviewResult (raw file bytes, text/html for html exports)
Side effects: Lokalise prepares a download bundle.
Failure cases: CantReachUpstreamError, UpstreamRejectedError,
    CantReachPreviewDownloadError, EmptyPreviewArchiveError,
    EmptyPreviewExtractedError.
"""

import logging

from lokalise_proxy.application.lokalise.dtos import (
    HTML_FORMAT,
    PreviewQuery,
    PreviewResult,
)
from lokalise_proxy.domain.lokalise.ports import LokaliseApiPort, PreviewArchivePort

logger = logging.getLogger(__name__)


class FetchPreviewUseCase:
    """Exports one file in one language and unpacks it from its bundle.

    Lokalise answers exports with a ZIP bundle URL; the archive port
    downloads it and pulls the single file out.
    """

    def __init__(
        self, lokalise_api: LokaliseApiPort, archive_port: PreviewArchivePort
    ) -> None:
        self._lokalise_api = lokalise_api
        self._archive_port = archive_port

    async def execute(self, query: PreviewQuery) -> PreviewResult:
        """Run the preview use case.

        Args:
            query: Export parameters supplied by the caller.

        Returns:
            The extracted file, announced as text/html only for html exports.
        """
        logger.info(
            "Fetching preview for project=%s, file=%s, format=%s, lang=%s",
            query.project_id,
            query.filename,
            query.fileformat,
            query.lang_iso,
        )
        bundle_url = await self._lokalise_api.resolve_bundle_url(
            api_token=query.api_token,
            project_id=query.project_id,
            filename=query.filename,
            fileformat=query.fileformat,
            lang_iso=query.lang_iso,
        )
        content = await self._archive_port.extract(bundle_url)
        logger.info("Extracted preview of %d bytes", len(content))

        return PreviewResult(
            content=content,
            media_type="text/html" if query.fileformat == HTML_FORMAT else None,
        )
