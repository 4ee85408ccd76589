"""
Use case: Render a project DOCX file as PDF.

Input: PreviewQuery (api_token, project_id, filename, fileformat, lang_iso)
Output: PreviewResult (conversion service body, application/pdf for docx)
Side effects: Lokalise prepares a download bundle; the conversion service
    downloads and converts it.
Failure cases: CantReachUpstreamError, UpstreamRejectedError,
    ConversionRejectedError (strict mode only).
"""

import logging

from lokalise_proxy.application.lokalise.dtos import (
    DOCX_FORMAT,
    PreviewQuery,
    PreviewResult,
)
from lokalise_proxy.domain.lokalise.errors import ConversionRejectedError
from lokalise_proxy.domain.lokalise.ports import (
    DocumentConversionPort,
    LokaliseApiPort,
)

logger = logging.getLogger(__name__)


class ConvertPreviewToPdfUseCase:
    """Hands the bundle URL of a DOCX export to the conversion service.

    No conversion happens locally. By default the conversion service's
    answer is returned whatever its status, which is what the browser
    extension has always received; ``strict_status`` rejects non-2xx.
    """

    def __init__(
        self,
        lokalise_api: LokaliseApiPort,
        conversion_port: DocumentConversionPort,
        strict_status: bool = False,
    ) -> None:
        self._lokalise_api = lokalise_api
        self._conversion_port = conversion_port
        self._strict_status = strict_status

    async def execute(self, query: PreviewQuery) -> PreviewResult:
        """Run the PDF conversion use case.

        Args:
            query: Export parameters supplied by the caller.

        Returns:
            The conversion service body, announced as application/pdf only
            for docx exports.

        Raises:
            ConversionRejectedError: Strict mode and the service answered non-2xx.
        """
        logger.info(
            "Converting preview to pdf for project=%s, file=%s, lang=%s",
            query.project_id,
            query.filename,
            query.lang_iso,
        )
        bundle_url = await self._lokalise_api.resolve_bundle_url(
            api_token=query.api_token,
            project_id=query.project_id,
            filename=query.filename,
            fileformat=query.fileformat,
            lang_iso=query.lang_iso,
        )
        document = await self._conversion_port.convert_bundle_to_pdf(bundle_url)

        if not 200 <= document.status_code < 300:
            if self._strict_status:
                raise ConversionRejectedError(document.status_code)
            logger.warning(
                "Conversion service answered %d, passing its body through",
                document.status_code,
            )

        return PreviewResult(
            content=document.content,
            media_type="application/pdf" if query.fileformat == DOCX_FORMAT else None,
        )
