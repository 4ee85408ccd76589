"""
Adapter: DOCX-to-PDF conversion service.

Implements DocumentConversionPort.
The service downloads the zipped DOCX itself from the bundle URL and
streams back a PDF. Deciding what to do with a non-2xx answer is left
to the use case.
"""

import logging

import httpx

from lokalise_proxy.domain.lokalise.entities import ConvertedDocument
from lokalise_proxy.domain.lokalise.errors import CantReachUpstreamError
from lokalise_proxy.domain.lokalise.ports import DocumentConversionPort

logger = logging.getLogger(__name__)


class DocumentConversionAdapter(DocumentConversionPort):
    """Concrete adapter for the LibreOffice conversion service."""

    def __init__(self, service_url: str, timeout: float) -> None:
        self._service_url = service_url
        self._timeout = timeout

    async def convert_bundle_to_pdf(self, bundle_url: str) -> ConvertedDocument:
        """POST ``{"url": bundle_url}`` and return the service's answer as-is.

        Raises:
            CantReachUpstreamError: Transport failure, including timeouts.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._service_url,
                    json={"url": bundle_url},
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.error("Conversion service unreachable: %s", exc)
            raise CantReachUpstreamError() from exc

        logger.info(
            "Conversion service answered %d with %d bytes",
            response.status_code,
            len(response.content),
        )
        return ConvertedDocument(
            content=response.content, status_code=response.status_code
        )
