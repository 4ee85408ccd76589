"""
Port interfaces (ABCs) for the lokalise bounded context.

Ports define the contracts that use cases require from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from lokalise_proxy.domain.lokalise.entities import Comment, ConvertedDocument, Key


class LokaliseApiPort(ABC):
    """Port for the Lokalise API v2.

    Every call forwards the caller's API token. Implementations raise
    CantReachUpstreamError on transport failures and UpstreamRejectedError
    on non-2xx responses.
    """

    @abstractmethod
    async def resolve_bundle_url(
        self,
        api_token: str | None,
        project_id: str | None,
        filename: str | None,
        fileformat: str | None,
        lang_iso: str | None,
    ) -> str:
        """Ask Lokalise to prepare a download bundle and return its URL.

        The bundle is filtered to one filename and one language, with empty
        translations exported as the base language.
        """
        raise NotImplementedError

    @abstractmethod
    async def resolve_language_iso(
        self, api_token: str | None, project_id: str | None, lang_id: int
    ) -> str | None:
        """Return the ISO code of a project language."""
        raise NotImplementedError

    @abstractmethod
    async def list_comments(
        self, api_token: str | None, project_id: str | None
    ) -> list[Comment]:
        """Return the project's comments in a single request."""
        raise NotImplementedError

    @abstractmethod
    async def list_keys(
        self, api_token: str | None, project_id: str | None, key_ids: list
    ) -> list[Key]:
        """Return metadata for a batch of key ids."""
        raise NotImplementedError


class PreviewArchivePort(ABC):
    """Port for downloading a preview bundle and pulling its file out."""

    @abstractmethod
    async def extract(self, url: str) -> bytes:
        """Download the archive at ``url`` and return its first non-empty file.

        Raises:
            CantReachPreviewDownloadError: The download failed.
            EmptyPreviewArchiveError: The download had no bytes.
            EmptyPreviewExtractedError: The archive held no non-empty file.
        """
        raise NotImplementedError


class DocumentConversionPort(ABC):
    """Port for the external DOCX-to-PDF conversion service."""

    @abstractmethod
    async def convert_bundle_to_pdf(self, bundle_url: str) -> ConvertedDocument:
        """Have the service fetch the zipped DOCX at ``bundle_url`` and convert it."""
        raise NotImplementedError
