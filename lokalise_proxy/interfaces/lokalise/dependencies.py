"""
Dependency injection for the lokalise bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. Settings come from
the application state so each app instance can target its own upstreams.
"""

from fastapi import Depends, Request

from lokalise_proxy.application.lokalise.convert_preview_to_pdf import (
    ConvertPreviewToPdfUseCase,
)
from lokalise_proxy.application.lokalise.fetch_preview import FetchPreviewUseCase
from lokalise_proxy.application.lokalise.fetch_project_comments import (
    FetchProjectCommentsUseCase,
)
from lokalise_proxy.application.lokalise.get_lang_iso import GetLangIsoUseCase
from lokalise_proxy.core.config import Settings
from lokalise_proxy.infrastructure.lokalise.document_conversion_adapter import (
    DocumentConversionAdapter,
)
from lokalise_proxy.infrastructure.lokalise.lokalise_api_adapter import (
    LokaliseApiAdapter,
)
from lokalise_proxy.infrastructure.lokalise.preview_archive_adapter import (
    PreviewArchiveAdapter,
)


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings


def get_lokalise_api(settings: Settings = Depends(get_settings)) -> LokaliseApiAdapter:
    """Build the Lokalise API adapter from settings."""
    return LokaliseApiAdapter(
        base_url=settings.lokalise_api_url,
        timeout=settings.upstream_timeout_seconds,
        comments_limit=settings.comments_limit,
    )


def get_lang_iso_use_case(
    lokalise_api: LokaliseApiAdapter = Depends(get_lokalise_api),
) -> GetLangIsoUseCase:
    """Build GetLangIsoUseCase with its infrastructure dependencies."""
    return GetLangIsoUseCase(lokalise_api=lokalise_api)


def get_fetch_preview_use_case(
    settings: Settings = Depends(get_settings),
    lokalise_api: LokaliseApiAdapter = Depends(get_lokalise_api),
) -> FetchPreviewUseCase:
    """Build FetchPreviewUseCase with its infrastructure dependencies."""
    return FetchPreviewUseCase(
        lokalise_api=lokalise_api,
        archive_port=PreviewArchiveAdapter(timeout=settings.upstream_timeout_seconds),
    )


def get_convert_preview_to_pdf_use_case(
    settings: Settings = Depends(get_settings),
    lokalise_api: LokaliseApiAdapter = Depends(get_lokalise_api),
) -> ConvertPreviewToPdfUseCase:
    """Build ConvertPreviewToPdfUseCase with its infrastructure dependencies."""
    return ConvertPreviewToPdfUseCase(
        lokalise_api=lokalise_api,
        conversion_port=DocumentConversionAdapter(
            service_url=settings.conversion_service_url,
            timeout=settings.upstream_timeout_seconds,
        ),
        strict_status=settings.strict_conversion_status,
    )


def get_fetch_project_comments_use_case(
    settings: Settings = Depends(get_settings),
    lokalise_api: LokaliseApiAdapter = Depends(get_lokalise_api),
) -> FetchProjectCommentsUseCase:
    """Build FetchProjectCommentsUseCase with its infrastructure dependencies."""
    return FetchProjectCommentsUseCase(
        lokalise_api=lokalise_api,
        keys_page_size=settings.keys_page_size,
        first_page_only=settings.keys_first_page_only,
    )
