"""
FastAPI router for the lokalise bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers; CORS headers
by the edge middleware.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from lokalise_proxy.application.lokalise.convert_preview_to_pdf import (
    ConvertPreviewToPdfUseCase,
)
from lokalise_proxy.application.lokalise.dtos import (
    GetLangIsoQuery,
    PreviewQuery,
    PreviewResult,
    ProjectCommentsQuery,
)
from lokalise_proxy.application.lokalise.fetch_preview import FetchPreviewUseCase
from lokalise_proxy.application.lokalise.fetch_project_comments import (
    FetchProjectCommentsUseCase,
)
from lokalise_proxy.application.lokalise.get_lang_iso import GetLangIsoUseCase
from lokalise_proxy.interfaces.lokalise.dependencies import (
    get_convert_preview_to_pdf_use_case,
    get_fetch_preview_use_case,
    get_fetch_project_comments_use_case,
    get_lang_iso_use_case,
)
from lokalise_proxy.interfaces.lokalise.schemas import (
    LangIsoRequest,
    PreviewRequest,
    ProjectCommentsRequest,
    parse_lang_id,
)

router = APIRouter(tags=["lokalise"])


def _preview_query(request: PreviewRequest) -> PreviewQuery:
    return PreviewQuery(
        api_token=request.api_token,
        project_id=request.project_id,
        filename=request.filename,
        fileformat=request.fileformat,
        lang_iso=request.lang_iso,
    )


def _raw_response(result: PreviewResult) -> Response:
    # Set the header directly; media_type would append "; charset=utf-8" to text/html.
    headers = {"Content-Type": result.media_type} if result.media_type else None
    return Response(content=result.content, headers=headers)


@router.post(
    "/get-lang-iso",
    summary="Resolve a language ISO code",
    description="Return the ISO code of a project language from its numeric id.",
)
async def get_lang_iso(
    request: LangIsoRequest,
    use_case: GetLangIsoUseCase = Depends(get_lang_iso_use_case),
) -> JSONResponse:
    """Resolve a language id to its ISO code."""
    query = GetLangIsoQuery(
        api_token=request.api_token,
        project_id=request.project_id,
        lang_id=parse_lang_id(request.lang_id),
    )
    result = await use_case.execute(query)
    return JSONResponse({"langIso": result.lang_iso})


@router.post(
    "/fetch-preview",
    deprecated=True,
    summary="Fetch a file preview (deprecated alias)",
    description="Same as /fetch-preview-html, kept for older extension builds.",
)
@router.post(
    "/fetch-preview-html",
    summary="Fetch a file preview",
    description="Export one file in one language and return the file itself.",
)
async def fetch_preview_html(
    request: PreviewRequest,
    use_case: FetchPreviewUseCase = Depends(get_fetch_preview_use_case),
) -> Response:
    """Return the exported file, as text/html for html exports."""
    result = await use_case.execute(_preview_query(request))
    return _raw_response(result)


@router.post(
    "/fetch-preview-docx",
    summary="Fetch a DOCX preview as PDF",
    description="Export one DOCX file and return it converted to PDF.",
)
async def fetch_preview_docx(
    request: PreviewRequest,
    use_case: ConvertPreviewToPdfUseCase = Depends(
        get_convert_preview_to_pdf_use_case
    ),
) -> Response:
    """Return the converted document, as application/pdf for docx exports."""
    result = await use_case.execute(_preview_query(request))
    return _raw_response(result)


@router.post(
    "/fetch-project-comments",
    summary="Aggregate project comments",
    description="Group every project comment under its key, with the key's name and filenames.",
)
async def fetch_project_comments(
    request: ProjectCommentsRequest,
    use_case: FetchProjectCommentsUseCase = Depends(
        get_fetch_project_comments_use_case
    ),
) -> JSONResponse:
    """Return comment threads keyed by key id."""
    query = ProjectCommentsQuery(
        api_token=request.api_token, project_id=request.project_id
    )
    result = await use_case.execute(query)
    return JSONResponse(result.to_dict())
