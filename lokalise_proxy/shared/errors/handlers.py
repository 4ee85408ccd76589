"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses. Error responses have no body:
the status code and a short message in the X-Status-Text header are
all the browser extension gets. No stack traces or internal details
are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from lokalise_proxy.domain.lokalise.errors import (
    GENERIC_ERROR_MESSAGE,
    GENERIC_ERROR_STATUS,
    CantReachPreviewDownloadError,
    CantReachUpstreamError,
    ConversionRejectedError,
    EmptyPreviewArchiveError,
    EmptyPreviewExtractedError,
    LokaliseProxyError,
    UpstreamRejectedError,
)

logger = logging.getLogger(__name__)

STATUS_TEXT_HEADER = "X-Status-Text"
HTTP_404 = 404
PATH_NOT_FOUND_MESSAGE = "Path not found in the worker."


def error_response(status_code: int, message: str) -> Response:
    """Build an empty error response carrying ``message`` as status text."""
    return Response(
        status_code=status_code,
        media_type="application/json",
        headers={
            STATUS_TEXT_HEADER: message,
            "Access-Control-Expose-Headers": STATUS_TEXT_HEADER,
        },
    )


def unexpected_error_response(exc: Exception) -> Response:
    """Response for any error nothing else knew how to handle."""
    logger.exception("Unexpected error: %s", type(exc).__name__)
    return error_response(GENERIC_ERROR_STATUS, GENERIC_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Errors no handler claims are turned into the generic 500 by the
    CORS edge middleware, so they still carry CORS headers.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UpstreamRejectedError)
    async def handle_upstream_rejected(
        _request: Request, exc: UpstreamRejectedError
    ) -> Response:
        """Relay a Lokalise API rejection."""
        logger.warning(
            "Lokalise API rejected the call with %d, answering %d",
            exc.upstream_status,
            exc.status_code,
        )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(CantReachUpstreamError)
    async def handle_cant_reach_upstream(
        _request: Request, exc: CantReachUpstreamError
    ) -> Response:
        """Handle transport failures towards Lokalise or the converter."""
        logger.error("Upstream unreachable")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(CantReachPreviewDownloadError)
    @app.exception_handler(EmptyPreviewArchiveError)
    async def handle_preview_download(
        _request: Request, exc: LokaliseProxyError
    ) -> Response:
        """Handle a failed or empty preview bundle download."""
        logger.error("Preview download failed: %s", type(exc).__name__)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(EmptyPreviewExtractedError)
    async def handle_empty_preview_extracted(
        _request: Request, exc: EmptyPreviewExtractedError
    ) -> Response:
        """Handle a preview bundle without any usable file."""
        logger.error("Preview bundle had no non-empty entry")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(ConversionRejectedError)
    async def handle_conversion_rejected(
        _request: Request, exc: ConversionRejectedError
    ) -> Response:
        """Handle a conversion service error in strict mode."""
        logger.error("Conversion service answered %d", exc.upstream_status)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(LokaliseProxyError)
    async def handle_lokalise_proxy(
        _request: Request, exc: LokaliseProxyError
    ) -> Response:
        """Catch-all for proxy errors without a dedicated handler."""
        logger.error("Unhandled proxy error: %s", exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_unreadable_body(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        """A body that is not a JSON object is a processing error, not a 422."""
        logger.warning("Unreadable request body: %d error(s)", len(exc.errors()))
        return error_response(GENERIC_ERROR_STATUS, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Unknown paths and unsupported methods both answer 404."""
        if exc.status_code in (404, 405):
            return error_response(HTTP_404, PATH_NOT_FOUND_MESSAGE)
        return error_response(exc.status_code, str(exc.detail))
