"""
CORS edge middleware.

Sits in front of every route:
- Answers OPTIONS requests itself, preflight or not.
- Adds Access-Control-Allow-Origin for the one configured origin to
  every other response.
- Turns errors no exception handler claimed into the generic 500, so
  the browser still sees the CORS header.

No business logic. Pure cross-cutting concern.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from lokalise_proxy.shared.errors.handlers import unexpected_error_response

ALLOWED_METHODS = "GET,HEAD,POST,OPTIONS"
PLAIN_OPTIONS_ALLOW = "GET, HEAD, POST, OPTIONS"
PREFLIGHT_MAX_AGE = "86400"

PREFLIGHT_REQUEST_HEADERS = (
    "Origin",
    "Access-Control-Request-Method",
    "Access-Control-Request-Headers",
)


def options_response(request: Request, allow_origin: str) -> Response:
    """Answer an OPTIONS request.

    A preflight must carry Origin, Access-Control-Request-Method and
    Access-Control-Request-Headers. The requested headers are allowed
    back verbatim. Any other OPTIONS request just lists the methods.
    """
    if all(name in request.headers for name in PREFLIGHT_REQUEST_HEADERS):
        return Response(
            headers={
                "Access-Control-Allow-Origin": allow_origin,
                "Access-Control-Allow-Methods": ALLOWED_METHODS,
                "Access-Control-Max-Age": PREFLIGHT_MAX_AGE,
                "Access-Control-Allow-Headers": request.headers[
                    "Access-Control-Request-Headers"
                ],
            }
        )
    return Response(headers={"Allow": PLAIN_OPTIONS_ALLOW})


class CorsEdgeMiddleware(BaseHTTPMiddleware):
    """Middleware enforcing the proxy's single-origin CORS policy."""

    def __init__(self, app: ASGIApp, allow_origin: str) -> None:
        super().__init__(app)
        self._allow_origin = allow_origin

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Short-circuit OPTIONS, otherwise add the allowed origin to the response."""
        if request.method == "OPTIONS":
            return options_response(request, self._allow_origin)

        try:
            response = await call_next(request)
        except Exception as exc:
            response = unexpected_error_response(exc)

        response.headers["Access-Control-Allow-Origin"] = self._allow_origin
        return response
