"""
Domain-specific errors for the lokalise bounded context.

All errors raised while proxying a request must be defined here.
Each error knows the HTTP status and status text it is reported with;
the mapping to responses happens at the interface layer.
No framework imports allowed.
"""

GENERIC_ERROR_STATUS = 500
GENERIC_ERROR_MESSAGE = "Error in the worker during processing the request."

UPSTREAM_STATUS_MESSAGES = {
    400: "Some required parameter is incorrect or missing required parameter.",
    401: "API token is invalid.",
    403: "Authenticated user does not have necessary permissions.",
    404: "The requested resource does not exist.",
    429: "Too many requests hit the Lokalise API too quickly.",
}


class LokaliseProxyError(Exception):
    """Base error for all lokalise proxy errors."""

    status_code = GENERIC_ERROR_STATUS
    message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class CantReachUpstreamError(LokaliseProxyError):
    """Raised when the Lokalise API or the conversion service is unreachable."""

    status_code = 502
    message = "Can't reach Lokalise API from the worker."


class UpstreamRejectedError(LokaliseProxyError):
    """Raised when the Lokalise API answers with a non-2xx status."""

    def __init__(self, upstream_status: int, status_code: int, message: str) -> None:
        self.upstream_status = upstream_status
        self.status_code = status_code
        super().__init__(message)


class CantReachPreviewDownloadError(LokaliseProxyError):
    """Raised when the preview bundle cannot be downloaded."""

    status_code = 502
    message = "Can't reach the preview download from the worker."


class EmptyPreviewArchiveError(LokaliseProxyError):
    """Raised when the downloaded preview bundle has no bytes."""

    status_code = 502
    message = "Can't reach the preview download from the worker."


class EmptyPreviewExtractedError(LokaliseProxyError):
    """Raised when the preview archive holds no non-empty file."""

    status_code = 500
    message = "Can't extract preview from the downloaded preview archive."


class ConversionRejectedError(LokaliseProxyError):
    """Raised in strict mode when the conversion service answers non-2xx."""

    status_code = 502

    def __init__(self, upstream_status: int) -> None:
        self.upstream_status = upstream_status
        super().__init__(
            f"Document conversion service returned error code {upstream_status}."
        )


def upstream_rejection(upstream_status: int) -> UpstreamRejectedError:
    """Build the error reported for a non-2xx Lokalise API response.

    Known statuses keep their code; anything else becomes a 502
    carrying the upstream status in its message.

    Args:
        upstream_status: HTTP status returned by the Lokalise API.

    Returns:
        The UpstreamRejectedError to raise.
    """
    message = UPSTREAM_STATUS_MESSAGES.get(upstream_status)
    if message is not None:
        return UpstreamRejectedError(upstream_status, upstream_status, message)
    return UpstreamRejectedError(
        upstream_status,
        502,
        f"Error code {upstream_status} was returned from Lokalise API.",
    )
