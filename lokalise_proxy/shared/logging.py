"""
Logging configuration for the proxy.

One format, to stdout. Every root handler carries a filter that masks
Lokalise API tokens, so a header dict or request body that slips into
a log line never leaks the caller's credentials.
"""

import logging
import re
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

REDACTED = "***"
_TOKEN_PATTERN = re.compile(
    r"""(x-api-token|apiToken|api_token)(['"]?\s*[:=]\s*['"]?)([^\s'",}&]+)""",
    re.IGNORECASE,
)


def redact_tokens(text: str) -> str:
    """Replace the value of every API token field in ``text``."""
    return _TOKEN_PATTERN.sub(rf"\1\2{REDACTED}", text)


class TokenRedactingFilter(logging.Filter):
    """Masks API tokens in the rendered message of each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_tokens(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the proxy.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(TokenRedactingFilter())

    # Upstream URLs and access lines are noise at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
