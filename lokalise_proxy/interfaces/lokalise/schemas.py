"""
Pydantic schemas for the proxy's request bodies.

The browser extension sends camelCase JSON. Every field is optional and
passed on untouched; Lokalise does the real validation.
No business logic belongs here.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

MISSING_LANG_ID = -1
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_lang_id(value: int | str | None) -> int:
    """Read a language id the way the extension's old JavaScript backend did.

    Takes the leading integer of the value's string form, so ``"640"`` and
    ``"640px"`` both give 640. Missing or non-numeric values give -1, which
    Lokalise rejects.
    """
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value)) if value is not None else None
    if match is None:
        return MISSING_LANG_ID
    return int(match.group(1))


class LokaliseRequest(BaseModel):
    """Fields shared by every proxied call.

    Attributes:
        api_token: Caller's Lokalise API token, forwarded as x-api-token.
        project_id: Lokalise project id.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    api_token: str | None = Field(None, alias="apiToken")
    project_id: str | None = Field(None, alias="projectId")


class LangIsoRequest(LokaliseRequest):
    """Request schema for POST /get-lang-iso."""

    lang_id: int | str | None = Field(None, alias="langId")


class PreviewRequest(LokaliseRequest):
    """Request schema for the preview endpoints."""

    filename: str | None = None
    fileformat: str | None = None
    lang_iso: str | None = Field(None, alias="langIso")


class ProjectCommentsRequest(LokaliseRequest):
    """Request schema for POST /fetch-project-comments."""
