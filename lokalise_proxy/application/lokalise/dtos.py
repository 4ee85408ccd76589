"""
Data Transfer Objects for the lokalise application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior. Caller-supplied fields are
optional: Lokalise itself rejects missing parameters.
"""

from dataclasses import dataclass
from typing import Any

from lokalise_proxy.domain.lokalise.entities import CommentThread

HTML_FORMAT = "html"
DOCX_FORMAT = "docx"


@dataclass(frozen=True)
class GetLangIsoQuery:
    """Input DTO for resolving a language ISO code.

    Attributes:
        api_token: Caller's Lokalise API token.
        project_id: Lokalise project id.
        lang_id: Numeric Lokalise language id (-1 when the caller sent none).
    """

    api_token: str | None
    project_id: str | None
    lang_id: int


@dataclass(frozen=True)
class LangIsoResult:
    """Output DTO for a resolved language.

    Attributes:
        lang_iso: ISO code, or None when Lokalise returned no language.
    """

    lang_iso: str | None


@dataclass(frozen=True)
class PreviewQuery:
    """Input DTO for fetching a file preview.

    Attributes:
        api_token: Caller's Lokalise API token.
        project_id: Lokalise project id.
        filename: Project filename to export.
        fileformat: Lokalise export format (html, docx, ...).
        lang_iso: Language to export.
    """

    api_token: str | None = None
    project_id: str | None = None
    filename: str | None = None
    fileformat: str | None = None
    lang_iso: str | None = None


@dataclass(frozen=True)
class PreviewResult:
    """Output DTO for a preview body.

    Attributes:
        content: Raw file bytes.
        media_type: Content type to announce, or None to leave it unset.
    """

    content: bytes
    media_type: str | None


@dataclass(frozen=True)
class ProjectCommentsQuery:
    """Input DTO for aggregating a project's comments.

    Attributes:
        api_token: Caller's Lokalise API token.
        project_id: Lokalise project id.
    """

    api_token: str | None
    project_id: str | None


@dataclass(frozen=True)
class ProjectCommentsResult:
    """Output DTO for aggregated comments.

    Attributes:
        threads: One CommentThread per commented key id.
    """

    threads: dict[Any, CommentThread]

    def to_dict(self) -> dict[Any, dict]:
        return {key_id: thread.to_dict() for key_id, thread in self.threads.items()}
