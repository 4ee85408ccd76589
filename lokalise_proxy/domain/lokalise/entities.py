"""
Domain entities for the lokalise bounded context.

Comments and keys come from the Lokalise API as JSON objects and are
passed through untouched, so they stay plain dicts. Only the shapes this
service produces are modelled here.
"""

from dataclasses import dataclass, field
from typing import Any

Comment = dict[str, Any]
Key = dict[str, Any]

KEY_DATA_FIELDS = ("key_name", "filenames")


@dataclass
class CommentThread:
    """All comments left on one translation key, with the key's metadata.

    Attributes:
        data: The key's name and filenames. Fields the key lookup did not
            return are absent.
        comments: Comments for the key, in the order Lokalise returned them.
    """

    data: dict[str, Any] = field(default_factory=dict)
    comments: list[Comment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"data": dict(self.data), "comments": list(self.comments)}


@dataclass(frozen=True)
class ConvertedDocument:
    """Body returned by the document conversion service.

    Attributes:
        content: Raw response body, expected to be a PDF.
        status_code: HTTP status the conversion service answered with.
    """

    content: bytes
    status_code: int
