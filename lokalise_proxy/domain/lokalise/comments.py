"""
Comment aggregation by translation key.

Joins a project's comments with the metadata of the keys they are
attached to. Pure functions; fetching the key pages is the use case's job.
"""

from collections.abc import Iterable
from typing import Any

from lokalise_proxy.domain.lokalise.entities import (
    KEY_DATA_FIELDS,
    Comment,
    CommentThread,
    Key,
)


def collect_key_ids(comments: Iterable[Comment]) -> list:
    """Return the distinct key ids referenced by ``comments``, first seen first."""
    return list(dict.fromkeys(comment.get("key_id") for comment in comments))


def paginate_key_ids(
    key_ids: list, page_size: int, first_page_only: bool = False
) -> list[list]:
    """Split key ids into pages of at most ``page_size`` ids.

    Args:
        key_ids: Distinct key ids to resolve.
        page_size: Maximum ids per keys request.
        first_page_only: Mimic the legacy worker, which sent a single
            request holding the first ``page_size - 1`` ids and never
            resolved the rest.

    Returns:
        The pages, in order. Empty when there is nothing to resolve.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if not key_ids:
        return []
    if first_page_only:
        return [key_ids[: page_size - 1]]
    return [key_ids[i : i + page_size] for i in range(0, len(key_ids), page_size)]


def index_keys(pages: Iterable[list[Key]]) -> dict[Any, Key]:
    """Merge key pages into a lookup table by key id. Last write wins."""
    keys_by_id: dict[Any, Key] = {}
    for page in pages:
        for key in page:
            keys_by_id[key.get("key_id")] = key
    return keys_by_id


def group_comments_by_key(
    comments: Iterable[Comment], keys_by_id: dict[Any, Key]
) -> dict[Any, CommentThread]:
    """Group comments into one thread per key id.

    Threads appear in the order their key was first commented on and keep
    the comments in input order. A thread whose key is missing from
    ``keys_by_id`` gets empty ``data``.
    """
    threads: dict[Any, CommentThread] = {}
    for comment in comments:
        key_id = comment.get("key_id")
        thread = threads.get(key_id)
        if thread is None:
            key = keys_by_id.get(key_id, {})
            thread = CommentThread(
                data={name: key[name] for name in KEY_DATA_FIELDS if name in key}
            )
            threads[key_id] = thread
        thread.comments.append(comment)
    return threads
