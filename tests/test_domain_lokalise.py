"""
Tests for the lokalise domain layer.

Tests the error taxonomy, archive extraction and comment aggregation
in isolation. No external dependencies or IO required.
"""

import zipfile

import pytest

from lokalise_proxy.domain.lokalise.archive import extract_first_file
from lokalise_proxy.domain.lokalise.comments import (
    collect_key_ids,
    group_comments_by_key,
    index_keys,
    paginate_key_ids,
)
from lokalise_proxy.domain.lokalise.errors import (
    CantReachPreviewDownloadError,
    CantReachUpstreamError,
    ConversionRejectedError,
    EmptyPreviewArchiveError,
    EmptyPreviewExtractedError,
    UpstreamRejectedError,
    upstream_rejection,
)


def _comment(comment_id: int, key_id: int, text: str = "note") -> dict:
    return {"comment_id": comment_id, "key_id": key_id, "comment": text}


class TestUpstreamRejection:
    """Tests for the Lokalise status mapper."""

    @pytest.mark.parametrize(
        ("status", "message"),
        [
            (400, "Some required parameter is incorrect or missing required parameter."),
            (401, "API token is invalid."),
            (403, "Authenticated user does not have necessary permissions."),
            (404, "The requested resource does not exist."),
            (429, "Too many requests hit the Lokalise API too quickly."),
        ],
    )
    def test_known_statuses_keep_their_code(self, status: int, message: str) -> None:
        """Documented Lokalise statuses are relayed with their own message."""
        error = upstream_rejection(status)
        assert isinstance(error, UpstreamRejectedError)
        assert error.status_code == status
        assert error.upstream_status == status
        assert error.message == message

    @pytest.mark.parametrize("status", [402, 406, 500, 503])
    def test_other_statuses_become_bad_gateway(self, status: int) -> None:
        """Anything else is a 502 naming the upstream status."""
        error = upstream_rejection(status)
        assert error.status_code == 502
        assert error.upstream_status == status
        assert error.message == f"Error code {status} was returned from Lokalise API."


class TestErrorTaxonomy:
    """Tests for the status and message each error kind reports."""

    def test_transport_errors_are_bad_gateway(self) -> None:
        assert CantReachUpstreamError().status_code == 502
        assert CantReachUpstreamError().message == "Can't reach Lokalise API from the worker."

    def test_download_errors_share_a_message(self) -> None:
        """A failed and an empty download look the same to the client."""
        failed = CantReachPreviewDownloadError()
        empty = EmptyPreviewArchiveError()
        assert failed.status_code == empty.status_code == 502
        assert failed.message == empty.message

    def test_empty_extraction_is_internal_error(self) -> None:
        error = EmptyPreviewExtractedError()
        assert error.status_code == 500
        assert str(error) == "Can't extract preview from the downloaded preview archive."

    def test_conversion_rejection_names_status(self) -> None:
        error = ConversionRejectedError(503)
        assert error.status_code == 502
        assert "503" in error.message


class TestExtractFirstFile:
    """Tests for pulling the preview out of a bundle."""

    def test_returns_single_file(self, build_zip) -> None:
        archive = build_zip([("en/index.html", b"<h1>Hello</h1>")])
        assert extract_first_file(archive) == b"<h1>Hello</h1>"

    def test_skips_directories_and_empty_entries(self, build_zip) -> None:
        """Zero-size entries never count as the preview."""
        archive = build_zip(
            [("en/", b""), ("en/blank.html", b""), ("en/page.html", b"<p>x</p>")]
        )
        assert extract_first_file(archive) == b"<p>x</p>"

    def test_first_non_empty_entry_wins(self, build_zip) -> None:
        archive = build_zip([("a.html", b"first"), ("b.html", b"second")])
        assert extract_first_file(archive) == b"first"

    def test_empty_buffer_is_never_decompressed(self, monkeypatch) -> None:
        """A zero-byte download fails before zipfile is touched."""

        def _explode(*args, **kwargs):
            raise AssertionError("ZipFile must not be opened")

        monkeypatch.setattr(zipfile, "ZipFile", _explode)
        with pytest.raises(EmptyPreviewArchiveError):
            extract_first_file(b"")

    def test_all_empty_entries_raise(self, build_zip) -> None:
        archive = build_zip([("a.html", b""), ("b.html", b"")])
        with pytest.raises(EmptyPreviewExtractedError):
            extract_first_file(archive)

    def test_archive_without_entries_raises(self, build_zip) -> None:
        with pytest.raises(EmptyPreviewExtractedError):
            extract_first_file(build_zip([]))

    def test_non_zip_body_is_not_a_domain_error(self) -> None:
        """Garbage bodies surface as BadZipFile and end up as a generic 500."""
        with pytest.raises(zipfile.BadZipFile):
            extract_first_file(b"<html>Access denied</html>")


class TestCollectKeyIds:
    """Tests for the distinct key id collection."""

    def test_distinct_in_first_seen_order(self) -> None:
        comments = [_comment(1, 30), _comment(2, 10), _comment(3, 30), _comment(4, 20)]
        assert collect_key_ids(comments) == [30, 10, 20]

    def test_no_comments(self) -> None:
        assert collect_key_ids([]) == []


class TestPaginateKeyIds:
    """Tests for splitting key ids into request pages."""

    def test_pages_cover_every_id(self) -> None:
        key_ids = list(range(650))
        pages = paginate_key_ids(key_ids, 300)
        assert [len(page) for page in pages] == [300, 300, 50]
        assert [key_id for page in pages for key_id in page] == key_ids

    def test_single_short_page(self) -> None:
        assert paginate_key_ids([1, 2, 3], 300) == [[1, 2, 3]]

    def test_nothing_to_resolve(self) -> None:
        assert paginate_key_ids([], 300) == []

    def test_legacy_mode_resolves_first_page_minus_one(self) -> None:
        """The legacy worker only ever sent keys[0:299]."""
        key_ids = list(range(650))
        pages = paginate_key_ids(key_ids, 300, first_page_only=True)
        assert pages == [key_ids[:299]]

    def test_rejects_non_positive_page_size(self) -> None:
        with pytest.raises(ValueError):
            paginate_key_ids([1], 0)


class TestIndexKeys:
    """Tests for merging key pages."""

    def test_merges_pages_last_write_wins(self) -> None:
        pages = [
            [{"key_id": 1, "key_name": "old"}, {"key_id": 2, "key_name": "two"}],
            [{"key_id": 1, "key_name": "new"}],
        ]
        keys_by_id = index_keys(pages)
        assert keys_by_id[1]["key_name"] == "new"
        assert keys_by_id[2]["key_name"] == "two"


class TestGroupCommentsByKey:
    """Tests for the comment aggregation invariant."""

    def test_partitions_comments_preserving_order(self) -> None:
        comments = [
            _comment(1, 10, "a"),
            _comment(2, 20, "b"),
            _comment(3, 10, "c"),
            _comment(4, 30, "d"),
            _comment(5, 20, "e"),
        ]
        threads = group_comments_by_key(comments, {})

        assert set(threads) == {10, 20, 30}
        assert [c["comment_id"] for c in threads[10].comments] == [1, 3]
        assert [c["comment_id"] for c in threads[20].comments] == [2, 5]
        assert [c["comment_id"] for c in threads[30].comments] == [4]
        regrouped = sorted(c["comment_id"] for t in threads.values() for c in t.comments)
        assert regrouped == [1, 2, 3, 4, 5]

    def test_attaches_key_name_and_filenames_only(self) -> None:
        keys_by_id = {
            10: {
                "key_id": 10,
                "key_name": {"web": "home.title"},
                "filenames": {"web": "en.json"},
                "translations": ["ignored"],
            }
        }
        threads = group_comments_by_key([_comment(1, 10)], keys_by_id)
        assert threads[10].data == {
            "key_name": {"web": "home.title"},
            "filenames": {"web": "en.json"},
        }

    def test_missing_key_leaves_data_empty(self) -> None:
        threads = group_comments_by_key([_comment(1, 99)], {})
        assert threads[99].data == {}
        assert threads[99].to_dict() == {"data": {}, "comments": [_comment(1, 99)]}

    def test_no_comments_no_threads(self) -> None:
        assert group_comments_by_key([], {1: {"key_id": 1}}) == {}
