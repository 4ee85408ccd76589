"""
Preview archive extraction.

Lokalise delivers every export as a ZIP bundle, even for a single file.
The preview is the first non-empty entry, in central directory order.
Bundles are expected to contain exactly one meaningful file; with several,
whichever comes first wins.
"""

import io
import logging
import zipfile

from lokalise_proxy.domain.lokalise.errors import (
    EmptyPreviewArchiveError,
    EmptyPreviewExtractedError,
)

logger = logging.getLogger(__name__)


def extract_first_file(archive: bytes) -> bytes:
    """Return the content of the first non-empty entry of a ZIP archive.

    Args:
        archive: The raw archive bytes.

    Returns:
        The decompressed bytes of the first entry with a non-zero size.

    Raises:
        EmptyPreviewArchiveError: ``archive`` is empty. Nothing is decompressed.
        EmptyPreviewExtractedError: Every entry is empty (or there are none).
        zipfile.BadZipFile: ``archive`` is not a ZIP file.
    """
    if not archive:
        raise EmptyPreviewArchiveError()

    with zipfile.ZipFile(io.BytesIO(archive)) as bundle:
        entries = [info for info in bundle.infolist() if info.file_size > 0]
        if not entries:
            raise EmptyPreviewExtractedError()

        first = entries[0]
        logger.debug(
            "Extracting %s (%d bytes) out of %d non-empty entries",
            first.filename,
            first.file_size,
            len(entries),
        )
        content = bundle.read(first)

    if not content:
        raise EmptyPreviewExtractedError()
    return content
