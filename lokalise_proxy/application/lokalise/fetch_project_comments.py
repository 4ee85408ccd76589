"""
Use case: Aggregate a project's comments by translation key.

Input: ProjectCommentsQuery (api_token, project_id)
Output: ProjectCommentsResult (one CommentThread per commented key)
Side effects: None.
Failure cases: CantReachUpstreamError, UpstreamRejectedError.
"""

import logging

from lokalise_proxy.application.lokalise.dtos import (
    ProjectCommentsQuery,
    ProjectCommentsResult,
)
from lokalise_proxy.domain.lokalise.comments import (
    collect_key_ids,
    group_comments_by_key,
    index_keys,
    paginate_key_ids,
)
from lokalise_proxy.domain.lokalise.ports import LokaliseApiPort

logger = logging.getLogger(__name__)


class FetchProjectCommentsUseCase:
    """Fetches all comments, then the keys they belong to, page by page.

    Key pages are requested one after the other. ``first_page_only``
    keeps the legacy behaviour of resolving a single page.
    """

    def __init__(
        self,
        lokalise_api: LokaliseApiPort,
        keys_page_size: int,
        first_page_only: bool = False,
    ) -> None:
        self._lokalise_api = lokalise_api
        self._keys_page_size = keys_page_size
        self._first_page_only = first_page_only

    async def execute(self, query: ProjectCommentsQuery) -> ProjectCommentsResult:
        """Run the comment aggregation use case.

        Args:
            query: Token and project supplied by the caller.

        Returns:
            Comment threads keyed by key id.
        """
        comments = await self._lokalise_api.list_comments(
            api_token=query.api_token, project_id=query.project_id
        )
        key_ids = collect_key_ids(comments)
        pages = paginate_key_ids(
            key_ids, self._keys_page_size, first_page_only=self._first_page_only
        )
        logger.info(
            "Project %s has %d comments on %d keys, resolving in %d page(s)",
            query.project_id,
            len(comments),
            len(key_ids),
            len(pages),
        )

        key_pages = []
        for page in pages:
            key_pages.append(
                await self._lokalise_api.list_keys(
                    api_token=query.api_token,
                    project_id=query.project_id,
                    key_ids=page,
                )
            )

        threads = group_comments_by_key(comments, index_keys(key_pages))
        return ProjectCommentsResult(threads=threads)
