"""
Use case: Resolve the ISO code of a Lokalise project language.

Input: GetLangIsoQuery (api_token, project_id, lang_id)
Output: LangIsoResult
Side effects: None.
Failure cases: CantReachUpstreamError, UpstreamRejectedError.
"""

import logging

from lokalise_proxy.application.lokalise.dtos import GetLangIsoQuery, LangIsoResult
from lokalise_proxy.domain.lokalise.ports import LokaliseApiPort

logger = logging.getLogger(__name__)


class GetLangIsoUseCase:
    """Looks up a language by its numeric id and returns its ISO code."""

    def __init__(self, lokalise_api: LokaliseApiPort) -> None:
        self._lokalise_api = lokalise_api

    async def execute(self, query: GetLangIsoQuery) -> LangIsoResult:
        """Run the language lookup use case.

        Args:
            query: Token, project and language id supplied by the caller.

        Returns:
            The language ISO code (None when Lokalise returned none).
        """
        logger.info(
            "Resolving language iso for project=%s, lang_id=%d",
            query.project_id,
            query.lang_id,
        )
        lang_iso = await self._lokalise_api.resolve_language_iso(
            api_token=query.api_token,
            project_id=query.project_id,
            lang_id=query.lang_id,
        )
        return LangIsoResult(lang_iso=lang_iso)
