"""
Adapter: Lokalise API v2 client.

Implements LokaliseApiPort over httpx.
Forwards the caller's API token in the ``x-api-token`` header and maps
transport failures and non-2xx statuses onto domain errors.
"""

import logging
from typing import Any

import httpx

from lokalise_proxy.domain.lokalise.entities import Comment, Key
from lokalise_proxy.domain.lokalise.errors import (
    CantReachUpstreamError,
    upstream_rejection,
)
from lokalise_proxy.domain.lokalise.ports import LokaliseApiPort

logger = logging.getLogger(__name__)

KEYS_LIMIT = 5000


class LokaliseApiAdapter(LokaliseApiPort):
    """Concrete adapter for the Lokalise API.

    One short-lived httpx client per call; nothing is shared
    between requests.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float,
        comments_limit: int,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._comments_limit = comments_limit

    async def resolve_bundle_url(
        self,
        api_token: str | None,
        project_id: str | None,
        filename: str | None,
        fileformat: str | None,
        lang_iso: str | None,
    ) -> str:
        """Request a filtered export and return the bundle URL."""
        payload = await self._request(
            "POST",
            f"/projects/{project_id}/files/download",
            api_token,
            json={
                "format": fileformat,
                "filter_filenames": [filename],
                "filter_langs": [lang_iso],
                "export_empty_as": "base",
            },
        )
        return payload["bundle_url"]

    async def resolve_language_iso(
        self, api_token: str | None, project_id: str | None, lang_id: int
    ) -> str | None:
        """Return ``language.lang_iso`` for a project language."""
        payload = await self._request(
            "GET", f"/projects/{project_id}/languages/{lang_id}", api_token
        )
        return (payload.get("language") or {}).get("lang_iso")

    async def list_comments(
        self, api_token: str | None, project_id: str | None
    ) -> list[Comment]:
        """Return up to ``comments_limit`` project comments. No pagination."""
        payload = await self._request(
            "GET",
            f"/projects/{project_id}/comments",
            api_token,
            params={"limit": self._comments_limit},
        )
        return payload.get("comments", [])

    async def list_keys(
        self, api_token: str | None, project_id: str | None, key_ids: list
    ) -> list[Key]:
        """Return key records for ``key_ids``, without reference resolution."""
        payload = await self._request(
            "GET",
            f"/projects/{project_id}/keys",
            api_token,
            params={
                "disable_references": 1,
                "filter_key_ids": ",".join(str(key_id) for key_id in key_ids),
                "limit": KEYS_LIMIT,
            },
        )
        return payload.get("keys", [])

    async def _request(
        self,
        method: str,
        path: str,
        api_token: str | None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Send one API call and return the decoded JSON body.

        Raises:
            CantReachUpstreamError: Transport failure, including timeouts.
            UpstreamRejectedError: Lokalise answered non-2xx.
        """
        headers = {
            "Content-Type": "application/json",
            "x-api-token": api_token or "",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method, f"{self._base_url}{path}", headers=headers, **kwargs
                )
        except httpx.HTTPError as exc:
            logger.error("Lokalise API %s %s unreachable: %s", method, path, exc)
            raise CantReachUpstreamError() from exc

        if not response.is_success:
            logger.warning(
                "Lokalise API %s %s answered %d", method, path, response.status_code
            )
            raise upstream_rejection(response.status_code)

        return response.json()
