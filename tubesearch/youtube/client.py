"""YouTube Data API v3 client for video search."""

from collections.abc import Sequence
from typing import Any

import httpx


class YouTubeClient:
    """Client for the ``search`` and ``videos`` endpoints of YouTube Data API v3.

    Errors are not handled here: HTTP failures surface as ``httpx`` exceptions
    and undecodable or non-object bodies as ``ValueError``.
    """

    BASE = "https://www.googleapis.com/youtube/v3"
    MAX_RESULTS = 10

    def __init__(
        self,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
        base_url: str = BASE,
    ):
        """Initialize the YouTube client with an API key.

        Args:
            api_key: YouTube Data API key
            transport: Optional httpx transport, used in place of the network
            base_url: API root, without trailing slash

        Raises:
            ValueError: If the API key is empty
        """
        if not api_key:
            raise ValueError("YouTube API key is required")
        self._api_key = api_key
        self._transport = transport
        self._base = base_url.rstrip("/")

    async def _get(self, path: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        params = {**params, "key": self._api_key}
        async with httpx.AsyncClient(transport=self._transport) as client:
            r = await client.get(f"{self._base}/{path}", params=params)
            r.raise_for_status()
            data = r.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected {path} response: {type(data).__name__}")
        # a JSON null decodes to None; treat it like a missing list
        return data.get("items") or []

    async def search(
        self, query: str, max_results: int = MAX_RESULTS
    ) -> list[dict[str, Any]]:
        """Search for videos matching a free-text query.

        Args:
            query: Search terms, passed through unchanged
            max_results: Maximum number of results to request

        Returns:
            The raw ``items`` of the search response, each carrying
            ``id.videoId`` and a ``snippet``
        """
        return await self._get(
            "search",
            {
                "part": "id,snippet",
                "q": query,
                "maxResults": max_results,
                "type": "video",
            },
        )

    async def list_videos(self, video_ids: Sequence[str]) -> list[dict[str, Any]]:
        """Fetch snippet and content details for a batch of videos.

        Args:
            video_ids: Video IDs to look up

        Returns:
            The raw ``items`` of the videos response, in the order the API
            returns them
        """
        return await self._get(
            "videos",
            {"part": "snippet,contentDetails", "id": ",".join(video_ids)},
        )
