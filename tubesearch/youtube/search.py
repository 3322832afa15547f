"""Two-step YouTube search: find video IDs, then fetch their details."""

import logging
from typing import Any

import httpx

from .client import YouTubeClient
from .duration import format_duration
from .models import VideoRecord

logger = logging.getLogger(__name__)

# Raised by the client, or while reading a payload of the wrong shape
UPSTREAM_ERRORS = (httpx.HTTPError, ValueError, TypeError, AttributeError)


class VideoSearchAdapter:
    """Turns a query into a list of ``VideoRecord`` objects.

    Any failure talking to YouTube is logged and reported to the caller as an
    empty result, so callers only ever see "some videos" or "no videos".
    """

    def __init__(
        self,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
        base_url: str = YouTubeClient.BASE,
        max_results: int = YouTubeClient.MAX_RESULTS,
    ):
        self._api_key = api_key
        self._transport = transport
        self._base_url = base_url
        self._max_results = max_results

    async def search(self, query: str) -> list[VideoRecord]:
        """Search YouTube and return up to ``max_results`` videos.

        The search response only carries IDs and snippets, so a second
        ``videos`` request fetches durations. Records follow the order of
        that second response. JSON nulls are read as empty values; fields of
        the wrong type count as a failed call.

        Args:
            query: Free-text search terms

        Returns:
            List of VideoRecord objects, empty if any step failed
        """
        try:
            youtube = YouTubeClient(
                self._api_key, transport=self._transport, base_url=self._base_url
            )
        except ValueError:
            logger.error("Failed to initialize YouTube client", exc_info=True)
            return []

        try:
            results = await youtube.search(query, max_results=self._max_results)
            video_ids = _video_ids(results)
        except UPSTREAM_ERRORS:
            logger.error(f"YouTube search failed for query: {query!r}", exc_info=True)
            return []

        try:
            details = await youtube.list_videos(video_ids)
            return [_to_record(item) for item in details]
        except UPSTREAM_ERRORS:
            logger.error(
                f"Failed to fetch details for {len(video_ids)} videos", exc_info=True
            )
            return []


def _video_ids(results: list[dict[str, Any]]) -> list[str]:
    """Collect ``id.videoId`` from search results, skipping hits without one."""
    video_ids = []
    for item in results:
        video_id = ((item or {}).get("id") or {}).get("videoId")
        if video_id:
            video_ids.append(video_id)
    return video_ids


def _to_record(item: dict[str, Any] | None) -> VideoRecord:
    """Build a VideoRecord from a ``videos`` resource."""
    item = item or {}
    snippet = item.get("snippet") or {}
    content_details = item.get("contentDetails") or {}
    return VideoRecord(
        id=item.get("id") or "",
        title=snippet.get("title") or "",
        channel=snippet.get("channelTitle") or "",
        duration=format_duration(content_details.get("duration") or ""),
    )
