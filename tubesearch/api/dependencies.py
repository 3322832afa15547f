"""FastAPI dependencies for API routers."""

from tubesearch.config import get_settings
from tubesearch.youtube import VideoSearchAdapter

_video_search: VideoSearchAdapter | None = None


def get_video_search() -> VideoSearchAdapter:
    """Dependency for FastAPI routes to get the shared search adapter.

    Returns:
        VideoSearchAdapter bound to the configured API key
    """
    global _video_search

    if _video_search is None:
        settings = get_settings()
        _video_search = VideoSearchAdapter(
            settings.youtube_api_key,
            base_url=settings.youtube_api_base,
            max_results=settings.max_results,
        )

    return _video_search
