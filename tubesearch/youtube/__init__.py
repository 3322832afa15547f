"""YouTube Data API access for TubeSearch."""

from .client import YouTubeClient
from .duration import format_duration
from .models import VideoRecord
from .search import VideoSearchAdapter

__all__ = ["VideoRecord", "VideoSearchAdapter", "YouTubeClient", "format_duration"]
