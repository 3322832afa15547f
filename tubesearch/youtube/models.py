"""Pydantic models for YouTube search results."""

from pydantic import BaseModel, ConfigDict


class VideoRecord(BaseModel):
    """A single search hit, ready for display."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    channel: str
    duration: str
