"""HTML pages: search form, search results and embedded player."""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from tubesearch.api.dependencies import get_video_search
from tubesearch.config import get_settings
from tubesearch.youtube import VideoSearchAdapter

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(tags=["search"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Render the empty search form."""
    return templates.TemplateResponse(request, "index.html", {})


@router.post("/search", response_class=HTMLResponse)
async def search(
    request: Request,
    query: str = Form(default=""),
    video_search: VideoSearchAdapter = Depends(get_video_search),
):
    """
    Search YouTube and render the matching videos.

    Form Fields:
        - query: Free-text search terms

    Returns:
        The results page, or a 404 plain-text response when nothing was found
        (including when YouTube could not be reached)
    """
    videos = await video_search.search(query)
    if not videos:
        return PlainTextResponse("No videos found.", status_code=404)

    return templates.TemplateResponse(
        request, "results.html", {"query": query, "videos": videos}
    )


@router.get("/embed/{video_id}", response_class=HTMLResponse)
async def embed(request: Request, video_id: str):
    """Render an embedded player for a single video."""
    embed_base = get_settings().embed_base_url.rstrip("/")
    embed_url = f"{embed_base}/{video_id}"
    return templates.TemplateResponse(request, "embed.html", {"embed_url": embed_url})
