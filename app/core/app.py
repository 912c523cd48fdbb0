import asyncio
import sys
from contextlib import asynccontextmanager, suppress
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from markupsafe import escape

from app.api.main import api_router
from app.core.exceptions import NotFoundError, TemplateLoadError
from app.services.emoji_cache import emoji_cache
from app.services.hackatime.client import hackatime_client
from app.services.slack import slack_client

from .config import settings
from .version import __version__

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    emoji_cache.load()
    refresh_task = asyncio.create_task(emoji_cache.run_forever())
    yield
    refresh_task.cancel()
    with suppress(asyncio.CancelledError):
        await refresh_task
    for client in (slack_client, hackatime_client):
        try:
            await client.close()
        except Exception as exc:
            logger.warning(f"Failed to close HTTP client: {exc}")


app = FastAPI(
    title="Member Profile",
    description="Public profile pages for Slack members with Hackatime coding stats",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return HTMLResponse(content=f"<h1>No user found with ID: {escape(exc.member_id)}</h1>", status_code=404)


@app.exception_handler(TemplateLoadError)
async def template_error_handler(request: Request, exc: TemplateLoadError):
    logger.error(f"[Profile] {exc}")
    return HTMLResponse(content="Error loading profile template.", status_code=500)


# Serve static files
# app/core/app.py -> app/core -> app
static_dir = Path(__file__).resolve().parent.parent / "static"

if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

app.include_router(api_router)
