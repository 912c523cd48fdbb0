from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.services.profile import page_renderer, profile_service

router = APIRouter(tags=["profile"])


@router.get("/{member_id}", response_class=HTMLResponse)
async def profile_page(member_id: str):
    """Public profile page for a Slack member."""
    model = await profile_service.build(member_id)
    return HTMLResponse(content=page_renderer.render(model), media_type="text/html")
