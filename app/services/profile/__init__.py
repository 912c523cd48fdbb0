"""
Profile pipeline: identity + activity + status emoji -> render model -> HTML page.
"""

from app.services.profile.builder import build_render_model, select_banner
from app.services.profile.page import ProfilePageRenderer, inject_banner, page_renderer
from app.services.profile.service import ProfileService, profile_service

__all__ = [
    "ProfileService",
    "ProfilePageRenderer",
    "build_render_model",
    "inject_banner",
    "page_renderer",
    "profile_service",
    "select_banner",
]
