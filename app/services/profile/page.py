import json
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from app.core.exceptions import TemplateLoadError
from app.models.profile import ProfileRenderModel, RoleBanner

# app/services/profile/page.py -> app
TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
PROFILE_TEMPLATE = "profile.html"


def banner_script(banner: RoleBanner) -> str:
    return f"<script>addHeader({json.dumps(banner.message)}, {json.dumps(banner.severity)})</script>"


def inject_banner(html: str, banner: RoleBanner | None) -> str:
    """Insert the banner script right before the closing body tag."""
    if banner is None:
        return html
    script = banner_script(banner)
    idx = html.rfind("</body>")
    if idx == -1:
        return html + script
    return html[:idx] + script + html[idx:]


class ProfilePageRenderer:
    def __init__(self, templates_dir: str | Path = TEMPLATES_DIR, template_name: str = PROFILE_TEMPLATE):
        self.template_name = template_name
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, model: ProfileRenderModel) -> str:
        try:
            template = self.env.get_template(self.template_name)
        except TemplateNotFound as e:
            raise TemplateLoadError(f"Profile template not found: {e.name}") from e

        html = template.render(
            username=model.username,
            pfp=model.avatar_url,
            status_emoji=model.status_emoji_html,
            status_text=model.status_text,
            member_id=model.member_id,
            lifetime=model.lifetime,
            daily_average=model.daily_average,
            trust_factor=model.trust_level,
            languages=model.languages,
        )
        return inject_banner(html, model.banner)


page_renderer = ProfilePageRenderer()
