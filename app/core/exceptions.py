class ProfileError(Exception):
    """Base class for errors raised while building a profile page."""


class NotFoundError(ProfileError):
    """The member id could not be resolved by the communication platform."""

    def __init__(self, member_id: str):
        super().__init__(f"No user found with ID: {member_id}")
        self.member_id = member_id


class UpstreamError(ProfileError):
    """An upstream API answered the call but rejected it (e.g. Slack ``ok: false``)."""

    def __init__(self, method: str, error: str | None):
        super().__init__(f"{method} failed: {error or 'unknown_error'}")
        self.method = method
        self.error = error or "unknown_error"


class TemplateLoadError(ProfileError):
    """A local page template is missing or unreadable."""
