"""URL resolution against the configured site root."""

from blog_home.config import Settings, get_settings


class SiteUrlRenderer:
    """Resolve logical paths onto ``settings.site_root``.

    A root of '/' yields root-relative URLs; a root with a scheme yields
    absolute URLs. Paths that are already absolute URLs pass through.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def resolve(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.settings.site_root}{path}"
