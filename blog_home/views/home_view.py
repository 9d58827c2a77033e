"""Home page view: the paginated entry list with banner, sidebar and page links."""

from collections.abc import Iterable, Mapping
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)
from markupsafe import Markup

from blog_home.config import Settings
from blog_home.exceptions import ConfigurationException, InvalidPageNumberException
from blog_home.logging_config import get_logger, log_with_context
from blog_home.models.entry import Entry, HomeEntry, Tag
from blog_home.models.page import NEXT_PAGE, PREV_PAGE
from blog_home.protocols import CopyLoaderProtocol, PageDataProviderProtocol, UrlRendererProtocol
from blog_home.utils.time_format import render_datetime_time, render_friendly_time

logger = get_logger(__name__)

HOME_TEMPLATE = "home.html"


def build_environment(settings: Settings) -> Environment:
    """Create the Jinja2 environment, preferring settings.template_dir over the bundled templates."""
    if settings.template_dir is not None:
        loader = FileSystemLoader(settings.template_dir)
    else:
        loader = PackageLoader("blog_home", "templates")
    return Environment(
        loader=loader,
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
    )


class HomeViewRenderer:
    """Renders the blog home page fragment.

    Site configuration and collaborators are fixed at construction; each
    render_home() call is a pure composition over its arguments and whatever
    the collaborators return, so one renderer can be shared between callers.
    """

    def __init__(
        self,
        settings: Settings,
        url_renderer: UrlRendererProtocol,
        copy_loader: CopyLoaderProtocol,
        page_data: PageDataProviderProtocol | None = None,
    ):
        """Initialize the renderer.

        Args:
            settings: Site settings (title, copy file refs, comment anchor, templates)
            url_renderer: Resolves logical paths to URLs
            copy_loader: Renders static copy files to HTML
            page_data: Default source of pagination links when render_home() gets none

        Raises:
            ConfigurationException: If the home template cannot be found
        """
        self.settings = settings
        self.url_renderer = url_renderer
        self.copy_loader = copy_loader
        self.page_data = page_data
        self.environment = build_environment(settings)
        self._template = self._load_template(HOME_TEMPLATE)

    def _load_template(self, name: str) -> Template:
        try:
            return self.environment.get_template(name)
        except TemplateNotFound as e:
            raise ConfigurationException(
                f"Template not found: {name}",
                details={"template": name, "template_dir": str(self.settings.template_dir)},
            ) from e

    def render_home(
        self,
        entries: Iterable[HomeEntry | tuple[Entry, str, Iterable[Tag]]],
        page_num: int,
        page_links: Mapping[str, str] | None = None,
    ) -> Markup:
        """Render the home page fragment.

        Args:
            entries: (entry, url, tags) rows in display order; rendered as given
            page_num: Current home page, starting at 1
            page_links: 'nextPage'/'prevPage' URLs; falls back to the page data
                provider, then to no pagination links

        Returns:
            The HTML fragment as Markup

        Raises:
            InvalidPageNumberException: If page_num < 1
        """
        if page_num < 1:
            raise InvalidPageNumberException(page_num)

        try:
            if page_links is None:
                page_links = self.page_data.page_links(page_num) if self.page_data is not None else {}
            home_url = self.url_renderer.resolve("/")
            banner_copy = Markup(self.copy_loader.load(self.settings.banner_copy)) if page_num == 1 else None
            sidebar_copy = Markup(self.copy_loader.load(self.settings.sidebar_copy))
            items = [self._entry_context(*row) for row in entries]
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Home view collaborator failed",
                page_num=page_num,
                error=str(e),
                error_type=type(e).__name__,
                event_type="home_render_error",
            )
            raise

        next_page = page_links.get(NEXT_PAGE) or None
        prev_page = page_links.get(PREV_PAGE) or None

        html = self._template.render(
            page_num=page_num,
            site_title=self.settings.site_title,
            home_url=home_url,
            banner_copy=banner_copy,
            sidebar_copy=sidebar_copy,
            entries=items,
            next_page=next_page,
            prev_page=prev_page,
        )

        log_with_context(
            logger,
            "debug",
            "Rendered home view",
            page_num=page_num,
            entry_count=len(items),
            has_next=next_page is not None,
            has_prev=prev_page is not None,
            event_type="home_rendered",
        )
        return Markup(html)

    def _entry_context(self, entry: Entry, url: str, tags: Iterable[Tag] | None) -> dict[str, Any]:
        return {
            "title": entry.title,
            "url": url,
            "comment_url": url + self.settings.comment_anchor,
            "datetime": render_datetime_time(entry.posted_at),
            "friendly_time": render_friendly_time(entry.posted_at),
            "lede": Markup(entry.lede),
            "tags": [self._tag_context(tag) for tag in tags or ()],
        }

    def _tag_context(self, tag: Tag) -> dict[str, str]:
        return {
            "type": tag.type.value,
            "label": tag.label,
            "url": self.url_renderer.resolve(tag.path),
        }
