"""Pagination links for the home page entry list."""

import math
from collections.abc import Mapping

from blog_home.config import Settings, get_settings
from blog_home.exceptions import InvalidPageNumberException
from blog_home.logging_config import get_logger, log_with_context
from blog_home.models.page import PageLinks
from blog_home.protocols import UrlRendererProtocol
from blog_home.services.url_renderer import SiteUrlRenderer

logger = get_logger(__name__)


class PaginationService:
    """Compute 'nextPage' (older) and 'prevPage' (newer) links for home pages.

    Page 1 lives at '/', later pages at ``settings.page_route``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        url_renderer: UrlRendererProtocol | None = None,
        total_entries: int = 0,
    ):
        """Initialize pagination service.

        Args:
            settings: Settings instance (defaults to singleton)
            url_renderer: Resolver for page paths (defaults to SiteUrlRenderer)
            total_entries: Number of published entries, used by page_links()
        """
        self.settings = settings or get_settings()
        self.url_renderer = url_renderer or SiteUrlRenderer(self.settings)
        self.total_entries = total_entries

    def page_count(self, total_entries: int | None = None) -> int:
        """Number of home pages needed for the entries (always at least 1)."""
        if total_entries is None:
            total_entries = self.total_entries
        return max(1, math.ceil(max(0, total_entries) / self.settings.entries_per_page))

    def page_path(self, page_num: int) -> str:
        """Logical path of a home page."""
        if page_num < 1:
            raise InvalidPageNumberException(page_num)
        if page_num == 1:
            return "/"
        return self.settings.page_route.format(page=page_num)

    def links(self, page_num: int, total_entries: int | None = None) -> PageLinks:
        """Build the PageLinks for a page.

        Args:
            page_num: Current page (1-based)
            total_entries: Override for the configured entry count

        Returns:
            PageLinks with next_page set when older entries exist and
            prev_page set when this is not the first page

        Raises:
            InvalidPageNumberException: If page_num < 1
        """
        if page_num < 1:
            raise InvalidPageNumberException(page_num)

        last_page = self.page_count(total_entries)
        next_page = self.url_renderer.resolve(self.page_path(page_num + 1)) if page_num < last_page else None
        prev_page = self.url_renderer.resolve(self.page_path(page_num - 1)) if page_num > 1 else None

        log_with_context(
            logger,
            "debug",
            "Computed page links",
            page_num=page_num,
            last_page=last_page,
            has_next=next_page is not None,
            has_prev=prev_page is not None,
            event_type="pagination_links",
        )
        return PageLinks(next_page=next_page, prev_page=prev_page)

    def page_links(self, page_num: int) -> Mapping[str, str]:
        """Keyed links for the home view ('nextPage' / 'prevPage')."""
        return self.links(page_num).as_map()
