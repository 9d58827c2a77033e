"""Pagination link models."""

from pydantic import BaseModel

NEXT_PAGE = "nextPage"
PREV_PAGE = "prevPage"


class PageLinks(BaseModel):
    """Links to the neighbouring home pages.

    next_page points at older entries, prev_page at newer ones. A missing
    link means there is no such page.
    """

    next_page: str | None = None
    prev_page: str | None = None

    def as_map(self) -> dict[str, str]:
        """Return the keyed form consumed by the home view, omitting absent links."""
        links: dict[str, str] = {}
        if self.next_page:
            links[NEXT_PAGE] = self.next_page
        if self.prev_page:
            links[PREV_PAGE] = self.prev_page
        return links
