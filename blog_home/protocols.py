"""Protocol definitions for the home view's collaborators.

These protocols define the interfaces the renderer depends on, allowing
persistence, routing and copy loading to live outside this package and
making the renderer easy to test with simple doubles.
"""

from collections.abc import Mapping
from typing import Protocol

from markupsafe import Markup


class UrlRendererProtocol(Protocol):
    """Resolves logical site paths to URLs."""

    def resolve(self, path: str) -> str:
        """Resolve a logical path such as '/' or '/tag/haskell'.

        Args:
            path: Logical site path

        Returns:
            Absolute or root-relative URL
        """
        ...


class CopyLoaderProtocol(Protocol):
    """Turns a named static copy file into trusted HTML."""

    def load(self, file_ref: str) -> Markup | str:
        """Load and render a copy file.

        Args:
            file_ref: Reference to the copy file, e.g. 'copy/static/home-banner.md'

        Returns:
            Rendered HTML, emitted without escaping
        """
        ...


class PageDataProviderProtocol(Protocol):
    """Supplies pagination links ('nextPage', 'prevPage') for a home page."""

    def page_links(self, page_num: int) -> Mapping[str, str]:
        """Return the named links for the given page; absent keys mean no such page."""
        ...
