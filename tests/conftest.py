"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from markupsafe import Markup

from blog_home.config import Settings, reset_settings
from blog_home.models import Entry, HomeEntry, Tag, TagType
from blog_home.services.url_renderer import SiteUrlRenderer
from blog_home.views import HomeViewRenderer

BANNER_HTML = '<p class="banner-copy">Welcome to the blog.</p>'
SIDEBAR_HTML = '<ul class="sidebar-links"><li><a href="/about">About</a></li></ul>'


@pytest.fixture(autouse=True)
def clear_settings_singleton():
    """Keep get_settings() from leaking a cached instance between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def mock_settings():
    """Settings instance with test values, isolated from the environment and .env."""
    return Settings(
        _env_file=None,
        site_title="in Code",
        site_root="https://blog.example.com",
        banner_copy="copy/static/home-banner.md",
        sidebar_copy="copy/static/home-links.md",
        entries_per_page=2,
    )


@pytest.fixture
def url_renderer(mock_settings):
    """URL renderer resolving against https://blog.example.com."""
    return SiteUrlRenderer(mock_settings)


@pytest.fixture
def mock_copy_loader(mock_settings):
    """Copy loader double returning fixed banner and sidebar HTML."""
    copies = {
        mock_settings.banner_copy: Markup(BANNER_HTML),
        mock_settings.sidebar_copy: SIDEBAR_HTML,
    }
    loader = MagicMock()
    loader.load = MagicMock(side_effect=lambda file_ref: copies[file_ref])
    return loader


@pytest.fixture
def renderer(mock_settings, url_renderer, mock_copy_loader):
    """Home view renderer wired to the test collaborators."""
    return HomeViewRenderer(mock_settings, url_renderer, mock_copy_loader)


@pytest.fixture
def sample_entries():
    """Three entries in reverse-chronological order."""
    return [
        HomeEntry(
            Entry(
                title="Lenses & Prisms",
                posted_at=datetime(2014, 3, 3, 18, 30, tzinfo=UTC),
                lede="<p>Optics <em>compose</em>.</p>",
            ),
            "https://blog.example.com/entry/lenses-and-prisms",
            [
                Tag(name="haskell"),
                Tag(name="Projects", type=TagType.CATEGORY),
                Tag(name="Optics Tour", type=TagType.SERIES),
            ],
        ),
        HomeEntry(
            Entry(
                title="Streaming Parsers",
                posted_at=datetime(2014, 2, 14, 9, 0, tzinfo=UTC),
                lede="<p>Pipes all the way down.</p>",
            ),
            "https://blog.example.com/entry/streaming-parsers",
            [Tag(name="haskell")],
        ),
        HomeEntry(
            Entry(
                title="Hello World",
                posted_at=datetime(2013, 12, 28, 12, 0, tzinfo=UTC),
                lede="<p>First post.</p>",
            ),
            "https://blog.example.com/entry/hello-world",
            [],
        ),
    ]
