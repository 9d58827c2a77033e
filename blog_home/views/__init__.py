"""View rendering module for HTML fragments.

Views are responsible for preparing context data from already-resolved
entries and collaborators and rendering Jinja2 templates.
"""

from blog_home.views.home_view import HomeViewRenderer

__all__ = ["HomeViewRenderer"]
