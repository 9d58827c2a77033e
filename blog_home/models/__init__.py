"""Blog home models"""

from blog_home.models.entry import Entry, HomeEntry, Tag, TagType, slugify
from blog_home.models.page import NEXT_PAGE, PREV_PAGE, PageLinks

__all__ = [
    "Entry",
    "HomeEntry",
    "Tag",
    "TagType",
    "slugify",
    "NEXT_PAGE",
    "PREV_PAGE",
    "PageLinks",
]
