"""Blog home page view rendering"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("blog-home")
except PackageNotFoundError:
    __version__ = "dev"
