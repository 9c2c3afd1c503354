"""Services package for the trigex.moe portfolio site."""

from .page_renderer import PageRenderer, RenderError, format_release_date
from .site_content import HOME_PAGE, TRACKS, PROJECTS, build_home_page

__all__ = [
    "PageRenderer",
    "RenderError",
    "format_release_date",
    "HOME_PAGE",
    "TRACKS",
    "PROJECTS",
    "build_home_page",
]
