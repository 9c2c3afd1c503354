"""Jinja2 page rendering for the trigex.moe site."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from trigex_site.schemas import PageData, Track, Project
from trigex_site.services.site_content import SITE_NAME

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

# (href, label, key) in header order
NAV_ITEMS = (
    ("/", "Home", "home"),
    ("/music", "Music", "music"),
    ("/projects", "Projects", "projects"),
)


class RenderError(RuntimeError):
    """Raised when a page template cannot be loaded or rendered."""

    def __init__(self, template_name: str, message: str):
        super().__init__(f"{template_name}: {message}")
        self.template_name = template_name


def format_release_date(value: date) -> str:
    """Format a release date like ``April 18, 2025``."""
    return f"{value:%B} {value.day}, {value.year}"


class PageRenderer:
    """Renders every page of the site inside the shared layout."""

    def __init__(self, site_name: str = SITE_NAME, templates_dir: Optional[Union[str, Path]] = None):
        self.site_name = site_name
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["release_date"] = format_release_date
        self.env.globals["site_name"] = site_name
        self.env.globals["nav_items"] = NAV_ITEMS

    def render_home(self, data: PageData) -> str:
        return self._render("home.html", "Home", active="home", data=data)

    def render_music(self, tracks: Sequence[Track]) -> str:
        return self._render("music.html", "Music", active="music", tracks=tracks)

    def render_projects(self, projects: Sequence[Project]) -> str:
        return self._render("projects.html", "Projects", active="projects", projects=projects)

    def render_not_found(self) -> str:
        return self._render("not_found.html", "Page Not Found", active=None)

    def _render(self, template_name: str, page_title: str, **context) -> str:
        """
        Render a page template with the layout title set.

        Args:
            template_name: Template file under the templates directory
            page_title: Suffix appended to the site name in ``<title>``
            **context: Page-specific template variables

        Returns:
            The complete HTML document
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(title=f"{self.site_name} | {page_title}", **context)
        except (TemplateError, TypeError, AttributeError, ValueError) as e:
            logger.error(f"Error rendering template {template_name}: {e}")
            raise RenderError(template_name, str(e)) from e
