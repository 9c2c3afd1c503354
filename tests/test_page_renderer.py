"""Tests for trigex_site.services.page_renderer."""

from datetime import date
from pathlib import Path

import pytest

from trigex_site.schemas import Link, PageData, Project, Track
from trigex_site.services import (
    HOME_PAGE,
    PROJECTS,
    TRACKS,
    PageRenderer,
    RenderError,
    format_release_date,
)


def make_track(**overrides) -> Track:
    fields = dict(
        title="Test Track",
        flac_url="https://example.com/t.flac",
        mp3_url="https://example.com/t.mp3",
        youtube_url="https://youtube.com/watch?v=x",
        soundcloud_url="https://soundcloud.com/x/t",
        release_date=date(2024, 1, 2),
        cover_image="t.png",
    )
    fields.update(overrides)
    return Track(**fields)


class TestFormatReleaseDate:
    def test_month_name_and_unpadded_day(self) -> None:
        assert format_release_date(date(2025, 4, 8)) == "April 8, 2025"

    def test_two_digit_day(self) -> None:
        assert format_release_date(date(2023, 9, 26)) == "September 26, 2023"


class TestHome:
    def test_title_and_links(self, renderer: PageRenderer) -> None:
        html = renderer.render_home(HOME_PAGE)
        assert "<title>trigex.moe | Home</title>" in html
        assert html.count('rel="me"') == len(HOME_PAGE.links)

    def test_escapes_content(self, renderer: PageRenderer) -> None:
        data = PageData(
            title="t",
            name="<script>alert(1)</script>",
            bio="a & b",
            links=[Link(name="X", url="https://x.example")],
        )
        html = renderer.render_home(data)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
        assert "a &amp; b" in html

    def test_custom_site_name(self) -> None:
        html = PageRenderer(site_name="example.org").render_home(HOME_PAGE)
        assert "<title>example.org | Home</title>" in html
        assert '<a class="site-name" href="/">example.org</a>' in html


class TestMusic:
    def test_track_without_lossless_has_no_flac_link(self, renderer: PageRenderer) -> None:
        html = renderer.render_music([make_track(flac_url=None)])
        assert "download flac" not in html
        assert 'class="download mp3"' in html

    def test_absent_streams_emit_nothing(self, renderer: PageRenderer) -> None:
        html = renderer.render_music([make_track(youtube_url=None, soundcloud_url=None)])
        assert "youtube" not in html
        assert "soundcloud" not in html
        assert 'href=""' not in html

    def test_all_links_present(self, renderer: PageRenderer) -> None:
        html = renderer.render_music([make_track()])
        for cls in ("download flac", "download mp3", "stream youtube", "stream soundcloud"):
            assert f'class="{cls}"' in html

    def test_flac_links_match_table(self, renderer: PageRenderer) -> None:
        html = renderer.render_music(TRACKS)
        expected = sum(1 for track in TRACKS if track.flac_url)
        assert html.count('class="download flac"') == expected
        assert expected == len(TRACKS) - 1

    def test_cover_path(self, renderer: PageRenderer) -> None:
        html = renderer.render_music([make_track(cover_image="guru.png")])
        assert 'src="/static/images/covers/guru.png"' in html

    def test_order_preserved(self, renderer: PageRenderer) -> None:
        html = renderer.render_music(TRACKS)
        positions = [html.index(f"<h2>{t.title}</h2>") for t in TRACKS if "'" not in t.title]
        assert positions == sorted(positions)

    def test_empty_discography(self, renderer: PageRenderer) -> None:
        html = renderer.render_music([])
        assert "<title>trigex.moe | Music</title>" in html
        assert '<li class="track">' not in html


class TestProjects:
    def test_projects_rendered(self, renderer: PageRenderer) -> None:
        html = renderer.render_projects(PROJECTS)
        for project in PROJECTS:
            assert f'<a href="{project.repo_url}">{project.name}</a>' in html

    def test_single_project(self, renderer: PageRenderer) -> None:
        project = Project(name="p", description="d", repo_url="https://r.example", tech_stack="Python")
        html = renderer.render_projects([project])
        assert "Tech stack: Python" in html


class TestNotFoundPage:
    def test_marker_and_title(self, renderer: PageRenderer) -> None:
        html = renderer.render_not_found()
        assert "Page Not Found" in html
        assert "<title>trigex.moe | Page Not Found</title>" in html

    def test_no_nav_item_active(self, renderer: PageRenderer) -> None:
        assert 'class="active"' not in renderer.render_not_found()


class TestRenderErrors:
    def test_missing_template(self, tmp_path: Path) -> None:
        renderer = PageRenderer(templates_dir=tmp_path)
        with pytest.raises(RenderError) as excinfo:
            renderer.render_not_found()
        assert excinfo.value.template_name == "not_found.html"

    def test_broken_template(self, tmp_path: Path) -> None:
        (tmp_path / "projects.html").write_text("{% for p in projects %}")
        renderer = PageRenderer(templates_dir=tmp_path)
        with pytest.raises(RenderError):
            renderer.render_projects(PROJECTS)

    def test_filter_error_wrapped(self, tmp_path: Path) -> None:
        (tmp_path / "projects.html").write_text("{{ projects | release_date }}")
        renderer = PageRenderer(templates_dir=tmp_path)
        with pytest.raises(RenderError) as excinfo:
            renderer.render_projects(PROJECTS)
        assert excinfo.value.template_name == "projects.html"
        assert isinstance(excinfo.value.__cause__, TypeError)

    def test_render_error_is_runtime_error(self) -> None:
        assert issubclass(RenderError, RuntimeError)


class TestPurity:
    def test_same_input_same_output(self, renderer: PageRenderer) -> None:
        assert renderer.render_music(TRACKS) == renderer.render_music(TRACKS)
        assert renderer.render_home(HOME_PAGE) == PageRenderer().render_home(HOME_PAGE)
