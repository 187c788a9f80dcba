"""Unit tests for core/sitemap.py"""

import pytest

from llmstxt_gen.core.sitemap import discover_from_sitemap, map_url_to_local_path, parse_sitemap
from llmstxt_gen.errors import SitemapError


SITEMAP_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>https://docs.example.com/guides/intro</loc></url>
  <url><loc>https://docs.example.com/</loc></url>
  <url><loc> </loc></url>
  <url><loc>https://docs.example.com/missing-page</loc></url>
  <url><loc>https://docs.example.com/api/</loc></url>
  <url><loc>https://docs.example.com/guides/intro.html</loc></url>
</urlset>
"""


@pytest.fixture(name="site")
def site_fixture(tmp_path):
    """Source tree plus a sitemap referencing it."""
    root = tmp_path / "pages"
    (root / "guides").mkdir(parents=True)
    (root / "api").mkdir()
    (root / "guides" / "intro.mdx").write_text("# Intro\n")
    (root / "index.md").write_text("# Home\n")
    (root / "api" / "index.mdx").write_text("# API\n")
    sitemap = tmp_path / "sitemap.xml"
    sitemap.write_text(SITEMAP_XML)
    return root, sitemap


def test_parse_sitemap_skips_empty_locs(site):
    """parse_sitemap returns every non-empty <loc> in document order."""
    _, sitemap = site
    assert parse_sitemap(sitemap) == [
        "https://docs.example.com/guides/intro",
        "https://docs.example.com/",
        "https://docs.example.com/missing-page",
        "https://docs.example.com/api/",
        "https://docs.example.com/guides/intro.html",
    ]


def test_parse_sitemap_missing_file(tmp_path):
    """An unreadable sitemap raises SitemapError."""
    with pytest.raises(SitemapError, match="Cannot read sitemap"):
        parse_sitemap(tmp_path / "nope.xml")


def test_parse_sitemap_not_a_sitemap(tmp_path):
    """A document without <urlset> is rejected."""
    f = tmp_path / "sitemap.xml"
    f.write_text("<html><body>hello</body></html>")
    with pytest.raises(SitemapError, match="no <urlset>"):
        parse_sitemap(f)


@pytest.mark.parametrize("url,expected", [
    ("https://docs.example.com/guides/intro", "guides/intro.mdx"),
    ("https://docs.example.com/guides/intro.html", "guides/intro.mdx"),
    ("https://docs.example.com/", "index.md"),
    ("https://docs.example.com", "index.md"),
    ("https://docs.example.com/api/", "api/index.mdx"),
    ("https://docs.example.com/api", "api/index.mdx"),
    ("https://docs.example.com/guides/intro.mdx", "guides/intro.mdx"),
])
def test_map_url_to_local_path(site, url, expected):
    """URLs resolve to the first existing candidate source file."""
    root, _ = site
    assert map_url_to_local_path(url, root) == (root / expected).resolve()


def test_map_url_without_match_returns_first_candidate(site):
    """When nothing exists the first candidate is returned for reporting."""
    root, _ = site
    assert map_url_to_local_path("https://x/missing", root) == (root / "missing.md").resolve()


def test_map_url_outside_input_dir(site):
    """Paths escaping the input directory are refused."""
    root, _ = site
    with pytest.raises(SitemapError, match="outside the input directory"):
        map_url_to_local_path("https://x/../../etc/passwd", root)


def test_discover_from_sitemap(site, caplog):
    """Mapped files come back in sitemap order; missing and duplicate entries are skipped."""
    root, sitemap = site
    with caplog.at_level("WARNING", logger="llmstxt_gen"):
        files = discover_from_sitemap(sitemap, root)
    assert files == [
        (root / "guides" / "intro.mdx").resolve(),
        (root / "index.md").resolve(),
        (root / "api" / "index.mdx").resolve(),
    ]
    assert "missing-page" in caplog.text
