"""Sitemap-driven file discovery: sitemap URLs mapped onto local source files"""

import logging
import warnings
from pathlib import Path, PurePosixPath
from typing import Iterable
from urllib.parse import unquote, urlparse

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from llmstxt_gen.core.parse import MD_EXTENSIONS
from llmstxt_gen.errors import SitemapError


logger = logging.getLogger(__name__)

HTML_SUFFIXES = {'.html', '.htm'}


def parse_sitemap(path: Path) -> list[str]:
    """Return the non-empty <loc> of every <url> entry, in document order."""
    try:
        markup = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise SitemapError(f"Cannot read sitemap {path}: {e}") from e

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        soup = BeautifulSoup(markup, "html.parser")

    if soup.find("urlset") is None:
        raise SitemapError(f"Invalid sitemap {path}: no <urlset> element")

    urls = []
    for url in soup.find_all("url"):
        loc = url.find("loc")
        if loc is not None and (text := loc.get_text(strip=True)):
            urls.append(text)
    return urls


def _candidates(url_path: str, extensions: list[str]) -> list[str]:
    """Relative source paths a URL path may correspond to, most specific first."""
    if not url_path or url_path.endswith("/"):
        return [f"{url_path}index{ext}" for ext in extensions]
    suffix = PurePosixPath(url_path).suffix
    if suffix in extensions:
        return [url_path]
    if suffix in HTML_SUFFIXES:
        url_path = url_path[: -len(suffix)]
    return [f"{url_path}{ext}" for ext in extensions] + [f"{url_path}/index{ext}" for ext in extensions]


def map_url_to_local_path(url: str, input_dir: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> Path:
    """Map a sitemap URL to a source file under input_dir.

    The first existing candidate wins; when none exists the first candidate is
    returned so the caller can report it. Raises SitemapError for paths that
    escape input_dir.
    """
    url_path = unquote(urlparse(url).path).lstrip("/")
    root = input_dir.resolve()
    resolved = []
    for candidate in _candidates(url_path, list(extensions)):
        path = (root / candidate).resolve()
        if not path.is_relative_to(root):
            raise SitemapError(f"Mapped path {path} is outside the input directory {input_dir}")
        resolved.append(path)

    logger.debug("Mapped URL %s to candidates %s", url, [str(p) for p in resolved])
    return next((p for p in resolved if p.exists()), resolved[0])


def discover_from_sitemap(sitemap: Path, input_dir: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[Path]:
    """Source files named by the sitemap, in sitemap order; unusable entries are logged and skipped."""
    extensions = list(extensions)
    files: list[Path] = []
    for url in parse_sitemap(sitemap):
        try:
            path = map_url_to_local_path(url, input_dir, extensions)
        except SitemapError as e:
            logger.warning("Could not map URL %s to a local path: %s", url, e)
            continue

        if not path.exists():
            logger.warning("No source file for URL %s (expected %s), skipping", url, path)
        elif path.is_dir():
            logger.warning("Mapped path %s is a directory, skipping", path)
        elif path.suffix not in extensions:
            logger.warning("Mapped path %s is not a source file, skipping", path)
        elif path in files:
            logger.debug("Duplicate sitemap entry for %s, skipping", path)
        else:
            files.append(path)
    return files
