"""File discovery, section/path derivation, and title/summary extraction"""

import logging
import re
from itertools import takewhile
from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

from llmstxt_gen.core.models import ParsedDocument, SourceDocument
from llmstxt_gen.core.transform.codeblocks import PLACEHOLDER_PREFIX, protect_code_blocks


logger = logging.getLogger(__name__)

MD_EXTENSIONS = ('.md', '.mdx')
DEFAULT_SECTION = "general"
UNTITLED = "Untitled"

# A level-1 ATX heading line; setext underlines and "##" do not match
TITLE_RE = re.compile(r"^#\s+(.+)$")
QUOTE_MARKER_RE = re.compile(r"^>[ \t]?")


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _source_lines(text: str) -> list[str]:
    """Lines of text with fenced code collapsed to placeholders."""
    return protect_code_blocks(text).text.splitlines()


def _title_index(lines: list[str]) -> Optional[int]:
    """Index of the first title line, else None."""
    for i, line in enumerate(lines):
        if TITLE_RE.match(line):
            return i
    return None


def _ends_paragraph(line: str) -> bool:
    """Blank lines, headings, blockquotes, markup and code all end a summary paragraph."""
    stripped = line.strip()
    return not stripped or stripped.startswith(("#", ">", "<")) or PLACEHOLDER_PREFIX in line


def _blockquote_text(lines: list[str]) -> str:
    """First non-empty blockquote paragraph with its '>' markers removed."""
    quoted: list[str] = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith(">") and PLACEHOLDER_PREFIX not in line:
            content = QUOTE_MARKER_RE.sub("", stripped).strip()
            if content:
                quoted.append(content)
                continue
        if quoted:
            break
    return _collapse(" ".join(quoted))


def title_from_lines(lines: list[str]) -> str:
    """Text of the first '# ' line, or UNTITLED."""
    i = _title_index(lines)
    if i is None:
        return UNTITLED
    return TITLE_RE.match(lines[i]).group(1).strip() or UNTITLED


def summary_from_lines(lines: list[str]) -> str:
    """Paragraph right after the title, else first blockquote paragraph, else ''."""
    i = _title_index(lines)
    if i is not None:
        rest = lines[i + 1:]
        while rest and not rest[0].strip():
            rest = rest[1:]
        paragraph = list(takewhile(lambda line: not _ends_paragraph(line), rest))
        if paragraph:
            return _collapse(" ".join(paragraph))
    return _blockquote_text(lines)


def extract_title(text: str) -> str:
    return title_from_lines(_source_lines(text))


def extract_summary(text: str) -> str:
    return summary_from_lines(_source_lines(text))


def relative_path(path: Path, root: Path) -> str:
    """Root-relative POSIX path with a leading slash; bare filename if path is outside root."""
    try:
        rel = path.resolve().relative_to(root.resolve())
    except ValueError:
        logger.warning("%s is not under %s; using the file name as its path", path, root)
        rel = Path(path.name)
    return "/" + rel.as_posix()


def determine_section(rel_path: str) -> str:
    """First directory of the relative path, DEFAULT_SECTION for root-level files."""
    parts = PurePosixPath(rel_path.lstrip("/")).parts
    if len(parts) > 1:
        return parts[0]
    return DEFAULT_SECTION


def discover_files(path: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[Path]:
    """Return sorted source files under path, or [path] if a single matching file."""
    extensions = set(extensions)
    if path.is_file():
        return [path] if path.suffix in extensions else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in extensions)


def read_source(path: Path, root: Path) -> SourceDocument:
    """Read a file into a SourceDocument. Raises OSError / UnicodeDecodeError."""
    rel = relative_path(path, root)
    return SourceDocument(
        file_path=path,
        content=path.read_text(encoding='utf-8'),
        relative_path=rel,
        section=determine_section(rel),
    )


def parse_document(source: SourceDocument) -> ParsedDocument:
    """Derive title and summary from the raw, untransformed content."""
    lines = _source_lines(source.content)
    return ParsedDocument(
        **source.model_dump(),
        title=title_from_lines(lines),
        summary=summary_from_lines(lines),
    )


def parse_file(path: Path, root: Path) -> ParsedDocument:
    """Read and parse a single source file relative to root."""
    return parse_document(read_source(path, root))
