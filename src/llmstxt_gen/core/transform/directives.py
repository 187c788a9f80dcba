"""Removal of MDX import/export pseudo-statements"""

import re


IMPORT_RE = re.compile(r"^import.*from.*$", re.MULTILINE)
EXPORT_DEFAULT_RE = re.compile(r"^export default.*$", re.MULTILINE)
BLANK_RUN_RE = re.compile(r"\n{3,}")


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of 3+ newlines to a single blank line."""
    return BLANK_RUN_RE.sub("\n\n", text)


def strip_directives(text: str) -> str:
    """Delete `import ... from ...` and `export default ...` lines.

    Line-oriented and textual: any line shaped like a directive is removed, so
    this must only run while code blocks are masked.
    """
    text = IMPORT_RE.sub("", text)
    text = EXPORT_DEFAULT_RE.sub("", text)
    return collapse_blank_lines(text)
