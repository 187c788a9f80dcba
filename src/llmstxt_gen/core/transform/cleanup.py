"""Final whitespace and leftover-directive cleanup"""

from llmstxt_gen.core.transform.directives import EXPORT_DEFAULT_RE, collapse_blank_lines


def cleanup(text: str) -> str:
    """Drop `export default` lines, collapse blank-line runs and trim. Idempotent."""
    text = EXPORT_DEFAULT_RE.sub("", text)
    return collapse_blank_lines(text).strip()
