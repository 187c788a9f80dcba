"""JSX expression rewriting"""

import re


EXPRESSION_RE = re.compile(r"\{([^{}]*)\}")


def rewrite_expressions(text: str) -> str:
    """Replace innermost `{...}` expressions with an inert `[Expression: ...]` annotation."""
    return EXPRESSION_RE.sub(lambda m: f"[Expression: {m.group(1)}]", text)
