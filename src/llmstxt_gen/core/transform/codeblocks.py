"""Fenced code block masking so rewrite passes never touch code samples"""

import re

from llmstxt_gen.core.models import MaskedText


CODE_BLOCK_RE = re.compile(r"```([^\n`]*)\n(.*?)```", re.DOTALL)

# NUL never occurs in text sources; the closing NUL keeps "_1" from matching inside "_10".
PLACEHOLDER_PREFIX = "\x00LLMSTXT_CODE_BLOCK_"
PLACEHOLDER_SUFFIX = "\x00"


def _placeholder(index: int) -> str:
    return f"{PLACEHOLDER_PREFIX}{index}{PLACEHOLDER_SUFFIX}"


def protect_code_blocks(text: str) -> MaskedText:
    """Replace each fenced block with a numbered placeholder, in order of appearance."""
    blocks: dict[str, str] = {}

    def _mask(match: re.Match) -> str:
        placeholder = _placeholder(len(blocks))
        blocks[placeholder] = match.group(0)
        return placeholder

    return MaskedText(text=CODE_BLOCK_RE.sub(_mask, text), blocks=blocks)


def restore_code_blocks(text: str, blocks: dict[str, str]) -> str:
    """Put original blocks back, first occurrence of each placeholder only."""
    for placeholder, original in blocks.items():
        text = text.replace(placeholder, original, 1)
    return text
