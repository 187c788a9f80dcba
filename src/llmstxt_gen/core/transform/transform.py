"""MDX to Markdown transformation pipeline"""

from llmstxt_gen.core.models import ParsedDocument, TransformedDocument
from llmstxt_gen.core.transform.cleanup import cleanup
from llmstxt_gen.core.transform.codeblocks import protect_code_blocks, restore_code_blocks
from llmstxt_gen.core.transform.components import rewrite_components
from llmstxt_gen.core.transform.directives import strip_directives
from llmstxt_gen.core.transform.expressions import rewrite_expressions


def transform_content(text: str) -> str:
    """Normalise an MDX body to plain Markdown. Total: any string yields a string."""
    masked = protect_code_blocks(text)
    body = strip_directives(masked.text)
    body = rewrite_components(body)
    body = rewrite_expressions(body)
    body = cleanup(body)
    return restore_code_blocks(body, masked.blocks)


def transform_document(doc: ParsedDocument) -> TransformedDocument:
    """Return a TransformedDocument; only the content changes."""
    return TransformedDocument(**{**doc.model_dump(), "content": transform_content(doc.content)})
