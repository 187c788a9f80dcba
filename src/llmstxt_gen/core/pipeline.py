"""Pipeline step functions: discover, load, transform, render and write"""

import logging
from pathlib import Path

from llmstxt_gen.config import Settings
from llmstxt_gen.core.format import format_llms_txt
from llmstxt_gen.core.models import GenerateResult, ParsedDocument, TransformedDocument
from llmstxt_gen.core.parse import discover_files, parse_file
from llmstxt_gen.core.sitemap import discover_from_sitemap
from llmstxt_gen.core.transform.transform import transform_document
from llmstxt_gen.errors import InputError, OutputError


logger = logging.getLogger(__name__)


def validate_input_dir(input_dir: Path) -> None:
    if not input_dir.exists():
        raise InputError(f"Input directory does not exist: {input_dir}")
    if not input_dir.is_dir():
        raise InputError(f"Input path is not a directory: {input_dir}")


def prepare_output(output_file: Path) -> None:
    """Create the output file's parent directory before any work is done."""
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Cannot create output directory {output_file.parent}: {e}") from e


def collect_files(settings: Settings) -> list[Path]:
    """Sitemap order when a sitemap is configured, else a sorted directory walk."""
    input_dir = Path(settings.input_dir)
    if settings.sitemap:
        return discover_from_sitemap(Path(settings.sitemap), input_dir, settings.extensions)
    return discover_files(input_dir, settings.extensions)


def load_documents(files: list[Path], input_dir: Path) -> tuple[list[ParsedDocument], list[Path]]:
    """Parse files in order. Returns (parsed, skipped); unreadable files are logged and skipped."""
    parsed, skipped = [], []
    for path in files:
        logger.info("Processing file: %s", path)
        try:
            parsed.append(parse_file(path, input_dir))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping %s: %s", path, e)
            skipped.append(path)
    return parsed, skipped


def transform_documents(parsed: list[ParsedDocument]) -> tuple[list[TransformedDocument], list[Path]]:
    """Transform documents in order. Returns (transformed, skipped); failures are logged and skipped."""
    docs, skipped = [], []
    for doc in parsed:
        try:
            docs.append(transform_document(doc))
        except Exception as e:
            logger.warning("Skipping %s: %s", doc.file_path, e)
            skipped.append(doc.file_path)
    return docs, skipped


def write_output(text: str, output_file: Path) -> Path:
    """Write the rendered document as UTF-8, creating parent directories."""
    prepare_output(output_file)
    try:
        output_file.write_text(text, encoding='utf-8')
    except OSError as e:
        raise OutputError(f"Cannot write output file {output_file}: {e}") from e
    return output_file


def run_generate(settings: Settings) -> GenerateResult:
    """Run the full pipeline for settings and write the llms.txt file.

    Raises InputError, SitemapError or OutputError for batch-level failures;
    per-file failures only show up in GenerateResult.skipped.
    """
    input_dir = Path(settings.input_dir)
    output_file = Path(settings.output_file)
    validate_input_dir(input_dir)
    prepare_output(output_file)
    logger.info("Starting conversion from %s to %s", input_dir, output_file)

    files = collect_files(settings)
    logger.info("Found %d source files to process", len(files))

    parsed, unreadable = load_documents(files, input_dir)
    docs, failed = transform_documents(parsed)
    skipped = unreadable + failed
    write_output(format_llms_txt(docs, settings.format_options()), output_file)

    logger.info("Rendered %d document(s), skipped %d", len(docs), len(skipped))
    return GenerateResult(output_file=output_file, documents=len(docs), skipped=skipped)
