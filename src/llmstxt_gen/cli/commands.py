"""CLI command implementations"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated, Optional

import typer

from llmstxt_gen.config import Settings, load_config
from llmstxt_gen.core.format import group_by_section, section_title
from llmstxt_gen.core.pipeline import collect_files, load_documents, run_generate, validate_input_dir
from llmstxt_gen.core.transform.transform import transform_content
from llmstxt_gen.errors import ConfigError, LlmsTxtError
from llmstxt_gen.logger import init_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ConfigError as e:
        _fail(str(e))


def _package_version() -> str:
    try:
        return version("llmstxt-gen")
    except PackageNotFoundError:
        return "dev"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"llmstxt-gen version {_package_version()}")
        raise typer.Exit()


def main_callback(
    show_version: Annotated[Optional[bool], typer.Option(
        "--version", callback=version_callback, is_eager=True, help="Show the version and exit")] = None,
    ):
    """Generate an LLMsTXT document from a directory of MD/MDX files."""


def generate_cmd(
    input_dir: Annotated[Optional[str], typer.Option("--input-dir", help="Directory containing MD/MDX files")] = None,
    output_file: Annotated[Optional[str], typer.Option("--output-file", help="Output file path")] = None,
    sitemap: Annotated[Optional[str], typer.Option("--sitemap", help="Sitemap XML selecting files to include")] = None,
    project_name: Annotated[Optional[str], typer.Option("--project-name", help="Project name for the H1 title")] = None,
    summary: Annotated[Optional[str], typer.Option("--summary", help="Override the blockquote summary")] = None,
    general_info: Annotated[Optional[str], typer.Option("--general-info", help="Override the first info paragraph")] = None,
    organization_info: Annotated[Optional[str], typer.Option("--organization-info", help="Override the second info paragraph")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
    ):
    """Run the full pipeline: discover -> parse -> transform -> render -> write."""
    settings = _settings(overrides={
        "input_dir": input_dir, "output_file": output_file, "sitemap": sitemap,
        "project_name": project_name, "summary": summary, "general_info": general_info,
        "organization_info": organization_info,
        "verbose": verbose or None,
    })
    init_logging(settings.verbose)

    try:
        result = run_generate(settings)
    except LlmsTxtError as e:
        _fail(str(e))

    if result.skipped:
        typer.echo(f"Skipped {len(result.skipped)} file(s)", err=True)
    typer.echo(f"Successfully generated {result.output_file}")


def list_cmd(
    input_dir: Annotated[Optional[str], typer.Option("--input-dir", help="Directory containing MD/MDX files")] = None,
    sitemap: Annotated[Optional[str], typer.Option("--sitemap", help="Sitemap XML selecting files to include")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
    ):
    """List discovered documents grouped by section, in output order."""
    settings = _settings(overrides={"input_dir": input_dir, "sitemap": sitemap, "verbose": verbose or None})
    init_logging(settings.verbose)
    root = Path(settings.input_dir)

    try:
        validate_input_dir(root)
        files = collect_files(settings)
    except LlmsTxtError as e:
        _fail(str(e))

    docs, _ = load_documents(files, root)
    if not docs:
        typer.echo("No documents found.")
        raise typer.Exit(1)

    grouped = group_by_section(docs)
    for section in sorted(grouped):
        typer.echo(f"{section_title(section)} ({section})")
        for doc in sorted(grouped[section], key=lambda d: d.title):
            typer.echo(f"  {doc.relative_path}: {doc.title}")


def transform_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="MD/MDX file to transform")],
    ):
    """Print the Markdown-normalised body of a single file."""
    settings = _settings()
    init_logging(settings.verbose)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)
    typer.echo(transform_content(text))
