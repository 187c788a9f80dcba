"""Intermediate data models for the parse, transform and format pipeline"""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SourceDocument(BaseModel):
    """A discovered source file and its raw text."""
    model_config = ConfigDict(frozen=True)

    file_path:     Path
    content:       str
    relative_path: str      # root-relative, POSIX separators, leading "/"
    section:       str      # first path segment, "general" for root files


class ParsedDocument(SourceDocument):
    """Source document plus title and summary extracted from the raw text."""
    title:   str = "Untitled"
    summary: str = ""       # empty means the listing omits the summary


class TransformedDocument(ParsedDocument):
    """Parsed document whose content has been normalised to plain Markdown."""


class FormatOptions(BaseModel):
    """Header strings rendered at the top of the llms.txt output."""
    project_name:      str
    summary:           str
    general_info:      str
    organization_info: str


@dataclass(frozen=True)
class MaskedText:
    """Text with fenced code blocks swapped for placeholders; not persisted."""
    text:   str
    blocks: dict[str, str] = field(default_factory=dict)    # placeholder -> original, in insertion order


@dataclass
class GenerateResult:
    """Outcome of a full generate run."""
    output_file: Path
    documents:   int
    skipped:     list[Path] = field(default_factory=list)
