"""LLMsTXT rendering: header, per-section listings, and full document bodies"""

import posixpath
from collections import defaultdict

from llmstxt_gen.core.models import FormatOptions, TransformedDocument


SECTION_TITLES: dict[str, str] = {
    "action": "Actions",
    "view":   "Views",
    "admin":  "Administration",
    "faq":    "FAQ",
    "tips":   "Tips and Tricks",
}


def default_format_options(project_name: str) -> FormatOptions:
    """Default header strings for a project."""
    return FormatOptions(
        project_name=project_name,
        summary=(
            f"{project_name} is a documentation site. This documentation provides "
            "comprehensive information about its features and how to use them."
        ),
        general_info=f"This documentation is organized into sections covering different aspects of {project_name}.",
        organization_info="The documentation is organized by topic.",
    )


def section_title(section: str) -> str:
    """Display label for a section id: lookup table, else '_'-split title case."""
    if section in SECTION_TITLES:
        return SECTION_TITLES[section]
    return " ".join(word[:1].upper() + word[1:] for word in section.split("_"))


def document_url(rel_path: str) -> str:
    """Relative path without its extension and with exactly one leading slash."""
    stem, _ = posixpath.splitext(rel_path)
    return "/" + stem.lstrip("/")


def group_by_section(docs: list[TransformedDocument]) -> dict[str, list[TransformedDocument]]:
    sections: dict[str, list[TransformedDocument]] = defaultdict(list)
    for doc in docs:
        sections[doc.section].append(doc)
    return dict(sections)


def _listing_line(doc: TransformedDocument) -> str:
    line = f"- [{doc.title}]({document_url(doc.relative_path)})"
    return f"{line}: {doc.summary}\n" if doc.summary else f"{line}\n"


def format_llms_txt(docs: list[TransformedDocument], options: FormatOptions) -> str:
    """Render the full LLMsTXT document.

    Sections are ordered by their raw identifier, documents within a section
    by title (code-point order, stable for equal titles).
    """
    parts = [
        f"# {options.project_name}\n\n",
        f"> {options.summary}\n\n",
        f"{options.general_info}\n\n",
        f"{options.organization_info}\n\n",
    ]

    grouped = group_by_section(docs)
    for section in sorted(grouped):
        entries = sorted(grouped[section], key=lambda d: d.title)
        parts.append(f"## {section_title(section)}\n\n")
        parts.extend(_listing_line(doc) for doc in entries)
        parts.append("\n")
        for doc in entries:
            parts.append(f"### {doc.title}\n\n{doc.content}\n\n---\n\n")

    return "".join(parts)
