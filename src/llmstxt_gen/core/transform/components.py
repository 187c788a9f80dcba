"""MDX component rewriting driven by a declarative rule catalog.

Each `ComponentRule` names a tag and a `RewriteKind`; `rewrite_components`
dispatches every rule in catalog order, then runs the generic unwrap pass
over `UNWRAP_TAGS` and finally drops any remaining self-closing component.
Rules that fail to match (e.g. unquoted attribute values) leave the tag for
the later passes, which may delete it.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


# A quoted literal, optionally wrapped in braces: "x", 'x', {"x"}, {'x'}
ATTR_VALUE = r"""\{?["']([^"']*)["']\}?"""

# Tag-name boundary so <Card> never matches <CardHeader>
_NAME_END = r"(?=[\s/>])"

SELF_CLOSING_COMPONENT_RE = re.compile(r"<[A-Z][\w.]*(?:\s[^<>]*?)?/>")


class RewriteKind(str, Enum):
    """Restrict component rules to a predefined set of rewrites"""
    callout = "callout"
    image = "image"
    link = "link"
    unwrap = "unwrap"
    heading_from_attr = "heading_from_attr"
    label_from_attr = "label_from_attr"
    self_closing_drop = "self_closing_drop"


@dataclass(frozen=True)
class ComponentRule:
    tag:   str
    kind:  RewriteKind
    label: Optional[str] = None     # callout/link prefix, e.g. "Information", "Video"
    attr:  Optional[str] = None     # attribute read by *_from_attr kinds


COMPONENT_RULES: tuple[ComponentRule, ...] = (
    ComponentRule("Information", RewriteKind.callout, label="Information"),
    ComponentRule("DocImage", RewriteKind.image, label="Image"),
    ComponentRule("iframe", RewriteKind.link, label="Video"),
    ComponentRule("Flexbox", RewriteKind.unwrap),
    ComponentRule("Box", RewriteKind.unwrap),
    ComponentRule("Card", RewriteKind.unwrap),
    ComponentRule("Grid", RewriteKind.unwrap),
    ComponentRule("Heading", RewriteKind.heading_from_attr, attr="text"),
    ComponentRule("Button", RewriteKind.label_from_attr, attr="title"),
)

# Container-like tags collapsed by the generic open/close pass
UNWRAP_TAGS: tuple[str, ...] = (
    "Information", "DocImage", "Card", "Grid", "Box", "Flexbox", "Button", "Heading",
)


def attribute(attrs: str, name: str) -> Optional[str]:
    """Return the literal value of attribute `name` from a raw attribute string."""
    m = re.search(rf"(?:^|\s){re.escape(name)}={ATTR_VALUE}", attrs)
    return m.group(1) if m else None


def _closing_tag(tag: str) -> re.Pattern:
    return re.compile(rf"</{re.escape(tag)}\s*>")


def _rewrite_callout(text: str, rule: ComponentRule) -> str:
    tag = re.escape(rule.tag)
    pattern = re.compile(rf"<{tag}>([^<]*)</{tag}>")
    label = rule.label or rule.tag
    return pattern.sub(lambda m: f"> **{label}:** {m.group(1)}", text)


def _rewrite_image(text: str, rule: ComponentRule) -> str:
    pattern = re.compile(rf"<{re.escape(rule.tag)}{_NAME_END}([^<>]*?)/>")
    label = rule.label or rule.tag

    def _replace(m: re.Match) -> str:
        alt, src = attribute(m.group(1), "alt"), attribute(m.group(1), "src")
        if alt is None or src is None:
            return m.group(0)
        return f"![{label}: {alt}]({src})"

    return pattern.sub(_replace, text)


def _rewrite_link(text: str, rule: ComponentRule) -> str:
    tag = re.escape(rule.tag)
    pattern = re.compile(rf"<{tag}{_NAME_END}([^>]*)>\s*</{tag}>")
    label = rule.label or rule.tag

    def _replace(m: re.Match) -> str:
        src = attribute(m.group(1), "src")
        if src is None:
            return m.group(0)
        return f"> **{label}:** [{src}]({src})"

    return pattern.sub(_replace, text)


def _rewrite_unwrap(text: str, rule: ComponentRule) -> str:
    opening = re.compile(rf"<{re.escape(rule.tag)}(?:\s[^>]*)?>")
    return _closing_tag(rule.tag).sub("", opening.sub("", text))


def _attr_opening(rule: ComponentRule) -> re.Pattern:
    return re.compile(rf"<{re.escape(rule.tag)}{_NAME_END}[^>]*?\s{re.escape(rule.attr)}={ATTR_VALUE}[^>]*>")


def _rewrite_heading(text: str, rule: ComponentRule) -> str:
    text = _attr_opening(rule).sub(lambda m: f"### {m.group(1)}\n", text)
    return _closing_tag(rule.tag).sub("", text)


def _rewrite_label(text: str, rule: ComponentRule) -> str:
    text = _attr_opening(rule).sub(lambda m: f"[{m.group(1)}]", text)
    return _closing_tag(rule.tag).sub("", text)


def _drop_self_closing(text: str, rule: Optional[ComponentRule] = None) -> str:
    return SELF_CLOSING_COMPONENT_RE.sub("", text)


REWRITERS: dict[RewriteKind, Callable[[str, ComponentRule], str]] = {
    RewriteKind.callout:           _rewrite_callout,
    RewriteKind.image:             _rewrite_image,
    RewriteKind.link:              _rewrite_link,
    RewriteKind.unwrap:            _rewrite_unwrap,
    RewriteKind.heading_from_attr: _rewrite_heading,
    RewriteKind.label_from_attr:   _rewrite_label,
    RewriteKind.self_closing_drop: _drop_self_closing,
}


def apply_rule(text: str, rule: ComponentRule) -> str:
    """Dispatch a single catalog rule by its kind."""
    return REWRITERS[rule.kind](text, rule)


def unwrap_remaining(text: str, tags: tuple[str, ...] = UNWRAP_TAGS) -> str:
    """Collapse any leftover open/close pair to its inner content, one level per tag."""
    for tag in tags:
        t = re.escape(tag)
        pattern = re.compile(rf"<{t}{_NAME_END}[^>]*>(.*?)</{t}\s*>", re.DOTALL)
        text = pattern.sub(r"\1", text)
    return text


def rewrite_components(text: str, rules: tuple[ComponentRule, ...] = COMPONENT_RULES) -> str:
    """Rewrite known MDX components to Markdown and remove the rest."""
    for rule in rules:
        text = apply_rule(text, rule)
    text = unwrap_remaining(text)
    return apply_rule(text, ComponentRule("*", RewriteKind.self_closing_drop))
