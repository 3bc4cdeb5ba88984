"""Parse and serialize the restricted frontmatter subset.

Only scalar ``key: value`` pairs and single-level string lists are
understood. Comments, nested mappings and multi-line scalars are dropped
on a parse/serialize round-trip.
"""

from __future__ import annotations

import re

from gsd_install.constants import FRONTMATTER_MARKER
from gsd_install.documents.models import Frontmatter, ParsedDocument

_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)
_KEY_RE = re.compile(r"^(\w[\w-]*):(.*)$")
_LIST_ITEM_PREFIX = "- "


def parse_frontmatter(text: str) -> ParsedDocument:
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return ParsedDocument(frontmatter=None, body=text, raw=None)

    raw = match.group(1)
    body = match.group(2)
    return ParsedDocument(frontmatter=_parse_header(raw), body=body, raw=raw)


def _parse_header(raw: str) -> Frontmatter:
    frontmatter: Frontmatter = {}
    list_key: str | None = None

    for line in raw.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue

        if trimmed.startswith(_LIST_ITEM_PREFIX):
            if list_key is None:
                continue
            items = frontmatter.setdefault(list_key, [])
            if isinstance(items, list):
                items.append(trimmed[len(_LIST_ITEM_PREFIX) :].strip())
            continue

        kv_match = _KEY_RE.match(line)
        if kv_match is None:
            continue

        key = kv_match.group(1)
        value = kv_match.group(2).strip()
        if value:
            frontmatter[key] = value
            list_key = None
        else:
            frontmatter.pop(key, None)
            list_key = key

    return frontmatter


def serialize_frontmatter(frontmatter: Frontmatter) -> str:
    lines: list[str] = []
    for key, value in frontmatter.items():
        if isinstance(value, list):
            lines.append(f"{key}:")
            lines.extend(f"  - {item}" for item in value)
        else:
            lines.append(f"{key}: {value}")
    return "\n".join(lines)


def reconstruct_markdown(frontmatter: Frontmatter, body: str) -> str:
    header = serialize_frontmatter(frontmatter)
    return f"{FRONTMATTER_MARKER}\n{header}\n{FRONTMATTER_MARKER}\n{body}"


def split_document(text: str) -> tuple[str, str]:
    """Return ``(head, body)`` where ``head`` is the verbatim header block."""
    parsed = parse_frontmatter(text)
    if parsed.raw is None:
        return "", parsed.body
    return f"{FRONTMATTER_MARKER}\n{parsed.raw}\n{FRONTMATTER_MARKER}\n", parsed.body
