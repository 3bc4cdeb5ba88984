"""Document data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

FrontmatterValue = Union[str, list[str]]
Frontmatter = dict[str, FrontmatterValue]


@dataclass(frozen=True)
class ParsedDocument:
    frontmatter: Frontmatter | None
    body: str
    raw: str | None = None
