"""Apply a platform rule set to one markdown document."""

from __future__ import annotations

from pathlib import Path

from gsd_install.constants import MARKDOWN_SUFFIX, SOURCE_PATH_PREFIX
from gsd_install.platforms.models import PlatformRules


def is_markdown(path: Path) -> bool:
    return path.suffix == MARKDOWN_SUFFIX


def transform_document(content: str, rules: PlatformRules, path_prefix: str) -> str:
    # Prefix substitution runs first so later stages see final paths.
    result = content.replace(SOURCE_PATH_PREFIX, path_prefix)
    result = rules.transform_frontmatter(result)
    result = rules.transform_file_references(result)
    result = rules.transform_command_references(result)
    return result
