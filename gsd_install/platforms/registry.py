"""Built-in platform rule sets."""

from __future__ import annotations

from gsd_install.errors import UnknownPlatformError
from gsd_install.platforms.models import (
    FieldMerge,
    FileReferenceStyle,
    PlatformId,
    PlatformRules,
)

# Canonical source format: everything passes through unchanged.
CLAUDE_CODE = PlatformRules(
    id=PlatformId.CLAUDE,
    display_name="Claude Code",
    dir_name=".claude",
)

# Cursor does not expand @file lines in commands and has no tool allowlist.
CURSOR = PlatformRules(
    id=PlatformId.CURSOR,
    display_name="Cursor",
    dir_name=".cursor",
    command_separator="/",
    dropped_fields=("allowed-tools",),
    field_merges=(
        FieldMerge(source="argument-hint", target="description", label="Arguments"),
    ),
    renamed_command_fields=("name",),
    file_references=FileReferenceStyle.READ_INSTRUCTIONS,
    additional_dirs=(("platforms/cursor/agents", "agents"),),
)

PLATFORMS: dict[PlatformId, PlatformRules] = {
    CLAUDE_CODE.id: CLAUDE_CODE,
    CURSOR.id: CURSOR,
}

DEFAULT_PLATFORM = PlatformId.CLAUDE


def available_platforms() -> list[PlatformRules]:
    return list(PLATFORMS.values())


def platform_ids() -> list[str]:
    return [platform_id.value for platform_id in PLATFORMS]


def get_platform(identifier: str | PlatformId) -> PlatformRules:
    if isinstance(identifier, PlatformId):
        return PLATFORMS[identifier]
    try:
        platform_id = PlatformId(identifier.strip().lower())
    except ValueError:
        raise UnknownPlatformError(identifier, platform_ids()) from None
    return PLATFORMS[platform_id]
