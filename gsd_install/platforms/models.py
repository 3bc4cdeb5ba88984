"""Platform rule set models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from gsd_install.constants import MARKDOWN_SUFFIX
from gsd_install.documents.frontmatter import (
    parse_frontmatter,
    reconstruct_markdown,
    split_document,
)
from gsd_install.documents.models import Frontmatter, FrontmatterValue
from gsd_install.documents.references import (
    rewrite_command_name,
    rewrite_command_references,
    rewrite_file_references,
)


class PlatformId(str, Enum):
    CLAUDE = "claude"
    CURSOR = "cursor"


class InstallScope(str, Enum):
    GLOBAL = "global"
    LOCAL = "local"


class FileReferenceStyle(str, Enum):
    NATIVE = "native"
    READ_INSTRUCTIONS = "read_instructions"


def _as_text(value: FrontmatterValue | None) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(value)
    return value


@dataclass(frozen=True)
class FieldMerge:
    """Fold ``source`` into ``target`` as a ``<label>: <value>`` suffix."""

    source: str
    target: str
    label: str

    def apply(self, frontmatter: Frontmatter) -> None:
        if self.source not in frontmatter:
            return
        value = _as_text(frontmatter.pop(self.source))
        if not value:
            return
        existing = _as_text(frontmatter.get(self.target))
        suffix = f"{self.label}: {value}"
        frontmatter[self.target] = f"{existing} {suffix}" if existing else suffix


@dataclass(frozen=True)
class AdditionalFile:
    dest: str
    src: Optional[Path] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class PlatformRules:
    id: PlatformId
    display_name: str
    dir_name: str
    command_separator: Optional[str] = None
    dropped_fields: tuple[str, ...] = ()
    field_merges: tuple[FieldMerge, ...] = ()
    renamed_command_fields: tuple[str, ...] = ()
    file_references: FileReferenceStyle = FileReferenceStyle.NATIVE
    # (source dir relative to the template root, destination dir)
    additional_dirs: tuple[tuple[str, str], ...] = ()

    def target_dir(
        self,
        cwd: Path,
        home: Path,
        scope: InstallScope,
        config_dir: Optional[Path] = None,
    ) -> Path:
        if config_dir is not None:
            return config_dir
        if scope == InstallScope.GLOBAL:
            return home / self.dir_name
        return cwd / self.dir_name

    def path_prefix(
        self, scope: InstallScope, config_dir: Optional[Path] = None
    ) -> str:
        if config_dir is not None:
            return f"{str(config_dir).rstrip('/')}/"
        if scope == InstallScope.GLOBAL:
            return f"~/{self.dir_name}/"
        return f"./{self.dir_name}/"

    @property
    def rewrites_frontmatter(self) -> bool:
        return bool(
            self.dropped_fields
            or self.field_merges
            or (self.command_separator and self.renamed_command_fields)
        )

    def transform_frontmatter(self, content: str) -> str:
        if not self.rewrites_frontmatter:
            return content

        parsed = parse_frontmatter(content)
        if parsed.frontmatter is None:
            return content

        frontmatter = dict(parsed.frontmatter)
        for name in self.dropped_fields:
            frontmatter.pop(name, None)
        for merge in self.field_merges:
            merge.apply(frontmatter)
        if self.command_separator:
            for name in self.renamed_command_fields:
                value = frontmatter.get(name)
                if isinstance(value, str):
                    frontmatter[name] = rewrite_command_name(
                        value, self.command_separator
                    )

        return reconstruct_markdown(frontmatter, parsed.body)

    def transform_file_references(self, content: str) -> str:
        if self.file_references == FileReferenceStyle.NATIVE:
            return content
        head, body = split_document(content)
        return head + rewrite_file_references(body)

    def transform_command_references(self, content: str) -> str:
        if not self.command_separator:
            return content
        head, body = split_document(content)
        return head + rewrite_command_references(body, self.command_separator)

    def additional_files(self, source_root: Path) -> list[AdditionalFile]:
        files: list[AdditionalFile] = []
        for source, dest in self.additional_dirs:
            source_dir = source_root / source
            if not source_dir.is_dir():
                continue
            for path in sorted(source_dir.iterdir()):
                if path.is_file() and path.suffix == MARKDOWN_SUFFIX:
                    files.append(AdditionalFile(dest=f"{dest}/{path.name}", src=path))
        return files
