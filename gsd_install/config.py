"""Resolve command-line options into an immutable install configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from gsd_install.constants import CONFIG_DIR_ENV
from gsd_install.errors import ConflictingScopeError, IncompatibleOptionsError
from gsd_install.platforms.models import InstallScope, PlatformId, PlatformRules
from gsd_install.platforms.registry import get_platform
from gsd_install.utils import compact_cwd_path, compact_home_path, expand_tilde


@dataclass(frozen=True)
class InstallOptions:
    platform: PlatformRules
    scope: Optional[InstallScope]
    config_dir: Optional[Path]
    source_root: Path
    cwd: Path
    home: Path

    def with_scope(self, scope: InstallScope) -> "InstallOptions":
        # Config dir overrides only ever apply to global installs.
        return InstallOptions(
            platform=self.platform,
            scope=scope,
            config_dir=self.config_dir if scope == InstallScope.GLOBAL else None,
            source_root=self.source_root,
            cwd=self.cwd,
            home=self.home,
        )

    def _require_scope(self) -> InstallScope:
        if self.scope is None:
            raise ValueError("Install scope has not been chosen yet")
        return self.scope

    @property
    def target_dir(self) -> Path:
        return self.platform.target_dir(
            self.cwd, self.home, self._require_scope(), self.config_dir
        )

    @property
    def path_prefix(self) -> str:
        return self.platform.path_prefix(self._require_scope(), self.config_dir)

    @property
    def location_label(self) -> str:
        if self.scope == InstallScope.LOCAL:
            return compact_cwd_path(self.target_dir, self.cwd)
        return compact_home_path(self.target_dir, self.home)


@dataclass(frozen=True)
class LocationChoice:
    key: str
    scope: InstallScope
    label: str
    detail: str


def resolve_install_options(
    platform: str,
    use_global: bool,
    use_local: bool,
    config_dir: Optional[str],
    source_root: Optional[Path] = None,
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> InstallOptions:
    """Validate option combinations and build ``InstallOptions``.

    Nothing here touches the filesystem, so every configuration error
    surfaces before a directory is created or a template is read.
    """
    rules = get_platform(platform)

    if use_global and use_local:
        raise ConflictingScopeError()
    if config_dir and use_local:
        raise IncompatibleOptionsError("Cannot use --config-dir with --local")

    cwd = cwd or Path.cwd()
    home = home or Path.home()
    env = os.environ if environ is None else environ

    explicit_dir = expand_tilde(config_dir, home)
    if explicit_dir is None and rules.id == PlatformId.CLAUDE and not use_local:
        explicit_dir = expand_tilde(env.get(CONFIG_DIR_ENV), home)

    scope: Optional[InstallScope] = None
    if use_global or config_dir:
        scope = InstallScope.GLOBAL
    elif use_local:
        scope = InstallScope.LOCAL

    return InstallOptions(
        platform=rules,
        scope=scope,
        config_dir=explicit_dir,
        source_root=source_root or cwd,
        cwd=cwd,
        home=home,
    )


def location_choices(options: InstallOptions) -> list[LocationChoice]:
    global_options = options.with_scope(InstallScope.GLOBAL)
    local_options = options.with_scope(InstallScope.LOCAL)
    return [
        LocationChoice(
            key="1",
            scope=InstallScope.GLOBAL,
            label=global_options.location_label,
            detail="available in all projects",
        ),
        LocationChoice(
            key="2",
            scope=InstallScope.LOCAL,
            label=local_options.location_label,
            detail="this project only",
        ),
    ]
