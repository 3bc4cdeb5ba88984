from pathlib import Path

import pytest

from gsd_install.config import location_choices, resolve_install_options
from gsd_install.errors import (
    ConflictingScopeError,
    IncompatibleOptionsError,
    UnknownPlatformError,
)
from gsd_install.platforms.models import InstallScope
from gsd_install.platforms.registry import CURSOR

CWD = Path("/work/project")
HOME = Path("/home/me")


def _resolve(**kwargs):
    params = {
        "platform": "claude",
        "use_global": False,
        "use_local": False,
        "config_dir": None,
        "cwd": CWD,
        "home": HOME,
        "environ": {},
    }
    params.update(kwargs)
    return resolve_install_options(**params)


def test_unknown_platform_rejected() -> None:
    with pytest.raises(UnknownPlatformError):
        _resolve(platform="vim", use_global=True)


def test_conflicting_scopes_rejected() -> None:
    with pytest.raises(ConflictingScopeError):
        _resolve(use_global=True, use_local=True)


def test_config_dir_with_local_rejected() -> None:
    with pytest.raises(IncompatibleOptionsError):
        _resolve(use_local=True, config_dir="/tmp/claude")


def test_global_install_targets_home() -> None:
    options = _resolve(platform="cursor", use_global=True)
    assert options.platform is CURSOR
    assert options.scope == InstallScope.GLOBAL
    assert options.target_dir == HOME / ".cursor"
    assert options.path_prefix == "~/.cursor/"
    assert options.location_label == "~/.cursor"
    assert options.source_root == CWD


def test_local_install_targets_cwd() -> None:
    options = _resolve(use_local=True)
    assert options.target_dir == CWD / ".claude"
    assert options.path_prefix == "./.claude/"
    assert options.location_label == "./.claude"


def test_explicit_config_dir_implies_global_and_expands_tilde() -> None:
    options = _resolve(config_dir="~/.claude-bc")
    assert options.scope == InstallScope.GLOBAL
    assert options.target_dir == HOME / ".claude-bc"
    assert options.path_prefix == f"{HOME}/.claude-bc/"


def test_env_config_dir_applies_to_claude_global_only() -> None:
    env = {"CLAUDE_CONFIG_DIR": "/srv/claude"}
    assert _resolve(use_global=True, environ=env).target_dir == Path("/srv/claude")
    assert _resolve(use_local=True, environ=env).target_dir == CWD / ".claude"
    assert (
        _resolve(platform="cursor", use_global=True, environ=env).target_dir
        == HOME / ".cursor"
    )


def test_explicit_config_dir_beats_env() -> None:
    options = _resolve(config_dir="/opt/a", environ={"CLAUDE_CONFIG_DIR": "/opt/b"})
    assert options.target_dir == Path("/opt/a")


def test_missing_scope_requires_choice() -> None:
    options = _resolve()
    assert options.scope is None
    with pytest.raises(ValueError):
        _ = options.target_dir


def test_location_choices() -> None:
    options = _resolve(platform="cursor")
    choices = location_choices(options)
    assert [(c.key, c.scope, c.label) for c in choices] == [
        ("1", InstallScope.GLOBAL, "~/.cursor"),
        ("2", InstallScope.LOCAL, "./.cursor"),
    ]


def test_with_scope_local_drops_env_config_dir() -> None:
    options = _resolve(environ={"CLAUDE_CONFIG_DIR": "/srv/claude"})
    assert options.with_scope(InstallScope.GLOBAL).target_dir == Path("/srv/claude")
    assert options.with_scope(InstallScope.LOCAL).target_dir == CWD / ".claude"
