import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("CLAUDE_CONFIG_DIR", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    commands = root / "commands" / "gsd"
    commands.mkdir(parents=True)
    (commands / "plan.md").write_text(
        "---\n"
        "name: gsd:plan\n"
        "description: Create a phase plan\n"
        "argument-hint: <phase>\n"
        "allowed-tools:\n"
        "  - Read\n"
        "  - Write\n"
        "---\n"
        "\n"
        "@~/.claude/get-shit-done/workflows/plan.md\n"
        "@.planning/STATE.md\n"
        "\n"
        "Then run /gsd:execute-plan.\n",
        encoding="utf-8",
    )
    (commands / "help.md").write_text(
        "# Help\n\nStart with /gsd:new-project.\n", encoding="utf-8"
    )

    skill = root / "get-shit-done"
    (skill / "templates").mkdir(parents=True)
    (skill / "workflows").mkdir(parents=True)
    (skill / "workflows" / "plan.md").write_text(
        "See ~/.claude/get-shit-done/templates/phase.md\n", encoding="utf-8"
    )
    (skill / "templates" / "config.json").write_text(
        '{"mode": "interactive"}\n', encoding="utf-8"
    )

    agents = root / "platforms" / "cursor" / "agents"
    agents.mkdir(parents=True)
    (agents / "gsd-planner.md").write_text(
        "---\nname: gsd-planner\n---\nPlans phases.\n", encoding="utf-8"
    )
    (agents / "notes.txt").write_text("not an agent\n", encoding="utf-8")
    return root


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
