from pathlib import Path

from gsd_install.config import resolve_install_options
from gsd_install.errors import MissingSourceError
from gsd_install.executor import InstallExecutor
from gsd_install.models import Action, ActionKind, ActionStatus, InstallPlan
from gsd_install.planner import InstallPlanner


def _options(template_root: Path, tmp_path: Path, platform: str = "cursor"):
    return resolve_install_options(
        platform=platform,
        use_global=True,
        use_local=False,
        config_dir=None,
        source_root=template_root,
        cwd=tmp_path / "project",
        home=tmp_path,
        environ={},
    )


def test_plan_covers_units_and_extras(template_root: Path, tmp_path: Path) -> None:
    plan = InstallPlanner(_options(template_root, tmp_path)).build()

    assert plan.errors == []
    target = tmp_path / ".cursor"
    by_path = {action.path: action for action in plan.actions}
    assert set(by_path) == {
        target / "commands" / "gsd" / "help.md",
        target / "commands" / "gsd" / "plan.md",
        target / "get-shit-done" / "templates" / "config.json",
        target / "get-shit-done" / "workflows" / "plan.md",
        target / "agents" / "gsd-planner.md",
    }
    assert all(action.status == ActionStatus.CREATE for action in plan.actions)

    plan_md = by_path[target / "commands" / "gsd" / "plan.md"]
    assert plan_md.kind == ActionKind.WRITE_TEXT
    assert "name: gsd/plan" in plan_md.payload
    assert "allowed-tools" not in plan_md.payload
    assert "- ~/.cursor/get-shit-done/workflows/plan.md" in plan_md.payload
    assert "/gsd/execute-plan" in plan_md.payload

    config = by_path[target / "get-shit-done" / "templates" / "config.json"]
    assert config.kind == ActionKind.COPY_FILE
    assert config.source == template_root / "get-shit-done" / "templates" / "config.json"

    agent = by_path[target / "agents" / "gsd-planner.md"]
    assert agent.kind == ActionKind.COPY_FILE


def test_claude_plan_has_no_extras(template_root: Path, tmp_path: Path) -> None:
    plan = InstallPlanner(_options(template_root, tmp_path, platform="claude")).build()
    assert not any("agents" in action.path.parts for action in plan.actions)
    workflow = next(
        action for action in plan.actions if action.path.name == "plan.md"
        and "workflows" in action.path.parts
    )
    assert workflow.payload == "See ~/.claude/get-shit-done/templates/phase.md\n"


def test_apply_then_replan_is_noop(template_root: Path, tmp_path: Path) -> None:
    options = _options(template_root, tmp_path)
    plan = InstallPlanner(options).build()

    applied, failed, failures = InstallExecutor().execute(plan)
    assert (applied, failed, failures) == (5, 0, [])

    installed = tmp_path / ".cursor" / "get-shit-done" / "workflows" / "plan.md"
    assert installed.read_text(encoding="utf-8") == (
        "See ~/.cursor/get-shit-done/templates/phase.md\n"
    )

    replanned = InstallPlanner(options).build()
    assert all(action.status == ActionStatus.NOOP for action in replanned.actions)
    assert InstallExecutor().execute(replanned) == (0, 0, [])


def test_changed_target_is_update(template_root: Path, tmp_path: Path) -> None:
    options = _options(template_root, tmp_path)
    InstallExecutor().execute(InstallPlanner(options).build())

    stale = tmp_path / ".cursor" / "commands" / "gsd" / "help.md"
    stale.write_text("old", encoding="utf-8")

    plan = InstallPlanner(options).build()
    statuses = {action.path: action.status for action in plan.actions}
    assert statuses[stale] == ActionStatus.UPDATE
    assert [action.path for action in plan.pending()] == [stale]


def test_missing_unit_is_plan_error(tmp_path: Path) -> None:
    root = tmp_path / "templates"
    (root / "commands" / "gsd").mkdir(parents=True)
    (root / "commands" / "gsd" / "help.md").write_text("help", encoding="utf-8")

    plan = InstallPlanner(_options(root, tmp_path)).build()

    assert len(plan.errors) == 1
    assert isinstance(plan.errors[0], MissingSourceError)
    assert plan.errors[0].path == root / "get-shit-done"
    assert len(plan.actions) == 1
    assert not (tmp_path / ".cursor").exists()


def test_executor_reports_missing_payload(tmp_path: Path) -> None:
    plan = InstallPlan(
        actions=[
            Action(ActionKind.WRITE_TEXT, tmp_path / "a.md", ActionStatus.CREATE, "x"),
            Action(ActionKind.COPY_FILE, tmp_path / "b.json", ActionStatus.CREATE, "x"),
        ],
        errors=[],
        skipped=[],
    )
    applied, failed, failures = InstallExecutor().execute(plan)
    assert applied == 0
    assert failed == 2
    assert failures[0].startswith("Missing text payload")
    assert failures[1].startswith("Missing source")


def test_plan_summary(template_root: Path, tmp_path: Path) -> None:
    plan = InstallPlanner(_options(template_root, tmp_path)).build()
    summary = plan.summary()
    assert summary["create"] == 5
    assert summary["actions"] == 5
    assert summary["errors"] == 0
    assert plan.is_valid()
