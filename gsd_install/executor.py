import shutil
from typing import Optional, Protocol

from gsd_install.models import Action, ActionKind, ActionStatus, InstallPlan


class ActionHandler(Protocol):
    def handle(self, action: Action) -> tuple[bool, Optional[str]]: ...


class WriteTextHandler:
    def handle(self, action: Action) -> tuple[bool, Optional[str]]:
        if action.status == ActionStatus.NOOP:
            return False, None
        if not isinstance(action.payload, str):
            return False, f"Missing text payload for write action: {action.path}"

        action.path.parent.mkdir(parents=True, exist_ok=True)
        action.path.write_text(action.payload, encoding="utf-8")
        return True, None


class CopyFileHandler:
    def handle(self, action: Action) -> tuple[bool, Optional[str]]:
        if action.status == ActionStatus.NOOP:
            return False, None
        if action.source is None:
            return False, f"Missing source for copy action: {action.path}"

        action.path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(action.source, action.path)
        return True, None


class InstallExecutor:
    def __init__(self) -> None:
        self.handlers: dict[ActionKind, ActionHandler] = {
            ActionKind.WRITE_TEXT: WriteTextHandler(),
            ActionKind.COPY_FILE: CopyFileHandler(),
        }

    def execute(self, plan: InstallPlan) -> tuple[int, int, list[str]]:
        applied = 0
        failed = 0
        failures: list[str] = []

        for action in plan.actions:
            try:
                handler = self.handlers.get(action.kind)
                if handler is None:
                    failed += 1
                    failures.append(f"Unknown action kind: {action.kind.value}")
                    continue

                changed, failure = handler.handle(action)
                if failure is not None:
                    failed += 1
                    failures.append(failure)
                    continue
                if changed:
                    applied += 1
            except OSError as exc:
                failed += 1
                failures.append(f"{action.kind.value} failed for {action.path}: {exc}")

        return applied, failed, failures
