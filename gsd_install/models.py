from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ActionKind(str, Enum):
    WRITE_TEXT = "write_text"
    COPY_FILE = "copy_file"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"


@dataclass
class Action:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    source: Optional[Path] = None
    payload: Optional[str] = None
    unit: Optional[str] = None


@dataclass
class InstallPlan:
    actions: list[Action]
    errors: list[Exception]
    skipped: list[str]

    def is_valid(self) -> bool:
        return not self.errors

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["errors"] = len(self.errors)
        counts["skipped"] = len(self.skipped)
        return counts

    def pending(self) -> list[Action]:
        return [action for action in self.actions if action.status != ActionStatus.NOOP]
