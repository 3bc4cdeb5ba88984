from pathlib import Path
from typing import Iterator

from gsd_install.config import InstallOptions
from gsd_install.constants import INSTALL_UNITS
from gsd_install.errors import InstallerFileError, MissingSourceError
from gsd_install.models import Action, ActionKind, ActionStatus, InstallPlan
from gsd_install.platforms.models import AdditionalFile
from gsd_install.transform import is_markdown, transform_document
from gsd_install.utils import read_text_safe, same_bytes


def _walk_files(root: Path) -> Iterator[Path]:
    for path in sorted(root.iterdir()):
        if path.is_dir():
            yield from _walk_files(path)
        elif path.is_file():
            yield path


class InstallPlanner:
    def __init__(self, options: InstallOptions) -> None:
        self.options = options
        self.rules = options.platform
        self.target_dir = options.target_dir
        self.path_prefix = options.path_prefix

        self.actions: list[Action] = []
        self.errors: list[Exception] = []
        self.skipped: list[str] = []

    def build(self) -> InstallPlan:
        for source, dest in INSTALL_UNITS:
            self._plan_unit(source, dest)
        self._plan_additional_files()
        return InstallPlan(actions=self.actions, errors=self.errors, skipped=self.skipped)

    def _plan_unit(self, source: str, dest: str) -> None:
        source_root = self.options.source_root / source
        if not source_root.is_dir():
            self.errors.append(MissingSourceError(source_root))
            return

        target_root = self.target_dir / dest
        for path in _walk_files(source_root):
            target = target_root / path.relative_to(source_root)
            if is_markdown(path):
                self._plan_markdown(path, target, unit=dest)
            else:
                self.actions.append(self._plan_copy(path, target, unit=dest))

    def _plan_markdown(self, source: Path, target: Path, unit: str) -> None:
        try:
            content = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.errors.append(InstallerFileError(source, f"Cannot read template ({exc})"))
            return
        payload = transform_document(content, self.rules, self.path_prefix)
        self.actions.append(
            self._plan_write(
                target,
                payload,
                detail=f"transform for {self.rules.display_name}",
                source=source,
                unit=unit,
            )
        )

    def _plan_additional_files(self) -> None:
        for extra in self.rules.additional_files(self.options.source_root):
            self._plan_additional(extra)

    def _plan_additional(self, extra: AdditionalFile) -> None:
        target = self.target_dir / extra.dest
        unit = f"{self.rules.id.value} extras"
        if extra.content is not None:
            self.actions.append(
                self._plan_write(target, extra.content, detail="platform file", unit=unit)
            )
        elif extra.src is not None:
            self.actions.append(self._plan_copy(extra.src, target, unit=unit))
        else:
            self.skipped.append(f"Platform file has no content or source: {extra.dest}")

    @staticmethod
    def _plan_write(
        target: Path,
        payload: str,
        detail: str,
        source: Path | None = None,
        unit: str | None = None,
    ) -> Action:
        existing = read_text_safe(target)
        if existing == payload:
            status = ActionStatus.NOOP
            detail = "already installed"
        elif target.exists():
            status = ActionStatus.UPDATE
        else:
            status = ActionStatus.CREATE
        return Action(
            ActionKind.WRITE_TEXT,
            target,
            status,
            detail,
            source=source,
            payload=payload,
            unit=unit,
        )

    @staticmethod
    def _plan_copy(source: Path, target: Path, unit: str | None = None) -> Action:
        if same_bytes(target, source):
            status = ActionStatus.NOOP
            detail = "already installed"
        elif target.exists():
            status = ActionStatus.UPDATE
            detail = "copy verbatim"
        else:
            status = ActionStatus.CREATE
            detail = "copy verbatim"
        return Action(ActionKind.COPY_FILE, target, status, detail, source=source, unit=unit)
