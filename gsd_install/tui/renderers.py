from pathlib import Path

from rich.console import Console

from gsd_install import __version__
from gsd_install.config import InstallOptions, LocationChoice
from gsd_install.constants import CANONICAL_COMMAND_SEPARATOR, COMMAND_NAMESPACE
from gsd_install.models import InstallPlan
from gsd_install.platforms.models import PlatformRules
from gsd_install.tui.enums import UIStyle
from gsd_install.tui.sections import UISection
from gsd_install.tui.tables import ApplyTable, LocationTable, PlanTable, PlatformTable
from gsd_install.utils import compact_home_paths_in_text


class InstallConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_banner(self) -> None:
        self.console.print(
            f"[bold {UIStyle.CYAN.value}]GSD[/bold {UIStyle.CYAN.value}] "
            f"Get Shit Done [{UIStyle.DIM.value}]v{__version__}[/{UIStyle.DIM.value}]\n"
            "A meta-prompting, context engineering and spec-driven\n"
            "development system for AI coding agents.\n"
        )

    def render_location_prompt(
        self, platform: PlatformRules, choices: list[LocationChoice]
    ) -> None:
        self.console.print(
            UISection.wrap(
                f"where would you like to install? ({platform.display_name})",
                LocationTable.choices_table(choices),
                style=UIStyle.YELLOW.value,
            )
        )

    def render_plan(
        self, plan: InstallPlan, options: InstallOptions, mode: str, verbose: bool = False
    ) -> None:
        self.console.print(
            UISection.wrap(
                "install overview",
                PlanTable.summary_block(plan, options, mode=mode),
                style=UIStyle.BLUE.value,
            )
        )

        if plan.actions:
            self.console.print(
                UISection.wrap(
                    "templates",
                    PlanTable.unit_counts(plan),
                    style=UIStyle.CYAN.value,
                )
            )
            actions = plan.actions if verbose else plan.pending()
            if actions:
                self.console.print(
                    UISection.wrap(
                        "files",
                        PlanTable.actions_table(actions, options.home),
                        style=UIStyle.MAGENTA.value,
                    )
                )
        else:
            self.console.print(
                UISection.note("actions", "Nothing to install.", style=UIStyle.DIM.value)
            )

        if plan.errors:
            errors_text = "\n".join(
                [f"- {compact_home_paths_in_text(str(item), options.home)}" for item in plan.errors]
            )
            self.console.print(
                UISection.note("errors", errors_text, style=UIStyle.RED.value)
            )

        if plan.skipped:
            skipped_text = "\n".join(
                [f"- {compact_home_paths_in_text(item, options.home)}" for item in plan.skipped]
            )
            self.console.print(
                UISection.note("skipped", skipped_text, style=UIStyle.YELLOW.value)
            )

    def render_apply_result(
        self, applied: int, failed: int, failures: list[str], home: Path | None = None
    ) -> None:
        self.console.print(ApplyTable.stats_panel(applied=applied, failed=failed))
        if failures:
            failure_text = "\n".join(
                [f"- {compact_home_paths_in_text(item, home)}" for item in failures]
            )
            self.console.print(
                UISection.note("failures", failure_text, style=UIStyle.RED.value)
            )

    def render_done(self, platform: PlatformRules) -> None:
        separator = platform.command_separator or CANONICAL_COMMAND_SEPARATOR
        command = f"/{COMMAND_NAMESPACE}{separator}help"
        self.console.print(
            UISection.note(
                "done",
                f"Run [{UIStyle.CYAN.value}]{command}[/{UIStyle.CYAN.value}] to get started.",
                style=UIStyle.GREEN.value,
            )
        )

    def render_platforms(self, items: list[PlatformRules]) -> None:
        self.console.print(
            UISection.wrap(
                "platforms",
                PlatformTable.platforms_table(items),
                style=UIStyle.BLUE.value,
            )
        )
