from collections import Counter
from pathlib import Path

from rich.panel import Panel
from rich.table import Column, Table

from gsd_install.config import InstallOptions, LocationChoice
from gsd_install.models import Action, ActionStatus, InstallPlan
from gsd_install.platforms.models import PlatformRules
from gsd_install.tui.enums import ACTION_STATUS_STYLE, UIStyle
from gsd_install.utils import compact_home_path


class PlanTable:
    @staticmethod
    def summary_block(plan: InstallPlan, options: InstallOptions, mode: str):
        counts = plan.summary()
        chips = [
            f"{status.value}={counts[status.value]}"
            for status in sorted(ActionStatus, key=lambda item: item.value)
            if counts[status.value] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Platform", options.platform.display_name)
        table.add_row("Target", options.location_label)
        table.add_row("Actions", str(counts["actions"]))
        table.add_row("Errors", str(counts["errors"]))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def unit_counts(plan: InstallPlan) -> Table:
        table = Table(
            Column(header="Unit", overflow="ellipsis"),
            Column(header="Files", width=8, justify="right"),
            Column(header="Pending", width=8, justify="right"),
            expand=True,
            header_style="bold",
        )
        totals: Counter = Counter()
        pending: Counter = Counter()
        for action in plan.actions:
            totals[action.unit or ""] += 1
        for action in plan.pending():
            pending[action.unit or ""] += 1
        for unit, count in totals.items():
            table.add_row(unit, str(count), str(pending[unit]))
        return table

    @staticmethod
    def actions_table(actions: list[Action], home: Path) -> Table:
        table = Table(
            Column(header="Type", width=11),
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis", max_width=58),
            Column(header="Reason", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            status_style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            status_text = f"[{status_style}]{action.status.value}[/{status_style}]"
            table.add_row(
                action.kind.value,
                status_text,
                compact_home_path(action.path, home),
                action.detail,
            )
        return table


class ApplyTable:
    @staticmethod
    def stats_panel(applied: int, failed: int) -> Panel:
        stats: dict[str, str] = {
            "applied": str(applied),
            "failed": str(failed),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="install",
            border_style=UIStyle.GREEN.value if failed == 0 else UIStyle.RED.value,
        )


class PlatformTable:
    @staticmethod
    def platforms_table(items: list[PlatformRules]) -> Table:
        table = Table(
            Column(header="Id", width=10),
            Column(header="Name", width=14),
            Column(header="Directory", width=12),
            Column(header="Separator", width=10),
            Column(header="File refs", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for item in items:
            table.add_row(
                item.id.value,
                item.display_name,
                item.dir_name,
                item.command_separator or "(unchanged)",
                item.file_references.value,
            )
        return table


class LocationTable:
    @staticmethod
    def choices_table(choices: list[LocationChoice]) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style=UIStyle.CYAN.value)
        table.add_column()
        for choice in choices:
            table.add_row(
                choice.key,
                f"{choice.scope.value.capitalize()} "
                f"[{UIStyle.DIM.value}]({choice.label})[/{UIStyle.DIM.value}] "
                f"- {choice.detail}",
            )
        return table
