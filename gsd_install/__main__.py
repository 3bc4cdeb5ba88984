from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from gsd_install.config import (
    InstallOptions,
    location_choices,
    resolve_install_options,
)
from gsd_install.errors import InstallerError
from gsd_install.executor import InstallExecutor
from gsd_install.models import InstallPlan
from gsd_install.planner import InstallPlanner
from gsd_install.platforms.registry import (
    DEFAULT_PLATFORM,
    available_platforms,
    platform_ids,
)
from gsd_install.tui import InstallConsoleUI


def _install_options(func: Callable) -> Callable:
    decorators = [
        click.option(
            "-a",
            "--ai",
            "platform",
            type=click.Choice(platform_ids(), case_sensitive=False),
            default=DEFAULT_PLATFORM.value,
            show_default=True,
            help="Target AI platform.",
        ),
        click.option(
            "-g",
            "--global",
            "use_global",
            is_flag=True,
            help="Install globally (to the platform config directory).",
        ),
        click.option(
            "-l",
            "--local",
            "use_local",
            is_flag=True,
            help="Install locally (to ./.<platform> in the current directory).",
        ),
        click.option(
            "-c",
            "--config-dir",
            "config_dir",
            default=None,
            help="Custom config directory (takes priority over CLAUDE_CONFIG_DIR).",
        ),
        click.option(
            "-s",
            "--source",
            "source",
            type=click.Path(path_type=Path, file_okay=False),
            default=None,
            help="Template root containing commands/gsd and get-shit-done.",
        ),
        click.option("-v", "--verbose", is_flag=True, help="List unchanged files too."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _resolve_options(
    platform: str,
    use_global: bool,
    use_local: bool,
    config_dir: Optional[str],
    source: Optional[Path],
) -> InstallOptions:
    try:
        return resolve_install_options(
            platform=platform,
            use_global=use_global,
            use_local=use_local,
            config_dir=config_dir,
            source_root=source.expanduser().resolve() if source else None,
        )
    except InstallerError as exc:
        raise click.ClickException(str(exc))


def _prompt_scope(ui: InstallConsoleUI, options: InstallOptions) -> InstallOptions:
    if options.scope is not None:
        return options
    choices = location_choices(options)
    ui.render_location_prompt(options.platform, choices)
    answer = click.prompt(
        "Choice",
        type=click.Choice([choice.key for choice in choices]),
        default=choices[0].key,
        show_choices=False,
    )
    selected = next(choice for choice in choices if choice.key == answer)
    return options.with_scope(selected.scope)


def _build_plan(options: InstallOptions) -> InstallPlan:
    try:
        return InstallPlanner(options).build()
    except OSError as exc:
        raise click.ClickException(f"Fatal: {exc}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """Install gsd commands and skills for AI coding assistants."""


@cli.command(help="Install templates into the platform config directory.")
@_install_options
def install(
    platform: str,
    use_global: bool,
    use_local: bool,
    config_dir: Optional[str],
    source: Optional[Path],
    verbose: bool,
) -> None:
    ui = InstallConsoleUI(Console())
    options = _resolve_options(platform, use_global, use_local, config_dir, source)

    ui.render_banner()
    options = _prompt_scope(ui, options)
    plan_result = _build_plan(options)
    ui.render_plan(plan_result, options, mode="install", verbose=verbose)

    if not plan_result.is_valid():
        raise click.ClickException(
            "Install aborted due to template errors above."
        )

    applied, failed, failures = InstallExecutor().execute(plan_result)
    ui.render_apply_result(applied, failed, failures, home=options.home)

    if failed:
        raise click.exceptions.Exit(1)
    ui.render_done(options.platform)


@cli.command(help="Build and print a dry-run install plan.")
@_install_options
def plan(
    platform: str,
    use_global: bool,
    use_local: bool,
    config_dir: Optional[str],
    source: Optional[Path],
    verbose: bool,
) -> None:
    ui = InstallConsoleUI(Console())
    options = _resolve_options(platform, use_global, use_local, config_dir, source)

    options = _prompt_scope(ui, options)
    plan_result = _build_plan(options)
    ui.render_plan(plan_result, options, mode="plan", verbose=verbose)

    if not plan_result.is_valid():
        raise click.exceptions.Exit(1)


@cli.command(help="List supported platforms.")
def platforms() -> None:
    ui = InstallConsoleUI(Console())
    ui.render_platforms(available_platforms())


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    # Non-standalone click returns Exit codes instead of raising them.
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
