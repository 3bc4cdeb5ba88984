from gsd_install.tui.renderers import InstallConsoleUI

__all__ = ["InstallConsoleUI"]
