from typing import Final


MARKDOWN_SUFFIX: Final[str] = ".md"

FRONTMATTER_MARKER: Final[str] = "---"

SOURCE_PATH_PREFIX: Final[str] = "~/.claude/"

COMMAND_NAMESPACE: Final[str] = "gsd"
CANONICAL_COMMAND_SEPARATOR: Final[str] = ":"

FILE_REFERENCE_SIGIL: Final[str] = "@"
READ_FILES_HEADER: Final[str] = "**Read these files before proceeding:**"

CONFIG_DIR_ENV: Final[str] = "CLAUDE_CONFIG_DIR"

# (source relative to the template root, destination relative to the target dir)
INSTALL_UNITS: Final[tuple[tuple[str, str], ...]] = (
    ("commands/gsd", "commands/gsd"),
    ("get-shit-done", "get-shit-done"),
)
