"""Rewrite ``@file`` inclusion lines and ``/gsd:<command>`` references."""

from __future__ import annotations

import re
from typing import Iterator

from gsd_install.constants import (
    CANONICAL_COMMAND_SEPARATOR,
    COMMAND_NAMESPACE,
    FILE_REFERENCE_SIGIL,
    READ_FILES_HEADER,
)

_FILE_REFERENCE_RE = re.compile(rf"^{re.escape(FILE_REFERENCE_SIGIL)}(\S+)$")


def file_reference_path(line: str) -> str | None:
    """Return the referenced path when ``line`` is a bare ``@path`` line."""
    match = _FILE_REFERENCE_RE.match(line)
    if match is None:
        return None
    return match.group(1)


def read_instructions(paths: list[str]) -> list[str]:
    return [READ_FILES_HEADER, *(f"- {path}" for path in paths)]


def _rewrite_lines(lines: list[str]) -> Iterator[str]:
    run: list[str] = []
    for line in lines:
        path = file_reference_path(line)
        if path is not None:
            run.append(path)
            continue
        if run:
            yield from read_instructions(run)
            run = []
        yield line
    if run:
        yield from read_instructions(run)


def rewrite_file_references(body: str) -> str:
    """Replace each maximal run of ``@path`` lines with a read-instruction block.

    Runs are rewritten in place during one top-to-bottom scan, so identical
    runs appearing more than once are each rewritten at their own position.
    References embedded in prose are left alone.
    """
    if FILE_REFERENCE_SIGIL not in body:
        return body
    return "\n".join(_rewrite_lines(body.split("\n")))


def _command_reference_re(namespace: str, canonical_separator: str) -> re.Pattern:
    return re.compile(
        rf"/{re.escape(namespace)}{re.escape(canonical_separator)}([a-z-]+)"
    )


def rewrite_command_references(
    body: str,
    separator: str,
    namespace: str = COMMAND_NAMESPACE,
    canonical_separator: str = CANONICAL_COMMAND_SEPARATOR,
) -> str:
    if separator == canonical_separator:
        return body
    pattern = _command_reference_re(namespace, canonical_separator)
    replacement = f"/{namespace}{separator}"
    return pattern.sub(lambda match: f"{replacement}{match.group(1)}", body)


def rewrite_command_name(
    value: str,
    separator: str,
    canonical_separator: str = CANONICAL_COMMAND_SEPARATOR,
) -> str:
    return value.replace(canonical_separator, separator)
