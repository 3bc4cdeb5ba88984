from pathlib import Path


def expand_tilde(value: str | Path | None, home: Path) -> Path | None:
    if value is None:
        return None
    text = str(value)
    if not text:
        return None
    if text == "~":
        return home
    if text.startswith("~/"):
        return home / text[2:]
    return Path(text)


def read_text_safe(path: Path) -> str | None:
    if not path.exists() or not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def same_bytes(path: Path, source: Path) -> bool:
    if not path.exists() or not path.is_file():
        return False
    return path.read_bytes() == source.read_bytes()


def compact_home_path(path: str | Path, home: Path | None = None) -> str:
    text = str(path)
    home_text = str(home or Path.home())
    if text == home_text:
        return "~"
    home_prefix = f"{home_text}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_cwd_path(path: str | Path, cwd: Path) -> str:
    text = str(path)
    cwd_text = str(cwd)
    if text == cwd_text:
        return "."
    cwd_prefix = f"{cwd_text}/"
    if text.startswith(cwd_prefix):
        return f"./{text[len(cwd_prefix):]}"
    return text


def compact_home_paths_in_text(text: str, home: Path | None = None) -> str:
    home_text = str(home or Path.home())
    if text == home_text:
        return "~"
    return text.replace(f"{home_text}/", "~/")
