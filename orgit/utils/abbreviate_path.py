"""Abbreviate a path under the home directory to ~/..."""

from pathlib import Path


def abbreviate_path(path: str | Path) -> str:
    """Return ``path`` with a leading home directory replaced by ``~``.

    Paths outside the home directory are returned unchanged (as strings).
    """
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    if text.startswith(home.rstrip("/") + "/"):
        return "~" + text[len(home.rstrip("/")) :]
    return text
