"""Helpers for building and comparing file trees in tests."""

from __future__ import annotations

from pathlib import Path

TEMPLATE_CONTENT = b"# AGENTS.md\r\n\r\nTemplate body with CRLF line endings.\r\n"


def write_tree(root: Path, files: dict[str, bytes | str]) -> None:
    """Create files (and parent directories) under root."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)


def tree_contents(root: Path) -> dict[str, bytes]:
    """Map each file's relative POSIX path to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in root.rglob("*")
        if path.is_file()
    }
