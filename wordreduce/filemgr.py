"""Line-oriented helpers for reading and writing the text files of a run."""

from __future__ import annotations

import os
from collections.abc import Iterable

PathLike = str | os.PathLike


def read_lines(path: PathLike) -> list[str]:
    """Return every line of ``path`` without line terminators.

    A file that ends with a newline yields a final empty line, and an empty
    file yields a single empty line.
    """
    with open(path, encoding="utf-8") as handle:
        return handle.read().split("\n")


def _write(path: PathLike, lines: Iterable[str], mode: str) -> None:
    with open(path, mode, encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def append_lines(path: PathLike, lines: Iterable[str]) -> None:
    """Append each of ``lines`` to ``path``, one per line."""
    _write(path, lines, "a")


def write_lines(path: PathLike, lines: Iterable[str]) -> None:
    """Replace the contents of ``path`` with ``lines``, one per line."""
    _write(path, lines, "w")


def append_line(path: PathLike, line: str) -> None:
    """Append a single line to ``path``."""
    _write(path, [line], "a")


def write_line(path: PathLike, line: str) -> None:
    """Replace the contents of ``path`` with a single line."""
    _write(path, [line], "w")


def clear_file(path: PathLike) -> None:
    """Truncate ``path`` to zero length, creating it if needed."""
    with open(path, "w", encoding="utf-8"):
        pass