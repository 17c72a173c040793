"""Grouping of intermediate ``word 1`` records by word."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from wordreduce.filemgr import PathLike, read_lines, write_lines


def _key_of(line: str) -> str:
    """Return the key of one intermediate record.

    The key ends at the first space; a record without one loses its final
    character, which in the intermediate format is the trailing count.
    """
    space = line.find(" ")
    return line[:space] if space != -1 else line[:-1]


def group_counts(lines: Iterable[str]) -> Counter[str]:
    """Count how many records each key has, skipping empty lines."""
    return Counter(_key_of(line) for line in lines if line)


def sort_file(path: PathLike) -> list[str]:
    """Group the records of ``path`` and rewrite it in grouped form.

    Each grouped line is the key, a space, and one ``1`` per occurrence,
    for example ``the 111``. The grouped lines are also returned.
    """
    counts = group_counts(read_lines(path))
    grouped = [f"{word} {'1' * count}" for word, count in counts.items()]
    write_lines(path, grouped)
    return grouped