"""Reduce step: collapse grouped ``word 111`` records into ``word 3`` counts."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from wordreduce.filemgr import PathLike, append_line, write_line

OUTPUT_FILE = "output.txt"
SUCCESS_FILE = "SUCCESS.txt"
SUCCESS_TEXT = "SUCCESS"


def parse_grouped(grouped: str) -> tuple[str, int]:
    """Split a grouped record into its key and its number of occurrences.

    The key runs up to the first space. The count is the number of
    characters after that space. A record that starts with a space has an
    empty key and a count of zero.

    Raises ``ValueError`` when the record holds no space.
    """
    space = grouped.find(" ")
    if space == -1:
        raise ValueError(f"grouped record has no key separator: {grouped!r}")
    if space == 0:
        return "", 0
    return grouped[:space], len(grouped) - space - 1


class ReduceBase(ABC):
    """Interface every reducer offers to a workflow."""

    @abstractmethod
    def reduce(self, grouped: str, path: PathLike | None = None) -> tuple[str, int]:
        """Reduce one grouped record and write the result towards ``path``."""


class WordReducer(ReduceBase):
    """Count the occurrences in grouped records and append them to a file.

    When no path is given, results go to ``output.txt`` in the output
    directory and ``SUCCESS.txt`` beside it is rewritten after every record.
    """

    def __init__(self, output_dir: PathLike) -> None:
        self.output_dir = output_dir

    @property
    def output_path(self) -> str:
        """The default file that reduced counts are appended to."""
        return os.path.join(self.output_dir, OUTPUT_FILE)

    @property
    def success_path(self) -> str:
        """The marker file written when reducing into the default output."""
        return os.path.join(self.output_dir, SUCCESS_FILE)

    def reduce(self, grouped: str, path: PathLike | None = None) -> tuple[str, int]:
        key, count = parse_grouped(grouped)
        self.export(key, count, path)
        return key, count

    def export(self, key: str, count: int, path: PathLike | None = None) -> None:
        """Append ``key count`` to ``path``, or to the default output file."""
        record = f"{key} {count}"
        if path is None:
            append_line(self.output_path, record)
            write_line(self.success_path, SUCCESS_TEXT)
        else:
            append_line(path, record)