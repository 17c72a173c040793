"""Map step: turn lines of text into intermediate ``word 1`` records."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod

from wordreduce.filemgr import PathLike, append_lines

_PUNCTUATION = str.maketrans("", "", string.punctuation)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def strip_punctuation(line: str) -> str:
    """Remove ASCII punctuation from ``line``, keeping every other character."""
    return line.translate(_PUNCTUATION)


class MapBase(ABC):
    """Interface every mapper offers to a workflow."""

    @abstractmethod
    def set_last_line(self, value: bool) -> None:
        """Mark whether the next line mapped is the last one of its file."""

    @abstractmethod
    def clear_buffer(self) -> None:
        """Drop every buffered record."""

    @abstractmethod
    def map_line(self, path: PathLike, line: str) -> None:
        """Map one line of input, sending records towards ``path``."""

    @abstractmethod
    def export(self, path: PathLike, entry: str) -> None:
        """Buffer one record, writing the buffer to ``path`` when due."""


class WordMapper(MapBase):
    """Split lines into lower-case words and emit one record per word.

    Records are buffered and appended to the intermediate file when the last
    word of the line marked as last is exported. A word followed by a space
    keeps that space, so its record reads ``word  1``; the final word of a
    line reads ``word 1``.
    """

    def __init__(self) -> None:
        self.buffer: list[str] = []
        self.last_line = False
        self.last_word = False

    def set_last_line(self, value: bool) -> None:
        self.last_line = value

    def clear_buffer(self) -> None:
        self.buffer.clear()

    def map_line(self, path: PathLike, line: str) -> None:
        text = strip_punctuation(line).translate(_ASCII_LOWER)
        *leading, final = text.split(" ")
        for word in leading:
            self.last_word = False
            self.export(path, f"{word}  1")
        if final:
            self.last_word = True
            self.export(path, f"{final} 1")

    def export(self, path: PathLike, entry: str) -> None:
        self.buffer.append(entry)
        if self.last_word and self.last_line:
            append_lines(path, self.buffer)
            self.last_word = False
            self.last_line = False