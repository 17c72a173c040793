"""Drive the map, sort and reduce steps over a directory of text files."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from wordreduce.filemgr import (
    PathLike,
    append_lines,
    clear_file,
    read_lines,
    write_lines,
)
from wordreduce.mapper import MapBase
from wordreduce.reducer import OUTPUT_FILE, SUCCESS_FILE, ReduceBase
from wordreduce.sorter import sort_file

_log = logging.getLogger(__name__)

TEMP_FILE = "temp.txt"
FINAL_OUTPUT_FILE = "OUTPUT_FINAL.txt"
MAX_PARTITIONS = 20

T = TypeVar("T")
W = TypeVar("W")


class WorkflowError(Exception):
    """Raised when a run cannot go ahead."""


def _input_files(input_dir: PathLike) -> list[Path]:
    """Return the regular files of ``input_dir`` in name order."""
    directory = Path(input_dir)
    if not directory.is_dir():
        raise WorkflowError(f"input directory {directory} does not exist")
    files = sorted(entry for entry in directory.iterdir() if entry.is_file())
    if not files:
        raise WorkflowError(f"input directory {directory} is empty")
    return files


def _map_file(mapper: MapBase, source: Path, temp_path: Path) -> None:
    """Feed every line of ``source`` to ``mapper``, flagging the last one."""
    _log.info("mapping %s", source.as_posix())
    lines = read_lines(source)
    last = len(lines) - 1
    for number, line in enumerate(lines):
        if number == last:
            mapper.set_last_line(True)
        mapper.map_line(temp_path, line)
    mapper.clear_buffer()


def run_single(
    input_dir: PathLike,
    temp_dir: PathLike,
    output_dir: PathLike,
    mapper: MapBase,
    reducer: ReduceBase,
) -> list[tuple[str, int]]:
    """Map every input file into one temp file, then sort and reduce it.

    The temp file, ``output.txt`` and ``SUCCESS.txt`` are emptied first.
    Reduced records go wherever ``reducer`` writes by default. Returns the
    reduced ``(word, count)`` pairs in the order they were written.
    """
    _log.info("starting workflow")
    temp_path = Path(temp_dir) / TEMP_FILE
    output = Path(output_dir)
    clear_file(temp_path)
    clear_file(output / SUCCESS_FILE)
    clear_file(output / OUTPUT_FILE)

    for source in _input_files(input_dir):
        _map_file(mapper, source, temp_path)

    results = [reducer.reduce(record) for record in sort_file(temp_path)]
    _log.info("all the operations are complete")
    return results


def partition_files(files: Sequence[T], partitions: int) -> list[list[T]]:
    """Split ``files`` into ``partitions`` consecutive groups.

    Every group but the last holds ``len(files) // partitions`` items and
    the last takes the rest. When there are fewer files than partitions,
    the first group holds them all and the others are empty.
    """
    if partitions <= 0:
        raise ValueError("the number of partitions must be positive")
    size = len(files) // partitions
    if size == 0:
        return [list(files)] + [[] for _ in range(partitions - 1)]
    head = [list(files[i * size:(i + 1) * size]) for i in range(partitions - 1)]
    return head + [list(files[(partitions - 1) * size:])]


@dataclass
class Partition:
    """The input files of one mapper and the files it and its reducer use."""

    files: list[Path]
    temp_path: Path
    output_path: Path


def _run_parallel(work: Callable[[W, int], T], workers: Sequence[W]) -> list[T]:
    """Run ``work(worker, index)`` for every worker on its own thread."""
    with ThreadPoolExecutor(max_workers=max(len(workers), 1)) as pool:
        futures = [pool.submit(work, worker, index) for index, worker in enumerate(workers)]
        return [future.result() for future in futures]


class Workflow:
    """Partitioned map reduce run with one thread per mapper and reducer.

    ``mapper_factory()`` builds a mapper for each partition and
    ``reducer_factory(output_dir)`` builds each reducer.
    """

    def __init__(
        self,
        mapper_factory: Callable[[], MapBase],
        reducer_factory: Callable[[PathLike], ReduceBase],
    ) -> None:
        self.mapper_factory = mapper_factory
        self.reducer_factory = reducer_factory
        self.partitions: list[Partition] = []

    def run(
        self,
        input_dir: PathLike,
        temp_dir: PathLike,
        output_dir: PathLike,
        mappers: int,
        reducers: int,
    ) -> dict[str, int]:
        """Run the whole workflow and return the final word counts.

        There are never more mappers than input files, nor more reducers
        than mappers. Partitions beyond the reducer count are mapped but
        not reduced. The combined result is written to ``OUTPUT_FINAL.txt``
        and an empty ``SUCCESS.txt`` marks completion.
        """
        if mappers <= 0 or reducers <= 0:
            raise ValueError("the numbers of mappers and reducers must be positive")
        _log.info("starting workflow")
        files = _input_files(input_dir)
        mapper_count = min(mappers, len(files))
        if mapper_count > MAX_PARTITIONS:
            raise WorkflowError(f"at most {MAX_PARTITIONS} mappers are supported")
        reducer_count = min(reducers, mapper_count)
        _log.info("number of mappers: %d, number of reducers: %d", mapper_count, reducer_count)

        temp, output = Path(temp_dir), Path(output_dir)
        self.partitions = [
            Partition(group, temp / f"TEMP_{index}", output / f"OUTPUT_{index}")
            for index, group in enumerate(partition_files(files, mapper_count))
        ]
        for partition in self.partitions:
            clear_file(partition.temp_path)
            clear_file(partition.output_path)

        _run_parallel(self.map_partition, [self.mapper_factory() for _ in range(mapper_count)])
        _log.info("all map processes completed")

        _run_parallel(
            self.reduce_partition,
            [self.reducer_factory(output_dir) for _ in range(reducer_count)],
        )
        _log.info("all reduce processes completed")

        self.aggregate([partition.output_path for partition in self.partitions], output_dir)
        counts = self.combine_output(output_dir)

        _log.info("writing success file")
        clear_file(output / SUCCESS_FILE)
        return counts

    def map_partition(self, mapper: MapBase, index: int) -> None:
        """Map every file of partition ``index`` into its temp file."""
        _log.info("map thread %d", index)
        partition = self.partitions[index]
        for source in partition.files:
            _map_file(mapper, source, partition.temp_path)

    def reduce_partition(self, reducer: ReduceBase, index: int) -> list[tuple[str, int]]:
        """Sort the temp file of partition ``index`` and reduce it to its output."""
        _log.info("reduce thread %d", index)
        partition = self.partitions[index]
        results = [
            reducer.reduce(record, partition.output_path)
            for record in sort_file(partition.temp_path)
        ]
        _log.info("reduce completed for %s", partition.output_path)
        return results

    def aggregate(self, files: Sequence[PathLike], output_dir: PathLike) -> Path:
        """Concatenate ``files`` into ``OUTPUT_FINAL.txt`` and return its path."""
        final = Path(output_dir) / FINAL_OUTPUT_FILE
        clear_file(final)
        for source in files:
            _log.info("aggregating %s", source)
            append_lines(final, read_lines(source))
        _log.info("combined output written to %s", final)
        return final

    def combine_output(self, output_dir: PathLike) -> dict[str, int]:
        """Sum the counts of repeated words in ``OUTPUT_FINAL.txt``.

        Blank lines are skipped; the file is rewritten with one line per
        word and the totals are returned.
        """
        final = Path(output_dir) / FINAL_OUTPUT_FILE
        totals: dict[str, int] = {}
        for line in read_lines(final):
            if not line:
                continue
            word, separator, value = line.partition(" ")
            if not separator:
                value = line
            totals[word] = totals.get(word, 0) + int(value)
        write_lines(final, [f"{word} {count}" for word, count in totals.items()])
        _log.info("reduced output written to %s", final)
        return totals