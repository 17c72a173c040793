"""Interactive command that runs a word-count map reduce over a directory."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from wordreduce.filemgr import PathLike
from wordreduce.mapper import WordMapper
from wordreduce.reducer import WordReducer
from wordreduce.workflow import Workflow, WorkflowError, run_single

BANNER_RULE = "#" * 61
BANNER_TITLE = "############### Welcome To Map Reduce ###############"
INVALID_INPUTS = "Command line inputs are invalid!"


class InvalidInputError(Exception):
    """Raised when a path or count entered by the user cannot be used."""


def validate_input_directory(path: PathLike) -> Path:
    """Return ``path`` if it is an existing, non-empty directory."""
    directory = Path(path)
    if not directory.exists():
        raise InvalidInputError(f"Input {path} directory does not exist!")
    if not directory.is_dir() or not any(directory.iterdir()):
        raise InvalidInputError("Input directory is empty")
    return directory


def validate_directory(path: PathLike, label: str) -> Path:
    """Return ``path`` if it exists; ``label`` names it in the error."""
    directory = Path(path)
    if not directory.exists():
        raise InvalidInputError(f"{label} {path} directory does not exist!")
    return directory


def prompt_count(
    prompt: str,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> int:
    """Ask for a positive whole number until one is given.

    ``read`` returns one line of input and raises ``EOFError`` when there is
    none left, which is reported as ``InvalidInputError``.
    """
    while True:
        write(prompt)
        try:
            answer = read()
        except EOFError:
            raise InvalidInputError("no count was entered") from None
        try:
            count = int(answer.strip())
        except ValueError:
            continue
        if count > 0:
            return count


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line[:-1] if line.endswith("\n") else line


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _ask(prompt: str, given: str | None) -> str:
    if given is not None:
        return given
    _write(prompt)
    try:
        return _read_line()
    except EOFError:
        raise InvalidInputError("no path was entered") from None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordreduce",
        description="Count words in a directory of text files. "
        "Values not given as options are asked for.",
    )
    parser.add_argument("--input", help="directory holding the input files")
    parser.add_argument("--temp", help="directory for intermediate files")
    parser.add_argument("--output", help="directory for the results")
    parser.add_argument("--mappers", type=int, help="number of map threads")
    parser.add_argument("--reducers", type=int, help="number of reduce threads")
    parser.add_argument(
        "--single",
        action="store_true",
        help="map everything into one temp file and reduce it once",
    )
    return parser


def _print_banner() -> None:
    for line in (BANNER_RULE, BANNER_TITLE, BANNER_RULE):
        print(f"\t{line}")


def _count(prompt: str, given: int | None) -> int:
    if given is None:
        return prompt_count(prompt, _read_line, _write)
    if given <= 0:
        raise InvalidInputError(f"count must be positive, got {given}")
    return given


def main(argv: Sequence[str] | None = None) -> int:
    """Prompt for the run's settings, run it and return an exit status."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    _print_banner()
    print("\nEnter the following inputs for the Map Reduce run: ")

    try:
        input_dir = validate_input_directory(
            _ask("Enter the input directory path: ", args.input)
        )
        temp_dir = validate_directory(
            _ask("Enter the temp directory path: ", args.temp), "Temp"
        )
        output_dir = validate_directory(
            _ask("Enter the output directory path: ", args.output), "Output"
        )
        if not args.single:
            mappers = _count(
                "Enter the number of mappers (Not greater than number of input files): ",
                args.mappers,
            )
            reducers = _count(
                "Enter the number of reducers (Not greater than number of input files): ",
                args.reducers,
            )
    except InvalidInputError as error:
        print(error)
        print(INVALID_INPUTS)
        return 1

    print("User inputs are valid:\n")
    try:
        if args.single:
            run_single(input_dir, temp_dir, output_dir, WordMapper(), WordReducer(output_dir))
        else:
            Workflow(WordMapper, WordReducer).run(
                input_dir, temp_dir, output_dir, mappers, reducers
            )
    except (WorkflowError, OSError, ValueError) as error:
        print(error)
        print("Workflow failed to run!")
        return 1
    print("Successfully Terminated")
    return 0