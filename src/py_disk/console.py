"""Interactive console for the disk scheduling simulator.

The console is the terminal interface.  It reads one workload, runs
every planner on it, and prints each visit order and its total head
movement::

    1. **Read** — prompt for the request count, the requests, the head,
       the disk size and SCAN's direction.
    2. **Run** — pass the workload to ``simulate()``.
    3. **Print** — one block per algorithm.

Values are whitespace-delimited integers and may span lines, so a whole
workload can be piped in on one line.

The helpers (``read_workload``, ``format_result``) work on streams and
return values, so they are testable without a terminal.  ``main()`` is
the I/O entrypoint and returns an ``ExitCode``.
"""

import argparse
import sys
from collections.abc import Iterator
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from py_disk.config import ConfigError, SimulatorConfig, load_config
from py_disk.disk import Direction, DiskRequestError, ScheduleResult
from py_disk.logging import Logger
from py_disk.simulator import Workload, simulate

PROMPT_COUNT = "Enter number of requests: "
PROMPT_REQUESTS = "Enter request sequence:\n"
PROMPT_HEAD = "Enter initial head position: "
PROMPT_DISK_SIZE = "Enter total disk size: "
PROMPT_DIRECTION = "Enter head movement direction (0 for left, 1 for right): "


class ExitCode(IntEnum):
    """Process exit statuses."""

    SUCCESS = 0
    INVALID_INPUT = 1
    CONFIG_ERROR = 2
    INTERRUPTED = 130


class InputError(ValueError):
    """Raise when the console input is not a usable integer.

    Examples: a non-numeric token, or input ending before the workload
    is complete.
    """


class _IntReader:
    """Pull whitespace-delimited integers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._tokenize(stream)

    @staticmethod
    def _tokenize(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def next_int(self, what: str) -> int:
        token = next(self._tokens, None)
        if token is None:
            msg = f"unexpected end of input while reading {what}"
            raise InputError(msg)
        try:
            return int(token)
        except ValueError as e:
            msg = f"expected an integer for {what}, got {token!r}"
            raise InputError(msg) from e


def read_workload(
    stream: TextIO,
    out: TextIO,
    *,
    max_requests: int | None = None,
) -> Workload:
    """Prompt for and read one workload.

    Args:
        stream: Where the integers come from.
        out: Where the prompts go.
        max_requests: If set, reject a larger count before reading the
            requests themselves.

    Raises:
        InputError: On a non-integer token or premature end of input.
        DiskRequestError: On a negative count, or one above *max_requests*.

    """
    reader = _IntReader(stream)

    def ask(prompt: str, what: str) -> int:
        out.write(prompt)
        out.flush()
        return reader.next_int(what)

    count = ask(PROMPT_COUNT, "the number of requests")
    if count < 0:
        msg = f"number of requests cannot be negative, got {count}"
        raise DiskRequestError(msg)
    if max_requests is not None and count > max_requests:
        msg = f"too many requests: {count} (maximum {max_requests})"
        raise DiskRequestError(msg)

    out.write(PROMPT_REQUESTS)
    out.flush()
    requests = tuple(reader.next_int(f"request {i + 1}") for i in range(count))

    head = ask(PROMPT_HEAD, "the head position")
    disk_size = ask(PROMPT_DISK_SIZE, "the disk size")
    direction = ask(PROMPT_DIRECTION, "the direction")
    if direction not in tuple(Direction):
        msg = f"direction must be 0 or 1, got {direction}"
        raise DiskRequestError(msg)

    return Workload(
        requests=requests,
        head=head,
        disk_size=disk_size,
        direction=Direction(direction),
    )


def format_result(result: ScheduleResult, *, separator: str = " -> ") -> str:
    """Format one planner's run for printing.

    Returns:
        A header line, the visit order starting at the initial head,
        and the total head movement.

    """
    path = separator.join(str(pos) for pos in (result.head, *result.order))
    return (
        f"{result.algorithm} Disk Scheduling:\n"
        f"Order: {path}\n"
        f"Total Head Movement = {result.total_movement}"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-disk",
        description="Compare FCFS, SCAN and C-SCAN disk scheduling on one workload.",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON config file")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="print the run log to stderr",
    )
    return parser


def _print_log(logger: Logger, config: SimulatorConfig, err: TextIO) -> None:
    for entry in logger.filter(min_level=config.log_level):
        print(entry, file=err)  # noqa: T201


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Read a workload, run every planner, and print the results.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``).
        stdin: Input stream (defaults to ``sys.stdin``).
        stdout: Output stream (defaults to ``sys.stdout``).
        stderr: Error stream (defaults to ``sys.stderr``).

    Returns:
        An ``ExitCode`` value.

    """
    args = _build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"error: {e}", file=stderr)  # noqa: T201
        return ExitCode.CONFIG_ERROR

    logger = Logger()
    try:
        workload = read_workload(stdin, stdout, max_requests=config.max_requests)
        results = simulate(workload, max_requests=config.max_requests, logger=logger)
    except (InputError, DiskRequestError) as e:
        print(f"\nerror: {e}", file=stderr)  # noqa: T201
        if args.verbose:
            _print_log(logger, config, stderr)
        return ExitCode.INVALID_INPUT
    except KeyboardInterrupt:
        print("\nInterrupted.", file=stderr)  # noqa: T201
        return ExitCode.INTERRUPTED

    for result in results:
        print(f"\n{format_result(result, separator=config.separator)}", file=stdout)  # noqa: T201
    if args.verbose:
        _print_log(logger, config, stderr)
    return ExitCode.SUCCESS


def run() -> None:
    """Console-script entrypoint."""
    sys.exit(main())
