"""Build a linked list from a numeric script file and count small values in it."""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from estructuras.linked_list import SinglyLinkedList

DEFAULT_FILE = "datos_in.txt"

POP_FAILED = "could not remove the last item"
EMPTY_LIST = "the list is empty"
START = "Start: loading the file into the linked list"
END = "End: finished"
SUMMARY_LINE = "{threshold}: {count} times"

TRIM_MARKER = 7
TRIMMED_AT_END = 10
THRESHOLDS = 10

Log = Callable[[str], None]


def _notify(log: Optional[Log], message: str) -> None:
    """Pass ``message`` to ``log`` when one was given."""
    if log is not None:
        log(message)


def _take(stream: Iterator[str], count: int) -> Iterator[str]:
    """Up to ``count`` lines; a negative count takes every remaining line."""
    return stream if count < 0 else islice(stream, count)


def load_list(lines: Iterable[str], log: Optional[Log] = None) -> SinglyLinkedList:
    """Run the loading script in ``lines`` and return the resulting list.

    Each block is a number ``n`` followed by ``3 * n`` values put at the
    front, then a number ``m`` followed by ``m`` values put at the end.
    When ``m`` is 7 the last item is removed before the values are added.
    Malformed numbers raise ValueError.
    """
    items: SinglyLinkedList[int] = SinglyLinkedList()
    stream = (line.strip() for line in lines)
    for header in stream:
        for value in _take(stream, 3 * int(header)):
            items.prepend(int(value))
        count_line = next(stream, None)
        if count_line is None:
            break
        count = int(count_line)
        if count == TRIM_MARKER:
            try:
                items.pop_last()
            except IndexError:
                _notify(log, POP_FAILED)
        for value in _take(stream, count):
            items.append(int(value))
    return items


def summarize(lines: Iterable[str], log: Optional[Log] = None) -> List[int]:
    """Load the list, drop its last ten items, and count values below 0..9.

    The result holds, at index ``i``, how many remaining items are smaller
    than ``i``.
    """
    items = load_list(lines, log)
    for _ in range(TRIMMED_AT_END):
        try:
            items.pop_last()
        except IndexError:
            _notify(log, POP_FAILED)
    counts = []
    for threshold in range(THRESHOLDS):
        if not items:
            _notify(log, EMPTY_LIST)
        counts.append(items.count_less_than(threshold))
    return counts


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load a list script and count small values.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    print(START)
    try:
        with open(args.path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError:
        print(f"Error loading the file: {args.path}", file=sys.stderr)
        return 0

    try:
        counts = summarize(lines, log=print)
    except ValueError as exc:
        print(f"Malformed line in {args.path}: {exc}", file=sys.stderr)
        return 1

    for threshold, count in enumerate(counts):
        print(SUMMARY_LINE.format(threshold=threshold, count=count))
    print(END)
    return 0