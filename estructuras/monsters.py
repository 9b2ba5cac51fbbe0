"""A catalog of monsters read from CSV and stored in a hash table by name."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from estructuras.hashtable import HashTable

PathLike = Union[str, Path]

DEFAULT_FILE = "monsters.csv"
DEFAULT_BUCKETS = 100
_HASH_BASE = 31


class CatalogError(Exception):
    """The monster file could not be read or holds a malformed line."""


@dataclass(frozen=True, order=True)
class Monster:
    """A creature; equality, ordering and hashing use the name only."""

    name: str = ""
    cr: float = field(default=0.0, compare=False)
    type: str = field(default="", compare=False)
    size: str = field(default="", compare=False)
    ac: int = field(default=0, compare=False)
    hp: int = field(default=0, compare=False)
    align: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.name

    def describe(self) -> str:
        """Every field on its own line."""
        return "\n".join(
            [
                f"Name: {self.name}",
                f"cr: {self.cr:g}",
                f"type: {self.type}",
                f"size: {self.size}",
                f"ac: {self.ac}",
                f"hp: {self.hp}",
                f"align: {self.align}",
            ]
        )


def monster_hash(monster: Monster, table_size: int) -> int:
    """Polynomial hash of the monster's name, kept below ``table_size``."""
    value = 0
    for byte in monster.name.encode("utf-8"):
        value = (value * _HASH_BASE + byte) % table_size
    return value


def _split_cells(line: str) -> List[str]:
    cells = line.split(",")
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def _read_lines(path: PathLike) -> List[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return [line.rstrip("\n") for line in handle]
    except OSError as exc:
        raise CatalogError(f"cannot open the creature file: {path}") from exc


def count_entries(path: PathLike) -> int:
    """Number of lines after the header of a creature file."""
    lines = _read_lines(path)
    if not lines:
        raise CatalogError("the creature file has no header")
    return len(lines) - 1


_FIELDS = (
    ("name", str),
    ("cr", float),
    ("type", str),
    ("size", str),
    ("ac", int),
    ("hp", int),
    ("align", str),
)


def _parse_monster(line: str) -> Monster:
    cells = _split_cells(line)
    if len(cells) > len(_FIELDS):
        raise CatalogError(f"error in line:\n{line}")
    values = {}
    for cell, (name, convert) in zip(cells, _FIELDS):
        if not cell:
            raise CatalogError(f"error in line:\n{line}")
        try:
            values[name] = convert(cell)
        except ValueError as exc:
            raise CatalogError(f"error in line:\n{line}") from exc
    return Monster(**values)


class MonsterCatalog:
    """Monsters kept in a hash table keyed by name."""

    def __init__(self, buckets: int = DEFAULT_BUCKETS) -> None:
        self._table: HashTable[Monster] = HashTable(buckets, monster_hash)

    def __len__(self) -> int:
        return len(self._table)

    def load_csv(self, path: PathLike) -> None:
        """Add every monster of a CSV file whose first line is a header."""
        lines = _read_lines(path)
        if not lines:
            raise CatalogError("the creature file has no header")
        for line in lines[1:]:
            self._table.insert(_parse_monster(line))

    def find(self, name: str) -> Optional[Monster]:
        """The monster with this name, or None."""
        return self._table.find(Monster(name=name))

    def report(self) -> str:
        """Bucket occupancy of the underlying table."""
        return self._table.report()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load a monster catalog and look one up.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE)
    parser.add_argument("name", nargs="?", default="cat")
    args = parser.parse_args(argv)

    catalog = MonsterCatalog()
    print(f"Loading creature file: {args.path}")
    try:
        catalog.load_csv(args.path)
    except CatalogError as exc:
        print(exc)
        print("Could not build the catalog")
    print(catalog.report())
    found = catalog.find(args.name)
    if found is not None:
        print(found)
    else:
        print(f"{args.name} was not found")
    return 0