"""A catalog of named colors read from CSV and looked up by RGB value."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from estructuras.hashtable import HashTable

PathLike = Union[str, Path]

DEFAULT_FILE = "colors.csv"
TABLE_SIZE = 100


class ColorCatalogError(Exception):
    """The color file could not be read or holds a malformed line."""


@dataclass(frozen=True)
class Color:
    """A named color; equality and hashing use the RGB components only."""

    r: int = 0
    g: int = 0
    b: int = 0
    id: str = field(default="black", compare=False)
    name: str = field(default="Black", compare=False)
    hex: str = field(default="#000000", compare=False)

    def __str__(self) -> str:
        return f"Name: {self.name} hex: {self.hex}"


def color_hash(color: Color, table_size: int) -> int:
    """Bucket index from the packed 24-bit RGB value."""
    return ((color.r << 16) | (color.g << 8) | color.b) % table_size


def _split_cells(line: str) -> List[str]:
    cells = line.split(",")
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def _is_numeric(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _parse_color(line: str) -> Color:
    cells = _split_cells(line)
    if len(cells) != 6 or not all(cells):
        raise ColorCatalogError(f"error in line:\n{line}")
    identifier, name, hex_code, *components = cells
    if not all(_is_numeric(part) for part in components):
        raise ColorCatalogError(f"error in line:\n{line}")
    r, g, b = (int(part) for part in components)
    return Color(r=r, g=g, b=b, id=identifier, name=name, hex=hex_code)


class ColorCatalog:
    """Colors kept in a hash table keyed by their RGB value."""

    def __init__(self, buckets: int = TABLE_SIZE) -> None:
        self._table: HashTable[Color] = HashTable(buckets, color_hash)

    def __len__(self) -> int:
        return len(self._table)

    def load_csv(self, path: PathLike) -> None:
        """Add every color of a headerless ``id,name,hex,r,g,b`` file."""
        try:
            with open(path, encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except OSError as exc:
            raise ColorCatalogError(f"cannot open the file: {path}") from exc
        for line in lines:
            self._table.insert(_parse_color(line))

    def find(self, r: int, g: int, b: int) -> Optional[Color]:
        """The color with these components, or None."""
        return self._table.find(Color(r, g, b))

    def entries(self) -> List[List[Color]]:
        """The colors of every bucket, in bucket order."""
        return self._table.entries()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load a color catalog and look up two colors.")
    parser.add_argument("path", nargs="?", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    catalog = ColorCatalog()
    print("Loading file...")
    try:
        catalog.load_csv(args.path)
    except ColorCatalogError as exc:
        print(exc)
        print("Could not build the catalog.")
        return 0

    for rgb in ((153, 102, 102), (0x48, 0x3D, 0x8B)):
        found = catalog.find(*rgb)
        print(found if found is not None else "Color not found.")
    print("Results delivered")
    return 0