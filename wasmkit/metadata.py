"""Metadata output formats and module listings."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TextIO

from .errors import ParsingError


class OutputFormat(enum.Enum):
    """How metadata is written out."""

    HUMAN = "human"
    JSON = "json"
    SCALE = "scale"
    HEX_SCALE = "hex+scale"
    JSON_SCALE = "json+scale"

    @classmethod
    def parse(cls, text: str) -> OutputFormat:
        """Parse a format name; ``scale+hex`` and ``scale+json`` are accepted too."""
        try:
            return _NAMES[text]
        except KeyError:
            raise ParsingError(text, " Unknown output format") from None

    def default_filename(self) -> str:
        """File name used when the output is ``auto`` or empty."""
        return _FILENAMES[self]


_NAMES = {
    "human": OutputFormat.HUMAN,
    "json": OutputFormat.JSON,
    "scale": OutputFormat.SCALE,
    "hex+scale": OutputFormat.HEX_SCALE,
    "scale+hex": OutputFormat.HEX_SCALE,
    "json+scale": OutputFormat.JSON_SCALE,
    "scale+json": OutputFormat.JSON_SCALE,
}

_FILENAMES = {
    OutputFormat.HUMAN: "metadata.txt",
    OutputFormat.JSON: "metadata.json",
    OutputFormat.SCALE: "metadata.scale",
    OutputFormat.HEX_SCALE: "metadata.hex",
    OutputFormat.JSON_SCALE: "metadata.jscale",
}


def write_modules_list(pallets: Iterable[tuple[int, str]], out: TextIO) -> None:
    """Write ``(index, name)`` pallets sorted by index, one per line."""
    for index, name in sorted(pallets, key=lambda pallet: pallet[0]):
        out.write(f" - {index:02d}: {name}\n")