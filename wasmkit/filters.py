"""Filter on a module (pallet) and optionally a call."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ParsingError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Filter:
    """A lower-cased module name and an optional call name."""

    module: str = ""
    call: str | None = None

    @classmethod
    def parse(cls, text: str) -> Filter:
        """Parse ``module`` or ``module.call``; anything after a second dot is dropped."""
        text = text.lower()
        if not text:
            raise ParsingError(text, "Cannot have a filter without at least a module")
        chunks = text.split(".")
        result = cls(chunks[0], chunks[1] if len(chunks) > 1 else None)
        log.debug("parse(%s) => %r", text, result)
        return result