"""Inventory record parsed from one CSV row."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping

REQUIRED_HEADERS = ("id", "draw", "equipament", "sku", "description", "qte", "supplier")

# Plain decimal notation only; rejects Python-only forms such as "1_0".
NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_quantity(value) -> float | None:
    """Return ``value`` as a finite number, or None when it is not one."""
    text = str(value).strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class Record:
    id: str
    draw: str = ""
    equipament: str = ""
    sku: str = ""
    description: str = ""
    qte: str = ""
    supplier: str = ""
    extra: Dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "Record":
        known = {name: row.get(name, "") for name in REQUIRED_HEADERS}
        extra = {key: value for key, value in row.items() if key not in REQUIRED_HEADERS}
        return cls(extra=extra, **known)

    @property
    def copies(self) -> int:
        """Number of labels this record prints; 0 when ``qte`` is unusable."""
        number = parse_quantity(self.qte)
        if number is None or number <= 0:
            return 0
        return int(number)

    def values(self) -> Iterator[str]:
        for name in REQUIRED_HEADERS:
            yield getattr(self, name)
        yield from self.extra.values()

    def as_row(self) -> Dict[str, str]:
        row = {name: getattr(self, name) for name in REQUIRED_HEADERS}
        row.update(self.extra)
        return row
