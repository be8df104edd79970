from typing import Iterable, List

from quantum_labels.records import Record


def expand(selected: Iterable[Record]) -> List[Record]:
    """One entry per label: each record repeated ``record.copies`` times."""
    printable = []
    for record in selected:
        printable.extend([record] * record.copies)
    return printable
