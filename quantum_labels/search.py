from typing import Iterable, List

from quantum_labels.records import Record


def filter_records(records: Iterable[Record], query: str) -> List[Record]:
    """Records with any value containing ``query``, case-insensitively."""
    needle = (query or "").lower()
    if not needle:
        return list(records)
    return [
        record for record in records
        if any(needle in str(value).lower() for value in record.values())
    ]
