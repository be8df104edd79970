"""Row selection state for the print queue."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from quantum_labels.records import Record


class SelectionSet:
    """Ordered set of selected record ids.

    "Select all" works against the ids currently visible in the table. When a
    filter is active, selecting all replaces the selection with the visible
    rows, so rows hidden by the filter are deselected.
    """

    def __init__(self, ids: Iterable[str] = ()):
        self._ids: Dict[str, None] = dict.fromkeys(ids)

    def __len__(self):
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __contains__(self, record_id):
        return record_id in self._ids

    def __repr__(self):
        return f"SelectionSet({list(self._ids)!r})"

    def is_selected(self, record_id: str) -> bool:
        return record_id in self._ids

    def toggle(self, record_id: str) -> None:
        if record_id in self._ids:
            del self._ids[record_id]
        else:
            self._ids[record_id] = None

    def is_all_selected(self, visible_ids: Iterable[str]) -> bool:
        visible = set(visible_ids)
        return bool(visible) and visible == set(self._ids)

    def toggle_all(self, visible_ids: Iterable[str]) -> None:
        visible = list(dict.fromkeys(visible_ids))
        if set(visible) == set(self._ids):
            self._ids.clear()
        else:
            self._ids = dict.fromkeys(visible)

    def clear(self) -> None:
        self._ids.clear()

    def selected_records(self, records: Iterable[Record]) -> List[Record]:
        """Selected records in canonical order; stale ids match nothing."""
        return [record for record in records if record.id in self._ids]
