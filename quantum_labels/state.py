"""Session state behind the label page.

One ``AppState`` lives in ``st.session_state`` per browser session and owns the
canonical record set, the selection, the search term and the alert banner.
Widget callbacks call into it; the page reads from it on every rerun.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from loguru import logger

from quantum_labels.config import Settings, get_settings
from quantum_labels.csv_loader import parse
from quantum_labels.errors import LabelDataError
from quantum_labels.notification import Notifier
from quantum_labels.records import Record
from quantum_labels.replication import expand
from quantum_labels.search import filter_records
from quantum_labels.selection import SelectionSet

PRINT_SUCCESS_MESSAGE = "Etiquetas impressas com sucesso!"
PRINT_ERROR_MESSAGE = "Erro ao imprimir etiquetas."
NOTHING_SELECTED_MESSAGE = "Nenhuma linha selecionada para impressão."
NOT_UTF8_MESSAGE = "O arquivo CSV precisa estar em UTF-8."

# Checkbox column of the records editor
SELECT_COLUMN = "Imprimir"


class AppState:
    def __init__(self, settings: Optional[Settings] = None, clock=None):
        self.settings = settings or get_settings()
        self.records: List[Record] = []
        self.selection = SelectionSet()
        self.search_term = ""
        self.source_name: Optional[str] = None
        self.last_pdf: Optional[bytes] = None
        # Bumped whenever the selection changes, so the records editor is
        # rebuilt from the selection instead of replaying its own stale edits.
        self.editor_version = 0

        notifier_kwargs = {"lifetimes_ms": self.settings.alert_lifetimes_ms()}
        if clock is not None:
            notifier_kwargs["clock"] = clock
        self.notifier = Notifier(**notifier_kwargs)

    # ---- loading ----

    def load_csv(self, raw_text: str, source_name: Optional[str] = None) -> bool:
        try:
            records = parse(raw_text)
        except LabelDataError as exc:
            logger.warning(f"Rejected CSV {source_name or '<text>'}: {exc.message}")
            self.notifier.notify(exc.message, "danger")
            return False

        self.records = records
        self.source_name = source_name
        self.selection.clear()
        self.last_pdf = None
        self.editor_version += 1
        logger.info(f"Loaded {len(records)} records from {source_name or '<text>'}")
        return True

    def load_upload(self, data: bytes, source_name: Optional[str] = None) -> bool:
        try:
            raw_text = data.decode("utf-8-sig")
        except UnicodeDecodeError:
            logger.warning(f"Rejected CSV {source_name or '<bytes>'}: not UTF-8")
            self.notifier.notify(NOT_UTF8_MESSAGE, "danger")
            return False
        return self.load_csv(raw_text, source_name)

    # ---- derived views ----

    def set_search(self, term: str) -> None:
        self.search_term = (term or "").lower()

    def visible_records(self) -> List[Record]:
        return filter_records(self.records, self.search_term)

    def visible_ids(self) -> List[str]:
        return [record.id for record in self.visible_records()]

    def selected_records(self) -> List[Record]:
        return self.selection.selected_records(self.records)

    def printable_records(self) -> List[Record]:
        return expand(self.selected_records())

    # ---- selection ----

    def toggle(self, record_id: str) -> None:
        self.selection.toggle(record_id)

    def apply_row_edits(self, row_ids: List[str], edited_rows) -> None:
        """Apply the editor's ``edited_rows`` ({row position: {column: value}})
        for a table that showed ``row_ids`` in that order."""
        for row_index, changes in edited_rows.items():
            if SELECT_COLUMN not in changes:
                continue
            record_id = row_ids[int(row_index)]
            if bool(changes[SELECT_COLUMN]) != self.selection.is_selected(record_id):
                self.selection.toggle(record_id)
        self.editor_version += 1

    def toggle_all(self) -> None:
        self.selection.toggle_all(self.visible_ids())
        self.editor_version += 1

    def is_all_selected(self) -> bool:
        return self.selection.is_all_selected(self.visible_ids())

    # ---- printing ----

    def print_labels(self, render: Callable[..., bytes]) -> Optional[bytes]:
        """Render the printable records with ``render`` and report the outcome."""
        printable = self.printable_records()
        if not printable:
            self.notifier.notify(NOTHING_SELECTED_MESSAGE, "danger")
            return None

        try:
            pdf = render(printable, self.settings)
        except Exception:
            logger.exception(f"Failed to render {len(printable)} labels")
            self.notifier.notify(PRINT_ERROR_MESSAGE, "danger")
            return None

        self.last_pdf = pdf
        logger.info(f"Printed {len(printable)} labels for {len(self.selected_records())} records")
        self.notifier.notify(PRINT_SUCCESS_MESSAGE, "success")
        return pdf
