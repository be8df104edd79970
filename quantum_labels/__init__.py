"""Gestão Quantum label designer: CSV inventory in, QR label sheets out."""

from quantum_labels.csv_loader import parse
from quantum_labels.errors import (
    CsvFormatError,
    InvalidQuantityError,
    LabelDataError,
    SchemaError,
)
from quantum_labels.notification import Notification, Notifier
from quantum_labels.records import REQUIRED_HEADERS, Record
from quantum_labels.replication import expand
from quantum_labels.search import filter_records
from quantum_labels.selection import SelectionSet
from quantum_labels.state import AppState

__version__ = "0.1.0"

__all__ = [
    "AppState",
    "CsvFormatError",
    "InvalidQuantityError",
    "LabelDataError",
    "Notification",
    "Notifier",
    "REQUIRED_HEADERS",
    "Record",
    "SchemaError",
    "SelectionSet",
    "expand",
    "filter_records",
    "parse",
]
