"""CSV ingestion and validation for label data.

A load is all-or-nothing: ``parse`` either returns every usable record of the
file or raises a :class:`~quantum_labels.errors.LabelDataError` and returns
nothing.
"""

from __future__ import annotations

import io
import warnings
from typing import List

import pandas as pd
from loguru import logger

from quantum_labels.errors import CsvFormatError, InvalidQuantityError, SchemaError
from quantum_labels.records import REQUIRED_HEADERS, Record, parse_quantity


def read_frame(raw_text: str) -> pd.DataFrame:
    """Read CSV text into a DataFrame of verbatim strings.

    Rows with more fields than the header are rejected, however many extra
    fields they carry.
    """
    try:
        with warnings.catch_warnings():
            # index_col=False truncates a row with one extra field and only warns
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                io.StringIO(raw_text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
            )
    except pd.errors.EmptyDataError:
        raise SchemaError(REQUIRED_HEADERS[0])
    except (pd.errors.ParserError, pd.errors.ParserWarning) as exc:
        raise CsvFormatError(f"CSV inválido: {exc}") from exc
    return df.fillna("")


def check_headers(columns) -> None:
    present = set(columns)
    for header in REQUIRED_HEADERS:
        if header not in present:
            raise SchemaError(header)


def check_quantities(records: List[Record]) -> None:
    for record in records:
        number = parse_quantity(record.qte)
        if number is None or number <= 0:
            raise InvalidQuantityError(record.id)


def parse(raw_text: str) -> List[Record]:
    df = read_frame(raw_text)
    check_headers(df.columns)

    # Rows without an id are blank separators, not errors.
    rows = [row for row in df.to_dict("records") if row.get("id", "") != ""]
    records = [Record.from_row(row) for row in rows]
    check_quantities(records)

    logger.debug(f"Parsed {len(records)} records ({len(df) - len(records)} rows without id skipped)")
    return records
