"""
CSV upload loader.

Reads an uploaded CSV file into a list of records: dicts keyed by the
header row, or plain lists of cells when the file has no header.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import IO, Any, Dict, Iterator, List, Mapping, Optional, Union

from data_utilities.logger import get_logger

logger = get_logger()

Record = Union[Dict[str, str], List[str]]


# ============================================================
# INPUT HANDLING
# ============================================================


def _text_stream(stream: IO) -> IO[str]:
    """
    Wrap binary upload streams so the csv module gets text.
    """
    if isinstance(stream, io.TextIOBase):
        return stream
    if isinstance(stream.read(0), bytes):
        return io.TextIOWrapper(stream, encoding="utf-8-sig", newline="")
    return stream


def _upload_stream(upload: Any) -> Optional[IO]:
    """
    Return the readable stream behind an uploaded-file object, if any.

    Werkzeug's FileStorage exposes `.stream`, Starlette's UploadFile `.file`.
    """
    for attr in ("stream", "file"):
        stream = getattr(upload, attr, None)
        if stream is not None and hasattr(stream, "read"):
            return stream
    if hasattr(upload, "read"):
        return upload
    return None


def _rows_to_records(rows: Iterator[List[str]], first_row_labels: bool) -> List[Record]:
    result: List[Record] = []

    labels: List[str] = []
    if first_row_labels:
        labels = next(rows, None) or []

    for csv_row in rows:
        if first_row_labels:
            # Only the columns this row actually has; cells past the header are dropped
            result.append(
                {label: csv_row[i] for i, label in enumerate(labels) if i < len(csv_row)}
            )
        else:
            result.append(csv_row)

    return result


# ============================================================
# PUBLIC API
# ============================================================


def load_csv_to_list(
    upload: Any,
    first_row_labels: bool = True,
) -> Optional[List[Record]]:
    """
    Load an uploaded CSV file into a list of records.

    :param upload: Path to the uploaded file, an open file object, or an
        uploaded-file object exposing `.stream` / `.file`
    :param first_row_labels: Treat the first row as column labels
    :return: List of dicts (with labels) or lists (without), or None if no
        file was provided
    """
    if not upload:
        return None

    if isinstance(upload, (str, Path)):
        with open(upload, "r", encoding="utf-8-sig", newline="") as f:
            records = _rows_to_records(csv.reader(f), first_row_labels)
        logger.info(f"Loaded {len(records)} CSV rows from {upload}")
        return records

    stream = _upload_stream(upload)
    if stream is None:
        logger.warning(f"Not a readable upload: {type(upload).__name__}")
        return None

    text = _text_stream(stream)
    try:
        records = _rows_to_records(csv.reader(text), first_row_labels)
    finally:
        if text is not stream:
            # Leave the caller's stream open, even after a decode error
            text.detach()

    logger.info(f"Loaded {len(records)} CSV rows from upload")
    return records


def load_uploaded_csv(
    files: Mapping[str, Any],
    field: str,
    first_row_labels: bool = True,
) -> Optional[List[Record]]:
    """
    Look `field` up in a mapping of uploads (e.g. `request.files`) and load it.
    """
    if not files:
        return None
    return load_csv_to_list(files.get(field), first_row_labels)
