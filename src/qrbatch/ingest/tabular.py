#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import csv
import zipfile
from collections.abc import Iterable, Sequence
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..core.errors import IngestError
from ..core.models import FieldSchema, RecordSet, set_schema

CSV_SUFFIXES = frozenset({".csv"})
XLSX_SUFFIXES = frozenset({".xlsx", ".xlsm"})
SUPPORTED_SUFFIXES = CSV_SUFFIXES | XLSX_SUFFIXES


def read_table(path: str | Path) -> tuple[FieldSchema, RecordSet]:
    """Read a header-first table into a schema and its records.

    Blank header cells drop their column, repeated headers get ``_1``, ``_2``
    suffixes, empty cells become absent fields and empty rows are skipped.
    """
    source = Path(path).expanduser()
    if not source.exists():
        raise IngestError(f"input file not found: {source}")
    if not source.is_file():
        raise IngestError(f"input path is not a file: {source}")
    suffix = source.suffix.lower()
    if suffix in CSV_SUFFIXES:
        rows = _read_csv_rows(source)
    elif suffix in XLSX_SUFFIXES:
        rows = _read_xlsx_rows(source)
    else:
        supported = ", ".join(sorted(SUPPORTED_SUFFIXES))
        raise IngestError(f"unsupported table format {suffix or '(none)'}; use one of {supported}")
    return rows_to_records(rows)


def rows_to_records(rows: Iterable[Sequence[object]]) -> tuple[FieldSchema, RecordSet]:
    iterator = iter(rows)
    header = next(iterator, None)
    if header is None:
        return FieldSchema(), ()
    columns = _header_columns(header)
    schema = set_schema(name for _index, name in columns)
    records = []
    for row in iterator:
        record: dict[str, object] = {}
        for index, name in columns:
            if index >= len(row):
                continue
            value = _cell_value(row[index])
            if value is None:
                continue
            record[name] = value
        if record:
            records.append(record)
    return schema, tuple(records)


def _header_columns(header: Sequence[object]) -> list[tuple[int, str]]:
    columns: list[tuple[int, str]] = []
    seen: dict[str, int] = {}
    taken: set[str] = set()
    for index, cell in enumerate(header):
        name = "" if cell is None else str(cell).strip()
        if not name:
            continue
        unique = name
        while unique in taken:
            seen[name] = seen.get(name, 0) + 1
            unique = f"{name}_{seen[name]}"
        taken.add(unique)
        columns.append((index, unique))
    return columns


def _cell_value(value: object) -> object | None:
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _read_csv_rows(path: Path) -> list[list[str]]:
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            sample = handle.read(4096)
            handle.seek(0)
            dialect = _sniff_dialect(sample)
            return [row for row in csv.reader(handle, dialect)]
    except (UnicodeDecodeError, csv.Error) as exc:
        raise IngestError(f"could not parse CSV file {path.name}: {exc}") from exc


def _sniff_dialect(sample: str) -> type[csv.Dialect] | csv.Dialect:
    if not sample.strip():
        return csv.excel
    try:
        return csv.Sniffer().sniff(sample, delimiters=",;\t")
    except csv.Error:
        return csv.excel


def _read_xlsx_rows(path: Path) -> list[tuple[object, ...]]:
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        raise IngestError(f"could not open spreadsheet {path.name}: {exc}") from exc
    try:
        sheet = workbook.worksheets[0] if workbook.worksheets else None
        if sheet is None:
            return []
        return [tuple(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


__all__ = ["SUPPORTED_SUFFIXES", "read_table", "rows_to_records"]
