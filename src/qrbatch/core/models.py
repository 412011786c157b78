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

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from .errors import FieldNameError

Record = Mapping[str, object]
RecordSet = tuple[Record, ...]

DEFAULT_MANUAL_FIELDS = ("ID", "Name")


@dataclass(frozen=True)
class FieldSchema:
    """Ordered, duplicate-free field names of a record set."""

    fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(set(self.fields)) != len(self.fields):
            raise ValueError("field names must be unique")

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    @property
    def first(self) -> str | None:
        return self.fields[0] if self.fields else None


def set_schema(fields: Iterable[str]) -> FieldSchema:
    ordered: list[str] = []
    for name in fields:
        if name not in ordered:
            ordered.append(name)
    return FieldSchema(tuple(ordered))


def add_field_checked(schema: FieldSchema, name: str) -> FieldSchema:
    normalized = (name or "").strip()
    if not normalized:
        raise FieldNameError("field name cannot be empty")
    if normalized in schema:
        raise FieldNameError(f"field already exists: {normalized}")
    return FieldSchema((*schema.fields, normalized))


def add_field(schema: FieldSchema, name: str) -> FieldSchema:
    # Blank and duplicate names are ignored so repeated adds are harmless.
    try:
        return add_field_checked(schema, name)
    except FieldNameError:
        return schema


def append_record(records: RecordSet, record: Record) -> RecordSet:
    return (*records, dict(record))


def clear_records() -> RecordSet:
    return ()


def manual_record(schema: FieldSchema, values: Mapping[str, object]) -> dict[str, object] | None:
    record: dict[str, object] = {}
    for name in schema:
        value = values.get(name)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        record[name] = value
    if not record:
        return None
    return record


__all__ = [
    "DEFAULT_MANUAL_FIELDS",
    "FieldSchema",
    "Record",
    "RecordSet",
    "add_field",
    "add_field_checked",
    "append_record",
    "clear_records",
    "manual_record",
    "set_schema",
]
