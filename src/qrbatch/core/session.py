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

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..ingest.tabular import read_table
from ..render.layout import LayoutConfig
from .models import (
    DEFAULT_MANUAL_FIELDS,
    FieldSchema,
    RecordSet,
    add_field,
    append_record,
    clear_records,
    manual_record,
)


@dataclass(frozen=True)
class SessionState:
    """Loaded or typed-in records plus the layout they will be printed with.

    ``manual_fields`` is the field list offered for hand entry. It survives
    ``clear()`` and a table load; adding a record by hand makes it the schema
    of the whole record set again.
    """

    schema: FieldSchema = field(default_factory=FieldSchema)
    records: RecordSet = ()
    config: LayoutConfig = field(default_factory=LayoutConfig)
    manual_fields: FieldSchema = field(default_factory=lambda: FieldSchema(DEFAULT_MANUAL_FIELDS))

    def load_table(self, path: str | Path) -> SessionState:
        # read_table raises before anything is replaced, so a failed load keeps this state.
        schema, records = read_table(path)
        return _with_default_caption(replace(self, schema=schema, records=records))

    def add_field(self, name: str) -> SessionState:
        return replace(self, manual_fields=add_field(self.manual_fields, name))

    def add_record(self, values: Mapping[str, object]) -> SessionState:
        record = manual_record(self.manual_fields, values)
        if record is None:
            return self
        state = replace(
            self,
            schema=self.manual_fields,
            records=append_record(self.records, record),
        )
        return _with_default_caption(state)

    def clear(self) -> SessionState:
        return replace(self, schema=FieldSchema(), records=clear_records())

    def with_config(self, **changes: object) -> SessionState:
        return replace(self, config=replace(self.config, **changes))


def _with_default_caption(state: SessionState) -> SessionState:
    if state.config.caption_field or state.schema.first is None:
        return state
    return state.with_config(caption_field=state.schema.first)


__all__ = ["SessionState"]
