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

import json

from ..core.models import FieldSchema, Record


def value_text(value: object) -> str:
    """Coerce a single cell value to the text shown or encoded for it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_payload(record: Record, schema: FieldSchema) -> str:
    if len(schema) == 1:
        return value_text(record.get(schema.fields[0]))
    keys = schema.fields if schema.fields else tuple(record.keys())
    obj = {key: _json_value(record[key]) for key in keys if key in record}
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"), default=str)


def _json_value(value: object) -> object:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


__all__ = ["encode_payload", "value_text"]
