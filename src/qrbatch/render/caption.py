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

from collections.abc import Callable

from ..core.models import Record
from ..encoding.payload import value_text

CAPTION_PREFIX_CHARS = 15
ELLIPSIS = "..."


def format_caption(
    record: Record,
    field: str | None,
    max_width: float,
    measure_width: Callable[[str], float],
) -> str | None:
    """Return the caption for ``record`` or ``None`` when there is nothing to print.

    Overflowing text is cut to a fixed 15 character prefix plus an ellipsis.
    The cut is not re-measured, so a wide prefix can still exceed ``max_width``.
    """
    if not field:
        return None
    text = value_text(record.get(field))
    if not text:
        return None
    if measure_width(text) > max_width:
        return f"{text[:CAPTION_PREFIX_CHARS]}{ELLIPSIS}"
    return text


__all__ = ["CAPTION_PREFIX_CHARS", "ELLIPSIS", "format_caption"]
