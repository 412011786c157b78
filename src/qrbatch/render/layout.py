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

import math
from collections.abc import Sequence
from dataclasses import dataclass

# Vertical space reserved below each code for a one-line caption.
CAPTION_ALLOWANCE_MM = 8.0


@dataclass(frozen=True)
class PageSize:
    width_mm: float
    height_mm: float


A4_PORTRAIT = PageSize(210.0, 297.0)


@dataclass(frozen=True)
class LayoutConfig:
    code_size_mm: float = 35.0
    gap_mm: float = 5.0
    margin_mm: float = 10.0
    show_caption: bool = True
    caption_field: str | None = None

    def __post_init__(self) -> None:
        for name in ("code_size_mm", "gap_mm", "margin_mm"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number")
        if not self.code_size_mm > 0:
            raise ValueError("code size must be a positive number")
        if self.gap_mm < 0:
            raise ValueError("gap cannot be negative")
        if self.margin_mm < 0:
            raise ValueError("margin cannot be negative")


@dataclass(frozen=True)
class Placement:
    record_index: int
    page_index: int
    x: float
    y: float


@dataclass(frozen=True)
class PageGeometry:
    content_width: float
    columns: int
    x_offset: float
    item_height: float


def calc_columns(content_width: float, cell: float, gap: float) -> int:
    count = math.floor(content_width / (cell + gap))
    return max(1, count)


def compute_geometry(config: LayoutConfig, page: PageSize = A4_PORTRAIT) -> PageGeometry:
    margin = float(config.margin_mm)
    code_size = float(config.code_size_mm)
    gap = float(config.gap_mm)

    content_width = page.width_mm - 2 * margin
    columns = calc_columns(content_width, code_size, gap)
    row_width = columns * code_size + (columns - 1) * gap
    x_offset = margin + (content_width - row_width) / 2
    item_height = code_size + (CAPTION_ALLOWANCE_MM if config.show_caption else 0.0)
    return PageGeometry(
        content_width=content_width,
        columns=columns,
        x_offset=x_offset,
        item_height=item_height,
    )


def compute_layout(
    record_count: int,
    config: LayoutConfig,
    page: PageSize = A4_PORTRAIT,
) -> tuple[Placement, ...]:
    if record_count < 0:
        raise ValueError("record count cannot be negative")
    geometry = compute_geometry(config, page)
    margin = float(config.margin_mm)
    code_size = float(config.code_size_mm)
    gap = float(config.gap_mm)
    bottom = page.height_mm - margin

    placements: list[Placement] = []
    page_index = 0
    current_x = geometry.x_offset
    current_y = margin
    items_on_page = 0
    for index in range(record_count):
        # A page always takes its first item, even one taller than the page.
        if items_on_page > 0 and current_y + geometry.item_height > bottom:
            page_index += 1
            current_x = geometry.x_offset
            current_y = margin
            items_on_page = 0

        placements.append(Placement(index, page_index, current_x, current_y))

        items_on_page += 1
        if items_on_page % geometry.columns == 0:
            current_x = geometry.x_offset
            current_y += geometry.item_height + gap
        else:
            current_x += code_size + gap
    return tuple(placements)


def page_count(placements: Sequence[Placement]) -> int:
    if not placements:
        return 0
    return 1 + max(placement.page_index for placement in placements)


__all__ = [
    "A4_PORTRAIT",
    "CAPTION_ALLOWANCE_MM",
    "LayoutConfig",
    "PageGeometry",
    "PageSize",
    "Placement",
    "calc_columns",
    "compute_geometry",
    "compute_layout",
    "page_count",
]
