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

import io
from pathlib import Path
from typing import Literal, Protocol

from fpdf import FPDF

from .layout import A4_PORTRAIT, PageSize

TextAlign = Literal["left", "center", "right"]

CAPTION_FONT_FAMILY = "helvetica"
CAPTION_FONT_SIZE = 8


class DocumentWriter(Protocol):
    def new_page(self) -> None: ...

    def draw_image(self, data: bytes, x: float, y: float, width: float, height: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, align: TextAlign = "left") -> None: ...

    def measure_text(self, text: str) -> float: ...

    def save(self, path: str | Path) -> None: ...


class FpdfDocumentWriter:
    """Millimetre-based PDF writer; pages are only added on request."""

    def __init__(
        self,
        page: PageSize = A4_PORTRAIT,
        *,
        font_family: str = CAPTION_FONT_FAMILY,
        font_size: float = CAPTION_FONT_SIZE,
    ) -> None:
        self.page = page
        self.pdf = FPDF(unit="mm", format=(page.width_mm, page.height_mm))
        self.pdf.set_auto_page_break(False)
        self.pdf.set_margin(0)
        self.pdf.set_font(font_family, size=font_size)

    @property
    def page_count(self) -> int:
        return self.pdf.page_no()

    def new_page(self) -> None:
        self.pdf.add_page()

    def draw_image(self, data: bytes, x: float, y: float, width: float, height: float) -> None:
        self._require_page()
        self.pdf.image(io.BytesIO(data), x=x, y=y, w=width, h=height)

    def draw_text(self, text: str, x: float, y: float, align: TextAlign = "left") -> None:
        self._require_page()
        text = _core_font_text(text)
        width = self.measure_text(text)
        if align == "center":
            x -= width / 2
        elif align == "right":
            x -= width
        self.pdf.text(x, y, text)

    def measure_text(self, text: str) -> float:
        return self.pdf.get_string_width(_core_font_text(text))

    def save(self, path: str | Path) -> None:
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        self.pdf.output(str(output))

    def _require_page(self) -> None:
        if self.pdf.page_no() == 0:
            raise RuntimeError("new_page() must be called before drawing")


def _core_font_text(text: str) -> str:
    # Core PDF fonts only cover latin-1.
    return text.encode("latin-1", "replace").decode("latin-1")


__all__ = [
    "CAPTION_FONT_FAMILY",
    "CAPTION_FONT_SIZE",
    "DocumentWriter",
    "FpdfDocumentWriter",
    "TextAlign",
]
