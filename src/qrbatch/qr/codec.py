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
import math
from dataclasses import dataclass
from typing import Any

import segno
from PIL import Image

Color = str | tuple[int, int, int] | tuple[int, int, int, int] | None


@dataclass(frozen=True)
class QrConfig:
    error: str = "M"
    pixel_width: int = 200
    border: int = 0
    dark: Color = None
    light: Color = None


def make_qr(data: str, *, error: str = "M") -> Any:
    # The error level is a fixed policy; segno must not raise it on its own.
    return segno.make(data, error=error, micro=False, boost_error=False)


def qr_bytes(
    data: str,
    *,
    error: str = "M",
    pixel_width: int = 200,
    border: int = 0,
    dark: Color = None,
    light: Color = None,
) -> bytes:
    if pixel_width <= 0:
        raise ValueError("pixel_width must be a positive integer")
    if border < 0:
        raise ValueError("border cannot be negative")
    qr = make_qr(data, error=error)
    modules, _height = qr.symbol_size(scale=1, border=border)
    scale = max(1, math.ceil(pixel_width / modules))

    buf = io.BytesIO()
    qr.save(
        buf,
        kind="png",
        scale=scale,
        border=border,
        **_segno_color_kwargs(dark=dark, light=light),
    )
    buf.seek(0)
    with Image.open(buf) as image:
        if image.width == pixel_width:
            return buf.getvalue()
        resized = image.convert("RGBA").resize(
            (pixel_width, pixel_width), Image.Resampling.NEAREST
        )
    out = io.BytesIO()
    resized.save(out, format="PNG")
    return out.getvalue()


def rasterize(payload: str, config: QrConfig | None = None) -> bytes:
    config = config or QrConfig()
    return qr_bytes(
        payload,
        error=config.error,
        pixel_width=config.pixel_width,
        border=config.border,
        dark=config.dark,
        light=config.light,
    )


def _segno_color_kwargs(**values: object) -> dict[str, object]:
    style: dict[str, object] = {}
    for key, value in values.items():
        normalized = _normalize_color_value(value)
        if normalized is None:
            continue
        style[key] = normalized
    return style


def _normalize_color_value(value: object) -> object | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    return value


__all__ = ["QrConfig", "make_qr", "qr_bytes", "rasterize"]
