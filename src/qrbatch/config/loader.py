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
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from ..qr.codec import QrConfig
from ..render.assembler import DEFAULT_OUTPUT_FILENAME
from ..render.layout import LayoutConfig

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config/default.toml"
_QR_ERROR_LEVELS = frozenset({"L", "M", "Q", "H"})


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    qr_config: QrConfig = field(default_factory=QrConfig)
    output_filename: str = DEFAULT_OUTPUT_FILENAME
    render_jobs: int | Literal["auto"] | None = None
    ui: UiDefaults = field(default_factory=UiDefaults)


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is None:
        return DEFAULT_CONFIG_PATH
    resolved = Path(path).expanduser()
    if not resolved.exists():
        raise FileNotFoundError(f"config file not found: {resolved}")
    return resolved


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    output_cfg = _get_dict(data, "output")
    filename = _parse_optional_str(output_cfg.get("filename"), field="output.filename")
    return AppConfig(
        layout=build_layout_config(_get_dict(data, "layout")),
        qr_config=build_qr_config(_get_dict(data, "qr")),
        output_filename=filename or DEFAULT_OUTPUT_FILENAME,
        render_jobs=_parse_optional_render_jobs(
            _get_dict(data, "runtime").get("render_jobs"),
            field="runtime.render_jobs",
        ),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def build_layout_config(cfg: dict[str, object] | None = None) -> LayoutConfig:
    cfg = cfg or {}
    defaults = LayoutConfig()
    code_size = _parse_float(cfg.get("code_size_mm"), field="layout.code_size_mm")
    gap = _parse_float(cfg.get("gap_mm"), field="layout.gap_mm")
    margin = _parse_float(cfg.get("margin_mm"), field="layout.margin_mm")
    if code_size is not None and code_size <= 0:
        raise ValueError("layout.code_size_mm must be a positive number")
    if gap is not None and gap < 0:
        raise ValueError("layout.gap_mm cannot be negative")
    if margin is not None and margin < 0:
        raise ValueError("layout.margin_mm cannot be negative")
    return LayoutConfig(
        code_size_mm=defaults.code_size_mm if code_size is None else code_size,
        gap_mm=defaults.gap_mm if gap is None else gap,
        margin_mm=defaults.margin_mm if margin is None else margin,
        show_caption=_parse_bool(
            cfg.get("show_caption"), field="layout.show_caption", default=defaults.show_caption
        ),
        caption_field=_parse_optional_str(cfg.get("caption_field"), field="layout.caption_field"),
    )


def build_qr_config(cfg: dict[str, object] | None = None) -> QrConfig:
    cfg = cfg or {}
    defaults = QrConfig()
    error = _parse_optional_str(cfg.get("error"), field="qr.error")
    error = (error or defaults.error).upper()
    if error not in _QR_ERROR_LEVELS:
        raise ValueError("qr.error must be one of L, M, Q, H")
    pixel_width = _parse_optional_int(cfg.get("pixel_width"), field="qr.pixel_width")
    if pixel_width is not None and pixel_width <= 0:
        raise ValueError("qr.pixel_width must be a positive integer")
    border = _parse_optional_int(cfg.get("border"), field="qr.border")
    if border is not None and border < 0:
        raise ValueError("qr.border cannot be negative")
    return QrConfig(
        error=error,
        pixel_width=defaults.pixel_width if pixel_width is None else pixel_width,
        border=defaults.border if border is None else border,
        dark=_parse_color(cfg.get("dark")),
        light=_parse_color(cfg.get("light")),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{field} must be a boolean")


def _parse_float(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    else:
        raise ValueError(f"{field} must be a number")
    if not math.isfinite(parsed):
        raise ValueError(f"{field} must be a finite number")
    return parsed


def _parse_optional_int(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    return _parse_int_strict(value, field=field)


def _parse_optional_render_jobs(
    value: object,
    *,
    field: str,
) -> int | Literal["auto"] | None:
    if value is None:
        return None
    if isinstance(value, str):
        normalized = value.strip().lower()
        if not normalized:
            return None
        if normalized == "auto":
            return "auto"
        parsed = _parse_int_strict(normalized, field=field)
    else:
        parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be 'auto' or a positive integer")
    return parsed


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_color(value: object) -> str | tuple[int, int, int] | tuple[int, int, int, int] | None:
    if value is None:
        return None
    if isinstance(value, str):
        if value.strip().lower() in ("", "none", "transparent"):
            return None
        return value
    if isinstance(value, (list, tuple)):
        if len(value) == 3:
            return (int(value[0]), int(value[1]), int(value[2]))
        if len(value) == 4:
            return (int(value[0]), int(value[1]), int(value[2]), int(value[3]))
    return None


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "UiDefaults",
    "build_layout_config",
    "build_qr_config",
    "load_app_config",
    "resolve_config_path",
]
