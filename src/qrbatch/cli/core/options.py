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

import typer

CODE_SIZE_OPTION = typer.Option(
    None,
    "--code-size",
    min=0.1,
    help="QR code edge length in mm (default from config: 35).",
    rich_help_panel="Layout",
)
GAP_OPTION = typer.Option(
    None,
    "--gap",
    min=0.0,
    help="Gap between codes in mm (default from config: 5).",
    rich_help_panel="Layout",
)
MARGIN_OPTION = typer.Option(
    None,
    "--margin",
    min=0.0,
    help="Page margin in mm (default from config: 10).",
    rich_help_panel="Layout",
)
CAPTION_OPTION = typer.Option(
    None,
    "--caption/--no-caption",
    help="Print a one-line label under each code.",
    rich_help_panel="Layout",
)
CAPTION_FIELD_OPTION = typer.Option(
    None,
    "--caption-field",
    help="Field used for the label (defaults to the first column).",
    rich_help_panel="Layout",
)
OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help="Output PDF path (default from config: bulk-qr-codes.pdf).",
    rich_help_panel="Outputs",
)
