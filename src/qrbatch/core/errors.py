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


class QrBatchError(Exception):
    """Base class for qrbatch failures."""


class FieldNameError(QrBatchError, ValueError):
    pass


class IngestError(QrBatchError, ValueError):
    pass


class RasterizationError(QrBatchError, RuntimeError):
    def __init__(self, record_index: int, cause: BaseException) -> None:
        super().__init__(f"failed to render QR code for record {record_index + 1}: {cause}")
        self.record_index = record_index


class GenerationInProgressError(QrBatchError, RuntimeError):
    pass


__all__ = [
    "FieldNameError",
    "GenerationInProgressError",
    "IngestError",
    "QrBatchError",
    "RasterizationError",
]
