#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    generate as generate_command,
    manual as manual_command,
    preview as preview_command,
)


def register(app: typer.Typer) -> None:
    generate_command.register(app)
    preview_command.register(app)
    manual_command.register(app)
