#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Literal, TextIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

StreamName = Literal["stdout", "stderr"]

THEME = Theme(
    {
        "accent": "cyan",
        "subtitle": "dim",
        "muted": "dim",
        "hint": "italic dim",
        "rule": "blue",
        "success": "green",
    }
)


def stream_is_terminal(name: StreamName) -> bool:
    """Whether stdout or stderr is a terminal; the interpreter's original stream wins."""
    original: TextIO | None = getattr(sys, f"__{name}__")
    current: TextIO | None = getattr(sys, name)
    for stream in (original, current):
        if stream is None:
            continue
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return False


@dataclass
class UIContext:
    console: Console
    console_err: Console
    animations_enabled: bool = True

    def apply(self, *, no_color: bool, no_animations: bool) -> None:
        self.animations_enabled = not no_animations
        for output in (self.console, self.console_err):
            output.no_color = no_color


def _console(name: StreamName) -> Console:
    return Console(
        stderr=name == "stderr",
        theme=THEME,
        force_terminal=stream_is_terminal(name),
    )


DEFAULT_CONTEXT = UIContext(console=_console("stdout"), console_err=_console("stderr"))


def get_context() -> UIContext:
    return DEFAULT_CONTEXT


def hint_text(help_text: str) -> Text:
    return Text.assemble(("Tip: ", "muted"), (help_text, "hint"))
