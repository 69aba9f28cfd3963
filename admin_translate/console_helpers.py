"""Rich console output for the command line.

Exposes ``rprint`` and ``summary_panel`` as the only places that talk to Rich,
so the rest of the code base stays free of terminal concerns.

Canonical Usage
---------------
>>> from admin_translate.console_helpers import rprint
>>> rprint("Rendered 2 forms")
Rendered 2 forms
"""

from __future__ import annotations

from typing import IO, Any

from rich.console import Console
from rich.panel import Panel


def rprint(*objects: Any, sep: str = " ", end: str = "\n", file: IO[str] | None = None) -> None:
    """Print objects through Rich; ``file`` defaults to stdout."""
    Console(file=file, highlight=False, markup=False).print(*objects, sep=sep, end=end)


def summary_panel(message: str, *, ok: bool = True) -> Panel:
    """Wrap a run summary in a green (success) or red (failure) panel."""
    return Panel(message, border_style="green" if ok else "red", expand=False)
