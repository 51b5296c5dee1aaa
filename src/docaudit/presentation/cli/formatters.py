"""Rich formatting utilities for the CLI.

All terminal rendering lives here; nothing in this module knows about
rules or probing.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from docaudit.domain.models.enums import Verdict
from docaudit.domain.models.links import LinkResult

# Report lines must stay one per line, whatever the terminal width.
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)
# --color always emits ANSI codes, also into pipes and captured output.
color_console = Console(
    highlight=False,
    soft_wrap=True,
    force_terminal=True,
    color_system="standard",
    no_color=False,
)

_VERDICT_STYLES = {
    Verdict.REACHABLE: "bold green",
    Verdict.UNREACHABLE: "bold red",
    Verdict.IGNORED: "bold yellow",
}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(*, debug: bool = False) -> None:
    """Send docaudit log records to standard error through Rich."""
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger("docaudit")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_path=False, show_time=debug)
    handler.setLevel(level)
    logger.addHandler(handler)


# ---------------------------------------------------------------------------
# Plain lines / errors
# ---------------------------------------------------------------------------


def print_line(line: str) -> None:
    """Print a report line verbatim (no markup interpretation)."""
    console.print(line, markup=False)


def error_message(prog: str, message: str) -> None:
    """Print ``prog: message`` to standard error."""
    err_console.print(f"{prog}: {message}", markup=False)


# ---------------------------------------------------------------------------
# Link results
# ---------------------------------------------------------------------------


def link_line(result: LinkResult, *, color: bool = False) -> Text:
    """Render ``FAILED: <url>`` with an optionally coloured tag."""
    style = _VERDICT_STYLES[result.verdict] if color else ""
    return Text.assemble((f"{result.verdict.label}:", style), " ", result.url)


def print_link(result: LinkResult, *, color: bool = False) -> None:
    target = color_console if color else console
    target.print(link_line(result, color=color))


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "docaudit configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


def success_panel(message: str, title: str = "docaudit") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))
