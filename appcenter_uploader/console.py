"""Console rendering helpers for the appcenter-upload CLI."""
from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import UploadRequest

console = Console()

_SECRET_FIELDS = {"token"}


class ConsoleSink:
    """
    Sink printing progress lines to a rich console.

    Implements ILogSink protocol.
    """

    def __init__(self, target: Optional[Console] = None, prefix: str = "appcenter "):
        self._console = target or console
        self._prefix = prefix

    def write(self, line: str) -> None:
        self._console.print(Text.assemble((self._prefix, "dim"), line), highlight=False)


def _mask(value: str) -> str:
    if len(value) <= 8:
        return "****"
    return f"{value[:4]}...{value[-4:]}"


def _grid(rows: Dict[str, Any]) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column(style="white")
    for key, value in rows.items():
        rendered = "-" if value is None else str(value)
        table.add_row(key, Text(rendered))
    return table


def render_configuration_summary(config: Dict[str, Any], target: Optional[Console] = None) -> None:
    """Render startup configuration summary."""
    panel = Panel(
        _grid(config),
        title="[bold green]appcenter-upload[/bold green]",
        subtitle="[dim]upload resources[/dim]",
        border_style="blue",
    )
    (target or console).print(panel)


def upload_request_rows(request: UploadRequest, show_secrets: bool = False) -> Dict[str, Any]:
    """Flatten a snapshot for display, masking the upload token."""
    rows: Dict[str, Any] = {}
    for f in fields(request):
        value = getattr(request, f.name)
        if f.name in _SECRET_FIELDS and value and not show_secrets:
            value = _mask(value)
        elif f.name == "symbol_upload_request" and value is not None:
            value = value.symbol_type.value
        elif f.name == "destination_groups":
            value = ", ".join(value) if value else None
        rows[f.name] = value
    return rows


def render_upload_request(
    request: UploadRequest,
    show_secrets: bool = False,
    target: Optional[Console] = None,
) -> None:
    """Render the resulting upload request snapshot."""
    panel = Panel(
        _grid(upload_request_rows(request, show_secrets)),
        title="[bold green]Upload resources[/bold green]",
        border_style="green",
    )
    (target or console).print(panel)
