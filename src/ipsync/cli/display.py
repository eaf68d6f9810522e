"""ipsync CLI Display Components.

Rich-based rendering for IP address records and errors.
"""

from __future__ import annotations

from typing import Any

import yaml
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ipsync.sync.models import DesiredState, RemoteObject


class ResultRenderer:
    """Render reconciliation results with proper formatting.

    Handles:
    - IP address records (table)
    - Error messages
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def render_ip_address(self, remote: RemoteObject, title: str | None = None) -> None:
        """Render an IP address record as a two-column table."""
        table = Table(title=title or f"IP address {remote.resource_id}", show_header=False)
        table.add_column("field", style="bold cyan")
        table.add_column("value")

        binding = "-"
        if remote.assigned_object is not None:
            binding = f"{remote.assigned_object.type} #{remote.assigned_object.id}"

        rows: list[tuple[str, Any]] = [
            ("id", remote.id),
            ("address", remote.address),
            ("status", remote.status),
            ("role", remote.role or "-"),
            ("description", remote.description or "-"),
            ("dns_name", remote.dns_name or "-"),
            ("assigned_object", binding),
            ("tags", ", ".join(sorted(tag.name for tag in remote.tags)) or "-"),
        ]
        for field, value in rows:
            table.add_row(field, str(value))

        self.console.print(table)

    def render_error(self, message: str, details: str | None = None) -> None:
        """Render an error message."""
        content = f"[bold red]{message}[/bold red]"
        if details:
            content += f"\n\n[dim]{details}[/dim]"

        panel = Panel(
            content,
            title="[bold red]❌ Error[/bold red]",
            border_style="red",
        )
        self.console.print(panel)

    def render_success(self, message: str) -> None:
        self.console.print(f"[bold green]✅ {message}[/bold green]")

    def render_warning(self, message: str) -> None:
        self.console.print(f"[bold yellow]⚠️ {message}[/bold yellow]")


def to_yaml(desired: DesiredState) -> str:
    """Serialize a desired state with NetBox-style keys and sorted tags."""
    data: dict[str, Any] = {
        "ip_address": desired.address,
        "status": desired.status.value,
    }
    for key in ("role", "description", "dns_name", "interface_id"):
        value = getattr(desired, key)
        if value is not None:
            data[key] = value
    if desired.tags:
        data["tags"] = sorted(desired.tags)
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
