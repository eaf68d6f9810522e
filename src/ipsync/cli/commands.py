"""ipsync CLI - Main Entry Point.

Usage:
    ipsync apply ip.yaml              # Create from desired state
    ipsync apply ip.yaml --id 42      # Converge an existing IP address
    ipsync show 42                    # Show the NetBox record
    ipsync import 42 > ip.yaml        # Export desired state of an existing object
    ipsync delete 42                  # Delete
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from ipsync.backends.netbox import NetBoxClient
from ipsync.cli.display import ResultRenderer, to_yaml
from ipsync.core.settings import settings
from ipsync.sync.errors import IncompleteCreateError, IPSyncError
from ipsync.sync.models import DesiredState
from ipsync.sync.reconciler import IPAddressReconciler

# ============================================
# App Definition
# ============================================
app = typer.Typer(
    name="ipsync",
    help="Converge NetBox IP addresses to a declared desired state",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
renderer = ResultRenderer(console)

EXIT_ERROR = 1
EXIT_INVALID = 2

ResourceIdArgument = Annotated[str, typer.Argument(help="NetBox IP address id")]


@contextmanager
def _reconciler() -> Iterator[IPAddressReconciler]:
    """Reconciler bound to the configured NetBox instance; closes the client on exit."""
    with NetBoxClient.from_settings() as client:
        yield IPAddressReconciler(backend=client, tag_registry=client)


def _fail(message: str, details: str | None = None, code: int = EXIT_ERROR) -> typer.Exit:
    renderer.render_error(message, details)
    return typer.Exit(code)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def apply(
    file: Annotated[Path, typer.Argument(help="YAML desired state file")],
    resource_id: Annotated[
        str | None,
        typer.Option("--id", help="Existing IP address id to converge"),
    ] = None,
) -> None:
    """Create or update an IP address from a desired state file.

    Example:
        ipsync apply ip.yaml
        ipsync apply ip.yaml --id 42
    """
    try:
        desired = DesiredState.from_yaml(file)
    except FileNotFoundError as e:
        raise _fail(str(e), code=EXIT_INVALID)
    except ValueError as e:
        raise _fail(f"Invalid desired state in {file}", str(e), code=EXIT_INVALID)

    try:
        with _reconciler() as reconciler:
            remote = reconciler.apply(desired, resource_id)
    except IncompleteCreateError as e:
        raise _fail(
            f"IP address created as {e.resource_id} but not converged",
            f"{e.cause}\nRe-run with: ipsync apply {file} --id {e.resource_id}",
        )
    except IPSyncError as e:
        raise _fail("Apply failed", str(e))

    renderer.render_ip_address(remote)
    renderer.render_success(f"IP address {remote.resource_id} converged")


@app.command()
def show(resource_id: ResourceIdArgument) -> None:
    """Show the current NetBox record of an IP address."""
    try:
        with _reconciler() as reconciler:
            result = reconciler.read(resource_id)
    except IPSyncError as e:
        raise _fail("Read failed", str(e))

    if not result.found:
        renderer.render_warning(f"IP address {resource_id} does not exist")
        raise typer.Exit(EXIT_ERROR)

    renderer.render_ip_address(result.remote)


@app.command("import")
def import_cmd(resource_id: ResourceIdArgument) -> None:
    """Print the desired state of an existing IP address as YAML."""
    try:
        with _reconciler() as reconciler:
            desired = reconciler.import_resource(resource_id)
    except (IPSyncError, ValidationError) as e:
        raise _fail("Import failed", str(e))

    if desired is None:
        renderer.render_warning(f"IP address {resource_id} does not exist")
        raise typer.Exit(EXIT_ERROR)

    typer.echo(to_yaml(desired), nl=False)


@app.command()
def delete(
    resource_id: ResourceIdArgument,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation"),
    ] = False,
) -> None:
    """Delete an IP address from NetBox."""
    if not yes:
        typer.confirm(f"Delete IP address {resource_id}?", abort=True)

    try:
        with _reconciler() as reconciler:
            reconciler.delete(resource_id)
    except IPSyncError as e:
        raise _fail("Delete failed", str(e))

    renderer.render_success(f"IP address {resource_id} deleted")
