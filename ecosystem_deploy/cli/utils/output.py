# ecosystem_deploy/cli/utils/output.py
"""Output formatting utilities"""

from typing import Any, List, Optional

import yaml
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ...api.exceptions import (
    DeploymentFailedError,
    EcosystemDeployError,
    ManifestIOError,
    UnresolvedReferenceError,
    VerificationError,
)
from ...constants import (
    MSG_COMPONENT_DEPLOYED,
    MSG_COMPONENT_EXISTING,
    MSG_COMPONENT_PRODUCED,
    MSG_LINK_VERIFIED,
)
from ...core.validation_engine import ValidationResult
from ...core.verifier import VerificationReport
from ...models.component import ComponentKind
from ...models.manifest import DeploymentResult, EcosystemManifest

console = Console()


def format_step(result: DeploymentResult, factory: Optional[str] = None) -> None:
    """Print one recorded deployment step"""
    if result.kind == ComponentKind.EXISTING:
        message = MSG_COMPONENT_EXISTING.format(name=result.name, address=result.address)
    elif result.kind == ComponentKind.PRODUCED:
        message = MSG_COMPONENT_PRODUCED.format(
            name=result.name, factory=factory or "factory", address=result.address
        )
    else:
        message = MSG_COMPONENT_DEPLOYED.format(name=result.name, address=result.address)
    console.print(f"[green]{message}[/green]")


def format_verification_report(report: Optional[VerificationReport]) -> None:
    """Print verified links"""
    if report is None or not report.verified:
        console.print("[dim]No link checks declared[/dim]")
        return

    for link in report.verified:
        console.print(MSG_LINK_VERIFIED.format(
            component=link.check.component,
            query=link.check.query,
            expected=link.check.expected
        ))


def format_manifest(manifest: EcosystemManifest, title: Optional[str] = None) -> None:
    """Format and display a manifest as a table"""
    table = Table(title=title or f"Network {manifest.network_id}", box=box.ROUNDED)
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Kind", style="dim")
    table.add_column("Address", style="green")
    table.add_column("Tx", style="dim")
    table.add_column("Block", justify="right", style="dim")

    for name, result in manifest.components.items():
        receipt = result.receipt
        table.add_row(
            name,
            result.kind.value,
            result.address,
            receipt.tx_hash if receipt else "-",
            str(receipt.block_number) if receipt and receipt.block_number is not None else "-"
        )

    console.print(table)
    console.print(f"[dim]Deployer: {manifest.deployer}  Registry: {manifest.registry or '-'}  "
                  f"Recorded: {manifest.created_at}[/dim]")


def format_yaml(data: Any, title: Optional[str] = None) -> None:
    """Format and display YAML data with syntax highlighting"""
    yaml_str = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    syntax = Syntax(yaml_str, "yaml", theme="monokai", line_numbers=False)

    if title:
        console.print(Panel(syntax, title=title, border_style="blue"))
    else:
        console.print(syntax)


def format_network_list(networks: List[str]) -> None:
    """Format and display recorded networks"""
    if not networks:
        console.print("[yellow]No manifests found[/yellow]")
        return

    table = Table(title="Recorded Manifests", box=box.SIMPLE)
    table.add_column("Network", style="cyan")
    for network_id in networks:
        table.add_row(network_id)
    console.print(table)


def format_validation(result: ValidationResult) -> None:
    """Format and display a registry validation result"""
    for error in result.errors:
        console.print(f"  [red]✗ {error}[/red]")
    for warning in result.warnings:
        console.print(f"  [yellow]⚠ {warning}[/yellow]")
    if result.is_valid:
        console.print("[green]✓ Registry is consistent[/green]")


def format_error(error: EcosystemDeployError) -> None:
    """Display a run-aborting error with the failing component and check"""
    lines = [f"[red]✗ {error}[/red]"]

    if isinstance(error, (DeploymentFailedError, UnresolvedReferenceError)):
        lines.append("")
        lines.append(f"[bold]Component:[/bold] {error.component}")
    elif isinstance(error, VerificationError):
        lines.append("")
        lines.append(f"[bold]Component:[/bold] {error.component}")
        if error.query:
            lines.append(f"[bold]Check:[/bold] {error.component}.{error.query}()")
        lines.append(f"[bold]Expected:[/bold] {error.expected_address}")
        if error.reason is not None:
            lines.append(f"[bold]Query failed:[/bold] {error.reason}")
        else:
            lines.append(f"[bold]Actual:[/bold] {error.actual_address}")

    if isinstance(error, (DeploymentFailedError, UnresolvedReferenceError,
                          VerificationError, ManifestIOError)):
        lines.append("")
        lines.append("[yellow]No manifest was recorded. Components confirmed before the "
                     "failure remain on-chain; inspect chain state before retrying.[/yellow]")

    if error.error_code:
        lines.append(f"[dim]{error.error_code}[/dim]")

    console.print(Panel("\n".join(lines), title="Deploy Error", border_style="red"))
