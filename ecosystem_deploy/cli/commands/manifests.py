"""Manifest inspection commands"""

import sys

import click

from ..utils.output import console, format_manifest, format_network_list, format_yaml
from ...api.exceptions import EcosystemDeployError, ManifestNotFoundError
from ...core import ManifestWriter


def _writer(ctx, manifests_dir) -> ManifestWriter:
    config = ctx.obj.load_config({'manifests_dir': manifests_dir})
    return ManifestWriter(config.resolve_manifests_dir(ctx.obj.project_root))


@click.command()
@click.argument('network_id')
@click.option('--manifests-dir', help='Directory for per-network manifests')
@click.option('--format', 'output_format', type=click.Choice(['table', 'yaml']),
              default='table', help='Output format')
@click.pass_context
def show(ctx, network_id, manifests_dir, output_format):
    """Show the manifest recorded for a network

    Example:
        ecosystem-deploy show 296 --format yaml
    """
    try:
        manifest = _writer(ctx, manifests_dir).read(network_id)

        if output_format == 'yaml':
            format_yaml(manifest.to_dict(), title=f"Network {network_id}")
        else:
            format_manifest(manifest)

    except ManifestNotFoundError as e:
        console.print(f"[yellow]{e}[/yellow]")
        sys.exit(1)
    except EcosystemDeployError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.command(name='list')
@click.option('--manifests-dir', help='Directory for per-network manifests')
@click.pass_context
def list_manifests(ctx, manifests_dir):
    """List networks with a recorded manifest"""
    try:
        format_network_list(_writer(ctx, manifests_dir).list_networks())
    except EcosystemDeployError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
