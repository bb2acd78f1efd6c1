"""Deploy command implementation"""

import sys
from contextlib import AbstractContextManager
from typing import Dict

import click
from rich.prompt import Confirm

from ..utils.output import (
    console,
    format_error,
    format_manifest,
    format_step,
    format_verification_report,
)
from ...api.exceptions import ConfigError, EcosystemDeployError
from ...chain.base import ChainClient
from ...constants import EMOJI_WARNING, PROMPT_CONFIRM_DEPLOY
from ...core import ComponentRegistry, DeploymentSequencer, ManifestWriter
from ...models.config import DeployConfig
from ...models.manifest import DeploymentResult


def open_chain_client(config: DeployConfig) -> 'AbstractContextManager[ChainClient]':
    """Connect the chain client described by the configuration"""
    try:
        from ...chain.ape_client import ApeChainClient
    except ImportError as e:
        raise ConfigError(
            f"Chain access requires the ape extra: pip install 'ecosystem-deploy[ape]' ({e})"
        ) from e
    return ApeChainClient.connect(config.network, config.account)


@click.command()
@click.option('--registry', help='Registry file, or name of a bundled registry')
@click.option('--network', help='Network choice, e.g. ethereum:sepolia:alchemy')
@click.option('--account', help='Account alias used to sign transactions')
@click.option('--manifests-dir', help='Directory for per-network manifests')
@click.option('--no-confirm', is_flag=True, help='Skip confirmation prompt')
@click.pass_context
def deploy(ctx, registry, network, account, manifests_dir, no_confirm):
    """Deploy a registry, verify its links and record the manifest

    Components are deployed strictly in registry order. Every deployment is
    a real transaction: rerunning creates new instances. On any failure the
    run stops and no manifest is written.

    Examples:

        # Deploy the bundled Lendyrium registry to a local node
        ecosystem-deploy deploy

        # Deploy a custom registry to a testnet
        ecosystem-deploy deploy --registry registry.yaml \\
            --network ethereum:sepolia:alchemy --account deployer
    """
    try:
        config = ctx.obj.load_config({
            'registry': registry,
            'network': network,
            'account': account,
            'manifests_dir': manifests_dir,
        })
        project_root = ctx.obj.project_root

        component_registry = ComponentRegistry.from_file(config.resolve_registry(project_root))
        writer = ManifestWriter(config.resolve_manifests_dir(project_root))

        factories: Dict[str, str] = {}
        for spec in component_registry:
            if spec.invocation:
                for output in spec.invocation.outputs:
                    factories[output] = spec.name

        def on_step(result: DeploymentResult) -> None:
            format_step(result, factories.get(result.name))

        sequencer = DeploymentSequencer(writer=writer, on_step=on_step)

        with open_chain_client(config) as client:
            network_id = str(client.current_network_id())

            if writer.exists(network_id):
                console.print(
                    f"[yellow]{EMOJI_WARNING} A manifest for network {network_id} exists "
                    f"and will be replaced[/yellow]"
                )

            if not no_confirm:
                prompt = PROMPT_CONFIRM_DEPLOY.format(
                    registry=component_registry.name,
                    network=f"{config.network} ({network_id})",
                    account=client.deployer_address()
                )
                if not Confirm.ask(f"[cyan]{prompt}[/cyan]"):
                    console.print("[yellow]Deployment cancelled[/yellow]")
                    return

            console.print(f"\n[cyan]Deploying {component_registry.name} to {network_id}...[/cyan]")
            manifest = sequencer.run(component_registry, client)

        console.print("\n[bold]Verification:[/bold]")
        format_verification_report(sequencer.last_report)

        console.print()
        format_manifest(manifest, title="Deployed Ecosystem")
        console.print(f"\n[green]✓ Manifest written to {writer.path_for(manifest.network_id)}[/green]")

    except EcosystemDeployError as e:
        format_error(e)
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Deployment interrupted; inspect chain state before retrying[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        if ctx.obj.debug:
            console.print_exception()
        sys.exit(1)
