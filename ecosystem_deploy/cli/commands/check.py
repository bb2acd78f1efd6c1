"""Registry check command"""

import sys

import click

from ..utils.output import console, format_validation
from ...api.exceptions import EcosystemDeployError
from ...core import ComponentRegistry


@click.command()
@click.option('--registry', help='Registry file, or name of a bundled registry')
@click.pass_context
def check(ctx, registry):
    """Check a registry for ordering and reference problems

    No chain access is needed. Deployment does not run this check itself;
    run it before deploying a hand-edited registry.
    """
    try:
        config = ctx.obj.load_config({'registry': registry})
        path = config.resolve_registry(ctx.obj.project_root)
        component_registry = ComponentRegistry.from_file(path)
    except EcosystemDeployError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    console.print(f"[bold]{component_registry.name}[/bold] ({path})")
    for index, name in enumerate(component_registry.produced_names(), 1):
        console.print(f"  {index}. {name}")

    result = component_registry.validate()
    format_validation(result)

    if not result.is_valid:
        sys.exit(1)
