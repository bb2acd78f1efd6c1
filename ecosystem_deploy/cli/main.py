# ecosystem_deploy/cli/main.py
"""Main CLI entry point for ecosystem-deploy"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT
from ..models.config import DeployConfig
from ..services.config_service import ConfigService

# Import all commands
from .commands import check, deploy, manifests

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("ape").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, project_root: Optional[Path] = None):
        self.project_root: Path = project_root or Path.cwd()
        self.verbose: bool = False
        self.debug: bool = False
        self._config_service: Optional[ConfigService] = None

    @property
    def config_service(self) -> ConfigService:
        """Get config service (lazy loading)"""
        if self._config_service is None:
            self._config_service = ConfigService(self.project_root)
        return self._config_service

    def load_config(self, overrides: Optional[Dict[str, Any]] = None) -> DeployConfig:
        """Load effective configuration with command-line overrides"""
        return self.config_service.load(overrides)


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--project-root', type=click.Path(file_okay=False, path_type=Path),
              help='Directory holding .ecosystem-deploy.yaml (default: current directory)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root):
    """Ecosystem Deploy - deploy, verify and record on-chain ecosystems

    Components of a registry are deployed strictly in order, the factory
    bundle is wired and verified, and the resulting addresses are recorded
    per network for later use.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(project_root)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(manifests.show)
cli.add_command(manifests.list_manifests)
cli.add_command(check.check)


def main():
    """Main entry point for the CLI application"""
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
