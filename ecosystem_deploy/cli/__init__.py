"""Command-line interface for ecosystem-deploy"""

from .main import cli, main

__all__ = ['cli', 'main']
