"""CLI commands"""

from . import check
from . import deploy
from . import manifests

__all__ = [
    "check",
    "deploy",
    "manifests",
]
