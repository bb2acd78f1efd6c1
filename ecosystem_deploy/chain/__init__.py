# ecosystem_deploy/chain/__init__.py
"""Chain clients for ecosystem-deploy

The ape adapter lives in ``chain.ape_client`` and is imported on demand,
since ape is an optional extra.
"""

from .base import ChainClient

__all__ = [
    'ChainClient',
]
