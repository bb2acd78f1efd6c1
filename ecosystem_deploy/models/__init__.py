# ecosystem_deploy/models/__init__.py
"""Data models for ecosystem-deploy"""

from .component import ComponentKind, AddressRef, LinkCheck, FactoryInvocation, ComponentSpec
from .manifest import TxReceipt, DeploymentResult, EcosystemManifest
from .config import DeployConfig

__all__ = [
    # Component models
    "ComponentKind",
    "AddressRef",
    "LinkCheck",
    "FactoryInvocation",
    "ComponentSpec",

    # Manifest models
    "TxReceipt",
    "DeploymentResult",
    "EcosystemManifest",

    # Config models
    "DeployConfig",
]
