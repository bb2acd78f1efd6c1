"""Ecosystem Deploy - ordered deployment of on-chain component ecosystems.

Components of a registry are deployed in dependency order, a factory wires
the interdependent bundle, the wiring is verified on-chain, and the verified
addresses are recorded per network.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .core import (
    ComponentRegistry,
    DeploymentSequencer,
    InvariantVerifier,
    ManifestWriter,
)
from .chain import ChainClient

# Data models
from .models import (
    AddressRef,
    ComponentKind,
    ComponentSpec,
    DeployConfig,
    DeploymentResult,
    EcosystemManifest,
    FactoryInvocation,
    LinkCheck,
    TxReceipt,
)

# Exceptions
from .api.exceptions import (
    EcosystemDeployError,
    RegistryError,
    UnresolvedReferenceError,
    DeploymentFailedError,
    VerificationError,
    ManifestIOError,
    ManifestNotFoundError,
    ConfigError,
    TransactionRejectedError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "ComponentRegistry",
    "DeploymentSequencer",
    "InvariantVerifier",
    "ManifestWriter",
    "ChainClient",

    # Data models
    "AddressRef",
    "ComponentKind",
    "ComponentSpec",
    "DeployConfig",
    "DeploymentResult",
    "EcosystemManifest",
    "FactoryInvocation",
    "LinkCheck",
    "TxReceipt",

    # Exceptions
    "EcosystemDeployError",
    "RegistryError",
    "UnresolvedReferenceError",
    "DeploymentFailedError",
    "VerificationError",
    "ManifestIOError",
    "ManifestNotFoundError",
    "ConfigError",
    "TransactionRejectedError",
]
