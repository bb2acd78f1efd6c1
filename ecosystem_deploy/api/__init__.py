"""Public API for ecosystem-deploy"""

from .exceptions import (
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
