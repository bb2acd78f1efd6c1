"""Exception definitions for ecosystem-deploy"""

from typing import Optional

from ..constants import ErrorCode


class EcosystemDeployError(Exception):
    """Base exception for ecosystem-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class RegistryError(EcosystemDeployError):
    """Malformed or inconsistent component registry"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.REGISTRY_INVALID)


class UnresolvedReferenceError(EcosystemDeployError):
    """A component references an address that has not been produced yet"""

    def __init__(self, component: str, reference: str):
        message = (
            f"Unresolved reference in {component}: {reference} "
            f"(not deployed earlier in the registry)"
        )
        super().__init__(message, ErrorCode.UNRESOLVED_REFERENCE)
        self.component = component
        self.reference = reference


class DeploymentFailedError(EcosystemDeployError):
    """The network rejected or reverted a deployment or invocation"""

    def __init__(self, component: str, reason: str):
        message = f"Deployment of {component} failed: {reason}"
        super().__init__(message, ErrorCode.DEPLOYMENT_FAILED)
        self.component = component
        self.reason = reason


class VerificationError(EcosystemDeployError):
    """A deployed component records a different sibling address than expected"""

    def __init__(self, component: str, expected_address: str, actual_address: Optional[str],
                 query: Optional[str] = None, reason: Optional[str] = None):
        target = f"{component}.{query}()" if query else component
        if reason is not None:
            message = f"Verification failed for {target}: query failed: {reason}"
        else:
            message = (
                f"Verification failed for {target}: "
                f"expected {expected_address}, got {actual_address}"
            )
        super().__init__(message, ErrorCode.VERIFICATION_FAILED)
        self.component = component
        self.expected_address = expected_address
        self.actual_address = actual_address
        self.query = query
        self.reason = reason


class ManifestIOError(EcosystemDeployError):
    """Manifest could not be persisted or loaded"""

    def __init__(self, message: str, network_id: Optional[str] = None):
        super().__init__(message, ErrorCode.MANIFEST_IO_FAILED)
        self.network_id = network_id


class ManifestNotFoundError(EcosystemDeployError):
    """No manifest recorded for a network"""

    def __init__(self, network_id: str):
        super().__init__(f"No manifest recorded for network: {network_id}",
                         ErrorCode.MANIFEST_NOT_FOUND)
        self.network_id = network_id


class ConfigError(EcosystemDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class TransactionRejectedError(EcosystemDeployError):
    """Raised by chain clients when the network rejects a transaction"""

    def __init__(self, reason: str):
        super().__init__(reason, ErrorCode.TRANSACTION_REJECTED)
        self.reason = reason
