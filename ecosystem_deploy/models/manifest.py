# ecosystem_deploy/models/manifest.py
"""Deployment result and manifest models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .component import ComponentKind
from ..constants import MANIFEST_VERSION


@dataclass(frozen=True)
class TxReceipt:
    """Confirmation record of a transaction"""
    tx_hash: str
    block_number: Optional[int] = None
    status: bool = True
    reason: Optional[str] = None  # Revert reason, when the client reports one

    @property
    def succeeded(self) -> bool:
        return self.status

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'tx_hash': self.tx_hash,
            'block_number': self.block_number,
            'status': self.status
        }
        if self.reason is not None:
            data['reason'] = self.reason
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TxReceipt':
        """Create from dictionary"""
        return cls(
            tx_hash=data['tx_hash'],
            block_number=data.get('block_number'),
            status=data.get('status', True),
            reason=data.get('reason')
        )


@dataclass(frozen=True)
class DeploymentResult:
    """Address and receipt of one confirmed component"""
    name: str
    address: str
    kind: ComponentKind = ComponentKind.STANDALONE
    receipt: Optional[TxReceipt] = None  # None for pinned (existing) components
    contract: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'address': self.address,
            'kind': self.kind.value
        }
        if self.contract is not None:
            data['contract'] = self.contract
        if self.receipt is not None:
            data['receipt'] = self.receipt.to_dict()
        return data

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> 'DeploymentResult':
        """Create from dictionary"""
        if not isinstance(data, dict):
            raise ValueError(f"component {name} must be a mapping, got {type(data).__name__}")

        receipt = None
        if data.get('receipt') is not None:
            receipt = TxReceipt.from_dict(data['receipt'])

        return cls(
            name=name,
            address=data['address'],
            kind=ComponentKind.from_string(data.get('kind', ComponentKind.STANDALONE.value)),
            receipt=receipt,
            contract=data.get('contract')
        )


def _utc_now() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def _mapping(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    if key not in data:
        return {}
    value = data[key]
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a mapping, got {type(value).__name__}")
    return value


@dataclass
class EcosystemManifest:
    """Verified address set of one ecosystem on one network"""
    network_id: str
    deployer: str
    components: Dict[str, DeploymentResult] = field(default_factory=dict)
    registry: Optional[str] = None
    created_at: str = field(default_factory=_utc_now)
    manifest_version: str = MANIFEST_VERSION

    @property
    def addresses(self) -> Dict[str, str]:
        """Component name to address mapping"""
        return {name: result.address for name, result in self.components.items()}

    def get_address(self, name: str) -> Optional[str]:
        """Get address by component name"""
        result = self.components.get(name)
        return result.address if result else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'manifest_version': self.manifest_version,
            'network_id': self.network_id,
            'deployer': self.deployer,
            'created_at': self.created_at,
        }

        if self.registry is not None:
            data['registry'] = self.registry

        data['addresses'] = self.addresses
        data['components'] = {
            name: result.to_dict() for name, result in self.components.items()
        }

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EcosystemManifest':
        """Create from dictionary"""
        raw_components = _mapping(data, 'components')
        components = {
            name: DeploymentResult.from_dict(name, entry)
            for name, entry in raw_components.items()
        }

        # Hand-edited records may only carry the flat address map
        for name, address in _mapping(data, 'addresses').items():
            if name not in components:
                components[name] = DeploymentResult(name=name, address=address,
                                                    kind=ComponentKind.EXISTING)

        return cls(
            network_id=str(data['network_id']),
            deployer=data['deployer'],
            components=components,
            registry=data.get('registry'),
            created_at=data.get('created_at', ''),
            manifest_version=data['manifest_version']
        )
