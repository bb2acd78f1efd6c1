"""Configuration data models"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from ..constants import (
    BUILTIN_REGISTRIES_DIR,
    DEFAULT_MANIFESTS_DIR,
    DEFAULT_NETWORK,
    DEFAULT_REGISTRY,
)


@dataclass
class DeployConfig:
    """Settings for a deployment run"""

    network: str = DEFAULT_NETWORK
    account: Optional[str] = None  # Ape account alias; first test account when unset
    manifests_dir: str = DEFAULT_MANIFESTS_DIR
    registry: str = DEFAULT_REGISTRY  # Registry file path or bundled registry name

    def resolve_manifests_dir(self, project_root: Path) -> Path:
        """Get manifests directory, relative paths taken from project root"""
        path = Path(self.manifests_dir).expanduser()
        if not path.is_absolute():
            path = project_root / path
        return path

    def resolve_registry(self, project_root: Path) -> Path:
        """Get registry file path

        A bare name without suffix refers to a bundled registry.
        """
        path = Path(self.registry).expanduser()
        if path.suffix not in ('.yaml', '.yml'):
            return BUILTIN_REGISTRIES_DIR / f"{self.registry}.yaml"
        if not path.is_absolute():
            path = project_root / path
        return path

    def merge(self, overrides: Dict[str, Any]) -> 'DeployConfig':
        """Return a copy with non-empty overrides applied"""
        data = self.to_dict()
        for key, value in overrides.items():
            if value is not None and key in data:
                data[key] = value
        return DeployConfig.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployConfig':
        """Create from dictionary, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in data.items() if v is not None})
