"""Manifest writer for persisting per-network ecosystem manifests"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List

import yaml
from packaging.version import InvalidVersion, Version

from ..api.exceptions import ManifestIOError, ManifestNotFoundError
from ..constants import MANIFEST_FILE_PATTERN, MANIFEST_VERSION, MSG_NOT_RECORDED, NETWORK_ID_PATTERN
from ..models.manifest import EcosystemManifest


class ManifestWriter:
    """Store one YAML manifest per network; the last successful write wins"""

    def __init__(self, manifests_dir: Path):
        """Initialize manifest writer

        Args:
            manifests_dir: Directory holding manifest files
        """
        self.manifests_dir = Path(manifests_dir)
        self.logger = logging.getLogger(self.__class__.__name__)

    def path_for(self, network_id: str) -> Path:
        """Get manifest file path for a network"""
        network_id = str(network_id)
        if not NETWORK_ID_PATTERN.match(network_id):
            raise ManifestIOError(f"Invalid network id: {network_id!r}", network_id)
        return self.manifests_dir / MANIFEST_FILE_PATTERN.format(network_id=network_id)

    def write(self, manifest: EcosystemManifest) -> Path:
        """Write manifest, replacing any prior record for its network

        The file is written to a temporary sibling and moved into place, so
        readers never observe a half-written manifest.

        Args:
            manifest: Verified manifest

        Returns:
            Path to the manifest file

        Raises:
            ManifestIOError: If the manifest could not be persisted
        """
        manifest_path = self.path_for(manifest.network_id)

        try:
            manifest_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=manifest_path.parent,
                prefix=f".{manifest_path.name}.",
                suffix=".tmp"
            )
            try:
                with os.fdopen(fd, 'w') as f:
                    yaml.safe_dump(manifest.to_dict(), f, default_flow_style=False, sort_keys=False)
                os.replace(tmp_name, manifest_path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise ManifestIOError(
                f"Failed to write manifest {manifest_path}: {e}. {MSG_NOT_RECORDED}",
                manifest.network_id
            ) from e

        self.logger.info(f"Manifest for network {manifest.network_id} written to {manifest_path}")
        return manifest_path

    def read(self, network_id: str) -> EcosystemManifest:
        """Read the manifest recorded for a network

        Args:
            network_id: Chain identity

        Returns:
            EcosystemManifest

        Raises:
            ManifestNotFoundError: If no manifest exists for the network
            ManifestIOError: If the record cannot be read or parsed
        """
        network_id = str(network_id)
        manifest_path = self.path_for(network_id)

        if not manifest_path.exists():
            raise ManifestNotFoundError(network_id)

        try:
            with open(manifest_path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ManifestIOError(f"Failed to read manifest {manifest_path}: {e}", network_id) from e

        if not isinstance(data, dict):
            raise ManifestIOError(f"Malformed manifest {manifest_path}", network_id)

        self._check_version(data.get('manifest_version'), manifest_path, network_id)

        try:
            return EcosystemManifest.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ManifestIOError(f"Malformed manifest {manifest_path}: {e}", network_id) from e

    def exists(self, network_id: str) -> bool:
        """Check if a manifest is recorded for a network"""
        return self.path_for(network_id).exists()

    def list_networks(self) -> List[str]:
        """List network ids with a recorded manifest"""
        if not self.manifests_dir.exists():
            return []
        return sorted(p.stem for p in self.manifests_dir.glob("*.yaml") if not p.name.startswith('.'))

    @staticmethod
    def _check_version(value, manifest_path: Path, network_id: str) -> None:
        try:
            found = Version(str(value))
        except InvalidVersion:
            raise ManifestIOError(
                f"Manifest {manifest_path} has invalid manifest_version: {value!r}", network_id
            )

        if found.major > Version(MANIFEST_VERSION).major:
            raise ManifestIOError(
                f"Manifest {manifest_path} uses format {found}, "
                f"newer than supported {MANIFEST_VERSION}",
                network_id
            )
