"""Configuration service for loading deployment settings"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    ENV_ACCOUNT,
    ENV_MANIFESTS_DIR,
    ENV_NETWORK,
    ENV_REGISTRY,
    PROJECT_CONFIG_FILE,
)
from ..models.config import DeployConfig

ENV_OVERRIDES = {
    'network': ENV_NETWORK,
    'account': ENV_ACCOUNT,
    'manifests_dir': ENV_MANIFESTS_DIR,
    'registry': ENV_REGISTRY,
}


class ConfigService:
    """Resolve DeployConfig from file, environment and explicit overrides

    Precedence, lowest first: defaults, ``.ecosystem-deploy.yaml``,
    ``ECOSYSTEM_DEPLOY_*`` environment variables, explicit overrides.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """Initialize config service

        Args:
            project_root: Directory holding the config file (defaults to cwd)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.config_path = self.project_root / PROJECT_CONFIG_FILE
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_file(self) -> DeployConfig:
        """Load configuration from file, falling back to defaults

        Returns:
            Loaded configuration
        """
        if not self.config_path.exists():
            self.logger.debug(f"No config file at {self.config_path}, using defaults")
            return DeployConfig()

        with open(self.config_path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping")

        try:
            return DeployConfig.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}") from e

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> DeployConfig:
        """Load the effective configuration

        Args:
            overrides: Explicit values (e.g. CLI flags); None values are ignored

        Returns:
            Effective configuration
        """
        config = self.load_file()

        env = {key: os.environ.get(var) or None for key, var in ENV_OVERRIDES.items()}
        config = config.merge(env)

        if overrides:
            config = config.merge(overrides)

        return config
