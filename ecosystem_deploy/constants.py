"""Global constants for ecosystem-deploy"""

import re
from pathlib import Path

APP_NAME = "ecosystem-deploy"
LOG_FORMAT = "%(message)s"

# Version related
MANIFEST_VERSION = "1.0"

# Project identification
PROJECT_CONFIG_FILE = ".ecosystem-deploy.yaml"

# Directory structure
DEFAULT_MANIFESTS_DIR = "deployments"
MANIFEST_FILE_PATTERN = "{network_id}.yaml"
BUILTIN_REGISTRIES_DIR = Path(__file__).parent / "registries"
DEFAULT_REGISTRY = "lendyrium"

# Network defaults
DEFAULT_NETWORK = "ethereum:local"

# Reference syntax: "${Component.field}"
DEPLOYER_REF = "deployer"
ADDRESS_FIELD = "address"
REFERENCE_PATTERN = re.compile(r"^\$\{(?P<component>[A-Za-z][A-Za-z0-9_-]*)\.(?P<field>[A-Za-z_][A-Za-z0-9_]*)\}$")

# Validation patterns
COMPONENT_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")
NETWORK_ID_PATTERN = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")

# Environment variables
ENV_NETWORK = "ECOSYSTEM_DEPLOY_NETWORK"
ENV_ACCOUNT = "ECOSYSTEM_DEPLOY_ACCOUNT"
ENV_MANIFESTS_DIR = "ECOSYSTEM_DEPLOY_MANIFESTS_DIR"
ENV_REGISTRY = "ECOSYSTEM_DEPLOY_REGISTRY"


# Error codes
class ErrorCode:
    REGISTRY_INVALID = "ED001"
    UNRESOLVED_REFERENCE = "ED002"
    DEPLOYMENT_FAILED = "ED003"
    VERIFICATION_FAILED = "ED004"
    MANIFEST_IO_FAILED = "ED005"
    MANIFEST_NOT_FOUND = "ED006"
    CONFIG_FORMAT_ERROR = "ED007"
    TRANSACTION_REJECTED = "ED008"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_ARROW = "→"
EMOJI_LINK = "🔗"

# Messages templates
MSG_COMPONENT_DEPLOYED = f"{EMOJI_SUCCESS} {{name}} deployed to {{address}}"
MSG_COMPONENT_PRODUCED = f"{EMOJI_SUCCESS} {{name}} produced by {{factory}} at {{address}}"
MSG_COMPONENT_EXISTING = f"{EMOJI_ARROW} {{name}} pinned at {{address}}"
MSG_LINK_VERIFIED = f"{EMOJI_LINK} {{component}}.{{query}}() {EMOJI_ARROW} {{expected}}"
MSG_NOT_RECORDED = (
    "Components were deployed on-chain but the manifest was not recorded. "
    "Record the addresses above manually before retrying."
)

# Interactive prompts
PROMPT_CONFIRM_DEPLOY = "Deploy registry '{registry}' to {network} as {account}?"
