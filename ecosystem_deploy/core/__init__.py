# ecosystem_deploy/core/__init__.py
"""Core deployment orchestration"""

from .component_registry import ComponentRegistry
from .manifest_writer import ManifestWriter
from .sequencer import DeploymentSequencer
from .validation_engine import ValidationResult
from .verifier import InvariantVerifier, VerificationReport

__all__ = [
    'ComponentRegistry',
    'ManifestWriter',
    'DeploymentSequencer',
    'ValidationResult',
    'InvariantVerifier',
    'VerificationReport',
]
