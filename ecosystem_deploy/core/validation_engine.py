# ecosystem_deploy/core/validation_engine.py
"""Validation engine for registry documents"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import jsonschema

from ..constants import COMPONENT_NAME_PATTERN

_NAME = {"type": "string", "pattern": COMPONENT_NAME_PATTERN.pattern}

REGISTRY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["name", "components"],
    "additionalProperties": False,
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "components": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["name"],
                "additionalProperties": False,
                "properties": {
                    "name": _NAME,
                    "contract": {"type": "string", "minLength": 1},
                    "kind": {"enum": ["standalone", "factory", "existing"]},
                    "args": {"type": "array"},
                    "address": {"type": "string", "minLength": 1},
                    "invocation": {
                        "type": "object",
                        "required": ["method", "outputs"],
                        "additionalProperties": False,
                        "properties": {
                            "method": {"type": "string", "minLength": 1},
                            "args": {"type": "array"},
                            "outputs": {
                                "anyOf": [
                                    {"type": "array", "items": _NAME, "minItems": 1},
                                    {
                                        "type": "object",
                                        "minProperties": 1,
                                        "propertyNames": _NAME,
                                        "additionalProperties": {"type": ["string", "null"], "minLength": 1},
                                    },
                                ],
                            },
                        },
                    },
                    "checks": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["component", "query", "expected"],
                            "additionalProperties": False,
                            "properties": {
                                "component": _NAME,
                                "query": {"type": "string", "minLength": 1},
                                "expected": _NAME,
                            },
                        },
                    },
                },
            },
        },
    },
}


@dataclass
class ValidationResult:
    """Validation result container"""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add error message"""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add warning message"""
        self.warnings.append(message)

    def merge(self, other: 'ValidationResult') -> None:
        """Merge another result into this one"""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        if not other.is_valid:
            self.is_valid = False

    def __str__(self) -> str:
        lines = []

        if self.errors:
            lines.append("Errors:")
            for error in self.errors:
                lines.append(f"  ✗ {error}")

        if self.warnings:
            lines.append("Warnings:")
            for warning in self.warnings:
                lines.append(f"  ⚠ {warning}")

        if self.is_valid and not self.warnings:
            lines.append("✓ All validations passed")

        return '\n'.join(lines)


def validate_registry_document(data: Any) -> ValidationResult:
    """
    Validate a raw registry document against the registry schema

    Args:
        data: Parsed YAML document

    Returns:
        ValidationResult listing every schema violation
    """
    result = ValidationResult()
    validator = jsonschema.Draft7Validator(REGISTRY_SCHEMA)

    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
        location = ".".join(str(p) for p in error.path) or "<root>"
        result.add_error(f"{location}: {error.message}")

    return result
