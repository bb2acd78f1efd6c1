"""Component registry: the ordered list of components to deploy"""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml

from .validation_engine import ValidationResult, validate_registry_document
from ..api.exceptions import RegistryError
from ..constants import ADDRESS_FIELD, DEPLOYER_REF
from ..models.component import ComponentKind, ComponentSpec, LinkCheck


class ComponentRegistry:
    """Ordered component specs; the order is the dependency order"""

    def __init__(self, name: str, components: List[ComponentSpec],
                 description: Optional[str] = None):
        self.name = name
        self.components = list(components)
        self.description = description

        seen = set()
        for spec in self.components:
            for produced in spec.produces:
                if produced == DEPLOYER_REF:
                    raise RegistryError(f"'{DEPLOYER_REF}' is a reserved component name")
                if produced in seen:
                    raise RegistryError(f"Duplicate component name: {produced}")
                seen.add(produced)

    def __iter__(self) -> Iterator[ComponentSpec]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @property
    def checks(self) -> List[LinkCheck]:
        """All declared link checks, in registry order"""
        return [check for spec in self.components for check in spec.checks]

    def produced_names(self) -> List[str]:
        """Every manifest key a successful run records, in order"""
        return [name for spec in self.components for name in spec.produces]

    def get(self, name: str) -> Optional[ComponentSpec]:
        """Find component spec by name"""
        for spec in self.components:
            if spec.name == name:
                return spec
        return None

    def validate(self) -> ValidationResult:
        """
        Statically check reference ordering without touching the chain

        Reports forward or missing references and checks naming unknown
        components. Deployment does not depend on this check.

        Returns:
            ValidationResult
        """
        result = ValidationResult()
        available = {DEPLOYER_REF}

        for spec in self.components:
            for ref in spec.references:
                if ref.field != ADDRESS_FIELD:
                    result.add_error(f"{spec.name}: unsupported reference field '{ref}'")
                elif ref.component not in available:
                    later = ref.component in self.produced_names()
                    reason = "deployed later in the registry" if later else "unknown component"
                    result.add_error(f"{spec.name}: reference to {ref} ({reason})")

            available.update(spec.produces)

            if spec.kind == ComponentKind.EXISTING and spec.args:
                result.add_warning(f"{spec.name}: arguments are ignored for existing components")

        for check in self.checks:
            for name in (check.component, check.expected):
                if name not in available:
                    result.add_error(f"Check {check.component}.{check.query}(): unknown component {name}")

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data: Dict[str, Any] = {'name': self.name}
        if self.description:
            data['description'] = self.description
        data['components'] = [spec.to_dict() for spec in self.components]
        return data

    @classmethod
    def from_dict(cls, data: Any) -> 'ComponentRegistry':
        """
        Create registry from a parsed document

        Raises:
            RegistryError: If the document violates the registry schema
        """
        validation = validate_registry_document(data)
        if not validation.is_valid:
            raise RegistryError("Invalid registry:\n" + "\n".join(validation.errors))

        try:
            components = [ComponentSpec.from_dict(item) for item in data['components']]
        except ValueError as e:
            raise RegistryError(str(e)) from e

        return cls(
            name=data['name'],
            components=components,
            description=data.get('description')
        )

    @classmethod
    def from_file(cls, path: Path) -> 'ComponentRegistry':
        """
        Load registry from a YAML file

        Args:
            path: Registry file path

        Returns:
            ComponentRegistry
        """
        path = Path(path)
        if not path.exists():
            raise RegistryError(f"Registry file not found: {path}")

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RegistryError(f"Failed to parse registry {path}: {e}") from e

        return cls.from_dict(data)
