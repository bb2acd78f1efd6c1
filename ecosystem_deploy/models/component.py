"""Component data models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..constants import ADDRESS_FIELD, REFERENCE_PATTERN


class ComponentKind(Enum):
    """How a component comes into existence"""
    STANDALONE = "standalone"
    FACTORY = "factory"
    PRODUCED = "produced"
    EXISTING = "existing"

    @classmethod
    def from_string(cls, value: str) -> 'ComponentKind':
        """Create ComponentKind from string"""
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown component kind: {value}")


@dataclass(frozen=True)
class AddressRef:
    """Reference to a value produced by an earlier step (``${Name.address}``)"""

    component: str
    field: str = ADDRESS_FIELD

    def __str__(self) -> str:
        return f"{self.component}.{self.field}"

    @classmethod
    def parse(cls, value: Any) -> Optional['AddressRef']:
        """Parse a reference string, returning None for literals"""
        if not isinstance(value, str):
            return None
        match = REFERENCE_PATTERN.match(value)
        if not match:
            return None
        return cls(component=match.group('component'), field=match.group('field'))

    def to_str(self) -> str:
        """Serialize back to registry syntax"""
        return "${" + str(self) + "}"


def parse_args(values: List[Any]) -> List[Any]:
    """Turn raw registry arguments into literals and AddressRefs"""
    parsed = []
    for value in values:
        if isinstance(value, list):
            parsed.append(parse_args(value))
        else:
            ref = AddressRef.parse(value)
            parsed.append(ref if ref is not None else value)
    return parsed


def dump_args(values: List[Any]) -> List[Any]:
    """Inverse of parse_args"""
    dumped = []
    for value in values:
        if isinstance(value, list):
            dumped.append(dump_args(value))
        elif isinstance(value, AddressRef):
            dumped.append(value.to_str())
        else:
            dumped.append(value)
    return dumped


def iter_refs(values: List[Any]):
    """Yield every AddressRef in an argument list, depth first"""
    for value in values:
        if isinstance(value, list):
            yield from iter_refs(value)
        elif isinstance(value, AddressRef):
            yield value


@dataclass(frozen=True)
class LinkCheck:
    """Post-deploy check: ``component.query()`` must equal the address of ``expected``"""

    component: str
    query: str
    expected: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {
            'component': self.component,
            'query': self.query,
            'expected': self.expected
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'LinkCheck':
        """Create from dictionary"""
        return cls(
            component=data['component'],
            query=data['query'],
            expected=data['expected']
        )


@dataclass
class FactoryInvocation:
    """The single call that makes a factory deploy its bundle"""

    method: str
    args: List[Any] = field(default_factory=list)
    outputs: Tuple[str, ...] = ()
    output_contracts: Dict[str, str] = field(default_factory=dict)  # Output name to contract type

    def __post_init__(self):
        self.outputs = tuple(self.outputs)
        unknown = set(self.output_contracts) - set(self.outputs)
        if unknown:
            raise ValueError(f"Contract types given for undeclared outputs: {', '.join(sorted(unknown))}")

    def contract_for(self, output: str) -> Optional[str]:
        """Declared contract type of an output, if any"""
        return self.output_contracts.get(output)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'method': self.method,
            'args': dump_args(self.args),
            'outputs': self._dump_outputs()
        }

    def _dump_outputs(self):
        if not self.output_contracts:
            return list(self.outputs)
        return {name: self.output_contracts.get(name) for name in self.outputs}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FactoryInvocation':
        """Create from dictionary"""
        outputs = data.get('outputs', [])
        contracts = {}
        # Outputs are either a list of names or a mapping of name to contract type
        if isinstance(outputs, dict):
            contracts = {name: contract for name, contract in outputs.items() if contract is not None}

        return cls(
            method=data['method'],
            args=parse_args(data.get('args', [])),
            outputs=tuple(outputs),
            output_contracts=contracts
        )


@dataclass
class ComponentSpec:
    """One entry of the component registry"""

    name: str
    args: List[Any] = field(default_factory=list)
    kind: ComponentKind = ComponentKind.STANDALONE
    contract: Optional[str] = None
    invocation: Optional[FactoryInvocation] = None
    address: Optional[str] = None
    checks: List[LinkCheck] = field(default_factory=list)

    def __post_init__(self):
        """Post-initialization processing"""
        if isinstance(self.kind, str):
            self.kind = ComponentKind.from_string(self.kind)

        if self.contract is None:
            self.contract = self.name

        if self.kind == ComponentKind.PRODUCED:
            raise ValueError(f"{self.name}: produced components come from a factory invocation")
        if self.kind == ComponentKind.FACTORY and self.invocation is None:
            raise ValueError(f"{self.name}: factory components require an invocation")
        if self.kind != ComponentKind.FACTORY and self.invocation is not None:
            raise ValueError(f"{self.name}: only factory components take an invocation")
        if self.kind == ComponentKind.EXISTING and not self.address:
            raise ValueError(f"{self.name}: existing components require an address")

    @property
    def references(self) -> List[AddressRef]:
        """All references made by constructor and invocation arguments"""
        refs = list(iter_refs(self.args))
        if self.invocation:
            refs.extend(iter_refs(self.invocation.args))
        return refs

    @property
    def produces(self) -> Tuple[str, ...]:
        """Names recorded by this entry, in recording order"""
        if self.invocation:
            return (self.name,) + self.invocation.outputs
        return (self.name,)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data: Dict[str, Any] = {
            'name': self.name,
            'kind': self.kind.value,
        }
        if self.contract != self.name:
            data['contract'] = self.contract
        if self.args:
            data['args'] = dump_args(self.args)
        if self.invocation:
            data['invocation'] = self.invocation.to_dict()
        if self.address:
            data['address'] = self.address
        if self.checks:
            data['checks'] = [check.to_dict() for check in self.checks]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComponentSpec':
        """Create from dictionary"""
        invocation = None
        if data.get('invocation'):
            invocation = FactoryInvocation.from_dict(data['invocation'])

        return cls(
            name=data['name'],
            args=parse_args(data.get('args', [])),
            kind=ComponentKind.from_string(data.get('kind', ComponentKind.STANDALONE.value)),
            contract=data.get('contract'),
            invocation=invocation,
            address=data.get('address'),
            checks=[LinkCheck.from_dict(c) for c in data.get('checks', [])]
        )
