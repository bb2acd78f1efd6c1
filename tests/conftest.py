"""
Pytest configuration and fixtures for ecosystem-deploy tests.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from ecosystem_deploy.api.exceptions import TransactionRejectedError
from ecosystem_deploy.chain.base import ChainClient
from ecosystem_deploy.core.component_registry import ComponentRegistry
from ecosystem_deploy.models.component import (
    AddressRef,
    ComponentKind,
    ComponentSpec,
    FactoryInvocation,
    LinkCheck,
)
from ecosystem_deploy.models.manifest import TxReceipt

DEPLOYER = "0xDe91000000000000000000000000000000000001"
JUDGE = "0x0000000000000000000000000000000000000002"
LENDYRIUM_OUTPUTS = ("governanceToken", "dao", "lendyrium")
LENDYRIUM_TYPES = {"governanceToken": "LendyriumGovernanceToken", "dao": "LendyriumDAO"}


class FakeChainClient(ChainClient):
    """Scripted in-memory chain

    Deployed addresses are sequential. Invoking a method registered in
    ``bundles`` creates one address per output, exposes them as factory
    getters and wires the links listed in ``bundle_links``.
    """

    def __init__(self, network_id: str = "31337", deployer: str = DEPLOYER):
        self.network_id = network_id
        self.deployer = deployer
        self.deployments: List[Tuple[str, List[Any]]] = []
        self.invocations: List[Tuple[str, str, List[Any]]] = []
        self.calls: List[Tuple[str, str]] = []
        self.contract_types: Dict[Tuple[str, str], Optional[str]] = {}
        self.views: Dict[Tuple[str, str], Any] = {}
        self.bundles: Dict[str, Tuple[str, ...]] = {}
        self.bundle_links: Dict[str, Dict[Tuple[str, str], str]] = {}
        self.tampered: Dict[Tuple[str, str], str] = {}
        self.reverting: Dict[str, str] = {}
        self.rejecting: Dict[str, str] = {}
        self.failing_queries: Dict[str, str] = {}
        self._counter = 0
        self._tx = 0

    def _next_address(self) -> str:
        self._counter += 1
        return "0x" + f"{self._counter:040x}"

    def _receipt(self, status: bool = True, reason: Optional[str] = None) -> TxReceipt:
        self._tx += 1
        return TxReceipt(tx_hash="0x" + f"{self._tx:064x}", block_number=100 + self._tx,
                         status=status, reason=reason)

    def deploy(self, contract, args):
        self.deployments.append((contract, list(args)))
        if contract in self.rejecting:
            raise TransactionRejectedError(self.rejecting[contract])
        address = self._next_address()
        if contract in self.reverting:
            return address, self._receipt(False, self.reverting[contract])
        return address, self._receipt()

    def invoke(self, address, method, args, contract=None):
        self.invocations.append((address, method, list(args)))
        self.contract_types[(address, method)] = contract
        if method in self.reverting:
            return self._receipt(False, self.reverting[method])

        produced = {}
        for output in self.bundles.get(method, ()):
            produced[output] = self._next_address()
            self.views[(address, output)] = produced[output]

        for (component, query), target in self.bundle_links.get(method, {}).items():
            value = self.tampered.get((component, query), produced[target])
            self.views[(produced[component], query)] = value

        return self._receipt()

    def call(self, address, method, args, contract=None):
        self.calls.append((address, method))
        self.contract_types[(address, method)] = contract
        if method in self.failing_queries:
            raise TransactionRejectedError(self.failing_queries[method])
        return self.views[(address, method)]

    def current_network_id(self):
        return self.network_id

    def deployer_address(self):
        return self.deployer


@pytest.fixture
def client():
    """Fake chain where deployLendyrium produces the Lendyrium bundle."""
    fake = FakeChainClient()
    fake.bundles["deployLendyrium"] = LENDYRIUM_OUTPUTS
    fake.bundle_links["deployLendyrium"] = {
        ("dao", "governanceToken"): "governanceToken",
        ("lendyrium", "dao"): "dao",
    }
    return fake


def build_registry(factory_args=None) -> ComponentRegistry:
    """Token followed by a factory that depends on it."""
    token = ComponentSpec(name="Token", args=["Lendyrium", "LDY", 1_000_000])
    factory = ComponentSpec(
        name="Factory",
        kind=ComponentKind.FACTORY,
        contract="LendyriumFactory",
        args=factory_args if factory_args is not None else [AddressRef("Token")],
        invocation=FactoryInvocation(
            method="deployLendyrium",
            args=[JUDGE, AddressRef("Token"), AddressRef("deployer")],
            outputs=LENDYRIUM_OUTPUTS,
            output_contracts=LENDYRIUM_TYPES
        ),
        checks=[
            LinkCheck(component="dao", query="governanceToken", expected="governanceToken"),
            LinkCheck(component="lendyrium", query="dao", expected="dao"),
        ]
    )
    return ComponentRegistry("lendyrium", [token, factory])


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def make_registry():
    return build_registry
