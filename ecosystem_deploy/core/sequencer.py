# ecosystem_deploy/core/sequencer.py
"""Deployment sequencer driving a registry through a chain client"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .component_registry import ComponentRegistry
from .manifest_writer import ManifestWriter
from .verifier import InvariantVerifier, VerificationReport
from ..api.exceptions import (
    DeploymentFailedError,
    RegistryError,
    TransactionRejectedError,
    UnresolvedReferenceError,
)
from ..chain.base import ChainClient
from ..constants import ADDRESS_FIELD, DEPLOYER_REF
from ..models.component import AddressRef, ComponentKind, ComponentSpec
from ..models.manifest import DeploymentResult, EcosystemManifest, TxReceipt

StepCallback = Callable[[DeploymentResult], None]


class DeploymentSequencer:
    """Deploy registry entries strictly in order, verify, then record

    The run is all or nothing: the first failing step aborts the run and no
    manifest is written. Components confirmed before the failure stay on
    chain; the operator inspects chain state before retrying.
    """

    def __init__(self,
                 writer: Optional[ManifestWriter] = None,
                 on_step: Optional[StepCallback] = None):
        """
        Initialize sequencer

        Args:
            writer: Manifest writer; when None the manifest is only returned
            on_step: Callback invoked after each recorded result
        """
        self.writer = writer
        self.on_step = on_step
        self.last_report: Optional[VerificationReport] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    def run(self, registry: ComponentRegistry, client: ChainClient) -> EcosystemManifest:
        """
        Deploy, verify and record a registry

        Args:
            registry: Ordered component registry
            client: Chain client

        Returns:
            Verified EcosystemManifest

        Raises:
            UnresolvedReferenceError: Reference to a component not yet deployed
            DeploymentFailedError: A transaction was rejected or reverted
            VerificationError: A recorded link does not match the manifest
            ManifestIOError: The verified manifest could not be written
        """
        network_id = str(client.current_network_id())
        deployer = client.deployer_address()
        results: Dict[str, DeploymentResult] = {}

        self.logger.info(
            f"Deploying registry {registry.name} ({len(registry)} entries) "
            f"to network {network_id} as {deployer}"
        )

        for spec in registry:
            if spec.kind == ComponentKind.EXISTING:
                self._record(results, DeploymentResult(
                    name=spec.name, address=spec.address, kind=ComponentKind.EXISTING,
                    contract=spec.contract
                ))
                continue

            args = self._resolve(spec.name, spec.args, results, deployer)
            address, receipt = self._deploy(spec, args, client)
            self._record(results, DeploymentResult(
                name=spec.name, address=address, kind=spec.kind, receipt=receipt,
                contract=spec.contract
            ))

            if spec.kind == ComponentKind.FACTORY:
                self._invoke_factory(spec, address, results, client, deployer)

        manifest = EcosystemManifest(
            network_id=network_id,
            deployer=deployer,
            components=results,
            registry=registry.name
        )

        self.last_report = InvariantVerifier(registry.checks).verify(manifest, client)

        if self.writer is not None:
            self.writer.write(manifest)

        return manifest

    def _deploy(self, spec: ComponentSpec, args: List[Any],
                client: ChainClient) -> Tuple[str, TxReceipt]:
        self.logger.debug(f"Deploying {spec.name} ({spec.contract}) with args {args}")
        try:
            address, receipt = client.deploy(spec.contract, args)
        except TransactionRejectedError as e:
            raise DeploymentFailedError(spec.name, e.reason) from e

        self._ensure_succeeded(spec.name, receipt)
        return address, receipt

    def _invoke_factory(self, spec: ComponentSpec, factory_address: str,
                        results: Dict[str, DeploymentResult],
                        client: ChainClient, deployer: str) -> None:
        invocation = spec.invocation
        args = self._resolve(spec.name, invocation.args, results, deployer)

        self.logger.debug(f"Invoking {spec.name}.{invocation.method} with args {args}")
        try:
            receipt = client.invoke(factory_address, invocation.method, args, contract=spec.contract)
        except TransactionRejectedError as e:
            raise DeploymentFailedError(spec.name, e.reason) from e

        self._ensure_succeeded(spec.name, receipt)

        # Produced components share the receipt of the invocation that created them
        for output in invocation.outputs:
            try:
                address = client.call(factory_address, output, [], contract=spec.contract)
            except TransactionRejectedError as e:
                raise DeploymentFailedError(spec.name, e.reason) from e

            self._record(results, DeploymentResult(
                name=output, address=str(address), kind=ComponentKind.PRODUCED, receipt=receipt,
                contract=invocation.contract_for(output)
            ))

    def _record(self, results: Dict[str, DeploymentResult], result: DeploymentResult) -> None:
        if result.name in results:
            raise RegistryError(f"Component {result.name} recorded twice")

        results[result.name] = result
        self.logger.info(f"{result.name} ({result.kind.value}) at {result.address}")

        if self.on_step:
            self.on_step(result)

    @staticmethod
    def _ensure_succeeded(component: str, receipt: TxReceipt) -> None:
        if not receipt.succeeded:
            reason = receipt.reason or f"transaction {receipt.tx_hash} failed"
            raise DeploymentFailedError(component, reason)

    def _resolve(self, component: str, values: List[Any],
                 results: Dict[str, DeploymentResult], deployer: str) -> List[Any]:
        resolved = []
        for value in values:
            if isinstance(value, list):
                resolved.append(self._resolve(component, value, results, deployer))
            elif isinstance(value, AddressRef):
                resolved.append(self._resolve_ref(component, value, results, deployer))
            else:
                resolved.append(value)
        return resolved

    @staticmethod
    def _resolve_ref(component: str, ref: AddressRef,
                     results: Dict[str, DeploymentResult], deployer: str) -> str:
        if ref.field != ADDRESS_FIELD:
            raise UnresolvedReferenceError(component, str(ref))
        if ref.component == DEPLOYER_REF:
            return deployer
        if ref.component not in results:
            raise UnresolvedReferenceError(component, str(ref))
        return results[ref.component].address
