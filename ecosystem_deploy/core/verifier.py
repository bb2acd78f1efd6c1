"""Post-deploy verification of cross-component links"""

import logging
from dataclasses import dataclass, field
from typing import List

from ..api.exceptions import TransactionRejectedError, UnresolvedReferenceError, VerificationError
from ..chain.base import ChainClient
from ..models.component import LinkCheck
from ..models.manifest import EcosystemManifest


@dataclass
class VerifiedLink:
    """A link check that passed"""
    check: LinkCheck
    address: str


@dataclass
class VerificationReport:
    """Every link confirmed during a verification pass"""
    verified: List[VerifiedLink] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.verified)


class InvariantVerifier:
    """Confirm each component records the sibling addresses the manifest holds

    Any mismatch is fatal: it means the factory wired an inconsistent
    ecosystem or the client mixed up addresses, so no retry is attempted.
    """

    def __init__(self, checks: List[LinkCheck]):
        self.checks = list(checks)
        self.logger = logging.getLogger(self.__class__.__name__)

    def verify(self, manifest: EcosystemManifest, client: ChainClient) -> VerificationReport:
        """
        Verify all link checks against the chain

        Args:
            manifest: Manifest assembled from this run's results
            client: Chain client used for read-only queries

        Returns:
            VerificationReport

        Raises:
            VerificationError: On the first mismatching or unanswerable link
            UnresolvedReferenceError: If a check names a component the manifest lacks
        """
        report = VerificationReport()
        addresses = manifest.addresses

        for check in self.checks:
            for name in (check.component, check.expected):
                if name not in addresses:
                    raise UnresolvedReferenceError(check.component, f"{name}.address")

            expected = addresses[check.expected]
            target = manifest.components[check.component]
            try:
                actual = client.call(target.address, check.query, [], contract=target.contract)
            except TransactionRejectedError as e:
                self.logger.error(f"{check.component}.{check.query}() could not be queried: {e.reason}")
                raise VerificationError(
                    component=check.component,
                    expected_address=expected,
                    actual_address=None,
                    query=check.query,
                    reason=e.reason
                ) from e

            if actual != expected:
                self.logger.error(
                    f"{check.component}.{check.query}() returned {actual}, expected {expected}"
                )
                raise VerificationError(
                    component=check.component,
                    expected_address=expected,
                    actual_address=str(actual),
                    query=check.query
                )

            self.logger.info(f"Verified {check.component}.{check.query}() == {check.expected}")
            report.verified.append(VerifiedLink(check=check, address=expected))

        return report
