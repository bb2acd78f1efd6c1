"""Tests for the invariant verifier."""

import pytest

from ecosystem_deploy.api.exceptions import UnresolvedReferenceError, VerificationError
from ecosystem_deploy.core.verifier import InvariantVerifier
from ecosystem_deploy.models.component import ComponentKind, LinkCheck
from ecosystem_deploy.models.manifest import DeploymentResult, EcosystemManifest

from conftest import DEPLOYER, FakeChainClient

TOKEN = "0x1111111111111111111111111111111111111111"
DAO = "0x2222222222222222222222222222222222222222"


def make_manifest() -> EcosystemManifest:
    return EcosystemManifest(
        network_id="296",
        deployer=DEPLOYER,
        components={
            "governanceToken": DeploymentResult("governanceToken", TOKEN, ComponentKind.PRODUCED),
            "dao": DeploymentResult("dao", DAO, ComponentKind.PRODUCED, contract="LendyriumDAO"),
        }
    )


class TestInvariantVerifier:

    def test_matching_link_passes(self):
        client = FakeChainClient()
        client.views[(DAO, "governanceToken")] = TOKEN
        check = LinkCheck("dao", "governanceToken", "governanceToken")

        report = InvariantVerifier([check]).verify(make_manifest(), client)

        assert report.count == 1
        assert report.verified[0].check == check
        assert report.verified[0].address == TOKEN

    def test_mismatch_raises_with_both_addresses(self):
        client = FakeChainClient()
        client.views[(DAO, "governanceToken")] = DAO

        with pytest.raises(VerificationError) as exc_info:
            InvariantVerifier([LinkCheck("dao", "governanceToken", "governanceToken")]).verify(
                make_manifest(), client
            )

        assert exc_info.value.expected_address == TOKEN
        assert exc_info.value.actual_address == DAO
        assert "dao.governanceToken()" in str(exc_info.value)

    def test_comparison_is_exact(self):
        client = FakeChainClient()
        client.views[(DAO, "governanceToken")] = TOKEN.lower().replace("0x", "0X")

        with pytest.raises(VerificationError):
            InvariantVerifier([LinkCheck("dao", "governanceToken", "governanceToken")]).verify(
                make_manifest(), client
            )

    def test_first_mismatch_stops_verification(self):
        client = FakeChainClient()
        client.views[(DAO, "governanceToken")] = DAO
        checks = [
            LinkCheck("dao", "governanceToken", "governanceToken"),
            LinkCheck("dao", "token", "governanceToken"),
        ]

        with pytest.raises(VerificationError):
            InvariantVerifier(checks).verify(make_manifest(), client)

        assert client.calls == [(DAO, "governanceToken")]

    def test_unknown_component_is_unresolved(self):
        with pytest.raises(UnresolvedReferenceError):
            InvariantVerifier([LinkCheck("oracle", "dao", "dao")]).verify(
                make_manifest(), FakeChainClient()
            )

    def test_no_checks_is_empty_report(self):
        report = InvariantVerifier([]).verify(make_manifest(), FakeChainClient())
        assert report.count == 0

    def test_query_uses_recorded_contract_type(self):
        client = FakeChainClient()
        client.views[(DAO, "governanceToken")] = TOKEN

        InvariantVerifier([LinkCheck("dao", "governanceToken", "governanceToken")]).verify(
            make_manifest(), client
        )

        assert client.contract_types[(DAO, "governanceToken")] == "LendyriumDAO"

    def test_failed_query_names_component(self):
        client = FakeChainClient()
        client.failing_queries["governanceToken"] = "contract type unknown"

        with pytest.raises(VerificationError) as exc_info:
            InvariantVerifier([LinkCheck("dao", "governanceToken", "governanceToken")]).verify(
                make_manifest(), client
            )

        error = exc_info.value
        assert error.component == "dao"
        assert error.query == "governanceToken"
        assert error.actual_address is None
        assert error.reason == "contract type unknown"
        assert "query failed" in str(error)
