"""Tests for data models."""

import pytest

from ecosystem_deploy.models.component import (
    AddressRef,
    ComponentKind,
    ComponentSpec,
    FactoryInvocation,
    parse_args,
)
from ecosystem_deploy.models.config import DeployConfig
from ecosystem_deploy.models.manifest import TxReceipt
from ecosystem_deploy.constants import BUILTIN_REGISTRIES_DIR


class TestAddressRef:

    def test_parse_reference(self):
        assert AddressRef.parse("${Token.address}") == AddressRef("Token", "address")

    @pytest.mark.parametrize("value", ["Token.address", "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE", 42, None, "${.address}"])
    def test_literals_are_not_references(self, value):
        assert AddressRef.parse(value) is None

    def test_parse_args_handles_nesting(self):
        assert parse_args(["${A.address}", ["${deployer.address}", 1]]) == [
            AddressRef("A"), [AddressRef("deployer"), 1]
        ]

    def test_serializes_back(self):
        assert AddressRef("Token").to_str() == "${Token.address}"


class TestComponentSpec:

    def test_contract_defaults_to_name(self):
        assert ComponentSpec(name="Token").contract == "Token"

    def test_kind_from_string(self):
        spec = ComponentSpec(name="F", kind="factory", invocation=FactoryInvocation("go", outputs=["x"]))
        assert spec.kind == ComponentKind.FACTORY
        assert spec.produces == ("F", "x")

    def test_produced_kind_cannot_be_declared(self):
        with pytest.raises(ValueError):
            ComponentSpec(name="dao", kind=ComponentKind.PRODUCED)

    def test_invocation_only_on_factories(self):
        with pytest.raises(ValueError):
            ComponentSpec(name="T", invocation=FactoryInvocation("go"))

    def test_references_cover_invocation(self):
        spec = ComponentSpec(
            name="F", kind=ComponentKind.FACTORY, args=[AddressRef("A")],
            invocation=FactoryInvocation("go", args=[AddressRef("B")], outputs=["x"])
        )
        assert spec.references == [AddressRef("A"), AddressRef("B")]

    def test_contract_types_only_for_declared_outputs(self):
        with pytest.raises(ValueError):
            FactoryInvocation("go", outputs=["x"], output_contracts={"y": "Y"})

    def test_untyped_outputs_serialize_as_list(self):
        assert FactoryInvocation("go", outputs=["x", "y"]).to_dict()["outputs"] == ["x", "y"]


class TestTxReceipt:

    def test_failed_receipt(self):
        receipt = TxReceipt(tx_hash="0x1", status=False, reason="reverted")
        assert not receipt.succeeded
        assert TxReceipt.from_dict(receipt.to_dict()) == receipt


class TestDeployConfig:

    def test_bare_registry_name_is_bundled(self, tmp_path):
        assert DeployConfig(registry="lendyrium").resolve_registry(tmp_path) == \
            BUILTIN_REGISTRIES_DIR / "lendyrium.yaml"

    def test_relative_paths_use_project_root(self, tmp_path):
        config = DeployConfig(registry="registries/mine.yaml", manifests_dir="out")
        assert config.resolve_registry(tmp_path) == tmp_path / "registries" / "mine.yaml"
        assert config.resolve_manifests_dir(tmp_path) == tmp_path / "out"

    def test_merge_ignores_none(self):
        config = DeployConfig(network="ethereum:sepolia").merge({"network": None, "account": "ops"})
        assert config.network == "ethereum:sepolia"
        assert config.account == "ops"

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError):
            DeployConfig.from_dict({"netwrok": "x"})
