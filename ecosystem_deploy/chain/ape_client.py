"""Chain client backed by the ape framework"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

from ape import Contract, accounts, chain, networks, project
from ape.exceptions import ApeException

from .base import ChainClient
from ..api.exceptions import TransactionRejectedError
from ..models.manifest import TxReceipt


class ApeChainClient(ChainClient):
    """ChainClient over an ape provider connection and signer account"""

    def __init__(self, account):
        """
        Initialize ape chain client

        Args:
            account: ape account used as sender for every transaction
        """
        self.account = account
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    @contextmanager
    def connect(cls, network: str, account_alias: Optional[str] = None) -> Iterator['ApeChainClient']:
        """Connect to a network for the duration of the context

        Args:
            network: ape network choice, e.g. ``ethereum:sepolia:alchemy``
            account_alias: Alias of an imported ape account; the first
                test account is used when omitted

        Yields:
            Connected client
        """
        with networks.parse_network_choice(network):
            if account_alias:
                account = accounts.load(account_alias)
            else:
                account = accounts.test_accounts[0]
            yield cls(account)

    def deploy(self, contract: str, args: List[Any]) -> Tuple[str, TxReceipt]:
        try:
            container = getattr(project, contract)
        except AttributeError:
            raise TransactionRejectedError(f"Contract artifact not found: {contract}")

        try:
            instance = self.account.deploy(container, *args)
        except ApeException as e:
            raise TransactionRejectedError(str(e)) from e

        self.logger.debug(f"{contract} deployed at {instance.address}")
        return str(instance.address), self._to_receipt(instance.receipt)

    def call(self, address: str, method: str, args: List[Any],
             contract: Optional[str] = None) -> Any:
        try:
            instance = self._at(address, contract)
            return getattr(instance, method)(*args)
        except ApeException as e:
            raise TransactionRejectedError(f"{method}() on {address} failed: {e}") from e

    def invoke(self, address: str, method: str, args: List[Any],
               contract: Optional[str] = None) -> TxReceipt:
        try:
            instance = self._at(address, contract)
            receipt = getattr(instance, method)(*args, sender=self.account)
        except ApeException as e:
            raise TransactionRejectedError(str(e)) from e
        return self._to_receipt(receipt)

    def current_network_id(self) -> str:
        return str(chain.provider.chain_id)

    def deployer_address(self) -> str:
        return str(self.account.address)

    @staticmethod
    def _at(address: str, contract: Optional[str]):
        """Bind an address to its project container, falling back to ape's contract cache"""
        container = getattr(project, contract, None) if contract else None
        if container is not None:
            return container.at(address)
        return Contract(address)

    @staticmethod
    def _to_receipt(receipt) -> TxReceipt:
        failed = bool(receipt.failed)
        return TxReceipt(
            tx_hash=str(receipt.txn_hash),
            block_number=receipt.block_number,
            status=not failed,
            reason="transaction reverted" if failed else None
        )
