# ecosystem_deploy/chain/base.py
"""Chain client abstract base class"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from ..models.manifest import TxReceipt


class ChainClient(ABC):
    """Capability for submitting and querying on-chain transactions

    Implementations block until each transaction is confirmed and serialize
    submissions per signer nonce. When the network rejects a transaction
    outright, or a query cannot be answered, they raise
    TransactionRejectedError; a mined but reverted transaction is reported
    through a receipt with ``status`` False.
    """

    @abstractmethod
    def deploy(self, contract: str, args: List[Any]) -> Tuple[str, TxReceipt]:
        """
        Deploy a contract and wait for confirmation

        Args:
            contract: Contract (artifact) name
            args: Constructor arguments, references already resolved

        Returns:
            Deployed address and deployment receipt
        """
        pass

    @abstractmethod
    def call(self, address: str, method: str, args: List[Any],
             contract: Optional[str] = None) -> Any:
        """
        Read-only query

        Args:
            address: Contract address
            method: View method name
            args: Method arguments
            contract: Contract type at the address, when known

        Returns:
            Decoded return value
        """
        pass

    @abstractmethod
    def invoke(self, address: str, method: str, args: List[Any],
               contract: Optional[str] = None) -> TxReceipt:
        """
        State-changing call, waiting for confirmation

        Args:
            address: Contract address
            method: Method name
            args: Method arguments
            contract: Contract type at the address, when known

        Returns:
            Transaction receipt
        """
        pass

    @abstractmethod
    def current_network_id(self) -> str:
        """Identity of the connected chain"""
        pass

    @abstractmethod
    def deployer_address(self) -> str:
        """Address of the account signing transactions"""
        pass
