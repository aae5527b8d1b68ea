"""
Contract gateway interface.

The SDK reaches the referral contract only through this interface, so
the arithmetic core and the facade can be exercised without a chain.
"""

from abc import ABC, abstractmethod
from typing import Any

from referral_sdk.core.models import RefereeInfo, ReferrerInfo


class TransactionHandle(ABC):
    """A submitted transaction.

    Attributes:
        hash: 0x-prefixed transaction hash
    """

    hash: str

    @abstractmethod
    async def wait(self, timeout: float | None = None) -> dict[str, Any]:
        """Wait for confirmation and return the receipt.

        Raises:
            ContractRejectionError: If the transaction reverted
            GatewayTimeoutError: If it was not mined in time
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(hash={self.hash!r})"


class ContractGateway(ABC):
    """Read/write capability for the referral contract.

    Contract reverts surface as ContractRejectionError with the
    contract's message unchanged.
    """

    @abstractmethod
    async def read_referrer(self, address: str) -> ReferrerInfo:
        pass

    @abstractmethod
    async def read_referee(self, address: str) -> RefereeInfo:
        pass

    @abstractmethod
    async def read_is_registered(self, address: str) -> bool:
        pass

    @abstractmethod
    async def read_rebate(self, address: str) -> int:
        """On-chain rebate rate in basis points."""
        pass

    @abstractmethod
    async def submit_register(self, referrer: str) -> TransactionHandle:
        """Register the sender as a referee of ``referrer``."""
        pass

    @abstractmethod
    async def submit_update_volume(self, trader: str, volume: int) -> TransactionHandle:
        pass

    @abstractmethod
    async def submit_claim_rewards(self) -> TransactionHandle:
        pass

    async def close(self) -> None:
        """Release resources held by the gateway."""
        return None

    async def __aenter__(self) -> "ContractGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
