"""
web3.py implementation of the contract gateway.

Blocking web3 calls run in a thread pool and are bounded by the
configured RPC timeout. Failed calls are logged and re-raised as SDK
errors; nothing is retried.
"""

import asyncio
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger
from web3 import Web3
from web3.contract import Contract
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception

from referral_sdk.config import ReferralSettings
from referral_sdk.core.models import RefereeInfo, ReferrerInfo
from referral_sdk.exceptions import ContractRejectionError, GatewayError, GatewayTimeoutError
from referral_sdk.gateway.abi import REFERRAL_ABI
from referral_sdk.gateway.base import ContractGateway, TransactionHandle
from referral_sdk.utils.validation import ensure_uint, normalize_address


class Web3TransactionHandle(TransactionHandle):
    """Transaction submitted through a Web3ContractGateway."""

    def __init__(self, gateway: "Web3ContractGateway", tx_hash: str) -> None:
        self.hash = tx_hash
        self._gateway = gateway

    async def wait(self, timeout: float | None = None) -> dict[str, Any]:
        """
        Wait for the transaction receipt.

        Args:
            timeout: Seconds to wait (default: gateway receipt_timeout)

        Returns:
            Receipt as a dict

        Raises:
            ContractRejectionError: If the receipt status is not 1
            GatewayTimeoutError: If the transaction is not mined in time
        """
        if timeout is None:
            timeout = self._gateway.receipt_timeout
        receipt = await self._gateway._run(
            lambda w3: w3.eth.wait_for_transaction_receipt(self.hash, timeout=timeout),
            operation_name=f"wait_for_receipt({self.hash})",
            timeout=timeout + self._gateway.rpc_timeout,
        )

        if receipt["status"] != 1:
            logger.error(f"Transaction {self.hash} reverted in block {receipt.get('blockNumber')}")
            raise ContractRejectionError(f"Transaction {self.hash} reverted")

        logger.info(
            f"Transaction {self.hash} confirmed in block {receipt.get('blockNumber')} "
            f"(gas used: {receipt.get('gasUsed')})"
        )
        return dict(receipt)


class Web3ContractGateway(ContractGateway):
    """
    Referral contract access over web3.py.

    Features:
    - Lazy contract instantiation
    - Checksummed addresses at every call boundary
    - Local signing when an account is supplied, node signing otherwise
    - Contract reverts forwarded as ContractRejectionError
    """

    def __init__(
        self,
        web3: Web3,
        contract_address: str,
        account: LocalAccount | None = None,
        rpc_timeout: float = 30.0,
        receipt_timeout: float = 120.0,
        max_workers: int = 4,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        """
        Initialize gateway.

        Args:
            web3: Web3 instance
            contract_address: Referral contract address
            account: Account used to sign write calls (optional)
            rpc_timeout: Per-call timeout in seconds
            receipt_timeout: Confirmation timeout in seconds
            max_workers: Thread pool size when no executor is given
            executor: Shared thread pool (not shut down by this gateway)
        """
        self.web3 = web3
        self.contract_address = normalize_address(contract_address)
        self.account = account
        self.rpc_timeout = rpc_timeout
        self.receipt_timeout = receipt_timeout

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="web3",
        )
        self._contract: Contract | None = None

        logger.debug(
            f"Web3ContractGateway initialized: contract={self.contract_address}, "
            f"signer={account.address if account else 'node default'}"
        )

    @classmethod
    def from_settings(cls, settings: ReferralSettings) -> "Web3ContractGateway":
        """
        Create a gateway with an HTTP provider from settings.

        Args:
            settings: SDK settings

        Returns:
            Configured gateway
        """
        web3 = Web3(Web3.HTTPProvider(
            settings.rpc_url,
            request_kwargs={"timeout": settings.rpc_timeout},
        ))
        account = Account.from_key(settings.private_key) if settings.private_key else None

        return cls(
            web3,
            settings.contract_address,
            account=account,
            rpc_timeout=settings.rpc_timeout,
            receipt_timeout=settings.receipt_timeout,
            max_workers=settings.executor_workers,
        )

    @property
    def contract(self) -> Contract:
        """Referral contract instance (lazy loaded)."""
        if self._contract is None:
            self._contract = self.web3.eth.contract(
                address=self.contract_address,
                abi=REFERRAL_ABI,
            )
            logger.debug(f"Referral contract created: {self.contract_address}")
        return self._contract

    def with_account(self, account: LocalAccount) -> "Web3ContractGateway":
        """
        Return a gateway that signs with ``account``.

        The new gateway shares this gateway's provider and thread pool.
        Ownership of the pool moves with it: closing the returned gateway
        shuts the pool down, closing this one no longer does.
        """
        gateway = Web3ContractGateway(
            self.web3,
            self.contract_address,
            account=account,
            rpc_timeout=self.rpc_timeout,
            receipt_timeout=self.receipt_timeout,
            executor=self._executor,
        )
        gateway._owns_executor = self._owns_executor
        self._owns_executor = False
        return gateway

    async def _run(
        self,
        sync_func: Callable[[Web3], Any],
        operation_name: str,
        timeout: float | None = None,
    ) -> Any:
        """
        Run a synchronous web3 call in the thread pool.

        Args:
            sync_func: Function taking the Web3 instance
            operation_name: Name used in logs and errors
            timeout: Override for rpc_timeout

        Raises:
            ContractRejectionError: If the contract reverted
            GatewayTimeoutError: If the call timed out
            GatewayError: For other web3 failures
        """
        if timeout is None:
            timeout = self.rpc_timeout
        loop = asyncio.get_running_loop()

        try:
            result = await asyncio.wait_for(
                loop.run_in_executor(self._executor, lambda: sync_func(self.web3)),
                timeout=timeout,
            )
            logger.debug(f"{operation_name} completed")
            return result
        except TimeoutError as e:
            error_msg = f"{operation_name} timed out after {timeout}s"
            logger.error(error_msg)
            raise GatewayTimeoutError(error_msg) from e
        except ContractLogicError as e:
            message = getattr(e, "message", None) or str(e)
            logger.warning(f"{operation_name} rejected by contract: {message}")
            raise ContractRejectionError(message) from e
        except TimeExhausted as e:
            logger.error(f"{operation_name} timed out: {e}")
            raise GatewayTimeoutError(str(e)) from e
        except Web3Exception as e:
            logger.error(f"{operation_name} failed: {e}")
            raise GatewayError(f"{operation_name} failed: {e}") from e

    async def read_referrer(self, address: str) -> ReferrerInfo:
        checksum = normalize_address(address)
        raw = await self._run(
            lambda w3: self.contract.functions.referrers(checksum).call(),
            operation_name=f"referrers({checksum})",
        )
        return ReferrerInfo.from_contract(tuple(raw))

    async def read_referee(self, address: str) -> RefereeInfo:
        checksum = normalize_address(address)
        raw = await self._run(
            lambda w3: self.contract.functions.referees(checksum).call(),
            operation_name=f"referees({checksum})",
        )
        return RefereeInfo.from_contract(tuple(raw))

    async def read_is_registered(self, address: str) -> bool:
        checksum = normalize_address(address)
        return bool(await self._run(
            lambda w3: self.contract.functions.isRegistered(checksum).call(),
            operation_name=f"isRegistered({checksum})",
        ))

    async def read_rebate(self, address: str) -> int:
        checksum = normalize_address(address)
        return int(await self._run(
            lambda w3: self.contract.functions.calculateRebate(checksum).call(),
            operation_name=f"calculateRebate({checksum})",
        ))

    async def submit_register(self, referrer: str) -> Web3TransactionHandle:
        return await self._submit("registerReferral", normalize_address(referrer))

    async def submit_update_volume(self, trader: str, volume: int) -> Web3TransactionHandle:
        ensure_uint(volume, "volume")
        return await self._submit("updateVolume", normalize_address(trader), volume)

    async def submit_claim_rewards(self) -> Web3TransactionHandle:
        return await self._submit("claimRewards")

    async def _submit(self, function_name: str, *args: Any) -> Web3TransactionHandle:
        """Send a contract transaction and return its handle."""

        def _send(w3: Web3) -> bytes:
            function = getattr(self.contract.functions, function_name)(*args)

            if self.account is None:
                # Node signs with its default/unlocked account
                return function.transact()

            transaction = function.build_transaction({
                "from": self.account.address,
                "nonce": w3.eth.get_transaction_count(self.account.address, "pending"),
            })
            signed = self.account.sign_transaction(transaction)
            return w3.eth.send_raw_transaction(signed.raw_transaction)

        tx_hash = await self._run(_send, operation_name=function_name)
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"Transaction sent: {function_name} hash={tx_hash_hex}")
        return Web3TransactionHandle(self, tx_hash_hex)

    async def close(self) -> None:
        """Shut down the thread pool if this gateway created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)
