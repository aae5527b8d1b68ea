"""
Referral SDK - main entry point.

ReferralSDK coordinates the contract gateway and the pure calculators:
- ContractGateway: on-chain reads and writes
- RebateCalculator: off-chain rebate mirror
- RewardSplitter: proration of unclaimed rewards
- NetworkAnalyzer: statistics over collected snapshots
- ReferralLinkBuilder: referral URLs
"""

import asyncio
from collections.abc import Iterable, Sequence

from eth_account.signers.local import LocalAccount
from loguru import logger

from referral_sdk.config import ReferralSettings, get_settings
from referral_sdk.core.analyzer import NetworkAnalyzer
from referral_sdk.core.links import ReferralLinkBuilder
from referral_sdk.core.models import (
    DustPolicy,
    NetworkSnapshot,
    NetworkStats,
    RebateCheck,
    RefereeInfo,
    ReferrerInfo,
    SplitResult,
    WeightedRecipient,
)
from referral_sdk.core.rebate import RebateCalculator
from referral_sdk.core.splitter import RewardSplitter
from referral_sdk.gateway.base import ContractGateway, TransactionHandle
from referral_sdk.gateway.web3_gateway import Web3ContractGateway
from referral_sdk.types import LinkParams
from referral_sdk.utils.formatters import format_basis_points, format_token_amount
from referral_sdk.utils.validation import ensure_uint, normalize_address


class ReferralSDK:
    """
    Client for the referral-rewards contract.

    Read and write calls are forwarded to the gateway unchanged,
    including contract rejections. Helper methods combine gateway
    reads with the off-chain calculators.
    """

    def __init__(
        self,
        gateway: ContractGateway,
        calculator: RebateCalculator | None = None,
        splitter: RewardSplitter | None = None,
        analyzer: NetworkAnalyzer | None = None,
        link_builder: ReferralLinkBuilder | None = None,
    ) -> None:
        """
        Initialize SDK.

        Args:
            gateway: Contract gateway used for all chain access
            calculator: Rebate calculator (default instance if None)
            splitter: Reward splitter (default instance if None)
            analyzer: Network analyzer (default instance if None)
            link_builder: Link builder (default instance if None)
        """
        self.gateway = gateway
        self.calculator = calculator or RebateCalculator()
        self.splitter = splitter or RewardSplitter()
        self.analyzer = analyzer or NetworkAnalyzer()
        self.link_builder = link_builder or ReferralLinkBuilder()

    @classmethod
    def from_settings(cls, settings: ReferralSettings | None = None) -> "ReferralSDK":
        """
        Create an SDK backed by a web3 HTTP gateway.

        Args:
            settings: SDK settings (loaded from environment if None)
        """
        settings = settings or get_settings()
        return cls(Web3ContractGateway.from_settings(settings))

    def connect(self, signer: LocalAccount | ContractGateway) -> "ReferralSDK":
        """
        Switch to a signing gateway for write operations.

        Args:
            signer: Account to sign with, or a ready gateway

        Returns:
            This SDK instance

        Raises:
            TypeError: If the current gateway cannot sign with an account
        """
        if isinstance(signer, ContractGateway):
            self.gateway = signer
        elif isinstance(self.gateway, Web3ContractGateway):
            self.gateway = self.gateway.with_account(signer)
        else:
            raise TypeError(
                f"{type(self.gateway).__name__} does not support account signing; "
                f"pass a ContractGateway instead"
            )

        logger.debug(f"ReferralSDK connected with {type(self.gateway).__name__}")
        return self

    async def close(self) -> None:
        await self.gateway.close()

    async def __aenter__(self) -> "ReferralSDK":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # Read methods

    async def get_referrer_info(self, address: str) -> ReferrerInfo:
        return await self.gateway.read_referrer(address)

    async def get_referee_info(self, address: str) -> RefereeInfo:
        return await self.gateway.read_referee(address)

    async def is_registered(self, address: str) -> bool:
        return await self.gateway.read_is_registered(address)

    async def calculate_rebate(self, referrer: str) -> int:
        """On-chain rebate rate in basis points."""
        return await self.gateway.read_rebate(referrer)

    # Write methods

    async def register_referral(self, referrer: str) -> TransactionHandle:
        """
        Register the signer as a referee of ``referrer``.

        Raises:
            ContractRejectionError: If the contract rejects the registration
                (e.g. "Cannot refer yourself")
        """
        return await self.gateway.submit_register(referrer)

    async def update_volume(self, trader: str, volume: int) -> TransactionHandle:
        ensure_uint(volume, "volume")
        return await self.gateway.submit_update_volume(trader, volume)

    async def claim_rewards(self) -> TransactionHandle:
        return await self.gateway.submit_claim_rewards()

    # Off-chain helpers

    def generate_referral_link(
        self,
        referrer_address: str,
        base_url: str,
        params: LinkParams | None = None,
    ) -> str:
        return self.link_builder.build_link(referrer_address, base_url, params)

    async def estimate_rebate(self, address: str) -> int:
        """Rebate rate computed locally from the referrer's on-chain record."""
        info = await self.gateway.read_referrer(address)
        return self.calculator.rebate_for(info)

    async def verify_rebate(self, address: str) -> RebateCheck:
        """
        Compare the contract's rebate with the local formula.

        A mismatch means the contract formula changed and the local
        mirror must be updated.
        """
        info, onchain = await asyncio.gather(
            self.gateway.read_referrer(address),
            self.gateway.read_rebate(address),
        )
        check = RebateCheck(
            address=address,
            onchain_rebate=onchain,
            local_rebate=self.calculator.rebate_for(info),
        )

        if check.matches:
            logger.debug(f"Rebate for {address} matches: {format_basis_points(onchain)}")
        else:
            logger.warning(
                f"Rebate mismatch for {address}: on-chain={format_basis_points(onchain)}, "
                f"local={format_basis_points(check.local_rebate)}"
            )
        return check

    async def preview_claim_split(
        self,
        address: str,
        recipients: Sequence[WeightedRecipient],
        dust_policy: DustPolicy = DustPolicy.NONE,
    ) -> SplitResult:
        """
        Split a referrer's unclaimed rewards between recipients.

        Args:
            address: Referrer whose earned - claimed delta is split
            recipients: Weighted recipients
            dust_policy: Where the truncation remainder goes

        Returns:
            SplitResult for the unclaimed amount
        """
        info = await self.gateway.read_referrer(address)
        result = self.splitter.split(info.unclaimed_rewards, recipients, dust_policy)

        logger.info(
            f"Claim split preview for {address}: "
            f"{format_token_amount(info.unclaimed_rewards)} across "
            f"{len(recipients)} recipients, dust={result.dust}"
        )
        return result

    async def collect_snapshot(
        self,
        referrers: Iterable[str],
        referees: Iterable[str] = (),
    ) -> NetworkSnapshot:
        """
        Read referrer and referee records into a snapshot.

        Records keep the order of the given addresses. Reads are not
        atomic across blocks.
        """
        referrer_addresses = [normalize_address(a) for a in referrers]
        referee_addresses = [normalize_address(a) for a in referees]

        referrer_infos = await asyncio.gather(
            *(self.gateway.read_referrer(a) for a in referrer_addresses)
        )
        referee_infos = await asyncio.gather(
            *(self.gateway.read_referee(a) for a in referee_addresses)
        )

        return NetworkSnapshot(
            referrers=dict(zip(referrer_addresses, referrer_infos)),
            referees=dict(zip(referee_addresses, referee_infos)),
        )

    async def analyze_network(
        self,
        referrers: Iterable[str],
        referees: Iterable[str] = (),
    ) -> NetworkStats:
        """Collect a snapshot and compute its statistics."""
        snapshot = await self.collect_snapshot(referrers, referees)
        return self.analyzer.analyze(snapshot)
