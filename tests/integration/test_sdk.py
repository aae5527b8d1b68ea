"""Integration tests for the ReferralSDK facade."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_account import Account

from referral_sdk import ReferralSDK
from referral_sdk.config import ReferralSettings
from referral_sdk.core.models import DustPolicy, ReferrerInfo, WeightedRecipient
from referral_sdk.exceptions import AmountOutOfRangeError, ContractRejectionError, InvalidAddressError
from referral_sdk.gateway.base import ContractGateway
from referral_sdk.gateway.web3_gateway import Web3ContractGateway

ANVIL_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
REFERRER = "0x" + "1" * 40
REFEREE = "0x" + "2" * 40
OTHER = "0x" + "3" * 40
ONE_ETH = 10**18


@pytest.fixture
def sdk(mock_gateway):
    return ReferralSDK(mock_gateway)


class TestForwarding:
    """Read and write calls reach the gateway unchanged."""

    @pytest.mark.asyncio
    async def test_reads(self, sdk, mock_gateway, referrer_info, referee_info):
        assert await sdk.get_referrer_info(REFERRER) == referrer_info
        assert await sdk.get_referee_info(REFEREE) == referee_info
        assert await sdk.is_registered(REFEREE) is True
        assert await sdk.calculate_rebate(REFERRER) == 1420

        mock_gateway.read_rebate.assert_awaited_once_with(REFERRER)

    @pytest.mark.asyncio
    async def test_register_returns_handle(self, sdk, mock_gateway, mock_tx_handle):
        handle = await sdk.register_referral(REFERRER)

        assert handle is mock_tx_handle
        receipt = await handle.wait()
        assert receipt["status"] == 1

    @pytest.mark.asyncio
    async def test_self_referral_rejection_forwarded(self, sdk, mock_gateway):
        """The contract's message reaches the caller verbatim."""
        mock_gateway.submit_register.side_effect = ContractRejectionError("Cannot refer yourself")

        with pytest.raises(ContractRejectionError, match="Cannot refer yourself") as exc_info:
            await sdk.register_referral(REFEREE)

        assert exc_info.value.reason == "Cannot refer yourself"

    @pytest.mark.asyncio
    async def test_update_volume(self, sdk, mock_gateway):
        await sdk.update_volume(REFEREE, 3 * ONE_ETH)

        mock_gateway.submit_update_volume.assert_awaited_once_with(REFEREE, 3 * ONE_ETH)

    @pytest.mark.asyncio
    async def test_negative_volume_never_reaches_gateway(self, sdk, mock_gateway):
        with pytest.raises(AmountOutOfRangeError):
            await sdk.update_volume(REFEREE, -1)

        mock_gateway.submit_update_volume.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_claim_rewards_not_prechecked(self, sdk, mock_gateway):
        """Claiming is left to the contract even with nothing unclaimed."""
        mock_gateway.read_referrer.return_value = ReferrerInfo()

        await sdk.claim_rewards()

        mock_gateway.submit_claim_rewards.assert_awaited_once()
        mock_gateway.read_referrer.assert_not_awaited()


class TestConnect:
    """Tests for ReferralSDK.connect."""

    def test_connect_gateway_replaces(self, sdk):
        other = AsyncMock(spec=ContractGateway)

        assert sdk.connect(other) is sdk
        assert sdk.gateway is other

    def test_connect_account_on_web3_gateway(self):
        gateway = Web3ContractGateway(MagicMock(), CONTRACT_ADDRESS)
        sdk = ReferralSDK(gateway)
        account = Account.from_key(ANVIL_PRIVATE_KEY)

        try:
            sdk.connect(account)

            assert isinstance(sdk.gateway, Web3ContractGateway)
            assert sdk.gateway is not gateway
            assert sdk.gateway.account is account
        finally:
            gateway._executor.shutdown(wait=True)

    @pytest.mark.asyncio
    async def test_close_after_connect_shuts_pool(self):
        """The thread pool is released once the connected SDK closes."""
        gateway = Web3ContractGateway(MagicMock(), CONTRACT_ADDRESS)
        pool = gateway._executor

        async with ReferralSDK(gateway) as sdk:
            sdk.connect(Account.from_key(ANVIL_PRIVATE_KEY))

        with pytest.raises(RuntimeError):
            pool.submit(lambda: 1)

    def test_connect_account_unsupported(self, sdk):
        with pytest.raises(TypeError, match="does not support account signing"):
            sdk.connect(Account.from_key(ANVIL_PRIVATE_KEY))

    @pytest.mark.asyncio
    async def test_context_manager_closes_gateway(self, mock_gateway):
        async with ReferralSDK(mock_gateway):
            pass

        mock_gateway.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_from_settings(self):
        settings = ReferralSettings(_env_file=None, contract_address=CONTRACT_ADDRESS.lower())

        async with ReferralSDK.from_settings(settings) as sdk:
            assert isinstance(sdk.gateway, Web3ContractGateway)
            assert sdk.gateway.contract_address == CONTRACT_ADDRESS
            assert sdk.gateway.account is None


class TestRebateHelpers:
    """Tests for estimate_rebate and verify_rebate."""

    @pytest.mark.asyncio
    async def test_estimate_rebate(self, sdk):
        # 1000 base + 3 active * 100 + 12 ETH * 10
        assert await sdk.estimate_rebate(REFERRER) == 1420

    @pytest.mark.asyncio
    async def test_verify_rebate_matches(self, sdk):
        check = await sdk.verify_rebate(REFERRER)

        assert check.matches
        assert check.onchain_rebate == check.local_rebate == 1420
        assert check.address == REFERRER

    @pytest.mark.asyncio
    async def test_verify_rebate_mismatch(self, sdk, mock_gateway):
        mock_gateway.read_rebate.return_value = 1500

        check = await sdk.verify_rebate(REFERRER)

        assert not check.matches
        assert check.onchain_rebate == 1500
        assert check.local_rebate == 1420


class TestClaimSplitPreview:
    """Tests for preview_claim_split."""

    @pytest.mark.asyncio
    async def test_splits_unclaimed_rewards(self, sdk):
        recipients = [
            WeightedRecipient(address=REFERRER, weight=50),
            WeightedRecipient(address=OTHER, weight=30),
            WeightedRecipient(address=REFEREE, weight=20),
        ]

        result = await sdk.preview_claim_split(REFERRER, recipients)

        assert result.total_reward == ONE_ETH
        assert [s.share for s in result.shares] == [
            ONE_ETH // 2, 3 * ONE_ETH // 10, ONE_ETH // 5,
        ]
        assert result.dust == 0

    @pytest.mark.asyncio
    async def test_dust_policy_applied(self, sdk):
        recipients = [WeightedRecipient(address=a, weight=1) for a in (REFERRER, OTHER, REFEREE)]

        result = await sdk.preview_claim_split(REFERRER, recipients, DustPolicy.FIRST_RECIPIENT)

        assert result.shares[0].share == ONE_ETH // 3 + 1
        assert result.distributed == ONE_ETH
        assert result.dust == 0


class TestNetworkHelpers:
    """Tests for collect_snapshot and analyze_network."""

    @pytest.mark.asyncio
    async def test_collect_snapshot_keeps_order(self, sdk, mock_gateway):
        infos = {
            OTHER: ReferrerInfo(total_referees=1, total_volume=ONE_ETH),
            REFERRER: ReferrerInfo(total_referees=2, total_volume=5 * ONE_ETH),
        }
        mock_gateway.read_referrer.side_effect = lambda address: infos[address]

        snapshot = await sdk.collect_snapshot([OTHER, REFERRER], [REFEREE])

        assert list(snapshot.referrers) == [OTHER, REFERRER]
        assert list(snapshot.referees) == [REFEREE]

    @pytest.mark.asyncio
    async def test_collect_snapshot_rejects_bad_address(self, sdk, mock_gateway):
        with pytest.raises(InvalidAddressError):
            await sdk.collect_snapshot(["bob"])

        mock_gateway.read_referrer.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_analyze_network(self, sdk, mock_gateway):
        infos = {
            OTHER: ReferrerInfo(total_referees=1, total_volume=ONE_ETH),
            REFERRER: ReferrerInfo(
                total_referees=3,
                total_volume=7 * ONE_ETH,
                earned_rewards=ONE_ETH,
            ),
        }
        mock_gateway.read_referrer.side_effect = lambda address: infos[address]

        stats = await sdk.analyze_network([OTHER, REFERRER])

        assert stats.total_referrers == 2
        assert stats.total_referees == 4
        assert stats.total_volume == 8 * ONE_ETH
        assert stats.average_volume_per_referee == 2 * ONE_ETH
        assert stats.total_unclaimed_rewards == ONE_ETH
        assert [t.address for t in stats.top_referrers] == [REFERRER, OTHER]

    def test_generate_referral_link(self, sdk):
        link = sdk.generate_referral_link(REFERRER, "https://x.com", {"source": "a"})
        assert link == f"https://x.com/?ref={REFERRER}&utm_source=a"
