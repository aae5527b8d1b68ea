"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for settings validation
os.environ.setdefault("REFERRAL_CONTRACT_ADDRESS", "0x5FbDB2315678afecb367f032d93F642f64180aa3")
os.environ.setdefault("REFERRAL_RPC_URL", "http://127.0.0.1:8545")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from unittest.mock import AsyncMock, MagicMock

from referral_sdk.core.models import RefereeInfo, ReferrerInfo
from referral_sdk.gateway.base import ContractGateway


# Anvil's first default dev account (public test key)
ANVIL_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
ANVIL_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
REFERRER_ADDRESS = "0x" + "1" * 40
REFEREE_ADDRESS = "0x" + "2" * 40
OTHER_ADDRESS = "0x" + "3" * 40

ONE_ETH = 10**18


@pytest.fixture
def sample_wallet_address():
    """Sample valid wallet address for testing."""
    return REFERRER_ADDRESS


@pytest.fixture
def sample_transaction_hash():
    """Sample transaction hash for testing."""
    return "0x1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"


@pytest.fixture
def referrer_info():
    """Referrer with 3 of 4 referees active, 12 ETH volume, 1 ETH unclaimed."""
    return ReferrerInfo(
        total_referees=4,
        active_referees=3,
        total_volume=12 * ONE_ETH,
        earned_rewards=3 * ONE_ETH,
        claimed_rewards=2 * ONE_ETH,
    )


@pytest.fixture
def referee_info():
    """Active referee of REFERRER_ADDRESS."""
    return RefereeInfo(
        referrer=REFERRER_ADDRESS,
        trading_volume=2 * ONE_ETH,
        last_trade_timestamp=1_700_000_000,
        is_active=True,
    )


@pytest.fixture
def mock_tx_handle(sample_transaction_hash):
    """Mock transaction handle."""
    handle = MagicMock()
    handle.hash = sample_transaction_hash
    handle.wait = AsyncMock(return_value={"status": 1, "blockNumber": 12345})
    return handle


@pytest.fixture
def mock_gateway(referrer_info, referee_info, mock_tx_handle):
    """Mock ContractGateway with canned reads and writes."""
    gateway = AsyncMock(spec=ContractGateway)
    gateway.read_referrer = AsyncMock(return_value=referrer_info)
    gateway.read_referee = AsyncMock(return_value=referee_info)
    gateway.read_is_registered = AsyncMock(return_value=True)
    gateway.read_rebate = AsyncMock(return_value=1420)
    gateway.submit_register = AsyncMock(return_value=mock_tx_handle)
    gateway.submit_update_volume = AsyncMock(return_value=mock_tx_handle)
    gateway.submit_claim_rewards = AsyncMock(return_value=mock_tx_handle)
    gateway.close = AsyncMock()
    return gateway
