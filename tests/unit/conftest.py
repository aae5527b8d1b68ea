"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Calculator instances
- ReferrerInfo factory
"""

import pytest

from referral_sdk.core.analyzer import NetworkAnalyzer
from referral_sdk.core.links import ReferralLinkBuilder
from referral_sdk.core.models import ReferrerInfo
from referral_sdk.core.rebate import RebateCalculator
from referral_sdk.core.splitter import RewardSplitter


@pytest.fixture
def calc() -> RebateCalculator:
    """Create rebate calculator instance."""
    return RebateCalculator()


@pytest.fixture
def splitter() -> RewardSplitter:
    """Create reward splitter instance."""
    return RewardSplitter()


@pytest.fixture
def analyzer() -> NetworkAnalyzer:
    """Create network analyzer instance."""
    return NetworkAnalyzer()


@pytest.fixture
def link_builder() -> ReferralLinkBuilder:
    """Create link builder instance."""
    return ReferralLinkBuilder()


@pytest.fixture
def make_referrer():
    """
    Factory for ReferrerInfo records.

    Returns:
        Callable building a consistent ReferrerInfo from a volume
    """
    def _make(
        volume: int = 0,
        total_referees: int = 0,
        active_referees: int = 0,
        earned: int = 0,
        claimed: int = 0,
    ) -> ReferrerInfo:
        return ReferrerInfo(
            total_referees=total_referees,
            active_referees=active_referees,
            total_volume=volume,
            earned_rewards=earned,
            claimed_rewards=claimed,
        )
    return _make
