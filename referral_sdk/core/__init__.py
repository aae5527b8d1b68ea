"""
Core referral computations.

Pure, network-free calculators and the value models they exchange.
"""

from referral_sdk.core.analyzer import NetworkAnalyzer
from referral_sdk.core.claims import create_retroactive_claim
from referral_sdk.core.links import ReferralLinkBuilder
from referral_sdk.core.models import (
    DustPolicy,
    NetworkSnapshot,
    NetworkStats,
    PotentialRewards,
    RebateCheck,
    RecipientShare,
    RefereeInfo,
    ReferrerInfo,
    RetroactiveClaim,
    SplitResult,
    TopReferrer,
    WeightedRecipient,
)
from referral_sdk.core.rebate import RebateCalculator
from referral_sdk.core.splitter import RewardSplitter

__all__ = [
    "RebateCalculator",
    "RewardSplitter",
    "NetworkAnalyzer",
    "ReferralLinkBuilder",
    "create_retroactive_claim",
    "DustPolicy",
    "NetworkSnapshot",
    "NetworkStats",
    "PotentialRewards",
    "RebateCheck",
    "RecipientShare",
    "RefereeInfo",
    "ReferrerInfo",
    "RetroactiveClaim",
    "SplitResult",
    "TopReferrer",
    "WeightedRecipient",
]
