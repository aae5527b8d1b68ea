"""
Referral SDK.

Client for an on-chain referral-rewards contract with off-chain
helpers for rebate projection, reward splitting, network statistics
and referral links.

Example:
    >>> from referral_sdk import RebateCalculator, ReferrerInfo
    >>>
    >>> calc = RebateCalculator()
    >>> info = ReferrerInfo(
    ...     total_referees=4,
    ...     active_referees=3,
    ...     total_volume=12 * 10**18,
    ... )
    >>> calc.rebate_for(info)
    1420
    >>> calc.projected_rewards(info, additional_referees=2).projected_rebate
    1620
"""

from referral_sdk.config import ReferralSettings, get_settings
from referral_sdk.core import (
    DustPolicy,
    NetworkAnalyzer,
    NetworkSnapshot,
    NetworkStats,
    PotentialRewards,
    RebateCalculator,
    RebateCheck,
    RecipientShare,
    RefereeInfo,
    ReferralLinkBuilder,
    ReferrerInfo,
    RetroactiveClaim,
    RewardSplitter,
    SplitResult,
    TopReferrer,
    WeightedRecipient,
    create_retroactive_claim,
)
from referral_sdk.exceptions import (
    AmountOutOfRangeError,
    ContractRejectionError,
    GatewayError,
    GatewayTimeoutError,
    InvalidAddressError,
    InvalidUrlError,
    InvalidWeightsError,
    ReferralSDKError,
    ValidationError,
)
from referral_sdk.gateway import (
    ContractGateway,
    TransactionHandle,
    Web3ContractGateway,
)
from referral_sdk.sdk import ReferralSDK
from referral_sdk.utils import (
    format_basis_points,
    format_token_amount,
    setup_logging,
)


__version__ = "1.0.0"
__all__ = [
    # Entry point
    "ReferralSDK",
    # Calculators
    "RebateCalculator",
    "RewardSplitter",
    "NetworkAnalyzer",
    "ReferralLinkBuilder",
    "create_retroactive_claim",
    # Models
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
    # Gateway
    "ContractGateway",
    "TransactionHandle",
    "Web3ContractGateway",
    # Configuration
    "ReferralSettings",
    "get_settings",
    # Errors
    "ReferralSDKError",
    "ValidationError",
    "InvalidUrlError",
    "InvalidWeightsError",
    "InvalidAddressError",
    "AmountOutOfRangeError",
    "ContractRejectionError",
    "GatewayError",
    "GatewayTimeoutError",
    # Utilities
    "format_basis_points",
    "format_token_amount",
    "setup_logging",
]
