"""
Type definitions for the referral SDK.

TypedDict for link parameters and the raw tuples returned
by the contract getters.
"""

from typing import TypedDict


class LinkParams(TypedDict, total=False):
    """
    Optional UTM tracking parameters for a referral link.

    Attributes:
        source: utm_source value
        medium: utm_medium value
        campaign: utm_campaign value
    """
    source: str
    medium: str
    campaign: str


# referrers(address) -> (totalReferees, activeReferees, totalVolume, earnedRewards, claimedRewards)
ReferrerTuple = tuple[int, int, int, int, int]

# referees(address) -> (referrer, tradingVolume, lastTradeTimestamp, isActive)
RefereeTuple = tuple[str, int, int, bool]
