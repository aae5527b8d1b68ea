"""
Off-chain mirror of the contract's rebate formula.

This module contains standalone calculation logic without any
dependencies on web3 or the network. Results must match
``calculateRebate`` on-chain exactly, so only integer floor division
is used.
"""

from loguru import logger

from referral_sdk.constants import (
    BASE_REBATE_BPS,
    MAX_REBATE_BPS,
    REBATE_PER_REFEREE_BPS,
    VOLUME_MULTIPLIER_BPS,
    VOLUME_UNIT,
)
from referral_sdk.core.models import PotentialRewards, ReferrerInfo
from referral_sdk.utils.validation import ensure_uint


class RebateCalculator:
    """
    Pure calculator for referrer rebate rates.

    All rates are in basis points (1 bps = 0.01%).
    """

    def rebate_rate(self, total_volume: int, active_referees: int) -> int:
        """
        Calculate the rebate rate for a referrer.

        Formula:
            base = active_referees * 100 + 1000
            bonus = (total_volume // 1e18) * 10
            rate = min(base + bonus, 5000)

        Args:
            total_volume: Aggregate referee volume in wei
            active_referees: Number of active referees

        Returns:
            Rebate rate in basis points

        Raises:
            AmountOutOfRangeError: If an input is negative or overflows its type

        Example:
            >>> calc = RebateCalculator()
            >>> calc.rebate_rate(0, 0)
            1000
            >>> calc.rebate_rate(5 * 10**18, 3)
            1350
        """
        ensure_uint(total_volume, "total_volume")
        ensure_uint(active_referees, "active_referees")

        base_rebate = active_referees * REBATE_PER_REFEREE_BPS + BASE_REBATE_BPS
        volume_multiplier = (total_volume // VOLUME_UNIT) * VOLUME_MULTIPLIER_BPS

        return min(base_rebate + volume_multiplier, MAX_REBATE_BPS)

    def rebate_for(self, info: ReferrerInfo) -> int:
        """Rebate rate for a referrer record."""
        return self.rebate_rate(info.total_volume, info.active_referees)

    def projected_rewards(
        self,
        current: ReferrerInfo,
        additional_volume: int = 0,
        additional_referees: int = 0,
    ) -> PotentialRewards:
        """
        Project the rebate rate after extra volume and referees.

        Args:
            current: Current referrer record
            additional_volume: Extra volume in wei
            additional_referees: Extra active referees

        Returns:
            PotentialRewards with both rates and the echoed deltas
        """
        ensure_uint(additional_volume, "additional_volume")
        ensure_uint(additional_referees, "additional_referees")

        current_rebate = self.rebate_for(current)
        projected_rebate = self.rebate_rate(
            current.total_volume + additional_volume,
            current.active_referees + additional_referees,
        )

        logger.debug(
            f"Rebate projection: {current_rebate} -> {projected_rebate} bps "
            f"(+{additional_volume} wei, +{additional_referees} referees)"
        )

        return PotentialRewards(
            current_rebate=current_rebate,
            projected_rebate=projected_rebate,
            additional_volume=additional_volume,
            additional_referees=additional_referees,
        )
