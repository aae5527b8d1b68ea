"""
Reward splitting between weighted recipients.

Shares are computed with integer floor division, the way a contract
would prorate them. The truncation remainder (dust) is reported and,
depending on the policy, either left unassigned or given to one entry.
"""

from collections.abc import Sequence

from loguru import logger

from referral_sdk.core.models import DustPolicy, RecipientShare, SplitResult, WeightedRecipient
from referral_sdk.exceptions import InvalidWeightsError
from referral_sdk.utils.validation import ensure_uint


class RewardSplitter:
    """Prorates a reward across a list of weighted recipients."""

    def split(
        self,
        total_reward: int,
        recipients: Sequence[WeightedRecipient],
        dust_policy: DustPolicy = DustPolicy.NONE,
    ) -> SplitResult:
        """
        Split a reward proportionally to recipient weights.

        Formula per recipient: total_reward * weight // sum(weights)

        Args:
            total_reward: Reward to distribute, in wei
            recipients: Recipients in payout order; duplicates are kept
            dust_policy: Where the truncation remainder goes

        Returns:
            SplitResult with one share per recipient entry

        Raises:
            InvalidWeightsError: If recipients is empty or weights sum to zero
            AmountOutOfRangeError: If total_reward is negative

        Example:
            >>> splitter = RewardSplitter()
            >>> result = splitter.split(100, [
            ...     WeightedRecipient(address="0x" + "1" * 40, weight=1),
            ...     WeightedRecipient(address="0x" + "2" * 40, weight=2),
            ... ])
            >>> [s.share for s in result.shares], result.dust
            ([33, 66], 1)
        """
        ensure_uint(total_reward, "total_reward")

        if not recipients:
            raise InvalidWeightsError("Recipient list is empty")

        total_weight = sum(recipient.weight for recipient in recipients)
        if total_weight <= 0:
            raise InvalidWeightsError("Sum of recipient weights must be greater than zero")

        amounts = [
            total_reward * recipient.weight // total_weight
            for recipient in recipients
        ]
        dust = total_reward - sum(amounts)

        if dust and dust_policy is not DustPolicy.NONE:
            index = self._dust_index(recipients, dust_policy)
            amounts[index] += dust
            logger.debug(
                f"Assigned {dust} wei dust to {recipients[index].address} "
                f"({dust_policy.value})"
            )
            dust = 0

        shares = [
            RecipientShare(address=recipient.address, weight=recipient.weight, share=amount)
            for recipient, amount in zip(recipients, amounts)
        ]

        return SplitResult(
            total_reward=total_reward,
            shares=shares,
            dust=dust,
            dust_policy=dust_policy,
        )

    @staticmethod
    def _dust_index(recipients: Sequence[WeightedRecipient], policy: DustPolicy) -> int:
        if policy is DustPolicy.FIRST_RECIPIENT:
            return 0
        # max() keeps the first of equal weights
        return max(range(len(recipients)), key=lambda i: recipients[i].weight)
