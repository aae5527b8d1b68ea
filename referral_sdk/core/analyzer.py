"""
Referral network statistics.

Reduces a caller-supplied snapshot; never fetches data itself.
"""

from loguru import logger

from referral_sdk.constants import TOP_REFERRERS_LIMIT
from referral_sdk.core.models import NetworkSnapshot, NetworkStats, TopReferrer


class NetworkAnalyzer:
    """Aggregates referrer records into network-wide statistics."""

    def __init__(self, top_limit: int = TOP_REFERRERS_LIMIT) -> None:
        """
        Initialize analyzer.

        Args:
            top_limit: Number of referrers kept in the ranking
        """
        if top_limit < 0:
            raise ValueError(f"top_limit must be non-negative, got {top_limit}")
        self.top_limit = top_limit

    def analyze(self, snapshot: NetworkSnapshot) -> NetworkStats:
        """
        Compute totals and the top referrers by volume.

        ``total_referees`` sums each referrer's reported count, so a referee
        counted by two referrers is counted twice.

        Args:
            snapshot: Referrer and referee records

        Returns:
            NetworkStats for the snapshot
        """
        total_volume = 0
        total_referees = 0
        total_unclaimed = 0

        for info in snapshot.referrers.values():
            total_volume += info.total_volume
            total_referees += info.total_referees
            total_unclaimed += info.unclaimed_rewards

        average = total_volume // total_referees if total_referees > 0 else 0

        # sorted() is stable: equal volumes keep snapshot order
        ranked = sorted(
            snapshot.referrers.items(),
            key=lambda item: item[1].total_volume,
            reverse=True,
        )
        top_referrers = [
            TopReferrer(address=address, volume=info.total_volume)
            for address, info in ranked[:self.top_limit]
        ]

        logger.debug(
            f"Analyzed {len(snapshot.referrers)} referrers, "
            f"{total_referees} referees, volume={total_volume}"
        )

        return NetworkStats(
            total_volume=total_volume,
            total_referrers=len(snapshot.referrers),
            total_referees=total_referees,
            average_volume_per_referee=average,
            top_referrers=top_referrers,
            total_unclaimed_rewards=total_unclaimed,
        )
