"""Pydantic models for referral state and computation results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from web3 import Web3

from referral_sdk.constants import MAX_RECIPIENT_WEIGHT, UINT256_MAX, ZERO_ADDRESS
from referral_sdk.types import RefereeTuple, ReferrerTuple
from referral_sdk.utils.validation import validate_wallet_address


def _checksum(value: str) -> str:
    is_valid, error = validate_wallet_address(value)
    if not is_valid:
        raise ValueError(f"{error}: {value!r}")
    return Web3.to_checksum_address(value.strip())


class ReferrerInfo(BaseModel):
    """On-chain record of a referrer.

    Mirrors the ``referrers(address)`` getter. Volumes and rewards are
    base-unit integers with 18 decimals.
    """

    model_config = ConfigDict(frozen=True)

    total_referees: int = Field(default=0, ge=0, le=UINT256_MAX, strict=True, description="Referees ever registered")
    active_referees: int = Field(default=0, ge=0, le=UINT256_MAX, strict=True, description="Referees currently active")
    total_volume: int = Field(default=0, ge=0, le=UINT256_MAX, strict=True, description="Aggregate referee volume (wei)")
    earned_rewards: int = Field(default=0, ge=0, le=UINT256_MAX, strict=True, description="Rewards accrued (wei)")
    claimed_rewards: int = Field(default=0, ge=0, le=UINT256_MAX, strict=True, description="Rewards already claimed (wei)")

    @model_validator(mode="after")
    def check_invariants(self) -> "ReferrerInfo":
        """Reject records that no valid contract state can produce."""
        if self.active_referees > self.total_referees:
            raise ValueError(
                f"active_referees ({self.active_referees}) exceeds "
                f"total_referees ({self.total_referees})"
            )
        if self.claimed_rewards > self.earned_rewards:
            raise ValueError(
                f"claimed_rewards ({self.claimed_rewards}) exceeds "
                f"earned_rewards ({self.earned_rewards})"
            )
        return self

    @property
    def unclaimed_rewards(self) -> int:
        return self.earned_rewards - self.claimed_rewards

    @classmethod
    def from_contract(cls, raw: ReferrerTuple) -> "ReferrerInfo":
        """Build from the tuple returned by the contract getter."""
        total_referees, active_referees, total_volume, earned, claimed = raw
        return cls(
            total_referees=total_referees,
            active_referees=active_referees,
            total_volume=total_volume,
            earned_rewards=earned,
            claimed_rewards=claimed,
        )


class RefereeInfo(BaseModel):
    """On-chain record of a referee, mirroring ``referees(address)``."""

    model_config = ConfigDict(frozen=True)

    referrer: str = Field(default=ZERO_ADDRESS, description="Referrer address (zero if none)")
    trading_volume: int = Field(default=0, ge=0, le=UINT256_MAX, strict=True, description="Trading volume (wei)")
    last_trade_timestamp: int = Field(default=0, ge=0, le=UINT256_MAX, strict=True, description="Unix seconds")
    is_active: bool = Field(default=False, strict=True, description="Whether the referee is active")

    @field_validator("referrer")
    @classmethod
    def validate_referrer(cls, v: str) -> str:
        return _checksum(v)

    @classmethod
    def from_contract(cls, raw: RefereeTuple) -> "RefereeInfo":
        """Build from the tuple returned by the contract getter."""
        referrer, trading_volume, last_trade_timestamp, is_active = raw
        return cls(
            referrer=referrer,
            trading_volume=trading_volume,
            last_trade_timestamp=last_trade_timestamp,
            is_active=is_active,
        )


class WeightedRecipient(BaseModel):
    """Recipient of a reward split with a percentage weight."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Recipient address")
    weight: int = Field(..., ge=0, le=MAX_RECIPIENT_WEIGHT, strict=True, description="Weight (0-100)")

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        return _checksum(v)


class DustPolicy(str, Enum):
    """What to do with the remainder left by integer proration."""

    NONE = "none"
    FIRST_RECIPIENT = "first_recipient"
    LARGEST_WEIGHT = "largest_weight"


class RecipientShare(BaseModel):
    """Share computed for one entry of a split plan."""

    model_config = ConfigDict(frozen=True)

    address: str
    weight: int = Field(..., ge=0)
    share: int = Field(..., ge=0)


class SplitResult(BaseModel):
    """Result of a reward split.

    ``shares`` holds one entry per input recipient, in input order.
    Duplicate addresses are kept as separate entries.
    """

    model_config = ConfigDict(frozen=True)

    total_reward: int = Field(..., ge=0)
    shares: list[RecipientShare]
    dust: int = Field(..., ge=0, description="Unallocated remainder")
    dust_policy: DustPolicy = DustPolicy.NONE

    @property
    def distributed(self) -> int:
        return sum(entry.share for entry in self.shares)

    def as_mapping(self) -> dict[str, int]:
        """Sum shares per distinct address, in first-seen order."""
        totals: dict[str, int] = {}
        for entry in self.shares:
            totals[entry.address] = totals.get(entry.address, 0) + entry.share
        return totals


class PotentialRewards(BaseModel):
    """Current and projected rebate rates for a referrer."""

    model_config = ConfigDict(frozen=True)

    current_rebate: int = Field(..., ge=0, description="Current rebate (bps)")
    projected_rebate: int = Field(..., ge=0, description="Projected rebate (bps)")
    additional_volume: int = Field(..., ge=0, description="Volume delta used for projection")
    additional_referees: int = Field(..., ge=0, description="Referee delta used for projection")


class NetworkSnapshot(BaseModel):
    """Point-in-time copy of referrer and referee records.

    Iteration order of ``referrers`` is the order used to break ranking ties.
    """

    model_config = ConfigDict(frozen=True)

    referrers: dict[str, ReferrerInfo] = Field(default_factory=dict)
    referees: dict[str, RefereeInfo] = Field(default_factory=dict)


class TopReferrer(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    volume: int = Field(..., ge=0)


class NetworkStats(BaseModel):
    """Summary statistics over a network snapshot."""

    model_config = ConfigDict(frozen=True)

    total_volume: int = Field(..., ge=0)
    total_referrers: int = Field(..., ge=0)
    total_referees: int = Field(..., ge=0, description="Sum of referrer-reported referee counts")
    average_volume_per_referee: int = Field(..., ge=0)
    top_referrers: list[TopReferrer] = Field(default_factory=list)
    total_unclaimed_rewards: int = Field(default=0, ge=0)


class RetroactiveClaim(BaseModel):
    """Payload for crediting historical volume to a referrer."""

    model_config = ConfigDict(frozen=True)

    referee: str
    referrer: str
    volume: int = Field(..., ge=0, le=UINT256_MAX)
    signature: str
    timestamp: int = Field(..., ge=0, description="Unix seconds")


class RebateCheck(BaseModel):
    """Comparison of the on-chain rebate with the local mirror."""

    model_config = ConfigDict(frozen=True)

    address: str
    onchain_rebate: int
    local_rebate: int

    @property
    def matches(self) -> bool:
        return self.onchain_rebate == self.local_rebate
