"""
SDK settings.

Loads configuration from environment variables using pydantic-settings.
Variables are prefixed with ``REFERRAL_`` (e.g. ``REFERRAL_RPC_URL``).
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from referral_sdk.utils.validation import validate_wallet_address


class ReferralSettings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    # Blockchain RPC
    rpc_url: str = Field(
        default="http://127.0.0.1:8545",
        description="HTTP JSON-RPC endpoint",
    )
    contract_address: str = Field(..., description="Referral contract address")

    # Optional signer for write calls
    private_key: str | None = Field(default=None, repr=False)

    # Timeouts (seconds)
    rpc_timeout: float = Field(default=30.0, gt=0, description="Per-call RPC timeout")
    receipt_timeout: float = Field(
        default=120.0, gt=0, description="Transaction confirmation timeout"
    )

    executor_workers: int = Field(
        default=4, ge=1, le=32, description="Thread pool size for web3 calls"
    )

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="REFERRAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("contract_address")
    @classmethod
    def validate_contract_address(cls, v: str) -> str:
        """Validate contract address format."""
        is_valid, error = validate_wallet_address(v)
        if not is_valid:
            raise ValueError(f"REFERRAL_CONTRACT_ADDRESS is invalid: {error}")
        return v.strip()

    @field_validator("rpc_url")
    @classmethod
    def validate_rpc_url(cls, v: str) -> str:
        """Validate RPC URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("REFERRAL_RPC_URL must start with http:// or https://")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> ReferralSettings:
    """Build settings once and reuse them."""
    return ReferralSettings()
