"""
Rebate and contract constants.

Values mirror the referral contract's integer math and must be kept in sync
with the deployed contract.
"""

# Basis points: 10_000 bps = 100%
BASE_REBATE_BPS = 1000  # 10% base
REBATE_PER_REFEREE_BPS = 100  # 1% per active referee
VOLUME_MULTIPLIER_BPS = 10  # 0.1% per whole unit of volume
MAX_REBATE_BPS = 5000  # 50% cap

# Volume is stored on-chain with 18 decimals (wei)
VOLUME_DECIMALS = 18
VOLUME_UNIT = 10**VOLUME_DECIMALS

# Solidity integer bounds
UINT256_MAX = 2**256 - 1

# Recipient weights are percentages
MAX_RECIPIENT_WEIGHT = 100

TOP_REFERRERS_LIMIT = 5

# Query parameters appended by the link builder, in this order
REFERRAL_PARAM = "ref"
UTM_PARAMS = (
    ("source", "utm_source"),
    ("medium", "utm_medium"),
    ("campaign", "utm_campaign"),
)

# Ports omitted when serializing a URL with these schemes
DEFAULT_PORTS = {"http": 80, "https": 443}

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
