"""
Referral contract ABI.

Covers the functions the SDK calls: registration, volume updates,
rebate queries, reward claims and the public state getters.
"""

REFERRAL_ABI = [
    {
        "inputs": [{"name": "referrer", "type": "address"}],
        "name": "registerReferral",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "trader", "type": "address"},
            {"name": "volume", "type": "uint256"},
        ],
        "name": "updateVolume",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"name": "referrer", "type": "address"}],
        "name": "calculateRebate",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "claimRewards",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"name": "", "type": "address"}],
        "name": "referrers",
        "outputs": [
            {"name": "totalReferees", "type": "uint256"},
            {"name": "activeReferees", "type": "uint256"},
            {"name": "totalVolume", "type": "uint256"},
            {"name": "earnedRewards", "type": "uint256"},
            {"name": "claimedRewards", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"name": "", "type": "address"}],
        "name": "referees",
        "outputs": [
            {"name": "referrer", "type": "address"},
            {"name": "tradingVolume", "type": "uint256"},
            {"name": "lastTradeTimestamp", "type": "uint256"},
            {"name": "isActive", "type": "bool"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"name": "", "type": "address"}],
        "name": "isRegistered",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
]
