"""ABI fragment of the Taraxa DPOS precompile used by the delegator."""

from __future__ import annotations

_ADDRESS_ARG = [{"internalType": "address", "name": "validator", "type": "address"}]

_DELEGATION_DATA = {
    "components": [
        {"internalType": "address", "name": "account", "type": "address"},
        {
            "components": [
                {"internalType": "uint256", "name": "stake", "type": "uint256"},
                {"internalType": "uint256", "name": "rewards", "type": "uint256"},
            ],
            "internalType": "struct DposInterface.DelegatorInfo",
            "name": "delegation",
            "type": "tuple",
        },
    ],
    "internalType": "struct DposInterface.DelegationData[]",
    "name": "delegations",
    "type": "tuple[]",
}

_VALIDATOR_DATA = {
    "components": [
        {"internalType": "address", "name": "account", "type": "address"},
        {
            "components": [
                {"internalType": "uint256", "name": "total_stake", "type": "uint256"},
                {"internalType": "uint256", "name": "commission_reward", "type": "uint256"},
                {"internalType": "uint16", "name": "commission", "type": "uint16"},
                {"internalType": "uint64", "name": "last_commission_change", "type": "uint64"},
                {"internalType": "uint16", "name": "undelegations_count", "type": "uint16"},
                {"internalType": "address", "name": "owner", "type": "address"},
                {"internalType": "string", "name": "description", "type": "string"},
                {"internalType": "string", "name": "endpoint", "type": "string"},
            ],
            "internalType": "struct DposInterface.ValidatorBasicInfo",
            "name": "info",
            "type": "tuple",
        },
    ],
    "internalType": "struct DposInterface.ValidatorData[]",
    "name": "validators",
    "type": "tuple[]",
}

_END = {"internalType": "bool", "name": "end", "type": "bool"}

DPOS_ABI: list[dict] = [
    {
        "inputs": [
            {"internalType": "address", "name": "delegator", "type": "address"},
            {"internalType": "uint32", "name": "batch", "type": "uint32"},
        ],
        "name": "getDelegations",
        "outputs": [_DELEGATION_DATA, _END],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "owner", "type": "address"},
            {"internalType": "uint32", "name": "batch", "type": "uint32"},
        ],
        "name": "getValidatorsFor",
        "outputs": [_VALIDATOR_DATA, _END],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": _ADDRESS_ARG,
        "name": "claimRewards",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": _ADDRESS_ARG,
        "name": "claimCommissionRewards",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": _ADDRESS_ARG,
        "name": "delegate",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
]
