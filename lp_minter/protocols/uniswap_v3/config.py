"""Uniswap V3 specific configuration"""

import json
from pathlib import Path

from ...core.exceptions import ConfigError


# Chain ID to network name mapping
CHAIN_NAMES = {
    1: "mainnet",
    42161: "arbitrum",
    10: "optimism",
    8453: "base",
    137: "polygon",
}


class UniswapV3Config:
    """Configuration manager for Uniswap V3 protocol"""

    _instance = None
    _addresses = None
    _abis = None

    # Package files (not user-configurable)
    ADDRESSES_FILE = Path(__file__).parent / "addresses.json"
    ABIS_FILE = Path(__file__).parent / "abis.json"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if UniswapV3Config._addresses is None:
            self._load()

    def _load(self):
        """Load V3-specific configuration files"""
        if not self.ADDRESSES_FILE.exists():
            raise ConfigError(f"V3 addresses not found: {self.ADDRESSES_FILE}")
        with open(self.ADDRESSES_FILE) as f:
            UniswapV3Config._addresses = json.load(f)

        if not self.ABIS_FILE.exists():
            raise ConfigError(f"V3 ABIs not found: {self.ABIS_FILE}")
        with open(self.ABIS_FILE) as f:
            UniswapV3Config._abis = json.load(f)

    def get_contracts(self, chain_id=None):
        """Get contract addresses for a specific chain (mainnet by default)"""
        if chain_id is None:
            return UniswapV3Config._addresses["mainnet"]
        network = CHAIN_NAMES.get(chain_id)
        if network is None:
            raise ConfigError(
                f"No Uniswap V3 deployment configured for chain {chain_id}. "
                f"Known: {sorted(CHAIN_NAMES)}"
            )
        return UniswapV3Config._addresses[network]

    def nfpm_address(self, chain_id=None):
        """NonfungiblePositionManager address"""
        return self.get_contracts(chain_id)["nfpm"]

    def get_abi(self, name):
        """
        Get V3-specific ABI by name.

        Supports both short names ("nfpm", "pool") and prefixed names ("uniswap_v3_nfpm").
        """
        short_name = name[len("uniswap_v3_"):] if name.startswith("uniswap_v3_") else name

        if short_name in UniswapV3Config._abis:
            return UniswapV3Config._abis[short_name]

        raise ConfigError(f"V3 ABI not found: {name}")
