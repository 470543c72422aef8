"""Configuration loading and management"""

import json
from pathlib import Path
from .exceptions import ConfigError


class Config:
    """Centralized configuration manager for shared settings"""

    _instance = None
    _abis = None

    # Shared ABIs are inside the package (not user-configurable)
    PACKAGE_ABIS = Path(__file__).parent.parent / "abis.json"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Config._abis is None:
            self._load()

    def _load(self):
        """Load configuration files"""
        if not self.PACKAGE_ABIS.exists():
            raise ConfigError(f"Shared ABIs not found: {self.PACKAGE_ABIS}")
        with open(self.PACKAGE_ABIS) as f:
            Config._abis = json.load(f)

    def get_abi(self, name):
        """
        Get ABI by name.

        Shared ABIs first, then Uniswap V3 ABIs for prefixed names
        (e.g., "uniswap_v3_pool").
        """
        if name in Config._abis:
            return Config._abis[name]

        if name.startswith("uniswap_v3_"):
            from ..protocols.uniswap_v3.config import UniswapV3Config
            return UniswapV3Config().get_abi(name)

        raise ConfigError(f"ABI not found: {name}")

    def is_zero_address(self, address):
        """True for None, empty string or the zero address"""
        return not address or int(address, 16) == 0
