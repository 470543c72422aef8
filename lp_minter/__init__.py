"""
LP Minter - open Uniswap V3 positions with a deposit-weighted tick range
"""

from .core.connection import Web3Manager
from .core.config import Config
from .core.exceptions import LPMinterError, ConfigError, ConnectionError, TransactionError
from .protocols.uniswap_v3 import PositionMinter, DepositAmount, PriceRange, compute_range

__version__ = "0.1.0"
__all__ = [
    "Web3Manager",
    "Config",
    "LPMinterError",
    "ConfigError",
    "ConnectionError",
    "TransactionError",
    "PositionMinter",
    "DepositAmount",
    "PriceRange",
    "compute_range",
]
