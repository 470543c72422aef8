"""Uniswap V3 protocol implementation"""

from .config import UniswapV3Config
from .contracts.nfpm import NFPM
from .contracts.pool import Pool
from .math import compute_range
from .operations.minter import PositionMinter
from .types import DepositAmount, PriceRange, MintedPosition

__all__ = [
    "UniswapV3Config",
    "NFPM",
    "Pool",
    "compute_range",
    "PositionMinter",
    "DepositAmount",
    "PriceRange",
    "MintedPosition",
]
