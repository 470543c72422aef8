"""Uniswap V3 operations"""

from .minter import PositionMinter

__all__ = ["PositionMinter"]
