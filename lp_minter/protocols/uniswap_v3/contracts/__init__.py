"""Uniswap V3 contract wrappers"""

from .nfpm import NFPM
from .pool import Pool

__all__ = ["NFPM", "Pool"]
