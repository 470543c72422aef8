"""Protocol implementations for different AMM platforms"""

from .base import BasePositionMinter

__all__ = ["BasePositionMinter"]
