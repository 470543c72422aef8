"""Abstract base classes for AMM protocol implementations"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class BasePositionMinter(ABC):
    """Abstract base class for one-shot position minting"""

    @abstractmethod
    def mint_new_position(
        self, pool_address: str, deposit: Any, width: int, **kwargs
    ) -> Any:
        """
        Deposit two tokens and mint a position around the current price.

        Args:
            pool_address: Address of the pool contract
            deposit: Raw amounts of the pool's token0 and token1
            width: Total width of the range in ticks

        Returns:
            Description of the minted position
        """
        pass

    @abstractmethod
    def quote_range(
        self, pool_address: str, deposit: Any, width: int
    ) -> Dict[str, Any]:
        """
        Compute what mint_new_position would submit, without moving funds.

        Returns:
            Dict containing tick bounds and minimum amounts
        """
        pass
