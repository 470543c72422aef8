"""Uniswap V3 Pool contract wrapper"""

from ....core.exceptions import PoolError


class Pool:
    """Read-only wrapper for Uniswap V3 Pool state"""

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Pool contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "uniswap_v3_pool")

    def slot0(self):
        """
        Get slot0 data (current state).
        Returns: (sqrtPriceX96, tick, observationIndex, ...)
        """
        return self.contract.functions.slot0().call()

    @property
    def fee(self):
        """Pool fee tier"""
        return self.contract.functions.fee().call()

    @property
    def tick_spacing(self):
        return self.contract.functions.tickSpacing().call()

    @property
    def token0(self):
        """Token0 address"""
        return self.contract.functions.token0().call()

    @property
    def token1(self):
        """Token1 address"""
        return self.contract.functions.token1().call()

    def state(self):
        """
        Snapshot everything a mint needs from the pool.

        Returns:
            Dict with current_tick, sqrt_price_x96, fee, tick_spacing, token0, token1

        Raises:
            PoolError: If any read fails (not a pool, not initialized, RPC error)
        """
        try:
            slot0 = self.slot0()
            result = {
                "address": self.address,
                "sqrt_price_x96": slot0[0],
                "current_tick": slot0[1],
                "fee": self.fee,
                "tick_spacing": self.tick_spacing,
                "token0": self.token0,
                "token1": self.token1,
            }
        except Exception as e:
            raise PoolError(f"Failed to read pool {self.address}: {e}") from e

        if result["sqrt_price_x96"] == 0:
            raise PoolError(f"Pool {self.address} is not initialized")
        return result
