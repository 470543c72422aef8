"""Value types passed in and out of the position minter"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, asdict
from decimal import Decimal
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DepositAmount:
    """
    Raw (not decimal-normalized) token quantities to deposit.

    Attributes:
        token0: Amount of the pool's token0 in its smallest unit
        token1: Amount of the pool's token1 in its smallest unit
    """

    token0: int
    token1: int

    @classmethod
    def from_human(cls, amount0, decimals0, amount1, decimals1) -> "DepositAmount":
        """Build from human-readable amounts and token decimals"""
        return cls(
            int(Decimal(str(amount0)) * 10 ** decimals0),
            int(Decimal(str(amount1)) * 10 ** decimals1),
        )


@dataclass(frozen=True)
class PriceRange:
    """
    Tick offsets below and above the current tick.

    ``lower + upper`` always equals the width the range was computed for.
    """

    lower: int
    upper: int

    @property
    def width(self) -> int:
        return self.lower + self.upper

    def ticks_around(self, current_tick: int):
        """(tick_lower, tick_upper) centred on current_tick"""
        return current_tick - self.lower, current_tick + self.upper


@dataclass
class MintedPosition:
    """
    Outcome of a successful mint.

    ``token_id``, ``amount0`` and ``amount1`` are the position identifier
    and the amounts the position manager actually consumed.
    """

    token_id: int
    amount0: int
    amount1: int
    liquidity: int
    tick_lower: int
    tick_upper: int
    range: PriceRange
    recipient: str
    refunded0: int = 0
    refunded1: int = 0
    tx_hash: Optional[str] = None
    receipt: Any = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view (receipt omitted)"""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "receipt"}
        data["range"] = asdict(self.range)
        return data
