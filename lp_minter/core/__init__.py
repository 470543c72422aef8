"""Core module - configuration, connection and exceptions"""

from .config import Config
from .connection import Web3Manager
from .exceptions import (
    LPMinterError,
    ConfigError,
    ConnectionError,
    TransactionError,
    InvalidInputError,
    ZeroAddressError,
    ZeroAmountError,
    ZeroWidthError,
    DecimalsError,
    TickRangeError,
    PoolError,
    MintError,
    CompensationError,
)

__all__ = [
    "Config",
    "Web3Manager",
    "LPMinterError",
    "ConfigError",
    "ConnectionError",
    "TransactionError",
    "InvalidInputError",
    "ZeroAddressError",
    "ZeroAmountError",
    "ZeroWidthError",
    "DecimalsError",
    "TickRangeError",
    "PoolError",
    "MintError",
    "CompensationError",
]
