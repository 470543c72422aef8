"""Custom exceptions for LP Minter"""


class LPMinterError(Exception):
    """Base exception for all LP Minter errors"""
    pass


class ConfigError(LPMinterError):
    """Configuration-related errors"""
    pass


class ConnectionError(LPMinterError):
    """Web3 connection errors"""
    pass


class TransactionError(LPMinterError):
    """Transaction mined but reverted"""
    pass


class InvalidInputError(LPMinterError, ValueError):
    """Caller input rejected before any external call"""
    pass


class ZeroAddressError(InvalidInputError):
    """Pool address is missing or the zero address"""
    pass


class ZeroAmountError(InvalidInputError):
    """A deposit amount is not strictly positive"""
    pass


class ZeroWidthError(InvalidInputError):
    """Requested tick width is not strictly positive"""
    pass


class DecimalsError(LPMinterError):
    """Token decimals lookup failed or is unsupported"""
    pass


class TickRangeError(LPMinterError):
    """Computed tick offset or tick bound is out of range"""
    pass


class PoolError(LPMinterError):
    """Pool-related errors (not found, not initialized, etc.)"""
    pass


class MintError(LPMinterError):
    """Mint succeeded on-chain but the result could not be read"""
    pass


class CompensationError(LPMinterError):
    """
    Returning custody funds did not complete.

    After a failed mint ``original_error`` is the failure being rolled back.
    After a successful mint ``position`` is the minted position whose unused
    deposit could not be returned.
    """

    def __init__(self, message, original_error=None, position=None):
        super().__init__(message)
        self.original_error = original_error
        self.position = position
