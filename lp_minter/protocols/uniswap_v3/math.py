"""Math utilities for Uniswap V3 tick ranges"""

from ...core.exceptions import (
    DecimalsError,
    InvalidInputError,
    TickRangeError,
    ZeroAmountError,
    ZeroWidthError,
)
from .types import PriceRange

# Fixed-point scale used to compare deposits of tokens with different decimals
PRECISION_DECIMALS = 18
ONE = 10 ** PRECISION_DECIMALS

# Ticks are int24 on-chain
INT24_MIN = -(2 ** 23)
INT24_MAX = 2 ** 23 - 1

MIN_TICK = -887272
MAX_TICK = 887272


def normalize_amount(amount, decimals):
    """
    Scale a raw token amount to 18 fractional digits.

    Raises:
        DecimalsError: If the token reports more than 18 (or negative) decimals
    """
    if not 0 <= decimals <= PRECISION_DECIMALS:
        raise DecimalsError(
            f"Unsupported token decimals: {decimals} (must be 0..{PRECISION_DECIMALS})"
        )
    return amount * 10 ** (PRECISION_DECIMALS - decimals)


def _check_int24(name, value):
    if not INT24_MIN <= value <= INT24_MAX:
        raise TickRangeError(f"{name} offset {value} does not fit in int24")
    return value


def compute_range(width, amount0, decimals0, amount1, decimals1):
    """
    Split a total tick width into offsets below and above the current tick.

    The split is driven by the deposit ratio ``R = amount0 / amount1 + 1``
    (both amounts normalized to 18 decimals, R in 1e18 fixed point):

        lower = width * 1e18 // R
        upper = width - lower

    so ``lower + upper == width`` exactly. Equal normalized deposits give
    ``lower = floor(width / 2)``. A heavily skewed deposit may put the whole
    width on one side.

    Args:
        width: Total range width in ticks, must be > 0
        amount0: Raw token0 amount, >= 0
        decimals0: Token0 decimals (0..18)
        amount1: Raw token1 amount, must be > 0 (it is the divisor)
        decimals1: Token1 decimals (0..18)

    Returns:
        PriceRange(lower, upper)

    Raises:
        ZeroWidthError: width <= 0
        ZeroAmountError: amount1 <= 0
        InvalidInputError: amount0 < 0
        DecimalsError: decimals outside 0..18
        TickRangeError: an offset does not fit in int24
    """
    if width <= 0:
        raise ZeroWidthError(f"zero width: {width}")
    if amount1 <= 0:
        raise ZeroAmountError(f"zero amount: token1 amount must be positive, got {amount1}")
    if amount0 < 0:
        raise InvalidInputError(f"token0 amount must not be negative, got {amount0}")

    normalized0 = normalize_amount(amount0, decimals0)
    normalized1 = normalize_amount(amount1, decimals1)

    ratio = normalized0 * ONE // normalized1 + ONE

    lower = _check_int24("lower", width * ONE // ratio)
    upper = _check_int24("upper", width - lower)

    return PriceRange(lower=lower, upper=upper)


def round_tick_to_spacing(tick, spacing):
    """
    Round tick down to a multiple of spacing.

    Args:
        tick: Raw tick value
        spacing: Tick spacing for fee tier

    Returns:
        Valid tick aligned to spacing
    """
    return (tick // spacing) * spacing


def align_tick_range(tick_lower, tick_upper, spacing):
    """
    Widen a tick range outward to the pool's tick spacing.

    The lower tick is floored and the upper tick ceiled, so the aligned
    range contains the requested one. Near the tick limits the result is
    clamped to the outermost ticks usable with this spacing. Spacing 1
    leaves the range unchanged.

    Raises:
        TickRangeError: If the requested range leaves MIN_TICK..MAX_TICK or
            the aligned range is empty
    """
    if tick_lower < MIN_TICK or tick_upper > MAX_TICK:
        raise TickRangeError(
            f"Tick range {tick_lower}..{tick_upper} outside {MIN_TICK}..{MAX_TICK}"
        )

    min_usable = -(-MIN_TICK // spacing) * spacing
    max_usable = (MAX_TICK // spacing) * spacing
    lower = max(round_tick_to_spacing(tick_lower, spacing), min_usable)
    upper = min(-round_tick_to_spacing(-tick_upper, spacing), max_usable)
    if lower >= upper:
        raise TickRangeError(f"Invalid tick range: {lower} >= {upper}")
    return lower, upper


def tick_to_price(tick, decimals0, decimals1):
    """
    Convert tick to human-readable price.

    Returns:
        Price as token1/token0
    """
    return (1.0001 ** tick) * (10 ** decimals0) / (10 ** decimals1)


def calculate_slippage_amounts(amount0, amount1, slippage_bps):
    """
    Calculate minimum amounts with slippage protection.

    Integer arithmetic only, so 500 bps gives exactly ``amount * 95 // 100``.

    Args:
        amount0: Desired amount0 in wei
        amount1: Desired amount1 in wei
        slippage_bps: Slippage in basis points (500 = 5%)

    Returns:
        (amount0_min, amount1_min) in wei
    """
    if not 0 <= slippage_bps <= 10000:
        raise InvalidInputError(f"slippage_bps must be within 0..10000, got {slippage_bps}")
    keep = 10000 - slippage_bps
    return amount0 * keep // 10000, amount1 * keep // 10000
