"""
Tick range tests

Pure math, no blockchain interaction: deposit-ratio split of a tick width,
decimal normalization, int24 bounds, spacing alignment and slippage minimums.
"""

import pytest

from lp_minter.core.exceptions import (
    DecimalsError,
    InvalidInputError,
    TickRangeError,
    ZeroAmountError,
    ZeroWidthError,
)
from lp_minter.protocols.uniswap_v3.math import (
    INT24_MAX,
    MAX_TICK,
    MIN_TICK,
    align_tick_range,
    calculate_slippage_amounts,
    compute_range,
    normalize_amount,
    round_tick_to_spacing,
)
from lp_minter.protocols.uniswap_v3.types import DepositAmount, PriceRange


DAI_1000 = 1000 * 10 ** 18
USDC_2000 = 2000 * 10 ** 6


class TestComputeRange:
    """compute_range"""

    def test_dai_usdc_scenario(self):
        """1000 DAI (18) vs 2000 USDC (6), width 4000: R = 1.5"""
        result = compute_range(4000, DAI_1000, 18, USDC_2000, 6)
        assert result == PriceRange(lower=2666, upper=1334)

    @pytest.mark.parametrize("width", [1, 2, 3, 60, 4000, 4001, 887272])
    def test_equal_amounts_split_in_half(self, width):
        result = compute_range(width, 5 * 10 ** 18, 18, 5 * 10 ** 6, 6)
        assert result.lower == width // 2
        assert result.upper == width - width // 2

    @pytest.mark.parametrize("amount0,decimals0,amount1,decimals1", [
        (1, 18, 1, 18),
        (DAI_1000, 18, USDC_2000, 6),
        (7, 0, 3 * 10 ** 18, 18),
        (123456789, 8, 987654321, 8),
        (0, 18, 1, 18),
        (10 ** 30, 18, 1, 18),
    ])
    @pytest.mark.parametrize("width", [1, 59, 4000, 200000])
    def test_offsets_sum_to_width(self, width, amount0, decimals0, amount1, decimals1):
        result = compute_range(width, amount0, decimals0, amount1, decimals1)
        assert result.lower + result.upper == width
        assert result.width == width

    def test_more_token1_moves_width_below(self):
        """Growing amount1 shrinks R, so the lower offset never decreases"""
        lowers = [
            compute_range(4000, DAI_1000, 18, amount1 * 10 ** 6, 6).lower
            for amount1 in (1, 10, 100, 500, 1000, 2000, 10000, 10 ** 6)
        ]
        assert lowers == sorted(lowers)
        assert lowers[0] < lowers[-1]

    def test_more_token0_moves_width_above(self):
        uppers = [
            compute_range(4000, amount0 * 10 ** 18, 18, USDC_2000, 6).upper
            for amount0 in (1, 10, 100, 1000, 2000, 10 ** 6)
        ]
        assert uppers == sorted(uppers)
        assert uppers[0] < uppers[-1]

    def test_zero_token0_puts_whole_width_below(self):
        assert compute_range(4000, 0, 18, USDC_2000, 6) == PriceRange(4000, 0)

    def test_dominant_token0_puts_whole_width_above(self):
        assert compute_range(4000, 10 ** 30, 18, 1, 18) == PriceRange(0, 4000)

    def test_integer_truncation_goes_to_upper(self):
        # R = 1/3 + 1 = 1.333...; 10 / R = 7.5 -> 7
        result = compute_range(10, 1, 18, 3, 18)
        assert result == PriceRange(7, 3)

    @pytest.mark.parametrize("width", [0, -1, -4000])
    def test_non_positive_width_rejected(self, width):
        with pytest.raises(ZeroWidthError):
            compute_range(width, DAI_1000, 18, USDC_2000, 6)

    def test_zero_token1_rejected(self):
        with pytest.raises(ZeroAmountError):
            compute_range(4000, DAI_1000, 18, 0, 6)

    def test_negative_token0_rejected(self):
        with pytest.raises(InvalidInputError):
            compute_range(4000, -1, 18, USDC_2000, 6)

    def test_width_and_amount_errors_are_distinct(self):
        assert not issubclass(ZeroWidthError, ZeroAmountError)
        assert not issubclass(ZeroAmountError, ZeroWidthError)
        assert issubclass(ZeroWidthError, ValueError)

    @pytest.mark.parametrize("decimals0,decimals1", [(19, 6), (18, 24), (-1, 6)])
    def test_unsupported_decimals_rejected(self, decimals0, decimals1):
        with pytest.raises(DecimalsError):
            compute_range(4000, DAI_1000, decimals0, USDC_2000, decimals1)

    def test_offset_overflowing_int24_rejected(self):
        with pytest.raises(TickRangeError):
            compute_range(2 ** 24, 1, 18, 1, 18)

    def test_largest_int24_width_accepted(self):
        result = compute_range(INT24_MAX, 0, 18, 1, 18)
        assert result == PriceRange(INT24_MAX, 0)


class TestNormalizeAmount:
    """normalize_amount"""

    def test_six_decimals_scaled_by_1e12(self):
        assert normalize_amount(USDC_2000, 6) == 2000 * 10 ** 18

    def test_eighteen_decimals_unchanged(self):
        assert normalize_amount(DAI_1000, 18) == DAI_1000

    def test_zero_decimals(self):
        assert normalize_amount(3, 0) == 3 * 10 ** 18


class TestTickAlignment:
    """round_tick_to_spacing / align_tick_range"""

    def test_round_down_negative(self):
        assert round_tick_to_spacing(-278990, 60) == -279000

    def test_round_down_positive(self):
        assert round_tick_to_spacing(119, 60) == 60

    def test_spacing_one_is_identity(self):
        assert align_tick_range(-278990, -274990, 1) == (-278990, -274990)

    def test_range_widened_outward(self):
        assert align_tick_range(-278990, -274990, 60) == (-279000, -274980)

    def test_aligned_ticks_kept(self):
        assert align_tick_range(-120, 180, 60) == (-120, 180)

    def test_beyond_min_tick_rejected(self):
        with pytest.raises(TickRangeError):
            align_tick_range(MIN_TICK - 1, 0, 1)

    def test_beyond_max_tick_rejected(self):
        with pytest.raises(TickRangeError):
            align_tick_range(0, MAX_TICK + 1, 1)

    def test_empty_range_rejected(self):
        with pytest.raises(TickRangeError):
            align_tick_range(100, 100, 1)

    def test_lower_clamped_to_usable_min(self):
        assert align_tick_range(MIN_TICK, 0, 60) == (-887220, 0)

    def test_upper_clamped_to_usable_max(self):
        assert align_tick_range(0, MAX_TICK, 60) == (0, 887220)

    def test_full_range_with_wide_spacing(self):
        assert align_tick_range(MIN_TICK, MAX_TICK, 200) == (-887200, 887200)


class TestSlippage:
    """calculate_slippage_amounts"""

    def test_five_percent(self):
        assert calculate_slippage_amounts(DAI_1000, USDC_2000, 500) == (
            950 * 10 ** 18,
            1900 * 10 ** 6,
        )

    def test_rounds_down(self):
        assert calculate_slippage_amounts(999, 1, 500) == (949, 0)

    def test_out_of_range_bps_rejected(self):
        with pytest.raises(InvalidInputError):
            calculate_slippage_amounts(1, 1, 10001)


class TestTypes:
    """DepositAmount / PriceRange"""

    def test_ticks_around(self):
        assert PriceRange(2666, 1334).ticks_around(-276324) == (-278990, -274990)

    def test_deposit_from_human(self):
        deposit = DepositAmount.from_human(1000, 18, 2000.5, 6)
        assert deposit == DepositAmount(DAI_1000, 2000500000)

    def test_deposit_from_human_fraction_exact(self):
        assert DepositAmount.from_human(0.1, 18, 0.1, 6).token0 == 10 ** 17
