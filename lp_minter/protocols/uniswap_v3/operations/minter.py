"""One-shot position minting for Uniswap V3"""

from web3 import Web3
from ....core.config import Config
from ....core.connection import Web3Manager
from ....core.exceptions import (
    CompensationError,
    ZeroAddressError,
    ZeroAmountError,
    ZeroWidthError,
)
from ....contracts.erc20 import ERC20
from ..contracts.nfpm import NFPM
from ..contracts.pool import Pool
from ..math import align_tick_range, calculate_slippage_amounts, compute_range, tick_to_price
from ..types import MintedPosition
from ...base import BasePositionMinter


class PositionMinter(BasePositionMinter):
    """
    Open a concentrated-liquidity position from a two-token deposit.

    The signing account of ``manager`` is the custody wallet: deposits are
    pulled into it with ``transferFrom``, approved to the position manager and
    minted to the depositor. A failure after funds have moved refunds the
    depositor before the error is raised.
    """

    # 5% below desired amounts; fixed policy, not a user setting
    SLIPPAGE_BPS = 500
    # Seconds added to the pending block's timestamp for the mint deadline
    DEADLINE_DELAY = 0

    def __init__(self, manager=None, nfpm_address=None, refund_excess=True):
        """
        Args:
            manager: Web3Manager instance (created with signer if None)
            nfpm_address: Position manager address (default: chain deployment)
            refund_excess: Send unconsumed deposit back to the depositor after minting
        """
        self.manager = manager or Web3Manager(require_signer=True)
        self.config = Config()
        self.nfpm_address = nfpm_address
        self._nfpm = None
        self.refund_excess = refund_excess

    @property
    def nfpm(self):
        """Position manager, resolved on first use so read-only quotes need no deployment"""
        if self._nfpm is None:
            self._nfpm = NFPM(self.manager, self.nfpm_address)
        return self._nfpm

    def _validate(self, pool_address, deposit, width):
        """Reject bad input before any external call"""
        if self.config.is_zero_address(pool_address):
            raise ZeroAddressError("zero address")
        if deposit.token0 <= 0 or deposit.token1 <= 0:
            raise ZeroAmountError("zero amount")
        if width <= 0:
            raise ZeroWidthError("zero width")

    def _plan(self, state, token0, token1, deposit, width):
        """Tick bounds and minimum amounts for a deposit into a pool snapshot"""
        decimals0 = token0.decimals
        decimals1 = token1.decimals

        price_range = compute_range(width, deposit.token0, decimals0, deposit.token1, decimals1)
        tick_lower, tick_upper = align_tick_range(
            *price_range.ticks_around(state["current_tick"]), state["tick_spacing"]
        )
        amount0_min, amount1_min = calculate_slippage_amounts(
            deposit.token0, deposit.token1, self.SLIPPAGE_BPS
        )

        return {
            "range": price_range,
            "current_tick": state["current_tick"],
            "tick_lower": tick_lower,
            "tick_upper": tick_upper,
            "amount0_min": amount0_min,
            "amount1_min": amount1_min,
            "decimals0": decimals0,
            "decimals1": decimals1,
        }

    def quote_range(self, pool_address, deposit, width):
        """
        Dry run: what a mint with these inputs would submit right now.

        Args:
            pool_address: Uniswap V3 pool address
            deposit: DepositAmount with raw token0/token1 amounts
            width: Total range width in ticks

        Returns:
            Dict with pool tokens, fee, offsets, tick bounds, prices and minimum amounts
        """
        self._validate(pool_address, deposit, width)

        state = Pool(self.manager, pool_address).state()
        token0 = ERC20(self.manager, state["token0"])
        token1 = ERC20(self.manager, state["token1"])
        plan = self._plan(state, token0, token1, deposit, width)

        d0, d1 = plan["decimals0"], plan["decimals1"]
        return {
            "pool": state["address"],
            "fee": state["fee"],
            "token0": {"symbol": token0.symbol, "address": token0.address, "decimals": d0},
            "token1": {"symbol": token1.symbol, "address": token1.address, "decimals": d1},
            "width": width,
            "lower_offset": plan["range"].lower,
            "upper_offset": plan["range"].upper,
            "current_tick": plan["current_tick"],
            "tick_lower": plan["tick_lower"],
            "tick_upper": plan["tick_upper"],
            "current_price": tick_to_price(plan["current_tick"], d0, d1),
            "price_lower": tick_to_price(plan["tick_lower"], d0, d1),
            "price_upper": tick_to_price(plan["tick_upper"], d0, d1),
            "amount0_desired": deposit.token0,
            "amount1_desired": deposit.token1,
            "amount0_min": plan["amount0_min"],
            "amount1_min": plan["amount1_min"],
        }

    def mint_new_position(self, pool_address, deposit, width, depositor=None):
        """
        Pull a deposit into custody and mint a position around the current tick.

        Steps: read pool, pull both tokens, approve the position manager,
        derive the tick range from the token decimals, mint to the depositor.

        Args:
            pool_address: Uniswap V3 pool address
            deposit: DepositAmount with raw token0/token1 amounts
            width: Total range width in ticks
            depositor: Address funds are pulled from and the NFT is minted to
                       (default: the custody account itself)

        Returns:
            MintedPosition

        Raises:
            ZeroAddressError, ZeroAmountError, ZeroWidthError: Invalid input
            PoolError: Pool state could not be read
            DecimalsError: A token's decimals could not be read or are unsupported
            TransactionError / ContractLogicError: A transfer, approval or the mint failed
            CompensationError: The failure above could not be rolled back
        """
        self._validate(pool_address, deposit, width)

        custody = self.manager.address
        depositor = self.manager.checksum(depositor) if depositor else custody

        state = Pool(self.manager, pool_address).state()
        token0 = ERC20(self.manager, state["token0"])
        token1 = ERC20(self.manager, state["token1"])
        legs = ((token0, deposit.token0), (token1, deposit.token1))

        pulled = []
        approved = []
        try:
            if not self.manager.same_address(depositor, custody):
                for token, amount in legs:
                    token.transfer_from(depositor, custody, amount)
                    pulled.append((token, amount))

            for token, amount in legs:
                if token.approve(self.nfpm.address, amount) is not None:
                    approved.append(token)

            plan = self._plan(state, token0, token1, deposit, width)

            result = self.nfpm.mint({
                "token0": token0.address,
                "token1": token1.address,
                "fee": state["fee"],
                "tick_lower": plan["tick_lower"],
                "tick_upper": plan["tick_upper"],
                "amount0_desired": deposit.token0,
                "amount1_desired": deposit.token1,
                "amount0_min": plan["amount0_min"],
                "amount1_min": plan["amount1_min"],
                "recipient": depositor,
                "deadline": self.manager.get_block_timestamp("pending") + self.DEADLINE_DELAY,
            })
        except Exception as e:
            self._compensate(depositor, pulled, approved, e)
            raise

        position = MintedPosition(
            token_id=result["token_id"],
            amount0=result["amount0"],
            amount1=result["amount1"],
            liquidity=result["liquidity"],
            tick_lower=plan["tick_lower"],
            tick_upper=plan["tick_upper"],
            range=plan["range"],
            recipient=depositor,
            tx_hash=Web3.to_hex(result["receipt"].transactionHash),
            receipt=result["receipt"],
        )

        if self.refund_excess:
            self._refund_excess(position, depositor, custody, legs)

        print(
            f"Minted position {position.token_id}: "
            f"{token0.from_wei(position.amount0)} {token0.symbol} + "
            f"{token1.from_wei(position.amount1)} {token1.symbol}, "
            f"ticks {position.tick_lower} to {position.tick_upper}"
        )
        return position

    def _compensate(self, depositor, pulled, approved, error):
        """
        Undo custody changes after a failed mint: revoke position manager
        allowances and return pulled funds to the depositor.

        Raises:
            CompensationError: If any revoke or refund fails
        """
        try:
            for token in approved:
                token.approve(self.nfpm.address, 0)
            for token, amount in pulled:
                token.transfer(depositor, amount)
        except Exception as e:
            raise CompensationError(
                f"Rollback after failed mint did not complete ({error}): {e}",
                original_error=error,
            ) from e

        if pulled:
            print(f"Mint failed, returned deposit to {depositor}")

    def _refund_excess(self, position, depositor, custody, legs):
        """
        Return the unconsumed part of the deposit and clear leftover allowance.

        Refunds already sent are recorded on ``position`` even if a later leg fails.

        Raises:
            CompensationError: Carrying the minted position if a revoke or refund fails
        """
        consumed = (position.amount0, position.amount1)
        refunds = [0, 0]
        try:
            for i, ((token, desired), used) in enumerate(zip(legs, consumed)):
                leftover = desired - used
                if leftover <= 0:
                    continue
                token.approve(self.nfpm.address, 0)
                if not self.manager.same_address(depositor, custody):
                    token.transfer(depositor, leftover)
                    refunds[i] = leftover
        except Exception as e:
            raise CompensationError(
                f"Position {position.token_id} minted but returning unused deposit failed: {e}",
                position=position,
            ) from e
        finally:
            position.refunded0, position.refunded1 = refunds
