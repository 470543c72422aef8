"""Shared fakes for minter tests: in-memory tokens, pool and position manager"""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from lp_minter.protocols.uniswap_v3.operations import minter as minter_module
from lp_minter.protocols.uniswap_v3.operations.minter import PositionMinter


CUSTODY = "0x" + "c" * 40
DEPOSITOR = "0x" + "d" * 40
POOL = "0x5777d92f208679DB4b9778590Fa3CAB3aC9e2168"  # DAI/USDC
NFPM_ADDRESS = "0xC36442b4a4522E871399CD717aBDD847Ab11FE88"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

CURRENT_TICK = -276324
BLOCK_TIMESTAMP = 1_732_000_000


class FakeToken:
    """ERC20 stand-in that records every state-changing call in a shared log"""

    def __init__(self, address, decimals, symbol, calls):
        self.address = address
        self.symbol = symbol
        self.calls = calls
        self.allowances = {}
        self.fail_on = {}
        self._decimals = decimals

    def _maybe_fail(self, operation):
        if operation in self.fail_on:
            raise self.fail_on[operation]

    @property
    def decimals(self):
        self.calls.append(("decimals", self.symbol))
        self._maybe_fail("decimals")
        return self._decimals

    def from_wei(self, amount):
        return amount / 10 ** self._decimals

    def transfer_from(self, owner, recipient, amount):
        self._maybe_fail("transfer_from")
        self.calls.append(("transfer_from", self.symbol, owner, recipient, amount))
        return Mock(status=1)

    def transfer(self, recipient, amount):
        self._maybe_fail("transfer")
        self.calls.append(("transfer", self.symbol, recipient, amount))
        return Mock(status=1)

    def approve(self, spender, amount):
        self._maybe_fail("approve")
        if self.allowances.get(spender, 0) == amount:
            return None
        self.allowances[spender] = amount
        self.calls.append(("approve", self.symbol, spender, amount))
        return Mock(status=1)


class FakeNFPM:
    """Position manager stand-in; leaves a configurable shortfall unconsumed"""

    def __init__(self, calls):
        self.address = NFPM_ADDRESS
        self.calls = calls
        self.minted = []
        self.next_token_id = 862_439
        self.shortfall = (0, 0)
        self.error = None

    def mint(self, params):
        self.calls.append(("mint",))
        if self.error is not None:
            raise self.error
        self.minted.append(params)
        token_id = self.next_token_id
        self.next_token_id += 1
        return {
            "token_id": token_id,
            "liquidity": 10 ** 15,
            "amount0": params["amount0_desired"] - self.shortfall[0],
            "amount1": params["amount1_desired"] - self.shortfall[1],
            "receipt": Mock(status=1, transactionHash=bytes.fromhex("ab" * 32)),
        }


def make_manager(address=CUSTODY):
    manager = Mock()
    manager.address = address
    manager.chain_id = 1
    manager.checksum.side_effect = lambda a: a
    manager.same_address.side_effect = lambda a, b: a.lower() == b.lower()
    manager.get_block_timestamp.return_value = BLOCK_TIMESTAMP
    return manager


@pytest.fixture
def env(monkeypatch):
    """PositionMinter wired to fakes for a DAI (18) / USDC (6) pool"""
    calls = []
    tokens = {
        DAI: FakeToken(DAI, 18, "DAI", calls),
        USDC: FakeToken(USDC, 6, "USDC", calls),
    }

    pool = Mock()
    pool.state.return_value = {
        "address": POOL,
        "sqrt_price_x96": 79228162514264337593543,
        "current_tick": CURRENT_TICK,
        "fee": 100,
        "tick_spacing": 1,
        "token0": DAI,
        "token1": USDC,
    }
    pool_factory = Mock(return_value=pool)
    nfpm = FakeNFPM(calls)

    monkeypatch.setattr(minter_module, "Pool", pool_factory)
    monkeypatch.setattr(minter_module, "ERC20", lambda manager, address: tokens[address])
    monkeypatch.setattr(minter_module, "NFPM", lambda manager, address=None: nfpm)

    manager = make_manager()
    return SimpleNamespace(
        minter=PositionMinter(manager=manager),
        manager=manager,
        pool=pool,
        pool_factory=pool_factory,
        nfpm=nfpm,
        dai=tokens[DAI],
        usdc=tokens[USDC],
        calls=calls,
    )
