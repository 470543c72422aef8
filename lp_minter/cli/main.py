"""Main CLI entry point"""

import sys
import json
import argparse
from pathlib import Path

from ..core.connection import Web3Manager
from ..core.exceptions import CompensationError
from ..contracts.erc20 import ERC20
from ..protocols.uniswap_v3 import PositionMinter, DepositAmount, Pool, compute_range


def get_results_dir():
    """Get results directory, create if needed"""
    results_dir = Path.cwd() / "results"
    results_dir.mkdir(exist_ok=True)
    return results_dir


def save_result(filename, data):
    """Save result to JSON file in results directory"""
    filepath = get_results_dir() / filename
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2, default=str)
    return filepath


def _deposit_from_human(manager, pool_address, amount0, amount1):
    """Convert human amounts to raw units using the pool's token decimals"""
    state = Pool(manager, pool_address).state()
    token0 = ERC20(manager, state["token0"])
    token1 = ERC20(manager, state["token1"])
    return DepositAmount.from_human(amount0, token0.decimals, amount1, token1.decimals)


def cmd_range(args):
    """Offline tick-range calculation from raw amounts"""
    price_range = compute_range(
        args.width, args.amount0, args.decimals0, args.amount1, args.decimals1
    )
    result = {
        "width": args.width,
        "lower_offset": price_range.lower,
        "upper_offset": price_range.upper,
    }
    if args.tick is not None:
        result["current_tick"] = args.tick
        result["tick_lower"], result["tick_upper"] = price_range.ticks_around(args.tick)

    print(json.dumps(result, indent=2))


def cmd_quote(args):
    """Dry-run a mint: tick bounds and minimum amounts, no funds moved"""
    web3_manager = Web3Manager(require_signer=False)
    minter = PositionMinter(manager=web3_manager)

    deposit = _deposit_from_human(web3_manager, args.pool, args.amount0, args.amount1)
    result = minter.quote_range(args.pool, deposit, args.width)

    t0 = result["token0"]["symbol"]
    t1 = result["token1"]["symbol"]

    print("=" * 60)
    print(f"MINT QUOTE: {t0}/{t1} pool ({result['fee']/10000:.2f}% fee)")
    print("=" * 60)
    print(f"\n  Width: {result['width']} ticks "
          f"(-{result['lower_offset']} / +{result['upper_offset']})")
    print(f"  Current tick: {result['current_tick']}")
    print(f"  Tick range: {result['tick_lower']} to {result['tick_upper']}")
    print(f"  Price range: {result['price_lower']:.6f} - {result['price_upper']:.6f} {t1}/{t0}")
    print(f"\n  Minimum accepted (5% slippage):")
    print(f"    {result['amount0_min']} {t0} (raw)")
    print(f"    {result['amount1_min']} {t1} (raw)")
    print("\n" + "=" * 60)

    filepath = save_result(f"mint_quote_{t0}_{t1}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_mint(args):
    """Deposit two tokens and mint a position"""
    web3_manager = Web3Manager(require_signer=True)
    minter = PositionMinter(manager=web3_manager, refund_excess=not args.no_refund)

    deposit = _deposit_from_human(web3_manager, args.pool, args.amount0, args.amount1)

    print(f"Minting: {args.amount0} token0 + {args.amount1} token1, width {args.width} ticks")
    try:
        position = minter.mint_new_position(
            args.pool, deposit, args.width, depositor=args.depositor
        )
    except CompensationError as e:
        # Minted on-chain; keep the record before reporting the refund failure
        if e.position is not None:
            filepath = save_result(f"mint_{e.position.token_id}.json", e.position.to_dict())
            print(f"Position {e.position.token_id} saved to {filepath}", file=sys.stderr)
        raise

    print(f"\nSuccess! Token ID: {position.token_id}")
    print(f"Tx: {position.tx_hash}")

    filepath = save_result(f"mint_{position.token_id}.json", position.to_dict())
    print(f"Saved to {filepath}", file=sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="lp-minter",
        description="LP Minter - open Uniswap V3 positions sized by your deposit ratio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""examples:
  lp-minter range 4000 1000000000000000000000 18 2000000000 6       # Offsets only, no RPC
  lp-minter quote 0x5777d92f208679DB4b9778590Fa3CAB3aC9e2168 1000 2000 4000
  lp-minter mint 0x5777d92f208679DB4b9778590Fa3CAB3aC9e2168 1000 2000 4000

configuration:
  RPC_URL      Set in .env file
  wallet       Set PUBLIC_KEY and PRIVATE_KEY (custody signer) in wallet.env
  gas          gas_config.json
""",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    range_parser = subparsers.add_parser("range", help="Compute tick offsets from raw amounts")
    range_parser.add_argument("width", type=int, help="Total range width in ticks")
    range_parser.add_argument("amount0", type=int, help="Raw token0 amount")
    range_parser.add_argument("decimals0", type=int, help="Token0 decimals")
    range_parser.add_argument("amount1", type=int, help="Raw token1 amount")
    range_parser.add_argument("decimals1", type=int, help="Token1 decimals")
    range_parser.add_argument("--tick", type=int, help="Current tick, to print absolute bounds")
    range_parser.set_defaults(func=cmd_range)

    quote_parser = subparsers.add_parser("quote", help="Dry-run a mint (read-only, no wallet needed)")
    quote_parser.add_argument("pool", help="Pool address")
    quote_parser.add_argument("amount0", type=float, help="Amount of token0")
    quote_parser.add_argument("amount1", type=float, help="Amount of token1")
    quote_parser.add_argument("width", type=int, help="Total range width in ticks")
    quote_parser.set_defaults(func=cmd_quote)

    mint_parser = subparsers.add_parser("mint", help="Deposit tokens and mint a position")
    mint_parser.add_argument("pool", help="Pool address")
    mint_parser.add_argument("amount0", type=float, help="Amount of token0")
    mint_parser.add_argument("amount1", type=float, help="Amount of token1")
    mint_parser.add_argument("width", type=int, help="Total range width in ticks")
    mint_parser.add_argument("--depositor", help="Address to pull funds from (default: signer)")
    mint_parser.add_argument("--no-refund", action="store_true",
                             help="Keep unconsumed deposit in custody")
    mint_parser.set_defaults(func=cmd_mint)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
