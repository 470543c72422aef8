"""Uniswap V3 NonfungiblePositionManager contract wrapper"""

from web3 import Web3
from ..config import UniswapV3Config
from ....core.exceptions import MintError
from ....utils.gas import GasManager
from ....utils.transactions import TransactionBuilder


class NFPM:
    """Wrapper for NonfungiblePositionManager minting"""

    def __init__(self, manager, address=None, maxFeePerGas=None, maxPriorityFeePerGas=None):
        """
        Args:
            manager: Web3Manager instance
            address: NFPM address (default: deployment for the connected chain)
            maxFeePerGas: Maximum fee per gas in Gwei (None = use config/no limit)
            maxPriorityFeePerGas: Priority fee in Gwei (None = use config)
        """
        self.manager = manager
        self.config = UniswapV3Config()
        self.address = manager.checksum(address or self.config.nfpm_address(manager.chain_id))
        self.contract = manager.get_contract(self.address, "uniswap_v3_nfpm")

        self.gas_manager = GasManager(manager, maxFeePerGas=maxFeePerGas, maxPriorityFeePerGas=maxPriorityFeePerGas)
        self.tx_builder = TransactionBuilder(manager, self.gas_manager)

    def mint(self, params, gas_buffer=1.2):
        """
        Mint new liquidity position.

        Args:
            params: dict with token0, token1, fee, tick_lower, tick_upper,
                   amount0_desired, amount1_desired, amount0_min, amount1_min,
                   recipient, deadline
            gas_buffer: multiplier for gas estimate

        Returns:
            Dict with token_id, liquidity, amount0, amount1 (consumed) and receipt

        Raises:
            ContractLogicError: Mint reverted during estimation (slippage, deadline, ...)
            TransactionError: Mint transaction reverted on-chain
            MintError: Receipt carries no IncreaseLiquidity event
        """
        mint_params = (
            Web3.to_checksum_address(params["token0"]),
            Web3.to_checksum_address(params["token1"]),
            params["fee"],
            params["tick_lower"],
            params["tick_upper"],
            params["amount0_desired"],
            params["amount1_desired"],
            params["amount0_min"],
            params["amount1_min"],
            Web3.to_checksum_address(params["recipient"]),
            params["deadline"],
        )

        contract_func = self.contract.functions.mint(mint_params)
        receipt = self.tx_builder.build_and_send(
            contract_func,
            operation_type="mint",
            gas_buffer=gas_buffer
        )

        events = self.contract.events.IncreaseLiquidity().process_receipt(receipt)
        if not events:
            raise MintError(
                f"No IncreaseLiquidity event in mint receipt {receipt.transactionHash.hex()}"
            )
        args = events[0]["args"]

        return {
            "token_id": args["tokenId"],
            "liquidity": args["liquidity"],
            "amount0": args["amount0"],
            "amount1": args["amount1"],
            "receipt": receipt,
        }
