"""Transaction utilities with EIP-1559 support"""

from ..core.exceptions import TransactionError
from .gas import GasManager


class TransactionBuilder:
    """Build and send EIP-1559 transactions with unified gas management"""

    def __init__(self, manager, gas_manager=None):
        """
        Args:
            manager: Web3Manager instance (must have signer to send)
            gas_manager: GasManager instance (created if None)
        """
        self.manager = manager
        self.gas_manager = gas_manager or GasManager(manager)

    def build(self, contract_func, operation_type=None, gas_buffer=1.2):
        """
        Build an EIP-1559 transaction for a contract function.

        Args:
            contract_func: Contract function to call
            operation_type: Type of operation for gas limit lookup
            gas_buffer: Multiplier for gas limit (default 1.2 = +20%)

        Returns:
            Transaction dictionary ready for signing
        """
        gas_params = self.gas_manager.getGasParams()
        estimated_gas = self.gas_manager.estimateGas(
            contract_func, self.manager.address, operation_type
        )

        tx = {
            "from": self.manager.address,
            "nonce": self.manager.get_nonce(),
            "gas": int(estimated_gas * gas_buffer),
            "maxFeePerGas": gas_params["maxFeePerGas"],
            "maxPriorityFeePerGas": gas_params["maxPriorityFeePerGas"],
            "chainId": self.manager.chain_id,
            "type": 2,  # EIP-1559 transaction type
        }

        return contract_func.build_transaction(tx)

    def build_and_send(self, contract_func, operation_type=None, gas_buffer=1.2):
        """
        Build, sign and send a transaction, then wait for its receipt.

        Returns:
            Transaction receipt

        Raises:
            TransactionError: If the transaction was mined but reverted
        """
        tx = self.build(contract_func, operation_type, gas_buffer)

        signed = self.manager.account.sign_transaction(tx)
        tx_hash = self.manager.w3.eth.send_raw_transaction(signed.raw_transaction)
        receipt = self.manager.w3.eth.wait_for_transaction_receipt(tx_hash)

        if receipt.status != 1:
            label = operation_type or "transaction"
            raise TransactionError(f"{label} failed: {receipt.transactionHash.hex()}")

        return receipt
