"""ERC20 token contract wrapper"""

from ..core.exceptions import DecimalsError
from ..utils.gas import GasManager
from ..utils.transactions import TransactionBuilder


class ERC20:
    """Wrapper for ERC20 token interactions"""

    def __init__(self, manager, address, maxFeePerGas=None, maxPriorityFeePerGas=None):
        """
        Args:
            manager: Web3Manager instance
            address: Token contract address
            maxFeePerGas: Maximum fee per gas in Gwei (None = use config/no limit)
            maxPriorityFeePerGas: Priority fee in Gwei (None = use config)
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "erc20")
        self._decimals = None
        self._symbol = None

        self.gas_manager = GasManager(manager, maxFeePerGas=maxFeePerGas, maxPriorityFeePerGas=maxPriorityFeePerGas)
        self.tx_builder = TransactionBuilder(manager, self.gas_manager)

    @property
    def decimals(self):
        """
        Token decimals (cached).

        There is no default: a token that cannot report its precision
        cannot be normalized, so the lookup failure is raised.
        """
        if self._decimals is None:
            try:
                self._decimals = self.contract.functions.decimals().call()
            except Exception as e:
                raise DecimalsError(f"decimals failed for {self.address}: {e}") from e
        return self._decimals

    @property
    def symbol(self):
        """Token symbol, handling tokens that return bytes32 (MKR, SAI)"""
        if self._symbol is None:
            try:
                raw = self.contract.functions.symbol().call()
            except Exception:
                # Display only; an address is a usable label
                raw = self.address[:10]
            if isinstance(raw, bytes):
                raw = raw.rstrip(b'\x00').decode('utf-8')
            self._symbol = str(raw)
        return self._symbol

    def allowance(self, spender, owner=None):
        """Get allowance for spender"""
        owner_addr = owner or self.manager.address
        return self.contract.functions.allowance(owner_addr, spender).call()

    def from_wei(self, amount):
        """Convert wei to human amount"""
        return amount / (10 ** self.decimals)

    def transfer(self, recipient, amount_wei):
        """Send tokens from the signer to recipient. Returns tx receipt."""
        contract_func = self.contract.functions.transfer(
            self.manager.checksum(recipient), amount_wei
        )
        return self.tx_builder.build_and_send(contract_func, operation_type="transfer")

    def transfer_from(self, owner, recipient, amount_wei):
        """
        Pull tokens from owner to recipient using the signer's allowance.
        Returns tx receipt.
        """
        contract_func = self.contract.functions.transferFrom(
            self.manager.checksum(owner), self.manager.checksum(recipient), amount_wei
        )
        return self.tx_builder.build_and_send(contract_func, operation_type="transferFrom")

    def approve(self, spender, amount_wei):
        """
        Approve spender to spend tokens. Returns tx receipt or None if the
        allowance already covers the amount (or is already zero when revoking).
        """
        current_allowance = self.allowance(spender)
        if current_allowance == amount_wei or (amount_wei > 0 and current_allowance >= amount_wei):
            return None

        contract_func = self.contract.functions.approve(spender, amount_wei)
        return self.tx_builder.build_and_send(contract_func, operation_type="approve")
