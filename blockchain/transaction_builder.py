"""
Transaction Builder
Constructs contract deployment transactions
"""

from typing import Dict, Sequence
from web3 import Web3
from web3.contract import Contract
from loguru import logger


GAS_LIMIT_BUFFER = 1.2  # 20% over the node's estimate


class TransactionBuilder:
    """
    Builds constructor transactions for the deployer wallet
    """

    def __init__(self, w3: Web3, wallet_manager, chain_id: int):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager for the sender address
            chain_id: Chain ID to sign for
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.chain_id = chain_id

    def build_deploy_tx(self, contract: type[Contract], args: Sequence = ()) -> Dict:
        """
        Build a contract creation transaction

        Args:
            contract: Contract class with ABI and bytecode
            args: Constructor arguments

        Returns:
            Transaction dict ready for signing
        """
        sender = self.wallet_manager.address
        constructor = contract.constructor(*args)

        gas_estimate = constructor.estimate_gas({'from': sender})
        gas_limit = int(gas_estimate * GAS_LIMIT_BUFFER)
        gas_price = self.w3.eth.gas_price

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {self.w3.from_wei(gas_price, 'gwei')} gwei")

        return constructor.build_transaction({
            'from': sender,
            'nonce': self.w3.eth.get_transaction_count(sender, 'pending'),
            'gas': gas_limit,
            'gasPrice': gas_price,
            'chainId': self.chain_id
        })
