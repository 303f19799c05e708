"""
Wallet Manager
Holds the deployer account used to sign transactions
"""

from typing import Dict
from web3 import Web3
from eth_account import Account
from loguru import logger

from .exceptions import ConfigurationError
from .network_config import NetworkConfig


class WalletManager:
    """
    Deployer wallet for a network

    The first configured signing key is the deployer, the same account a
    Hardhat script gets as its default signer.
    """

    def __init__(self, network_config: NetworkConfig):
        """
        Initialize wallet manager

        Args:
            network_config: Network configuration holding the signing keys

        Raises:
            ConfigurationError: If no key is configured or the key is malformed
        """
        if not network_config.accounts:
            raise ConfigurationError(
                f"No signing key configured for network '{network_config.name}' "
                "(set PRIVATE_KEY in .env)"
            )

        try:
            self.account = Account.from_key(network_config.accounts[0])
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid signing key: {e}") from e

        self.address = self.account.address

        logger.info(f"Deployer wallet: {self.address}")

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def get_balance(self, w3: Web3) -> int:
        """Get deployer balance in wei"""
        return w3.eth.get_balance(self.address)
