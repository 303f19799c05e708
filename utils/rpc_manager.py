"""
RPC Manager
Connects to the configured network endpoint
"""

import os
from typing import Optional
from web3 import Web3
from loguru import logger

from blockchain.exceptions import ConfigurationError, TransactionSubmissionError
from blockchain.network_config import NetworkConfig


DEFAULT_RPC_TIMEOUT = 120


class RPCManager:
    """
    Single-endpoint RPC connection for one declared network
    """

    def __init__(self, network_config: NetworkConfig, timeout: Optional[float] = None):
        """
        Initialize RPC Manager

        Args:
            network_config: Network to connect to
            timeout: HTTP request timeout in seconds (None = $RPC_TIMEOUT or 120)
        """
        self.network_config = network_config

        if timeout is None:
            timeout = float(os.getenv('RPC_TIMEOUT', DEFAULT_RPC_TIMEOUT))
        self.timeout = timeout

        self.w3 = Web3(Web3.HTTPProvider(
            network_config.rpc_url,
            request_kwargs={'timeout': self.timeout}
        ))

        logger.debug(f"RPC Manager created for {network_config.name} ({network_config.rpc_url})")

    def connect(self) -> Web3:
        """
        Check the endpoint and return the Web3 instance

        Returns:
            Connected Web3 instance

        Raises:
            TransactionSubmissionError: If the endpoint is unreachable
            ConfigurationError: If the endpoint serves a different chain
        """
        if not self.w3.is_connected():
            raise TransactionSubmissionError(
                f"RPC unreachable: {self.network_config.rpc_url}"
            )

        remote_chain_id = self.w3.eth.chain_id

        if remote_chain_id != self.network_config.chain_id:
            raise ConfigurationError(
                f"Network '{self.network_config.name}' expects chain ID "
                f"{self.network_config.chain_id} but the endpoint reports {remote_chain_id}"
            )

        logger.success(f"Connected to {self.network_config.name} (chain {remote_chain_id})")
        return self.w3

    def is_healthy(self) -> bool:
        """
        Check if the endpoint is reachable

        Returns:
            True if healthy
        """
        try:
            return self.w3.is_connected()
        except Exception:
            return False
