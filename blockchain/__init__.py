"""
Blockchain Interaction Package
Handles network configuration, signing, artifacts and contract deployment
"""

from .contract_manager import (
    ArtifactStore,
    ContractArtifact,
    ContractFactory,
    ContractManager,
    DeployedContract,
    DeploymentTransaction,
)
from .exceptions import (
    ConfigurationError,
    ContractNotFoundError,
    DeploymentError,
    DeploymentRevertedError,
    DeploymentTimeoutError,
    TransactionSubmissionError,
    UnknownNetworkError,
)
from .network_config import NetworkConfig, load_network_config
from .transaction_builder import TransactionBuilder
from .wallet_manager import WalletManager

__all__ = [
    'ArtifactStore',
    'ContractArtifact',
    'ContractFactory',
    'ContractManager',
    'DeployedContract',
    'DeploymentTransaction',
    'NetworkConfig',
    'load_network_config',
    'TransactionBuilder',
    'WalletManager',
    'DeploymentError',
    'ConfigurationError',
    'UnknownNetworkError',
    'ContractNotFoundError',
    'TransactionSubmissionError',
    'DeploymentRevertedError',
    'DeploymentTimeoutError',
]
