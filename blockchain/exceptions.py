"""
Deployment Exceptions
Error taxonomy for the deploy path
"""

from typing import Optional


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when network or credential configuration is missing or invalid."""

    pass


class UnknownNetworkError(ConfigurationError, KeyError):
    """Raised when the requested network is not declared."""

    def __str__(self):
        # KeyError would wrap the message in quotes
        return str(self.args[0]) if self.args else ""


class ContractNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no usable compiled artifact exists for a contract name."""

    pass


class TransactionSubmissionError(DeploymentError, RuntimeError):
    """Raised when a transaction cannot be signed or sent."""

    pass


class DeploymentRevertedError(DeploymentError, RuntimeError):
    """Raised when the deployment transaction is mined with a failed status."""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class DeploymentTimeoutError(DeploymentError, TimeoutError):
    """Raised when the deployment transaction is not confirmed in time."""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash
