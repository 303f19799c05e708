"""
Network Configuration
Static network declarations plus the signing key from the environment
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple
from loguru import logger
from dotenv import load_dotenv

from .exceptions import UnknownNetworkError

load_dotenv()


DEFAULT_NETWORK = "alfajores"

# Celo Alfajores testnet
NETWORKS = {
    "alfajores": {
        "url": "https://alfajores-forno.celo-testnet.org",
        "chain_id": 44787,
        "accounts_env": ["PRIVATE_KEY"],
    },
}


@dataclass(frozen=True)
class NetworkConfig:
    """Connection details for one named network."""

    name: str
    rpc_url: str
    chain_id: int
    accounts: Tuple[str, ...] = ()


def resolve_network_name(name: Optional[str] = None) -> str:
    """
    Pick the network to deploy to

    Args:
        name: Explicit network name (None = $DEPLOY_NETWORK or default)

    Returns:
        Network name
    """
    if name:
        return name

    return os.getenv('DEPLOY_NETWORK') or DEFAULT_NETWORK


def load_network_config(name: Optional[str] = None) -> NetworkConfig:
    """
    Build the configuration for a declared network

    The signing keys are read as-is; an unset variable is left out and
    surfaces later when a signer is requested.

    Args:
        name: Network name (None = resolve from environment)

    Returns:
        NetworkConfig

    Raises:
        UnknownNetworkError: If the network is not declared
    """
    name = resolve_network_name(name)

    if name not in NETWORKS:
        raise UnknownNetworkError(
            f"Network '{name}' is not configured "
            f"(available: {', '.join(sorted(NETWORKS))})"
        )

    declared = NETWORKS[name]

    accounts = tuple(
        os.environ[var] for var in declared['accounts_env'] if os.environ.get(var)
    )

    if not accounts:
        logger.warning(f"No signing key set for network {name}")

    return NetworkConfig(
        name=name,
        rpc_url=declared['url'],
        chain_id=declared['chain_id'],
        accounts=accounts,
    )
