"""
Smart Contract Deployment Script
Deploys the Trust contract and saves its address and artifact
"""

import os
import sys
import asyncio
from pathlib import Path
from typing import Optional, Union
from loguru import logger

from blockchain.contract_manager import ArtifactStore, ContractManager, DeployedContract
from blockchain.exceptions import TransactionSubmissionError
from blockchain.network_config import load_network_config
from blockchain.wallet_manager import WalletManager
from utils.artifact_writer import store_contract_data
from utils.rpc_manager import RPCManager


CONTRACT_NAME = "Trust"


def project_root() -> Path:
    """Project root: $DEPLOY_PROJECT_ROOT, else the directory holding scripts/"""
    root = os.getenv('DEPLOY_PROJECT_ROOT')
    if root:
        return Path(root).resolve()

    return Path(__file__).resolve().parent.parent


def configure_logging():
    """Send logs to stderr, plus a debug file when DEPLOY_LOG_FILE is set"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=os.getenv('LOG_LEVEL', 'INFO')
    )

    log_file = os.getenv('DEPLOY_LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


async def deploy_contract(
    contract_name: str = CONTRACT_NAME,
    network: Optional[str] = None,
    artifacts_dir: Optional[Union[str, Path]] = None,
    contracts_dir: Optional[Union[str, Path]] = None
) -> DeployedContract:
    """
    Deploy a contract and record it

    Args:
        contract_name: Contract to deploy
        network: Network name (None = $DEPLOY_NETWORK or alfajores)
        artifacts_dir: Compiled artifacts directory (None = <root>/artifacts)
        contracts_dir: Output directory for address and artifact files
                       (None = <root>/contracts)

    Returns:
        DeployedContract
    """
    if artifacts_dir is None:
        artifacts_dir = project_root() / "artifacts"
    if contracts_dir is None:
        contracts_dir = project_root() / "contracts"

    network_config = load_network_config(network)
    logger.info(f"Network: {network_config.name} (chain {network_config.chain_id})")

    # Resolve the artifact before touching the signer or the network
    artifact_store = ArtifactStore(artifacts_dir)
    artifact_store.read_artifact(contract_name)

    wallet_manager = WalletManager(network_config)
    w3 = RPCManager(network_config).connect()

    balance = wallet_manager.get_balance(w3)
    logger.info(f"Account balance: {w3.from_wei(balance, 'ether')}")

    if balance == 0:
        raise TransactionSubmissionError(
            f"Insufficient funds: deployer {wallet_manager.address} has zero balance"
        )

    contract_manager = ContractManager(
        w3,
        wallet_manager,
        artifact_store,
        network_config.chain_id
    )

    factory = contract_manager.get_contract_factory(contract_name)
    deployment = await factory.deploy()
    deployed = await deployment.deployed()

    print(f"{deployed.name} contract deployed to: {deployed.address}")

    store_contract_data(contracts_dir, deployed, factory.artifact)
    return deployed


def main() -> int:
    """Run one deployment and return the process exit code"""
    try:
        asyncio.run(deploy_contract())
    except Exception as e:
        logger.opt(exception=e).error(f"Deployment failed: {e}")
        return 1

    return 0


def run():
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
