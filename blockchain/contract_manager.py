"""
Contract Manager
Loads compiled artifacts and deploys contracts from them
"""

import os
import json
import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from web3 import Web3
from web3.exceptions import TransactionNotFound
from loguru import logger

from .exceptions import (
    ContractNotFoundError,
    DeploymentError,
    DeploymentRevertedError,
    DeploymentTimeoutError,
    TransactionSubmissionError,
)
from .transaction_builder import TransactionBuilder


DEFAULT_DEPLOY_TIMEOUT = 120  # seconds, same as web3's receipt wait
DEFAULT_POLL_LATENCY = 0.1


@dataclass
class ContractArtifact:
    """Compiled contract as written by the build step."""

    contract_name: str
    source_name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    raw: Dict[str, Any] = field(repr=False)  # Full document, kept verbatim


@dataclass(frozen=True)
class DeployedContract:
    """A contract instance confirmed on-chain."""

    name: str
    address: str
    tx_hash: str
    block_number: int
    gas_used: int


class ArtifactStore:
    """
    Reads Hardhat-style artifacts

    Layout: <artifacts_dir>/<source path>/<ContractName>.json, with debug
    files (*.dbg.json) and build-info/ alongside.
    """

    def __init__(self, artifacts_dir: Union[str, Path]):
        self.artifacts_dir = Path(artifacts_dir)
        self._loaded: Dict[str, ContractArtifact] = {}

    def _find_artifact_files(self, name: str) -> List[Path]:
        if ":" in name:
            # Fully qualified: contracts/Trust.sol:Trust
            source_name, contract_name = name.rsplit(":", 1)
            path = self.artifacts_dir / source_name / f"{contract_name}.json"
            return [path] if path.is_file() else []

        if not self.artifacts_dir.is_dir():
            return []

        return sorted(
            path for path in self.artifacts_dir.rglob(f"{name}.json")
            if "build-info" not in path.relative_to(self.artifacts_dir).parts
        )

    def read_artifact(self, name: str) -> ContractArtifact:
        """
        Load the artifact for a contract

        Args:
            name: Contract name ("Trust") or fully qualified name
                  ("contracts/Trust.sol:Trust")

        Returns:
            ContractArtifact

        Raises:
            ContractNotFoundError: If no artifact matches, the name is ambiguous,
                                   or the artifact has no deployable bytecode
        """
        if name in self._loaded:
            return self._loaded[name]

        matches = self._find_artifact_files(name)

        if not matches:
            raise ContractNotFoundError(
                f"Artifact for contract '{name}' not found in {self.artifacts_dir}. "
                "Compile the contracts first."
            )

        if len(matches) > 1:
            candidates = ", ".join(
                str(path.parent.relative_to(self.artifacts_dir)) + ":" + path.stem
                for path in matches
            )
            raise ContractNotFoundError(
                f"Multiple artifacts for contract '{name}': {candidates}. "
                "Use the fully qualified name."
            )

        with open(matches[0], 'r', encoding='utf-8') as f:
            raw = json.load(f)

        try:
            artifact = ContractArtifact(
                contract_name=raw['contractName'],
                source_name=raw['sourceName'],
                abi=raw['abi'],
                bytecode=raw['bytecode'],
                raw=raw,
            )
        except KeyError as e:
            raise ContractNotFoundError(
                f"Artifact {matches[0]} is missing field {e}"
            ) from e

        if artifact.bytecode in ("", "0x"):
            raise ContractNotFoundError(
                f"Contract '{name}' has no bytecode (abstract contract or interface)"
            )

        logger.debug(f"Loaded artifact {artifact.source_name}:{artifact.contract_name}")
        self._loaded[name] = artifact
        return artifact


class DeploymentTransaction:
    """
    A submitted contract creation transaction
    """

    def __init__(self, w3: Web3, artifact: ContractArtifact, tx_hash: str):
        self.w3 = w3
        self.artifact = artifact
        self.tx_hash = tx_hash

    async def deployed(
        self,
        timeout: Optional[float] = None,
        poll_latency: float = DEFAULT_POLL_LATENCY
    ) -> DeployedContract:
        """
        Wait until the deployment is mined

        Args:
            timeout: Seconds to wait (None = $DEPLOY_TIMEOUT or 120)
            poll_latency: Seconds between receipt checks

        Returns:
            DeployedContract

        Raises:
            DeploymentRevertedError: If the transaction failed on-chain
            DeploymentTimeoutError: If no receipt arrived in time
        """
        if timeout is None:
            timeout = float(os.getenv('DEPLOY_TIMEOUT', DEFAULT_DEPLOY_TIMEOUT))

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout

        logger.info("Waiting for confirmation...")

        while True:
            try:
                receipt = self.w3.eth.get_transaction_receipt(self.tx_hash)
                break
            except TransactionNotFound:
                if loop.time() >= deadline:
                    raise DeploymentTimeoutError(
                        f"Transaction {self.tx_hash} not confirmed after {timeout}s",
                        tx_hash=self.tx_hash
                    )
                await asyncio.sleep(poll_latency)

        if receipt['status'] != 1:
            raise DeploymentRevertedError(
                f"Deployment of {self.artifact.contract_name} reverted "
                f"(transaction {self.tx_hash})",
                tx_hash=self.tx_hash
            )

        deployed = DeployedContract(
            name=self.artifact.contract_name,
            address=Web3.to_checksum_address(receipt['contractAddress']),
            tx_hash=self.tx_hash,
            block_number=receipt['blockNumber'],
            gas_used=receipt['gasUsed'],
        )

        logger.success(f"{deployed.name} confirmed in block {deployed.block_number}")
        logger.info(f"Gas used: {deployed.gas_used}")
        return deployed


class ContractFactory:
    """
    Deploys new instances of one compiled contract
    """

    def __init__(self, w3: Web3, wallet_manager, artifact: ContractArtifact, chain_id: int):
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.artifact = artifact
        self.contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        self.transaction_builder = TransactionBuilder(w3, wallet_manager, chain_id)

    async def deploy(self, *args) -> DeploymentTransaction:
        """
        Sign and send the creation transaction

        Args:
            *args: Constructor arguments

        Returns:
            DeploymentTransaction

        Raises:
            TransactionSubmissionError: If building, signing or sending fails
        """
        logger.info(f"Deploying {self.artifact.contract_name} from {self.wallet_manager.address}")

        try:
            tx = self.transaction_builder.build_deploy_tx(self.contract, args)
            signed_tx = self.wallet_manager.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except DeploymentError:
            raise
        except Exception as e:
            raise TransactionSubmissionError(
                f"Failed to submit deployment of {self.artifact.contract_name}: {e}"
            ) from e

        tx_hash = Web3.to_hex(tx_hash)
        logger.info(f"Transaction sent: {tx_hash}")

        return DeploymentTransaction(self.w3, self.artifact, tx_hash)


class ContractManager:
    """
    Hands out contract factories bound to a connection and a signer
    """

    def __init__(self, w3: Web3, wallet_manager, artifact_store: ArtifactStore, chain_id: int):
        """
        Initialize Contract Manager

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager for signing
            artifact_store: Source of compiled artifacts
            chain_id: Chain ID to sign for
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.artifact_store = artifact_store
        self.chain_id = chain_id

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Get a factory for a compiled contract

        Args:
            name: Contract name or fully qualified name

        Returns:
            ContractFactory

        Raises:
            ContractNotFoundError: If the artifact is missing
        """
        artifact = self.artifact_store.read_artifact(name)
        return ContractFactory(self.w3, self.wallet_manager, artifact, self.chain_id)
