"""
Shared fixtures: a compiled Trust artifact on disk and a mocked node
"""

import json
import pytest
from unittest.mock import MagicMock
from hexbytes import HexBytes
from web3 import Web3


# Hardhat's first default account; never holds real funds
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TX_HASH = HexBytes("0x" + "ab" * 32)

TRUST_BYTECODE = (
    "0x6080604052348015600f57600080fd5b50603f80601d6000396000f3fe"
    "6080604052600080fdfea164736f6c6343000800000a"
)


def make_artifact(name="Trust", source="contracts/Trust.sol", bytecode=TRUST_BYTECODE):
    return {
        "_format": "hh-sol-artifact-1",
        "contractName": name,
        "sourceName": source,
        "abi": [
            {
                "inputs": [],
                "stateMutability": "nonpayable",
                "type": "constructor"
            },
            {
                "inputs": [],
                "name": "owner",
                "outputs": [{"internalType": "address", "name": "", "type": "address"}],
                "stateMutability": "view",
                "type": "function"
            }
        ],
        "bytecode": bytecode,
        "deployedBytecode": "0x6080604052600080fdfe",
        "linkReferences": {},
        "deployedLinkReferences": {}
    }


def write_artifact(artifacts_dir, artifact):
    """Write an artifact the way the Hardhat compiler lays it out"""
    path = artifacts_dir / artifact["sourceName"] / f"{artifact['contractName']}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(artifact, indent=2), encoding="utf-8")

    dbg = path.with_name(f"{artifact['contractName']}.dbg.json")
    dbg.write_text(json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/x.json"}, indent=2))
    return path


def make_receipt(address=DEPLOYED_ADDRESS, status=1):
    return {
        'status': status,
        'contractAddress': address,
        'blockNumber': 12345,
        'gasUsed': 98765,
        'transactionHash': TX_HASH,
    }


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory holding a compiled Trust contract"""
    directory = tmp_path / "artifacts"
    write_artifact(directory, make_artifact())
    return directory


@pytest.fixture
def private_key(monkeypatch):
    monkeypatch.setenv("PRIVATE_KEY", TEST_PRIVATE_KEY)
    monkeypatch.delenv("DEPLOY_NETWORK", raising=False)
    return TEST_PRIVATE_KEY


@pytest.fixture
def w3():
    """Mock Web3 connected to Alfajores with a funded deployer"""
    w3 = MagicMock()
    w3.is_connected.return_value = True
    w3.eth.chain_id = 44787
    w3.eth.gas_price = 5 * 10**9
    w3.eth.get_balance.return_value = 10**18
    w3.eth.get_transaction_count.return_value = 7
    w3.from_wei.side_effect = Web3.from_wei

    constructor = w3.eth.contract.return_value.constructor.return_value
    constructor.estimate_gas.return_value = 100000
    constructor.build_transaction.side_effect = lambda params: {
        **params,
        'data': TRUST_BYTECODE,
        'value': 0,
    }

    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.get_transaction_receipt.return_value = make_receipt()
    return w3
