"""
Artifact Writer
Persists deployed addresses and artifacts for frontends
"""

import os
import json
import tempfile
from pathlib import Path
from typing import Any, Tuple, Union
from loguru import logger

from blockchain.contract_manager import ContractArtifact, DeployedContract


def to_json(document: Any) -> str:
    """Serialize with 2-space indentation, no trailing newline, UTF-8 kept as-is"""
    return json.dumps(document, indent=2, ensure_ascii=False)


def _default_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask"""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_temp(directory: Path, content: str) -> Path:
    fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".", suffix=".json.tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        # mkstemp creates 0600
        os.chmod(tmp_path, _default_file_mode())
    except Exception:
        tmp_path.unlink()
        raise
    return tmp_path


def store_contract_data(
    contracts_dir: Union[str, Path],
    deployed: DeployedContract,
    artifact: ContractArtifact
) -> Tuple[Path, Path]:
    """
    Write <Name>-address.json and <Name>.json

    Both documents are staged as temporary files in the target directory and
    only renamed into place once both are fully written.

    Args:
        contracts_dir: Output directory (created if absent)
        deployed: Confirmed deployment
        artifact: Artifact of the deployed contract

    Returns:
        Tuple of (address_path, artifact_path)
    """
    contracts_dir = Path(contracts_dir)
    contracts_dir.mkdir(parents=True, exist_ok=True)

    address_path = contracts_dir / f"{deployed.name}-address.json"
    artifact_path = contracts_dir / f"{deployed.name}.json"

    staged = []
    try:
        staged.append((_write_temp(contracts_dir, to_json({deployed.name: deployed.address})), address_path))
        staged.append((_write_temp(contracts_dir, to_json(artifact.raw)), artifact_path))

        for tmp_path, final_path in staged:
            os.replace(tmp_path, final_path)
    except Exception:
        for tmp_path, _ in staged:
            if tmp_path.exists():
                tmp_path.unlink()
        raise

    logger.success(f"Saved {address_path.name} and {artifact_path.name} to {contracts_dir}")
    return address_path, artifact_path
