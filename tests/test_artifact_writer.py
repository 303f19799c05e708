"""
Artifact Writer Tests
"""

import os
import json
import stat
import pytest
from unittest.mock import patch

from blockchain.contract_manager import ArtifactStore, DeployedContract
from utils.artifact_writer import store_contract_data, to_json

from conftest import DEPLOYED_ADDRESS


@pytest.fixture
def artifact(artifacts_dir):
    return ArtifactStore(artifacts_dir).read_artifact("Trust")


@pytest.fixture
def deployed():
    return DeployedContract(
        name="Trust",
        address=DEPLOYED_ADDRESS,
        tx_hash="0x" + "ab" * 32,
        block_number=12345,
        gas_used=98765
    )


class TestStoreContractData:
    """Test address and artifact persistence"""

    def test_creates_directory(self, tmp_path, deployed, artifact):
        contracts_dir = tmp_path / "contracts"

        store_contract_data(contracts_dir, deployed, artifact)

        assert sorted(p.name for p in contracts_dir.iterdir()) == ["Trust-address.json", "Trust.json"]

    def test_existing_directory(self, tmp_path, deployed, artifact):
        contracts_dir = tmp_path / "contracts"
        contracts_dir.mkdir()
        (contracts_dir / "Trust.sol").write_text("// source")

        store_contract_data(contracts_dir, deployed, artifact)

        assert (contracts_dir / "Trust.sol").read_text() == "// source"
        assert (contracts_dir / "Trust-address.json").exists()

    def test_address_file(self, tmp_path, deployed, artifact):
        address_path, _ = store_contract_data(tmp_path, deployed, artifact)

        assert address_path.read_text() == '{\n  "Trust": "%s"\n}' % DEPLOYED_ADDRESS
        assert json.loads(address_path.read_text()) == {"Trust": DEPLOYED_ADDRESS}

    def test_artifact_copied_verbatim(self, tmp_path, artifacts_dir, deployed, artifact):
        source = artifacts_dir / "contracts" / "Trust.sol" / "Trust.json"

        _, artifact_path = store_contract_data(tmp_path / "contracts", deployed, artifact)

        assert artifact_path.read_bytes() == source.read_bytes()

    def test_overwrites_previous_deployment(self, tmp_path, deployed, artifact):
        store_contract_data(tmp_path, deployed, artifact)
        redeployed = DeployedContract("Trust", "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512", "0x01", 2, 1)

        address_path, _ = store_contract_data(tmp_path, redeployed, artifact)

        assert json.loads(address_path.read_text()) == {"Trust": redeployed.address}

    @pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
    def test_file_mode_follows_umask(self, tmp_path, deployed, artifact):
        old_umask = os.umask(0o022)
        try:
            plain = tmp_path / "plain.json"
            plain.write_text("{}")
            address_path, artifact_path = store_contract_data(tmp_path / "contracts", deployed, artifact)
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(address_path.stat().st_mode) == 0o644
        assert stat.S_IMODE(artifact_path.stat().st_mode) == 0o644
        assert stat.S_IMODE(plain.stat().st_mode) == 0o644

    @pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
    def test_redeploy_keeps_readable_mode(self, tmp_path, deployed, artifact):
        old_umask = os.umask(0o022)
        try:
            store_contract_data(tmp_path, deployed, artifact)
            address_path, _ = store_contract_data(tmp_path, deployed, artifact)
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(address_path.stat().st_mode) == 0o644

    def test_failed_write_leaves_nothing(self, tmp_path, deployed, artifact):
        contracts_dir = tmp_path / "contracts"

        with patch('utils.artifact_writer.os.replace', side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                store_contract_data(contracts_dir, deployed, artifact)

        assert list(contracts_dir.iterdir()) == []


class TestToJson:
    """Test JSON formatting"""

    def test_two_space_indent(self):
        assert to_json({"a": [1, {}]}) == '{\n  "a": [\n    1,\n    {}\n  ]\n}'

    def test_non_ascii_kept(self):
        assert to_json({"devdoc": "Confiança"}) == '{\n  "devdoc": "Confiança"\n}'
