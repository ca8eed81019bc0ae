import json
import pytest
from Cnfbuilder.core.config import EncoderConfig
from Cnfbuilder.core.errors import EncodingContractError, ValidationError
from Cnfbuilder.encode import Encoder, run

def test_defaults(monkeypatch):
    for key in ["CNFBUILDER_CONFIG_PATH", "CNFBUILDER_CHECK_INVARIANTS", "CNFBUILDER_SOLVER"]:
        monkeypatch.delenv(key, raising=False)
    config = EncoderConfig.from_env_or_file()
    assert config == EncoderConfig()
    assert config.check_invariants is True

def test_file_then_env(monkeypatch, tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"solver_name": "glucose4", "max_solutions": 5}))
    monkeypatch.setenv("CNFBUILDER_CONFIG_PATH", str(path))
    monkeypatch.setenv("CNFBUILDER_CHECK_INVARIANTS", "0")
    monkeypatch.delenv("CNFBUILDER_SOLVER", raising=False)
    config = EncoderConfig.from_env_or_file()
    assert config.solver_name == "glucose4"
    assert config.max_solutions == 5
    assert config.check_invariants is False

    monkeypatch.setenv("CNFBUILDER_SOLVER", "cadical153")
    assert EncoderConfig.from_env_or_file().solver_name == "cadical153"

def test_unreadable_file_falls_back(monkeypatch, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    monkeypatch.setenv("CNFBUILDER_CONFIG_PATH", str(path))
    monkeypatch.delenv("CNFBUILDER_CHECK_INVARIANTS", raising=False)
    monkeypatch.delenv("CNFBUILDER_SOLVER", raising=False)
    assert EncoderConfig.from_env_or_file() == EncoderConfig()

def test_invariant_check_can_be_disabled():
    def corrupt(state):
        state.clauses.append([99])
    with pytest.raises(EncodingContractError):
        run(["a"], Encoder(corrupt))
    result = run(["a"], Encoder(corrupt), config=EncoderConfig(check_invariants=False))
    assert result.clauses == [[99]]

def test_non_object_file_falls_back(monkeypatch, tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 2]))
    monkeypatch.setenv("CNFBUILDER_CONFIG_PATH", str(path))
    monkeypatch.delenv("CNFBUILDER_CHECK_INVARIANTS", raising=False)
    monkeypatch.delenv("CNFBUILDER_SOLVER", raising=False)
    assert EncoderConfig.from_env_or_file() == EncoderConfig()

def test_invalid_file_values_raise_package_error(monkeypatch, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"max_solutions": 0}))
    monkeypatch.setenv("CNFBUILDER_CONFIG_PATH", str(path))
    monkeypatch.delenv("CNFBUILDER_CHECK_INVARIANTS", raising=False)
    monkeypatch.delenv("CNFBUILDER_SOLVER", raising=False)
    with pytest.raises(ValidationError, match="max_solutions"):
        EncoderConfig.from_env_or_file()
