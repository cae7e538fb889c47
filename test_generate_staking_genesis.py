import json

import pytest

from web3 import Web3

import generate_staking_genesis
from generate_staking_genesis import (
    build_alloc,
    load_params_from_env,
    load_validators,
    main,
    merge_into_genesis,
)
from staking_genesis import GenesisConfigError, predeploy_staking_contract
from staking_layouts import DEFAULT_MAX_VALIDATOR_COUNT, STAKING_CONTRACT_ADDRESS

V1 = "0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640"
V2 = "0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc"

CONFIG_VARS = [
    "STAKING_VALIDATORS",
    "STAKING_VALIDATORS_FILE",
    "STAKING_MIN_VALIDATORS",
    "STAKING_MAX_VALIDATORS",
    "STAKING_CONTRACT_VERSION",
    "STAKING_CONTRACT_ADDRESS",
    "STRICT_VALIDATORS",
    "GENESIS_FILE",
    "GENESIS_OUTPUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(generate_staking_genesis, "load_dotenv", lambda: False)
    monkeypatch.chdir(tmp_path)


def test_load_validators_from_list():
    validators = load_validators(f" {V1} ,{V2},")
    assert validators == [
        Web3.to_checksum_address(V1),
        Web3.to_checksum_address(V2),
    ]


def test_load_validators_from_file(tmp_path):
    path = tmp_path / "validators.txt"
    path.write_text(f"# bootstrap set\n{V2}\n\n{V1}  # second\n")

    assert load_validators(V1, str(path)) == [
        Web3.to_checksum_address(V1),
        Web3.to_checksum_address(V2),
        Web3.to_checksum_address(V1),
    ]


def test_load_validators_rejects_bad_address():
    with pytest.raises(ValueError, match="0x1234"):
        load_validators(f"{V1},0x1234")


def test_load_params_from_env(monkeypatch):
    params = load_params_from_env()
    assert params.min_validator_count == 1
    assert params.max_validator_count == DEFAULT_MAX_VALIDATOR_COUNT

    monkeypatch.setenv("STAKING_MIN_VALIDATORS", "4")
    monkeypatch.setenv("STAKING_MAX_VALIDATORS", "10")
    params = load_params_from_env()
    assert (params.min_validator_count, params.max_validator_count) == (4, 10)

    monkeypatch.setenv("STAKING_MAX_VALIDATORS", "many")
    with pytest.raises(GenesisConfigError):
        load_params_from_env()


def test_build_alloc_and_merge():
    account = predeploy_staking_contract([V1])
    alloc = build_alloc(account, STAKING_CONTRACT_ADDRESS)
    address = Web3.to_checksum_address(STAKING_CONTRACT_ADDRESS)

    assert list(alloc) == [address]
    assert alloc[address] == account.to_alloc()

    genesis = {"config": {"chainId": 100}, "alloc": {V2: {"balance": "0x1"}}}
    merged = merge_into_genesis(genesis, alloc)
    assert merged["alloc"][V2] == {"balance": "0x1"}
    assert merged["alloc"][address] == account.to_alloc()

    assert merge_into_genesis({}, alloc) == {"alloc": alloc}


def test_main_writes_alloc(monkeypatch, tmp_path, capsys):
    output = tmp_path / "alloc.json"
    monkeypatch.setenv("STAKING_VALIDATORS", f"{V1},{V2}")
    monkeypatch.setenv("STAKING_MAX_VALIDATORS", "7")

    assert main(["", str(output)]) == 0

    document = json.loads(output.read_text())
    entry = document[Web3.to_checksum_address(STAKING_CONTRACT_ADDRESS)]
    assert entry["balance"] == hex(2 * 0x8AC7230489E80000)
    assert len(entry["storage"]) == 12
    assert entry["storage"]["0x" + "00" * 31 + "06"] == "0x" + "00" * 31 + "07"
    assert "✓ Wrote" in capsys.readouterr().out


def test_main_merges_into_genesis(monkeypatch, tmp_path):
    genesis_path = tmp_path / "genesis.json"
    genesis_path.write_text(json.dumps({"config": {"chainId": 100}, "alloc": {}}))
    validators_path = tmp_path / "validators.txt"
    validators_path.write_text(V1 + "\n")

    monkeypatch.setenv("GENESIS_FILE", str(genesis_path))
    monkeypatch.setenv("GENESIS_OUTPUT", str(tmp_path / "out.json"))
    monkeypatch.setenv("STAKING_CONTRACT_ADDRESS", "0x" + "00" * 18 + "2002")

    assert main([str(validators_path)]) == 0

    document = json.loads((tmp_path / "out.json").read_text())
    assert document["config"] == {"chainId": 100}
    entry = document["alloc"][Web3.to_checksum_address("0x" + "00" * 18 + "2002")]
    assert entry["balance"] == hex(0x8AC7230489E80000)


def test_main_strict_duplicates(monkeypatch, capsys):
    monkeypatch.setenv("STAKING_VALIDATORS", f"{V1},{V2},{V1}")
    monkeypatch.setenv("STRICT_VALIDATORS", "yes")

    assert main([]) == 1
    assert "listed again" in capsys.readouterr().err


@pytest.mark.parametrize('name,value', [
    ("STAKING_VALIDATORS", "not-an-address"),
    ("STAKING_CONTRACT_VERSION", "v9"),
    ("STAKING_MIN_VALIDATORS", "9"),
    ("STAKING_VALIDATORS_FILE", "missing.txt"),
])
def test_main_config_errors(monkeypatch, tmp_path, name, value):
    monkeypatch.setenv("STAKING_MAX_VALIDATORS", "5")
    monkeypatch.setenv(name, value)

    assert main([]) == 1
    assert not (tmp_path / "staking_alloc.json").exists()
