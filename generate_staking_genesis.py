#!/usr/bin/env python3
"""
Generate the genesis alloc entry for the PoS staking contract

Usage:
  python generate_staking_genesis.py [validators_file] [output_file]

Configuration (.env or environment):
  STAKING_VALIDATORS        comma separated validator addresses
  STAKING_VALIDATORS_FILE   file with one validator address per line
  STAKING_MIN_VALIDATORS    minimum validator count (default 1)
  STAKING_MAX_VALIDATORS    maximum validator count (default 2^53 - 1)
  STAKING_CONTRACT_VERSION  bundled contract version (default v1)
  STAKING_CONTRACT_ADDRESS  address the contract is predeployed at
  STRICT_VALIDATORS         reject duplicate validators (1/true/yes)
  GENESIS_FILE              existing genesis.json to merge the alloc into
  GENESIS_OUTPUT            output path (default staking_alloc.json)
"""

import json
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from web3 import Web3

from staking_genesis import (
    GenesisAccount,
    GenesisConfigError,
    PredeployParams,
    get_contract_version,
    predeploy_staking_contract,
)
from staking_layouts import (
    DEFAULT_MAX_VALIDATOR_COUNT,
    DEFAULT_MIN_VALIDATOR_COUNT,
    DEFAULT_VERSION,
    STAKING_CONTRACT_ADDRESS,
)

DEFAULT_OUTPUT = "staking_alloc.json"


def env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ('1', 'true', 'yes')


def checksum(address: str) -> str:
    if not Web3.is_address(address):
        raise ValueError(f"Invalid validator address: {address!r}")
    return Web3.to_checksum_address(address)


def load_validators(value: Optional[str] = None, path: Optional[str] = None) -> List[str]:
    """
    Read validator addresses from a comma separated list and/or a file.

    The file holds one address per line; blank lines and `#` comments are
    skipped. List entries come first, then file entries, order preserved.
    """
    entries = []

    if value:
        entries.extend(v.strip() for v in value.split(","))

    if path:
        with open(path, "r") as f:
            for line in f:
                entries.append(line.split("#", 1)[0].strip())

    return [checksum(e) for e in entries if e]


def load_params_from_env() -> PredeployParams:
    try:
        min_count = int(os.getenv("STAKING_MIN_VALIDATORS", DEFAULT_MIN_VALIDATOR_COUNT))
        max_count = int(os.getenv("STAKING_MAX_VALIDATORS", DEFAULT_MAX_VALIDATOR_COUNT))
    except ValueError as e:
        raise GenesisConfigError(f"Invalid validator count: {e}") from e

    return PredeployParams(min_validator_count=min_count, max_validator_count=max_count)


def build_alloc(account: GenesisAccount, contract_address: str) -> dict:
    return {Web3.to_checksum_address(contract_address): account.to_alloc()}


def merge_into_genesis(genesis: dict, alloc: dict) -> dict:
    """Add the alloc entries to `genesis["alloc"]`, replacing same addresses"""
    genesis.setdefault("alloc", {}).update(alloc)
    return genesis


def main(argv=None) -> int:
    load_dotenv()

    args = sys.argv[1:] if argv is None else argv

    validators_file = args[0] if len(args) >= 1 else os.getenv("STAKING_VALIDATORS_FILE")
    output_path = args[1] if len(args) >= 2 else os.getenv("GENESIS_OUTPUT", DEFAULT_OUTPUT)
    version_tag = os.getenv("STAKING_CONTRACT_VERSION", DEFAULT_VERSION)
    contract_address = os.getenv("STAKING_CONTRACT_ADDRESS", STAKING_CONTRACT_ADDRESS)
    genesis_path = os.getenv("GENESIS_FILE")
    strict = env_flag("STRICT_VALIDATORS")

    print("=" * 80)
    print("Staking Contract Genesis Generator")
    print("=" * 80)

    try:
        validators = load_validators(os.getenv("STAKING_VALIDATORS"), validators_file)
        params = load_params_from_env()
        version = get_contract_version(version_tag)
        contract_address = Web3.to_checksum_address(contract_address)

        print(f"\nContract version: {version.tag}")
        print(f"Contract address: {contract_address}")
        print(f"Min validators: {params.min_validator_count}")
        print(f"Max validators: {params.max_validator_count}")
        print(f"Strict duplicates: {strict}")

        print(f"\nBootstrap validators ({len(validators)}):")
        for idx, validator in enumerate(validators):
            print(f"  [{idx}] {validator}")

        account = predeploy_staking_contract(validators, params, version, strict=strict)
        alloc = build_alloc(account, contract_address)

        if genesis_path:
            with open(genesis_path, "r") as f:
                document = merge_into_genesis(json.load(f), alloc)
            print(f"\nMerging into genesis: {genesis_path}")
        else:
            document = alloc
    except (GenesisConfigError, ValueError, OSError) as e:
        print(f"\n✗ {e}", file=sys.stderr)
        return 1

    with open(output_path, "w") as f:
        json.dump(document, f, indent=2)

    print(f"\nStorage entries: {len(account.storage)}")
    print(f"Contract balance: {account.balance} ({hex(account.balance)})")
    print(f"Code size: {len(account.code)} bytes")
    print(f"\n✓ Wrote {output_path}")

    return 0


if __name__ == "__main__":
    exit(main())
