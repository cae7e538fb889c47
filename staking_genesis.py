"""
Predeploy the PoS staking contract into a genesis state

Builds the account (code, balance, storage) that makes the staking contract
look, at block 0, as if every bootstrap validator had already staked the
contract version's default amount.

Storage written per validator i (see storage_slots for the key rules):
  _validators[i]                    = validator address
  _addressToIsValidator[validator]  = true
  _addressToStakedAmount[validator] = default stake
  _addressToValidatorIndex[validator] = i
  _stakedAmount                     = running total
  _validators.length                = i + 1
followed by the minimum and maximum validator counts.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from eth_abi import encode
from eth_utils import decode_hex, encode_hex, to_canonical_address

from staking_layouts import (
    DEFAULT_MAX_VALIDATOR_COUNT,
    DEFAULT_MIN_VALIDATOR_COUNT,
    DEFAULT_VERSION,
    STAKING_CONTRACT_VERSIONS,
    StakingContractVersion,
)
from storage_slots import get_storage_indexes, scalar_key, to_storage_word

MAX_UINT64 = 2 ** 64 - 1
MAX_UINT256 = 2 ** 256 - 1


class GenesisConfigError(Exception):
    """Bundled contract constants or predeploy parameters are unusable"""


class DuplicateValidatorError(GenesisConfigError):
    """The same address appears more than once in the bootstrap validators"""


@dataclass(frozen=True)
class PredeployParams:
    min_validator_count: int = DEFAULT_MIN_VALIDATOR_COUNT
    max_validator_count: int = DEFAULT_MAX_VALIDATOR_COUNT

    def __post_init__(self):
        for name in ('min_validator_count', 'max_validator_count'):
            value = getattr(self, name)
            if not 0 <= value <= MAX_UINT64:
                raise GenesisConfigError(f"{name} must fit in uint64, got {value}")
        if self.min_validator_count > self.max_validator_count:
            raise GenesisConfigError(
                f"min_validator_count ({self.min_validator_count}) exceeds "
                f"max_validator_count ({self.max_validator_count})"
            )


@dataclass
class GenesisAccount:
    code: bytes
    balance: int
    storage: Dict[bytes, bytes] = field(default_factory=dict)

    def to_alloc(self) -> dict:
        """Render as a genesis `alloc` entry with 0x-prefixed hex fields"""
        return {
            "code": encode_hex(self.code),
            "balance": hex(self.balance),
            "storage": {
                encode_hex(key): encode_hex(value)
                for key, value in sorted(self.storage.items())
            },
        }


def get_contract_version(tag: str) -> StakingContractVersion:
    """Look up a bundled contract version by its tag"""
    try:
        return STAKING_CONTRACT_VERSIONS[tag]
    except KeyError:
        known = ", ".join(sorted(STAKING_CONTRACT_VERSIONS))
        raise GenesisConfigError(
            f"Unknown staking contract version {tag!r} (known: {known})"
        ) from None


def decode_bytecode(bytecode: str) -> bytes:
    try:
        return decode_hex(bytecode)
    except ValueError as e:
        raise GenesisConfigError(f"Invalid staking contract bytecode: {e}") from e


def parse_staked_balance(value: str) -> int:
    """Parse a uint256 given as 0x-prefixed hex or as a decimal string"""
    try:
        if value.lower().startswith('0x'):
            balance = int(value, 16)
        else:
            balance = int(value, 10)
    except ValueError as e:
        raise GenesisConfigError(
            f"Unable to parse default staked balance {value!r}"
        ) from e

    if not 0 <= balance <= MAX_UINT256:
        raise GenesisConfigError(f"Default staked balance {value!r} is not a uint256")

    return balance


def uint256_word(value: int) -> bytes:
    return encode(['uint256'], [value])


def check_unique_validators(validators) -> None:
    seen = set()
    for index, validator in enumerate(validators):
        if validator in seen:
            raise DuplicateValidatorError(
                f"Validator {encode_hex(validator)} listed again at index {index}"
            )
        seen.add(validator)


def predeploy_staking_contract(
    validators: Iterable,
    params: PredeployParams = PredeployParams(),
    version: Optional[StakingContractVersion] = None,
    strict: bool = False,
) -> GenesisAccount:
    """
    Build the staking contract genesis account with `validators` pre-staked.

    Args:
        validators: ordered validator addresses (20-byte values or hex strings)
        params: minimum/maximum validator counts written to the contract
        version: contract version bundle, the default version when omitted
        strict: reject duplicate addresses instead of double counting them

    Returns:
        GenesisAccount whose balance is the sum of all pre-staked amounts

    Raises:
        GenesisConfigError: bundled bytecode or default balance is malformed
        DuplicateValidatorError: strict mode and an address repeats
    """
    if version is None:
        version = get_contract_version(DEFAULT_VERSION)

    code = decode_bytecode(version.bytecode)
    default_staked_balance = parse_staked_balance(version.default_staked_balance)
    layout = version.layout

    validators = [to_canonical_address(v) for v in validators]
    if strict:
        check_unique_validators(validators)

    storage: Dict[bytes, bytes] = {}
    true_word = encode(['bool'], [True])
    staked_word = uint256_word(default_staked_balance)
    staked_amount = 0

    for index, validator in enumerate(validators):
        staked_amount += default_staked_balance

        indexes = get_storage_indexes(layout, validator, index)

        storage[indexes.validators_index] = encode(['address'], [validator])
        storage[indexes.address_to_is_validator_index] = true_word
        storage[indexes.address_to_staked_amount_index] = staked_word
        storage[indexes.address_to_validator_index_index] = uint256_word(index)
        storage[indexes.staked_amount_index] = uint256_word(staked_amount)
        storage[indexes.validators_array_size_index] = uint256_word(index + 1)

    storage[to_storage_word(scalar_key(layout.min_validator_count_slot))] = \
        uint256_word(params.min_validator_count)
    storage[to_storage_word(scalar_key(layout.max_validator_count_slot))] = \
        uint256_word(params.max_validator_count)

    return GenesisAccount(code=code, balance=staked_amount, storage=storage)
