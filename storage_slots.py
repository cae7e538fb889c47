"""
Solidity storage slot addressing

For a contract's top-level storage variables:
  scalar at slot N:          storage_slot = N
  mapping at slot N:         storage_slot = keccak256(pad32(key) ++ pad32(N))
  dynamic array at slot N:   length at N, element i at keccak256(pad32(N)) + i

Keys used against the state trie are 32-byte words; raw slot numbers are
right-aligned into a word, so slot 4 and 0x00..04 address the same value.
"""

from dataclasses import dataclass

from eth_utils import int_to_big_endian, keccak, to_canonical_address

WORD_SIZE = 32


def pad_left_or_trim(data: bytes, size: int) -> bytes:
    """Zero-pad on the left to `size` bytes, or keep the lowest `size` bytes"""
    if len(data) >= size:
        return data[len(data) - size:]
    return b'\x00' * (size - len(data)) + data


def to_storage_word(data: bytes) -> bytes:
    """Right-align bytes into a 32-byte storage key or value"""
    return pad_left_or_trim(data, WORD_SIZE)


def slot_to_bytes(slot: int) -> bytes:
    """Minimal big-endian encoding of a slot number (empty for slot 0)"""
    if slot == 0:
        return b''
    return int_to_big_endian(slot)


def mapping_key(address, slot: int) -> bytes:
    """
    Storage key of `mapping(address => T)` at `slot` for the given address.

    Args:
        address: 20-byte address or hex string
        slot: declared slot of the mapping

    Returns:
        32-byte keccak256 digest
    """
    address_word = pad_left_or_trim(to_canonical_address(address), WORD_SIZE)
    slot_word = pad_left_or_trim(slot_to_bytes(slot), WORD_SIZE)

    return keccak(address_word + slot_word)


def array_element_key(slot: int, index: int) -> bytes:
    """
    Storage key of element `index` of a dynamic array declared at `slot`.

    The digest of the padded slot is treated as a uint256 and offset by the
    index. The result is minimal big-endian; wrap it with `to_storage_word`
    before using it as a key.
    """
    data_start = keccak(pad_left_or_trim(slot_to_bytes(slot), WORD_SIZE))
    position = int.from_bytes(data_start, 'big') + index

    return int_to_big_endian(position)


def scalar_key(slot: int) -> bytes:
    """Storage key of a value type stored directly at `slot`"""
    return slot_to_bytes(slot)


def array_length_key(slot: int) -> bytes:
    """Storage key of a dynamic array's length word (the array's own slot)"""
    if slot < 256:
        return bytes([slot])
    return int_to_big_endian(slot)


@dataclass(frozen=True)
class StorageIndexes:
    """All storage keys a single bootstrapped validator touches"""
    validators_index: bytes                 # address[] element
    validators_array_size_index: bytes      # address[] length
    address_to_is_validator_index: bytes    # mapping(address => bool)
    address_to_staked_amount_index: bytes   # mapping(address => uint256)
    address_to_validator_index_index: bytes  # mapping(address => uint256)
    staked_amount_index: bytes              # uint256


def get_storage_indexes(layout, address, index: int) -> StorageIndexes:
    """Collect the storage keys for the validator at position `index`"""
    return StorageIndexes(
        validators_index=to_storage_word(
            array_element_key(layout.validators_slot, index)
        ),
        validators_array_size_index=to_storage_word(
            array_length_key(layout.validators_slot)
        ),
        address_to_is_validator_index=mapping_key(address, layout.is_validator_slot),
        address_to_staked_amount_index=mapping_key(
            address, layout.staked_amount_by_address_slot
        ),
        address_to_validator_index_index=mapping_key(
            address, layout.validator_index_slot
        ),
        staked_amount_index=to_storage_word(scalar_key(layout.staked_amount_slot)),
    )
