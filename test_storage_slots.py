import pytest

from eth_abi import encode
from eth_utils import int_to_big_endian, keccak, to_canonical_address

from staking_layouts import V1_LAYOUT
from storage_slots import (
    array_element_key,
    array_length_key,
    get_storage_indexes,
    mapping_key,
    pad_left_or_trim,
    scalar_key,
    to_storage_word,
)

VALIDATOR = "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"
OTHER = "0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc"

# keccak256(uint256(0)) and keccak256(uint256(1)): data start of arrays at slots 0 and 1
SLOT_0_DATA_START = bytes.fromhex(
    "290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e563"
)
SLOT_1_DATA_START = bytes.fromhex(
    "b10e2d527612073b26eecdfd717e6a320cf44b4afac2b0732d9fcbe2b7fa0cf6"
)


def test_pad_left_or_trim():
    assert pad_left_or_trim(b'\x01\x02', 4) == b'\x00\x00\x01\x02'
    assert pad_left_or_trim(b'\x01\x02\x03\x04\x05', 4) == b'\x02\x03\x04\x05'
    assert pad_left_or_trim(b'', 3) == b'\x00\x00\x00'
    assert pad_left_or_trim(b'\xaa' * 32, 32) == b'\xaa' * 32


def test_to_storage_word_right_aligns():
    word = to_storage_word(b'\x04')
    assert len(word) == 32
    assert int.from_bytes(word, 'big') == 4


@pytest.mark.parametrize('slot', [0, 1, 2, 3, 6, 255, 1000])
def test_mapping_key_matches_abi_encoded_preimage(slot):
    # Same preimage Solidity hashes for mapping(address => T): abi.encode(key, slot)
    expected = keccak(encode(['address', 'uint256'], [to_canonical_address(VALIDATOR), slot]))
    assert mapping_key(VALIDATOR, slot) == expected


def test_mapping_key_accepts_bytes_and_hex():
    as_bytes = to_canonical_address(VALIDATOR)
    assert mapping_key(as_bytes, 2) == mapping_key(VALIDATOR, 2)
    assert mapping_key(VALIDATOR.lower(), 2) == mapping_key(VALIDATOR, 2)


def test_mapping_key_is_deterministic_and_distinct():
    keys = {
        mapping_key(address, slot)
        for address in (VALIDATOR, OTHER)
        for slot in (1, 2, 3)
    }
    assert len(keys) == 6
    assert mapping_key(OTHER, 3) == mapping_key(OTHER, 3)
    assert all(len(k) == 32 for k in keys)


def test_array_element_key_known_vectors():
    assert to_storage_word(array_element_key(0, 0)) == SLOT_0_DATA_START
    assert to_storage_word(array_element_key(1, 0)) == SLOT_1_DATA_START


def test_array_element_key_offsets_by_index():
    base = int.from_bytes(SLOT_0_DATA_START, 'big')
    for index in (1, 2, 17):
        assert int.from_bytes(array_element_key(0, index), 'big') == base + index


def test_array_element_key_distinct_indices():
    keys = [array_element_key(0, i) for i in range(64)]
    assert len(set(keys)) == len(keys)


def test_array_element_key_is_minimal_big_endian():
    # no leading zero bytes
    key = array_element_key(5, 3)
    assert key == int_to_big_endian(int.from_bytes(key, 'big'))


def test_scalar_key():
    assert scalar_key(4) == b'\x04'
    assert scalar_key(0) == b''
    assert scalar_key(256) == b'\x01\x00'
    assert to_storage_word(scalar_key(0)) == b'\x00' * 32
    assert to_storage_word(scalar_key(6)) == (6).to_bytes(32, 'big')


def test_array_length_key():
    assert array_length_key(0) == b'\x00'
    assert array_length_key(7) == b'\x07'
    assert array_length_key(300) == (300).to_bytes(2, 'big')
    # Length word lives at the array's own slot
    assert to_storage_word(array_length_key(5)) == to_storage_word(scalar_key(5))


def test_get_storage_indexes():
    indexes = get_storage_indexes(V1_LAYOUT, VALIDATOR, 2)

    assert indexes.validators_index == to_storage_word(array_element_key(0, 2))
    assert indexes.validators_array_size_index == b'\x00' * 32
    assert indexes.address_to_is_validator_index == mapping_key(VALIDATOR, 1)
    assert indexes.address_to_staked_amount_index == mapping_key(VALIDATOR, 2)
    assert indexes.address_to_validator_index_index == mapping_key(VALIDATOR, 3)
    assert indexes.staked_amount_index == (4).to_bytes(32, 'big')
