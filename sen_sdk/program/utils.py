"""Utility functions for the Sen program module."""

import struct
from typing import Union

from solders.pubkey import Pubkey

from .constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    MAX_U128,
    MAX_U64,
    PUBKEY_SIZE,
    TOKEN_PROGRAM_ID,
)
from .errors import ArithmeticOverflowError


def encode_u8(value: int) -> bytes:
    """Encode an unsigned 8-bit integer.

    Raises:
        ValueError: If value is out of range [0, 255]
    """
    if not 0 <= value <= 255:
        raise ValueError(f"u8 value out of range: {value} (must be 0-255)")
    return struct.pack("<B", value)


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer (little-endian).

    Raises:
        ValueError: If value is out of range [0, 2^64-1]
    """
    if not 0 <= value <= MAX_U64:
        raise ValueError(f"u64 value out of range: {value} (must be 0-{MAX_U64})")
    return struct.pack("<Q", value)


def decode_u8(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 8-bit integer."""
    return struct.unpack_from("<B", data, offset)[0]


def decode_u32(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 32-bit integer (little-endian)."""
    return struct.unpack_from("<I", data, offset)[0]


def decode_u64(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 64-bit integer (little-endian)."""
    return struct.unpack_from("<Q", data, offset)[0]


def decode_pubkey(data: bytes, offset: int = 0) -> Pubkey:
    """Decode a Pubkey from 32 bytes.

    Raises:
        ValueError: If not enough bytes available for Pubkey
    """
    if offset + PUBKEY_SIZE > len(data):
        raise ValueError(
            f"Not enough bytes for Pubkey at offset {offset}: "
            f"need 32 bytes, have {len(data) - offset}"
        )
    return Pubkey.from_bytes(data[offset : offset + PUBKEY_SIZE])


def decode_bool(data: bytes, offset: int = 0) -> bool:
    """Decode a boolean from a single byte.

    Raises:
        ValueError: If not enough bytes available
    """
    if offset >= len(data):
        raise ValueError(f"Not enough bytes for bool at offset {offset}")
    return data[offset] != 0


def pubkey_to_bytes(pubkey: Union[Pubkey, bytes]) -> bytes:
    """Convert a Pubkey to bytes."""
    if isinstance(pubkey, bytes):
        return pubkey
    return bytes(pubkey)


def xor_pubkeys(*keys: Union[Pubkey, bytes]) -> Pubkey:
    """XOR any number of 32-byte keys together.

    Raises:
        ValueError: If a key is not exactly 32 bytes
    """
    result = bytearray(PUBKEY_SIZE)
    for key in keys:
        raw = pubkey_to_bytes(key)
        if len(raw) != PUBKEY_SIZE:
            raise ValueError(f"Invalid key length: {len(raw)} (expected 32)")
        for i, byte in enumerate(raw):
            result[i] ^= byte
    return Pubkey.from_bytes(bytes(result))


def get_associated_token_address(
    owner: Pubkey,
    mint: Pubkey,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Pubkey:
    """Derive the associated token account address for a wallet and mint."""
    seeds = [
        bytes(owner),
        bytes(token_program_id),
        bytes(mint),
    ]
    pda, _ = Pubkey.find_program_address(seeds, ASSOCIATED_TOKEN_PROGRAM_ID)
    return pda


def require_amount(name: str, value: int) -> int:
    """Validate a caller-supplied on-chain amount.

    Raises:
        ValueError: If value is not a non-negative int
        ArithmeticOverflowError: If value does not fit in a u64
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    if value > MAX_U64:
        raise ArithmeticOverflowError(name, value, 64)
    return value


def check_u64(name: str, value: int) -> int:
    """Ensure a computed amount fits back into a u64."""
    if value < 0 or value > MAX_U64:
        raise ArithmeticOverflowError(name, value, 64)
    return value


def checked_mul(name: str, a: int, b: int) -> int:
    """Multiply two amounts the way the program does, in u128."""
    product = a * b
    if product > MAX_U128:
        raise ArithmeticOverflowError(name, product, 128)
    return product
