"""Account deserialization for the Sen program module."""

from typing import Optional

from solders.pubkey import Pubkey

from .constants import POOL_SIZE
from .errors import InvalidAccountDataError
from .types import Mint, Pool, PoolState
from .utils import (
    decode_bool,
    decode_pubkey,
    decode_u32,
    decode_u64,
    decode_u8,
    encode_u64,
    encode_u8,
)

MINT_SIZE = 82


def deserialize_pool(data: bytes) -> Pool:
    """Deserialize a Pool account.

    Layout (257 bytes):
    - [0..32]: owner (Pubkey)
    - [32]: state (u8: 0=Uninitialized, 1=Initialized, 2=Frozen)
    - [33..65]: mint_lpt (Pubkey)
    - [65..97]: taxman (Pubkey)
    - [97..129]: mint_a (Pubkey)
    - [129..161]: treasury_a (Pubkey)
    - [161..169]: reserve_a (u64 LE)
    - [169..201]: mint_b (Pubkey)
    - [201..233]: treasury_b (Pubkey)
    - [233..241]: reserve_b (u64 LE)
    - [241..249]: fee_ratio (u64 LE)
    - [249..257]: tax_ratio (u64 LE)
    """
    if len(data) != POOL_SIZE:
        raise InvalidAccountDataError(
            f"Pool data has {len(data)} bytes (expected {POOL_SIZE})"
        )

    state_raw = decode_u8(data, 32)
    try:
        state = PoolState(state_raw)
    except ValueError:
        raise InvalidAccountDataError(f"Unknown pool state: {state_raw}")

    return Pool(
        owner=decode_pubkey(data, 0),
        state=state,
        mint_lpt=decode_pubkey(data, 33),
        taxman=decode_pubkey(data, 65),
        mint_a=decode_pubkey(data, 97),
        treasury_a=decode_pubkey(data, 129),
        reserve_a=decode_u64(data, 161),
        mint_b=decode_pubkey(data, 169),
        treasury_b=decode_pubkey(data, 201),
        reserve_b=decode_u64(data, 233),
        fee_ratio=decode_u64(data, 241),
        tax_ratio=decode_u64(data, 249),
    )


def serialize_pool(pool: Pool) -> bytes:
    """Serialize a Pool into its 257-byte account layout.

    `lp_supply` is not part of the layout and is dropped.
    """
    data = bytearray()
    data.extend(bytes(pool.owner))
    data.extend(encode_u8(pool.state))
    data.extend(bytes(pool.mint_lpt))
    data.extend(bytes(pool.taxman))
    data.extend(bytes(pool.mint_a))
    data.extend(bytes(pool.treasury_a))
    data.extend(encode_u64(pool.reserve_a))
    data.extend(bytes(pool.mint_b))
    data.extend(bytes(pool.treasury_b))
    data.extend(encode_u64(pool.reserve_b))
    data.extend(encode_u64(pool.fee_ratio))
    data.extend(encode_u64(pool.tax_ratio))
    return bytes(data)


def _decode_coption_pubkey(data: bytes, offset: int) -> Optional[Pubkey]:
    # COption<Pubkey>: u32 tag followed by 32 bytes, present or not
    if decode_u32(data, offset) == 0:
        return None
    return decode_pubkey(data, offset + 4)


def deserialize_mint(data: bytes) -> Mint:
    """Deserialize an SPL token Mint account.

    Layout (82 bytes):
    - [0..36]: mint_authority (COption<Pubkey>)
    - [36..44]: supply (u64 LE)
    - [44]: decimals (u8)
    - [45]: is_initialized (bool)
    - [46..82]: freeze_authority (COption<Pubkey>)
    """
    if len(data) < MINT_SIZE:
        raise InvalidAccountDataError(
            f"Mint data too short: {len(data)} bytes (expected {MINT_SIZE})"
        )

    return Mint(
        mint_authority=_decode_coption_pubkey(data, 0),
        supply=decode_u64(data, 36),
        decimals=decode_u8(data, 44),
        is_initialized=decode_bool(data, 45),
        freeze_authority=_decode_coption_pubkey(data, 46),
    )
