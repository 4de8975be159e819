"""Read-only client for Sen swap accounts."""

from typing import Optional

from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey

from .accounts import deserialize_mint, deserialize_pool
from .constants import SWAP_PROGRAM_ID
from .errors import AccountNotFoundError
from .pda import derive_pool_address, get_treasurer
from .types import Mint, Pool


class SenSwapClient:
    """Async client for reading pools of the Sen swap program.

    The client only fetches and decodes accounts. Feed the results to the
    `sen_sdk.oracle` functions to quote against them.
    """

    def __init__(
        self,
        connection: AsyncClient,
        program_id: Pubkey = SWAP_PROGRAM_ID,
    ):
        """Initialize the client.

        Args:
            connection: Solana RPC async client
            program_id: Swap program ID (defaults to the deployed program)
        """
        self.connection = connection
        self.program_id = program_id

    async def _get_account_data(self, address: Pubkey) -> bytes:
        response = await self.connection.get_account_info(address)

        if response.value is None:
            raise AccountNotFoundError(str(address))

        return bytes(response.value.data)

    async def get_pool(self, pool_address: Pubkey) -> Pool:
        """Fetch and deserialize a pool account."""
        data = await self._get_account_data(pool_address)
        return deserialize_pool(data)

    async def get_mint(self, mint_address: Pubkey) -> Mint:
        """Fetch and deserialize an SPL mint account."""
        data = await self._get_account_data(mint_address)
        return deserialize_mint(data)

    async def get_pool_with_supply(self, pool_address: Pubkey) -> Pool:
        """Fetch a pool and fill in its LP supply from the LP mint."""
        pool = await self.get_pool(pool_address)
        mint_lpt = await self.get_mint(pool.mint_lpt)
        pool.lp_supply = mint_lpt.supply
        return pool

    async def get_pool_address_of_mint(self, mint_address: Pubkey) -> Optional[Pubkey]:
        """Find the pool an LP mint belongs to, or None if it is not an LP mint."""
        mint = await self.get_mint(mint_address)
        if mint.mint_authority is None or mint.freeze_authority is None:
            return None
        return derive_pool_address(
            mint.mint_authority, mint.freeze_authority, self.program_id
        )

    def get_treasurer(self, pool_address: Pubkey) -> Pubkey:
        """Derive the treasurer of a pool for this client's program."""
        return get_treasurer(pool_address, self.program_id)
