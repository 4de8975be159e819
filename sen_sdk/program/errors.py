"""Custom exceptions for the Sen SDK."""

from typing import Optional


class SenError(Exception):
    """Base exception for all Sen SDK errors."""

    pass


class ZeroAmountError(SenError):
    """Raised when an amount that must be strictly positive is zero."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot input a zero amount: {name}")


class InvalidReservesError(SenError):
    """Raised when pool reserves or LP supply cannot back the operation."""

    def __init__(self, message: str):
        super().__init__(f"Invalid reserves: {message}")


class OverdrawError(SenError):
    """Raised when a request draws more than the pool holds."""

    def __init__(self, requested: int, available: int, what: str = "lpt"):
        self.requested = requested
        self.available = available
        self.what = what
        super().__init__(
            f"Overdraw of {what}: requested={requested}, available={available}"
        )


class ArithmeticOverflowError(SenError):
    """Raised when a value does not fit the integer width used on-chain."""

    def __init__(self, name: str, value: int, bits: int):
        self.name = name
        self.value = value
        self.bits = bits
        super().__init__(f"Operation overflowed: {name}={value} exceeds u{bits}")


class NoMatchError(SenError):
    """Raised when an LP mint's authorities do not belong to any pool."""

    def __init__(self, mint_authority: str, freeze_authority: str):
        self.mint_authority = mint_authority
        self.freeze_authority = freeze_authority
        super().__init__(
            f"No pool matches mint authority {mint_authority} "
            f"and freeze authority {freeze_authority}"
        )


class PoolNotInitializedError(SenError):
    """Raised when trading or depositing against a pool that is not Initialized."""

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Pool is not initialized (state: {state})")


class InvalidAccountDataError(SenError):
    """Raised when account data cannot be deserialized."""

    def __init__(self, message: str):
        super().__init__(f"Invalid account data: {message}")


class InvalidAddressError(SenError):
    """Raised when an address cannot play the role it was given."""

    def __init__(self, address: str, reason: Optional[str] = None):
        self.address = address
        self.reason = reason
        message = f"Invalid address: {address}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class AccountNotFoundError(SenError):
    """Raised when an account is not found on-chain."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Account not found: {address}")
