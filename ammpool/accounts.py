"""Token ledger objects: mints, token accounts and the pool state."""

from __future__ import annotations

import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from .errors import InsufficientFundsError

U64_MAX = 2**64 - 1
U8_MAX = 255


def _check_u64(value: int, name: str = "amount") -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be between 0 and {U64_MAX}, got {value}")


def _check_u8(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U8_MAX:
        raise ValueError(f"{name} must be between 0 and {U8_MAX}, got {value}")


def _checked_add(a: int, b: int) -> int:
    total = a + b
    if total > U64_MAX:
        raise OverflowError(f"{a} + {b} exceeds the u64 range")
    return total


def _to_u64(value: float) -> int:
    """Convert a float to u64 the saturating, truncating way."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= 2.0**64:
        return U64_MAX
    return int(value)


def _fdiv(a: float, b: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@contextmanager
def _atomic(*objects: object) -> Iterator[None]:
    """Restore the state of every object if the block raises."""
    saved = [(obj, dict(vars(obj))) for obj in objects]
    try:
        yield
    except BaseException:
        for obj, state in saved:
            vars(obj).clear()
            vars(obj).update(state)
        raise


@dataclass(eq=False)
class Mint:
    """A token mint with a fixed number of decimals and a running supply."""

    decimals: int
    supply: int = 0

    def __post_init__(self) -> None:
        _check_u8(self.decimals, "decimals")
        _check_u64(self.supply, "supply")

    def mint_to(self, destination: TokenAccount, amount: int) -> None:
        """Create ``amount`` new base units in ``destination``."""
        _check_u64(amount)
        if destination.mint is not self:
            raise ValueError("destination account belongs to another mint")
        new_supply = _checked_add(self.supply, amount)
        new_balance = _checked_add(destination.amount, amount)
        self.supply = new_supply
        destination.amount = new_balance

    def burn(self, source: TokenAccount, amount: int) -> None:
        """Destroy ``amount`` base units held by ``source``."""
        _check_u64(amount)
        if source.mint is not self:
            raise ValueError("source account belongs to another mint")
        if source.amount < amount:
            raise InsufficientFundsError(source.amount, amount)
        source.amount -= amount
        self.supply -= amount


@dataclass(eq=False)
class TokenAccount:
    """A balance of one mint's tokens."""

    mint: Mint
    amount: int = 0
    owner: str = ""

    def __post_init__(self) -> None:
        _check_u64(self.amount)

    def transfer(self, destination: TokenAccount, amount: int) -> None:
        """Move ``amount`` base units to ``destination``."""
        _check_u64(amount)
        if destination.mint is not self.mint:
            raise ValueError("cannot transfer between accounts of different mints")
        if self.amount < amount:
            raise InsufficientFundsError(self.amount, amount)
        if destination is self:
            return
        new_balance = _checked_add(destination.amount, amount)
        self.amount -= amount
        destination.amount = new_balance


@dataclass(eq=False)
class Pool:
    """State of a two-token constant-product pool and its vaults."""

    token_a_mint: Mint
    token_b_mint: Mint
    lp_mint: Mint
    total_liquidity: int = 0
    fee_rate: int = 0
    token_a_vault: TokenAccount = field(init=False)
    token_b_vault: TokenAccount = field(init=False)

    def __post_init__(self) -> None:
        _check_u64(self.total_liquidity, "total_liquidity")
        _check_u8(self.fee_rate, "fee_rate")
        self.token_a_vault = TokenAccount(self.token_a_mint, owner="pool")
        self.token_b_vault = TokenAccount(self.token_b_mint, owner="pool")