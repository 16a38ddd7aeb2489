"""Errors raised by the pool instructions and the token ledger."""

from __future__ import annotations


class AmmError(Exception):
    """Base class for errors reported by the pool program."""

    code: int = 0
    msg: str = "AMM error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.msg)


class LowBalanceInUserTokenAATA(AmmError):
    """The user's token A account holds less than the requested amount."""

    code = 6000
    msg = "Low balance in user token A ata"


class LowBalanceInUserTokenBATA(AmmError):
    """The user's token B account holds less than the requested amount."""

    code = 6001
    msg = "Low balance in user token B ata"


class InsufficientFundsError(Exception):
    """A token account or mint cannot cover a transfer or burn."""

    def __init__(self, available: int, requested: int) -> None:
        self.available = available
        self.requested = requested
        super().__init__(
            f"insufficient funds: {available} available, {requested} requested"
        )