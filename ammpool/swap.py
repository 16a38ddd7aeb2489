"""Constant-product swaps between the two pool tokens."""

from __future__ import annotations

import logging

from .accounts import Pool, TokenAccount, _atomic, _check_u64, _fdiv, _to_u64
from .errors import LowBalanceInUserTokenAATA, LowBalanceInUserTokenBATA

logger = logging.getLogger(__name__)


def swap(
    pool: Pool,
    user_token_a: TokenAccount,
    user_token_b: TokenAccount,
    is_a_to_b: bool,
    amount: int,
) -> int:
    """Swap ``amount`` base units in one direction; return the units paid out."""
    _check_u64(amount)
    if user_token_a.mint is not pool.token_a_mint:
        raise ValueError("user token A account does not hold the pool's token A")
    if user_token_b.mint is not pool.token_b_mint:
        raise ValueError("user token B account does not hold the pool's token B")

    scale_a = 10.0 ** pool.token_a_mint.decimals
    scale_b = 10.0 ** pool.token_b_mint.decimals
    supply_a = pool.token_a_vault.amount / scale_a
    supply_b = pool.token_b_vault.amount / scale_b
    k = supply_a * supply_b

    if is_a_to_b:
        if user_token_a.amount < amount:
            raise LowBalanceInUserTokenAATA()
        amount_in = amount / scale_a
        amount_out = _to_u64((supply_b - _fdiv(k, supply_a + amount_in)) * scale_b)
        logger.debug(
            "Amount a:%s, supply b:%s, supply a:%s, k:%s",
            amount_in,
            supply_b,
            supply_a,
            k,
        )
        logger.debug("Amount b to be added in %s", amount_out)
        source, vault_in, vault_out, destination = (
            user_token_a,
            pool.token_a_vault,
            pool.token_b_vault,
            user_token_b,
        )
    else:
        if user_token_b.amount < amount:
            raise LowBalanceInUserTokenBATA()
        amount_in = amount / scale_b
        amount_out = _to_u64((supply_a - _fdiv(k, supply_b + amount_in)) * scale_a)
        source, vault_in, vault_out, destination = (
            user_token_b,
            pool.token_b_vault,
            pool.token_a_vault,
            user_token_a,
        )

    with _atomic(source, vault_in, vault_out, destination):
        source.transfer(vault_in, amount)
        vault_out.transfer(destination, amount_out)
    return amount_out