"""Deposit into and withdraw from a pool in exchange for LP tokens."""

from __future__ import annotations

import math

from .accounts import (
    Pool,
    TokenAccount,
    _atomic,
    _check_u64,
    _checked_add,
    _fdiv,
    _to_u64,
)
from .errors import LowBalanceInUserTokenAATA, LowBalanceInUserTokenBATA


def _check_user_accounts(
    pool: Pool,
    user_token_a: TokenAccount,
    user_token_b: TokenAccount,
    user_lp: TokenAccount,
) -> None:
    if user_token_a.mint is not pool.token_a_mint:
        raise ValueError("user token A account does not hold the pool's token A")
    if user_token_b.mint is not pool.token_b_mint:
        raise ValueError("user token B account does not hold the pool's token B")
    if user_lp.mint is not pool.lp_mint:
        raise ValueError("user LP account does not hold the pool's LP token")


def add_liquidity(
    pool: Pool,
    user_token_a: TokenAccount,
    user_token_b: TokenAccount,
    user_lp: TokenAccount,
    amount_a: int,
    amount_b: int,
) -> int:
    """Deposit tokens A and B and return the LP base units minted.

    The first deposit mints the geometric mean of the two amounts; later
    deposits are trimmed to the pool's current ratio.
    """
    _check_u64(amount_a, "amount_a")
    _check_u64(amount_b, "amount_b")
    _check_user_accounts(pool, user_token_a, user_token_b, user_lp)
    if user_token_a.amount < amount_a:
        raise LowBalanceInUserTokenAATA()
    if user_token_b.amount < amount_b:
        raise LowBalanceInUserTokenBATA()

    scale_a = 10.0 ** pool.token_a_mint.decimals
    scale_b = 10.0 ** pool.token_b_mint.decimals
    scale_lp = 10.0 ** pool.lp_mint.decimals

    human_a = amount_a / scale_a
    human_b = amount_b / scale_b

    if pool.total_liquidity == 0:
        lp_minted = _to_u64(math.sqrt(human_a * human_b) * scale_lp)
        new_total = lp_minted
    else:
        vault_a = pool.token_a_vault.amount / scale_a
        vault_b = pool.token_b_vault.amount / scale_b
        ratio = _fdiv(vault_a, vault_b)
        possible_a = human_b * ratio
        possible_b = _fdiv(human_a, ratio)
        if possible_a <= human_a:
            human_a = possible_a
        else:
            human_b = possible_b
        total_human = pool.total_liquidity / scale_lp
        lp_minted = _to_u64(total_human * _fdiv(human_a, vault_a) * scale_lp)
        new_total = _checked_add(pool.total_liquidity, lp_minted)

    deposit_a = _to_u64(human_a * scale_a)
    deposit_b = _to_u64(human_b * scale_b)

    with _atomic(
        pool,
        pool.lp_mint,
        user_lp,
        user_token_a,
        user_token_b,
        pool.token_a_vault,
        pool.token_b_vault,
    ):
        pool.lp_mint.mint_to(user_lp, lp_minted)
        user_token_a.transfer(pool.token_a_vault, deposit_a)
        user_token_b.transfer(pool.token_b_vault, deposit_b)
        pool.total_liquidity = new_total
    return lp_minted


def remove_liquidity(
    pool: Pool,
    user_token_a: TokenAccount,
    user_token_b: TokenAccount,
    user_lp: TokenAccount,
    lp_amount: int,
) -> tuple[int, int]:
    """Burn LP tokens and return the base units of A and B paid out."""
    _check_u64(lp_amount, "lp_amount")
    _check_user_accounts(pool, user_token_a, user_token_b, user_lp)

    share = _fdiv(float(lp_amount), float(pool.total_liquidity))
    scale_a = 10.0 ** pool.token_a_mint.decimals
    scale_b = 10.0 ** pool.token_b_mint.decimals

    total_a = pool.token_a_vault.amount / scale_a
    total_b = pool.token_b_vault.amount / scale_b
    withdraw_a = _to_u64(total_a * share * scale_a)
    withdraw_b = _to_u64(total_b * share * scale_b)

    with _atomic(
        pool,
        pool.lp_mint,
        user_lp,
        user_token_a,
        user_token_b,
        pool.token_a_vault,
        pool.token_b_vault,
    ):
        pool.lp_mint.burn(user_lp, lp_amount)
        pool.token_a_vault.transfer(user_token_a, withdraw_a)
        pool.token_b_vault.transfer(user_token_b, withdraw_b)
        if lp_amount > pool.total_liquidity:
            raise OverflowError("LP amount exceeds the pool's total liquidity")
        pool.total_liquidity -= lp_amount
    return withdraw_a, withdraw_b