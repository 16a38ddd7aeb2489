import pytest

from ammpool.accounts import Mint, Pool, TokenAccount
from ammpool.errors import (
    InsufficientFundsError,
    LowBalanceInUserTokenAATA,
    LowBalanceInUserTokenBATA,
)
from ammpool.liquidity import add_liquidity, remove_liquidity

START = 100_000_000


@pytest.fixture
def pool():
    return Pool(Mint(6), Mint(6), Mint(6))


@pytest.fixture
def user(pool):
    a = TokenAccount(pool.token_a_mint, owner="alice")
    b = TokenAccount(pool.token_b_mint, owner="alice")
    lp = TokenAccount(pool.lp_mint, owner="alice")
    pool.token_a_mint.mint_to(a, START)
    pool.token_b_mint.mint_to(b, START)
    return a, b, lp


def _state(pool, user):
    a, b, lp = user
    return (
        a.amount,
        b.amount,
        lp.amount,
        pool.token_a_vault.amount,
        pool.token_b_vault.amount,
        pool.total_liquidity,
        pool.lp_mint.supply,
    )


def test_first_deposit_mints_geometric_mean(pool, user):
    a, b, lp = user
    minted = add_liquidity(pool, a, b, lp, 4_000_000, 9_000_000)
    assert minted == 6_000_000
    assert lp.amount == minted == pool.total_liquidity == pool.lp_mint.supply
    assert pool.token_a_vault.amount == 4_000_000
    assert pool.token_b_vault.amount == 9_000_000


def test_first_deposit_conserves_tokens(pool, user):
    a, b, lp = user
    add_liquidity(pool, a, b, lp, 1_500_000, 2_500_000)
    assert a.amount + pool.token_a_vault.amount == START
    assert b.amount + pool.token_b_vault.amount == START


def test_second_deposit_trims_b_to_pool_ratio(pool, user):
    a, b, lp = user
    add_liquidity(pool, a, b, lp, 4_000_000, 9_000_000)
    add_liquidity(pool, a, b, lp, 2_000_000, 50_000_000)
    vault_a = pool.token_a_vault.amount
    vault_b = pool.token_b_vault.amount
    assert vault_a / vault_b == pytest.approx(4 / 9, rel=1e-6)
    assert b.amount > START - 9_000_000 - 50_000_000
    assert b.amount + vault_b == START
    assert lp.amount == pool.total_liquidity == pool.lp_mint.supply


def test_second_deposit_trims_a_to_pool_ratio(pool, user):
    a, b, lp = user
    add_liquidity(pool, a, b, lp, 4_000_000, 9_000_000)
    add_liquidity(pool, a, b, lp, 40_000_000, 9_000_000)
    vault_a = pool.token_a_vault.amount
    vault_b = pool.token_b_vault.amount
    assert vault_a < 4_000_000 + 40_000_000
    assert vault_a / vault_b == pytest.approx(4 / 9, rel=1e-6)
    assert a.amount + vault_a == START
    assert lp.amount == pool.total_liquidity


def test_low_balance_a(pool, user):
    a, b, lp = user
    before = _state(pool, user)
    with pytest.raises(LowBalanceInUserTokenAATA):
        add_liquidity(pool, a, b, lp, START + 1, 1_000)
    assert _state(pool, user) == before


def test_low_balance_b(pool, user):
    a, b, lp = user
    before = _state(pool, user)
    with pytest.raises(LowBalanceInUserTokenBATA):
        add_liquidity(pool, a, b, lp, 1_000, START + 1)
    assert _state(pool, user) == before


def test_wrong_mint_rejected(pool, user):
    a, b, lp = user
    with pytest.raises(ValueError):
        add_liquidity(pool, b, a, lp, 1_000, 1_000)
    assert pool.total_liquidity == 0


def test_negative_amount_rejected(pool, user):
    a, b, lp = user
    with pytest.raises(ValueError):
        add_liquidity(pool, a, b, lp, -1, 1_000)
    assert a.amount == START


def test_remove_everything_round_trips(pool, user):
    a, b, lp = user
    add_liquidity(pool, a, b, lp, 4_000_000, 9_000_000)
    withdrawn = remove_liquidity(pool, a, b, lp, lp.amount)
    assert withdrawn == (4_000_000, 9_000_000)
    assert (a.amount, b.amount) == (START, START)
    assert pool.total_liquidity == lp.amount == pool.lp_mint.supply == 0


def test_remove_half_splits_vaults(pool, user):
    a, b, lp = user
    add_liquidity(pool, a, b, lp, 4_000_000, 9_000_000)
    withdrawn_a, withdrawn_b = remove_liquidity(pool, a, b, lp, lp.amount // 2)
    assert withdrawn_a == pool.token_a_vault.amount
    assert withdrawn_b == pool.token_b_vault.amount
    assert lp.amount == pool.total_liquidity


def test_remove_more_than_held_rolls_back(pool, user):
    a, b, lp = user
    add_liquidity(pool, a, b, lp, 4_000_000, 9_000_000)
    before = _state(pool, user)
    with pytest.raises(InsufficientFundsError):
        remove_liquidity(pool, a, b, lp, lp.amount + 1)
    assert _state(pool, user) == before