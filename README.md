# ammpool

`ammpool` models a two-token constant-product market maker (x · y = k) on top of a
small in-memory token ledger. Liquidity providers deposit both tokens and receive LP
tokens; traders swap one token for the other against the pool's vaults.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The ledger (`ammpool.accounts`)

- `Mint(decimals, supply=0)` is a token type. `decimals` must fit in 0–255 and
  `supply` in the unsigned 64-bit range.
  - `Mint.mint_to(destination, amount)` creates `amount` base units in a
    `TokenAccount` of that mint and raises the supply.
  - `Mint.burn(source, amount)` destroys base units held by `source` and lowers the
    supply.
- `TokenAccount(mint, amount=0, owner="")` holds a balance of one mint.
  `TokenAccount.transfer(destination, amount)` moves base units to another account
  of the same mint.
- `Pool(token_a_mint, token_b_mint, lp_mint, total_liquidity=0, fee_rate=0)` holds
  the three mints, the LP units issued so far and a fee rate (0–255). It creates its
  own vault accounts, `token_a_vault` and `token_b_vault`, owned by `"pool"`.

All amounts are integers in a mint's smallest unit and must lie between 0 and
2⁶⁴ − 1. A result that would leave that range raises `OverflowError`.

## Operations

Each operation checks that the user accounts belong to the pool's mints, and raises
`ValueError` if they do not. If any step fails, every account, mint and the pool
are put back as they were before the call.

The pool turns base units into human-scale values with each mint's decimals, does
the arithmetic in floating point, and truncates results back to whole units.

- `ammpool.liquidity.add_liquidity(pool, user_token_a, user_token_b, user_lp,
  amount_a, amount_b)` returns the LP base units minted.
  - The first deposit, while `total_liquidity` is 0, mints `sqrt(a · b)` LP tokens
    and deposits both amounts in full.
  - Later deposits are trimmed to the vaults' current ratio. LP tokens are minted in
    proportion to the share of the token A vault that is added.
- `ammpool.liquidity.remove_liquidity(pool, user_token_a, user_token_b, user_lp,
  lp_amount)` burns `lp_amount` LP units from `user_lp`. It pays out the matching
  share of both vaults and returns `(paid_a, paid_b)`.
- `ammpool.swap.swap(pool, user_token_a, user_token_b, is_a_to_b, amount)` moves
  `amount` of the input token into its vault. It pays out as much of the other token
  as keeps the product of the vault balances at `k`, and returns the units paid out.
  The A-to-B direction logs its figures at `DEBUG` level on the `ammpool.swap`
  logger.

## Example

```python
from ammpool.accounts import Mint, Pool, TokenAccount
from ammpool.liquidity import add_liquidity, remove_liquidity
from ammpool.swap import swap

token_a, token_b, lp = Mint(decimals=6), Mint(decimals=6), Mint(decimals=6)
pool = Pool(token_a, token_b, lp)

alice_a = TokenAccount(token_a, owner="alice")
alice_b = TokenAccount(token_b, owner="alice")
alice_lp = TokenAccount(lp, owner="alice")
token_a.mint_to(alice_a, 1_000_000_000)
token_b.mint_to(alice_b, 1_000_000_000)

minted = add_liquidity(pool, alice_a, alice_b, alice_lp, 100_000_000, 400_000_000)
# minted == 200_000_000

paid_out = swap(pool, alice_a, alice_b, True, 10_000_000)
# paid_out == 36_363_636

paid_a, paid_b = remove_liquidity(pool, alice_a, alice_b, alice_lp, 100_000_000)
```

## Errors

- `ammpool.errors.AmmError` is the base of the pool's own errors, each with a `code`
  and a `msg`:
  - `LowBalanceInUserTokenAATA` (6000): the user's token A account holds less than
    the amount asked for.
  - `LowBalanceInUserTokenBATA` (6001): the user's token B account holds less than
    the amount asked for.
- `ammpool.errors.InsufficientFundsError` is not an `AmmError`. It is raised when a
  transfer or burn asks for more than the source holds. It carries `available` and
  `requested`. For example, removing more LP units than the user holds raises it.
- `ValueError`, `TypeError` and `OverflowError` report mismatched mints, amounts that
  are not integers, and amounts outside the 64-bit range.

## What the package does not do

- It keeps everything in memory. There is no storage, no network and no command-line
  tool.
- It checks no signatures or account owners; `owner` is only a label.
- `fee_rate` is stored on the pool but no operation charges a fee.