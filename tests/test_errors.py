from ammpool.errors import (
    AmmError,
    InsufficientFundsError,
    LowBalanceInUserTokenAATA,
    LowBalanceInUserTokenBATA,
)


def test_low_balance_a_message_and_base_class():
    err = LowBalanceInUserTokenAATA()
    assert isinstance(err, AmmError)
    assert str(err) == "Low balance in user token A ata"


def test_low_balance_b_message():
    err = LowBalanceInUserTokenBATA()
    assert isinstance(err, AmmError)
    assert str(err) == "Low balance in user token B ata"


def test_low_balance_errors_have_distinct_messages():
    messages = [str(LowBalanceInUserTokenAATA()), str(LowBalanceInUserTokenBATA())]
    assert messages == [
        "Low balance in user token A ata",
        "Low balance in user token B ata",
    ]
    assert not issubclass(LowBalanceInUserTokenAATA, LowBalanceInUserTokenBATA)
    assert not issubclass(LowBalanceInUserTokenBATA, LowBalanceInUserTokenAATA)


def test_custom_message_overrides_default():
    err = LowBalanceInUserTokenAATA("custom text")
    assert str(err) == "custom text"


def test_insufficient_funds_keeps_amounts():
    err = InsufficientFundsError(5, 10)
    assert err.available == 5
    assert err.requested == 10
    assert "insufficient funds" in str(err)