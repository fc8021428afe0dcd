import pytest

from qstars.coin import Coin, Coins, parse_coin, parse_coins
from qstars.sdkint import Int


def c(denom, amount):
    return Coin.of(denom, amount)


@pytest.mark.parametrize(
    "coin, expected",
    [(c("A", 1), True), (c("A", 0), False), (c("a", -1), False)],
)
def test_is_positive_coin(coin, expected):
    assert coin.is_positive() is expected


@pytest.mark.parametrize(
    "coin, expected",
    [(c("A", 1), True), (c("A", 0), True), (c("a", -1), False)],
)
def test_is_not_negative_coin(coin, expected):
    assert coin.is_not_negative() is expected


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (c("A", 1), c("A", 1), True),
        (c("A", 1), c("a", 1), False),
        (c("a", 1), c("b", 1), False),
        (c("steak", 1), c("steak", 10), True),
        (c("steak", -11), c("steak", 10), True),
    ],
)
def test_same_denom_as(one, two, expected):
    assert one.same_denom_as(two) is expected


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (c("A", 1), c("A", 1), True),
        (c("A", 2), c("A", 1), True),
        (c("A", -1), c("A", 5), False),
        (c("a", 1), c("b", 1), False),
    ],
)
def test_is_gte_coin(one, two, expected):
    assert one.is_gte(two) is expected


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (c("A", 1), c("A", 1), True),
        (c("A", 1), c("a", 1), False),
        (c("a", 1), c("b", 1), False),
        (c("steak", 1), c("steak", 10), False),
        (c("steak", -11), c("steak", 10), False),
    ],
)
def test_is_equal_coin(one, two, expected):
    assert one.is_equal(two) is expected


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (c("A", 1), c("A", 1), c("A", 2)),
        (c("A", 1), c("B", 1), c("A", 1)),
        (c("asdf", -4), c("asdf", 5), c("asdf", 1)),
    ],
)
def test_plus_coin(one, two, expected):
    assert one.plus(two) == expected


def test_plus_coin_to_zero():
    assert c("asdf", -1).plus(c("asdf", 1)).amount.int64() == 0


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (c("A", 1), c("B", 1), c("A", 1)),
        (c("asdf", -4), c("asdf", 5), c("asdf", -9)),
        (c("asdf", 10), c("asdf", 1), c("asdf", 9)),
    ],
)
def test_minus_coin(one, two, expected):
    assert one.minus(two) == expected


def test_minus_coin_to_zero():
    assert c("A", 1).minus(c("A", 1)).amount.int64() == 0


def test_coin_string():
    assert str(c("foo", 5)) == "5foo"
    assert str(Coins([c("A", 1), c("B", 2)])) == "1A,2B"
    assert str(Coins()) == ""


@pytest.mark.parametrize(
    "coins, expected",
    [
        (Coins(), True),
        (Coins([c("A", 0)]), True),
        (Coins([c("A", 0), c("B", 0)]), True),
        (Coins([c("A", 1)]), False),
        (Coins([c("A", 0), c("B", 1)]), False),
    ],
)
def test_is_zero_coins(coins, expected):
    assert coins.is_zero() is expected


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (Coins(), Coins(), True),
        (Coins([c("A", 0)]), Coins([c("A", 0)]), True),
        (Coins([c("A", 0), c("B", 1)]), Coins([c("A", 0), c("B", 1)]), True),
        (Coins([c("A", 0)]), Coins([c("B", 0)]), False),
        (Coins([c("A", 0)]), Coins([c("A", 1)]), False),
        (Coins([c("A", 0)]), Coins([c("A", 0), c("B", 1)]), False),
        (Coins([c("A", 0), c("B", 1)]), Coins([c("B", 1), c("A", 0)]), False),
    ],
)
def test_equal_coins(one, two, expected):
    assert one.is_equal(two) is expected


def test_coins():
    good = Coins([c("GAS", 1), c("MINERAL", 1), c("TREE", 1)])
    neg = good.negative()
    total = good.plus(neg)
    empty = Coins([c("GOLD", 0)])
    null = Coins()
    bad_sort1 = Coins([c("TREE", 1), c("GAS", 1), c("MINERAL", 1)])
    bad_sort2 = Coins([c("GAS", 1), c("TREE", 1), c("MINERAL", 1)])
    bad_amt = Coins([c("GAS", 1), c("TREE", 0), c("MINERAL", 1)])
    dup = Coins([c("GAS", 1), c("GAS", 1), c("MINERAL", 1)])

    assert good.is_valid()
    assert good.is_positive()
    assert not null.is_positive()
    assert good.is_gte(empty)
    assert not neg.is_positive()
    assert len(total) == 0
    assert not bad_sort1.is_valid()
    assert not bad_sort2.is_valid()
    assert not bad_amt.is_valid()
    assert not dup.is_valid()


@pytest.mark.parametrize(
    "one, two, expected",
    [
        (
            Coins([c("A", 1), c("B", 1)]),
            Coins([c("A", 1), c("B", 1)]),
            Coins([c("A", 2), c("B", 2)]),
        ),
        (Coins([c("A", 0), c("B", 1)]), Coins([c("A", 0), c("B", 0)]), Coins([c("B", 1)])),
        (Coins([c("A", 0), c("B", 0)]), Coins([c("A", 0), c("B", 0)]), Coins()),
        (Coins([c("A", 1), c("B", 0)]), Coins([c("A", -1), c("B", 0)]), Coins()),
        (Coins([c("A", -1), c("B", 0)]), Coins([c("A", 0), c("B", 0)]), Coins([c("A", -1)])),
    ],
)
def test_plus_coins(one, two, expected):
    result = one.plus(two)
    assert result.is_valid()
    assert result == expected


def test_minus_coins():
    a = Coins([c("A", 5), c("B", 3)])
    b = Coins([c("A", 2), c("B", 3)])
    assert a.minus(b) == Coins([c("A", 3)])
    assert not b.is_gte(a)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", Coins()),
        ("1foo", Coins([c("foo", 1)])),
        ("10bar", Coins([c("bar", 10)])),
        ("99bar,1foo", Coins([c("bar", 99), c("foo", 1)])),
        ("98 bar , 1 foo  ", Coins([c("bar", 98), c("foo", 1)])),
        ("  55\t \t bling\n", Coins([c("bling", 55)])),
        ("2foo, 97 bar", Coins([c("bar", 97), c("foo", 2)])),
    ],
)
def test_parse_valid(text, expected):
    assert parse_coins(text) == expected


@pytest.mark.parametrize(
    "text",
    ["5 mycoin,", "2 3foo, 97 bar", "11me coin, 12you coin", "1.2btc", "5foo-bar"],
)
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_coins(text)


def test_parse_duplicate_is_invalid():
    with pytest.raises(ValueError):
        parse_coins("1foo,2foo")


def test_parse_coin_amount_too_large():
    with pytest.raises(ValueError):
        parse_coin("99999999999999999999foo")


def test_parse_coin_single():
    assert parse_coin(" 7 qos ") == Coin("qos", Int(7))


_GOOD = [("GAS", 1), ("MINERAL", 1), ("TREE", 1)]
_EMPTY = [("GOLD", 0)]
_BAD_SORT1 = [("TREE", 1), ("GAS", 1), ("MINERAL", 1)]
_BAD_SORT2 = [("GAS", 1), ("TREE", 1), ("MINERAL", 1)]
_BAD_AMT = [("GAS", 1), ("TREE", 0), ("MINERAL", 1)]
_DUP = [("GAS", 1), ("GAS", 1), ("MINERAL", 1)]


@pytest.mark.parametrize(
    "entries, before, after",
    [
        (_GOOD, True, True),
        (_EMPTY, False, False),
        (_BAD_SORT1, False, True),
        (_BAD_SORT2, False, True),
        (_BAD_AMT, False, False),
        (_DUP, False, False),
    ],
)
def test_sort_coins(entries, before, after):
    coins = Coins(Coin.of(denom, amount) for denom, amount in entries)
    assert coins.is_valid() is before
    returned = coins.sort()
    assert returned is coins
    assert coins.is_valid() is after
    assert [coin.denom for coin in coins] == sorted(denom for denom, _ in entries)


@pytest.mark.parametrize(
    "coins, empty_, space, gas, mineral, tree",
    [
        (Coins(), 0, 0, 0, 0, 0),
        (Coins([c("", 0)]), 0, 0, 0, 0, 0),
        (Coins([c(" ", 0)]), 0, 0, 0, 0, 0),
        (Coins([c("GOLD", 0)]), 0, 0, 0, 0, 0),
        (Coins([c("GAS", 1), c("MINERAL", 1), c("TREE", 1)]), 0, 0, 1, 1, 1),
        (Coins([c("MINERAL", 1), c("TREE", 1)]), 0, 0, 0, 1, 1),
        (Coins([c("", 6)]), 6, 0, 0, 0, 0),
        (Coins([c(" ", 7)]), 0, 7, 0, 0, 0),
        (Coins([c("GAS", 8)]), 0, 0, 8, 0, 0),
    ],
)
def test_amount_of(coins, empty_, space, gas, mineral, tree):
    assert coins.amount_of("") == Int(empty_)
    assert coins.amount_of(" ") == Int(space)
    assert coins.amount_of("GAS") == Int(gas)
    assert coins.amount_of("MINERAL") == Int(mineral)
    assert coins.amount_of("TREE") == Int(tree)