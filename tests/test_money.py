import pytest

from charsheet5e.money import Money, parse_money


def test_default_is_empty():
    assert Money() == Money(0, 0, 0, 0, 0)


def test_empty_string():
    assert parse_money("") == Money()


def test_gold_with_space():
    assert parse_money("100 gp") == Money(gp=100)


def test_gold_without_space():
    assert parse_money("100gp") == Money(gp=100)


@pytest.mark.parametrize("coin", ["cp", "sp", "ep", "gp", "pp"])
def test_each_denomination(coin):
    assert parse_money(f"7 {coin}") == Money(**{coin: 7})


def test_several_denominations():
    assert parse_money("5 gp, 3 sp") == Money(gp=5, sp=3)


def test_number_without_coin_sets_nothing():
    assert parse_money("100") == Money()


def test_unknown_coin_letter_sets_nothing():
    assert parse_money("12 xp") == Money()


def test_coin_without_number_reuses_last_number():
    assert parse_money("10 gp sp") == Money(gp=10, sp=10)


def test_largest_amount():
    largest = 2**64 - 1
    assert parse_money(f"{largest} pp") == Money(pp=largest)


def test_overflow_raises():
    with pytest.raises(ValueError):
        parse_money(f"{2**64} gp")