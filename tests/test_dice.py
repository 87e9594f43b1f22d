import pytest

from charsheet5e.dice import DiceExpr, DiceParseError, Roll, parse_dice


def test_dice_expr_parse():
    expr = "a d102"
    expected = DiceExpr(terms=(Roll(num_rolls=1, dice_sides=102),), expr_str=expr)
    assert parse_dice(expr) == expected


def test_prefixed_count():
    assert parse_dice("2d6").terms == (Roll(2, 6),)


def test_plus_prefixed_count():
    assert parse_dice("+3d8").terms == (Roll(3, 8),)


def test_missing_sides_default_to_one():
    assert parse_dice("4d ").terms == (Roll(4, 1),)


def test_several_rolls():
    assert parse_dice("d6 2d8").terms == (Roll(1, 6), Roll(2, 8))


def test_adjacent_rolls_do_not_share_digits():
    assert parse_dice("d6d8").terms == (Roll(1, 6), Roll(1, 8))


def test_trailing_d_is_not_a_roll():
    assert parse_dice("d").terms == ()


def test_d_before_letter_is_not_a_roll():
    assert parse_dice("dex").terms == ()


def test_expression_text_is_kept():
    assert parse_dice("1d20 + str").expr_str == "1d20 + str"


def test_unparseable_prefix_raises():
    with pytest.raises(DiceParseError):
        parse_dice("1-d6")


def test_prefix_overflow_raises():
    with pytest.raises(DiceParseError):
        parse_dice("99999999999d6")


def test_suffix_overflow_raises():
    with pytest.raises(DiceParseError):
        parse_dice("d99999999999")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_dice("x?d4")