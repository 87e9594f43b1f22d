import pytest

from charsheet5e.rules import modifier, proficiency_bonus_for


def test_first_level_bonus():
    assert proficiency_bonus_for(1) == 2


@pytest.mark.parametrize("level", range(1, 20))
def test_bonus_grows_by_at_most_one_per_level(level):
    current = proficiency_bonus_for(level)
    following = proficiency_bonus_for(level + 1)
    assert current <= following <= current + 1


@pytest.mark.parametrize("tier", range(0, 5))
def test_bonus_changes_every_four_levels(tier):
    first = 4 * tier + 1
    values = {proficiency_bonus_for(level) for level in range(first, first + 4)}
    assert len(values) == 1
    assert proficiency_bonus_for(first + 4) == proficiency_bonus_for(first) + 1


def test_average_score_has_no_modifier():
    assert modifier(10, False, False, 0) == 0
    assert modifier(11, False, False, 0) == modifier(10, False, False, 0)


def test_below_average_score_is_negative():
    assert modifier(8, False, False, 0) == -1


@pytest.mark.parametrize("score", range(1, 29))
def test_two_points_raise_modifier_by_one(score):
    assert modifier(score + 2, False, False, 0) == modifier(score, False, False, 0) + 1


@pytest.mark.parametrize("bonus", [2, 3, 6])
def test_proficiency_adds_bonus(bonus):
    assert modifier(14, True, False, bonus) == modifier(14, False, False, bonus) + bonus


@pytest.mark.parametrize("bonus", [2, 4, 5])
def test_expertise_doubles_bonus(bonus):
    assert modifier(12, True, True, bonus) == modifier(12, False, False, bonus) + 2 * bonus


def test_expertise_without_proficiency_adds_nothing():
    assert modifier(16, False, True, 4) == modifier(16, False, False, 4)