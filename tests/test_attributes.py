import pytest

from charsheet5e.attributes import (
    ID_5E_STAT_ABILITY_SCORE_CHARISMA,
    ID_5E_STAT_ABILITY_SCORE_CONSTITUTION,
    ID_5E_STAT_ABILITY_SCORE_DEXTERITY,
    ID_5E_STAT_ABILITY_SCORE_INTELLIGENCE,
    ID_5E_STAT_ABILITY_SCORE_STRENGTH,
    ID_5E_STAT_ABILITY_SCORE_WISDOM,
    AttributeKind,
    Identifier,
    ValueAttribute,
    new_5e_character,
)


def test_of_int_is_signed():
    attr = ValueAttribute.of(-12)
    assert attr.kind is AttributeKind.INT64
    assert attr.value == -12


def test_of_float_is_float64():
    attr = ValueAttribute.of(2.5)
    assert attr.kind is AttributeKind.FLOAT64
    assert attr.value == 2.5


def test_of_bool_rejected():
    with pytest.raises(TypeError):
        ValueAttribute.of(True)


def test_of_string_rejected():
    with pytest.raises(TypeError):
        ValueAttribute.of("8")


def test_int64_range_checked():
    with pytest.raises(ValueError):
        ValueAttribute(AttributeKind.INT64, 2**63)


def test_uint64_rejects_negative():
    with pytest.raises(ValueError):
        ValueAttribute(AttributeKind.UINT64, -1)


def test_float64_converts_int():
    attr = ValueAttribute(AttributeKind.FLOAT64, 3)
    assert isinstance(attr.value, float)
    assert attr.value == 3


def test_identifier_display():
    assert str(Identifier("5e.ability_score.strength")) == "5e.ability_score.strength"
    names = {str(identifier) for identifier in new_5e_character().stats}
    assert "5e.ability_score.strength" in names
    assert "5e.ability_score.charisma" in names


def test_identifier_equality_and_hash():
    stats = {Identifier("5e.ability_score.wisdom"): 1}
    assert ID_5E_STAT_ABILITY_SCORE_WISDOM in stats
    assert Identifier("a") == Identifier("a")


def test_new_character_stats():
    character = new_5e_character()
    assert character.name == ""
    assert set(character.stats) == {
        ID_5E_STAT_ABILITY_SCORE_STRENGTH,
        ID_5E_STAT_ABILITY_SCORE_DEXTERITY,
        ID_5E_STAT_ABILITY_SCORE_CONSTITUTION,
        ID_5E_STAT_ABILITY_SCORE_INTELLIGENCE,
        ID_5E_STAT_ABILITY_SCORE_CHARISMA,
    }
    assert ID_5E_STAT_ABILITY_SCORE_WISDOM not in character.stats
    assert all(v == ValueAttribute(AttributeKind.UINT64, 8) for v in character.stats.values())


def test_new_characters_are_independent():
    first = new_5e_character()
    second = new_5e_character()
    first.stats[ID_5E_STAT_ABILITY_SCORE_STRENGTH] = ValueAttribute.of(15)
    assert second.stats[ID_5E_STAT_ABILITY_SCORE_STRENGTH].kind is AttributeKind.UINT64