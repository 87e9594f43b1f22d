import json

import pytest

from charsheet5e.character import (
    AbilityScore,
    AbilityScoreType,
    CharacterState,
    Condition,
    Level,
    Sense,
    Skill,
    SkillType,
    deserialize_character,
    new_character,
)
from charsheet5e.rules import proficiency_bonus_for


def test_new_character_ability_scores_follow_enum_order():
    character = new_character()
    assert [score.score_type for score in character.ability_scores] == list(AbilityScoreType)


def test_new_character_proficiency_matches_level():
    character = new_character()
    assert character.proficiency_bonus == proficiency_bonus_for(character.level)
    assert all(s.proficiency_bonus == character.proficiency_bonus for s in character.ability_scores)
    assert all(s.proficiency_bonus == character.proficiency_bonus for s in character.skills)


def test_new_character_level_sum_matches_overall_level():
    character = new_character()
    assert sum(entry.level for entry in character.levels) == character.level


def test_new_character_has_every_skill_once():
    character = new_character()
    assert [skill.skill_type for skill in character.skills] == list(SkillType)


@pytest.mark.parametrize(
    "skill_type, ability",
    [
        (SkillType.ATHLETICS, AbilityScoreType.STRENGTH),
        (SkillType.STEALTH, AbilityScoreType.DEXTERITY),
        (SkillType.ARCANA, AbilityScoreType.INTELLIGENCE),
        (SkillType.PERCEPTION, AbilityScoreType.WISDOM),
        (SkillType.PERSUASION, AbilityScoreType.CHARISMA),
    ],
)
def test_new_character_skill_abilities(skill_type, ability):
    character = new_character()
    skill = next(s for s in character.skills if s.skill_type == skill_type)
    assert skill.score_type == ability


def test_skill_display_names():
    character = new_character()
    names = {skill.skill_type: str(skill.skill_type) for skill in character.skills}
    assert names[SkillType.SLEIGHT_OF_HAND] == "Sleight Of Hand"
    assert names[SkillType.ANIMAL_HANDLING] == "Animal Handling"
    assert names[SkillType.STEALTH] == "Stealth"


def test_ability_score_from_type_defaults():
    score = AbilityScore.from_type(AbilityScoreType.WISDOM, 3)
    assert score.proficiency_bonus == 3
    assert score.score_type == AbilityScoreType.WISDOM
    assert score.score == 8
    assert not score.saving_proficiency and not score.saving_advantage


def test_ability_score_str():
    score = AbilityScore.from_type(AbilityScoreType.STRENGTH, 2)
    assert str(score) == f"Strength: {score.score}"


def test_skill_based_on_copies_ability_score():
    score = AbilityScore(4, AbilityScoreType.CHARISMA, 15)
    skill = Skill.based_on(SkillType.DECEPTION, score)
    assert (skill.proficiency_bonus, skill.score_type, skill.score) == (4, AbilityScoreType.CHARISMA, 15)
    assert skill.skill_type == SkillType.DECEPTION
    assert not (skill.proficiency or skill.expertise or skill.advantage)


def test_create_assigns_distinct_identifiers():
    first = Level.create("Wizard", 3)
    second = Level.create("Wizard", 3)
    assert first.uuid != second.uuid
    assert 0 <= first.uuid < 2**128
    assert (first.name, first.level) == ("Wizard", 3)


def test_sense_and_condition_create():
    sense = Sense.create("Darkvision", 60)
    condition = Condition.create(5)
    assert (sense.name, sense.distance) == ("Darkvision", 60)
    assert condition.speed_increase == 5
    assert sense.uuid < 2**128 and condition.uuid < 2**128


def test_serialize_round_trip():
    character = new_character()
    character.name = "Zoë"
    character.senses.append(Sense.create("Darkvision", 60))
    character.conditions.append(Condition.create(10))
    character.skills[0].proficiency = True
    restored = deserialize_character(character.serialize())
    assert isinstance(restored, CharacterState)
    assert restored == character


def test_serialize_keeps_large_identifiers():
    character = new_character()
    character.levels = [Level(2**128 - 1, "Fighter", 1)]
    restored = deserialize_character(character.serialize())
    assert restored.levels[0].uuid == 2**128 - 1


def test_serialize_uses_variant_names():
    document = json.loads(new_character().serialize())
    assert document["ability_scores"][0]["score_type"] == "Strength"
    sleight = next(s for s in document["skills"] if s["skill_type"] == SkillType.SLEIGHT_OF_HAND.value)
    assert sleight["score_type"] == "Dexterity"


def test_deserialize_ignores_unknown_fields():
    character = new_character()
    document = json.loads(character.serialize())
    document["unknown"] = [1, 2]
    assert deserialize_character(json.dumps(document)) == character


def test_deserialize_rejects_invalid_json():
    with pytest.raises(ValueError):
        deserialize_character("not json")


def test_deserialize_rejects_missing_field():
    document = json.loads(new_character().serialize())
    del document["hp"]
    with pytest.raises(ValueError):
        deserialize_character(json.dumps(document))


def test_deserialize_rejects_out_of_range_score():
    document = json.loads(new_character().serialize())
    document["ability_scores"][0]["score"] = 256
    with pytest.raises(ValueError):
        deserialize_character(json.dumps(document))


def test_deserialize_rejects_wrong_types():
    document = json.loads(new_character().serialize())
    document["name"] = 5
    with pytest.raises(ValueError):
        deserialize_character(json.dumps(document))
    document = json.loads(new_character().serialize())
    document["hp"] = True
    with pytest.raises(ValueError):
        deserialize_character(json.dumps(document))


def test_deserialize_rejects_unknown_variant():
    document = json.loads(new_character().serialize())
    document["skills"][0]["skill_type"] = "Juggling"
    with pytest.raises(ValueError):
        deserialize_character(json.dumps(document))