"""The state of a 5th-edition player character and its JSON file format."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .rules import proficiency_bonus_for


class AbilityScoreType(Enum):
    """The six ability scores."""

    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    CONSTITUTION = "Constitution"
    INTELLIGENCE = "Intelligence"
    WISDOM = "Wisdom"
    CHARISMA = "Charisma"


class SkillType(Enum):
    """The eighteen skills; ``str()`` gives the name as shown to the user."""

    ATHLETICS = "Athletics"
    ACROBATICS = "Acrobatics"
    SLEIGHT_OF_HAND = "SleightOfHand"
    STEALTH = "Stealth"
    ARCANA = "Arcana"
    HISTORY = "History"
    INVESTIGATION = "Investigation"
    NATURE = "Nature"
    RELIGION = "Religion"
    ANIMAL_HANDLING = "AnimalHandling"
    INSIGHT = "Insight"
    MEDICINE = "Medicine"
    PERCEPTION = "Perception"
    SURVIVAL = "Survival"
    DECEPTION = "Deception"
    INTIMIDATION = "Intimidation"
    PERFORMANCE = "Performance"
    PERSUASION = "Persuasion"

    def __str__(self) -> str:
        return _SKILL_LABELS.get(self, self.value)


_SKILL_LABELS = {
    SkillType.SLEIGHT_OF_HAND: "Sleight Of Hand",
    SkillType.ANIMAL_HANDLING: "Animal Handling",
}

_SKILL_ABILITIES = (
    (SkillType.ATHLETICS, AbilityScoreType.STRENGTH),
    (SkillType.ACROBATICS, AbilityScoreType.DEXTERITY),
    (SkillType.SLEIGHT_OF_HAND, AbilityScoreType.DEXTERITY),
    (SkillType.STEALTH, AbilityScoreType.DEXTERITY),
    (SkillType.ARCANA, AbilityScoreType.INTELLIGENCE),
    (SkillType.HISTORY, AbilityScoreType.INTELLIGENCE),
    (SkillType.INVESTIGATION, AbilityScoreType.INTELLIGENCE),
    (SkillType.NATURE, AbilityScoreType.INTELLIGENCE),
    (SkillType.RELIGION, AbilityScoreType.INTELLIGENCE),
    (SkillType.ANIMAL_HANDLING, AbilityScoreType.WISDOM),
    (SkillType.INSIGHT, AbilityScoreType.WISDOM),
    (SkillType.MEDICINE, AbilityScoreType.WISDOM),
    (SkillType.PERCEPTION, AbilityScoreType.WISDOM),
    (SkillType.SURVIVAL, AbilityScoreType.WISDOM),
    (SkillType.DECEPTION, AbilityScoreType.CHARISMA),
    (SkillType.INTIMIDATION, AbilityScoreType.CHARISMA),
    (SkillType.PERFORMANCE, AbilityScoreType.CHARISMA),
    (SkillType.PERSUASION, AbilityScoreType.CHARISMA),
)


def _field(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        raise ValueError(f"expected a JSON object, found {type(obj).__name__}")
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _uint(obj: Any, key: str, bits: int) -> int:
    value = _field(obj, key)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise ValueError(f"field {key!r} is not a {bits}-bit unsigned integer: {value!r}")
    return value


def _bool(obj: Any, key: str) -> bool:
    value = _field(obj, key)
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} is not a boolean: {value!r}")
    return value


def _str(obj: Any, key: str) -> str:
    value = _field(obj, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} is not a string: {value!r}")
    return value


def _list(obj: Any, key: str) -> list[Any]:
    value = _field(obj, key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} is not a list: {value!r}")
    return value


def _enum(obj: Any, key: str, enum_cls: type[Enum]) -> Any:
    value = _field(obj, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} is not a variant name: {value!r}")
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"unknown {enum_cls.__name__} variant {value!r}") from None


@dataclass
class AbilityScore:
    """One ability score and its saving-throw settings."""

    proficiency_bonus: int
    score_type: AbilityScoreType
    score: int = 8
    saving_proficiency: bool = False
    saving_advantage: bool = False

    @classmethod
    def from_type(cls, score_type: AbilityScoreType, proficiency_bonus: int) -> AbilityScore:
        """Return a fresh score of the given type at the default value."""
        return cls(proficiency_bonus, score_type)

    def __str__(self) -> str:
        return f"{self.score_type.value}: {self.score}"

    def _to_json(self) -> dict[str, Any]:
        return {
            "proficiency_bonus": self.proficiency_bonus,
            "score_type": self.score_type.value,
            "score": self.score,
            "saving_proficiency": self.saving_proficiency,
            "saving_advantage": self.saving_advantage,
        }

    @classmethod
    def _from_json(cls, obj: Any) -> AbilityScore:
        return cls(
            proficiency_bonus=_uint(obj, "proficiency_bonus", 16),
            score_type=_enum(obj, "score_type", AbilityScoreType),
            score=_uint(obj, "score", 8),
            saving_proficiency=_bool(obj, "saving_proficiency"),
            saving_advantage=_bool(obj, "saving_advantage"),
        )


@dataclass
class Skill:
    """A skill, carrying a copy of the ability score it is based on."""

    proficiency_bonus: int
    score_type: AbilityScoreType
    score: int
    skill_type: SkillType
    proficiency: bool = False
    expertise: bool = False
    advantage: bool = False

    @classmethod
    def based_on(cls, skill_type: SkillType, ability_score: AbilityScore) -> Skill:
        """Return a skill that takes its score and bonus from ``ability_score``."""
        return cls(
            ability_score.proficiency_bonus,
            ability_score.score_type,
            ability_score.score,
            skill_type,
        )

    def _to_json(self) -> dict[str, Any]:
        return {
            "proficiency_bonus": self.proficiency_bonus,
            "score_type": self.score_type.value,
            "score": self.score,
            "skill_type": self.skill_type.value,
            "proficiency": self.proficiency,
            "expertise": self.expertise,
            "advantage": self.advantage,
        }

    @classmethod
    def _from_json(cls, obj: Any) -> Skill:
        return cls(
            proficiency_bonus=_uint(obj, "proficiency_bonus", 16),
            score_type=_enum(obj, "score_type", AbilityScoreType),
            score=_uint(obj, "score", 8),
            skill_type=_enum(obj, "skill_type", SkillType),
            proficiency=_bool(obj, "proficiency"),
            expertise=_bool(obj, "expertise"),
            advantage=_bool(obj, "advantage"),
        )


@dataclass
class Level:
    """Levels taken in one class."""

    uuid: int
    name: str
    level: int

    @classmethod
    def create(cls, name: str, level: int) -> Level:
        """Return a new entry with a fresh random identifier."""
        return cls(uuid.uuid4().int, name, level)

    def _to_json(self) -> dict[str, Any]:
        return {"uuid": self.uuid, "name": self.name, "level": self.level}

    @classmethod
    def _from_json(cls, obj: Any) -> Level:
        return cls(_uint(obj, "uuid", 128), _str(obj, "name"), _uint(obj, "level", 8))


@dataclass
class Sense:
    """A special sense and its range in feet."""

    uuid: int
    name: str
    distance: int

    @classmethod
    def create(cls, name: str, distance: int) -> Sense:
        """Return a new sense with a fresh random identifier."""
        return cls(uuid.uuid4().int, name, distance)

    def _to_json(self) -> dict[str, Any]:
        return {"uuid": self.uuid, "name": self.name, "distance": self.distance}

    @classmethod
    def _from_json(cls, obj: Any) -> Sense:
        return cls(_uint(obj, "uuid", 128), _str(obj, "name"), _uint(obj, "distance", 32))


@dataclass
class Condition:
    """A condition affecting the character, for now only through speed."""

    uuid: int
    speed_increase: int

    @classmethod
    def create(cls, speed_increase: int) -> Condition:
        """Return a new condition with a fresh random identifier."""
        return cls(uuid.uuid4().int, speed_increase)

    def _to_json(self) -> dict[str, Any]:
        return {"uuid": self.uuid, "speed_increase": self.speed_increase}

    @classmethod
    def _from_json(cls, obj: Any) -> Condition:
        return cls(_uint(obj, "uuid", 128), _uint(obj, "speed_increase", 32))


@dataclass
class CharacterState:
    """Everything recorded on a character sheet."""

    name: str
    race: str
    level: int
    levels: list[Level]
    proficiency_bonus: int
    ability_scores: list[AbilityScore]
    skills: list[Skill]
    hp: int
    hp_max: int
    temp_hp: int
    ac: int
    equip_armour: str
    equip_shield: str
    stealth_disadvantage: bool
    speed: int
    speed_fly: int
    speed_climb: int
    speed_swim: int
    senses: list[Sense]
    conditions: list[Condition]

    def serialize(self) -> str:
        """Return the character as a compact JSON document."""
        document = {
            "name": self.name,
            "race": self.race,
            "level": self.level,
            "levels": [entry._to_json() for entry in self.levels],
            "proficiency_bonus": self.proficiency_bonus,
            "ability_scores": [score._to_json() for score in self.ability_scores],
            "skills": [skill._to_json() for skill in self.skills],
            "hp": self.hp,
            "hp_max": self.hp_max,
            "temp_hp": self.temp_hp,
            "ac": self.ac,
            "equip_armour": self.equip_armour,
            "equip_shield": self.equip_shield,
            "stealth_disadvantage": self.stealth_disadvantage,
            "speed": self.speed,
            "speed_fly": self.speed_fly,
            "speed_climb": self.speed_climb,
            "speed_swim": self.speed_swim,
            "senses": [sense._to_json() for sense in self.senses],
            "conditions": [condition._to_json() for condition in self.conditions],
        }
        return json.dumps(document, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def _from_json(cls, obj: Any) -> CharacterState:
        return cls(
            name=_str(obj, "name"),
            race=_str(obj, "race"),
            level=_uint(obj, "level", 16),
            levels=[Level._from_json(item) for item in _list(obj, "levels")],
            proficiency_bonus=_uint(obj, "proficiency_bonus", 16),
            ability_scores=[AbilityScore._from_json(item) for item in _list(obj, "ability_scores")],
            skills=[Skill._from_json(item) for item in _list(obj, "skills")],
            hp=_uint(obj, "hp", 32),
            hp_max=_uint(obj, "hp_max", 32),
            temp_hp=_uint(obj, "temp_hp", 32),
            ac=_uint(obj, "ac", 32),
            equip_armour=_str(obj, "equip_armour"),
            equip_shield=_str(obj, "equip_shield"),
            stealth_disadvantage=_bool(obj, "stealth_disadvantage"),
            speed=_uint(obj, "speed", 32),
            speed_fly=_uint(obj, "speed_fly", 32),
            speed_climb=_uint(obj, "speed_climb", 32),
            speed_swim=_uint(obj, "speed_swim", 32),
            senses=[Sense._from_json(item) for item in _list(obj, "senses")],
            conditions=[Condition._from_json(item) for item in _list(obj, "conditions")],
        )


def new_character() -> CharacterState:
    """Return a blank level-1 character."""
    level = 1
    prof = proficiency_bonus_for(level)
    ability_scores = [AbilityScore.from_type(kind, prof) for kind in AbilityScoreType]
    by_type = {score.score_type: score for score in ability_scores}
    skills = [Skill.based_on(skill, by_type[ability]) for skill, ability in _SKILL_ABILITIES]
    return CharacterState(
        name="",
        race="",
        level=level,
        levels=[Level.create("", 1)],
        proficiency_bonus=prof,
        ability_scores=ability_scores,
        skills=skills,
        hp=0,
        hp_max=0,
        temp_hp=0,
        ac=10,
        equip_armour="",
        equip_shield="",
        stealth_disadvantage=False,
        speed=0,
        speed_fly=0,
        speed_climb=0,
        speed_swim=0,
        senses=[],
        conditions=[],
    )


def deserialize_character(serialized: str) -> CharacterState:
    """Read a character from its JSON document.

    Raises ValueError if the text is not valid JSON or does not describe a character.
    """
    return CharacterState._from_json(json.loads(serialized))