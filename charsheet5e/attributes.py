"""Typed stat values keyed by identifiers, and the character that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_U64_MAX = (1 << 64) - 1


class AttributeKind(Enum):
    """The numeric type a value attribute holds."""

    INT64 = "Int64"
    UINT64 = "UInt64"
    FLOAT64 = "Float64"


@dataclass(frozen=True)
class ValueAttribute:
    """A numeric value tagged with the kind of number it is."""

    kind: AttributeKind
    value: int | float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool):
            raise TypeError("a value attribute cannot hold a boolean")
        if self.kind is AttributeKind.FLOAT64:
            if not isinstance(self.value, (int, float)):
                raise TypeError(f"expected a number, found {type(self.value).__name__}")
            object.__setattr__(self, "value", float(self.value))
            return
        if not isinstance(self.value, int):
            raise TypeError(f"expected an integer, found {type(self.value).__name__}")
        low, high = (_I64_MIN, _I64_MAX) if self.kind is AttributeKind.INT64 else (0, _U64_MAX)
        if not low <= self.value <= high:
            raise ValueError(f"{self.value} is out of range for {self.kind.value}")

    @classmethod
    def of(cls, value: int | float) -> ValueAttribute:
        """Wrap an int as a signed 64-bit value or a float as a 64-bit float."""
        if isinstance(value, bool):
            raise TypeError("a value attribute cannot hold a boolean")
        if isinstance(value, int):
            return cls(AttributeKind.INT64, value)
        if isinstance(value, float):
            return cls(AttributeKind.FLOAT64, value)
        raise TypeError(f"cannot make a value attribute from {type(value).__name__}")


@dataclass(frozen=True)
class Identifier:
    """A dotted name that identifies a stat, such as ``5e.ability_score.strength``."""

    id: str

    def __str__(self) -> str:
        return self.id


ID_5E_STAT_ABILITY_SCORE_STRENGTH = Identifier("5e.ability_score.strength")
ID_5E_STAT_ABILITY_SCORE_DEXTERITY = Identifier("5e.ability_score.dexterity")
ID_5E_STAT_ABILITY_SCORE_CONSTITUTION = Identifier("5e.ability_score.constitution")
ID_5E_STAT_ABILITY_SCORE_INTELLIGENCE = Identifier("5e.ability_score.intelligence")
ID_5E_STAT_ABILITY_SCORE_WISDOM = Identifier("5e.ability_score.wisdom")
ID_5E_STAT_ABILITY_SCORE_CHARISMA = Identifier("5e.ability_score.charisma")


@dataclass
class PlayerCharacter:
    """A character whose stats are stored by identifier."""

    name: str = ""
    stats: dict[Identifier, ValueAttribute] = field(default_factory=dict)


def new_5e_character() -> PlayerCharacter:
    """Return a character with the starting ability scores set."""
    start = ValueAttribute(AttributeKind.UINT64, 8)
    return PlayerCharacter(
        name="",
        stats={
            ID_5E_STAT_ABILITY_SCORE_STRENGTH: start,
            ID_5E_STAT_ABILITY_SCORE_DEXTERITY: start,
            ID_5E_STAT_ABILITY_SCORE_CONSTITUTION: start,
            ID_5E_STAT_ABILITY_SCORE_INTELLIGENCE: start,
            ID_5E_STAT_ABILITY_SCORE_CHARISMA: start,
        },
    )