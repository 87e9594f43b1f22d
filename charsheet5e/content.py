"""Game content sources: armour, feats and the collections that hold them."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, TypeVar, Union

from .character import AbilityScoreType
from .money import Money, parse_money

T = TypeVar("T")


class SourceCategory(Enum):
    """How official a content source is."""

    CORE = "Core"
    SUPPLEMENTS = "Supplements"
    HOMEBREW = "Homebrew"


@dataclass(frozen=True)
class Rarity:
    """Item rarity: one of the standard rarities or a custom one."""

    name: str
    custom: bool = False

    STANDARD: ClassVar[Rarity]
    COMMON: ClassVar[Rarity]
    UNCOMMON: ClassVar[Rarity]
    RARE: ClassVar[Rarity]
    VERY_RARE: ClassVar[Rarity]
    LEGENDARY: ClassVar[Rarity]


Rarity.STANDARD = Rarity("Standard")
Rarity.COMMON = Rarity("Common")
Rarity.UNCOMMON = Rarity("Uncommon")
Rarity.RARE = Rarity("Rare")
Rarity.VERY_RARE = Rarity("Very Rare")
Rarity.LEGENDARY = Rarity("Legendary")


@dataclass(frozen=True)
class ArmourCategory:
    """Kind of armour: one of the standard categories or a custom one."""

    name: str
    custom: bool = False

    NO_ARMOUR: ClassVar[ArmourCategory]
    LIGHT_ARMOUR: ClassVar[ArmourCategory]
    HEAVY_ARMOUR: ClassVar[ArmourCategory]
    SHIELD: ClassVar[ArmourCategory]
    SPELL: ClassVar[ArmourCategory]
    CLASS_FEATURE: ClassVar[ArmourCategory]


ArmourCategory.NO_ARMOUR = ArmourCategory("No Armor")
ArmourCategory.LIGHT_ARMOUR = ArmourCategory("Light Armor")
ArmourCategory.HEAVY_ARMOUR = ArmourCategory("Heavy Armor")
ArmourCategory.SHIELD = ArmourCategory("Shield")
ArmourCategory.SPELL = ArmourCategory("Spell")
ArmourCategory.CLASS_FEATURE = ArmourCategory("Class Feature")

_RARITIES = {r.name: r for r in (
    Rarity.STANDARD, Rarity.COMMON, Rarity.UNCOMMON, Rarity.RARE, Rarity.VERY_RARE, Rarity.LEGENDARY,
)}
_ARMOUR_CATEGORIES = {c.name: c for c in (
    ArmourCategory.NO_ARMOUR,
    ArmourCategory.LIGHT_ARMOUR,
    ArmourCategory.HEAVY_ARMOUR,
    ArmourCategory.SHIELD,
    ArmourCategory.SPELL,
    ArmourCategory.CLASS_FEATURE,
)}


@dataclass
class Armour:
    """A piece of armour, or anything else that sets armour class."""

    name: str
    category: ArmourCategory
    rarity: Rarity
    base_ac: int
    plus_mod: tuple[AbilityScoreType, ...] = ()
    """Ability scores whose modifiers are added to AC."""
    plus_mod_max: int | None = None
    """The most AC that ``plus_mod`` can add, if limited."""
    plus_flat_mod: int = 0
    cost: Money | None = None
    weight: int = 0
    """Weight in pounds."""
    stealth_disadvantage: bool = False


@dataclass
class Feat:
    """A feat and its prerequisite."""

    name: str
    prerequisite: str
    description: str


SourceContentItem = Union[Armour, Feat]


def display_name(item: SourceContentItem) -> str:
    """Return the name under which a content item is listed."""
    return item.name


class SourceContentType(Enum):
    """The kinds of content a source can hold."""

    ARMOUR = "Armour"
    FEAT = "Feat"

    def type_string(self) -> str:
        """Return the plural heading for this kind of content."""
        return "Armour" if self is SourceContentType.ARMOUR else "Feats"

    def singular_string(self) -> str:
        """Return the name of one item of this kind."""
        return "Armour" if self is SourceContentType.ARMOUR else "Feat"


@dataclass
class SourceContentCollection:
    """All the content of one kind from one source."""

    content_type: SourceContentType
    content: list[SourceContentItem] = field(default_factory=list)


@dataclass
class InternalSource:
    """A named source of content, such as a rulebook."""

    name: str
    category: SourceCategory
    content: list[SourceContentCollection] = field(default_factory=list)


def str_to_rarity(rar_str: str) -> Rarity:
    """Map a rarity name to a standard rarity, or a custom one if unknown."""
    return _RARITIES.get(rar_str) or Rarity(rar_str, custom=True)


def str_to_armour_category(cat_str: str) -> ArmourCategory:
    """Map a category name to a standard category, or a custom one if unknown."""
    return _ARMOUR_CATEGORIES.get(cat_str) or ArmourCategory(cat_str, custom=True)


class _RecordError(ValueError):
    """A content record does not have the expected shape."""


def _check(value: Any, kind: str, key: str) -> Any:
    if kind == "bool":
        ok = isinstance(value, bool)
    elif kind == "u8":
        ok = isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF
    else:
        ok = isinstance(value, str)
    if not ok:
        raise _RecordError(f"field {key!r} is not a valid {kind}: {value!r}")
    return value


def _required(record: dict[str, Any], key: str, kind: str) -> Any:
    if key not in record:
        raise _RecordError(f"missing field {key!r}")
    return _check(record[key], kind, key)


def _optional(record: dict[str, Any], key: str, kind: str) -> Any:
    value = record.get(key)
    return None if value is None else _check(value, kind, key)


def _defaulted(record: dict[str, Any], key: str, kind: str, default: T) -> T:
    return _check(record[key], kind, key) if key in record else default


def _as_record(record: Any) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise _RecordError(f"expected a JSON object, found {type(record).__name__}")
    return record


_PLUS_MOD_FLAGS = (
    ("plus_str_mod", AbilityScoreType.STRENGTH),
    ("plus_dex_mod", AbilityScoreType.DEXTERITY),
    ("plus_con_mod", AbilityScoreType.CONSTITUTION),
    ("plus_int_mod", AbilityScoreType.INTELLIGENCE),
    ("plus_wis_mod", AbilityScoreType.WISDOM),
    ("plus_cha_mod", AbilityScoreType.CHARISMA),
)


def armour_from_record(record: Any) -> Armour:
    """Build armour from one record of an armour data file.

    Raises ValueError if the record is missing a field or has one of the wrong type.
    """
    record = _as_record(record)
    name = _required(record, "name", "string")
    category = str_to_armour_category(_required(record, "category", "string"))
    rarity_str = _optional(record, "rarity", "string")
    base_ac = _required(record, "base_ac", "u8")
    plus_mod = tuple(
        ability for key, ability in _PLUS_MOD_FLAGS if _defaulted(record, key, "bool", False)
    )
    plus_max = _optional(record, "plus_max", "u8")
    plus_flat_mod = _defaulted(record, "plus_flat_mod", "u8", 0)
    cost_str = _optional(record, "cost", "string")
    _optional(record, "weight", "string")
    stealth = _required(record, "stealth_disadvantage", "bool")
    return Armour(
        name=name,
        category=category,
        rarity=Rarity.STANDARD if rarity_str is None else str_to_rarity(rarity_str),
        base_ac=base_ac,
        plus_mod=plus_mod,
        plus_mod_max=plus_max,
        plus_flat_mod=plus_flat_mod,
        cost=None if cost_str is None else parse_money(cost_str),
        weight=0,
        stealth_disadvantage=stealth,
    )


def feat_from_record(record: Any) -> Feat:
    """Build a feat from one record of a feat data file.

    Raises ValueError if the record is missing a field or has one of the wrong type.
    """
    record = _as_record(record)
    return Feat(
        name=_required(record, "name", "string"),
        prerequisite=_required(record, "prerequisite", "string"),
        description=_required(record, "desc", "string"),
    )


def _load_records(text: str, convert: Callable[[Any], T]) -> list[T]:
    try:
        records = json.loads(text)
        if not isinstance(records, list):
            return []
        return [convert(record) for record in records]
    except (json.JSONDecodeError, _RecordError):
        return []


def srd_source(armour_json: str, feats_json: str) -> InternalSource:
    """Build the System Reference Document source from its armour and feat data.

    A data file that cannot be read in full contributes no content.
    """
    armours = _load_records(armour_json, armour_from_record)
    feats = _load_records(feats_json, feat_from_record)
    return InternalSource(
        name="System Reference Document",
        category=SourceCategory.CORE,
        content=[
            SourceContentCollection(SourceContentType.ARMOUR, armours),
            SourceContentCollection(SourceContentType.FEAT, feats),
        ],
    )


def _empty(*types: SourceContentType) -> list[SourceContentCollection]:
    return [SourceContentCollection(content_type) for content_type in types]


def get_sources(srd: InternalSource) -> list[InternalSource]:
    """Return every available source: the SRD followed by the sample sources."""
    armour, feat = SourceContentType.ARMOUR, SourceContentType.FEAT
    return [copy.deepcopy(srd) for _ in range(6)] + [
        InternalSource("A source", SourceCategory.CORE, _empty(armour, feat)),
        InternalSource(
            "A very long source name that really goes on forever it's stupid",
            SourceCategory.CORE,
            _empty(armour, feat),
        ),
        InternalSource(
            "A very long source name that really goes on forever it's stupid 2: Electric Boogaloo",
            SourceCategory.SUPPLEMENTS,
            _empty(armour, feat),
        ),
        InternalSource(
            "Source with lots of armours",
            SourceCategory.SUPPLEMENTS,
            _empty(*([armour] * 6), feat),
        ),
        InternalSource("Source with like nothing", SourceCategory.SUPPLEMENTS, _empty(feat)),
        InternalSource("Source with like nothing", SourceCategory.SUPPLEMENTS, []),
    ]