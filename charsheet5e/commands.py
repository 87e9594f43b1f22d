"""Actions that change the application state in response to user commands."""

from __future__ import annotations

import logging
from pathlib import Path

from .app_state import AppData, NavState
from .character import AbilityScoreType, deserialize_character
from .rules import proficiency_bonus_for

_log = logging.getLogger(__name__)


class Delegate:
    """Saves and opens character files, remembering where the last one lives."""

    def __init__(self) -> None:
        self.save_path: Path | None = None

    def _write(self, data: AppData) -> None:
        assert self.save_path is not None
        self.save_path.write_text(data.character.serialize() + "\n", encoding="utf-8")

    def save_as(self, data: AppData, path: str | Path) -> None:
        """Write the character to ``path`` and remember it for later saves."""
        self.save_path = Path(path)
        _log.info("Saved file as: %s", self.save_path)
        self._write(data)

    def save(self, data: AppData) -> bool:
        """Write the character to the remembered path.

        Returns False, writing nothing, when no path is known yet; the caller
        should then ask for one and use ``save_as``.
        """
        if self.save_path is None:
            return False
        _log.info("Saved file to: %s", self.save_path)
        self._write(data)
        return True

    def open(self, data: AppData, path: str | Path) -> None:
        """Load the character stored at ``path`` and remember the path.

        Raises OSError if the file cannot be read and ValueError if it does not
        hold a character.
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        self.save_path = path
        data.character = deserialize_character(text)


def set_proficiency_bonus(data: AppData, bonus: int) -> None:
    """Set the proficiency bonus on the character and every score and skill."""
    character = data.character
    character.proficiency_bonus = bonus
    for score in character.ability_scores:
        score.proficiency_bonus = bonus
    for skill in character.skills:
        skill.proficiency_bonus = bonus


def recalc_overall_level(data: AppData) -> None:
    """Total the class levels and update the proficiency bonus to match."""
    data.character.level = sum(entry.level for entry in data.character.levels)
    set_proficiency_bonus(data, proficiency_bonus_for(data.character.level))


def _remove_by_uuid(items: list, uuid: int) -> None:
    index = next((i for i, item in enumerate(items) if item.uuid == uuid), None)
    if index is not None:
        del items[index]


def delete_level(data: AppData, uuid: int) -> None:
    """Remove the class level with ``uuid``, if present, and recalculate the level."""
    _remove_by_uuid(data.character.levels, uuid)
    recalc_overall_level(data)


def set_ability_score(data: AppData, score_type: AbilityScoreType, score: int) -> None:
    """Set an ability score and the copy of it held by every skill based on it."""
    for ability in data.character.ability_scores:
        if ability.score_type == score_type:
            ability.score = score
    for skill in data.character.skills:
        if skill.score_type == score_type:
            skill.score = score


def delete_sense(data: AppData, uuid: int) -> None:
    """Remove the sense with ``uuid``, if present."""
    _remove_by_uuid(data.character.senses, uuid)


def delete_condition(data: AppData, uuid: int) -> None:
    """Remove the condition with ``uuid``, if present."""
    _remove_by_uuid(data.character.conditions, uuid)


def update_from_conditions(data: AppData) -> None:
    """Set the walking speed to the total speed increase of all conditions."""
    data.character.speed = sum(c.speed_increase for c in data.character.conditions)


def switch_to_character(data: AppData) -> None:
    """Navigate to the character sheet."""
    data.add_view(NavState.CHARACTER)
    _log.info("Switched to character")


def switch_to_sources(data: AppData) -> None:
    """Navigate to the source manager."""
    data.add_view(NavState.SOURCE_MANAGER)
    _log.info("Switched to sources")