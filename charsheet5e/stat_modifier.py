"""Stat modifiers tracked by the source that grants them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class StatModifier:
    """Modifiers to a stat, applied as ``(initial + base) * multiplier + flat``.

    Each modifier is kept as a ``(value, source)`` pair so it can be removed again
    by the name of the source that added it.
    """

    base: list[tuple[float, str]] = field(default_factory=list)
    flat: list[tuple[float, str]] = field(default_factory=list)
    multiplier: list[tuple[float, str]] = field(default_factory=list)

    def modify(self, initial: float) -> float:
        """Apply every modifier to ``initial`` and return the result."""
        base = sum(value for value, _ in self.base)
        mult = math.prod(value for value, _ in self.multiplier)
        flat = sum(value for value, _ in self.flat)
        return (initial + base) * mult + flat

    def _copy(self) -> StatModifier:
        return StatModifier(list(self.base), list(self.flat), list(self.multiplier))

    def add_base(self, source: str, value: float) -> None:
        self.base.append((value, source))

    def with_added_base(self, source: str, value: float) -> StatModifier:
        result = self._copy()
        result.add_base(source, value)
        return result

    def remove_base(self, source: str) -> None:
        self.base = [entry for entry in self.base if entry[1] != source]

    def with_removed_base(self, source: str) -> StatModifier:
        result = self._copy()
        result.remove_base(source)
        return result

    def has_base(self, source: str) -> bool:
        return any(src == source for _, src in self.base)

    def add_flat(self, source: str, value: float) -> None:
        self.flat.append((value, source))

    def with_added_flat(self, source: str, value: float) -> StatModifier:
        result = self._copy()
        result.add_flat(source, value)
        return result

    def remove_flat(self, source: str) -> None:
        self.flat = [entry for entry in self.flat if entry[1] != source]

    def with_removed_flat(self, source: str) -> StatModifier:
        result = self._copy()
        result.remove_flat(source)
        return result

    def has_flat(self, source: str) -> bool:
        return any(src == source for _, src in self.flat)

    def add_multiplier(self, source: str, value: float) -> None:
        self.multiplier.append((value, source))

    def with_added_multiplier(self, source: str, value: float) -> StatModifier:
        result = self._copy()
        result.add_multiplier(source, value)
        return result

    def remove_multiplier(self, source: str) -> None:
        self.multiplier = [entry for entry in self.multiplier if entry[1] != source]

    def with_removed_multiplier(self, source: str) -> StatModifier:
        result = self._copy()
        result.remove_multiplier(source)
        return result

    def has_multiplier(self, source: str) -> bool:
        return any(src == source for _, src in self.multiplier)


@dataclass
class StatWithModifiers:
    """A base stat value together with the modifiers applied to it."""

    base_stat: int | float
    modifiers: StatModifier = field(default_factory=StatModifier)

    def modified(self) -> int | float:
        """Return the modified stat, truncated towards zero when the base is an integer."""
        result = self.modifiers.modify(float(self.base_stat))
        if isinstance(self.base_stat, int):
            return int(result)
        return result