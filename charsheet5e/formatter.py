"""Formatting and parsing of numbers in text fields."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace

_INT_RE = re.compile(r"[+-]?[0-9]+")


class ValidationError(ValueError):
    """Raised when text cannot be turned into a number."""


def _display(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isfinite(value) and value.is_integer():
            text = str(int(value))
            if value == 0 and math.copysign(1.0, value) < 0:
                text = "-" + text
            return text
    return str(value)


@dataclass(frozen=True)
class NumberFormatter:
    """Formats numbers, optionally followed by a unit, and parses them back."""

    number_type: type = int
    unsigned: bool = False
    unit: str | None = None

    def with_unit(self, unit: str) -> NumberFormatter:
        """Return a copy of this formatter that appends ``unit``."""
        return replace(self, unit=unit)

    def format(self, value: int | float) -> str:
        text = _display(value)
        return f"{text} {self.unit}" if self.unit is not None else text

    def format_for_editing(self, value: int | float) -> str:
        return _display(value)

    def _parse(self, text: str) -> int | float:
        if issubclass(self.number_type, int):
            if not _INT_RE.fullmatch(text) or (self.unsigned and text.startswith("-")):
                raise ValueError(f"invalid digit found in {text!r}")
            return self.number_type(text)
        if not text or text != text.strip() or "_" in text:
            raise ValueError(f"invalid float literal {text!r}")
        value = self.number_type(text)
        if self.unsigned and value < 0:
            raise ValueError(f"negative value {text!r}")
        return value

    def validate_partial_input(self, text: str) -> bool:
        """Return whether ``text`` is acceptable while it is being typed."""
        if not text:
            return True
        try:
            self._parse(text)
        except ValueError:
            return False
        return True

    def value(self, text: str) -> int | float:
        """Parse ``text``; empty text gives zero. Raises ValidationError otherwise."""
        try:
            return self._parse(text)
        except ValueError as exc:
            if not text:
                return self.number_type()
            raise ValidationError(str(exc)) from exc