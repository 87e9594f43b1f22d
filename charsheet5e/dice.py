"""Parsing of dice expressions such as ``2d6``."""

from __future__ import annotations

import re
from dataclasses import dataclass

_U32_MAX = 0xFFFF_FFFF
_COUNT_RE = re.compile(r"\+?[0-9]+")
_DIGITS_RE = re.compile(r"[0-9]*")

_PREFIX_ERROR = "The number prefixing 'd' was unparseable in dice expression"
_SUFFIX_ERROR = "The number that is a suffix of 'd' was unparseable in dice expression"


class DiceParseError(ValueError):
    """Raised when a dice expression cannot be parsed."""


@dataclass(frozen=True, slots=True)
class Roll:
    """A roll of ``num_rolls`` dice, each with ``dice_sides`` sides."""

    num_rolls: int
    dice_sides: int


@dataclass(frozen=True, slots=True)
class DiceExpr:
    """A parsed dice expression together with the text it came from."""

    terms: tuple[Roll, ...]
    expr_str: str


def _parse_count(text: str, message: str) -> int:
    if not text:
        return 1
    if not _COUNT_RE.fullmatch(text):
        raise DiceParseError(message)
    value = int(text)
    if value > _U32_MAX:
        raise DiceParseError(message)
    return value


def parse_dice(expr: str) -> DiceExpr:
    """Parse the dice rolls in ``expr``.

    A ``d`` not followed by a letter starts a roll; the characters gathered before
    it give the number of dice (1 if none) and the digits after it give the sides
    (1 if none). Letters and whitespace are skipped.
    """
    terms: list[Roll] = []
    pending: list[str] = []
    pos = 0
    end = len(expr)
    while pos < end:
        char = expr[pos]
        if char == "d" and pos + 1 < end and not expr[pos + 1].isalpha():
            rolls = _parse_count("".join(pending), _PREFIX_ERROR)
            pending.clear()
            digits = _DIGITS_RE.match(expr, pos + 1)
            sides = _parse_count(digits.group(), _SUFFIX_ERROR)
            terms.append(Roll(rolls, sides))
            pos = digits.end()
            continue
        if not char.isalpha() and not char.isspace():
            pending.append(char)
        pos += 1
    return DiceExpr(tuple(terms), expr)