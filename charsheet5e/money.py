"""Amounts of money in the five coin denominations."""

from __future__ import annotations

import string
from dataclasses import dataclass

_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

_DENOMINATIONS = {"c": "cp", "s": "sp", "e": "ep", "g": "gp", "p": "pp"}


@dataclass
class Money:
    """Copper, silver, electrum, gold and platinum pieces."""

    cp: int = 0
    sp: int = 0
    ep: int = 0
    gp: int = 0
    pp: int = 0


def parse_money(money_str: str) -> Money:
    """Parse an amount such as ``"100 gp"`` or ``"5 gp, 3 sp"``.

    A number is followed by a coin word whose first letter picks the coin; the
    letter after that is skipped. A coin word with no number of its own takes the
    last number read. Raises ValueError for amounts beyond 64 bits.
    """
    money = Money()
    value = 0
    pos = 0
    end = len(money_str)
    while pos < end:
        if money_str[pos] in string.digits:
            start = pos
            while pos < end and money_str[pos] in string.digits:
                pos += 1
            value = int(money_str[start:pos])
            if value > _U64_MAX:
                raise ValueError(f"amount of money out of range: {value}")
            if pos == end:
                break
        char = money_str[pos]
        if char in string.ascii_letters:
            coin = _DENOMINATIONS.get(char)
            if coin is not None:
                setattr(money, coin, value)
            pos += 1
        pos += 1
    return money