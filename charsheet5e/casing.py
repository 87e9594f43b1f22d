"""ASCII title-casing of text."""

from itertools import chain

_ASCII_WHITESPACE = " \t\n\x0c\r"


def _ascii_upper(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


def _ascii_lower(char: str) -> str:
    return char.lower() if "A" <= char <= "Z" else char


def to_ascii_capitalised(text: str) -> str:
    """Upper-case the first letter of each whitespace-separated word, lower-case the rest.

    Only ASCII letters change; any other character passes through untouched.
    """
    return "".join(
        _ascii_upper(char) if prev is None or prev in _ASCII_WHITESPACE else _ascii_lower(char)
        for prev, char in zip(chain([None], text), text)
    )