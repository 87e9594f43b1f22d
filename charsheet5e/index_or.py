"""Indexing that yields None instead of failing when nothing is there."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any


def _in_range(container: Sequence[Any], index: Any) -> bool:
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < len(container)
    )


def index_or(container: Any, index: Any) -> Any:
    """Return ``container[index]``, or None if there is nothing at ``index``.

    Sequences take non-negative integer positions; mappings take keys.
    """
    if isinstance(container, Mapping):
        return container.get(index)
    if isinstance(container, Sequence):
        return container[index] if _in_range(container, index) else None
    raise TypeError(f"cannot index into {type(container).__name__}")


@dataclass(frozen=True)
class IndexOr:
    """A fixed index that reads from or writes into containers when present."""

    index: Any

    def get(self, data: Any) -> Any:
        """Return the item at this index in ``data``, or None."""
        return index_or(data, self.index)

    def set(self, data: Any, value: Any) -> bool:
        """Replace the item at this index if it exists; return whether it did."""
        if isinstance(data, MutableMapping):
            if self.index not in data:
                return False
        elif isinstance(data, MutableSequence):
            if not _in_range(data, self.index):
                return False
        else:
            raise TypeError(f"cannot assign into {type(data).__name__}")
        data[self.index] = value
        return True