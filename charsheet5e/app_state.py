"""Application state: the character, content sources and navigation."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .character import CharacterState, new_character
from .content import InternalSource, SourceContentCollection, SourceContentItem
from .index_or import index_or


class NavState(Enum):
    """The screens that can be navigated to."""

    SOURCE_MANAGER = "SourceManager"
    CHARACTER = "Character"


@dataclass
class AppConfig:
    """Application settings."""


@dataclass
class TransitiveAppState:
    """User-interface state that is not saved with the character."""

    nav_state: list[NavState] = field(default_factory=list)
    selected_source: int = 0
    selected_source_array: int = 0
    selected_source_array_item: int = 0


@dataclass
class AppData:
    """Everything the application holds while running."""

    character: CharacterState = field(default_factory=new_character)
    sources: list[InternalSource] = field(default_factory=list)
    app_config: AppConfig = field(default_factory=AppConfig)
    uistate: TransitiveAppState = field(default_factory=TransitiveAppState)

    def init_sources(self, sources: Iterable[InternalSource]) -> None:
        """Replace the loaded sources."""
        self.sources = list(sources)

    def add_view(self, view: NavState) -> None:
        """Navigate to ``view``."""
        self.uistate.nav_state.append(view)

    def pop_view(self) -> None:
        """Go back from the current view; does nothing if there is none."""
        if self.uistate.nav_state:
            self.uistate.nav_state.pop()

    def current_view(self) -> NavState:
        """Return the view on top; raises IndexError if none has been opened."""
        if not self.uistate.nav_state:
            raise IndexError("no view has been opened")
        return self.uistate.nav_state[-1]

    def view_count(self) -> int:
        """Return how many views are on the navigation stack."""
        return len(self.uistate.nav_state)


def _selected_source(data: AppData) -> InternalSource:
    source = index_or(data.sources, data.uistate.selected_source)
    if source is None:
        raise IndexError(f"no source at index {data.uistate.selected_source}")
    return source


def _selected_collection(data: AppData) -> SourceContentCollection | None:
    return index_or(_selected_source(data).content, data.uistate.selected_source_array)


def _clamp_item(data: AppData) -> None:
    collection = _selected_collection(data)
    if collection is not None:
        count = len(collection.content)
        if count and data.uistate.selected_source_array_item >= count:
            data.uistate.selected_source_array_item = count - 1


def sources_view(data: AppData) -> tuple[int, list[InternalSource]]:
    """Return the selected source index and a copy of the source list."""
    return data.uistate.selected_source, list(data.sources)


def set_sources_view(data: AppData, selected: int, sources: Iterable[InternalSource]) -> None:
    """Store the sources and selection, keeping the deeper selections in range."""
    data.sources = list(sources)
    data.uistate.selected_source = selected
    count = len(_selected_source(data).content)
    if count and data.uistate.selected_source_array >= count:
        data.uistate.selected_source_array = count - 1
    _clamp_item(data)


def selected_source_content(data: AppData) -> tuple[int, list[SourceContentCollection]]:
    """Return the selected collection index and the selected source's collections."""
    return data.uistate.selected_source_array, list(_selected_source(data).content)


def set_selected_source_content(
    data: AppData, selected: int, content: Iterable[SourceContentCollection]
) -> None:
    """Store the selected source's collections and selection, keeping the item in range."""
    _selected_source(data).content = list(content)
    data.uistate.selected_source_array = selected
    _clamp_item(data)


def selected_source_content_items(data: AppData) -> tuple[int, list[SourceContentItem]] | None:
    """Return the selected item index and items of the selected collection, if any."""
    collection = _selected_collection(data)
    if collection is None:
        return None
    return data.uistate.selected_source_array_item, list(collection.content)


def set_selected_source_content_items(
    data: AppData, inner: tuple[int, Iterable[SourceContentItem]] | None
) -> None:
    """Store the items of the selected collection and the item selection."""
    if inner is None:
        return
    selected, items = inner
    collection = _selected_collection(data)
    if collection is not None:
        collection.content = list(items)
    data.uistate.selected_source_array_item = selected


def selected_source_content_item(data: AppData) -> SourceContentItem | None:
    """Return a copy of the selected content item, or None if nothing is selected."""
    collection = _selected_collection(data)
    if collection is None:
        return None
    item = index_or(collection.content, data.uistate.selected_source_array_item)
    return None if item is None else copy.deepcopy(item)


def set_selected_source_content_item(data: AppData, item: SourceContentItem | None) -> None:
    """Replace the selected content item if both it and ``item`` exist."""
    collection = _selected_collection(data)
    if collection is None or item is None:
        return
    position = data.uistate.selected_source_array_item
    if index_or(collection.content, position) is not None:
        collection.content[position] = item