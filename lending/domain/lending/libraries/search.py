"""
Search results grouped by library.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from lending.domain.common.value_objects import ID, ThingTitle
from lending.domain.lending.entities.thing import Thing
from lending.domain.lending.exceptions import EntityNotAssignedIdError

from .library import Library


@dataclass
class TitleSearchResult:
    title: ThingTitle
    num_copies: int


@dataclass
class LibrarySearchResult:
    """Matching titles per library, with how many copies each library holds."""

    libraries: dict[ID, Library] = field(default_factory=dict)
    _titles_by_library: dict[ID, list[TitleSearchResult]] = field(default_factory=dict)

    def add(self, library: Library, items: Iterable[Thing]) -> "LibrarySearchResult":
        if library.id is None:
            raise EntityNotAssignedIdError("Library must have an id to be searched")

        results = self._titles_by_library.setdefault(library.id, [])
        self.libraries[library.id] = library
        for item in items:
            for result in results:
                if result.title == item.title:
                    result.num_copies += 1
                    break
            else:
                results.append(TitleSearchResult(title=item.title, num_copies=1))
        return self

    def get_for_library(self, library: Library) -> list[TitleSearchResult]:
        if library.id is None:
            raise EntityNotAssignedIdError("Library must have an id to be searched")
        return list(self._titles_by_library.get(library.id, []))

    @property
    def num_results(self) -> int:
        return sum(len(results) for results in self._titles_by_library.values())
