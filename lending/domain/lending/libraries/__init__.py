from .distributed_library import DistributedLibrary
from .library import Library
from .search import LibrarySearchResult, TitleSearchResult
from .simple_library import SimpleLibrary

__all__ = [
    "DistributedLibrary",
    "Library",
    "LibrarySearchResult",
    "SimpleLibrary",
    "TitleSearchResult",
]
