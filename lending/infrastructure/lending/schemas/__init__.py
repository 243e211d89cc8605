from .records import AreaRecord, DistributedLibraryRecord, ItemRecord, LoanRecord, LocationRecord

__all__ = [
    "AreaRecord",
    "DistributedLibraryRecord",
    "ItemRecord",
    "LoanRecord",
    "LocationRecord",
]
