from .library_mapper import DistributedLibraryMapper
from .loan_mapper import LoanMapper
from .location_mapper import LocationMapper
from .thing_mapper import ThingMapper

__all__ = ["DistributedLibraryMapper", "LoanMapper", "LocationMapper", "ThingMapper"]
