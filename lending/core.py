from datetime import timedelta

from dependency_injector import containers, providers

from lending.application.lending.use_cases.request_borrow_use_case import RequestBorrowUseCase
from lending.application.lending.use_cases.update_thing_status_use_case import (
    UpdateThingStatusUseCase,
)
from lending.config import get_settings
from lending.domain.lending.factories import MoneyFactory, WaitingListFactory
from lending.infrastructure.lending.mappers import (
    DistributedLibraryMapper,
    LoanMapper,
    LocationMapper,
    ThingMapper,
)
from lending.infrastructure.lending.repositories import InMemoryBorrowRequestRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Repositories
    borrow_request_repository = providers.Singleton(InMemoryBorrowRequestRepository)

    # Domain factories
    money_factory = providers.Factory(
        MoneyFactory, default_currency=settings.provided.DEFAULT_CURRENCY
    )
    waiting_list_factory = providers.Factory(
        WaitingListFactory, reservation_days=settings.provided.RESERVATION_DAYS
    )

    # Mappers
    location_mapper = providers.Factory(LocationMapper)
    thing_mapper = providers.Factory(ThingMapper)
    loan_mapper = providers.Factory(LoanMapper, location_mapper=location_mapper)
    library_mapper = providers.Factory(
        DistributedLibraryMapper, settings=settings, location_mapper=location_mapper
    )

    # Lending module, application use cases
    borrow_request_cooldown = providers.Factory(
        timedelta, minutes=settings.provided.BORROW_REQUEST_COOLDOWN_MINUTES
    )
    request_borrow_use_case = providers.Factory(
        RequestBorrowUseCase,
        borrow_request_repository=borrow_request_repository,
        cooldown=borrow_request_cooldown,
    )
    update_thing_status_use_case = providers.Factory(
        UpdateThingStatusUseCase,
        request_borrow_use_case=request_borrow_use_case,
    )


container = Container()
