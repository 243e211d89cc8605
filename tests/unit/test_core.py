"""Tests for the dependency injection container."""

from datetime import timedelta

from lending.application.lending.use_cases import RequestBorrowUseCase, UpdateThingStatusUseCase
from lending.core import Container
from lending.domain.common.value_objects import Currency
from lending.infrastructure.lending.mappers import DistributedLibraryMapper


def test_container_wires_use_cases() -> None:
    container = Container()

    update_use_case = container.update_thing_status_use_case()
    request_use_case = container.request_borrow_use_case()

    assert isinstance(update_use_case, UpdateThingStatusUseCase)
    assert isinstance(request_use_case, RequestBorrowUseCase)
    assert request_use_case.cooldown == timedelta(minutes=60)
    assert request_use_case.borrow_request_repository is container.borrow_request_repository()


def test_container_builds_factories_from_settings() -> None:
    container = Container()
    assert container.money_factory().default_currency is Currency.USD
    assert container.waiting_list_factory().reservation_days == 3
    assert isinstance(container.library_mapper(), DistributedLibraryMapper)
