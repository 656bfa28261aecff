from pathlib import Path

import pytest

from sportsclinic.accounts.store import AccountStore
from sportsclinic.booking.registry import InMemoryBookingRegistry
from sportsclinic.booking.service import BookingService
from sportsclinic.domain.models import Patient
from sportsclinic.shell.session import ClinicSession


@pytest.fixture
def registry() -> InMemoryBookingRegistry:
    return InMemoryBookingRegistry()


@pytest.fixture
def booking(registry: InMemoryBookingRegistry) -> BookingService:
    return BookingService(registry)


@pytest.fixture
def accounts_path(tmp_path: Path) -> Path:
    return tmp_path / "accounts.txt"


@pytest.fixture
def store(accounts_path: Path) -> AccountStore:
    return AccountStore(accounts_path)


@pytest.fixture
def patient() -> Patient:
    return Patient.create(
        "marc", "secret", "Marc Camps", 23, True, "01012345678", "12 Nile St"
    )


@pytest.fixture
def session(store: AccountStore, booking: BookingService) -> ClinicSession:
    return ClinicSession(store=store, booking=booking)
