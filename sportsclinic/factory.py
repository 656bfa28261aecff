from loguru import logger

from sportsclinic.accounts.store import AccountStore
from sportsclinic.booking.registry import InMemoryBookingRegistry
from sportsclinic.booking.service import BookingService
from sportsclinic.config import ClinicConfig
from sportsclinic.shell.session import ClinicSession


def build_account_store(config: ClinicConfig) -> AccountStore:
    """Create the account store and load it from disk."""
    store = AccountStore(config.accounts_file)
    result = store.load()
    if not result.ok:
        logger.warning("Starting with {} account(s); load reported: {}", len(store), result.error)
    return store


def build_session(config: ClinicConfig) -> ClinicSession:
    """Wire a session with a fresh booking registry and the configured account store."""
    logger.info("Building clinic session with accounts file: {}", config.accounts_file)
    registry = InMemoryBookingRegistry()
    return ClinicSession(
        store=build_account_store(config),
        booking=BookingService(registry),
        report_format=config.report_format,
    )
