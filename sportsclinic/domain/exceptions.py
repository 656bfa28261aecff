class ClinicError(Exception):
    """Base exception for all clinic-related errors."""


class InvalidProfileError(ClinicError):
    """Raised when profile details fail validation (e.g. a negative age)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid profile: {reason}")


class BookingError(ClinicError):
    """Base exception for appointment booking errors."""


class InvalidSlotError(BookingError):
    """Raised when a doctor, weekday or time is outside the bookable sets."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid slot: {reason}")


class SlotUnavailableError(BookingError):
    """Raised when the requested slot has already been reserved."""

    def __init__(self, doctor: str, weekday: str, time: str) -> None:
        self.doctor = doctor
        self.weekday = weekday
        self.time = time
        super().__init__(f"{doctor} is already booked on {weekday} at {time}")


class AccountError(ClinicError):
    """Base exception for account-related errors."""


class DuplicateUsernameError(AccountError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username '{username}' is already taken")


class AccountStoreError(AccountError):
    """Raised when the account file cannot be read or written."""

    def __init__(self, reason: str, path: str | None = None) -> None:
        self.reason = reason
        self.path = path
        super().__init__(f"Account store failure: {reason}")
