from abc import ABC, abstractmethod

from sportsclinic.domain.models import Doctor, TimeSlot, Weekday


class AbstractBookingRegistry(ABC):
    """Tracks which (doctor, weekday, time) slots have been reserved."""

    @abstractmethod
    def is_free(self, doctor: Doctor | str, weekday: Weekday, time: TimeSlot | str) -> bool:
        """Check whether a slot has not been reserved yet.

        Args:
            doctor: Doctor or doctor display name. Compared by exact string.
            weekday: Day of the appointment.
            time: Time slot or its label. Compared by exact string.

        Returns:
            True if no reservation exists for the exact triple. Unknown
            doctors or weekdays are simply free.
        """

    @abstractmethod
    def book(self, doctor: Doctor | str, weekday: Weekday, time: TimeSlot | str) -> None:
        """Mark a slot as reserved without checking it first.

        Booking an already reserved slot is a no-op. Callers that need to
        detect conflicts must use :meth:`try_book`.
        """

    @abstractmethod
    def try_book(self, doctor: Doctor | str, weekday: Weekday, time: TimeSlot | str) -> bool:
        """Reserve a slot only if it is currently free, as a single step.

        Returns:
            True if the slot was free and is now reserved, False if it was
            already taken.
        """

    @abstractmethod
    def booked_times(self, doctor: Doctor | str, weekday: Weekday) -> frozenset[str]:
        """Return the reserved time labels for a doctor on a weekday."""

    def free_times(self, doctor: Doctor | str, weekday: Weekday) -> list[str]:
        """Return the unreserved time labels for a doctor on a weekday, in slot order."""
        taken = self.booked_times(doctor, weekday)
        return [slot.value for slot in TimeSlot if slot.value not in taken]
