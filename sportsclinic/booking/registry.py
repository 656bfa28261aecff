import threading

from loguru import logger

from sportsclinic.booking.ports import AbstractBookingRegistry
from sportsclinic.domain.models import Doctor, TimeSlot, Weekday


def _doctor_key(doctor: Doctor | str) -> str:
    return doctor.value if isinstance(doctor, Doctor) else doctor


def _time_key(time: TimeSlot | str) -> str:
    return time.value if isinstance(time, TimeSlot) else time


class InMemoryBookingRegistry(AbstractBookingRegistry):
    """Booking registry held in process memory.

    Reservations are stored as ``doctor -> weekday -> {time labels}``, with the
    inner levels created on first write. Nothing is ever released; the
    registry starts empty and lives as long as the instance does.
    """

    def __init__(self) -> None:
        self._bookings: dict[str, dict[Weekday, set[str]]] = {}
        self._lock = threading.Lock()

    def is_free(self, doctor: Doctor | str, weekday: Weekday, time: TimeSlot | str) -> bool:
        taken = self._bookings.get(_doctor_key(doctor), {}).get(weekday, set())
        return _time_key(time) not in taken

    def book(self, doctor: Doctor | str, weekday: Weekday, time: TimeSlot | str) -> None:
        with self._lock:
            self._add(_doctor_key(doctor), weekday, _time_key(time))

    def try_book(self, doctor: Doctor | str, weekday: Weekday, time: TimeSlot | str) -> bool:
        doctor_key = _doctor_key(doctor)
        time_key = _time_key(time)
        with self._lock:
            if not self.is_free(doctor_key, weekday, time_key):
                logger.debug("Slot taken: {} {} {}", doctor_key, weekday, time_key)
                return False
            self._add(doctor_key, weekday, time_key)
        return True

    def booked_times(self, doctor: Doctor | str, weekday: Weekday) -> frozenset[str]:
        return frozenset(self._bookings.get(_doctor_key(doctor), {}).get(weekday, set()))

    def __len__(self) -> int:
        return sum(len(times) for days in self._bookings.values() for times in days.values())

    def _add(self, doctor: str, weekday: Weekday, time: str) -> None:
        self._bookings.setdefault(doctor, {}).setdefault(weekday, set()).add(time)
        logger.info("Reserved slot: {} {} {}", doctor, weekday, time)
