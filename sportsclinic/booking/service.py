from loguru import logger

from sportsclinic.booking.ports import AbstractBookingRegistry
from sportsclinic.domain.exceptions import InvalidSlotError, SlotUnavailableError
from sportsclinic.domain.models import Appointment, Doctor, Patient, TimeSlot, Weekday


def _resolve_doctor(doctor: Doctor | str) -> Doctor:
    if isinstance(doctor, Doctor):
        return doctor
    try:
        return Doctor(doctor)
    except ValueError:
        raise InvalidSlotError(f"unknown doctor '{doctor}'") from None


def _resolve_time(time: TimeSlot | str) -> TimeSlot:
    if isinstance(time, TimeSlot):
        return time
    try:
        return TimeSlot(time)
    except ValueError:
        raise InvalidSlotError(f"unknown time '{time}'") from None


class BookingService:
    """Appointment booking flow on top of a booking registry."""

    def __init__(self, registry: AbstractBookingRegistry) -> None:
        self._registry = registry

    def available_times(self, doctor: Doctor | str, weekday: Weekday) -> list[str]:
        """List the free time labels for a doctor on a weekday."""
        resolved = _resolve_doctor(doctor)
        free = self._registry.free_times(resolved, weekday)
        logger.debug("{} has {} free slot(s) on {}", resolved, len(free), weekday)
        return free

    def schedule(
        self,
        patient: Patient,
        doctor: Doctor | str,
        weekday: Weekday,
        time: TimeSlot | str,
        note: str | None = "",
    ) -> Appointment:
        """Reserve a slot and record the appointment on the patient.

        Args:
            patient: The patient making the appointment. The new appointment
                is appended to their history.
            doctor: Doctor or doctor display name.
            weekday: Day of the appointment.
            time: Time slot or its label.
            note: Optional free-text description from the athlete.

        Returns:
            The created appointment.

        Raises:
            InvalidSlotError: If the doctor, weekday or time is not bookable.
            SlotUnavailableError: If the slot is already reserved.
        """
        resolved_doctor = _resolve_doctor(doctor)
        resolved_time = _resolve_time(time)
        if not isinstance(weekday, Weekday):
            raise InvalidSlotError(f"unknown weekday '{weekday}'")

        if not self._registry.try_book(resolved_doctor, weekday, resolved_time):
            raise SlotUnavailableError(resolved_doctor.value, weekday.value, resolved_time.value)

        appointment = Appointment(
            weekday=weekday,
            time=resolved_time.value,
            doctor=resolved_doctor.value,
            patient_username=patient.username,
            note=note.strip() if note else "",
        )
        patient.add_reservation(appointment)
        logger.info(
            "Appointment scheduled: doctor={}, day={}, time={}",
            appointment.doctor,
            appointment.weekday,
            appointment.time,
        )
        return appointment
