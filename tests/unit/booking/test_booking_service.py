import pytest

from sportsclinic.booking.registry import InMemoryBookingRegistry
from sportsclinic.booking.service import BookingService
from sportsclinic.domain.exceptions import InvalidSlotError, SlotUnavailableError
from sportsclinic.domain.models import Doctor, Patient, TimeSlot, Weekday

# Fixtures (registry, booking, patient) provided by tests/conftest.py


class TestSchedule:
    def test_creates_appointment_and_records_it(
        self, booking: BookingService, registry: InMemoryBookingRegistry, patient: Patient
    ) -> None:
        appt = booking.schedule(patient, "Dr. Maiada", Weekday.SUNDAY, "4:30 PM", "Knee popped")

        assert appt.doctor == "Dr. Maiada"
        assert appt.weekday is Weekday.SUNDAY
        assert appt.time == "4:30 PM"
        assert appt.patient_username == "marc"
        assert appt.note == "Knee popped"
        assert patient.appointments == [appt]
        assert registry.is_free("Dr. Maiada", Weekday.SUNDAY, "4:30 PM") is False

    def test_accepts_enum_members(self, booking: BookingService, patient: Patient) -> None:
        appt = booking.schedule(patient, Doctor.OMAR_TAMER, Weekday.THURSDAY, TimeSlot.PM_10_00)

        assert appt.doctor == "Dr. Omar Tamer"
        assert appt.time == "10:00 PM"
        assert appt.note == ""

    def test_rejects_taken_slot(self, booking: BookingService, patient: Patient) -> None:
        other = Patient.new_account("other", "pw")
        booking.schedule(other, "Dr. Maiada", Weekday.SUNDAY, "4:30 PM")

        with pytest.raises(SlotUnavailableError, match="already booked"):
            booking.schedule(patient, "Dr. Maiada", Weekday.SUNDAY, "4:30 PM")

        assert patient.appointments == []

    @pytest.mark.parametrize(
        ("doctor", "time", "match"),
        [
            ("Dr. Who", "4:30 PM", "unknown doctor"),
            ("Dr. Maiada", "04:30 PM", "unknown time"),
            ("Dr. Maiada", "9:00 AM", "unknown time"),
        ],
        ids=["unknown-doctor", "reformatted-time", "unlisted-time"],
    )
    def test_rejects_slots_outside_fixed_sets(
        self,
        booking: BookingService,
        registry: InMemoryBookingRegistry,
        patient: Patient,
        doctor: str,
        time: str,
        match: str,
    ) -> None:
        with pytest.raises(InvalidSlotError, match=match):
            booking.schedule(patient, doctor, Weekday.SUNDAY, time)

        assert len(registry) == 0
        assert patient.appointments == []


class TestAvailableTimes:
    def test_excludes_booked_times(self, booking: BookingService, patient: Patient) -> None:
        booking.schedule(patient, "Dr. Ahmed Mo'men", Weekday.TUESDAY, "8:30 PM")

        assert booking.available_times("Dr. Ahmed Mo'men", Weekday.TUESDAY) == [
            "4:30 PM",
            "6:30 PM",
            "10:00 PM",
        ]

    def test_unknown_doctor_raises(self, booking: BookingService) -> None:
        with pytest.raises(InvalidSlotError):
            booking.available_times("Dr. Nobody", Weekday.SUNDAY)
