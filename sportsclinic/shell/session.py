from enum import Enum
from typing import Any, TypeVar

from loguru import logger

from sportsclinic.accounts.store import AccountStore, SaveResult
from sportsclinic.booking.service import BookingService
from sportsclinic.config import ReportFormat
from sportsclinic.domain.catalog import by_body_part, find_injury
from sportsclinic.domain.exceptions import ClinicError
from sportsclinic.domain.models import (
    Appointment,
    BodyPart,
    Injury,
    Patient,
    Sport,
    Weekday,
)
from sportsclinic.reports.composer import build_report, render_html, render_text, summary_line

E = TypeVar("E", bound=Enum)

LOGIN_REQUIRED = "Please log in first."


def _lookup(enum_cls: type[E], text: str | None) -> E | None:
    """Match an enum member by value or name, ignoring case."""
    if not text:
        return None
    wanted = text.strip().lower()
    for member in enum_cls:
        if str(member.value).lower() == wanted or member.name.lower() == wanted:
            return member
    return None


def _failure(message: str, **extra: Any) -> dict[str, Any]:
    return {"success": False, "error": True, "message": message, **extra}


def _injury_dict(injury: Injury) -> dict[str, Any]:
    return {
        "type": injury.injury_type,
        "body_part": str(injury.body_part),
        "movable": injury.movable,
        "description": injury.athlete_description,
    }


def _appointment_dict(appointment: Appointment) -> dict[str, Any]:
    return {
        "doctor": appointment.doctor,
        "day": appointment.weekday.value,
        "time": appointment.time,
        "note": appointment.note,
    }


class ClinicSession:
    """One interactive user session over the account store and booking service.

    Every public method returns a plain result dict with at least ``success``
    and ``message`` keys. Invalid input produces ``error: True`` and leaves the
    session state as it was, so the caller can simply ask again.
    """

    def __init__(
        self,
        store: AccountStore,
        booking: BookingService,
        report_format: ReportFormat = ReportFormat.TEXT,
    ) -> None:
        self._store = store
        self._booking = booking
        self._report_format = report_format
        self.current_user: Patient | None = None
        self.selected_sport: Sport | None = None
        self.selected_injury: Injury | None = None
        self.last_appointment: Appointment | None = None

    def _persist(self, result: dict[str, Any]) -> dict[str, Any]:
        saved: SaveResult = self._store.save()
        if not saved.ok:
            result["warning"] = f"Changes kept for this session but not saved: {saved.error}"
        return result

    def _reset_selection(self) -> None:
        self.selected_sport = None
        self.selected_injury = None
        self.last_appointment = None

    def sign_up(self, username: str, password: str) -> dict[str, Any]:
        username = (username or "").strip()
        password = (password or "").strip()
        if not username:
            return _failure("Username cannot be empty.")
        if not password:
            return _failure("Password cannot be empty.")

        try:
            patient = Patient.new_account(username, password)
            self._store.add(patient)
        except ClinicError as exc:
            return _failure(str(exc))

        self.current_user = patient
        self._reset_selection()
        return self._persist(
            {"success": True, "username": username, "message": "Account created successfully!"}
        )

    def log_in(self, username: str, password: str) -> dict[str, Any]:
        username = (username or "").strip()
        password = (password or "").strip()
        if not self._store.validate(username, password):
            logger.info("Failed login attempt")
            return _failure("Invalid username or password.")

        self.current_user = self._store.get_by_username(username)
        self._reset_selection()
        return {"success": True, "username": username, "message": f"Welcome back, {username}!"}

    def log_out(self) -> dict[str, Any]:
        self.current_user = None
        self._reset_selection()
        return {"success": True, "message": "Logged out."}

    def update_details(
        self,
        name: str,
        age: int,
        gender: bool,
        contact: str,
        address: str,
    ) -> dict[str, Any]:
        if self.current_user is None:
            return _failure(LOGIN_REQUIRED)

        try:
            updated = self.current_user.update_details(name, age, gender, contact, address)
        except ClinicError as exc:
            return _failure(str(exc))

        self.current_user = updated
        self._store.update(updated)
        return self._persist(
            {"success": True, "message": "Patient information saved successfully!"}
        )

    def choose_sport(self, sport: str) -> dict[str, Any]:
        selected = _lookup(Sport, sport)
        if selected is None:
            return _failure(f"Unknown sport '{sport}'.")
        self.selected_sport = selected
        return {"success": True, "sport": selected.value, "message": f"Selected sport: {selected}"}

    def list_injuries(self, body_part: str | None = None) -> dict[str, Any]:
        part = _lookup(BodyPart, body_part)
        if body_part and part is None:
            return _failure(f"Unknown body part '{body_part}'.", injuries=[])
        return {
            "success": True,
            "injuries": [_injury_dict(injury) for injury in by_body_part(part)],
        }

    def choose_injury(self, injury_type: str) -> dict[str, Any]:
        if self.current_user is None:
            return _failure(LOGIN_REQUIRED)

        injury = find_injury(injury_type)
        if injury is None:
            return _failure(f"Unknown injury '{injury_type}'.")
        self.current_user.add_injury(injury)
        self.selected_injury = injury
        return {
            "success": True,
            "injury": _injury_dict(injury),
            "message": f"Selected injury: {injury.injury_type}",
        }

    def available_times(self, doctor: str, weekday: str) -> dict[str, Any]:
        day = _lookup(Weekday, weekday)
        if day is None:
            return _failure(f"Unknown weekday '{weekday}'.", times=[])
        try:
            times = self._booking.available_times(doctor, day)
        except ClinicError as exc:
            return _failure(str(exc), times=[])
        return {"success": True, "doctor": doctor, "day": day.value, "times": times}

    def schedule_appointment(
        self, doctor: str, weekday: str, time: str, note: str | None = ""
    ) -> dict[str, Any]:
        if self.current_user is None:
            return _failure(LOGIN_REQUIRED)

        day = _lookup(Weekday, weekday)
        if day is None:
            return _failure(f"Unknown weekday '{weekday}'.")

        try:
            appointment = self._booking.schedule(self.current_user, doctor, day, time, note)
        except ClinicError as exc:
            return _failure(str(exc))
        except Exception:
            logger.exception("Unexpected error while scheduling an appointment")
            return _failure("An unexpected error occurred while scheduling the appointment.")

        self.last_appointment = appointment
        self._store.update(self.current_user)
        return {
            "success": True,
            "appointment": _appointment_dict(appointment),
            "message": "Appointment scheduled successfully!",
        }

    def generate_report(self) -> dict[str, Any]:
        patient = self.current_user
        if patient is None:
            return _failure(LOGIN_REQUIRED)

        if not patient.has_complete_profile:
            return _failure("Please complete your user details first.")

        injury = self.selected_injury or patient.latest_injury
        appointment = self.last_appointment or patient.latest_appointment
        report = build_report(patient, self.selected_sport, injury, appointment)
        if self._report_format is ReportFormat.HTML:
            content = render_html(report)
        else:
            content = render_text(report)

        if injury is not None and appointment is not None:
            patient.add_report(summary_line(injury, appointment))
        elif injury is not None:
            patient.add_report(f"Report generated for injury: {injury.injury_type}")

        logger.info("Report generated ({})", self._report_format.value)
        return {
            "success": True,
            "format": self._report_format.value,
            "content": content,
            "message": "Report generated successfully!",
        }
