from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sportsclinic.domain.exceptions import InvalidProfileError

NEW_PATIENT_NAME = "New Patient"
DEFAULT_CONTACT = "00000000000"


class Weekday(Enum):
    """Days on which the clinic takes appointments."""

    SUNDAY = "Sunday"
    TUESDAY = "Tuesday"
    THURSDAY = "Thursday"

    def __str__(self) -> str:
        return self.value


class TimeSlot(Enum):
    """Fixed appointment start times, keyed by their display label."""

    PM_4_30 = "4:30 PM"
    PM_6_30 = "6:30 PM"
    PM_8_30 = "8:30 PM"
    PM_10_00 = "10:00 PM"

    def __str__(self) -> str:
        return self.value


class Doctor(Enum):
    """Doctors that can be booked, keyed by their display name."""

    MAIADA = "Dr. Maiada"
    AHMED_MOMEN = "Dr. Ahmed Mo'men"
    SHEHAB_WAEL = "Dr. Shehab Wael"
    OMAR_TAMER = "Dr. Omar Tamer"

    def __str__(self) -> str:
        return self.value


class BodyPart(Enum):
    THIGH = "thigh"
    HAMSTRING = "hamstring"
    CALF = "calf"
    ANKLE = "ankle"
    KNEE = "knee"
    FOOT = "foot"
    SHIN = "shin"
    ARM = "arm"
    LEG = "leg"
    WRIST = "wrist"
    SHOULDER = "shoulder"
    ELBOW = "elbow"
    ACHILLES = "achilles"

    def __str__(self) -> str:
        return self.value.capitalize()


class Sport(Enum):
    FOOTBALL = "Football"
    HANDBALL = "Handball"
    BASKETBALL = "Basketball"

    def __str__(self) -> str:
        return self.value


class Role(str, Enum):
    """Which kind of person a profile belongs to."""

    PATIENT = "patient"
    DOCTOR = "doctor"


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        cause = error.get("ctx", {}).get("error")
        parts.append(f"{field}: {cause or error['msg']}")
    return "; ".join(parts)


class Profile(BaseModel):
    """Personal details shared by patients and doctors."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    age: int
    gender: bool
    contact: str
    address: str = ""

    @field_validator("name", "address", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @field_validator("age")
    @classmethod
    def _age_not_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Age cannot be negative")
        return value

    @property
    def gender_label(self) -> str:
        return "Male" if self.gender else "Female"

    @classmethod
    def create(
        cls,
        name: str | None,
        age: int,
        gender: bool,
        contact: str | None,
        address: str | None,
    ) -> "Profile":
        """Build a profile, raising ``InvalidProfileError`` instead of a pydantic error."""
        try:
            return cls(name=name, age=age, gender=gender, contact=contact, address=address)
        except ValidationError as exc:
            raise InvalidProfileError(_describe_validation_error(exc)) from exc


class DoctorRecord(BaseModel):
    """A doctor on the clinic's staff."""

    model_config = ConfigDict(frozen=True)

    doctor_id: int
    doctor: Doctor
    specialty: str
    profile: Profile | None = None
    role: Role = Role.DOCTOR

    @property
    def name(self) -> str:
        return self.doctor.value


class Injury(BaseModel):
    """A predefined sports injury, described the way an athlete would."""

    model_config = ConfigDict(frozen=True)

    injury_type: str
    body_part: BodyPart
    movable: bool
    athlete_description: str

    @property
    def movable_label(self) -> str:
        return "Yes/limited" if self.movable else "No"

    def __str__(self) -> str:
        return f"{self.injury_type} : {self.athlete_description}"


class Treatment(BaseModel):
    """Suggested first-line care for an injury type."""

    model_config = ConfigDict(frozen=True)

    injury_type: str
    suggestion: str


class Appointment(BaseModel):
    """A reserved slot with a doctor. Only created through the booking flow."""

    model_config = ConfigDict(frozen=True)

    weekday: Weekday
    time: str
    doctor: str
    patient_username: str
    note: str = ""

    @field_validator("note", mode="before")
    @classmethod
    def _note_default(cls, value: Any) -> Any:
        return "" if value is None else value


class Patient(BaseModel):
    """A patient account with its profile and accumulated history.

    ``appointments``, ``injuries`` and ``reports`` only ever grow. Profile
    edits go through :meth:`update_details`, which returns a new ``Patient``
    that carries the history forward.
    """

    username: str = Field(frozen=True)
    password: str = Field(frozen=True)
    profile: Profile = Field(frozen=True)
    role: Role = Field(default=Role.PATIENT, frozen=True)
    appointments: list[Appointment] = Field(default_factory=list)
    injuries: list[Injury] = Field(default_factory=list)
    reports: list[str] = Field(default_factory=list)

    @classmethod
    def create(
        cls,
        username: str,
        password: str,
        name: str | None,
        age: int,
        gender: bool,
        contact: str | None,
        address: str | None,
    ) -> "Patient":
        profile = Profile.create(name, age, gender, contact, address)
        return cls(username=username, password=password, profile=profile)

    @classmethod
    def new_account(cls, username: str, password: str) -> "Patient":
        """Create an account whose profile still has placeholder values."""
        return cls.create(username, password, NEW_PATIENT_NAME, 0, True, DEFAULT_CONTACT, "")

    @property
    def has_complete_profile(self) -> bool:
        name = self.profile.name
        return bool(name) and name != NEW_PATIENT_NAME and self.profile.age != 0

    def update_details(
        self,
        name: str | None,
        age: int,
        gender: bool,
        contact: str | None,
        address: str | None,
    ) -> "Patient":
        """Return a copy of this patient with a new profile.

        Args:
            name: Full name; surrounding whitespace is stripped.
            age: Age in years, must not be negative.
            gender: ``True`` for male, ``False`` for female.
            contact: Contact number.
            address: Free-text address.

        Returns:
            A new ``Patient`` with the same credentials and copies of the
            appointment, injury and report lists. The caller must replace any
            stored reference to the old value.

        Raises:
            InvalidProfileError: If the details fail validation. This patient
                is left unchanged.
        """
        profile = Profile.create(name, age, gender, contact, address)
        return Patient(
            username=self.username,
            password=self.password,
            profile=profile,
            appointments=list(self.appointments),
            injuries=list(self.injuries),
            reports=list(self.reports),
        )

    def add_reservation(self, appointment: Appointment | None) -> None:
        if appointment is not None:
            self.appointments.append(appointment)

    def add_injury(self, injury: Injury | None) -> None:
        if injury is not None:
            self.injuries.append(injury)

    def add_report(self, report: str | None) -> None:
        if report is not None and report.strip():
            self.reports.append(report)

    @property
    def latest_appointment(self) -> Appointment | None:
        return self.appointments[-1] if self.appointments else None

    @property
    def latest_injury(self) -> Injury | None:
        return self.injuries[-1] if self.injuries else None
