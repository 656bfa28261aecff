import pytest
from pydantic import ValidationError

from sportsclinic.domain.catalog import find_injury
from sportsclinic.domain.exceptions import InvalidProfileError
from sportsclinic.domain.models import (
    Appointment,
    BodyPart,
    Patient,
    Profile,
    Role,
    Weekday,
)


def _appointment(time: str = "4:30 PM") -> Appointment:
    return Appointment(
        weekday=Weekday.SUNDAY, time=time, doctor="Dr. Maiada", patient_username="marc"
    )


class TestProfile:
    def test_strips_name_and_address(self) -> None:
        profile = Profile.create("  Marc Camps ", 23, True, "01012345678", "  12 Nile St  ")

        assert profile.name == "Marc Camps"
        assert profile.address == "12 Nile St"

    def test_none_name_and_address_become_empty(self) -> None:
        profile = Profile.create(None, 0, False, "01012345678", None)

        assert profile.name == ""
        assert profile.address == ""
        assert profile.gender_label == "Female"

    def test_negative_age_is_rejected(self) -> None:
        with pytest.raises(InvalidProfileError, match="Age cannot be negative"):
            Profile.create("Marc", -1, True, "01012345678", "")

    def test_missing_contact_is_rejected(self) -> None:
        with pytest.raises(InvalidProfileError, match="contact"):
            Profile.create("Marc", 20, True, None, "")

    def test_profile_is_immutable(self) -> None:
        profile = Profile.create("Marc", 20, True, "01012345678", "")

        with pytest.raises(ValidationError):
            profile.age = 30  # type: ignore[misc]


class TestPatientCreation:
    def test_new_account_uses_placeholder_profile(self) -> None:
        patient = Patient.new_account("marc", "secret")

        assert patient.profile.name == "New Patient"
        assert patient.profile.age == 0
        assert patient.profile.gender is True
        assert patient.profile.contact == "00000000000"
        assert patient.profile.address == ""
        assert patient.role is Role.PATIENT
        assert patient.has_complete_profile is False

    def test_create_rejects_negative_age(self) -> None:
        with pytest.raises(InvalidProfileError):
            Patient.create("marc", "pw", "Marc", -5, True, "01012345678", "")

    def test_username_cannot_be_reassigned(self, patient: Patient) -> None:
        with pytest.raises(ValidationError):
            patient.username = "someone-else"  # type: ignore[misc]


class TestHistory:
    def test_add_reservation_ignores_none(self, patient: Patient) -> None:
        patient.add_reservation(None)
        patient.add_reservation(_appointment())

        assert len(patient.appointments) == 1

    def test_add_injury_ignores_none(self, patient: Patient) -> None:
        patient.add_injury(None)
        patient.add_injury(find_injury("ACL Tear"))

        assert [i.injury_type for i in patient.injuries] == ["ACL Tear"]
        assert patient.latest_injury is not None
        assert patient.latest_injury.body_part is BodyPart.KNEE

    @pytest.mark.parametrize(
        "report", [None, "", "   ", "\n\t"], ids=["none", "empty", "spaces", "whitespace"]
    )
    def test_add_report_ignores_blank(self, patient: Patient, report: str | None) -> None:
        patient.add_report(report)

        assert patient.reports == []

    def test_add_report_keeps_text_verbatim(self, patient: Patient) -> None:
        patient.add_report("  Follow-up in two weeks ")

        assert patient.reports == ["  Follow-up in two weeks "]


class TestUpdateDetails:
    @pytest.fixture
    def with_history(self, patient: Patient) -> Patient:
        patient.add_reservation(_appointment("4:30 PM"))
        patient.add_reservation(_appointment("6:30 PM"))
        patient.add_injury(find_injury("Tennis Elbow"))
        patient.add_report("first")
        patient.add_report("second")
        patient.add_report("third")
        return patient

    def test_carries_history_forward(self, with_history: Patient) -> None:
        updated = with_history.update_details("Marc C.", 24, False, "01099999999", "New addr")

        assert updated is not with_history
        assert updated.username == with_history.username
        assert updated.password == with_history.password
        assert updated.profile.name == "Marc C."
        assert updated.profile.age == 24
        assert updated.profile.gender is False
        assert updated.appointments == with_history.appointments
        assert updated.injuries == with_history.injuries
        assert updated.reports == ["first", "second", "third"]

    def test_history_lists_are_copies(self, with_history: Patient) -> None:
        updated = with_history.update_details("Marc", 24, True, "01012345678", "")

        updated.add_report("only on the new value")

        assert len(with_history.reports) == 3
        assert len(updated.reports) == 4

    def test_negative_age_leaves_patient_untouched(self, with_history: Patient) -> None:
        before = with_history.model_copy(deep=True)

        with pytest.raises(InvalidProfileError):
            with_history.update_details("Marc", -1, True, "01012345678", "")

        assert with_history == before

    def test_completed_profile(self) -> None:
        account = Patient.new_account("marc", "pw")

        assert account.update_details("Marc", 23, True, "01012345678", "").has_complete_profile
        assert not account.update_details("Marc", 0, True, "01012345678", "").has_complete_profile
