import pytest

from sportsclinic.domain.catalog import FALLBACK_TREATMENT, find_injury
from sportsclinic.domain.models import Appointment, BodyPart, Injury, Patient, Sport, Weekday
from sportsclinic.reports.composer import build_report, render_html, render_text, summary_line


@pytest.fixture
def acl() -> Injury:
    injury = find_injury("ACL Tear")
    assert injury is not None
    return injury


@pytest.fixture
def appointment() -> Appointment:
    return Appointment(
        weekday=Weekday.SUNDAY,
        time="4:30 PM",
        doctor="Dr. Maiada",
        patient_username="marc",
        note="Heard a pop <during> the match",
    )


class TestBuildReport:
    def test_looks_up_treatment(self, patient: Patient, acl: Injury) -> None:
        report = build_report(patient, injury=acl)

        assert report.treatment is not None
        assert report.treatment.suggestion.startswith("Stop playing immediately")

    def test_unknown_injury_gets_fallback_treatment(self, patient: Patient) -> None:
        custom = Injury(
            injury_type="Stubbed Toe",
            body_part=BodyPart.FOOT,
            movable=True,
            athlete_description="Ouch.",
        )

        report = build_report(patient, injury=custom)

        assert report.treatment is not None
        assert report.treatment.suggestion == FALLBACK_TREATMENT

    def test_no_injury_means_no_treatment(self, patient: Patient) -> None:
        assert build_report(patient).treatment is None


class TestRenderText:
    def test_full_report_sections_in_order(
        self, patient: Patient, acl: Injury, appointment: Appointment
    ) -> None:
        text = render_text(build_report(patient, Sport.FOOTBALL, acl, appointment))

        headings = [line for line in text.splitlines() if line.startswith("---")]
        assert headings == [
            "--- Patient Information ---",
            "--- Sport Information ---",
            "--- Injury Details ---",
            "--- Treatment Recommendation ---",
            "--- Appointment Details ---",
        ]
        assert "Name: Marc Camps" in text
        assert "Age: 23" in text
        assert "Gender: Male" in text
        assert "Selected Sport: Football" in text
        assert "Movable: No" in text
        assert "Body Part: Knee" in text
        assert "Doctor: Dr. Maiada" in text
        assert "Day: Sunday" in text
        assert "Time: 4:30 PM" in text
        assert "Additional Notes: Heard a pop <during> the match" in text

    def test_profile_only(self, patient: Patient) -> None:
        text = render_text(build_report(patient))

        assert "--- Patient Information ---" in text
        assert "Injury Details" not in text
        assert "Appointment Details" not in text

    def test_notes_omitted_when_empty(self, patient: Patient, acl: Injury) -> None:
        plain = Appointment(
            weekday=Weekday.TUESDAY,
            time="6:30 PM",
            doctor="Dr. Omar Tamer",
            patient_username="marc",
        )

        text = render_text(build_report(patient, injury=acl, appointment=plain))

        assert "Additional Notes" not in text


class TestRenderHtml:
    def test_escapes_user_text(
        self, patient: Patient, acl: Injury, appointment: Appointment
    ) -> None:
        html = render_html(build_report(patient, Sport.HANDBALL, acl, appointment))

        assert html.startswith("<html>")
        assert html.endswith("</body></html>")
        assert "Heard a pop &lt;during&gt; the match" in html
        assert "<during>" not in html
        assert "<b>Doctor:</b> Dr. Maiada" in html
        assert "Patient Information</h2>" in html

    def test_escapes_profile_fields(self) -> None:
        patient = Patient.create("x", "y", "Tom & Jerry", 30, False, "01000000000", "<b>road</b>")

        html = render_html(build_report(patient))

        assert "Tom &amp; Jerry" in html
        assert "&lt;b&gt;road&lt;/b&gt;" in html
        assert "<b>Gender:</b> Female" in html


def test_summary_line(acl: Injury, appointment: Appointment) -> None:
    assert summary_line(acl, appointment) == "Generated report for ACL Tear on Sunday at 4:30 PM"
