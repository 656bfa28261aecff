from html import escape

from pydantic import BaseModel, ConfigDict

from sportsclinic.domain.catalog import treatment_for
from sportsclinic.domain.models import Appointment, Injury, Patient, Sport, Treatment

ACCENT_COLOR = "#2e7d32"


class Report(BaseModel):
    """Everything that goes into a patient's medical summary."""

    model_config = ConfigDict(frozen=True)

    patient: Patient
    sport: Sport | None = None
    injury: Injury | None = None
    treatment: Treatment | None = None
    appointment: Appointment | None = None


def build_report(
    patient: Patient,
    sport: Sport | None = None,
    injury: Injury | None = None,
    appointment: Appointment | None = None,
) -> Report:
    """Assemble a report, looking up the treatment for the injury if there is one."""
    treatment = treatment_for(injury.injury_type) if injury is not None else None
    return Report(
        patient=patient,
        sport=sport,
        injury=injury,
        treatment=treatment,
        appointment=appointment,
    )


def summary_line(injury: Injury, appointment: Appointment) -> str:
    """The entry added to a patient's report log after generating a report."""
    return (
        f"Generated report for {injury.injury_type} on "
        f"{appointment.weekday.value} at {appointment.time}"
    )


def _sections(report: Report) -> list[tuple[str, list[tuple[str | None, str]]]]:
    """Report content as ``(heading, [(label, value), ...])``; a None label is free text."""
    profile = report.patient.profile
    sections: list[tuple[str, list[tuple[str | None, str]]]] = [
        (
            "Patient Information",
            [
                ("Name", profile.name),
                ("Age", str(profile.age)),
                ("Gender", profile.gender_label),
                ("Contact", profile.contact),
                ("Address", profile.address),
            ],
        )
    ]

    if report.sport is not None:
        sections.append(("Sport Information", [("Selected Sport", report.sport.value)]))

    if report.injury is not None:
        injury = report.injury
        sections.append(
            (
                "Injury Details",
                [
                    ("Type", injury.injury_type),
                    ("Movable", injury.movable_label),
                    ("Body Part", str(injury.body_part)),
                    ("Description", injury.athlete_description),
                ],
            )
        )

    if report.treatment is not None:
        sections.append(("Treatment Recommendation", [(None, report.treatment.suggestion)]))

    if report.appointment is not None:
        appointment = report.appointment
        rows: list[tuple[str | None, str]] = [
            ("Doctor", appointment.doctor),
            ("Day", appointment.weekday.value),
            ("Time", appointment.time),
        ]
        if appointment.note:
            rows.append(("Additional Notes", appointment.note))
        sections.append(("Appointment Details", rows))

    return sections


def render_text(report: Report) -> str:
    lines = ["=== Medical Report ==="]
    for heading, rows in _sections(report):
        lines.append("")
        lines.append(f"--- {heading} ---")
        for label, value in rows:
            lines.append(value if label is None else f"{label}: {value}")
    return "\n".join(lines) + "\n"


def render_html(report: Report) -> str:
    """Render the report as a small HTML document. All field values are escaped."""
    parts = ["<html><body style='font-family: Segoe UI; padding: 10px;'>"]
    for heading, rows in _sections(report):
        parts.append(f"<h2 style='color: {ACCENT_COLOR};'>{escape(heading)}</h2>")
        if len(rows) == 1 and rows[0][0] is None:
            parts.append(f"<p>{escape(rows[0][1])}</p>")
            continue
        body = "<br>".join(
            f"<b>{escape(label or '')}:</b> {escape(value)}" for label, value in rows
        )
        parts.append(f"<p>{body}</p>")
    parts.append("</body></html>")
    return "".join(parts)
