from loguru import logger

from sportsclinic.domain.exceptions import InvalidProfileError
from sportsclinic.domain.models import Patient

FIELD_SEPARATOR = ","
FULL_FIELD_COUNT = 7
LEGACY_FIELD_COUNT = 2


def _parse_bool(text: str) -> bool:
    """Anything other than ``true`` (any case) reads as False."""
    return text.strip().lower() == "true"


def parse_line(line: str) -> Patient | None:
    """Parse one account line into a patient, or None if it is malformed.

    Accepts ``username,password,name,age,gender,contact,address`` and the
    legacy ``username,password`` form, which gets a placeholder profile.
    """
    text = line.rstrip("\r\n")
    if not text.strip():
        return None

    parts = text.split(FIELD_SEPARATOR)
    if len(parts) == LEGACY_FIELD_COUNT:
        username, password = parts
        return Patient.new_account(username, password)
    if len(parts) != FULL_FIELD_COUNT:
        return None

    username, password, name, age_text, gender_text, contact, address = parts
    try:
        age = int(age_text.strip())
    except ValueError:
        return None

    try:
        return Patient.create(
            username, password, name, age, _parse_bool(gender_text), contact, address
        )
    except InvalidProfileError:
        return None


def format_line(patient: Patient) -> str:
    """Serialize a patient's credentials and profile as a 7-field line.

    Fields are not escaped, so a value containing a comma will not read back.
    """
    profile = patient.profile
    fields = [
        patient.username,
        patient.password,
        profile.name,
        str(profile.age),
        "true" if profile.gender else "false",
        profile.contact,
        profile.address,
    ]
    if any(FIELD_SEPARATOR in field or "\n" in field for field in fields):
        logger.warning(
            "Account '{}' has a field containing a separator; it will not reload cleanly",
            patient.username,
        )
    return FIELD_SEPARATOR.join(fields)
