import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict

from sportsclinic.accounts.codec import format_line, parse_line
from sportsclinic.domain.exceptions import AccountStoreError, DuplicateUsernameError
from sportsclinic.domain.models import Patient


class LoadResult(BaseModel):
    """Outcome of reading the account file."""

    model_config = ConfigDict(frozen=True)

    loaded: int = 0
    skipped: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SaveResult(BaseModel):
    """Outcome of writing the account file."""

    model_config = ConfigDict(frozen=True)

    saved: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AccountStore:
    """Patient accounts backed by a flat, line-per-patient text file.

    Changes made with :meth:`add` and :meth:`update` stay in memory until
    :meth:`save` rewrites the whole file. Only credentials and profile are
    persisted; appointment, injury and report history is not.

    I/O failures never raise out of :meth:`load` or :meth:`save`. They are
    logged and returned in the result so the caller can decide what to do.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._patients: list[Patient] = []
        self._load_error: str | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        """Replace the in-memory accounts with the contents of the file."""
        if not self._path.exists():
            logger.info("No account file at {}; starting with an empty store", self._path)
            self._patients = []
            self._load_error = None
            return LoadResult()

        patients: list[Patient] = []
        skipped = 0
        try:
            with self._path.open("rb") as handle:
                for line_number, raw in enumerate(handle, start=1):
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError:
                        skipped += 1
                        logger.warning("Skipping undecodable account line {}", line_number)
                        continue
                    if not line.strip():
                        continue
                    patient = parse_line(line)
                    if patient is None:
                        skipped += 1
                        logger.warning("Skipping malformed account line {}", line_number)
                        continue
                    patients.append(patient)
        except OSError as exc:
            error = AccountStoreError(reason=str(exc), path=str(self._path))
            logger.warning("Could not load accounts: {}", error)
            self._load_error = str(error)
            return LoadResult(skipped=skipped, error=str(error))

        self._patients = patients
        self._load_error = None
        logger.info("Loaded {} account(s), skipped {} line(s)", len(patients), skipped)
        return LoadResult(loaded=len(patients), skipped=skipped)

    def save(self) -> SaveResult:
        """Rewrite the account file with every patient, one line each.

        The file is written to a temporary sibling first and then moved over
        the target, so an interrupted save leaves the previous file intact.
        Saving is refused while the last load failed, since the in-memory
        accounts would otherwise replace the unread file.
        """
        if self._load_error is not None:
            logger.warning("Refusing to save accounts after a failed load")
            return SaveResult(error=f"last load failed ({self._load_error})")

        temp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                for patient in self._patients:
                    handle.write(format_line(patient))
                    handle.write("\n")
            os.replace(temp_name, self._path)
        except OSError as exc:
            if temp_name is not None:
                Path(temp_name).unlink(missing_ok=True)
            error = AccountStoreError(reason=str(exc), path=str(self._path))
            logger.warning("Could not save accounts: {}", error)
            return SaveResult(error=str(error))

        logger.info("Saved {} account(s) to {}", len(self._patients), self._path)
        return SaveResult(saved=len(self._patients))

    def add(self, patient: Patient) -> None:
        """Register a new account in memory.

        Raises:
            DuplicateUsernameError: If the username is already taken.
        """
        if self.is_username_taken(patient.username):
            raise DuplicateUsernameError(patient.username)
        self._patients.append(patient)
        logger.info("Added account '{}'", patient.username)

    def update(self, patient: Patient) -> bool:
        """Replace the stored patient with the same username.

        Returns:
            True if a patient was replaced, False if the username is unknown.
        """
        for index, existing in enumerate(self._patients):
            if existing.username == patient.username:
                self._patients[index] = patient
                return True
        logger.debug("Update skipped; no account '{}'", patient.username)
        return False

    def is_username_taken(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def validate(self, username: str, password: str) -> bool:
        """Check credentials by exact match on both username and password."""
        patient = self.get_by_username(username)
        return patient is not None and patient.password == password

    def get_by_username(self, username: str) -> Patient | None:
        for patient in self._patients:
            if patient.username == username:
                return patient
        return None

    def __iter__(self) -> Iterator[Patient]:
        return iter(list(self._patients))

    def __len__(self) -> int:
        return len(self._patients)
