from collections.abc import Callable, Sequence
from typing import Any

from sportsclinic.domain.catalog import all_sports
from sportsclinic.domain.models import BodyPart, Doctor, Weekday
from sportsclinic.shell.session import ClinicSession

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ClinicConsole:
    """Menu-driven console front end for a :class:`ClinicSession`.

    ``input_fn`` and ``output_fn`` default to the builtins; tests pass
    scripted replacements.
    """

    def __init__(
        self,
        session: ClinicSession,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self._session = session
        self._input = input_fn
        self._output = output_fn

    def _show(self, result: dict[str, Any]) -> None:
        if result.get("message"):
            prefix = "Error: " if result.get("error") else ""
            self._output(f"{prefix}{result['message']}")
        if result.get("warning"):
            self._output(f"Warning: {result['warning']}")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _choose(self, title: str, options: Sequence[str]) -> int | None:
        """Show a numbered menu and return the 0-based choice, or None on bad input."""
        self._output(f"\n=== {title} ===")
        for number, option in enumerate(options, start=1):
            self._output(f"{number}. {option}")
        raw = self._ask(f"Enter your choice (1-{len(options)}): ")
        try:
            choice = int(raw)
        except ValueError:
            self._output("Invalid input. Please enter a number.")
            return None
        if not 1 <= choice <= len(options):
            self._output(f"Please enter a number between 1 and {len(options)}.")
            return None
        return choice - 1

    def _choose_until_valid(self, title: str, options: Sequence[str]) -> int:
        while True:
            choice = self._choose(title, options)
            if choice is not None:
                return choice

    def authenticate(self) -> bool:
        choice = self._choose("Authentication", ["Sign Up (Create New Account)", "Log In"])
        if choice is None:
            return False
        username = self._ask("Enter a username: ")
        password = self._ask("Enter a password: ")
        if choice == 0:
            result = self._session.sign_up(username, password)
        else:
            result = self._session.log_in(username, password)
        self._show(result)
        return bool(result["success"])

    def collect_details(self) -> None:
        self._output("\n=== Patient Information ===")
        while True:
            name = self._ask("Enter your full name: ")
            try:
                age = int(self._ask("Enter your age: "))
            except ValueError:
                self._output("Invalid input. Please try again.")
                continue
            gender = self._ask("Enter your gender (1 for Male, 0 for Female): ") == "1"
            contact = self._ask("Enter your contact number (11 digits): ")
            address = self._ask("Enter your address: ")

            result = self._session.update_details(name, age, gender, contact, address)
            self._show(result)
            if result["success"]:
                return

    def collect_injury(self) -> None:
        sports = all_sports()
        sport = sports[self._choose_until_valid("Choose a Sport", [s.value for s in sports])]
        self._show(self._session.choose_sport(sport.value))

        parts = list(BodyPart)
        part = parts[self._choose_until_valid("Choose Body Part", [str(p) for p in parts])]
        injuries = self._session.list_injuries(part.value)["injuries"]
        labels = [
            f"{injury['type']}\n   Description: {injury['description']}\n"
            f"   Movable: {'Yes' if injury['movable'] else 'No'}"
            for injury in injuries
        ]
        picked = injuries[self._choose_until_valid("Choose Injury", labels)]
        self._show(self._session.choose_injury(picked["type"]))

    def collect_appointment(self) -> None:
        doctors = [doctor.value for doctor in Doctor]
        days = list(Weekday)
        doctor = doctors[self._choose_until_valid("Choose a doctor", doctors)]
        day = days[self._choose_until_valid("Choose a weekday", [d.value for d in days])]

        while True:
            free = self._session.available_times(doctor, day.value)["times"]
            if not free:
                self._output(f"{doctor} has no free time on {day}. Please choose again.")
                doctor = doctors[self._choose_until_valid("Choose a doctor", doctors)]
                day = days[self._choose_until_valid("Choose a weekday", [d.value for d in days])]
                continue
            time = free[self._choose_until_valid("Choose a time", free)]
            note = self._ask("Describe your injury (optional): ")
            result = self._session.schedule_appointment(doctor, day.value, time, note)
            self._show(result)
            if result["success"]:
                return

    def run(self) -> None:
        self._output("=== Welcome to Sports Injury Management System ===")
        while True:
            if not self.authenticate():
                continue

            self.collect_details()
            self.collect_injury()
            self.collect_appointment()

            result = self._session.generate_report()
            if result["success"]:
                self._output(result["content"])
            self._show(result)

            self._session.log_out()
            if self._ask("Do you want to add another patient? (yes/no): ").lower() != "yes":
                break
        self._output("Thank you for using Sports Injury Management System!")
