"""The student entry form: its fields, file loading and saving, and the summary popup."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .record import Gender, StudentRecord, decode_file_bytes, split_lines

GRADES = ("2021级", "2022级", "2023级", "2024级")
MAJORS = ("计算机科学与技术", "软件工程", "信息安全", "网络工程")

AGE_MIN = 10
AGE_MAX = 80
AGE_START = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of text, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Choice:
    """A drop-down list with at most one selected option."""

    options: tuple[str, ...]
    index: int | None = None

    def select(self, text: str) -> int | None:
        """Select the option matching text, ignoring case; leave the selection alone if none does."""
        wanted = text.casefold()
        for position, option in enumerate(self.options):
            if option.casefold() == wanted:
                self.index = position
                return position
        return None

    def selected(self) -> str:
        """The selected option's text, or an empty string when nothing is selected."""
        return "" if self.index is None else self.options[self.index]


@dataclass
class AgeSlider:
    """A slider whose position is held within its range."""

    minimum: int = AGE_MIN
    maximum: int = AGE_MAX
    position: int = AGE_START

    def set(self, value: int) -> int:
        """Move to value, clamped to the range, and return the new position."""
        self.position = max(self.minimum, min(self.maximum, value))
        return self.position


@dataclass
class SummaryPopup:
    """A secondary window showing a student's name, id, grade and major."""

    name: str = ""
    student_id: str = ""
    grade: str = ""
    major: str = ""
    visible: bool = False

    def update_fields(self, name: str, student_id: str, grade: str, major: str) -> None:
        """Replace the displayed values."""
        self.name = name
        self.student_id = student_id
        self.grade = grade
        self.major = major

    def show(self) -> None:
        """Make the popup visible."""
        self.visible = True


@dataclass
class StudentForm:
    """The main entry form."""

    name: str = ""
    student_id: str = ""
    ip: str = ""
    mac: str = ""
    subnet: str = ""
    politics: str = ""
    contact: str = ""
    grade: Choice = field(default_factory=lambda: Choice(GRADES))
    major: Choice = field(default_factory=lambda: Choice(MAJORS))
    male_checked: bool = False
    female_checked: bool = False
    slider: AgeSlider = field(default_factory=AgeSlider)
    age_text: str = str(AGE_START)
    popup: SummaryPopup | None = None

    def _apply_gender(self, line: str) -> None:
        if line == Gender.MALE.value:
            self.male_checked, self.female_checked = True, False
        elif line == Gender.FEMALE.value:
            self.male_checked, self.female_checked = False, True

    def apply_lines(self, lines: list[str]) -> None:
        """Fill the form from the lines of a record file; lines beyond the eleventh are ignored."""
        text_fields = ("name", "student_id", "ip", "mac", "subnet", "politics", "contact")
        for position, line in enumerate(lines):
            if position < len(text_fields):
                setattr(self, text_fields[position], line)
            elif position == 7:
                self.grade.select(line)
            elif position == 8:
                # The major line is also checked as a gender line.
                self.major.select(line)
                self._apply_gender(line)
            elif position == 9:
                self._apply_gender(line)
            elif position == 10:
                age = _leading_int(line)
                self.slider.set(age)
                self.age_text = str(age)

    def load(self, path: str | PathLike[str]) -> None:
        """Fill the form from a record file; an empty file changes nothing."""
        data = Path(path).read_bytes()
        if not data:
            return
        self.apply_lines(split_lines(decode_file_bytes(data)))

    def to_record(self) -> StudentRecord:
        """Collect the form's current values into a record."""
        return StudentRecord(
            name=self.name,
            student_id=self.student_id,
            ip=self.ip,
            mac=self.mac,
            subnet=self.subnet,
            politics=self.politics,
            contact=self.contact,
            grade=self.grade.selected(),
            major=self.major.selected(),
            gender=Gender.MALE if self.male_checked else Gender.FEMALE,
            age=self.slider.position,
        )

    def save(self, path: str | PathLike[str]) -> None:
        """Write the form's values to a record file, replacing any existing one."""
        Path(path).write_bytes(self.to_record().to_bytes())

    def pop_summary(self) -> SummaryPopup:
        """Show the summary popup with the current name, id, grade and major."""
        if self.popup is None:
            self.popup = SummaryPopup()
        self.popup.update_fields(
            self.name, self.student_id, self.grade.selected(), self.major.selected()
        )
        self.popup.show()
        return self.popup