"""The student record and its plain-text file format."""

from __future__ import annotations

import enum
from dataclasses import dataclass

UTF8_BOM = b"\xef\xbb\xbf"


class Gender(enum.Enum):
    """Gender as it is written in the record file."""

    MALE = "男"
    FEMALE = "女"


@dataclass
class StudentRecord:
    """One student's details, in the order they appear in the file."""

    name: str = ""
    student_id: str = ""
    ip: str = ""
    mac: str = ""
    subnet: str = ""
    politics: str = ""
    contact: str = ""
    grade: str = ""
    major: str = ""
    gender: Gender = Gender.FEMALE
    age: int = 20

    def to_text(self) -> str:
        """Render the record as one value per line, each line ending in a newline."""
        values = (
            self.name,
            self.student_id,
            self.ip,
            self.mac,
            self.subnet,
            self.politics,
            self.contact,
            self.grade,
            self.major,
            self.gender.value,
            str(self.age),
        )
        return "".join(f"{value}\n" for value in values)

    def to_bytes(self) -> bytes:
        """Encode the record as UTF-8 preceded by a byte-order mark."""
        return UTF8_BOM + self.to_text().encode("utf-8")


def decode_file_bytes(data: bytes) -> str:
    """Decode file contents as UTF-8, dropping a leading BOM.

    The text ends at the first NUL byte, if there is one.
    """
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM):]
    data = data.split(b"\0", 1)[0]
    return data.decode("utf-8", errors="replace")


def split_lines(text: str) -> list[str]:
    """Split text on newlines, skipping empty pieces and trimming whitespace."""
    return [piece.strip() for piece in text.split("\n") if piece]