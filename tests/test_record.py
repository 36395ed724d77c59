import pytest

from studentform.record import Gender, StudentRecord, decode_file_bytes, split_lines


def _sample() -> StudentRecord:
    return StudentRecord(
        name="Alice",
        student_id="S001",
        ip="192.0.2.1",
        mac="02-00-00-00-00-01",
        subnet="255.255.255.0",
        politics="none",
        contact="alice@example.com",
        grade="2022级",
        major="软件工程",
        gender=Gender.MALE,
        age=33,
    )


def test_to_text_has_eleven_lines_in_order():
    text = _sample().to_text()
    assert text.endswith("\n")
    assert text.split("\n")[:-1] == [
        "Alice",
        "S001",
        "192.0.2.1",
        "02-00-00-00-00-01",
        "255.255.255.0",
        "none",
        "alice@example.com",
        "2022级",
        "软件工程",
        "男",
        "33",
    ]


def test_to_bytes_starts_with_bom():
    data = _sample().to_bytes()
    assert data[:3] == b"\xef\xbb\xbf"
    assert data[3:] == _sample().to_text().encode("utf-8")


def test_gender_values():
    assert Gender.MALE.value == "男"
    assert Gender("女") is Gender.FEMALE


def test_decode_round_trip():
    record = _sample()
    assert decode_file_bytes(record.to_bytes()) == record.to_text()


def test_decode_without_bom():
    assert decode_file_bytes("abc\n".encode("utf-8")) == "abc\n"


def test_decode_stops_at_nul():
    assert decode_file_bytes(b"ab\0cd") == "ab"


def test_split_lines_trims_and_skips_empty():
    assert split_lines("a \r\n\n\n b\n") == ["a", "b"]


def test_split_lines_keeps_whitespace_only_lines_as_empty():
    assert split_lines("a\n \nb") == ["a", "", "b"]


@pytest.mark.parametrize("text", ["", "\n\n\n"])
def test_split_lines_empty(text):
    assert split_lines(text) == []


def test_full_round_trip():
    record = _sample()
    lines = split_lines(decode_file_bytes(record.to_bytes()))
    assert lines == record.to_text().split("\n")[:-1]