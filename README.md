# studentform

A small library that models a student information entry form and
stores one student's details as a plain UTF-8 text file, one field per
line.

## What a record holds

In file order:

1. name
2. student id
3. IP address
4. physical (MAC) address
5. subnet mask
6. political status
7. contact
8. grade, one of `2021级`, `2022级`, `2023级`, `2024级`
9. major, one of `计算机科学与技术`, `软件工程`, `信息安全`, `网络工程`
10. gender, `男` or `女`
11. age, a whole number

## The file format

`StudentRecord.to_bytes()` writes a UTF-8 byte order mark followed by
the eleven values, each ending with a newline. `StudentRecord.to_text()`
gives the same text without the byte order mark. A record with no
gender set is written as `女`.

When a file is read back:

- a leading byte order mark is skipped, and the text stops at the first
  NUL byte, if any (`decode_file_bytes`);
- the text is split on newlines, empty pieces are dropped and each
  remaining line is trimmed of surrounding whitespace (`split_lines`).

Because empty lines are dropped, a record with an empty field does not
read back into the same positions.

## The form

`studentform.form.StudentForm` holds the form's state:

- seven text fields: `name`, `student_id`, `ip`, `mac`, `subnet`,
  `politics`, `contact`;
- `grade` and `major`, each a `Choice` over the fixed options above.
  `Choice.select(text)` selects the option equal to `text` ignoring
  case, and leaves the selection unchanged if none matches;
  `Choice.selected()` returns the selected text, or `""`;
- `male_checked` and `female_checked`, the two gender buttons;
- `slider`, an `AgeSlider` with range 10 to 80, starting at 20;
  `AgeSlider.set(value)` clamps to the range;
- `age_text`, the age shown next to the slider;
- `popup`, a `SummaryPopup` created on first use.

Its methods:

- `load(path)` reads a record file and fills the form. An empty file
  changes nothing. Lines past the eleventh are ignored.
- `apply_lines(lines)` does the same from a list of already split
  lines. An unknown grade or major leaves that choice as it was; a
  gender line other than `男` or `女` leaves the buttons as they were.
  The major line is also checked as a gender line. The age line is
  read as the integer at its start (0 if there is none); the slider is
  clamped to its range, while `age_text` shows the number as read.
- `to_record()` collects the current values into a `StudentRecord`,
  taking the age from the slider and the gender as `男` when the male
  button is checked and `女` otherwise.
- `save(path)` writes `to_record().to_bytes()` to `path`, replacing
  any existing file.
- `pop_summary()` fills the `SummaryPopup` with the name, id, grade and
  major, marks it visible and returns it.

## Example

```python
from studentform.form import StudentForm

form = StudentForm()
form.load("info.txt")
record = form.to_record()
print(record.to_text())
form.save("copy.txt")
```

## What it does not do

There is no window, dialog or other screen, and no command to run: the
form, its choices, slider and summary popup are plain objects holding
state. `SummaryPopup.show()` only sets its `visible` flag. There is no
file picker; `load` and `save` take a path from the caller.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.