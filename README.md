# studentroster

A small tool for a class roster that is kept in a plain text file. It can list the students, search them by name, filter them by average score, remove one, sort them by average and write the roster back out.

## Data format

Each student is one line with six fields separated by `-`:

```
1001-Nguyen Van A-2003-7.5-8-9
1002-Pham Van C-2004-6-7.25-8.5
```

The fields are, in order:

1. student id
2. name
3. year of birth
4. first score
5. second score
6. third score

Any line that does not start with a digit is skipped, so headers and comments can stay in the file. Because `-` separates the fields, a name cannot contain a dash.

The year and the scores are read from the start of their field. Anything that follows the number in the same field is ignored. If a numeric field is missing or does not start with a number, the line raises `ValueError`.

When records are written back, the scores are in their shortest form. For example, `8.0` is written as `8`.

## Command line

```
studentroster [-i INPUT] [-o OUTPUT] [--name NAME] [--threshold T] [--remove ID] [--limit N]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `-i`, `--input` | `Data.txt` | data file to read |
| `-o`, `--output` | `SV.txt` | file to write; it is overwritten |
| `--name` | asked for | name to search for |
| `--threshold` | asked for | averages strictly above it are listed |
| `--remove` | asked for | id of the student to delete |
| `--limit` | 100 | most students to load |

The command runs these steps in order:

1. It loads the input file. If the limit is reached, it says so. It then prints the roster, with each student's scores and average to two decimals.
2. It shows every student whose name matches the given name exactly.
3. It lists every student whose average is above the threshold.
4. It removes the first student with the given id, or reports that there is none. Then it prints the roster again.
5. It sorts the roster by average, highest first, and prints it.
6. It writes the roster to the output file.

If you leave out `--name`, `--threshold` or `--remove`, the command asks for that value on standard input.

Exit status:

| Status | Meaning |
| --- | --- |
| 0 | the run succeeded |
| 1 | the input file could not be read, or the output file could not be written |
| 2 | the threshold typed at the prompt is not a number |

## Library use

```python
from studentroster.roster import Roster

roster = Roster()                 # capacity defaults to 100
roster.load("Data.txt")           # returns how many students were added
print(roster.format_table())

for student in roster.find_by_name("Pham Van C"):
    print(student.format_row())

for student in roster.above_average(8.0):
    print(student.student_id, student.average())

roster.remove("1003")             # raises KeyError if no student has this id
roster.sort_by_average_desc()
roster.save("SV.txt")
```

### `Roster`

`Roster` is built with an iterable of students and a `capacity`. Students beyond the capacity are dropped.

A roster supports `len()` and iteration. It also has an `is_full` property and a `students` list.

`load()` appends students from a file, up to the remaining room. If the file cannot be opened, it raises `OSError`.

### `studentroster.models`

- `Student` is a dataclass with the fields `student_id`, `name`, `birth_year`, `score1`, `score2` and `score3`. Its methods are:
  - `average()` returns the mean of the three scores.
  - `format_row()` returns a tab-separated display line ending in `DTB: <average>`.
  - `to_record()` returns the dash-separated line written to a data file.
  - `Student.from_line(line)` parses one such line.
- `is_student_line(line)` returns true when the line starts with a digit.
- `parse_students(lines, limit=100)` parses records from an iterable of lines and stops after `limit` students.
- `read_students(path, limit=100)` does the same for a UTF-8 file.

## What it does not do

The roster lives only in memory while a program runs. It is kept on disk solely as the dash-separated text file described above.

The package has none of the following:

- no interactive menu
- no way to edit a student's fields in place
- no searching by anything other than an exact name

## Tests

```
pip install -e .[test]
pytest
```