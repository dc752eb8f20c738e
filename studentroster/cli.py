"""Command line: load a roster, query it, edit it and save it."""

from __future__ import annotations

import argparse
import sys

from .models import DEFAULT_LIMIT
from .roster import Roster


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studentroster", description="Manage a list of students."
    )
    parser.add_argument("-i", "--input", default="Data.txt", help="data file to read")
    parser.add_argument("-o", "--output", default="SV.txt", help="file to write")
    parser.add_argument("--name", help="name to search for")
    parser.add_argument("--threshold", type=float, help="minimum average (exclusive)")
    parser.add_argument("--remove", metavar="ID", help="id of the student to delete")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help="maximum students")
    return parser


def _print_students(students) -> None:
    for student in students:
        print(student.format_row())


def main(argv: list[str] | None = None) -> int:
    """Run the roster workflow; return the exit status."""
    args = _build_parser().parse_args(argv)

    roster = Roster(capacity=args.limit)
    try:
        roster.load(args.input)
    except OSError:
        print("Khong mo duoc file!")
        return 1
    if roster.is_full:
        print("Da vuot qua so luong sinh vien cho phep!")

    print(roster.format_table())

    name = args.name
    if name is None:
        name = input("Nhap ten sinh vien can tim: ")
    print(f"\t SINH VIEN CO TEN {name}:")
    matches = roster.find_by_name(name)
    if matches:
        _print_students(matches)
    else:
        print("Khong tim thay sinh vien nao.")

    threshold = args.threshold
    if threshold is None:
        raw = input("Nhap diem trung binh: ")
        try:
            threshold = float(raw)
        except ValueError:
            print(f"Diem khong hop le: {raw}", file=sys.stderr)
            return 2
    print(f"\t SINH VIEN CO DIEM TB > {threshold:.2f}:")
    _print_students(roster.above_average(threshold))

    student_id = args.remove
    if student_id is None:
        student_id = input("Nhap ma sinh vien can xoa: ")
    try:
        roster.remove(student_id)
        print(f"\nDa xoa sinh vien co ma: {student_id}")
    except KeyError:
        print(f"\nKhong tim thay sinh vien co ma: {student_id}")
    print(roster.format_table())

    roster.sort_by_average_desc()
    print("\nDa sap xep sinh vien theo DTB giam dan.")
    print(roster.format_table())

    try:
        roster.save(args.output)
    except OSError:
        print("Khong mo duoc file!")
        return 1
    print(f"\nDa ghi thong tin sinh vien vao file {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())