import io

import pytest

from studentroster.cli import main
from studentroster.models import read_students

DATA = (
    "Danh sach lop\n"
    "1001-Nguyen Van A-2003-7-8-9\n"
    "1002-Tran Thi B-2004-9-9.5-10\n"
    "1003-Pham Van C-2003-5-6-7\n"
)


@pytest.fixture
def files(tmp_path):
    data = tmp_path / "Data.txt"
    data.write_text(DATA, encoding="utf-8")
    return data, tmp_path / "SV.txt"


def test_main_with_options(files, capsys):
    data, out = files
    status = main(
        [
            "--input", str(data),
            "--output", str(out),
            "--name", "Pham Van C",
            "--threshold", "8",
            "--remove", "1003",
        ]
    )
    assert status == 0
    text = capsys.readouterr().out
    assert "Da xoa sinh vien co ma: 1003" in text
    assert "Da sap xep sinh vien theo DTB giam dan." in text
    assert f"Da ghi thong tin sinh vien vao file {out}" in text
    saved = read_students(out)
    assert [s.student_id for s in saved] == ["1002", "1001"]


def test_main_reports_missing_name_and_id(files, capsys):
    data, out = files
    status = main(
        [
            "--input", str(data),
            "--output", str(out),
            "--name", "Nobody",
            "--threshold", "0",
            "--remove", "9999",
        ]
    )
    assert status == 0
    text = capsys.readouterr().out
    assert "Khong tim thay sinh vien nao." in text
    assert "Khong tim thay sinh vien co ma: 9999" in text
    assert len(read_students(out)) == 3


def test_main_interactive(files, capsys, monkeypatch):
    data, out = files
    monkeypatch.setattr("sys.stdin", io.StringIO("Tran Thi B\n9\n1001\n"))
    status = main(["--input", str(data), "--output", str(out)])
    assert status == 0
    text = capsys.readouterr().out
    assert "SINH VIEN CO TEN Tran Thi B:" in text
    assert [s.student_id for s in read_students(out)] == ["1002", "1003"]


def test_main_bad_threshold(files, monkeypatch):
    data, out = files
    monkeypatch.setattr("sys.stdin", io.StringIO("X\nabc\n"))
    assert main(["--input", str(data), "--output", str(out)]) == 2
    assert not out.exists()


def test_main_missing_input(tmp_path, capsys):
    status = main(["--input", str(tmp_path / "none.txt"), "--output", str(tmp_path / "o.txt")])
    assert status == 1
    assert "Khong mo duoc file!" in capsys.readouterr().out


def test_main_limit_warning(files, capsys):
    data, out = files
    status = main(
        [
            "--input", str(data),
            "--output", str(out),
            "--limit", "2",
            "--name", "X",
            "--threshold", "0",
            "--remove", "0",
        ]
    )
    assert status == 0
    assert "Da vuot qua so luong sinh vien cho phep!" in capsys.readouterr().out
    assert len(read_students(out)) == 2