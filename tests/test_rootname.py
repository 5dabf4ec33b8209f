import io
import subprocess

import pytest

from sitekit.rootname import main, number_suffix, parse_dir_line, rename_plan


def dir_line(name, ext, marker=" "):
    cells = list(" " * 45)
    cells[0 : len(name)] = name
    cells[9 : 9 + len(ext)] = ext
    cells[15] = marker
    cells[20:26] = "12,345"
    cells[39] = ":"
    return "".join(cells) + "\n"


def test_first_number_is_all_zeros():
    assert number_suffix(1) == "000"


def test_suffixes_are_three_digits_and_increasing():
    values = [number_suffix(n) for n in range(1, 1000)]
    assert all(len(v) == 3 and v.isdigit() for v in values)
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_number_above_limit_rejected():
    with pytest.raises(ValueError):
        number_suffix(1000)


def test_parse_file_line():
    assert parse_dir_line(dir_line("AUG23_01", "JPG")) == ("AUG23_01.JPG", "JPG")


def test_parse_skips_directory_entry():
    assert parse_dir_line(dir_line("IMAGES", "", marker="<")) is None


def test_parse_skips_short_line():
    assert parse_dir_line(" Volume in drive C is DISK\n") is None


def test_parse_skips_line_without_time():
    line = dir_line("AUG23_01", "JPG").replace(":", " ")
    assert parse_dir_line(line) is None


def test_rename_plan_numbers_files_in_order():
    lines = [
        " Directory of C:\\PHOTOS\n",
        dir_line("AUG23_01", "JPG"),
        dir_line("PHOTOS", "", marker="<"),
        dir_line("AUG23_02", "JPG"),
    ]
    plan = rename_plan(lines, "MYCATS")
    assert [old for old, _ in plan] == ["AUG23_01.JPG", "AUG23_02.JPG"]
    assert plan[0][1] == "MYCATS000.JPG"
    assert [new for _, new in plan] == [
        "MYCATS" + number_suffix(1) + ".JPG",
        "MYCATS" + number_suffix(2) + ".JPG",
    ]


def test_main_without_arguments_fails():
    assert main([]) == 1


def test_main_unknown_option_fails(capsys):
    assert main(["-q", "ROOT"]) == 1
    assert "Unrecognized option: -q" in capsys.readouterr().err


def test_main_filter_mode_lists_renames(monkeypatch, capsys):
    listing = dir_line("AUG23_01", "JPG") + dir_line("AUG23_02", "GIF")
    monkeypatch.setattr("sys.stdin", io.StringIO(listing))
    assert main(["-z", "MYCATS"]) == 0
    out = capsys.readouterr().out
    assert "rename AUG23_01.JPG MYCATS000.JPG" in out
    assert "rename AUG23_02.GIF MYCATS" + number_suffix(2) + ".GIF" in out
    assert "3 directory entries processed." in out


def test_main_runs_dir_without_filter_mode(monkeypatch, capsys):
    listing = dir_line("AUG23_01", "JPG")

    def fake_run(*args, **kwargs):
        return subprocess.CompletedProcess(args, 0, stdout=listing, stderr="")

    monkeypatch.setattr("sitekit.rootname.subprocess.run", fake_run)
    assert main(["MYCATS"]) == 0
    assert "rename AUG23_01.JPG MYCATS000.JPG" in capsys.readouterr().out


def test_main_performs_renames(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "AUG23_01.JPG").write_text("picture")
    monkeypatch.setattr("sys.stdin", io.StringIO(dir_line("AUG23_01", "JPG")))
    assert main(["-z", "-x", "MYCATS"]) == 0
    assert (tmp_path / "MYCATS000.JPG").read_text() == "picture"
    assert not (tmp_path / "AUG23_01.JPG").exists()


def test_main_rename_failure_reported(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(dir_line("MISSING", "JPG")))
    assert main(["-z", "-x", "MYCATS"]) == 1