import io

import pytest

from sitekit.webgen import (
    KEYWORDS,
    MAX_TEMPLATE_LINES,
    main,
    process_map,
    read_template,
    usage,
)


def _run_map(text):
    return "".join(process_map(io.StringIO(text)))


def test_read_template_records_keyword_lines():
    lines = ["<img src=IMAGE>\n", "You face FACING.\n", "DESCRIPTION\n"]
    template = read_template(io.StringIO("".join(lines)))
    assert template.lines == lines
    for number, keyword in enumerate(["IMAGE", "FACING", "DESCRIPTION"]):
        assert template.keylines[keyword] == number
    assert "BACK" not in template.keylines


def test_read_template_duplicate_keeps_first(capsys):
    template = read_template(io.StringIO("IMAGE one\nplain\nIMAGE two\n"))
    assert template.keylines["IMAGE"] == 0
    assert "Duplicated keyword - ignoring." in capsys.readouterr().err


def test_read_template_every_keyword():
    text = "".join(f"{keyword}\n" for keyword in KEYWORDS)
    template = read_template(io.StringIO(text))
    assert template.keylines == {keyword: index for index, keyword in enumerate(KEYWORDS)}


def test_read_template_limit(capsys):
    text = "line\n" * (MAX_TEMPLATE_LINES + 10)
    template = read_template(io.StringIO(text))
    assert len(template.lines) == MAX_TEMPLATE_LINES
    assert "Template file too big - ignoring." in capsys.readouterr().err


def test_process_map_overrides_and_rooms():
    output = _run_map("1,2,3,4\nTITLE hall\n5,6,7,8\n")
    assert output == (
        "Override? --> TITLE hall\n"
        "Writing .htm file...\n"
        "1 lines processed.\n"
    )


def test_process_map_comment():
    output = _run_map("* first room\n1,2,3,4\n")
    assert output.startswith("Comment:  first room\n")
    assert output.endswith("1 lines processed.\n")


def test_process_map_spaces_before_numbers_allowed():
    assert _run_map("1, 2, 3, 4\n") == "1 lines processed.\n"


def test_process_map_bad_room():
    with pytest.raises(ValueError, match=r"Error in \.map file on line 1\."):
        _run_map("1,2\n")


def test_process_map_space_before_comma_rejected():
    with pytest.raises(ValueError):
        _run_map("1 ,2,3,4\n")


def test_process_map_ignores_stray_text_before_rooms():
    assert _run_map("abc\n") == "1 lines processed.\n"


def test_usage_on_stderr(capsys):
    usage()
    assert "Syntax: WebGen {-opts} [templatefile]" in capsys.readouterr().err


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert "HTML adventure generator." in capsys.readouterr().err


def test_main_unknown_option(capsys):
    assert main(["-q"]) == 0
    assert "Unrecognized option: -q" in capsys.readouterr().err


def test_main_empty_basename(capsys):
    assert main([""]) == 1
    assert "Error - no basename!" in capsys.readouterr().err


def test_main_missing_template(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["room"]) == 1
    assert "Error opening template file." in capsys.readouterr().err


def test_main_missing_map(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "room.tem").write_text("IMAGE\n")
    assert main(["room"]) == 0
    assert "Unable to open map file 'room.map'..." in capsys.readouterr().err


def test_main_processes_map(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "room.tem").write_text("IMAGE\nFACING\n")
    map_text = "1,2,3,4\nTITLE hall\n5,6,7,8\n"
    (tmp_path / "room.map").write_text(map_text)
    assert main(["room"]) == 0
    assert capsys.readouterr().out == _run_map(map_text)


def test_main_reports_bad_map(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "room.tem").write_text("IMAGE\n")
    (tmp_path / "room.map").write_text("1,2\n")
    assert main(["room"]) == 0
    assert "Error in .map file on line 1." in capsys.readouterr().err