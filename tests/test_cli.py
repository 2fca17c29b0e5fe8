from tests._shared_cases import CANONICAL_CASES, MESSY_TRADER, MESSY_TRADER_FORMATTED
from traderfmt.cli import main


def test_formats_file_to_stdout(tmp_path, capsys) -> None:
    path = tmp_path / "TraderConfig.txt"
    path.write_text(MESSY_TRADER, encoding="utf-8")

    assert main([str(path)]) == 0

    captured = capsys.readouterr()
    assert captured.out == MESSY_TRADER_FORMATTED
    assert captured.err == ""
    # Output goes to stdout only; the file is untouched.
    assert path.read_text(encoding="utf-8") == MESSY_TRADER


def test_indent_style_flag(tmp_path, capsys) -> None:
    path = tmp_path / "t.txt"
    path.write_text("<Trader> T\n// note\n", encoding="utf-8")

    assert main([str(path), "--indent-style", "mixed"]) == 0
    assert capsys.readouterr().out == "<Trader> T \n    \t// note\n\n"


def test_dump_tokens_flag(tmp_path, capsys) -> None:
    path = tmp_path / "t.txt"
    path.write_text(CANONICAL_CASES[2].source, encoding="utf-8")

    assert main([str(path), "--dump-tokens"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Trader text='Bob'"
    assert lines[1] == "  Comment message='stock list'"
    assert lines[2] == "  Category text='Weapons' comment='guns'"
    assert lines[3] == "    Item values=['AK47', '10', '100', '50']"


def test_missing_file_fails_without_output(tmp_path, capsys) -> None:
    missing = tmp_path / "nope.txt"

    assert main([str(missing)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error[IO_INVALID_PATH]" in captured.err
    assert captured.err.startswith(str(missing))


def test_parse_error_is_reported_with_location(tmp_path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("<Trader> T\n    <Category> Food\n        Apple,5,1\n", encoding="utf-8")

    assert main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == (
        f"{path}:3:9: error[PARSER_MALFORMED_CATEGORY_ROW]: "
        "Malformed category row: expected 4 comma-separated fields. "
        "Got 3 field(s) in `Apple,5,1`."
    )
