import io
import sys

import pytest
import yaml

from csv2pydantic.cli import main


@pytest.fixture
def people_csv(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("name,age\nAda,36\nGrace,\n", encoding="utf-8")
    return path


def _set_stdin(monkeypatch, text: str):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(text.encode("utf-8"))))


def test_cli_prints_model_named_after_file(people_csv, capsys):
    main([str(people_csv)])

    out = capsys.readouterr().out
    assert out == (
        "class People(BaseModel):\n"
        "    name: str\n"
        "\n"
        "    age: Optional[U8] = None\n"
    )


def test_cli_name_and_spacing_flags(people_csv, capsys):
    main([str(people_csv), "--name", "staff members", "-b", "0"])

    out = capsys.readouterr().out
    assert out.startswith("class StaffMembers(BaseModel):\n    name: str\n    age:")


def test_cli_reads_stdin(monkeypatch, capsys):
    _set_stdin(monkeypatch, "a,b\n1,-2\n")

    main(["-n", "from stdin", "-b", "0"])

    assert capsys.readouterr().out == "class FromStdin(BaseModel):\n    a: U8\n    b: I8\n"


def test_cli_stdin_requires_name(monkeypatch, capsys):
    _set_stdin(monkeypatch, "a\n1\n")

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    assert "--name is required" in capsys.readouterr().err


def test_cli_lines_limit(tmp_path, capsys):
    path = tmp_path / "values.csv"
    path.write_text("v\n1\nabc\n", encoding="utf-8")

    main([str(path), "-l", "1"])

    assert "    v: U8" in capsys.readouterr().out


def test_cli_min_fields(tmp_path, capsys):
    path = tmp_path / "report.csv"
    path.write_text("city,units\nNORTH,\nOslo,12\n", encoding="utf-8")

    main([str(path), "-s", "1", "-b", "0"])

    assert capsys.readouterr().out == "class Report(BaseModel):\n    city: str\n    units: U8\n"


def test_cli_custom_delimiter(tmp_path, capsys):
    path = tmp_path / "semi.csv"
    path.write_text("a;b\n1;2.5\n", encoding="utf-8")

    main([str(path), "-d", ";", "-b", "0"])

    assert capsys.readouterr().out == "class Semi(BaseModel):\n    a: U8\n    b: F32\n"


def test_cli_writes_output_file(people_csv, tmp_path, capsys):
    output = tmp_path / "models.py"

    main([str(people_csv), "-o", str(output)])

    assert output.read_text(encoding="utf-8").startswith("class People(BaseModel):")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[DONE]" in captured.err


def test_cli_refuses_to_overwrite(people_csv, tmp_path, capsys):
    output = tmp_path / "models.py"
    output.write_text("keep me", encoding="utf-8")

    with pytest.raises(SystemExit):
        main([str(people_csv), "-o", str(output)])

    assert output.read_text(encoding="utf-8") == "keep me"
    assert "already exists" in capsys.readouterr().err


def test_cli_force_overwrites(people_csv, tmp_path):
    output = tmp_path / "models.py"
    output.write_text("old", encoding="utf-8")

    main([str(people_csv), "-o", str(output), "-f"])

    assert output.read_text(encoding="utf-8").startswith("class People(BaseModel):")


def test_cli_force_requires_output(people_csv, capsys):
    with pytest.raises(SystemExit):
        main([str(people_csv), "-f"])

    assert "--force requires --output" in capsys.readouterr().err


def test_cli_config_file_with_override(people_csv, tmp_path, capsys):
    config = tmp_path / "options.yaml"
    config.write_text("name: Crew\nblank_lines: 0\n", encoding="utf-8")

    main([str(people_csv), "--config", str(config)])
    assert capsys.readouterr().out.startswith("class Crew(BaseModel):\n    name: str\n    age:")

    main([str(people_csv), "--config", str(config), "-b", "2"])
    assert "    name: str\n\n\n    age:" in capsys.readouterr().out


def test_cli_rejects_unknown_config_keys(people_csv, tmp_path, capsys):
    config = tmp_path / "options.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        main([str(people_csv), "--config", str(config)])

    assert "Unknown option" in capsys.readouterr().err


def test_cli_schema_dump(people_csv, capsys):
    main([str(people_csv), "--schema"])

    summary = yaml.safe_load(capsys.readouterr().out)
    assert summary["type_name"] == "People"
    assert [(f["name"], f["type"]) for f in summary["fields"]] == [
        ("name", "str"),
        ("age", "Optional[U8]"),
    ]


def test_cli_reports_row_mismatch(tmp_path, capsys):
    path = tmp_path / "broken.csv"
    path.write_text("a,b\n1,2\n3\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main([str(path)])

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "[FAILED]" in err
    assert "Row 2" in err


def test_cli_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.csv")])

    assert "[FAILED]" in capsys.readouterr().err
