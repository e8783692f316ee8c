from __future__ import annotations

import pytest

from humanfmt.main import main


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HUMANFMT_CONFIG_DIR", str(tmp_path))


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["compact", "1500000"], "1.5M"),
        (["compact", "-1500", "--lower"], "-1.5k"),
        (["bytes", "1572864"], "1.5MB"),
        (["bytes", "1572864", "--detailed"], "1.5MB (1,572,864 bytes)"),
        (["bytes", "1536", "--unit", "KB", "--decimals", "2"], "1.50KB"),
        (["duration", "3661"], "00:01:01"),
        (["duration", "65", "--hide-zero"], "1:05"),
        (["duration", "90061", "--fold-days"], "25:01:01"),
        (["duration", "90061", "--labeled"], "1d01h01m01s"),
        (["duration", "3661", "--labeled", "--long-labels"], "01Hour01Minute01Second"),
        (["percent", "45.67"], "45.6%"),
        (["percent", "1", "--total", "4"], "25.0%"),
        (["grouped", "1234567", "--grouping", "de"], "1.234.567"),
    ],
)
def test_main_formats_value(argv: list[str], expected: str, capsys) -> None:
    assert main(argv) == 0
    assert capsys.readouterr().out == f"{expected}\n"


def test_main_reports_user_errors(capsys) -> None:
    assert main(["percent", "1", "--total", "0"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: Total must not be zero." in captured.err


def test_main_rejects_unparsable_value(capsys) -> None:
    assert main(["compact", "lots"]) == 2
    assert "Not a number: lots" in capsys.readouterr().err


def test_main_uses_settings_file(tmp_path, write_json, capsys) -> None:
    write_json(tmp_path / "settings.json", {"decimal_places": 2, "grouping": "ch"})
    assert main(["compact", "1500"]) == 0
    assert main(["bytes", "1572864", "--detailed"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["1.50K", "1.50MB (1'572'864 bytes)"]


def test_main_reports_broken_settings(tmp_path, capsys) -> None:
    config = tmp_path / "custom.json"
    config.write_text("[", encoding="utf-8")
    assert main(["compact", "1500", "--config", str(config)]) == 2
    assert "Settings file is not valid JSON" in capsys.readouterr().err


def test_main_reports_non_utf8_settings(tmp_path, capsys) -> None:
    config = tmp_path / "custom.json"
    config.write_bytes(b'{"decimal_places": "\xff"}')
    assert main(["compact", "1500", "--config", str(config)]) == 2
    assert "not valid UTF-8" in capsys.readouterr().err


def test_main_formats_very_large_values(capsys) -> None:
    assert main(["compact", "1e80"]) == 0
    assert capsys.readouterr().out == "1" + "0" * 65 + ".0Q\n"


def test_main_rejects_out_of_range_values(capsys) -> None:
    assert main(["compact", "1e5000"]) == 2
    assert "too large or too small" in capsys.readouterr().err


def test_main_duration_zero_units_follow_settings(tmp_path, write_json, capsys) -> None:
    write_json(tmp_path / "settings.json", {"time": {"show_zero_units": True}})
    assert main(["duration", "3661", "--labeled"]) == 0
    assert main(["duration", "3661", "--labeled", "--hide-zero"]) == 0
    assert main(["duration", "65"]) == 0

    write_json(tmp_path / "settings.json", {"time": {"show_zero_units": False}})
    assert main(["duration", "65"]) == 0
    assert main(["duration", "65", "--show-zero"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["0d01h01m01s", "01h01m01s", "00:01:05", "1:05", "00:01:05"]


def test_main_duration_zero_flags_are_exclusive(capsys) -> None:
    with pytest.raises(SystemExit):
        main(["duration", "65", "--show-zero", "--hide-zero"])
