# tests/test_cli.py

import pytest

from weton.cli import atoi, main, parse_int_strict, tools_main
from weton.core.errors import MalformedArgumentError


def test_atoi():
    assert atoi("1945") == 1945
    assert atoi("  -12abc") == -12
    assert atoi("+7") == 7
    assert atoi("17x") == 17
    assert atoi("x1") == 0
    assert atoi("") == 0
    assert atoi("- 3") == 0
    # only ASCII digits and C whitespace count
    assert atoi("\u0661\u0662") == 0
    assert atoi("\u00a012") == 0


def test_parse_int_strict():
    assert parse_int_strict(" -12 ") == -12
    with pytest.raises(MalformedArgumentError):
        parse_int_strict("12abc")
    with pytest.raises(MalformedArgumentError):
        parse_int_strict("")
    with pytest.raises(MalformedArgumentError):
        parse_int_strict("\u0661\u0662")


def test_positional(capsys):
    assert main(["17", "8", "1945"]) == 0
    assert capsys.readouterr().out == "~ Jemuwah Legi ~\n"


@pytest.mark.parametrize("argv", [[], ["17"], ["17", "8"]])
def test_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Usage: weton DAY MONTH YEAR.\n"


def test_non_numeric_day_reads_as_zero(capsys):
    assert main(["abc", "8", "1945"]) == 0
    assert capsys.readouterr().out == "~ Selasa Wage ~\n"


def test_extra_arguments_ignored(capsys):
    assert main(["17x", "8", "1945", "whatever"]) == 0
    assert capsys.readouterr().out == "~ Jemuwah Legi ~\n"


def test_negative_day(capsys):
    assert main(["-2000", "8", "1945"]) == 0
    assert capsys.readouterr().out == "~ Kemis Wage ~\n"


def test_day_subcommand(capsys):
    assert tools_main(["day", "17", "8", "1945", "--attr", "neptu"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "~ Jemuwah Legi ~"
    assert "  neptu = 11" in out


def test_day_debug(capsys):
    assert tools_main(["day", "1", "1", "2024", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "~ Senen Pahing ~" in out
    assert "'century': 20" in out


def test_day_strict_rejects(capsys):
    assert tools_main(["day", "abc", "8", "1945", "--strict"]) == 2
    assert "malformed argument 'abc'" in capsys.readouterr().err


def test_day_lenient_by_default(capsys):
    assert tools_main(["day", "abc", "8", "1945"]) == 0
    assert capsys.readouterr().out.startswith("~ Selasa Wage ~")


def test_jdn_engine_rejects_impossible_date(capsys):
    assert tools_main(["day", "31", "4", "2024", "--engine", "jdn"]) == 2
    assert "Not a Gregorian date" in capsys.readouterr().err


def test_explain(capsys):
    assert tools_main(["explain", "1", "1", "2000"]) == 0
    out = capsys.readouterr().out
    assert any(line.split() == ["key", "=", "804"] for line in out.splitlines())
    assert "Ngahad Pahing" in out


def test_next(capsys):
    assert tools_main(["next", "Senen", "Pahing", "--after", "2024-01-01", "--count", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "2024-02-05  ~ Senen Pahing ~",
        "2024-03-11  ~ Senen Pahing ~",
    ]


def test_next_unknown_name(capsys):
    assert tools_main(["next", "Senin", "Pahing", "--after", "2024-01-01"]) == 2
    assert "Unknown weekday 'Senin'" in capsys.readouterr().err


def test_engines(capsys):
    assert tools_main(["engines"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "jdn" in out and "zeller" in out


def test_month(capsys):
    assert tools_main(["month", "2024", "2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("zeller  2024-02")
    assert "Kemis" in out and "Pon" in out


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        tools_main(["--help"])
    assert exc.value.code == 0
    assert "weton DAY MONTH YEAR" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["engines"], ["--help"], ["day", "17"]])
def test_subcommand_words_are_not_special(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Usage: weton DAY MONTH YEAR.\n"


def test_subcommand_words_parse_as_zero(capsys):
    # (0, 0, 0): key 387
    assert main(["next", "Senen", "Pahing", "--after", "2024-01-01"]) == 0
    assert capsys.readouterr().out == "~ Rebo Kliwon ~\n"


def test_next_past_last_date(capsys):
    assert tools_main(["next", "Senen", "Pon", "--after", "9999-12-30"]) == 2
    assert "before 9999-12-31" in capsys.readouterr().err
