import pytest

from slstatus import config
from slstatus.cli import Options, main, parse_args, render_status
from slstatus.config import Arg


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], Options(to_stdout=False, once=False)),
        (["-s"], Options(to_stdout=True, once=False)),
        (["-1"], Options(to_stdout=True, once=True)),
        (["-s1"], Options(to_stdout=True, once=True)),
        (["-s", "-1"], Options(to_stdout=True, once=True)),
        (["--"], Options(to_stdout=False, once=False)),
        (["-s", "--"], Options(to_stdout=True, once=False)),
    ],
)
def test_parse_args_accepts_flags(argv, expected):
    assert parse_args(argv) == expected


@pytest.mark.parametrize(
    "argv", [["-x"], ["-sx"], ["extra"], ["-s", "extra"], ["-"], ["--x"], ["--", "-s"]]
)
def test_parse_args_rejects_misuse(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(argv)
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("usage: slstatus [-v] [-s] [-1]")


def test_version_flag_prints_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["-sv"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err == f"slstatus-{config.VERSION}\n"


def test_render_status_joins_entries_in_order():
    entries = [
        Arg(lambda a: "one", "A[%s]"),
        Arg(lambda a: "two", " B[%s%%]"),
    ]
    assert render_status(entries, "n/a") == "A[one] B[two%]"


def test_render_status_uses_unknown_for_missing_values():
    entries = [Arg(lambda a: None, "<%s>"), Arg(lambda a: "", "<%s>")]
    assert render_status(entries, "?") == "<?><>"


def test_render_status_passes_argument():
    entries = [Arg(lambda a: a.upper(), "%s", "wlan0")]
    assert render_status(entries, "n/a") == "WLAN0"


def test_render_status_truncates_at_maxlen(capsys):
    entries = [
        Arg(lambda a: "ab", "%s"),
        Arg(lambda a: "y" * (config.MAXLEN * 2), "%s"),
        Arg(lambda a: "never", "%s"),
    ]
    status = render_status(entries, "n/a")
    assert len(status.encode()) == config.MAXLEN - 1
    assert status.startswith("ab")
    assert "never" not in status
    assert "Output truncated" in capsys.readouterr().err


def test_render_status_stops_at_bad_format(capsys):
    entries = [
        Arg(lambda a: "ok", "%s"),
        Arg(lambda a: "x", "%d"),
        Arg(lambda a: "later", "%s"),
    ]
    assert render_status(entries, "n/a") == "ok"
    assert capsys.readouterr().err.startswith("vsnprintf:")


def test_main_once_prints_one_status_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.startswith("CPU: [")
    assert "MEM: [" in out
    assert "UPTIME: [" in out


def test_main_without_display_fails(monkeypatch, capsys):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1
    assert "XOpenDisplay: Failed to open display" in capsys.readouterr().err


def test_main_reports_usage_for_extra_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-1", "extra"])
    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().err