import json
import os
from unittest.mock import patch

import pytest

from monthgrid._cli import cli, render_text
from monthgrid import get_month_days

# _cli is an internal module. These tests verify private behavior and may
# need updating if the internal module structure changes.


def _run(capsys, *argv):
    with patch("sys.argv", ["monthgrid", *argv]):
        cli()
    return capsys.readouterr().out


def test_cli_loads_dotenv(cli_env, capsys):
    _run(capsys, "--date", "2024-02-01")
    cli_env.assert_called_once_with()


def test_cli_default_json_output(cli_env, capsys):
    output = json.loads(_run(capsys, "--date", "2024-02-01"))

    assert len(output) == 33
    assert output[:4] == [None, None, None, None]
    assert output[4] == {
        "text": "1",
        "day": 1,
        "date": "2024-02-01",
        "disabled": False,
        "isCurrentMonth": True,
    }


def test_cli_full_days_and_first_day_of_week(cli_env, capsys):
    output = json.loads(
        _run(capsys, "--date", "2024-02-01", "--full-days", "--first-day-of-week", "1")
    )

    assert len(output) == 35
    assert output[0]["date"] == "2024-01-29"
    assert output[0]["isCurrentMonth"] is False


def test_cli_min_and_max_dates(cli_env, capsys):
    output = json.loads(
        _run(
            capsys,
            "--date",
            "2024-03-01",
            "--min-date",
            "2024-03-10",
            "--max-date",
            "2024-03-20",
        )
    )
    cells = {cell["date"]: cell for cell in output if cell is not None}

    assert cells["2024-03-09"]["disabled"] is True
    assert cells["2024-03-10"]["disabled"] is False
    assert cells["2024-03-20"]["disabled"] is False
    assert cells["2024-03-21"]["disabled"] is True


def test_cli_text_output(cli_env, capsys):
    lines = _run(capsys, "--date", "2024-02-01", "--format", "text").splitlines()

    assert lines[0].split() == ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]
    assert lines[1].split() == ["1", "2", "3"]
    assert lines[-1].split() == ["25", "26", "27", "28", "29"]
    assert len(lines) == 6


def test_cli_text_output_marks_disabled_days(cli_env, capsys):
    lines = _run(
        capsys, "--date", "2024-02-01", "--min-date", "2024-02-02", "--format", "text"
    ).splitlines()
    assert lines[1].split() == ["(1)", "2", "3"]


def test_render_text_rotates_header():
    grid = get_month_days("2024-02-01", first_day_of_week=1)
    lines = render_text(grid, 1).splitlines()
    assert lines[0].split() == ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
    assert lines[1].split() == ["1", "2", "3", "4"]


def test_cli_years(cli_env, capsys):
    output = json.loads(
        _run(capsys, "--years", "--min-date", "2000-01-01", "--max-date", "2005-06-01")
    )
    assert output == [2000, 2001, 2002, 2003, 2004, 2005]


def test_cli_years_truncated(cli_env, capsys):
    output = json.loads(
        _run(capsys, "--years", "--min-date", "2000-01-01", "--max-date", "2030-01-01")
    )
    assert output == list(range(2000, 2010))


def test_cli_years_requires_bounds(cli_env, capsys):
    with (
        patch("sys.argv", ["monthgrid", "--years", "--min-date", "2000-01-01"]),
        pytest.raises(SystemExit, match="1"),
    ):
        cli()
    output = json.loads(capsys.readouterr().out)
    assert "--years requires" in output["error"]


def test_cli_invalid_date(cli_env, capsys):
    with (
        patch("sys.argv", ["monthgrid", "--date", "yesterday"]),
        pytest.raises(SystemExit, match="1"),
    ):
        cli()
    output = json.loads(capsys.readouterr().out)
    assert "Invalid date" in output["error"]


def test_cli_first_day_of_week_out_of_range(cli_env):
    with (
        patch("sys.argv", ["monthgrid", "--first-day-of-week", "7"]),
        pytest.raises(SystemExit, match="2"),
    ):
        cli()


# --- Environment configuration ---


def test_cli_env_defaults(cli_env, capsys):
    with patch.dict(
        os.environ,
        {"MONTHGRID_FULL_DAYS": "true", "MONTHGRID_FIRST_DAY_OF_WEEK": "1"},
    ):
        output = json.loads(_run(capsys, "--date", "2024-02-01"))

    assert len(output) == 35
    assert output[0]["date"] == "2024-01-29"


def test_cli_env_bounds(cli_env, capsys):
    with patch.dict(
        os.environ,
        {"MONTHGRID_MIN_DATE": "2024-02-10", "MONTHGRID_MAX_DATE": "2024-02-20"},
    ):
        output = json.loads(_run(capsys, "--date", "2024-02-01"))
    cells = {cell["date"]: cell for cell in output if cell is not None}

    assert cells["2024-02-09"]["disabled"] is True
    assert cells["2024-02-10"]["disabled"] is False
    assert cells["2024-02-21"]["disabled"] is True


def test_cli_flags_override_env(cli_env, capsys):
    with patch.dict(
        os.environ,
        {"MONTHGRID_FIRST_DAY_OF_WEEK": "1", "MONTHGRID_MIN_DATE": "2024-02-10"},
    ):
        output = json.loads(
            _run(
                capsys,
                "--date",
                "2024-02-01",
                "--first-day-of-week",
                "0",
                "--min-date",
                "2024-02-01",
            )
        )

    assert output[:4] == [None, None, None, None]
    assert not any(cell["disabled"] for cell in output if cell is not None)


@pytest.mark.parametrize("full_days", ["0", "false", "no", ""])
def test_cli_env_full_days_falsy(cli_env, capsys, full_days):
    with patch.dict(os.environ, {"MONTHGRID_FULL_DAYS": full_days}):
        output = json.loads(_run(capsys, "--date", "2024-02-01"))
    assert len(output) == 33


def test_cli_env_invalid_first_day_of_week(cli_env, capsys):
    with (
        patch.dict(os.environ, {"MONTHGRID_FIRST_DAY_OF_WEEK": "monday"}),
        patch("sys.argv", ["monthgrid", "--date", "2024-02-01"]),
        pytest.raises(SystemExit, match="1"),
    ):
        cli()
    output = json.loads(capsys.readouterr().out)
    assert "MONTHGRID_FIRST_DAY_OF_WEEK" in output["error"]


def test_cli_env_first_day_of_week_out_of_range(cli_env, capsys):
    with (
        patch.dict(os.environ, {"MONTHGRID_FIRST_DAY_OF_WEEK": "9"}),
        patch("sys.argv", ["monthgrid", "--date", "2024-02-01"]),
        pytest.raises(SystemExit, match="1"),
    ):
        cli()
    output = json.loads(capsys.readouterr().out)
    assert "between 0 and 6" in output["error"]


def test_cli_verbose_enables_debug_logging(cli_env, capsys):
    with patch("monthgrid._cli.logging.basicConfig") as mock_config:
        _run(capsys, "--date", "2024-02-01", "--verbose")
    mock_config.assert_called_once()
