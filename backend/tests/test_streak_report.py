import importlib.util
from datetime import date
from pathlib import Path
from unittest.mock import patch
import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "streak_report.py"


@pytest.fixture(scope="module")
def report():
    spec = importlib.util.spec_from_file_location("streak_report", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestParseArgs:
    def test_user_id_only_defaults_to_utc_today(self, report):
        with patch.object(report, "utc_today", return_value=date(2026, 2, 27)):
            assert report.parse_args(["abc"]) == ("abc", date(2026, 2, 27))

    def test_today_override(self, report):
        assert report.parse_args(["abc", "--today", "2026-03-01"]) == ("abc", date(2026, 3, 1))

    def test_today_without_value_raises(self, report):
        with pytest.raises(ValueError):
            report.parse_args(["abc", "--today"])


class TestMain:
    @pytest.mark.parametrize("argv", [
        [],
        ["abc", "--today"],
        ["abc", "--today", "not-a-date"],
    ])
    def test_bad_arguments_print_usage_and_exit_1(self, report, capsys, argv):
        with patch.object(report, "run") as run:
            with pytest.raises(SystemExit) as exc:
                report.main(argv)
        assert exc.value.code == 1
        assert "Usage:" in capsys.readouterr().out
        run.assert_not_called()

    def test_valid_arguments_run_report(self, report):
        with patch.object(report, "run") as run:
            report.main(["abc", "--today", "2026-03-01"])
        run.assert_called_once_with("abc", date(2026, 3, 1))
