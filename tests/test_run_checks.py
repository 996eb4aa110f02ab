import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import run_checks


def test_run_prints_suite_titles(capsys):
    run_checks.run(["fixed", "small"])
    out = capsys.readouterr().out
    assert "[check] Small tests..." in out
    assert "Medium tests" not in out


def test_main_reports_success(monkeypatch, capsys):
    monkeypatch.setattr(run_checks, "SUITES", ["fixed"])
    run_checks.main()
    assert "[check] All tests passed." in capsys.readouterr().out


def test_main_exits_on_wrong_solution(monkeypatch, capsys):
    monkeypatch.setattr(run_checks, "SUITES", ["fixed"])
    monkeypatch.setattr(run_checks, "solve", lambda items, capacity: [False] * len(items))
    with pytest.raises(SystemExit) as exc:
        run_checks.main()
    assert exc.value.code == 1
    assert "FAILED fixed[2]: Expected value 5 but got 0." in capsys.readouterr().err
