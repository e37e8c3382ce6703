import json
from pathlib import Path

from pitchfit.cli import main


def _write_roster(tmp_path: Path) -> Path:
    path = tmp_path / "roster.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Keeper", "position": "GK"},
                {"name": "Wide", "position": "LM"},
                {"name": "Engine", "position": "CM/DM"},
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_positions_command(capsys):
    assert main(["positions", "Centre Back", "Sweeper"]) == 0
    out = capsys.readouterr().out
    assert "Centre Back: CB (DF)" in out
    assert "Sweeper: Sweeper (Unknown)" in out


def test_flex_command_single_player(tmp_path: Path, capsys):
    roster = _write_roster(tmp_path)
    assert main(["flex", str(roster), "--player", "Engine"]) == 0
    out = capsys.readouterr().out
    assert "Engine" in out
    assert "Keeper" not in out


def test_fit_command_writes_report(tmp_path: Path, capsys):
    roster = _write_roster(tmp_path)
    report = tmp_path / "fit.json"
    assert main(["fit", str(roster), "--formation", "4-4-2", "--report", str(report)]) == 0
    assert "4/11 slots covered (36%)" in capsys.readouterr().out

    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["compatibility_score"] == 36
    assert len(payload["slots"]) == 11


def test_compare_command_rejects_four_names(capsys):
    assert main(["compare", "4-4-2", "4-3-3", "3-5-2", "5-4-1"]) == 2
    assert "error" in capsys.readouterr().err


def test_missing_roster_exits_with_error(tmp_path: Path, capsys):
    assert main(["flex", str(tmp_path / "missing.json")]) == 2


def test_formations_command_with_tables_profile(tmp_path: Path, capsys):
    profile = tmp_path / "tables.json"
    profile.write_text(json.dumps({"aliases": {"CF": {"variations": ["CF", "ST", "Nine"]}}}), encoding="utf-8")
    assert main(["--tables", str(profile), "formations"]) == 0
    out = capsys.readouterr().out
    assert "4-4-2" in out
    assert "Layouts:" in out
