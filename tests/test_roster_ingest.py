import json
import logging
from pathlib import Path

import pytest

from pitchfit.ingest import (
    group_by_position,
    load_roster,
    load_roster_json,
    load_roster_with_report,
    roster_from_grouped,
    roster_from_records,
)
from pitchfit.models import Player


def _grouped():
    return {
        "GK": ["Alisson"],
        "DF": {"CB": ["Van Dijk", "Konate"], "Left Back": ["Robertson"]},
        "MF": {"CM": ["Mac Allister"], "CDM": ["Mac Allister", "Endo"]},
        "FW": ["Salah"],
    }


def test_grouped_roster_merges_names():
    roster = roster_from_grouped(_grouped())
    by_name = {player.name: player for player in roster}
    assert len(roster) == 7
    assert by_name["Robertson"].positions == ("LB",)
    assert by_name["Mac Allister"].positions == ("CM", "DM")
    assert by_name["Mac Allister"].primary_position == "CM"


def test_flat_category_list_tags_category_label():
    roster = roster_from_grouped(_grouped())
    salah = next(player for player in roster if player.name == "Salah")
    assert salah.positions == ("FW",)


def test_record_roster_splits_position_strings():
    roster = roster_from_records(
        [
            {"name": "Trent", "position": "RB/RWB"},
            {"name": "Nunez", "positions": ["st", "Winger"]},
            {"name": "Gakpo", "position": "LW, CF"},
        ]
    )
    assert [player.positions for player in roster] == [("RB", "RWB"), ("CF", "Winger"), ("LW", "CF")]


def test_rows_without_name_or_positions_are_skipped(caplog):
    records = [
        {"name": "", "position": "CB"},
        {"name": "Benchwarmer"},
        {"name": "Gomez", "position": "CB"},
    ]
    with caplog.at_level(logging.WARNING):
        roster, report = load_roster_with_report(records)
    assert [player.name for player in roster] == ["Gomez"]
    assert report.total_rows == 3
    assert report.players == 1
    assert report.skipped_rows == ["<missing name>", "Benchwarmer"]
    assert "Benchwarmer" in caplog.text


def test_load_roster_unwraps_players_key():
    roster = load_roster({"players": [{"name": "Kelleher", "position": "Goalkeeper"}]})
    assert roster == [Player(name="Kelleher", positions=("GK",))]


def test_load_roster_rejects_unsupported_payloads():
    with pytest.raises(ValueError):
        load_roster("Salah")
    with pytest.raises(ValueError):
        load_roster(["Salah"])


def test_load_roster_json(tmp_path: Path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(_grouped()), encoding="utf-8")
    assert len(load_roster_json(path)) == 7

    with pytest.raises(FileNotFoundError):
        load_roster_json(tmp_path / "missing.json")


def test_group_by_position_lists_every_position(tables):
    roster = roster_from_grouped(_grouped())
    groups = group_by_position(roster)
    positions = [group.position for group in groups]

    assert positions[0] == "GK"
    assert set(positions) >= {mapping.standard for mapping in tables.position_mappings}
    assert positions[-1] == "FW"
    assert groups[-1].category == "Unknown"

    cb = next(group for group in groups if group.position == "CB")
    assert cb.players == ["Van Dijk", "Konate"]
    assert cb.count == 2
    assert next(group for group in groups if group.position == "SS").count == 0

    categories = [group.category for group in groups]
    assert categories.index("DF") < categories.index("MF") < categories.index("FW")
