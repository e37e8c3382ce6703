import json
from pathlib import Path

import pytest

from pitchfit.config_loader import TablesProfile, load_tables
from pitchfit.models import Player
from pitchfit.scoring import FormationResolver


def _custom_formation():
    positions = [{"position": "GK"}]
    positions += [{"position": "CB"} for _ in range(3)]
    positions += [{"position": "CM", "alternatives": ["DM"], "isRequired": False} for _ in range(3)]
    positions += [{"position": "ST"} for _ in range(4)]
    return {
        "formation": "3-3-4",
        "description": "All-out attack",
        "tacticalNotes": "Four strikers",
        "positions": positions,
    }


def test_profile_overlays_bundled_tables():
    profile = TablesProfile(
        aliases={"CF": {"variations": ["CF", "ST", "Nine"]}},
        fallbacks={"CF": ["SS"]},
        formations=[_custom_formation()],
    )
    tables = profile.to_tables()

    assert tables.standardize("nine") == "CF"
    assert tables.standardize("Centre Back") == "CB"
    assert tables.fallbacks["CF"] == ("SS",)
    assert tables.fallbacks["LM"] == ("LW", "LB")

    formation = tables.get_formation("3-3-4")
    assert formation.tactical_notes == "Four strikers"
    assert formation.slots[4].required is False
    assert "4-4-2" in tables.formations

    fit = FormationResolver(tables).resolve("3-3-4", [Player(name="Shadow", positions=("SS",))])
    assert fit.filled_slots == 4


def test_profile_round_trip(tmp_path: Path):
    path = tmp_path / "tables.json"
    TablesProfile(compatibility={"GK": {"compatible": ["GK", "CB"], "score": 13}}).save(path)
    tables = load_tables(path)
    assert tables.compatibility["GK"].compatible == ("GK", "CB")
    assert tables.compatibility["CM"].score == 53


def test_profile_new_position_needs_category():
    with pytest.raises(ValueError, match="category"):
        TablesProfile(aliases={"WM": {"variations": ["WM"]}}).to_tables()


def test_profile_rejects_bad_compatibility():
    with pytest.raises(ValueError, match="must include itself"):
        TablesProfile(compatibility={"CB": {"compatible": ["DM"]}}).to_tables()


def test_profile_rejects_short_formation():
    record = _custom_formation()
    record["positions"] = record["positions"][:10]
    with pytest.raises(ValueError):
        TablesProfile(formations=[record]).to_tables()


def test_load_rejects_invalid_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        TablesProfile.load(path)

    path.write_text(json.dumps(["GK"]), encoding="utf-8")
    with pytest.raises(ValueError):
        TablesProfile.load(path)
