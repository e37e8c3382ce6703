import pytest

from pitchfit.config import (
    CompatibilityEntry,
    FormationRequirements,
    PositionMapping,
    SlotRequirement,
    build_tables,
    default_tables,
)
from pitchfit.config.compatibility import default_compatibility


def test_default_tables_are_cached():
    assert default_tables() is default_tables()


def test_compatibility_matrix_shape(tables):
    assert tables.total_positions == 15
    assert set(tables.compatibility) == {mapping.standard for mapping in tables.position_mappings}
    for position, entry in tables.compatibility.items():
        assert position in entry.compatible
        assert set(entry.compatible) <= set(tables.standard_lookup)
        assert 0 <= entry.score <= 100


def test_central_midfielder_entry(tables):
    entry = tables.compatibility["CM"]
    assert len(entry.compatible) == 8
    assert entry.score == 53
    assert tables.compatibility["GK"].compatible == ("GK",)


def test_formations_have_eleven_slots_and_one_keeper(tables):
    assert tables.formation_names() == [
        "4-4-2",
        "4-3-3",
        "3-4-3",
        "4-2-3-1",
        "4-1-4-1",
        "3-5-2",
        "5-3-2",
        "5-4-1",
    ]
    for formation in tables.formations.values():
        assert formation.total_positions == 11
        assert sum(1 for slot in formation.slots if slot.category == "GK") == 1


def test_slot_categories_come_from_position_lookup(tables):
    formation = tables.get_formation("5-3-2")
    wing_backs = [slot for slot in formation.slots if slot.position in ("LWB", "RWB")]
    assert [slot.category for slot in wing_backs] == ["MF", "MF"]


def test_get_formation_missing_raises(tables):
    with pytest.raises(KeyError):
        tables.get_formation("2-3-5")
    assert tables.find_formation("2-3-5") is None


def test_tables_are_read_only(tables):
    with pytest.raises(TypeError):
        tables.compatibility["GK"] = CompatibilityEntry("GK", ("GK", "CB"), 13)  # type: ignore[index]


def test_build_tables_rejects_entry_without_itself():
    entries = [
        entry if entry.position != "CB" else CompatibilityEntry("CB", ("DM", "CM"), 20)
        for entry in default_compatibility()
    ]
    with pytest.raises(ValueError, match="must include itself"):
        build_tables(compatibility=entries)


def test_build_tables_rejects_missing_compatibility_entry():
    entries = [entry for entry in default_compatibility() if entry.position != "SS"]
    with pytest.raises(ValueError, match="no compatibility entry"):
        build_tables(compatibility=entries)


def test_build_tables_rejects_out_of_range_score():
    entries = [
        entry if entry.position != "GK" else CompatibilityEntry("GK", ("GK",), 120)
        for entry in default_compatibility()
    ]
    with pytest.raises(ValueError, match="0-100"):
        build_tables(compatibility=entries)


def test_build_tables_rejects_alias_collision(tables):
    mappings = list(tables.position_mappings)
    mappings.append(PositionMapping("XX", ("XX", "ST"), "FW", "Ambiguous"))
    with pytest.raises(ValueError, match="maps to both"):
        build_tables(position_mappings=mappings)


def test_build_tables_rejects_unknown_fallback_source():
    with pytest.raises(ValueError, match="unknown positions"):
        build_tables(fallbacks={"LM": ("Winger",)})


def test_build_tables_rejects_negative_fallback_limit():
    with pytest.raises(ValueError):
        build_tables(fallback_limit=-1)


def test_build_tables_rejects_short_formation():
    short = FormationRequirements(
        formation="1-1",
        description="",
        tactical_notes="",
        slots=(SlotRequirement("GK"), SlotRequirement("CF")),
    )
    with pytest.raises(ValueError):
        build_tables(formations=[short])


def test_build_tables_canonicalizes_formation_aliases():
    slots = (
        SlotRequirement("Goalkeeper"),
        *(SlotRequirement("Centre Back") for _ in range(4)),
        *(SlotRequirement("CM", ("CAM", "CM")) for _ in range(4)),
        SlotRequirement("ST", ("CF",)),
        SlotRequirement("Striker"),
    )
    tables = build_tables(
        formations=[FormationRequirements("4-4-2 narrow", "", "", slots)],
    )
    formation = tables.get_formation("4-4-2 narrow")
    assert [slot.position for slot in formation.slots][-2:] == ["CF", "CF"]
    assert formation.slots[0].category == "GK"
    # Alternatives that canonicalize to the slot itself are dropped.
    assert formation.slots[5].alternatives == ("AM",)
    assert formation.slots[9].alternatives == ()
