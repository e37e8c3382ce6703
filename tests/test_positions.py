import pytest

from pitchfit.positions import (
    PositionNormalizer,
    are_positions_equal,
    get_all_positions,
    get_all_standard_positions,
    get_position_category,
    get_position_compatibility,
    get_position_description,
    get_position_mapping,
    get_position_variations,
    get_positions_by_category,
    get_tactical_alternatives,
    standardize_position,
    standardize_positions,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Centre Back", "CB"),
        ("center back", "CB"),
        ("ST", "CF"),
        ("striker", "CF"),
        ("CDM", "DM"),
        ("cam", "AM"),
        ("Left Wing-Back", "LWB"),
        ("LCB", "CB"),
        ("RF", "RW"),
        ("GK", "GK"),
    ],
)
def test_standardize_position_aliases(raw, expected):
    assert standardize_position(raw) == expected


def test_standardize_position_echoes_unknown_input():
    assert standardize_position("Sweeper") == "Sweeper"
    assert standardize_position("") == ""


def test_standardize_is_idempotent():
    for raw in ["Centre Forward", "ST", "Sweeper", "left back"]:
        once = standardize_position(raw)
        assert standardize_position(once) == once


def test_standardize_positions_keeps_order():
    assert standardize_positions(["st", "Keeper", "Libero"]) == ["CF", "GK", "Libero"]


def test_position_category_lookup():
    assert get_position_category("Striker") == "FW"
    assert get_position_category("Goalkeeper") == "GK"
    assert get_position_category("RWB") == "MF"
    assert get_position_category("Sweeper") == "Unknown"


def test_are_positions_equal_compares_canonical_forms():
    assert are_positions_equal("ST", "Centre Forward")
    assert not are_positions_equal("LB", "LWB")


def test_mapping_variations_and_description():
    mapping = get_position_mapping("cdm")
    assert mapping is not None
    assert mapping.standard == "DM"
    assert "CDM" in get_position_variations("DM")
    assert get_position_description("Striker") == "Center Forward"


def test_unknown_position_metadata_is_echoed():
    assert get_position_mapping("Sweeper") is None
    assert get_position_variations("Sweeper") == ["Sweeper"]
    assert get_position_description("Sweeper") == "Sweeper"


def test_standard_position_listing():
    positions = get_all_standard_positions()
    assert len(positions) == 15
    assert positions[0] == "GK"
    assert set(get_all_positions()) == set(positions)
    assert get_positions_by_category("GK") == ["GK"]
    assert get_positions_by_category("FW") == ["CF", "LW", "RW", "SS"]
    assert get_positions_by_category("Unknown") == []


def test_tactical_alternatives_are_separate_from_compatibility():
    assert get_tactical_alternatives("Left Back") == ["LWB", "LM"]
    assert get_tactical_alternatives("GK") == []
    assert get_tactical_alternatives("Sweeper") == []

    entry = get_position_compatibility("LB")
    assert entry is not None
    assert entry.compatible == ("LB", "LWB", "LM", "CB")
    assert get_position_compatibility("Sweeper") is None


def test_normalizer_accepts_injected_tables(tables):
    normalizer = PositionNormalizer(tables)
    assert normalizer.standardize_many(["st", "Winger"]) == ["CF", "Winger"]
    assert normalizer.category("Winger") == "Unknown"
