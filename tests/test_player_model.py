import pytest
from pydantic import ValidationError

from pitchfit.models import Formation, FormationSlot, LayoutPoint, Player


def _slots(keepers: int = 1, total: int = 11):
    slots = [FormationSlot(position="GK", category="GK") for _ in range(keepers)]
    slots += [FormationSlot(position="CB", category="DF") for _ in range(total - keepers)]
    return tuple(slots)


def test_player_is_frozen():
    player = Player(name="Salah", positions=("RW",))

    assert player.primary_position == "RW"

    with pytest.raises((TypeError, ValidationError)):
        player.name = "Mo"  # type: ignore[misc]


def test_player_requires_name_and_position():
    with pytest.raises(ValidationError):
        Player(name="", positions=("CB",))
    with pytest.raises(ValidationError):
        Player(name="Nobody", positions=())


def test_formation_requires_eleven_slots():
    formation = Formation(name="park the bus", slots=_slots())
    assert formation.total_positions == 11

    with pytest.raises(ValidationError):
        Formation(name="ten men", slots=_slots(total=10))


def test_formation_requires_single_goalkeeper():
    with pytest.raises(ValidationError):
        Formation(name="two keepers", slots=_slots(keepers=2))
    with pytest.raises(ValidationError):
        Formation(name="no keeper", slots=_slots(keepers=0))


def test_layout_point_bounds():
    with pytest.raises(ValidationError):
        LayoutPoint(x=120, y=50, position="LW", category="FW")
