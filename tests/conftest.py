import pytest

from pitchfit.config import default_tables
from pitchfit.models import Player


@pytest.fixture
def tables():
    return default_tables()


@pytest.fixture
def squad() -> list[Player]:
    return [
        Player(name="Keeper", positions=("GK",)),
        Player(name="Left Back", positions=("LB",)),
        Player(name="Stopper", positions=("CB",)),
        Player(name="Libero", positions=("CB", "DM")),
        Player(name="Right Back", positions=("RB",)),
        Player(name="Left Mid", positions=("LM",)),
        Player(name="Anchor", positions=("DM",)),
        Player(name="Playmaker", positions=("AM",)),
        Player(name="Right Winger", positions=("RW",)),
        Player(name="Target Man", positions=("CF",)),
    ]
