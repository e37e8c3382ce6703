"""Domain records for players and formations."""

from .formation import FORMATION_SIZE, Formation, FormationSlot, LayoutPoint, SubFormation
from .player import Player

__all__ = [
    "FORMATION_SIZE",
    "Formation",
    "FormationSlot",
    "LayoutPoint",
    "Player",
    "SubFormation",
]
