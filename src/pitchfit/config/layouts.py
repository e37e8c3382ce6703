"""Pitch layouts for formation families and their named variants.

Coordinates are percentages of pitch width (``x``) and height (``y``), with the
goalkeeper at the bottom. Position labels are kept as authored (``ST``,
``CDM``, ``LCB``...) and are normalized by the data adapters on ingestion.
"""

from __future__ import annotations

from typing import Dict, Tuple

from pitchfit.models import LayoutPoint, SubFormation


_LAYOUTS: Dict[str, Tuple[Tuple[str, str, int, int], ...]] = {
    "4-4-2": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("LM", "MF", 15, 50),
        ("CM", "MF", 35, 50),
        ("CM", "MF", 65, 50),
        ("RM", "MF", 85, 50),
        ("ST", "FW", 35, 15),
        ("ST", "FW", 65, 15),
    ),
    "4-1-2-1-2": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CDM", "MF", 50, 60),
        ("LM", "MF", 20, 50),
        ("RM", "MF", 80, 50),
        ("CAM", "MF", 50, 40),
        ("ST", "FW", 35, 15),
        ("ST", "FW", 65, 15),
    ),
    "4-3-1-2": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CM", "MF", 25, 55),
        ("CM", "MF", 50, 55),
        ("CM", "MF", 75, 55),
        ("CAM", "MF", 50, 35),
        ("ST", "FW", 35, 15),
        ("ST", "FW", 65, 15),
    ),
    "4-2-2-2": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CDM", "MF", 30, 60),
        ("CDM", "MF", 70, 60),
        ("LM", "MF", 25, 40),
        ("RM", "MF", 75, 40),
        ("ST", "FW", 35, 15),
        ("ST", "FW", 65, 15),
    ),
    "4-4-1-1": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("LM", "MF", 15, 50),
        ("CM", "MF", 35, 50),
        ("CM", "MF", 65, 50),
        ("RM", "MF", 85, 50),
        ("CF", "FW", 50, 25),
        ("ST", "FW", 50, 15),
    ),
    "4-5-1": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("LM", "MF", 10, 50),
        ("CM", "MF", 30, 50),
        ("CM", "MF", 50, 50),
        ("CM", "MF", 70, 50),
        ("RM", "MF", 90, 50),
        ("ST", "FW", 50, 15),
    ),
    "4-1-4-1": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CDM", "MF", 50, 60),
        ("LM", "MF", 20, 40),
        ("CM", "MF", 40, 35),
        ("CM", "MF", 60, 35),
        ("RM", "MF", 80, 40),
        ("ST", "FW", 50, 15),
    ),
    "4-2-3-1": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CDM", "MF", 30, 55),
        ("CDM", "MF", 70, 55),
        ("LW", "FW", 20, 35),
        ("CAM", "MF", 50, 30),
        ("RW", "FW", 80, 35),
        ("ST", "FW", 50, 10),
    ),
    "4-3-2-1": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CM", "MF", 25, 55),
        ("CM", "MF", 50, 55),
        ("CM", "MF", 75, 55),
        ("LF", "FW", 35, 30),
        ("RF", "FW", 65, 30),
        ("ST", "FW", 50, 15),
    ),
    "4-3-3": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CM", "MF", 30, 55),
        ("CM", "MF", 50, 50),
        ("CM", "MF", 70, 55),
        ("LW", "FW", 15, 15),
        ("ST", "FW", 50, 15),
        ("RW", "FW", 85, 15),
    ),
    "4-1-2-3": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CDM", "MF", 50, 60),
        ("CM", "MF", 30, 40),
        ("CM", "MF", 70, 40),
        ("LW", "FW", 15, 15),
        ("ST", "FW", 50, 15),
        ("RW", "FW", 85, 15),
    ),
    "4-2-1-3": (
        ("GK", "GK", 50, 95),
        ("LB", "DF", 15, 75),
        ("CB", "DF", 35, 75),
        ("CB", "DF", 65, 75),
        ("RB", "DF", 85, 75),
        ("CDM", "MF", 35, 55),
        ("CDM", "MF", 65, 55),
        ("CAM", "MF", 50, 40),
        ("LW", "FW", 15, 15),
        ("ST", "FW", 50, 15),
        ("RW", "FW", 85, 15),
    ),
    "3-5-2": (
        ("GK", "GK", 50, 95),
        ("LCB", "DF", 25, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 75, 75),
        ("LWB", "MF", 10, 50),
        ("CM", "MF", 30, 50),
        ("CM", "MF", 50, 45),
        ("CM", "MF", 70, 50),
        ("RWB", "MF", 90, 50),
        ("ST", "FW", 35, 15),
        ("ST", "FW", 65, 15),
    ),
    "5-2-1-2": (
        ("GK", "GK", 50, 95),
        ("LCB", "DF", 15, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 85, 75),
        ("LWB", "MF", 10, 50),
        ("CM", "MF", 30, 50),
        ("CM", "MF", 70, 50),
        ("RWB", "MF", 90, 50),
        ("CAM", "MF", 50, 35),
        ("ST", "FW", 35, 15),
        ("ST", "FW", 65, 15),
    ),
    "3-4-3": (
        ("GK", "GK", 50, 95),
        ("LCB", "DF", 25, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 75, 75),
        ("LM", "MF", 15, 50),
        ("CM", "MF", 40, 50),
        ("CM", "MF", 60, 50),
        ("RM", "MF", 85, 50),
        ("LW", "FW", 15, 15),
        ("ST", "FW", 50, 15),
        ("RW", "FW", 85, 15),
    ),
    "3-4-2-1": (
        ("GK", "GK", 50, 95),
        ("LCB", "DF", 25, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 75, 75),
        ("LM", "MF", 15, 50),
        ("CM", "MF", 40, 50),
        ("CM", "MF", 60, 50),
        ("RM", "MF", 85, 50),
        ("LF", "FW", 30, 25),
        ("RF", "FW", 70, 25),
        ("ST", "FW", 50, 10),
    ),
    "5-3-2": (
        ("GK", "GK", 50, 95),
        ("LWB", "DF", 15, 75),
        ("LCB", "DF", 35, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 65, 75),
        ("RWB", "DF", 85, 75),
        ("CM", "MF", 30, 50),
        ("CM", "MF", 50, 50),
        ("CM", "MF", 70, 50),
        ("ST", "FW", 35, 15),
        ("ST", "FW", 65, 15),
    ),
    "5-2-3": (
        ("GK", "GK", 50, 95),
        ("LWB", "DF", 10, 75),
        ("LCB", "DF", 30, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 70, 75),
        ("RWB", "DF", 90, 75),
        ("CM", "MF", 35, 50),
        ("CM", "MF", 65, 50),
        ("LW", "FW", 25, 15),
        ("ST", "FW", 50, 15),
        ("RW", "FW", 75, 15),
    ),
    "5-2-2-1": (
        ("GK", "GK", 50, 95),
        ("LWB", "DF", 10, 75),
        ("LCB", "DF", 30, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 70, 75),
        ("RWB", "DF", 90, 75),
        ("CM", "MF", 35, 50),
        ("CM", "MF", 65, 50),
        ("LF", "FW", 30, 25),
        ("RF", "FW", 70, 25),
        ("ST", "FW", 50, 10),
    ),
    "5-4-1": (
        ("GK", "GK", 50, 95),
        ("LWB", "DF", 10, 75),
        ("LCB", "DF", 30, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 70, 75),
        ("RWB", "DF", 90, 75),
        ("LM", "MF", 15, 50),
        ("CM", "MF", 35, 50),
        ("CM", "MF", 65, 50),
        ("RM", "MF", 85, 50),
        ("ST", "FW", 50, 15),
    ),
    "5-1-2-1-1": (
        ("GK", "GK", 50, 95),
        ("LWB", "DF", 10, 75),
        ("LCB", "DF", 30, 75),
        ("CB", "DF", 50, 75),
        ("RCB", "DF", 70, 75),
        ("RWB", "DF", 90, 75),
        ("CDM", "MF", 50, 60),
        ("LM", "MF", 25, 40),
        ("RM", "MF", 75, 40),
        ("CAM", "MF", 50, 30),
        ("ST", "FW", 50, 10),
    ),
}

# name -> (parent family, shape, description, notes)
_SUB_FORMATION_META: Dict[str, Tuple[str, str, str, str]] = {
    "4-4-2": ("4-4-2", "Flat", "Standard flat 4-4-2", "Two banks of four behind a front pair"),
    "4-1-2-1-2": ("4-4-2", "Diamond", "Diamond 4-4-2", "Narrow midfield; full-backs supply the width"),
    "4-3-1-2": ("4-4-2", "Triangle", "Triangle 4-4-2", "Three central midfielders screen a playmaker"),
    "4-2-2-2": ("4-4-2", "Inverted Trapezium", "Inverted trapezium 4-4-2", "Double pivot with advanced wide midfielders"),
    "4-4-1-1": ("4-4-2", "Straight Line", "Straight line 4-4-1-1", "Second forward drops between the lines"),
    "4-5-1": ("4-5-1", "Flat", "Standard flat 4-5-1", "Crowded midfield around a lone striker"),
    "4-1-4-1": ("4-5-1", "Inverted Equilateral Triangle", "Inverted equilateral triangle 4-5-1", "Single holding midfielder behind a line of four"),
    "4-2-3-1": ("4-5-1", "Pyramid", "4-2-3-1", "Double pivot supporting three attacking midfielders"),
    "4-3-2-1": ("4-5-1", "Pyramid", "Pyramid 4-5-1", "Two inside forwards tuck in behind the striker"),
    "4-3-3": ("4-3-3", "Flat", "Standard flat 4-3-3", "Three central midfielders feeding a front three"),
    "4-1-2-3": ("4-3-3", "Inverted Equilateral Triangle", "Inverted equilateral triangle 4-3-3", "Holding midfielder with two eights ahead"),
    "4-2-1-3": ("4-3-3", "Equilateral Triangle", "Equilateral triangle 4-3-3", "Double pivot with a number ten"),
    "3-5-2": ("3-5-2", "Flat", "Standard 3-5-2", "Wing-backs provide all the width"),
    "5-2-1-2": ("3-5-2", "Diamond", "3-5-2 with an attacking midfielder", "Playmaker behind the front pair"),
    "3-4-3": ("3-4-3", "Flat", "Standard 3-4-3", "Wide midfielders and wingers stacked on each flank"),
    "3-4-2-1": ("3-4-3", "Pyramid", "3-4-2-1", "Two inside forwards behind a lone striker"),
    "5-3-2": ("5-3-2", "Flat", "Standard 5-3-2", "Back five with a compact midfield three"),
    "5-2-3": ("5-2-3", "Flat", "Standard 5-2-3", "Back five with a front three"),
    "5-2-2-1": ("5-2-3", "Pyramid", "5-2-2-1", "Inside forwards support a lone striker"),
    "5-4-1": ("5-4-1", "Flat", "Standard 5-4-1", "Deep block of nine outfield defenders and midfielders"),
    "5-1-2-1-1": ("5-4-1", "Diamond", "Diamond 5-4-1", "Midfield diamond in front of a back five"),
}


def default_sub_formations() -> Tuple[SubFormation, ...]:
    """Build the bundled sub-formation records, one per layout."""

    records = []
    for name, points in _LAYOUTS.items():
        parent, shape, description, notes = _SUB_FORMATION_META[name]
        records.append(
            SubFormation(
                name=name,
                parent=parent,
                description=description,
                shape=shape,
                notes=notes,
                layout=tuple(
                    LayoutPoint(x=x, y=y, position=position, category=category)
                    for position, category, x, y in points
                ),
            )
        )
    return tuple(records)
