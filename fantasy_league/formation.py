"""Team formations, their positional needs and match-ups, and lineups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from fantasy_league.player import Position


class Formation(str, Enum):
    F442 = "4-4-2"
    F433 = "4-3-3"
    F451 = "4-5-1"
    F352 = "3-5-2"
    F532 = "5-3-2"
    F4231 = "4-2-3-1"
    F4312 = "4-3-1-2"
    DEFAULT = "4-4-2"

    def position_requirements(self) -> dict[Position, int]:
        """How many players of each position the formation fields."""
        defenders, midfielders, forwards = _REQUIREMENTS.get(self, (4, 4, 2))
        return {
            Position.GK: 1,
            Position.DEF: defenders,
            Position.MID: midfielders,
            Position.FWD: forwards,
        }

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Whether the value names a known formation."""
        try:
            cls(value)
        except ValueError:
            return False
        return True

    def strength_against(self, matchup: Formation | str) -> float:
        """Effectiveness multiplier of this formation against another."""
        try:
            opponent = Formation(matchup)
        except ValueError:
            return 1.0
        return _ADVANTAGES.get(self, {}).get(opponent, 1.0)


_REQUIREMENTS: dict[Formation, tuple[int, int, int]] = {
    Formation.F442: (4, 4, 2),
    Formation.F433: (4, 3, 3),
    Formation.F451: (4, 5, 1),
    Formation.F352: (3, 5, 2),
    Formation.F532: (5, 3, 2),
    Formation.F4231: (4, 5, 1),
    Formation.F4312: (4, 4, 2),
}

_ADVANTAGES: dict[Formation, dict[Formation, float]] = {
    Formation.F442: {Formation.F433: 0.9, Formation.F451: 1.1, Formation.F352: 1.0},
    Formation.F433: {Formation.F442: 1.1, Formation.F451: 0.9, Formation.F532: 1.1},
    Formation.F451: {Formation.F433: 1.1, Formation.F442: 0.9, Formation.F352: 1.0},
    Formation.F352: {Formation.F442: 1.0, Formation.F532: 0.9, Formation.F433: 0.9},
    Formation.F532: {Formation.F433: 0.9, Formation.F352: 1.1, Formation.F442: 1.0},
}


@dataclass
class Lineup:
    """Starting eleven with their assigned positions, bench and captain."""

    formation: Formation = Formation.DEFAULT
    starters: list[str] = field(default_factory=list)
    positions: list[Position] = field(default_factory=list)
    substitutes: list[str] = field(default_factory=list)
    captain: str | None = None