"""Squad analysis and lineup recommendations for a team."""

from __future__ import annotations

from fantasy_league.errors import InsufficientPlayersError
from fantasy_league.formation import Formation, Lineup
from fantasy_league.player import Player, Position, Status
from fantasy_league.team import LINEUP_SIZE, Team

MAX_SUBSTITUTES = 7
YOUTH_AGE_LIMIT = 21
VETERAN_AGE_LIMIT = 30

_FILL_ORDER = (Position.GK, Position.DEF, Position.MID, Position.FWD)


def _by_rating(players: list[Player]) -> list[Player]:
    return sorted(players, key=lambda p: p.overall_rating(), reverse=True)


class SquadManager:
    """Reports on a team's squad and picks lineups from it."""

    def __init__(self, team: Team) -> None:
        self.team = team

    def squad_depth(self) -> dict[Position, list[Player]]:
        """Players grouped by position, best rated first."""
        depth: dict[Position, list[Player]] = {}
        for player in self.team.players:
            depth.setdefault(player.position, []).append(player)
        return {position: _by_rating(players) for position, players in depth.items()}

    def squad_age(self) -> float:
        """Average age of the squad; 0 for an empty squad."""
        players = self.team.players
        if not players:
            return 0.0
        return sum(p.age() for p in players) / len(players)

    def squad_value(self) -> int:
        return sum(p.market_value for p in self.team.players)

    def wage_bill(self) -> int:
        """Total weekly wages of the squad."""
        return sum(p.wage for p in self.team.players)

    def youth_prospects(self) -> list[Player]:
        """Players younger than 21."""
        return [p for p in self.team.players if p.age() < YOUTH_AGE_LIMIT]

    def veterans(self) -> list[Player]:
        """Players older than 30."""
        return [p for p in self.team.players if p.age() > VETERAN_AGE_LIMIT]

    def injured_players(self) -> list[Player]:
        return [p for p in self.team.players if p.status is Status.INJURED]

    def suspended_players(self) -> list[Player]:
        return [p for p in self.team.players if p.status is Status.SUSPENDED]

    def recommend_lineup(self, formation: Formation | str) -> Lineup:
        """The best available lineup for a formation, with bench and captain."""
        formation = Formation(formation)
        available = self.team.available_players()
        requirements = formation.position_requirements()

        lineup = Lineup(formation=formation)
        used: set[str] = set()

        for position in _FILL_ORDER:
            candidates = self._best_candidates(available, position, used)
            for candidate in candidates[: requirements.get(position, 0)]:
                lineup.starters.append(candidate.id)
                lineup.positions.append(position)
                used.add(candidate.id)

        if len(lineup.starters) < LINEUP_SIZE:
            raise InsufficientPlayersError()

        lineup.substitutes = [p.id for p in available if p.id not in used][:MAX_SUBSTITUTES]
        lineup.captain = self._select_captain(lineup.starters)
        return lineup

    @staticmethod
    def _best_candidates(
        available: list[Player], position: Position, used: set[str]
    ) -> list[Player]:
        return _by_rating(
            [p for p in available if p.id not in used and p.can_play_position(position)]
        )

    def _select_captain(self, starters: list[str]) -> str | None:
        if self.team.captain is not None and self.team.captain in starters:
            return self.team.captain

        best_id: str | None = None
        best_score = 0.0
        for player_id in starters:
            player = self.team.get_player(player_id)
            score = player.age() + player.career_stats.total_matches / 10
            if score > best_score:
                best_score = score
                best_id = player.id
        return best_id