"""Teams, their squads, lineups and recent form."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from fantasy_league.errors import (
    InsufficientPlayersError,
    InvalidFormationError,
    PlayerNotFoundError,
    PlayerUnavailableError,
)
from fantasy_league.formation import Formation, Lineup
from fantasy_league.player import Player, Position

MAX_SQUAD_SIZE = 30
LINEUP_SIZE = 11
FORM_LENGTH = 5


@dataclass
class Stadium:
    name: str
    capacity: int = 0
    city: str = ""
    country: str = ""
    pitch_type: str = ""


@dataclass
class MatchResult:
    match_id: str
    opponent: str
    is_home: bool
    goals_for: int
    goals_against: int
    result: str


@dataclass
class TeamSeasonStats:
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0
    league_position: int = 0


@dataclass
class Team:
    """A football team with its squad, formation and finances."""

    id: str
    name: str
    stadium: Stadium
    short_name: str = ""
    founded: int = 0

    players: list[Player] = field(default_factory=list)
    captain: str | None = None
    vice_captain: str | None = None

    formation: Formation = Formation.DEFAULT
    manager_name: str = ""

    budget: int = 0
    wage_budget: int = 0

    current_form: list[MatchResult] = field(default_factory=list)
    season_stats: TeamSeasonStats = field(default_factory=TeamSeasonStats)

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.short_name:
            self.short_name = self.name[:3]

    def add_player(self, player: Player) -> None:
        """Add a player to the squad."""
        if len(self.players) >= MAX_SQUAD_SIZE:
            raise ValueError("squad size limit reached")
        if any(existing.id == player.id for existing in self.players):
            raise ValueError("player already in squad")
        self.players.append(player)
        self.updated_at = datetime.now()

    def remove_player(self, player_id: str) -> None:
        """Remove a player from the squad, clearing any captaincy they held."""
        player = self.get_player(player_id)
        self.players.remove(player)
        if self.captain == player_id:
            self.captain = None
        if self.vice_captain == player_id:
            self.vice_captain = None
        self.updated_at = datetime.now()

    def get_player(self, player_id: str) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise PlayerNotFoundError()

    def available_players(self) -> list[Player]:
        return [p for p in self.players if p.is_available()]

    def players_by_position(self, position: Position) -> list[Player]:
        return [p for p in self.players if p.can_play_position(position)]

    def validate_lineup(self, lineup: Lineup) -> None:
        """Raise a domain error if the lineup cannot be fielded."""
        if len(lineup.starters) != LINEUP_SIZE:
            raise InsufficientPlayersError()

        for player_id in lineup.starters:
            if not self.get_player(player_id).is_available():
                raise PlayerUnavailableError()

        if not Formation.is_valid(lineup.formation):
            raise InvalidFormationError()

        self._validate_formation_positions(lineup)

    def _validate_formation_positions(self, lineup: Lineup) -> None:
        required = Formation(lineup.formation).position_requirements()
        counts = {position: 0 for position in Position}

        for player_id, assigned in zip(lineup.starters, lineup.positions, strict=True):
            assigned = Position(assigned)
            player = self.get_player(player_id)
            if not player.can_play_position(assigned):
                raise InvalidFormationError(
                    message=f"player {player.full_name()} cannot play {assigned.value}"
                )
            counts[assigned] += 1

        for position, needed in required.items():
            if counts[position] != needed:
                raise InvalidFormationError(
                    message=(
                        f"formation requires {needed} {position.value}, "
                        f"got {counts[position]}"
                    )
                )

    def team_strength(self) -> float:
        """Average overall rating of the best eleven."""
        if not self.players:
            return 0.0
        eleven = self.best_eleven()
        if not eleven:
            return 0.0
        return sum(p.overall_rating() for p in eleven) / len(eleven)

    def best_eleven(self) -> list[Player]:
        """First eligible available players for each position of the formation."""
        available = self.available_players()
        if len(available) < LINEUP_SIZE:
            return available

        eleven: list[Player] = []
        for position, count in self.formation.position_requirements().items():
            candidates = [p for p in available if p.can_play_position(position)]
            eleven.extend(candidates[:count])
        return eleven

    def update_form(self, result: MatchResult) -> None:
        """Record a result as the most recent, keeping the last five."""
        self.current_form = [result, *self.current_form][:FORM_LENGTH]

    def form_string(self) -> str:
        """Recent results, newest first, e.g. "WWLDW"."""
        return "".join(r.result for r in self.current_form)