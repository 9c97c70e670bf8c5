"""Players, their attributes and career statistics."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum


class Position(str, Enum):
    GK = "GK"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"


class Status(str, Enum):
    AVAILABLE = "available"
    INJURED = "injured"
    SUSPENDED = "suspended"
    ON_LOAN = "on_loan"
    RETIRED = "retired"


_PHYSICAL_PEAK_AGE = 28
_TECHNICAL_PEAK_AGE = 32
_DEFAULT_PEAK_AGE = 30


@dataclass
class Attributes:
    """Player attributes on a 0-100 scale."""

    quality: int = 0

    keeping: int = 0
    tackling: int = 0
    passing: int = 0
    shooting: int = 0
    heading: int = 0

    speed: int = 0
    stamina: int = 0

    perception: int = 0
    ball_control: int = 0

    consistency: int = 0
    important_matches: int = 0
    potential: int = 0
    ambition: int = 0
    professionalism: int = 0

    @classmethod
    def for_position(cls, position: Position) -> Attributes:
        """Default attributes for a newly created player in the given position."""
        base = cls(
            quality=65,
            consistency=70,
            important_matches=70,
            potential=75,
            ambition=70,
            professionalism=70,
        )
        technical = _POSITION_DEFAULTS.get(Position(position))
        return replace(base, **technical) if technical else base

    def goalkeeper_rating(self) -> int:
        return int(
            self.keeping * 0.5
            + self.speed * 0.1
            + self.perception * 0.2
            + self.stamina * 0.1
            + self.passing * 0.1
        )

    def defender_rating(self) -> int:
        return int(
            self.tackling * 0.3
            + self.heading * 0.2
            + self.speed * 0.15
            + self.stamina * 0.15
            + self.passing * 0.1
            + self.perception * 0.1
        )

    def midfielder_rating(self) -> int:
        return int(
            self.passing * 0.25
            + self.ball_control * 0.2
            + self.perception * 0.15
            + self.stamina * 0.15
            + self.tackling * 0.15
            + self.shooting * 0.1
        )

    def forward_rating(self) -> int:
        return int(
            self.shooting * 0.3
            + self.ball_control * 0.2
            + self.speed * 0.2
            + self.heading * 0.15
            + self.perception * 0.15
        )

    def can_improve(self, attribute: str, current_age: int) -> bool:
        """Whether an attribute can still improve at the given age."""
        if attribute in ("speed", "stamina"):
            return current_age < _PHYSICAL_PEAK_AGE
        if attribute in ("perception", "passing", "ball_control"):
            return current_age < _TECHNICAL_PEAK_AGE
        return current_age < _DEFAULT_PEAK_AGE


_POSITION_DEFAULTS: dict[Position, dict[str, int]] = {
    Position.GK: dict(keeping=70, tackling=20, passing=50, shooting=10, heading=30,
                      speed=40, stamina=70, perception=65, ball_control=30),
    Position.DEF: dict(keeping=20, tackling=70, passing=55, shooting=35, heading=65,
                       speed=65, stamina=75, perception=60, ball_control=50),
    Position.MID: dict(keeping=20, tackling=55, passing=70, shooting=55, heading=50,
                       speed=70, stamina=80, perception=70, ball_control=70),
    Position.FWD: dict(keeping=20, tackling=30, passing=60, shooting=75, heading=60,
                       speed=75, stamina=70, perception=65, ball_control=70),
}


@dataclass
class SeasonStats:
    season_id: str
    team_id: str
    matches: int = 0
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    clean_sheets: int = 0
    average_rating: float = 0.0


@dataclass
class CareerStats:
    total_matches: int = 0
    total_goals: int = 0
    total_assists: int = 0
    total_yellow_cards: int = 0
    total_red_cards: int = 0
    total_clean_sheets: int = 0
    season_stats: list[SeasonStats] = field(default_factory=list)


_FORM_WEIGHT = 0.3
_MIN_MATCH_FITNESS = 70


@dataclass
class Player:
    """A football player with attributes, condition and career record."""

    id: str
    first_name: str
    last_name: str
    position: Position
    date_of_birth: date
    nickname: str = ""
    nationality: str = ""

    height: int = 0
    weight: int = 0

    preferred_foot: str = ""
    shirt_number: int = 0
    contract_until: date | None = None
    market_value: int = 0
    wage: int = 0

    status: Status = Status.AVAILABLE
    fitness: float = 100.0
    morale: float = 75.0
    form: float = 70.0

    attributes: Attributes = field(default_factory=Attributes)
    career_stats: CareerStats = field(default_factory=CareerStats)

    current_team_id: str = ""

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        player_id: str,
        first_name: str,
        last_name: str,
        position: Position,
        date_of_birth: date,
    ) -> Player:
        """A new, fully fit player with the default attributes for the position."""
        position = Position(position)
        return cls(
            id=player_id,
            first_name=first_name,
            last_name=last_name,
            position=position,
            date_of_birth=date_of_birth,
            attributes=Attributes.for_position(position),
        )

    def age(self, today: date | None = None) -> int:
        """Age in whole years, compared by day of the year."""
        today = today or date.today()
        years = today.year - self.date_of_birth.year
        if today.timetuple().tm_yday < self.date_of_birth.timetuple().tm_yday:
            years -= 1
        return years

    def full_name(self) -> str:
        if self.nickname:
            return self.nickname
        return f"{self.first_name} {self.last_name}"

    def is_available(self) -> bool:
        return self.status is Status.AVAILABLE and self.fitness >= _MIN_MATCH_FITNESS

    def can_play_position(self, position: Position) -> bool:
        if self.position == position:
            return True
        good_passer = self.attributes.passing > 60
        if self.position is Position.DEF:
            return position == Position.MID and good_passer
        if self.position is Position.MID:
            return position in (Position.DEF, Position.FWD)
        if self.position is Position.FWD:
            return position == Position.MID and good_passer
        return False

    def overall_rating(self) -> int:
        match self.position:
            case Position.GK:
                return self.attributes.goalkeeper_rating()
            case Position.DEF:
                return self.attributes.defender_rating()
            case Position.MID:
                return self.attributes.midfielder_rating()
            case Position.FWD:
                return self.attributes.forward_rating()
        return self.attributes.quality

    def update_match_stats(
        self,
        goals: int,
        assists: int,
        yellow_cards: int,
        red_cards: int,
        rating: float,
    ) -> None:
        """Record a match appearance and adjust form from the match rating."""
        stats = self.career_stats
        stats.total_matches += 1
        stats.total_goals += goals
        stats.total_assists += assists
        stats.total_yellow_cards += yellow_cards
        stats.total_red_cards += red_cards
        self._update_form(rating)

    def _update_form(self, match_rating: float) -> None:
        form = self.form * (1 - _FORM_WEIGHT) + (match_rating * 10) * _FORM_WEIGHT
        self.form = min(100.0, max(0.0, form))