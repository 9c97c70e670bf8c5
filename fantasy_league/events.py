"""Domain events emitted by matches, players, teams and seasons."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class EventType(str, Enum):
    MATCH_SCHEDULED = "match.scheduled"
    MATCH_STARTED = "match.started"
    MATCH_COMPLETED = "match.completed"
    GOAL_SCORED = "match.goal_scored"
    CARD_ISSUED = "match.card_issued"

    PLAYER_INJURED = "player.injured"
    PLAYER_RECOVERED = "player.recovered"
    PLAYER_SUSPENDED = "player.suspended"
    PLAYER_TRAINED = "player.trained"
    PLAYER_PROGRESSED = "player.progressed"

    LINEUP_SET = "team.lineup_set"
    TACTICS_CHANGED = "team.tactics_changed"
    FORMATION_CHANGED = "team.formation_changed"

    SEASON_STARTED = "season.started"
    SEASON_COMPLETED = "season.completed"
    FIXTURES_GENERATED = "season.fixtures_generated"


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Fields shared by every domain event."""

    event_id: str
    event_type: EventType
    aggregate_id: str = ""
    occurred_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, kw_only=True)
class MatchScheduledEvent(DomainEvent):
    event_type: EventType = EventType.MATCH_SCHEDULED
    home_team_id: str
    away_team_id: str
    scheduled_at: datetime


@dataclass(frozen=True, kw_only=True)
class MatchCompletedEvent(DomainEvent):
    event_type: EventType = EventType.MATCH_COMPLETED
    home_score: int
    away_score: int
    stats: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class GoalScoredEvent(DomainEvent):
    event_type: EventType = EventType.GOAL_SCORED
    match_id: str
    player_id: str
    team_id: str
    minute: int
    assist_by: str = ""


@dataclass(frozen=True, kw_only=True)
class PlayerInjuredEvent(DomainEvent):
    event_type: EventType = EventType.PLAYER_INJURED
    player_id: str
    injury_type: str
    expected_days: int


@dataclass(frozen=True, kw_only=True)
class PlayerTrainedEvent(DomainEvent):
    event_type: EventType = EventType.PLAYER_TRAINED
    player_id: str
    training_type: str
    attribute_gains: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class LineupSetEvent(DomainEvent):
    event_type: EventType = EventType.LINEUP_SET
    team_id: str
    match_id: str
    player_ids: list[str] = field(default_factory=list)
    formation: str = ""


@dataclass(frozen=True, kw_only=True)
class SeasonStartedEvent(DomainEvent):
    event_type: EventType = EventType.SEASON_STARTED
    season_id: str
    league_id: str
    start_date: datetime
    teams: list[str] = field(default_factory=list)