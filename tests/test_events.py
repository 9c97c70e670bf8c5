import dataclasses
from datetime import datetime

import pytest

from fantasy_league.events import (
    DomainEvent,
    EventType,
    GoalScoredEvent,
    LineupSetEvent,
    MatchCompletedEvent,
    MatchScheduledEvent,
    PlayerInjuredEvent,
    PlayerTrainedEvent,
    SeasonStartedEvent,
)

WHEN = datetime(2024, 8, 10, 15, 0)


def test_event_type_values():
    assert EventType.GOAL_SCORED.value == "match.goal_scored"
    assert EventType("player.injured") is EventType.PLAYER_INJURED
    assert EventType.FIXTURES_GENERATED == "season.fixtures_generated"


def test_unknown_event_type_rejected():
    with pytest.raises(ValueError):
        EventType("match.abandoned")


@pytest.mark.parametrize(
    "event, expected",
    [
        (MatchScheduledEvent(event_id="e1", home_team_id="h", away_team_id="a", scheduled_at=WHEN),
         EventType.MATCH_SCHEDULED),
        (MatchCompletedEvent(event_id="e2", home_score=2, away_score=1), EventType.MATCH_COMPLETED),
        (GoalScoredEvent(event_id="e3", match_id="m", player_id="p", team_id="t", minute=12),
         EventType.GOAL_SCORED),
        (PlayerInjuredEvent(event_id="e4", player_id="p", injury_type="knee", expected_days=10),
         EventType.PLAYER_INJURED),
        (PlayerTrainedEvent(event_id="e5", player_id="p", training_type="physical"),
         EventType.PLAYER_TRAINED),
        (LineupSetEvent(event_id="e6", team_id="t", match_id="m"), EventType.LINEUP_SET),
        (SeasonStartedEvent(event_id="e7", season_id="s", league_id="l", start_date=WHEN),
         EventType.SEASON_STARTED),
    ],
)
def test_specific_events_carry_their_type(event, expected):
    assert event.event_type is expected
    assert isinstance(event, DomainEvent)


def test_base_event_fields():
    event = DomainEvent(event_id="x", event_type=EventType.CARD_ISSUED, aggregate_id="m1", occurred_at=WHEN)
    assert event.event_id == "x"
    assert event.aggregate_id == "m1"
    assert event.occurred_at == WHEN


def test_occurred_at_defaults_to_now():
    before = datetime.now()
    event = MatchCompletedEvent(event_id="e", home_score=0, away_score=0)
    after = datetime.now()
    assert before <= event.occurred_at <= after


def test_events_are_immutable():
    event = GoalScoredEvent(event_id="e", match_id="m", player_id="p", team_id="t", minute=5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.minute = 6
    assert event.minute == 5


def test_collection_defaults_are_independent():
    first = LineupSetEvent(event_id="a", team_id="t", match_id="m")
    second = LineupSetEvent(event_id="b", team_id="t", match_id="m")
    first.player_ids.append("p1")
    assert second.player_ids == []
    assert first.player_ids == ["p1"]


def test_goal_assist_defaults_to_empty():
    event = GoalScoredEvent(event_id="e", match_id="m", player_id="p", team_id="t", minute=90)
    assert event.assist_by == ""
    assert event.minute == 90