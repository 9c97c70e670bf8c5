# fantasy_league

A domain model for a football management simulation. It has players with
position-dependent attributes and ratings, training and ageing, fitness and
injury risk, squads with formations and lineups, and club finances. It is a
plain library with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `fantasy_league.errors` | `DomainError` and its subclasses: `PlayerNotFoundError`, `TeamNotFoundError`, `InvalidFormationError`, `InsufficientPlayersError`, `PlayerUnavailableError`, `MatchAlreadyPlayedError`, `InvalidTacticsError`, `SeasonNotActiveError`, `FixtureConflictError` |
| `fantasy_league.events` | `EventType` and frozen event records: `DomainEvent`, `MatchScheduledEvent`, `MatchCompletedEvent`, `GoalScoredEvent`, `PlayerInjuredEvent`, `PlayerTrainedEvent`, `LineupSetEvent`, `SeasonStartedEvent` |
| `fantasy_league.player` | `Position`, `Status`, `Attributes`, `CareerStats`, `SeasonStats`, `Player` |
| `fantasy_league.development` | `TrainingType`, `TrainingResult`, `DevelopmentManager` |
| `fantasy_league.fitness` | `FitnessManager` |
| `fantasy_league.formation` | `Formation`, `Lineup` |
| `fantasy_league.team` | `Stadium`, `MatchResult`, `TeamSeasonStats`, `Team` |
| `fantasy_league.finances` | `TransactionType`, `Transaction`, `FinancialManager` |
| `fantasy_league.squad` | `SquadManager` |

## Example

```python
from datetime import date

from fantasy_league.player import Player, Position
from fantasy_league.team import Stadium, Team
from fantasy_league.formation import Formation
from fantasy_league.squad import SquadManager
from fantasy_league.development import DevelopmentManager, TrainingType
from fantasy_league.fitness import FitnessManager

team = Team(id="t1", name="Riverside", stadium=Stadium(name="Riverside Park", capacity=30000))

squad = [(Position.GK, 2), (Position.DEF, 6), (Position.MID, 6), (Position.FWD, 4)]
number = 0
for position, count in squad:
    for _ in range(count):
        number += 1
        team.add_player(
            Player.create(f"p{number}", "Sam", f"Player{number}", position, date(1998, 5, 1))
        )

lineup = SquadManager(team).recommend_lineup(Formation.F433)
print(lineup.starters, lineup.captain)

striker = team.get_player("p15")
result = DevelopmentManager(seed=42).process_training(striker, TrainingType.TECHNICAL, 0.8)
print(result.attribute_changes, result.fitness_change)

FitnessManager().apply_match_fitness(striker, 90, 1.0)
print(striker.fitness)
```

## Notes

- `Player.create` gives a fully fit, available player with the default
  `Attributes.for_position` values. `Player.age(today=None)` counts whole
  years, using today's date unless one is given.
- A player is available when their status is `Status.AVAILABLE` and fitness
  is at least 70. `Team.best_eleven` and `SquadManager.recommend_lineup` pick
  only from available players.
- `SquadManager.recommend_lineup` fills goalkeeper, defence, midfield and
  attack in that order with the highest-rated eligible players, adds up to
  seven substitutes, and chooses the team's captain if starting, otherwise the
  starter with the highest age plus one tenth of career matches.
- `DevelopmentManager(seed=42)` drives its random outcomes from a seeded
  generator, so managers built with the same seed give the same results.
- `Formation.is_valid(value)` tells whether a value names a known formation;
  `Formation.strength_against(other)` gives the match-up multiplier (1.0 when
  no advantage is defined).

## Errors

Domain problems raise subclasses of `DomainError`, whose string form is
`[CODE] Message`:

- `Team.get_player` and `Team.remove_player` raise `PlayerNotFoundError` for an
  unknown id.
- `Team.validate_lineup` raises `InsufficientPlayersError` unless there are
  exactly eleven starters, `PlayerUnavailableError` for an unavailable starter,
  and `InvalidFormationError` for an unknown formation, a player in a position
  they cannot play, or position counts that do not match the formation.
- `SquadManager.recommend_lineup` raises `InsufficientPlayersError` when fewer
  than eleven starters can be found.

`Team.add_player` raises `ValueError` when the squad already holds 30 players
or the player is already in it.

## What it does not do

This package is the domain model only. It does not simulate matches, schedule
fixtures or run seasons, keep tactics, or store anything: there is no
database, no server and no command-line program. The event classes are plain
records that nothing in the package emits, and `Transaction` is a record that
`FinancialManager` does not keep a ledger of. Several error classes, such as
`MatchAlreadyPlayedError` and `SeasonNotActiveError`, are defined for callers
to raise; the package itself does not raise them.