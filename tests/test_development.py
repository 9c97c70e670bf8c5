from dataclasses import asdict
from datetime import date

import pytest

from fantasy_league.development import (
    TRAINABLE_ATTRIBUTES,
    DevelopmentManager,
    TrainingResult,
    TrainingType,
)
from fantasy_league.player import Player, Position


def make_player(position=Position.MID, age=25, morale=75.0, **attrs):
    player = Player.create("p1", "Alex", "Doe", position, date(2000, 1, 1))
    player.date_of_birth = date(date.today().year - age, 1, 1)
    player.morale = morale
    for name, value in attrs.items():
        setattr(player.attributes, name, value)
    return player


def eager_player(position=Position.MID, age=18):
    return make_player(position, age, morale=100.0, potential=100, professionalism=100)


def test_same_seed_gives_same_results():
    results = []
    for _ in range(2):
        manager = DevelopmentManager(seed=7)
        player = eager_player()
        outcome = [
            manager.process_training(player, t, 0.5).attribute_changes
            for t in TrainingType
            for _ in range(5)
        ]
        results.append((outcome, asdict(player.attributes)))
    assert results[0] == results[1]


@pytest.mark.parametrize(
    "intensity, morale",
    [(0.5, 2), (0.8, 0), (1.0, -3)],
)
def test_training_fitness_and_morale(intensity, morale):
    manager = DevelopmentManager()
    result = manager.process_training(make_player(), TrainingType.GENERAL, intensity)
    assert result.fitness_change == pytest.approx(-5 * intensity)
    assert result.morale_change == morale


def test_technical_training_touches_only_technical_attributes():
    manager = DevelopmentManager(seed=1)
    player = eager_player()
    before = asdict(player.attributes)
    total = {}
    for _ in range(30):
        result = manager.process_training(player, TrainingType.TECHNICAL, 0.5)
        assert set(result.attribute_changes) <= {"passing", "ball_control", "shooting"}
        for name, gain in result.attribute_changes.items():
            assert gain > 0
            total[name] = total.get(name, 0) + gain
    after = asdict(player.attributes)
    assert total
    for name in ("tackling", "speed", "stamina", "heading", "perception", "keeping"):
        assert after[name] == before[name]
    for name, gain in total.items():
        assert after[name] == min(before[name] + gain, 100)


def test_tactical_training_touches_only_tactical_attributes():
    manager = DevelopmentManager(seed=3)
    player = eager_player()
    seen = set()
    for _ in range(20):
        seen |= set(manager.process_training(player, "tactical", 0.5).attribute_changes)
    assert seen and seen <= {"perception", "tackling"}


def test_goalkeeper_set_pieces_improve_keeping_only():
    manager = DevelopmentManager(seed=5)
    player = eager_player(Position.GK)
    start = player.attributes.keeping
    seen = set()
    for _ in range(20):
        seen |= set(manager.process_training(player, TrainingType.SET_PIECES, 0.5).attribute_changes)
    assert seen == {"keeping"}
    assert player.attributes.keeping > start


def test_outfield_set_pieces_improve_heading_and_shooting():
    manager = DevelopmentManager(seed=5)
    player = eager_player(Position.FWD)
    seen = set()
    for _ in range(30):
        seen |= set(manager.process_training(player, TrainingType.SET_PIECES, 0.5).attribute_changes)
    assert seen and seen <= {"heading", "shooting"}


def test_unknown_training_type_falls_back_to_general():
    manager = DevelopmentManager(seed=9)
    player = eager_player()
    seen = set()
    for _ in range(40):
        result = manager.process_training(player, "yoga", 0.5)
        assert isinstance(result, TrainingResult)
        seen |= set(result.attribute_changes)
    assert seen and seen <= set(TRAINABLE_ATTRIBUTES)


def test_attributes_at_95_never_improve():
    manager = DevelopmentManager(seed=11)
    capped = {name: 95 for name in TRAINABLE_ATTRIBUTES}
    player = make_player(age=18, morale=100.0, potential=100, professionalism=100, **capped)
    for training in TrainingType:
        for _ in range(10):
            assert manager.process_training(player, training, 0.5).attribute_changes == {}
    assert all(getattr(player.attributes, n) == 95 for n in TRAINABLE_ATTRIBUTES)


def test_improvement_chance_falls_with_age():
    manager = DevelopmentManager()
    chances = [manager.improvement_chance(make_player(age=a)) for a in (19, 23, 26, 30, 34)]
    assert chances == sorted(chances, reverse=True)
    assert len(set(chances)) == len(chances)


def test_improvement_chance_for_ideal_youngster():
    manager = DevelopmentManager()
    assert manager.improvement_chance(eager_player(age=18)) == pytest.approx(0.8)


def test_improvement_chance_zero_without_potential():
    manager = DevelopmentManager()
    assert manager.improvement_chance(make_player(potential=0)) == 0


def test_attribute_value_reads_attribute_and_defaults_to_50():
    manager = DevelopmentManager()
    player = make_player(passing=83)
    assert manager.attribute_value(player, "passing") == 83
    assert manager.attribute_value(player, "leadership") == 50


def test_apply_attribute_change_clamps():
    manager = DevelopmentManager()
    player = make_player(passing=99, speed=3)
    manager.apply_attribute_change(player, "passing", 5)
    manager.apply_attribute_change(player, "speed", -10)
    assert player.attributes.passing == 100
    assert player.attributes.speed == 0


def test_apply_attribute_change_ignores_unknown_name():
    manager = DevelopmentManager()
    player = make_player()
    before = asdict(player.attributes)
    manager.apply_attribute_change(player, "quality", 10)
    assert asdict(player.attributes) == before


def test_natural_development_refreshes_quality():
    manager = DevelopmentManager()
    for age in (18, 26, 35):
        player = make_player(Position.DEF, age=age, quality=1)
        manager.process_natural_development(player)
        assert player.attributes.quality == player.overall_rating()


def test_young_players_never_decline():
    manager = DevelopmentManager(seed=2)
    player = make_player(age=18, potential=100)
    before = asdict(player.attributes)
    for _ in range(50):
        manager.process_natural_development(player)
    after = asdict(player.attributes)
    for name in TRAINABLE_ATTRIBUTES:
        assert after[name] >= before[name]
    assert sum(after[n] for n in TRAINABLE_ATTRIBUTES) > sum(before[n] for n in TRAINABLE_ATTRIBUTES)


def test_veteran_physical_decline_stops_at_floor():
    manager = DevelopmentManager(seed=4)
    player = make_player(age=45, speed=32, stamina=31, perception=60)
    for _ in range(100):
        manager.process_natural_development(player)
    assert player.attributes.speed == 30
    assert player.attributes.stamina == 30
    assert player.attributes.perception >= 60


def test_mid_career_player_is_unchanged_by_natural_development():
    manager = DevelopmentManager()
    player = make_player(age=27)
    before = {n: getattr(player.attributes, n) for n in TRAINABLE_ATTRIBUTES}
    manager.process_natural_development(player)
    assert {n: getattr(player.attributes, n) for n in TRAINABLE_ATTRIBUTES} == before