"""Player growth through training and natural, age-driven development."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from fantasy_league.player import Player, Position


class TrainingType(str, Enum):
    GENERAL = "general"
    TECHNICAL = "technical"
    PHYSICAL = "physical"
    TACTICAL = "tactical"
    SET_PIECES = "set_pieces"


@dataclass
class TrainingResult:
    """Outcome of one training session."""

    attribute_changes: dict[str, int] = field(default_factory=dict)
    fitness_change: float = 0.0
    morale_change: float = 0.0


TRAINABLE_ATTRIBUTES: tuple[str, ...] = (
    "keeping",
    "tackling",
    "passing",
    "shooting",
    "heading",
    "speed",
    "stamina",
    "perception",
    "ball_control",
)

_TECHNICAL = ("passing", "ball_control", "shooting")
_PHYSICAL = ("speed", "stamina", "heading")
_TACTICAL = ("perception", "tackling")
_SET_PIECES = ("heading", "shooting")
_YOUTH_GROWTH = ("passing", "ball_control", "perception", "tackling")

_UNKNOWN_ATTRIBUTE_VALUE = 50


class DevelopmentManager:
    """Applies training effects and age-based attribute changes to players."""

    def __init__(self, seed: int | None = 42) -> None:
        self._rng = random.Random(seed)

    def process_training(
        self,
        player: Player,
        training_type: TrainingType | str,
        intensity: float,
    ) -> TrainingResult:
        """Run one training session, changing the player's attributes in place."""
        result = TrainingResult()
        chance = self.improvement_chance(player)

        trainers: dict[TrainingType, Callable[[Player, float, TrainingResult], None]] = {
            TrainingType.TECHNICAL: self._train_technical,
            TrainingType.PHYSICAL: self._train_physical,
            TrainingType.TACTICAL: self._train_tactical,
            TrainingType.SET_PIECES: self._train_set_pieces,
        }
        trainer = trainers.get(training_type, self._train_general)
        trainer(player, chance, result)

        result.fitness_change = -5 * intensity
        if intensity < 0.7:
            result.morale_change = 2
        elif intensity > 0.9:
            result.morale_change = -3
        return result

    def process_natural_development(self, player: Player) -> None:
        """Apply youth growth or veteran decline, then refresh overall quality."""
        age = player.age()
        if age < 23:
            self._young_player_development(player)
        elif age > 30:
            self._veteran_decline(player)
        player.attributes.quality = player.overall_rating()

    def improvement_chance(self, player: Player) -> float:
        """Probability that a trained attribute improves, from age and mentality."""
        age = player.age()
        if age < 21:
            chance = 0.8
        elif age < 25:
            chance = 0.6
        elif age < 28:
            chance = 0.4
        elif age < 32:
            chance = 0.2
        else:
            chance = 0.05

        attrs = player.attributes
        chance *= attrs.potential / 100
        chance *= 0.5 + 0.5 * (attrs.professionalism / 100)
        chance *= 0.8 + 0.2 * (player.morale / 100)
        return chance

    def attribute_value(self, player: Player, attribute: str) -> int:
        """Current value of a trainable attribute; 50 for an unknown name."""
        if attribute in TRAINABLE_ATTRIBUTES:
            return getattr(player.attributes, attribute)
        return _UNKNOWN_ATTRIBUTE_VALUE

    def apply_attribute_change(self, player: Player, attribute: str, change: int) -> None:
        """Add a change to a trainable attribute, kept within 0-100."""
        if attribute not in TRAINABLE_ATTRIBUTES:
            return
        value = getattr(player.attributes, attribute) + change
        setattr(player.attributes, attribute, min(max(value, 0), 100))

    def _train_attributes(
        self,
        player: Player,
        attributes: tuple[str, ...],
        chance: float,
        result: TrainingResult,
    ) -> None:
        for attribute in attributes:
            if self._rng.random() < chance:
                self._improve(player, attribute, result)

    def _improve(self, player: Player, attribute: str, result: TrainingResult) -> None:
        improvement = self._improvement(player, attribute)
        if improvement > 0:
            result.attribute_changes[attribute] = improvement
            self.apply_attribute_change(player, attribute, improvement)

    def _train_technical(self, player: Player, chance: float, result: TrainingResult) -> None:
        self._train_attributes(player, _TECHNICAL, chance, result)

    def _train_physical(self, player: Player, chance: float, result: TrainingResult) -> None:
        self._train_attributes(player, _PHYSICAL, chance * 0.8, result)

    def _train_tactical(self, player: Player, chance: float, result: TrainingResult) -> None:
        self._train_attributes(player, _TACTICAL, chance, result)

    def _train_set_pieces(self, player: Player, chance: float, result: TrainingResult) -> None:
        if player.position is Position.GK:
            if self._rng.random() < chance:
                improvement = self._improvement(player, "keeping")
                if improvement > 0:
                    result.attribute_changes["keeping"] = improvement
                    player.attributes.keeping += improvement
        else:
            self._train_attributes(player, _SET_PIECES, chance * 0.7, result)

    def _train_general(self, player: Player, chance: float, result: TrainingResult) -> None:
        picks = 2 + self._rng.randrange(2)
        for _ in range(picks):
            attribute = self._rng.choice(TRAINABLE_ATTRIBUTES)
            if self._rng.random() < chance * 0.5:
                self._improve(player, attribute, result)

    def _improvement(self, player: Player, attribute: str) -> int:
        current = self.attribute_value(player, attribute)
        if current >= 95:
            return 0
        if current >= 90:
            return 1 if self._rng.random() < 0.1 else 0
        if current >= 80:
            return 1 if self._rng.random() < 0.3 else 0
        return 1 + self._rng.randrange(2)

    def _young_player_development(self, player: Player) -> None:
        attrs = player.attributes
        if player.age() < 21 and self._rng.random() < 0.3:
            attrs.speed = min(attrs.speed + 1, 100)
            attrs.stamina = min(attrs.stamina + 1, 100)

        if self._rng.random() < attrs.potential / 200:
            attribute = self._rng.choice(_YOUTH_GROWTH)
            self.apply_attribute_change(player, attribute, 1)

    def _veteran_decline(self, player: Player) -> None:
        attrs = player.attributes
        decline_rate = (player.age() - 30) * 0.05

        if self._rng.random() < decline_rate:
            attrs.speed = max(attrs.speed - 1, 30)
        if self._rng.random() < decline_rate * 0.8:
            attrs.stamina = max(attrs.stamina - 1, 30)
        if self._rng.random() < 0.2:
            attrs.perception = min(attrs.perception + 1, 100)