"""Match fatigue, daily recovery and injury risk."""

from __future__ import annotations

from fantasy_league.player import Player, Position

_POSITION_FATIGUE: dict[Position, float] = {
    Position.GK: 0.6,
    Position.DEF: 0.85,
    Position.MID: 1.15,
    Position.FWD: 1.0,
}

_MAX_MATCH_FATIGUE = 60.0
_MAX_INJURY_RISK = 0.5


class FitnessManager:
    """Calculates and applies changes to player fitness."""

    def __init__(
        self,
        fatigue_rate: float = 0.15,
        recovery_rate: float = 10.0,
        injury_threshold: float = 40.0,
    ) -> None:
        self.fatigue_rate = fatigue_rate
        self.recovery_rate = recovery_rate
        self.injury_threshold = injury_threshold

    def match_fatigue(self, player: Player, minutes_played: int, match_intensity: float) -> float:
        """Fitness lost over a match, capped at 60."""
        if minutes_played == 0:
            return 0.0

        fatigue = minutes_played * self.fatigue_rate * match_intensity
        fatigue *= 1.5 - player.attributes.stamina / 100

        age = player.age()
        if age > 30:
            fatigue *= 1.0 + (age - 30) * 0.05

        fatigue *= _POSITION_FATIGUE.get(player.position, 1.0)
        return min(fatigue, _MAX_MATCH_FATIGUE)

    def daily_recovery(self, player: Player, training_intensity: float) -> float:
        """Fitness regained over one day."""
        recovery = self.recovery_rate + player.attributes.stamina / 20

        age = player.age()
        if age < 23:
            recovery *= 1.2
        elif age > 30:
            recovery *= 0.9 - (age - 30) * 0.02

        recovery *= 2 - training_intensity
        recovery *= 1 + player.attributes.professionalism / 200
        return recovery

    def injury_risk(self, player: Player) -> float:
        """Probability of injury, from low fitness and age, capped at 0.5."""
        risk = 0.0
        if player.fitness < self.injury_threshold:
            risk += (self.injury_threshold - player.fitness) / 100

        age = player.age()
        if age > 30:
            risk += (age - 30) * 0.01

        return min(risk, _MAX_INJURY_RISK)

    def apply_match_fitness(self, player: Player, minutes_played: int, intensity: float) -> None:
        """Reduce the player's fitness by the match fatigue, not below zero."""
        fatigue = self.match_fatigue(player, minutes_played, intensity)
        player.fitness = max(0.0, player.fitness - fatigue)

    def apply_daily_recovery(self, player: Player, training_intensity: float) -> None:
        """Raise the player's fitness by a day's recovery, not above 100."""
        recovery = self.daily_recovery(player, training_intensity)
        player.fitness = min(100.0, player.fitness + recovery)