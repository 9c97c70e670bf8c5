"""Domain model for a football management simulation: players, training, fitness, teams, formations, squads and finances."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "events",
    "player",
    "development",
    "fitness",
    "formation",
    "team",
    "finances",
    "squad",
]