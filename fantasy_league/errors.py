"""Domain errors raised by the league model."""

from __future__ import annotations

from typing import Any, Mapping


class DomainError(Exception):
    """An error in the league domain, identified by a stable code."""

    code: str = "DOMAIN_ERROR"
    message: str = "Domain error"

    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        self.code = code if code is not None else type(self).code
        self.message = message if message is not None else type(self).message
        self.details: dict[str, Any] = dict(details) if details else {}
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PlayerNotFoundError(DomainError):
    code = "PLAYER_NOT_FOUND"
    message = "Player not found"


class TeamNotFoundError(DomainError):
    code = "TEAM_NOT_FOUND"
    message = "Team not found"


class InvalidFormationError(DomainError):
    code = "INVALID_FORMATION"
    message = "Invalid formation"


class InsufficientPlayersError(DomainError):
    code = "INSUFFICIENT_PLAYERS"
    message = "Not enough players for lineup"


class PlayerUnavailableError(DomainError):
    code = "PLAYER_UNAVAILABLE"
    message = "Player is unavailable"


class MatchAlreadyPlayedError(DomainError):
    code = "MATCH_ALREADY_PLAYED"
    message = "Match has already been played"


class InvalidTacticsError(DomainError):
    code = "INVALID_TACTICS"
    message = "Invalid tactical settings"


class SeasonNotActiveError(DomainError):
    code = "SEASON_NOT_ACTIVE"
    message = "Season is not active"


class FixtureConflictError(DomainError):
    code = "FIXTURE_CONFLICT"
    message = "Fixture scheduling conflict"