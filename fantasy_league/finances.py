"""Team budget, wages and match-day revenue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from fantasy_league.team import Team

_BASE_TICKET_PRICE = 30
_PREMIUM_UTILIZATION = 0.9
_PREMIUM_MULTIPLIER = 1.2
_EXTRA_REVENUE_MULTIPLIER = 1.3
_BASE_SEASON_BUDGET = 10_000_000
_WEEKS_PER_YEAR = 52

_CUP_BONUS: dict[str, int] = {
    "winner": 5_000_000,
    "final": 3_000_000,
    "semi": 1_500_000,
    "quarter": 500_000,
}


class TransactionType(str, Enum):
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"
    WAGES = "wages"
    TICKET_SALES = "ticket_sales"
    SPONSORSHIP = "sponsorship"
    PRIZE_MONEY = "prize_money"
    OTHER = "other"


@dataclass
class Transaction:
    id: str
    type: TransactionType
    amount: int
    description: str = ""
    date: datetime | None = None
    player_id: str = ""


class FinancialManager:
    """Budget checks and income calculations for one team."""

    def __init__(self, team: Team) -> None:
        self.team = team

    def can_afford_transfer(self, fee: int, wages: int) -> bool:
        """Whether both the fee and the added weekly wages fit the budgets."""
        if fee > self.team.budget:
            return False
        return self.total_wages() + wages <= self.team.wage_budget

    def total_wages(self) -> int:
        return sum(p.wage for p in self.team.players)

    def wage_budget_remaining(self) -> int:
        return self.team.wage_budget - self.total_wages()

    def match_revenue(self, attendance: int, is_home: bool) -> int:
        """Gate and match-day income; away teams take nothing."""
        if not is_home:
            return 0

        price = _BASE_TICKET_PRICE
        capacity = self.team.stadium.capacity
        if capacity > 0:
            premium = attendance / capacity > _PREMIUM_UTILIZATION
        else:
            premium = attendance > 0
        if premium:
            price = int(price * _PREMIUM_MULTIPLIER)

        revenue = price * attendance
        return int(revenue * _EXTRA_REVENUE_MULTIPLIER)

    def calculate_season_budget(self, league_position: int, cup_progress: str) -> None:
        """Set next season's transfer and weekly wage budgets."""
        budget = _BASE_SEASON_BUDGET
        if league_position <= 3:
            budget *= 3
        elif league_position <= 6:
            budget *= 2
        elif league_position <= 10:
            budget = int(budget * 1.5)

        budget += _CUP_BONUS.get(cup_progress, 0)

        self.team.budget = budget
        self.team.wage_budget = budget // _WEEKS_PER_YEAR