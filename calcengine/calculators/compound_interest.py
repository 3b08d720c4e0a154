"""
Compound interest calculator.

Projects a starting balance plus a recurring monthly contribution forward at
a fixed annual rate, compounding daily, monthly, quarterly or annually.
Contributions are spread evenly across compounding periods.
"""

from enum import Enum
from typing import List

from pydantic import field_validator

from calcengine.calculators.base import CalculatorModel
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up

logger = get_logger(__name__)


class CompoundingFrequency(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

    @classmethod
    def _missing_(cls, value):
        # Unrecognized frequencies compound monthly
        return cls.MONTHLY

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[self]


PERIODS_PER_YEAR = {
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.ANNUALLY: 1,
}


class CompoundInterestInput(CalculatorModel):
    principal: float
    monthly_contribution: float
    annual_rate: float  # e.g. 8 for 8%
    years: float
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.MONTHLY

    @field_validator("compounding_frequency", mode="before")
    @classmethod
    def _default_frequency(cls, value):
        return CompoundingFrequency(value)


class YearlyBreakdownEntry(CalculatorModel):
    year: int
    contributions: float
    interest: float
    total: float


class CompoundInterestResult(CalculatorModel):
    future_value: float
    total_contributions: float
    total_interest: float
    yearly_breakdown: List[YearlyBreakdownEntry]


def calculate_compound_interest(data: CompoundInterestInput) -> CompoundInterestResult:
    """
    Project the future value of savings with recurring contributions.

    With a non-positive rate or horizon there is no growth: the future value
    is simply the principal plus every contribution made over the horizon.

    Args:
        data: Starting principal, monthly contribution, annual rate (percent),
            horizon in years and compounding frequency

    Returns:
        CompoundInterestResult with a whole-dollar yearly breakdown
    """
    rate = data.annual_rate / 100
    annual_contribution = data.monthly_contribution * 12

    if rate <= 0 or data.years <= 0:
        total_contributed = data.principal + annual_contribution * data.years
        return CompoundInterestResult(
            future_value=total_contributed,
            total_contributions=total_contributed,
            total_interest=0,
            yearly_breakdown=[],
        )

    periods_per_year = data.compounding_frequency.periods_per_year
    contribution_per_period = annual_contribution / periods_per_year
    rate_per_period = rate / periods_per_year

    yearly_breakdown = []
    balance = data.principal
    total_contributed = data.principal

    for year in range(1, int(data.years) + 1):
        for _ in range(periods_per_year):
            balance = balance * (1 + rate_per_period) + contribution_per_period

        total_contributed += annual_contribution
        interest = max(balance - total_contributed, 0)

        yearly_breakdown.append(YearlyBreakdownEntry(
            year=year,
            contributions=round_half_up(total_contributed),
            interest=round_half_up(interest),
            total=round_half_up(balance),
        ))

    logger.debug(
        f"Compound interest: years={data.years}, frequency={data.compounding_frequency.value}, "
        f"final_balance={balance:.2f}"
    )

    # Fractional horizons shorter than a year produce no entries
    last = yearly_breakdown[-1] if yearly_breakdown else None
    return CompoundInterestResult(
        future_value=(last.total if last else 0) or data.principal,
        total_contributions=(last.contributions if last else 0) or data.principal,
        total_interest=(last.interest if last else 0) or 0,
        yearly_breakdown=yearly_breakdown,
    )
