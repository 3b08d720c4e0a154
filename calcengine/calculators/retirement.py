"""
Retirement savings projection.

Grows current savings plus a monthly contribution at a fixed annual return,
compounded monthly, from the current age to the retirement age. Each year's
balance is also reported in today's dollars using the given inflation rate.
"""

from typing import List

from calcengine.calculators.base import CalculatorModel
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up

logger = get_logger(__name__)


class RetirementInput(CalculatorModel):
    current_age: int
    retirement_age: int
    current_savings: float
    monthly_contribution: float
    annual_return: float  # e.g. 7 for 7%
    inflation_rate: float  # e.g. 3 for 3%


class YearlyProjectionEntry(CalculatorModel):
    age: int
    year: int
    contributions: float
    growth: float
    total: float
    inflation_adjusted: float


class RetirementResult(CalculatorModel):
    projected_balance: float
    inflation_adjusted_balance: float
    total_contributions: float
    total_growth: float
    yearly_projection: List[YearlyProjectionEntry]


def calculate_retirement(data: RetirementInput) -> RetirementResult:
    """
    Project retirement savings year by year.

    Already at or past the retirement age means there is nothing to project:
    current savings are returned unchanged with an empty projection.
    """
    years_to_retirement = max(data.retirement_age - data.current_age, 0)
    monthly_rate = data.annual_return / 100 / 12
    savings = data.current_savings

    if years_to_retirement <= 0:
        return RetirementResult(
            projected_balance=savings,
            inflation_adjusted_balance=savings,
            total_contributions=savings,
            total_growth=0,
            yearly_projection=[],
        )

    yearly_projection = []
    balance = savings
    total_contributed = savings

    for year in range(1, years_to_retirement + 1):
        # Compound monthly for the year
        for _ in range(12):
            balance = balance * (1 + monthly_rate) + data.monthly_contribution

        total_contributed += data.monthly_contribution * 12
        growth = balance - total_contributed
        inflation_adjusted = balance / (1 + data.inflation_rate / 100) ** year

        yearly_projection.append(YearlyProjectionEntry(
            age=data.current_age + year,
            year=year,
            contributions=round_half_up(total_contributed),
            growth=round_half_up(max(growth, 0)),
            total=round_half_up(balance),
            inflation_adjusted=round_half_up(inflation_adjusted),
        ))

    last = yearly_projection[-1]
    logger.debug(f"Retirement projection: years={years_to_retirement}, balance={last.total}")

    return RetirementResult(
        projected_balance=last.total or savings,
        inflation_adjusted_balance=last.inflation_adjusted or savings,
        total_contributions=last.contributions or savings,
        total_growth=last.growth or 0,
        yearly_projection=yearly_projection,
    )
