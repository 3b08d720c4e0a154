"""
Gender wage gap estimator.

Looks up median earnings for men and women in an occupation and adjusts both
by education, experience and state multipliers from the bundled reference
data. The gap is then projected over a career with 3% annual wage growth.
"""

from typing import List, Optional

from calcengine.calculators.base import CalculatorModel
from calcengine.data.loader import WageGapData, get_wage_gap_data
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up
from calcengine.utils.validators import safe_divide

logger = get_logger(__name__)

ANNUAL_GROWTH = 0.03
CAREER_COST_YEARS = (10, 20, 30)
CAREER_YEARS = 30

GENDERS = [
    ("women", "Woman"),
    ("men", "Man"),
]

EDUCATION_LEVELS = [
    ("high_school", "High School Diploma"),
    ("some_college", "Some College"),
    ("associates", "Associate's Degree"),
    ("bachelors", "Bachelor's Degree"),
    ("masters", "Master's Degree"),
    ("professional", "Professional Degree (JD, MD)"),
    ("doctorate", "Doctorate (PhD)"),
]

EXPERIENCE_RANGES = [
    ("0-2", "0-2 years"),
    ("3-5", "3-5 years"),
    ("6-10", "6-10 years"),
    ("11-15", "11-15 years"),
    ("16-20", "16-20 years"),
    ("21-30", "21-30 years"),
    ("30+", "30+ years"),
]


class WageGapInput(CalculatorModel):
    salary: float = 0  # shown alongside the medians, not used in the gap itself
    gender: str = "women"
    occupation: int = 0  # index into the occupation table
    experience: str = "6-10"
    education: str = "bachelors"
    state_region: str = "National"


class CareerCost(CalculatorModel):
    years: int
    cost: float


class CareerEarnings(CalculatorModel):
    year: int
    your_earnings: float
    median_earnings: float


class WageGapResult(CalculatorModel):
    your_median: float
    other_median: float
    gap_amount: float
    gap_percent: float
    is_underpaid: bool
    unadjusted_gap_percent: float
    career_cost: List[CareerCost]
    career_data: List[CareerEarnings]
    occupation_name: str


def calculate_wage_gap(data: WageGapInput, reference: Optional[WageGapData] = None) -> WageGapResult:
    """
    Estimate the adjusted wage gap for one profile.

    Args:
        data: Profile (gender, occupation index, experience, education, state)
        reference: Reference data; the bundled file is used when omitted

    Returns:
        WageGapResult with medians rounded to whole dollars. Unknown
        multiplier keys count as 1.0, an out-of-range occupation falls back to
        the first entry, and any gender other than "women" is treated as "men".
    """
    reference = reference or get_wage_gap_data()

    occupations = reference.occupations
    index = data.occupation if 0 <= data.occupation < len(occupations) else 0
    occupation = occupations[index]

    multiplier = (
        (reference.education_multipliers.get(data.education) or 1)
        * (reference.experience_multipliers.get(data.experience) or 1)
        * (reference.state_adjustments.get(data.state_region) or 1)
    )
    base_men = occupation.men * multiplier
    base_women = occupation.women * multiplier

    is_women = data.gender == "women"
    your_median = base_women if is_women else base_men
    other_median = base_men if is_women else base_women

    gap_amount = abs(other_median - your_median)
    gap_percent = abs(safe_divide(other_median - your_median, max(other_median, 0)) * 100)

    career_cost = []
    for years in CAREER_COST_YEARS:
        total_gap = sum(gap_amount * (1 + ANNUAL_GROWTH) ** y for y in range(years))
        career_cost.append(CareerCost(years=years, cost=round_half_up(total_gap)))

    career_data = []
    your_cumulative = 0.0
    other_cumulative = 0.0
    for year in range(CAREER_YEARS + 1):
        if year > 0:
            growth = (1 + ANNUAL_GROWTH) ** (year - 1)
            your_cumulative += your_median * growth
            other_cumulative += other_median * growth
        career_data.append(CareerEarnings(
            year=year,
            your_earnings=round_half_up(your_cumulative),
            median_earnings=round_half_up(other_cumulative),
        ))

    logger.debug(f"Wage gap: occupation={occupation.category}, gap={gap_amount:.0f}")

    return WageGapResult(
        your_median=round_half_up(your_median),
        other_median=round_half_up(other_median),
        gap_amount=round_half_up(gap_amount),
        gap_percent=gap_percent,
        is_underpaid=your_median < other_median,
        unadjusted_gap_percent=(1 - reference.overall.gap_cents) * 100,
        career_cost=career_cost,
        career_data=career_data,
        occupation_name=occupation.category,
    )
