"""
Federal income tax estimator (2024 tax year).

Applies the standard deduction (or a caller-supplied deduction) and walks the
progressive bracket table for the filing status, taxing only the slice of
income that falls inside each bracket.

Filing statuses:
    single - Single
    mfj    - Married Filing Jointly
    mfs    - Married Filing Separately
    hoh    - Head of Household

Note: this is an estimate of ordinary income tax only. Credits, capital
gains rates and AMT are not modelled.
"""

from typing import Dict, List, NamedTuple, Optional

from calcengine.calculators.base import CalculatorModel
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up
from calcengine.utils.validators import safe_divide

logger = get_logger(__name__)


class TaxBracket(NamedTuple):
    min: float
    max: float
    rate: float


INF = float('inf')

FILING_STATUSES = [
    ("single", "Single"),
    ("mfj", "Married Filing Jointly"),
    ("mfs", "Married Filing Separately"),
    ("hoh", "Head of Household"),
]

# ==================== 2024 TAX DATA ====================

BRACKETS: Dict[str, List[TaxBracket]] = {
    "single": [
        TaxBracket(0, 11600, 0.10),
        TaxBracket(11600, 47150, 0.12),
        TaxBracket(47150, 100525, 0.22),
        TaxBracket(100525, 191950, 0.24),
        TaxBracket(191950, 243725, 0.32),
        TaxBracket(243725, 609350, 0.35),
        TaxBracket(609350, INF, 0.37),
    ],
    "mfj": [
        TaxBracket(0, 23200, 0.10),
        TaxBracket(23200, 94300, 0.12),
        TaxBracket(94300, 201050, 0.22),
        TaxBracket(201050, 383900, 0.24),
        TaxBracket(383900, 487450, 0.32),
        TaxBracket(487450, 731200, 0.35),
        TaxBracket(731200, INF, 0.37),
    ],
    "mfs": [
        TaxBracket(0, 11600, 0.10),
        TaxBracket(11600, 47150, 0.12),
        TaxBracket(47150, 100525, 0.22),
        TaxBracket(100525, 191950, 0.24),
        TaxBracket(191950, 243725, 0.32),
        TaxBracket(243725, 365600, 0.35),
        TaxBracket(365600, INF, 0.37),
    ],
    "hoh": [
        TaxBracket(0, 16550, 0.10),
        TaxBracket(16550, 63100, 0.12),
        TaxBracket(63100, 100500, 0.22),
        TaxBracket(100500, 191950, 0.24),
        TaxBracket(191950, 243700, 0.32),
        TaxBracket(243700, 609350, 0.35),
        TaxBracket(609350, INF, 0.37),
    ],
}

STANDARD_DEDUCTIONS = {
    "single": 14600,
    "mfj": 29200,
    "mfs": 14600,
    "hoh": 21900,
}


class FederalTaxInput(CalculatorModel):
    income: float
    filing_status: str = "single"
    deductions: Optional[float] = None  # overrides the standard deduction when given


class BracketBreakdown(CalculatorModel):
    bracket: str
    amount: float
    rate: float


class FederalTaxResult(CalculatorModel):
    taxable_income: float
    federal_tax: float
    effective_rate: float
    marginal_rate: float
    bracket_breakdown: List[BracketBreakdown]


def calculate_federal_tax(data: FederalTaxInput) -> FederalTaxResult:
    """
    Calculate federal income tax using progressive brackets, with per-bracket breakdown.

    Unknown filing statuses are taxed as single. Rates in the result are
    fractions (0.22 for 22%).

    Args:
        data: Gross income, filing status and optional deduction override

    Returns:
        FederalTaxResult; the breakdown lists only brackets that contributed tax
    """
    filing_status = data.filing_status if data.filing_status in BRACKETS else "single"
    deduction = data.deductions if data.deductions is not None else STANDARD_DEDUCTIONS[filing_status]
    taxable_income = max(data.income - deduction, 0)

    total_tax = 0.0
    marginal_rate = 0.0
    breakdown = []

    for bracket in BRACKETS[filing_status]:
        if taxable_income <= bracket.min:
            break
        taxable_in_bracket = min(taxable_income, bracket.max) - bracket.min
        tax_in_bracket = taxable_in_bracket * bracket.rate
        total_tax += tax_in_bracket
        marginal_rate = bracket.rate

        if tax_in_bracket > 0:
            breakdown.append(BracketBreakdown(
                bracket=f"{round_half_up(bracket.rate * 100):.0f}%",
                amount=round_half_up(tax_in_bracket),
                rate=bracket.rate,
            ))

    effective_rate = safe_divide(total_tax, max(data.income, 0))

    logger.debug(
        f"Federal tax ({filing_status}): taxable={taxable_income:.2f}, tax={total_tax:.2f}, "
        f"marginal={marginal_rate}"
    )

    return FederalTaxResult(
        taxable_income=taxable_income,
        federal_tax=total_tax,
        effective_rate=effective_rate,
        marginal_rate=marginal_rate,
        bracket_breakdown=breakdown,
    )
