"""
Take-home pay calculator (2025 tax year).

Estimates net pay from a gross salary:

- Pre-tax deductions (401k percentage, health insurance) reduce income
  subject to federal and state tax, but not FICA
- Federal income tax with the 2025 brackets and standard deduction
- State income tax as a simplified flat rate on taxable income
- Social Security (6.2% up to the wage base) and Medicare (1.45%, plus
  0.9% over $200,000) on gross wages

Rates in the result are percentages (22.0 for 22%).
"""

from calcengine.calculators.base import CalculatorModel
from calcengine.calculators.federal_tax import TaxBracket, INF
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up
from calcengine.utils.validators import safe_divide

logger = get_logger(__name__)

# ==================== 2025 TAX DATA ====================

SINGLE_BRACKETS = [
    TaxBracket(0, 11925, 0.10),
    TaxBracket(11925, 48475, 0.12),
    TaxBracket(48475, 103350, 0.22),
    TaxBracket(103350, 197300, 0.24),
    TaxBracket(197300, 250525, 0.32),
    TaxBracket(250525, 626350, 0.35),
    TaxBracket(626350, INF, 0.37),
]

MARRIED_BRACKETS = [TaxBracket(b.min * 2, b.max * 2, b.rate) for b in SINGLE_BRACKETS]

HOH_BRACKETS = [
    TaxBracket(0, 17000, 0.10),
    TaxBracket(17000, 64850, 0.12),
    TaxBracket(64850, 103350, 0.22),
    TaxBracket(103350, 197300, 0.24),
    TaxBracket(197300, 250500, 0.32),
    TaxBracket(250500, 626350, 0.35),
    TaxBracket(626350, INF, 0.37),
]

BRACKETS_BY_STATUS = {
    "single": SINGLE_BRACKETS,
    "married": MARRIED_BRACKETS,
    "hoh": HOH_BRACKETS,
}

STANDARD_DEDUCTIONS = {
    "single": 15000,
    "married": 30000,
    "hoh": 22500,
}

FILING_STATUSES = [
    ("single", "Single"),
    ("married", "Married Filing Jointly"),
    ("hoh", "Head of Household"),
]

SS_WAGE_BASE = 176100
SS_RATE = 0.062
MEDICARE_RATE = 0.0145
ADDITIONAL_MEDICARE_THRESHOLD = 200000
ADDITIONAL_MEDICARE_RATE = 0.009

# Simplified flat state income tax rates
STATE_TAX_RATES = {
    "AL": ("Alabama", 0.05),
    "AK": ("Alaska", 0),
    "AZ": ("Arizona", 0.025),
    "CA": ("California", 0.093),
    "CO": ("Colorado", 0.044),
    "CT": ("Connecticut", 0.05),
    "FL": ("Florida", 0),
    "GA": ("Georgia", 0.055),
    "HI": ("Hawaii", 0.0725),
    "ID": ("Idaho", 0.058),
    "IL": ("Illinois", 0.0495),
    "IN": ("Indiana", 0.0305),
    "MA": ("Massachusetts", 0.05),
    "MD": ("Maryland", 0.0575),
    "MI": ("Michigan", 0.0425),
    "MN": ("Minnesota", 0.0785),
    "NJ": ("New Jersey", 0.0637),
    "NV": ("Nevada", 0),
    "NH": ("New Hampshire", 0),
    "NY": ("New York", 0.0685),
    "NC": ("North Carolina", 0.0475),
    "OH": ("Ohio", 0.035),
    "OR": ("Oregon", 0.09),
    "PA": ("Pennsylvania", 0.0307),
    "SD": ("South Dakota", 0),
    "TN": ("Tennessee", 0),
    "TX": ("Texas", 0),
    "UT": ("Utah", 0.0465),
    "VA": ("Virginia", 0.0575),
    "WA": ("Washington", 0),
    "WI": ("Wisconsin", 0.0653),
    "WY": ("Wyoming", 0),
}

PAY_FREQUENCIES = {
    "weekly": ("Weekly (52)", 52),
    "biweekly": ("Biweekly (26)", 26),
    "semimonthly": ("Semi-Monthly (24)", 24),
    "monthly": ("Monthly (12)", 12),
}
DEFAULT_PAY_PERIODS = 26


class TakeHomePayInput(CalculatorModel):
    gross_salary: float
    filing_status: str = "single"
    state: str = "CA"
    pay_frequency: str = "biweekly"
    retirement_contribution_percent: float = 0  # 401(k) percent of gross
    health_insurance: float = 0  # annual premium


class TakeHomePayResult(CalculatorModel):
    federal_tax: float
    state_tax: float
    social_security: float
    medicare: float
    total_taxes: float
    pre_tax_deductions: float
    annual_net_pay: float
    net_pay_per_period: float
    effective_tax_rate: float
    marginal_rate: float


def progressive_tax(taxable_income: float, brackets) -> float:
    """Tax owed on `taxable_income` under a progressive bracket table."""
    tax = 0.0
    remaining = max(taxable_income, 0)
    for bracket in brackets:
        taxable_in_bracket = min(remaining, bracket.max - bracket.min)
        if taxable_in_bracket <= 0:
            break
        tax += taxable_in_bracket * bracket.rate
        remaining -= taxable_in_bracket
    return tax


def calculate_take_home_pay(data: TakeHomePayInput) -> TakeHomePayResult:
    """
    Estimate annual and per-paycheck take-home pay.

    Unknown filing statuses use the single brackets and deduction; unknown
    states have no state tax; unknown pay frequencies are treated as biweekly.
    """
    gross = data.gross_salary

    contribution_401k = round_half_up(gross * (data.retirement_contribution_percent / 100))
    pre_tax_deductions = contribution_401k + data.health_insurance
    taxable_income = max(gross - pre_tax_deductions, 0)

    standard_deduction = STANDARD_DEDUCTIONS.get(data.filing_status, 15000)
    federal_taxable_income = max(taxable_income - standard_deduction, 0)
    brackets = BRACKETS_BY_STATUS.get(data.filing_status, SINGLE_BRACKETS)
    federal_tax = progressive_tax(federal_taxable_income, brackets)

    _, state_rate = STATE_TAX_RATES.get(data.state, (None, 0))
    state_tax = taxable_income * state_rate

    # FICA is on gross wages, not reduced by pre-tax deductions
    social_security = min(gross, SS_WAGE_BASE) * SS_RATE
    medicare = gross * MEDICARE_RATE + max(gross - ADDITIONAL_MEDICARE_THRESHOLD, 0) * ADDITIONAL_MEDICARE_RATE

    total_taxes = federal_tax + state_tax + social_security + medicare
    annual_net_pay = gross - (total_taxes + pre_tax_deductions)

    _, periods = PAY_FREQUENCIES.get(data.pay_frequency, (None, DEFAULT_PAY_PERIODS))

    marginal_rate = next(
        (b.rate for b in brackets if b.min <= federal_taxable_income < b.max),
        0,
    )

    logger.debug(
        f"Take-home pay: gross={gross:.2f}, taxes={total_taxes:.2f}, net={annual_net_pay:.2f}"
    )

    return TakeHomePayResult(
        federal_tax=federal_tax,
        state_tax=state_tax,
        social_security=social_security,
        medicare=medicare,
        total_taxes=total_taxes,
        pre_tax_deductions=pre_tax_deductions,
        annual_net_pay=annual_net_pay,
        net_pay_per_period=annual_net_pay / periods,
        effective_tax_rate=safe_divide(total_taxes, max(gross, 0)) * 100,
        marginal_rate=marginal_rate * 100,
    )
