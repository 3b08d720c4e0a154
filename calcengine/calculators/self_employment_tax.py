"""
Self-employment tax calculator (2024).

SE tax is the self-employed equivalent of FICA: both the employee and
employer halves of Social Security and Medicare.

- 92.35% of net earnings is subject to SE tax
- Social Security: 12.4%, capped at the annual wage base
- Medicare: 2.9% on all SE earnings
- Additional Medicare: 0.9% on net earnings above $200,000

Filing status is accepted for the page's income tax follow-up but does not
change the SE tax itself.
"""

from calcengine.calculators.base import CalculatorModel
from calcengine.logging_config import get_logger

logger = get_logger(__name__)

SE_INCOME_FACTOR = 0.9235
SS_WAGE_BASE = 168600
SE_TAX_RATE_SS = 0.124
SE_TAX_RATE_MEDICARE = 0.029
ADDITIONAL_MEDICARE_THRESHOLD = 200000
ADDITIONAL_MEDICARE_RATE = 0.009

SE_FILING_STATUSES = [
    ("single", "Single"),
    ("married", "Married"),
    ("head", "Head of Household"),
]


class SelfEmploymentTaxInput(CalculatorModel):
    net_income: float
    filing_status: str = "single"


class SelfEmploymentTaxResult(CalculatorModel):
    se_taxable_income: float
    se_tax: float
    social_security_tax: float
    medicare_tax: float
    additional_medicare_tax: float
    deductible_half: float
    effective_rate: float  # percent of net income


def calculate_self_employment_tax(data: SelfEmploymentTaxInput) -> SelfEmploymentTaxResult:
    """
    Calculate self-employment tax on net self-employment income.

    The additional Medicare threshold is compared against net income while the
    surtax base is capped at SE-taxable income.

    Returns all zeros for zero or negative net income.
    """
    net_income = data.net_income

    if net_income <= 0:
        return SelfEmploymentTaxResult(
            se_taxable_income=0,
            se_tax=0,
            social_security_tax=0,
            medicare_tax=0,
            additional_medicare_tax=0,
            deductible_half=0,
            effective_rate=0,
        )

    se_taxable_income = net_income * SE_INCOME_FACTOR

    social_security_tax = min(se_taxable_income, SS_WAGE_BASE) * SE_TAX_RATE_SS
    medicare_tax = se_taxable_income * SE_TAX_RATE_MEDICARE

    additional_medicare_base = max(net_income - ADDITIONAL_MEDICARE_THRESHOLD, 0)
    additional_medicare_tax = min(additional_medicare_base, se_taxable_income) * ADDITIONAL_MEDICARE_RATE

    se_tax = social_security_tax + medicare_tax + additional_medicare_tax

    logger.debug(f"SE tax: net={net_income:.2f}, se_tax={se_tax:.2f}")

    return SelfEmploymentTaxResult(
        se_taxable_income=se_taxable_income,
        se_tax=se_tax,
        social_security_tax=social_security_tax,
        medicare_tax=medicare_tax,
        additional_medicare_tax=additional_medicare_tax,
        deductible_half=se_tax / 2,
        effective_rate=(se_tax / net_income) * 100,
    )
