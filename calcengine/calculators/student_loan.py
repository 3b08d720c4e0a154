"""
Student loan repayment calculator.

Models the four federal repayment plan shapes:

- standard: level payment over the chosen term
- graduated: starts at 60% of the standard payment and steps up every
  two years, ending at 140%
- extended: level payment over 25 years
- income-driven: approximated as a level payment over 20 years

Besides the selected plan's schedule, the result carries a side-by-side
comparison of all four plans and a yearly balance series for each.
"""

import math
from typing import Dict, List, Union

from calcengine.calculators.base import CalculatorModel
from calcengine.calculators.loan import monthly_loan_payment
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up

logger = get_logger(__name__)

STANDARD = "standard"
GRADUATED = "graduated"
EXTENDED = "extended"
INCOME_DRIVEN = "income-driven"

REPAYMENT_PLANS = [STANDARD, GRADUATED, EXTENDED, INCOME_DRIVEN]

PLAN_LABELS = {
    STANDARD: "Standard (10 yr)",
    GRADUATED: "Graduated (10 yr)",
    EXTENDED: "Extended (25 yr)",
    INCOME_DRIVEN: "Income-Driven (20 yr)",
}

# Fixed terms (years) for plans that ignore the chosen loan term
FIXED_PLAN_TERMS = {EXTENDED: 25, INCOME_DRIVEN: 20}

# Term used for standard/graduated in the plan comparison
COMPARISON_TERM_YEARS = 10
BALANCE_CHART_YEARS = 25


class StudentLoanInput(CalculatorModel):
    loan_balance: float
    interest_rate: float  # e.g. 5.5 for 5.5%
    loan_term_years: int = 10
    extra_payment: float = 0
    repayment_plan: str = STANDARD


class AmortizationRow(CalculatorModel):
    month: int
    year: int
    balance: float
    payment: float
    principal: float
    interest: float
    total_paid: float
    total_interest: float


class PlanComparison(CalculatorModel):
    plan: str
    starting_payment: float
    total_interest: float
    total_cost: float
    months: int


class StudentLoanResult(CalculatorModel):
    monthly_payment: float
    total_interest: float
    total_cost: float
    payoff_months: int
    interest_saved: float
    amortization: List[AmortizationRow]
    plan_comparisons: List[PlanComparison]
    balance_over_time: List[Dict[str, Union[int, float]]]


def standard_payment(balance: float, annual_rate: float, term_years: int) -> float:
    """Level monthly payment over `term_years`; zero for a non-positive term."""
    months = term_years * 12
    if months <= 0:
        return 0.0
    return monthly_loan_payment(balance, annual_rate / 100 / 12, months)


def _row(month, remaining, payment, principal_paid, interest, total_paid, total_interest):
    return AmortizationRow(
        month=month,
        year=math.ceil(month / 12),
        balance=remaining,
        payment=payment,
        principal=principal_paid,
        interest=interest,
        total_paid=total_paid,
        total_interest=total_interest,
    )


def build_amortization(
    balance: float,
    annual_rate: float,
    monthly_payment: float,
    extra_payment: float = 0,
    max_months: int = 360,
) -> List[AmortizationRow]:
    """
    Amortize a level payment (plus optional extra) until paid off or max_months.

    A payment never exceeds the remaining balance plus the month's interest.
    """
    monthly_rate = annual_rate / 100 / 12
    remaining = balance
    total_paid = 0.0
    total_interest = 0.0
    rows = []

    month = 1
    while month <= max_months and remaining > 0.01:
        interest = remaining * monthly_rate
        payment = min(monthly_payment + extra_payment, remaining + interest)
        principal_paid = payment - interest
        remaining = max(remaining - principal_paid, 0)
        total_paid += payment
        total_interest += interest
        rows.append(_row(month, remaining, payment, principal_paid, interest, total_paid, total_interest))
        month += 1

    return rows


def build_graduated_amortization(
    balance: float,
    annual_rate: float,
    term_years: int,
    extra_payment: float = 0,
) -> List[AmortizationRow]:
    """
    Amortize a graduated plan: payments step up every 24 months from 60% to
    140% of the standard payment. A scheduled payment is never allowed to fall
    below the month's interest.
    """
    monthly_rate = annual_rate / 100 / 12
    total_months = term_years * 12
    base_payment = standard_payment(balance, annual_rate, term_years)
    steps = math.ceil(term_years / 2)
    remaining = balance
    total_paid = 0.0
    total_interest = 0.0
    rows = []

    month = 1
    while month <= total_months and remaining > 0.01:
        step = (month - 1) // 24
        scale = 0.6 + (0.8 * step) / max(steps - 1, 1)
        scheduled = base_payment * scale
        interest = remaining * monthly_rate
        payment = min(max(scheduled, interest) + extra_payment, remaining + interest)
        principal_paid = payment - interest
        remaining = max(remaining - principal_paid, 0)
        total_paid += payment
        total_interest += interest
        rows.append(_row(month, remaining, payment, principal_paid, interest, total_paid, total_interest))
        month += 1

    return rows


def _plan_amortization(plan, balance, annual_rate, term_years, extra_payment=0):
    """Payment and schedule for one plan; returns (payment, rows)."""
    if plan == GRADUATED:
        rows = build_graduated_amortization(balance, annual_rate, term_years, extra_payment)
        first_payment = max(
            standard_payment(balance, annual_rate, term_years) * 0.6,
            balance * annual_rate / 100 / 12,
        )
        return (first_payment if rows else 0.0), rows
    term_years = FIXED_PLAN_TERMS.get(plan, term_years)
    payment = standard_payment(balance, annual_rate, term_years)
    return payment, build_amortization(balance, annual_rate, payment, extra_payment, term_years * 12)


def calculate_student_loan(data: StudentLoanInput) -> StudentLoanResult:
    """
    Calculate the selected repayment plan and compare it against the others.

    Unknown plan names are treated as the standard plan. A non-positive
    balance or a negative rate returns a zero-valued result.
    """
    if data.loan_balance <= 0 or data.interest_rate < 0:
        return StudentLoanResult(
            monthly_payment=0, total_interest=0, total_cost=0, payoff_months=0,
            interest_saved=0, amortization=[], plan_comparisons=[], balance_over_time=[],
        )

    plan = data.repayment_plan if data.repayment_plan in REPAYMENT_PLANS else STANDARD
    balance = data.loan_balance
    rate = data.interest_rate

    monthly_payment, amortization = _plan_amortization(
        plan, balance, rate, data.loan_term_years, data.extra_payment
    )
    last = amortization[-1] if amortization else None
    total_interest = last.total_interest if last else 0.0
    total_cost = last.total_paid if last else 0.0

    interest_saved = 0.0
    if data.extra_payment > 0:
        _, baseline = _plan_amortization(plan, balance, rate, data.loan_term_years)
        baseline_interest = baseline[-1].total_interest if baseline else 0.0
        interest_saved = baseline_interest - total_interest

    # Side-by-side comparison at each plan's own term, no extra payment
    plan_rows = {
        p: _plan_amortization(p, balance, rate, COMPARISON_TERM_YEARS) for p in REPAYMENT_PLANS
    }
    plan_comparisons = []
    for p, (payment, rows) in plan_rows.items():
        plan_comparisons.append(PlanComparison(
            plan=PLAN_LABELS[p],
            starting_payment=payment,
            total_interest=rows[-1].total_interest if rows else 0.0,
            total_cost=rows[-1].total_paid if rows else 0.0,
            months=len(rows),
        ))

    balance_over_time = []
    for year in range(BALANCE_CHART_YEARS + 1):
        point = {"year": year}
        for p, (_, rows) in plan_rows.items():
            if year == 0:
                point[p] = balance
            else:
                index = year * 12 - 1
                point[p] = round_half_up(rows[index].balance) if index < len(rows) else 0
        balance_over_time.append(point)

    logger.debug(f"Student loan: plan={plan}, months={len(amortization)}, interest={total_interest:.2f}")

    return StudentLoanResult(
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_cost=total_cost,
        payoff_months=len(amortization),
        interest_saved=interest_saved,
        amortization=amortization,
        plan_comparisons=plan_comparisons,
        balance_over_time=balance_over_time,
    )
