"""
Loan payment calculator.

calculate_loan_payment() is the plain fixed-payment calculation used by the
loan and auto loan pages. calculate_loan_payoff() adds the "pay extra every
month" comparison: how many months and how much interest an extra monthly
payment saves, with a sampled balance series for charting.
"""

from typing import List

from calcengine.calculators.base import CalculatorModel
from calcengine.calculators.mortgage import annuity_payment
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up

logger = get_logger(__name__)


class LoanPaymentInput(CalculatorModel):
    principal: float
    annual_rate: float  # e.g. 5 for 5%
    term_months: int


class LoanPaymentResult(CalculatorModel):
    monthly_payment: float
    total_interest: float
    total_cost: float


class LoanPayoffInput(CalculatorModel):
    principal: float
    annual_rate: float
    term_months: int
    extra_payment: float = 0


class LoanBalancePoint(CalculatorModel):
    month: int
    standard: float
    with_extra: float


class LoanPayoffResult(CalculatorModel):
    monthly_payment: float
    total_interest: float
    total_cost: float
    months_with_extra: int
    interest_with_extra: float
    interest_saved: float
    months_saved: int
    balance_schedule: List[LoanBalancePoint]


def monthly_loan_payment(principal: float, monthly_rate: float, term_months: int) -> float:
    """Fixed monthly payment; a zero rate is straight division of the principal."""
    if monthly_rate == 0:
        return principal / term_months
    return annuity_payment(principal, monthly_rate, term_months)


def calculate_loan_payment(data: LoanPaymentInput) -> LoanPaymentResult:
    """
    Calculate the monthly payment, total interest and total cost of a loan.

    Returns zeros when the principal or term is not positive.
    """
    if data.principal <= 0 or data.term_months <= 0:
        return LoanPaymentResult(monthly_payment=0, total_interest=0, total_cost=0)

    monthly_rate = data.annual_rate / 100 / 12
    monthly_payment = monthly_loan_payment(data.principal, monthly_rate, data.term_months)
    total_cost = monthly_payment * data.term_months
    total_interest = total_cost - data.principal

    return LoanPaymentResult(
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_cost=total_cost,
    )


def _sample_step(term_months: int) -> int:
    """Chart sampling interval so long loans don't produce hundreds of points."""
    if term_months > 120:
        return 6
    if term_months > 60:
        return 3
    return 1


def calculate_loan_payoff(data: LoanPayoffInput) -> LoanPayoffResult:
    """
    Compare the standard schedule of a loan against paying extra each month.

    The standard schedule runs the full term. The accelerated schedule pays
    `monthly_payment + extra_payment` until the balance reaches zero.

    Args:
        data: Loan terms plus the extra monthly payment

    Returns:
        LoanPayoffResult; all zeros with an empty schedule for a
        non-positive principal or term.
    """
    base = calculate_loan_payment(LoanPaymentInput(
        principal=data.principal,
        annual_rate=data.annual_rate,
        term_months=data.term_months,
    ))
    if base.monthly_payment == 0:
        return LoanPayoffResult(
            monthly_payment=0, total_interest=0, total_cost=0,
            months_with_extra=0, interest_with_extra=0,
            interest_saved=0, months_saved=0, balance_schedule=[],
        )

    term = data.term_months
    monthly_rate = data.annual_rate / 100 / 12
    payment = base.monthly_payment

    # Standard schedule: balance at the start of each month 0..term
    standard = []
    balance = data.principal
    for month in range(term + 1):
        standard.append(max(0, balance))
        if month < term:
            balance -= payment - balance * monthly_rate

    # Accelerated schedule
    accelerated = []
    extra_balance = data.principal
    interest_with_extra = 0.0
    months_with_extra = 0
    for month in range(term + 1):
        accelerated.append(max(0, extra_balance))
        if extra_balance <= 0:
            break
        if month < term:
            interest_payment = extra_balance * monthly_rate
            interest_with_extra += interest_payment
            extra_balance -= payment - interest_payment + data.extra_payment
            months_with_extra = month + 1
            if extra_balance <= 0:
                accelerated.append(0)
                break

    has_extra = data.extra_payment > 0
    interest_saved = base.total_interest - interest_with_extra if has_extra else 0
    months_saved = term - months_with_extra if has_extra else 0

    step = _sample_step(term)
    balance_schedule = []
    for i in range(0, max(len(standard), len(accelerated)), step):
        balance_schedule.append(LoanBalancePoint(
            month=i,
            standard=round_half_up(standard[i]) if i < len(standard) else 0,
            with_extra=round_half_up(accelerated[i]) if i < len(accelerated) else 0,
        ))
    # Always include the final month
    if balance_schedule[-1].month != term:
        balance_schedule.append(LoanBalancePoint(
            month=term, standard=round_half_up(standard[-1]), with_extra=0,
        ))

    logger.debug(
        f"Loan payoff: term={term}, extra={data.extra_payment}, "
        f"months_with_extra={months_with_extra}, interest_saved={interest_saved:.2f}"
    )

    return LoanPayoffResult(
        monthly_payment=payment,
        total_interest=base.total_interest,
        total_cost=base.total_cost,
        months_with_extra=months_with_extra,
        interest_with_extra=interest_with_extra,
        interest_saved=interest_saved,
        months_saved=months_saved,
        balance_schedule=balance_schedule,
    )
