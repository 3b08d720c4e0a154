"""
Mortgage calculator.

Computes the fixed monthly payment for a home loan with the standard annuity
formula and builds the full monthly amortization schedule plus a yearly
roll-up for charts and tables.

Rounding note: schedule entries are rounded (cents for monthly rows, whole
dollars for yearly rows) while the top-level payment, interest and cost are
returned at full precision. Pages apply their own display rounding.
"""

from typing import List

from calcengine.calculators.base import CalculatorModel
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up, to_cents

logger = get_logger(__name__)


class MortgageInput(CalculatorModel):
    home_price: float
    down_payment: float
    loan_term_years: int
    interest_rate: float  # e.g. 7 for 7%


class AmortizationYearlyEntry(CalculatorModel):
    year: int
    principal_paid: float
    interest_paid: float
    balance: float
    total_principal: float
    total_interest: float


class AmortizationMonthlyEntry(CalculatorModel):
    month: int
    payment: float
    principal_paid: float
    interest_paid: float
    balance: float


class MortgageResult(CalculatorModel):
    monthly_payment: float
    loan_amount: float
    total_interest: float
    total_cost: float
    amortization_schedule: List[AmortizationYearlyEntry]
    amortization_monthly: List[AmortizationMonthlyEntry]


def annuity_payment(principal: float, monthly_rate: float, num_payments: int) -> float:
    """
    Fixed payment that retires `principal` in `num_payments` months.

    payment = P * r(1+r)^n / ((1+r)^n - 1)

    Callers handle a zero rate and a non-positive term before calling.
    """
    factor = (1 + monthly_rate) ** num_payments
    return principal * ((monthly_rate * factor) / (factor - 1))


def calculate_mortgage(data: MortgageInput) -> MortgageResult:
    """
    Calculate the monthly payment and amortization schedule for a mortgage.

    Args:
        data: Home price, down payment, term in years and annual rate (percent)

    Returns:
        MortgageResult. A zero-valued result with empty schedules is returned
        when the loan amount or rate is not positive (e.g. a cash purchase).
    """
    principal = max(data.home_price - data.down_payment, 0)
    monthly_rate = data.interest_rate / 100 / 12
    num_payments = data.loan_term_years * 12

    if principal <= 0 or data.interest_rate <= 0 or num_payments <= 0:
        logger.debug(f"Mortgage degenerate input: principal={principal}, rate={data.interest_rate}")
        return MortgageResult(
            monthly_payment=0,
            loan_amount=principal,
            total_interest=0,
            total_cost=0,
            amortization_schedule=[],
            amortization_monthly=[],
        )

    monthly_payment = annuity_payment(principal, monthly_rate, num_payments)
    total_cost = monthly_payment * num_payments
    total_interest = total_cost - principal

    amortization_monthly = []
    amortization_schedule = []

    balance = principal
    cumulative_principal = 0.0
    cumulative_interest = 0.0

    for month in range(1, num_payments + 1):
        interest_payment = balance * monthly_rate
        principal_payment = monthly_payment - interest_payment
        balance = max(balance - principal_payment, 0)

        cumulative_principal += principal_payment
        cumulative_interest += interest_payment

        amortization_monthly.append(AmortizationMonthlyEntry(
            month=month,
            payment=to_cents(monthly_payment),
            principal_paid=to_cents(principal_payment),
            interest_paid=to_cents(interest_payment),
            balance=to_cents(balance),
        ))

        # Yearly roll-up sums the (rounded) monthly rows of the year
        if month % 12 == 0:
            year_rows = amortization_monthly[month - 12:month]
            amortization_schedule.append(AmortizationYearlyEntry(
                year=month // 12,
                principal_paid=round_half_up(sum(row.principal_paid for row in year_rows)),
                interest_paid=round_half_up(sum(row.interest_paid for row in year_rows)),
                balance=round_half_up(balance),
                total_principal=round_half_up(cumulative_principal),
                total_interest=round_half_up(cumulative_interest),
            ))

    logger.debug(
        f"Mortgage calculated: loan={principal:.2f}, payment={monthly_payment:.2f}, months={num_payments}"
    )

    return MortgageResult(
        monthly_payment=monthly_payment,
        loan_amount=principal,
        total_interest=total_interest,
        total_cost=total_cost,
        amortization_schedule=amortization_schedule,
        amortization_monthly=amortization_monthly,
    )
