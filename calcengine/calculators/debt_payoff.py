"""
Debt payoff simulator (avalanche vs snowball).

Simulates paying down several debts month by month:

1. Every open debt accrues a month of interest and receives its minimum payment.
2. The extra monthly payment goes to debts in strategy order:
   - avalanche: highest interest rate first
   - snowball: lowest balance first
3. When a debt is paid off during a month, its minimum payment joins that
   month's extra pool and goes to the next debt in strategy order.

The simulation stops once every balance is paid or after 600 months, which
guards against minimum payments that never outpace interest.
"""

from typing import Dict, List, Union

from calcengine.calculators.base import CalculatorModel
from calcengine.logging_config import get_logger
from calcengine.utils.rounding import round_half_up

logger = get_logger(__name__)

AVALANCHE = "avalanche"
SNOWBALL = "snowball"
PAYOFF_METHODS = [AVALANCHE, SNOWBALL]

MAX_MONTHS = 600  # 50 years
PAID_OFF_THRESHOLD = 0.01


class Debt(CalculatorModel):
    name: str
    balance: float
    rate: float  # e.g. 22.99 for 22.99%
    min_payment: float


class DebtPayoffInput(CalculatorModel):
    debts: List[Debt]
    extra_payment: float = 0
    method: str = AVALANCHE


class PayoffEntry(CalculatorModel):
    name: str
    month: int


class DebtPayoffResult(CalculatorModel):
    months_to_payoff: int
    total_interest: float
    payoff_order: List[PayoffEntry]
    # {"month": m, "<debt name>": balance, ...}
    monthly_schedule: List[Dict[str, Union[int, float]]]


class _SimDebt:
    """Working copy of a debt for one simulation run."""

    __slots__ = ("name", "rate", "min_payment", "remaining", "paid_off")

    def __init__(self, debt: Debt):
        self.name = debt.name
        self.rate = debt.rate
        self.min_payment = debt.min_payment
        self.remaining = debt.balance
        self.paid_off = False


def _strategy_order(sim_debts: List[_SimDebt], method: str) -> List[int]:
    """Indices of the debts in the order extra money is applied."""
    indices = range(len(sim_debts))
    if method == AVALANCHE:
        return sorted(indices, key=lambda i: -sim_debts[i].rate)
    return sorted(indices, key=lambda i: sim_debts[i].remaining)


def _snapshot(month: int, sim_debts: List[_SimDebt]) -> dict:
    snapshot = {"month": month}
    for debt in sim_debts:
        snapshot[debt.name] = round_half_up(max(debt.remaining, 0))
    return snapshot


def calculate_debt_payoff(data: DebtPayoffInput) -> DebtPayoffResult:
    """
    Simulate paying off a set of debts with the avalanche or snowball method.

    Debts without a positive balance and minimum payment are ignored. Any
    method other than "avalanche" orders by balance (snowball).

    Args:
        data: Debts, extra monthly payment and payoff method

    Returns:
        DebtPayoffResult with total months, total interest, the payoff order
        and a balance snapshot series (monthly for the first year, then
        quarterly, plus the final month).
    """
    valid_debts = [d for d in data.debts if d.balance > 0 and d.min_payment > 0]

    if not valid_debts:
        return DebtPayoffResult(
            months_to_payoff=0,
            total_interest=0,
            payoff_order=[],
            monthly_schedule=[],
        )

    sim_debts = [_SimDebt(d) for d in valid_debts]
    order = _strategy_order(sim_debts, data.method)

    total_interest = 0.0
    month = 0
    payoff_order = []
    monthly_schedule = [{"month": 0, **{d.name: d.remaining for d in sim_debts}}]

    def retire(debt: _SimDebt) -> float:
        """Zero a debt; returns the minimum payment freed up (0 if already retired)."""
        debt.remaining = 0
        if debt.paid_off:
            return 0
        debt.paid_off = True
        payoff_order.append(PayoffEntry(name=debt.name, month=month))
        return debt.min_payment

    while any(d.remaining > PAID_OFF_THRESHOLD for d in sim_debts) and month < MAX_MONTHS:
        month += 1
        extra_available = data.extra_payment

        # Interest and minimum payments
        for debt in sim_debts:
            if debt.remaining <= PAID_OFF_THRESHOLD:
                continue
            monthly_interest = debt.remaining * (debt.rate / 100 / 12)
            total_interest += monthly_interest
            debt.remaining += monthly_interest
            debt.remaining -= min(debt.min_payment, debt.remaining)

            if debt.remaining <= PAID_OFF_THRESHOLD:
                extra_available += retire(debt)

        # Extra payment in strategy order
        for index in order:
            debt = sim_debts[index]
            if debt.remaining <= PAID_OFF_THRESHOLD:
                continue
            applied = min(extra_available, debt.remaining)
            debt.remaining -= applied
            extra_available -= applied

            if debt.remaining <= PAID_OFF_THRESHOLD:
                extra_available += retire(debt)
            if extra_available <= PAID_OFF_THRESHOLD:
                break

        all_paid = all(d.remaining <= PAID_OFF_THRESHOLD for d in sim_debts)
        if month <= 12 or month % 3 == 0 or all_paid:
            monthly_schedule.append(_snapshot(month, sim_debts))

    if month >= MAX_MONTHS:
        logger.debug(f"Debt payoff hit the {MAX_MONTHS}-month cap")
    logger.debug(
        f"Debt payoff ({data.method}): debts={len(sim_debts)}, months={month}, "
        f"interest={total_interest:.2f}"
    )

    return DebtPayoffResult(
        months_to_payoff=month,
        total_interest=total_interest,
        payoff_order=payoff_order,
        monthly_schedule=monthly_schedule,
    )
