"""Tip and bill-splitting calculator."""

from calcengine.calculators.base import CalculatorModel


class TipInput(CalculatorModel):
    bill_amount: float
    tip_percentage: float = 18  # e.g. 20 for 20%
    number_of_people: int = 1


class TipResult(CalculatorModel):
    tip_amount: float
    total_bill: float
    per_person_tip: float
    per_person_total: float


def calculate_tip(data: TipInput) -> TipResult:
    """Tip and total for the bill, split evenly. Fewer than one person counts as one."""
    tip_amount = data.bill_amount * (data.tip_percentage / 100)
    total_bill = data.bill_amount + tip_amount
    people = max(data.number_of_people, 1)

    return TipResult(
        tip_amount=tip_amount,
        total_bill=total_bill,
        per_person_tip=tip_amount / people,
        per_person_total=total_bill / people,
    )
