"""
Tests for the debt payoff simulator.

Tests avalanche vs snowball ordering, rollover of freed minimum payments,
the monthly snapshot series and the 600-month cap.
"""

import pytest

from calcengine.calculators.debt_payoff import (
    MAX_MONTHS,
    DebtPayoffInput,
    calculate_debt_payoff,
)


def run(debts, extra=0, method="avalanche"):
    return calculate_debt_payoff(DebtPayoffInput.model_validate({
        "debts": debts, "extraPayment": extra, "method": method
    }))


class TestPayoffStrategies:
    """Test suite for avalanche and snowball ordering."""

    def test_avalanche_interest_not_above_snowball(self, three_debts):
        """Test that the avalanche never costs more interest than the snowball."""
        avalanche = run(three_debts, extra=200, method="avalanche")
        snowball = run(three_debts, extra=200, method="snowball")

        assert avalanche.total_interest <= snowball.total_interest

    def test_avalanche_pays_highest_rate_first(self, three_debts):
        """Test that the avalanche clears the credit card first."""
        result = run(three_debts, extra=200, method="avalanche")

        assert result.payoff_order[0].name == "Credit Card"

    def test_snowball_pays_smallest_balance_first(self, three_debts):
        """Test that the snowball clears the personal loan first."""
        result = run(three_debts, extra=200, method="snowball")

        assert result.payoff_order[0].name == "Personal Loan"

    def test_more_extra_payment_is_faster_and_cheaper(self, three_debts):
        """Test that $500 extra beats $100 extra on months and interest."""
        slow = run(three_debts, extra=100)
        fast = run(three_debts, extra=500)

        assert fast.months_to_payoff < slow.months_to_payoff
        assert fast.total_interest < slow.total_interest

    @pytest.mark.parametrize("method", ["avalanche", "snowball"])
    def test_more_extra_payment_on_larger_debts(self, method):
        """Test $500 vs $100 extra on a credit card, car loan and student loan."""
        debts = [
            {"name": "CreditCard", "balance": 8500, "rate": 22.99, "minPayment": 250},
            {"name": "CarLoan", "balance": 15000, "rate": 6.5, "minPayment": 350},
            {"name": "StudentLoan", "balance": 28000, "rate": 5.5, "minPayment": 300},
        ]
        slow = run(debts, extra=100, method=method)
        fast = run(debts, extra=500, method=method)

        assert fast.months_to_payoff < slow.months_to_payoff <= MAX_MONTHS
        assert fast.total_interest < slow.total_interest
        assert len(slow.payoff_order) == 3

    def test_every_debt_is_paid_off_once(self, three_debts):
        """Test that the payoff order lists each debt exactly once."""
        result = run(three_debts, extra=200)
        names = [entry.name for entry in result.payoff_order]

        assert sorted(names) == sorted(d["name"] for d in three_debts)
        assert result.payoff_order[-1].month == result.months_to_payoff

    def test_unknown_method_orders_like_snowball(self, three_debts):
        """Test that an unrecognized method falls back to balance order."""
        unknown = run(three_debts, extra=200, method="fastest")
        snowball = run(three_debts, extra=200, method="snowball")

        assert unknown == snowball


class TestPayoffSchedule:
    """Test suite for the monthly snapshot series."""

    def test_month_zero_reproduces_balances(self, three_debts):
        """Test that the first snapshot holds the original balances exactly."""
        result = run(three_debts, extra=200)
        first = result.monthly_schedule[0]

        assert first["month"] == 0
        for debt in three_debts:
            assert first[debt["name"]] == debt["balance"]

    def test_snapshot_cadence(self, three_debts):
        """Test monthly snapshots for a year, then quarterly, plus the final month."""
        result = run(three_debts, extra=200)
        months = [snapshot["month"] for snapshot in result.monthly_schedule]

        assert months[:13] == list(range(13))
        assert all(m % 3 == 0 for m in months[13:-1])
        assert months[-1] == result.months_to_payoff

    def test_single_zero_rate_debt(self):
        """Test a simple debt paid off by its minimum payment alone."""
        result = run([{"name": "Card", "balance": 1000, "rate": 0, "minPayment": 100}])

        assert result.months_to_payoff == 10
        assert result.total_interest == 0
        assert result.payoff_order[0].month == 10
        assert len(result.monthly_schedule) == 11
        assert result.monthly_schedule[-1]["Card"] == 0

    def test_freed_minimum_rolls_over_within_month(self):
        """Test that a paid-off debt's minimum goes to the next debt that month."""
        debts = [
            {"name": "Small", "balance": 200, "rate": 0, "minPayment": 100},
            {"name": "Large", "balance": 1000, "rate": 0, "minPayment": 100},
        ]
        result = run(debts, method="snowball")

        # Month 2: Small is cleared and its 100 goes to Large (900 -> 700)
        assert result.payoff_order[0].name == "Small"
        assert result.payoff_order[0].month == 2
        assert result.monthly_schedule[2]["Large"] == 700
        assert result.months_to_payoff == 9


class TestPayoffEdgeCases:
    """Test suite for degenerate debt sets."""

    def test_empty_debt_list(self):
        """Test that no debts produces a zero result."""
        result = run([])

        assert result.months_to_payoff == 0
        assert result.total_interest == 0
        assert result.payoff_order == []
        assert result.monthly_schedule == []

    def test_debts_without_balance_or_minimum_are_ignored(self):
        """Test that zero-balance and zero-minimum debts are skipped."""
        result = run([
            {"name": "Paid", "balance": 0, "rate": 10, "minPayment": 50},
            {"name": "No Minimum", "balance": 500, "rate": 10, "minPayment": 0},
        ])

        assert result.months_to_payoff == 0
        assert result.monthly_schedule == []

    def test_minimum_below_interest_hits_cap(self):
        """Test that a debt that never shrinks stops at the month cap."""
        result = run([{"name": "Underwater", "balance": 10000, "rate": 24, "minPayment": 50}])

        assert result.months_to_payoff == MAX_MONTHS
        assert result.payoff_order == []
        assert result.total_interest > 0

    def test_input_debts_are_not_mutated(self, three_debts):
        """Test that simulating leaves the input models unchanged."""
        data = DebtPayoffInput.model_validate({"debts": three_debts, "extraPayment": 200})
        calculate_debt_payoff(data)

        assert [d.balance for d in data.debts] == [5000, 12000, 3000]

    def test_idempotent(self, three_debts):
        """Test that repeated runs give identical results."""
        assert run(three_debts, extra=300) == run(three_debts, extra=300)

    def test_result_serializes_camel_case(self, three_debts):
        """Test the serialized field names."""
        dumped = run(three_debts).model_dump(by_alias=True)

        assert set(dumped) == {"monthsToPayoff", "totalInterest", "payoffOrder", "monthlySchedule"}
        assert dumped["totalInterest"] == pytest.approx(run(three_debts).total_interest)
