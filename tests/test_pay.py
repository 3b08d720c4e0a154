"""
Tests for pay conversions, overtime, tips and the wage gap estimator.
"""

import pytest

from calcengine.calculators.salary import (
    HourlyToSalaryInput,
    OvertimeInput,
    SalaryToHourlyInput,
    calculate_overtime,
    hourly_to_salary,
    salary_to_hourly,
)
from calcengine.calculators.tip import TipInput, calculate_tip
from calcengine.calculators.wage_gap import WageGapInput, calculate_wage_gap
from calcengine.data.loader import validate_wage_gap_data


class TestSalaryConversions:
    """Test suite for salary and hourly conversions."""

    def test_salary_to_hourly(self):
        """Test a $60,000 salary at 40 hours and 52 weeks."""
        result = salary_to_hourly(SalaryToHourlyInput(annual_salary=60000))

        assert result.hourly == pytest.approx(60000 / 2080)
        assert result.daily == pytest.approx(60000 / 2080 * 8)
        assert result.weekly == pytest.approx(60000 / 52)
        assert result.biweekly == pytest.approx(60000 / 26)
        assert result.monthly == 5000

    def test_hourly_to_salary(self):
        """Test $25/hour at 40 hours and 52 weeks."""
        result = hourly_to_salary(HourlyToSalaryInput(hourly_rate=25))

        assert result.annual == 52000
        assert result.monthly == pytest.approx(52000 / 12)
        assert result.biweekly == 2000
        assert result.weekly == 1000
        assert result.daily == 200

    def test_conversions_round_trip(self):
        """Test that converting an hourly wage back gives the same salary."""
        hourly = salary_to_hourly(SalaryToHourlyInput(annual_salary=75000, hours_per_week=37.5, weeks_per_year=50))
        annual = hourly_to_salary(HourlyToSalaryInput(hourly_rate=hourly.hourly, hours_per_week=37.5, weeks_per_year=50))

        assert annual.annual == pytest.approx(75000)

    @pytest.mark.parametrize("salary,hours,weeks", [(60000, 0, 52), (60000, 40, 0), (-1, 40, 52)])
    def test_salary_to_hourly_degenerate(self, salary, hours, weeks):
        """Test zeros for zero hours or a negative salary."""
        result = salary_to_hourly(SalaryToHourlyInput(annual_salary=salary, hours_per_week=hours, weeks_per_year=weeks))

        assert result.hourly == 0
        assert result.monthly == 0

    @pytest.mark.parametrize("rate,hours,weeks", [(25, 0, 52), (25, 40, 0), (-5, 40, 52)])
    def test_hourly_to_salary_degenerate(self, rate, hours, weeks):
        """Test zeros for a non-positive divisor or negative rate."""
        result = hourly_to_salary(HourlyToSalaryInput(hourly_rate=rate, hours_per_week=hours, weeks_per_year=weeks))

        assert result.annual == 0
        assert result.daily == 0


class TestOvertime:
    """Test suite for overtime pay."""

    def test_time_and_a_half(self):
        """Test 10 overtime hours at 1.5x on a $25 rate."""
        result = calculate_overtime(OvertimeInput(regular_rate=25, regular_hours=40, overtime_hours=10))

        assert result.regular_pay == 1000
        assert result.overtime_pay == 375
        assert result.total_pay == 1375

    def test_negative_input_returns_zeros(self):
        """Test that any negative input yields zeros."""
        result = calculate_overtime(OvertimeInput(regular_rate=25, regular_hours=40, overtime_hours=-2))

        assert result.total_pay == 0


class TestTip:
    """Test suite for the tip calculator."""

    def test_split_bill(self):
        """Test an 18% tip on $85 split between two people."""
        result = calculate_tip(TipInput(bill_amount=85, tip_percentage=18, number_of_people=2))

        assert result.tip_amount == pytest.approx(15.3)
        assert result.total_bill == pytest.approx(100.3)
        assert result.per_person_tip == pytest.approx(7.65)
        assert result.per_person_total == pytest.approx(50.15)

    @pytest.mark.parametrize("people", [0, -3])
    def test_fewer_than_one_person_counts_as_one(self, people):
        """Test that zero or negative party sizes are treated as one."""
        result = calculate_tip(TipInput(bill_amount=50, tip_percentage=20, number_of_people=people))

        assert result.per_person_total == pytest.approx(60)


class TestWageGap:
    """Test suite for the wage gap estimator."""

    def test_adjusted_medians(self, wage_gap_data):
        """Test the women's view for a legal occupation with a master's degree in CA."""
        result = calculate_wage_gap(WageGapInput(
            gender="women", occupation=1, education="masters", experience="6-10", state_region="CA",
        ), wage_gap_data)

        # 1.2 education x 1.0 experience x 1.5 state = 1.8
        assert result.your_median == 135000
        assert result.other_median == 180000
        assert result.gap_amount == 45000
        assert result.gap_percent == pytest.approx(25)
        assert result.is_underpaid is True
        assert result.occupation_name == "Legal"

    def test_men_view_is_mirrored(self, wage_gap_data):
        """Test that the men's view swaps the medians and reports no underpayment."""
        result = calculate_wage_gap(WageGapInput(gender="men", occupation=0), wage_gap_data)

        assert result.your_median == 60000
        assert result.other_median == 50000
        assert result.gap_amount == 10000
        assert result.gap_percent == pytest.approx(20)
        assert result.is_underpaid is False

    def test_unknown_keys_use_neutral_multiplier(self, wage_gap_data):
        """Test that missing multiplier keys count as 1.0."""
        result = calculate_wage_gap(WageGapInput(
            gender="women", occupation=0, education="phd-ish", experience="??", state_region="Atlantis",
        ), wage_gap_data)

        assert result.your_median == 50000
        assert result.other_median == 60000

    def test_out_of_range_occupation_falls_back(self, wage_gap_data):
        """Test that an invalid occupation index uses the first occupation."""
        result = calculate_wage_gap(WageGapInput(occupation=99), wage_gap_data)

        assert result.occupation_name == "All Occupations"

    def test_zero_comparison_median_gives_zero_percent(self, wage_gap_raw):
        """Test that a zero median for the other group does not divide by zero."""
        wage_gap_raw["occupations"][0]["men"] = 0
        data = validate_wage_gap_data(wage_gap_raw)

        result = calculate_wage_gap(WageGapInput(gender="women", occupation=0), data)

        assert result.other_median == 0
        assert result.gap_amount == 50000
        assert result.gap_percent == 0

    def test_unadjusted_gap(self, wage_gap_data):
        """Test the overall cents-on-the-dollar figure."""
        result = calculate_wage_gap(WageGapInput(), wage_gap_data)

        assert result.unadjusted_gap_percent == pytest.approx(20)

    def test_career_cost_and_earnings(self, wage_gap_data):
        """Test career projections at 3% growth."""
        result = calculate_wage_gap(WageGapInput(gender="women", occupation=0), wage_gap_data)

        assert [c.years for c in result.career_cost] == [10, 20, 30]
        assert result.career_cost[0].cost == round(sum(10000 * 1.03 ** y for y in range(10)))
        assert result.career_cost[0].cost < result.career_cost[1].cost < result.career_cost[2].cost

        assert len(result.career_data) == 31
        assert result.career_data[0].your_earnings == 0
        assert result.career_data[1].your_earnings == 50000
        assert result.career_data[1].median_earnings == 60000

    def test_bundled_data_is_used_by_default(self):
        """Test that the packaged reference data loads and produces a result."""
        result = calculate_wage_gap(WageGapInput())

        assert result.your_median > 0
        assert result.occupation_name
