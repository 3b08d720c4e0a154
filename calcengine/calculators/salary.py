"""
Pay conversions: annual salary to hourly, hourly to annual salary, and
overtime pay.

A work week is assumed to be 5 days; "biweekly" always means 26 pay periods
and "monthly" 12.
"""

from calcengine.calculators.base import CalculatorModel

WORK_DAYS_PER_WEEK = 5
BIWEEKLY_PERIODS = 26
MONTHS_PER_YEAR = 12


class SalaryToHourlyInput(CalculatorModel):
    annual_salary: float
    hours_per_week: float = 40
    weeks_per_year: float = 52


class SalaryToHourlyResult(CalculatorModel):
    hourly: float
    daily: float
    weekly: float
    biweekly: float
    monthly: float


class HourlyToSalaryInput(CalculatorModel):
    hourly_rate: float
    hours_per_week: float = 40
    weeks_per_year: float = 52


class HourlyToSalaryResult(CalculatorModel):
    annual: float
    monthly: float
    biweekly: float
    weekly: float
    daily: float


class OvertimeInput(CalculatorModel):
    regular_rate: float
    regular_hours: float = 40
    overtime_hours: float = 0
    overtime_multiplier: float = 1.5


class OvertimeResult(CalculatorModel):
    regular_pay: float
    overtime_pay: float
    total_pay: float


def salary_to_hourly(data: SalaryToHourlyInput) -> SalaryToHourlyResult:
    """Break an annual salary down into hourly, daily, weekly, biweekly and monthly pay."""
    total_hours = data.hours_per_week * data.weeks_per_year

    if total_hours <= 0 or data.annual_salary < 0:
        return SalaryToHourlyResult(hourly=0, daily=0, weekly=0, biweekly=0, monthly=0)

    hourly = data.annual_salary / total_hours
    return SalaryToHourlyResult(
        hourly=hourly,
        daily=hourly * (data.hours_per_week / WORK_DAYS_PER_WEEK),
        weekly=data.annual_salary / data.weeks_per_year,
        biweekly=data.annual_salary / BIWEEKLY_PERIODS,
        monthly=data.annual_salary / MONTHS_PER_YEAR,
    )


def hourly_to_salary(data: HourlyToSalaryInput) -> HourlyToSalaryResult:
    """Annualize an hourly rate."""
    if data.hours_per_week <= 0 or data.weeks_per_year <= 0 or data.hourly_rate < 0:
        return HourlyToSalaryResult(annual=0, monthly=0, biweekly=0, weekly=0, daily=0)

    annual = data.hourly_rate * data.hours_per_week * data.weeks_per_year
    return HourlyToSalaryResult(
        annual=annual,
        monthly=annual / MONTHS_PER_YEAR,
        biweekly=annual / BIWEEKLY_PERIODS,
        weekly=annual / data.weeks_per_year,
        daily=data.hourly_rate * (data.hours_per_week / WORK_DAYS_PER_WEEK),
    )


def calculate_overtime(data: OvertimeInput) -> OvertimeResult:
    """
    Regular plus overtime pay for one pay period.

    Any negative input yields all zeros.
    """
    if min(data.regular_rate, data.regular_hours, data.overtime_hours, data.overtime_multiplier) < 0:
        return OvertimeResult(regular_pay=0, overtime_pay=0, total_pay=0)

    regular_pay = data.regular_rate * data.regular_hours
    overtime_pay = data.regular_rate * data.overtime_multiplier * data.overtime_hours
    return OvertimeResult(
        regular_pay=regular_pay,
        overtime_pay=overtime_pay,
        total_pay=regular_pay + overtime_pay,
    )
