"""
Calculator pages for CalcEngine.

Every calculator page keeps its inputs in the query string, so the page URL
is also the shareable link. Query values are untrusted: each one is parsed
with safe_number/safe_enum against the field's range and options, falling
back to the field default.

Routes:
    GET /calculators/{slug} - Calculator form, pre-filled from the query
                              string, with computed results
"""

from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from calcengine.calculators.compound_interest import (
    CompoundingFrequency, CompoundInterestInput, calculate_compound_interest
)
from calcengine.calculators.debt_payoff import AVALANCHE, SNOWBALL, DebtPayoffInput, calculate_debt_payoff
from calcengine.calculators.federal_tax import FILING_STATUSES, FederalTaxInput, calculate_federal_tax
from calcengine.calculators.loan import LoanPayoffInput, calculate_loan_payoff
from calcengine.calculators.mortgage import MortgageInput, calculate_mortgage
from calcengine.calculators.retirement import RetirementInput, calculate_retirement
from calcengine.calculators.salary import (
    HourlyToSalaryInput, OvertimeInput, SalaryToHourlyInput,
    calculate_overtime, hourly_to_salary, salary_to_hourly
)
from calcengine.calculators.self_employment_tax import (
    SE_FILING_STATUSES, SelfEmploymentTaxInput, calculate_self_employment_tax
)
from calcengine.calculators.student_loan import (
    PLAN_LABELS, REPAYMENT_PLANS, StudentLoanInput, calculate_student_loan
)
from calcengine.calculators.take_home_pay import (
    FILING_STATUSES as TAKE_HOME_FILING_STATUSES, PAY_FREQUENCIES, STATE_TAX_RATES,
    TakeHomePayInput, calculate_take_home_pay
)
from calcengine.calculators.tip import TipInput, calculate_tip
from calcengine.calculators.wage_gap import (
    EDUCATION_LEVELS, EXPERIENCE_RANGES, GENDERS, WageGapInput, calculate_wage_gap
)
from calcengine.config import settings
from calcengine.data.catalog import get_calculator, get_category
from calcengine.data.loader import get_wage_gap_data
from calcengine.logging_config import get_logger
from calcengine.templating import templates
from calcengine.utils.formatters import (
    format_currency, format_currency_exact, format_percent, format_percent_ratio
)
from calcengine.utils.metadata import build_metadata
from calcengine.utils.validators import clamp_result, safe_enum, safe_number

logger = get_logger(__name__)

router = APIRouter()

MAX_MONEY = 100_000_000
MAX_TEXT_LENGTH = 40
DEBT_SLOTS = 3


# ==================== FORM FIELDS ====================

def number_field(name, label, default, minimum=0, maximum=MAX_MONEY, step=1, integer=False, unit=None):
    """Numeric input. `unit` is a display hint such as "$" or "%"."""
    return {
        "kind": "number", "name": name, "label": label, "default": default,
        "min": minimum, "max": maximum, "step": step, "integer": integer, "unit": unit,
    }


def select_field(name, label, default, options):
    """Drop-down input; options are (value, label) pairs."""
    return {
        "kind": "select", "name": name, "label": label, "default": default,
        "options": [(str(value), text) for value, text in options],
    }


def text_field(name, label, default):
    return {"kind": "text", "name": name, "label": label, "default": default}


def read_form_values(fields: List[Dict], query: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Sanitise query string values for a calculator form.

    Missing, unparsable, non-finite and out-of-option values fall back to the
    field default; numbers are clamped to the field range.
    """
    values = {}
    for field in fields:
        raw = query.get(field["name"])
        if field["kind"] == "select":
            allowed = [value for value, _ in field["options"]]
            values[field["name"]] = safe_enum(raw, allowed, str(field["default"]))
        elif field["kind"] == "text":
            text = (raw or "").strip()[:MAX_TEXT_LENGTH]
            values[field["name"]] = text or field["default"]
        else:
            number = safe_number(raw, field["min"], field["max"], field["default"])
            values[field["name"]] = int(number) if field["integer"] else number
    return values


def _money(value: float) -> str:
    return format_currency(clamp_result(value))


def _money_exact(value: float) -> str:
    return format_currency_exact(clamp_result(value))


def _table(columns: List[str], rows: List[List[str]]) -> Dict:
    return {"columns": columns, "rows": rows}


# ==================== MORTGAGE & LOANS ====================

def _mortgage_summary(result):
    return [
        ("Monthly Payment", _money_exact(result.monthly_payment)),
        ("Loan Amount", _money(result.loan_amount)),
        ("Total Interest", _money(result.total_interest)),
        ("Total Cost", _money(result.total_cost)),
    ]


def _mortgage_table(result):
    return _table(
        ["Year", "Principal", "Interest", "Balance"],
        [
            [str(e.year), _money(e.principal_paid), _money(e.interest_paid), _money(e.balance)]
            for e in result.amortization_schedule
        ],
    )


def _loan_summary(result):
    return [
        ("Monthly Payment", _money_exact(result.monthly_payment)),
        ("Total Interest", _money(result.total_interest)),
        ("Total Cost", _money(result.total_cost)),
        ("Months With Extra Payment", str(result.months_with_extra)),
        ("Interest Saved", _money(result.interest_saved)),
        ("Months Saved", str(result.months_saved)),
    ]


def _loan_table(result):
    return _table(
        ["Month", "Standard Balance", "Balance With Extra"],
        [[str(p.month), _money(p.standard), _money(p.with_extra)] for p in result.balance_schedule],
    )


def _student_loan_summary(result):
    return [
        ("Monthly Payment", _money_exact(result.monthly_payment)),
        ("Total Interest", _money(result.total_interest)),
        ("Total Cost", _money(result.total_cost)),
        ("Payoff Time", f"{result.payoff_months} months"),
        ("Interest Saved", _money(result.interest_saved)),
    ]


def _student_loan_table(result):
    return _table(
        ["Plan", "Starting Payment", "Total Interest", "Total Cost", "Months"],
        [
            [p.plan, _money_exact(p.starting_payment), _money(p.total_interest), _money(p.total_cost), str(p.months)]
            for p in result.plan_comparisons
        ],
    )


def _debt_fields():
    fields = []
    defaults = [
        ("Credit Card", 5000, 22.99, 150),
        ("Car Loan", 12000, 6.5, 250),
        ("Personal Loan", 3000, 11, 100),
    ]
    for slot, (name, balance, rate, min_payment) in enumerate(defaults, start=1):
        fields.extend([
            text_field(f"debt{slot}Name", f"Debt {slot} Name", name),
            number_field(f"debt{slot}Balance", f"Debt {slot} Balance", balance, unit="$"),
            number_field(f"debt{slot}Rate", f"Debt {slot} Interest Rate", rate, maximum=100, step=0.01, unit="%"),
            number_field(f"debt{slot}MinPayment", f"Debt {slot} Minimum Payment", min_payment, unit="$"),
        ])
    fields.append(number_field("extraPayment", "Extra Monthly Payment", 200, unit="$"))
    fields.append(select_field("method", "Payoff Method", AVALANCHE, [
        (AVALANCHE, "Avalanche (highest rate first)"),
        (SNOWBALL, "Snowball (smallest balance first)"),
    ]))
    return fields


def _unique_debt_names(values) -> List[str]:
    """Slot names with repeats suffixed by slot number; the schedule is keyed by name."""
    names = []
    for slot in range(1, DEBT_SLOTS + 1):
        name = values[f"debt{slot}Name"]
        while name in names:
            name = f"{name} ({slot})"
        names.append(name)
    return names


def _run_debt_payoff(values):
    debts = [
        {
            "name": name,
            "balance": values[f"debt{slot}Balance"],
            "rate": values[f"debt{slot}Rate"],
            "minPayment": values[f"debt{slot}MinPayment"],
        }
        for slot, name in enumerate(_unique_debt_names(values), start=1)
    ]
    return calculate_debt_payoff(DebtPayoffInput.model_validate({
        "debts": debts,
        "extraPayment": values["extraPayment"],
        "method": values["method"],
    }))


def _debt_payoff_summary(result):
    years, months = divmod(result.months_to_payoff, 12)
    return [
        ("Debt-Free In", f"{years} years, {months} months"),
        ("Total Interest", _money(result.total_interest)),
    ]


def _debt_payoff_table(result):
    return _table(
        ["Order", "Debt", "Paid Off In Month"],
        [[str(i), entry.name, str(entry.month)] for i, entry in enumerate(result.payoff_order, start=1)],
    )


# ==================== SAVINGS & RETIREMENT ====================

def _compound_summary(result):
    return [
        ("Future Value", _money(result.future_value)),
        ("Total Contributions", _money(result.total_contributions)),
        ("Total Interest", _money(result.total_interest)),
    ]


def _compound_table(result):
    return _table(
        ["Year", "Contributions", "Interest", "Balance"],
        [
            [str(e.year), _money(e.contributions), _money(e.interest), _money(e.total)]
            for e in result.yearly_breakdown
        ],
    )


def _retirement_summary(result):
    return [
        ("Projected Balance", _money(result.projected_balance)),
        ("In Today's Dollars", _money(result.inflation_adjusted_balance)),
        ("Total Contributions", _money(result.total_contributions)),
        ("Total Growth", _money(result.total_growth)),
    ]


def _retirement_table(result):
    return _table(
        ["Age", "Contributions", "Growth", "Balance", "Today's Dollars"],
        [
            [str(e.age), _money(e.contributions), _money(e.growth), _money(e.total), _money(e.inflation_adjusted)]
            for e in result.yearly_projection
        ],
    )


# ==================== TAX ====================

def _federal_tax_summary(result):
    return [
        ("Federal Tax", _money(result.federal_tax)),
        ("Taxable Income", _money(result.taxable_income)),
        ("Effective Rate", format_percent_ratio(result.effective_rate)),
        ("Marginal Rate", format_percent_ratio(result.marginal_rate)),
    ]


def _federal_tax_table(result):
    return _table(
        ["Bracket", "Tax"],
        [[b.bracket, _money(b.amount)] for b in result.bracket_breakdown],
    )


def _se_tax_summary(result):
    return [
        ("Self-Employment Tax", _money_exact(result.se_tax)),
        ("SE-Taxable Income", _money(result.se_taxable_income)),
        ("Social Security", _money_exact(result.social_security_tax)),
        ("Medicare", _money_exact(result.medicare_tax)),
        ("Additional Medicare", _money_exact(result.additional_medicare_tax)),
        ("Deductible Half", _money_exact(result.deductible_half)),
        ("Effective Rate", format_percent(result.effective_rate)),
    ]


def _take_home_summary(result):
    return [
        ("Net Pay Per Paycheck", _money_exact(result.net_pay_per_period)),
        ("Annual Net Pay", _money(result.annual_net_pay)),
        ("Federal Tax", _money(result.federal_tax)),
        ("State Tax", _money(result.state_tax)),
        ("Social Security", _money(result.social_security)),
        ("Medicare", _money(result.medicare)),
        ("Pre-Tax Deductions", _money(result.pre_tax_deductions)),
        ("Effective Tax Rate", format_percent(result.effective_tax_rate)),
        ("Marginal Rate", format_percent(result.marginal_rate)),
    ]


# ==================== SALARY & CAREER ====================

def _wage_gap_fields():
    reference = get_wage_gap_data()
    occupations = [(i, o.category) for i, o in enumerate(reference.occupations)]
    states = [(key, key) for key in reference.state_adjustments]
    return [
        number_field("salary", "Your Salary", 55000, unit="$"),
        select_field("gender", "Gender", "women", GENDERS),
        select_field("occupation", "Occupation", 0, occupations),
        select_field("experience", "Experience", "6-10", EXPERIENCE_RANGES),
        select_field("education", "Education", "bachelors", EDUCATION_LEVELS),
        select_field("stateRegion", "State", "National", states),
    ]


def _wage_gap_summary(result):
    return [
        ("Occupation", result.occupation_name),
        ("Your Group's Median", _money(result.your_median)),
        ("Other Group's Median", _money(result.other_median)),
        ("Gap", _money(result.gap_amount)),
        ("Gap Percent", format_percent(result.gap_percent)),
        ("Overall Unadjusted Gap", format_percent(result.unadjusted_gap_percent)),
    ]


def _wage_gap_table(result):
    return _table(
        ["Career Length", "Cumulative Gap"],
        [[f"{c.years} years", _money(c.cost)] for c in result.career_cost],
    )


def _salary_to_hourly_summary(result):
    return [
        ("Hourly", _money_exact(result.hourly)),
        ("Daily", _money_exact(result.daily)),
        ("Weekly", _money_exact(result.weekly)),
        ("Biweekly", _money_exact(result.biweekly)),
        ("Monthly", _money_exact(result.monthly)),
    ]


def _hourly_to_salary_summary(result):
    return [
        ("Annual", _money(result.annual)),
        ("Monthly", _money_exact(result.monthly)),
        ("Biweekly", _money_exact(result.biweekly)),
        ("Weekly", _money_exact(result.weekly)),
        ("Daily", _money_exact(result.daily)),
    ]


def _overtime_summary(result):
    return [
        ("Regular Pay", _money_exact(result.regular_pay)),
        ("Overtime Pay", _money_exact(result.overtime_pay)),
        ("Total Pay", _money_exact(result.total_pay)),
    ]


def _tip_summary(result):
    return [
        ("Tip", _money_exact(result.tip_amount)),
        ("Total Bill", _money_exact(result.total_bill)),
        ("Tip Per Person", _money_exact(result.per_person_tip)),
        ("Total Per Person", _money_exact(result.per_person_total)),
    ]


HOURS_FIELDS = [
    number_field("hoursPerWeek", "Hours Per Week", 40, maximum=168, step=0.5),
    number_field("weeksPerYear", "Weeks Per Year", 52, maximum=52),
]

FORMS: Dict[str, Dict[str, Any]] = {
    "mortgage-calculator": {
        "fields": [
            number_field("homePrice", "Home Price", 400000, unit="$"),
            number_field("downPayment", "Down Payment", 80000, unit="$"),
            number_field("interestRate", "Interest Rate", 7, maximum=30, step=0.01, unit="%"),
            select_field("loanTermYears", "Loan Term", 30, [(10, "10 years"), (15, "15 years"), (20, "20 years"), (30, "30 years")]),
        ],
        "run": lambda v: calculate_mortgage(MortgageInput.model_validate(v)),
        "summary": _mortgage_summary,
        "table": _mortgage_table,
    },
    "loan-calculator": {
        "fields": [
            number_field("principal", "Loan Amount", 25000, unit="$"),
            number_field("annualRate", "Interest Rate", 7, maximum=100, step=0.01, unit="%"),
            number_field("termMonths", "Term (months)", 60, minimum=1, maximum=480, integer=True),
            number_field("extraPayment", "Extra Monthly Payment", 0, unit="$"),
        ],
        "run": lambda v: calculate_loan_payoff(LoanPayoffInput.model_validate(v)),
        "summary": _loan_summary,
        "table": _loan_table,
    },
    "student-loan-calculator": {
        "fields": [
            number_field("loanBalance", "Loan Balance", 35000, unit="$"),
            number_field("interestRate", "Interest Rate", 5.5, maximum=30, step=0.01, unit="%"),
            number_field("loanTermYears", "Loan Term (years)", 10, minimum=1, maximum=30, integer=True),
            number_field("extraPayment", "Extra Monthly Payment", 0, unit="$"),
            select_field("repaymentPlan", "Repayment Plan", REPAYMENT_PLANS[0], [(p, PLAN_LABELS[p]) for p in REPAYMENT_PLANS]),
        ],
        "run": lambda v: calculate_student_loan(StudentLoanInput.model_validate(v)),
        "summary": _student_loan_summary,
        "table": _student_loan_table,
    },
    "debt-payoff-calculator": {
        "fields": _debt_fields(),
        "run": _run_debt_payoff,
        "summary": _debt_payoff_summary,
        "table": _debt_payoff_table,
    },
    "compound-interest-calculator": {
        "fields": [
            number_field("principal", "Initial Investment", 10000, unit="$"),
            number_field("monthlyContribution", "Monthly Contribution", 500, unit="$"),
            number_field("annualRate", "Annual Interest Rate", 7, maximum=50, step=0.01, unit="%"),
            number_field("years", "Years", 20, maximum=100, integer=True),
            select_field("compoundingFrequency", "Compounding", CompoundingFrequency.MONTHLY.value, [
                (f.value, f.value.capitalize()) for f in CompoundingFrequency
            ]),
        ],
        "run": lambda v: calculate_compound_interest(CompoundInterestInput.model_validate(v)),
        "summary": _compound_summary,
        "table": _compound_table,
    },
    "retirement-calculator": {
        "fields": [
            number_field("currentAge", "Current Age", 30, minimum=18, maximum=100, integer=True),
            number_field("retirementAge", "Retirement Age", 65, minimum=18, maximum=100, integer=True),
            number_field("currentSavings", "Current Savings", 50000, unit="$"),
            number_field("monthlyContribution", "Monthly Contribution", 500, unit="$"),
            number_field("annualReturn", "Expected Annual Return", 7, maximum=30, step=0.1, unit="%"),
            number_field("inflationRate", "Inflation Rate", 3, maximum=20, step=0.1, unit="%"),
        ],
        "run": lambda v: calculate_retirement(RetirementInput.model_validate(v)),
        "summary": _retirement_summary,
        "table": _retirement_table,
    },
    "federal-tax-calculator": {
        "fields": [
            number_field("income", "Gross Income", 75000, unit="$"),
            select_field("filingStatus", "Filing Status", "single", FILING_STATUSES),
        ],
        "run": lambda v: calculate_federal_tax(FederalTaxInput.model_validate(v)),
        "summary": _federal_tax_summary,
        "table": _federal_tax_table,
    },
    "self-employment-tax-calculator": {
        "fields": [
            number_field("netIncome", "Net Self-Employment Income", 75000, unit="$"),
            select_field("filingStatus", "Filing Status", "single", SE_FILING_STATUSES),
        ],
        "run": lambda v: calculate_self_employment_tax(SelfEmploymentTaxInput.model_validate(v)),
        "summary": _se_tax_summary,
    },
    "take-home-pay-calculator": {
        "fields": [
            number_field("grossSalary", "Annual Gross Salary", 75000, unit="$"),
            select_field("filingStatus", "Filing Status", "single", TAKE_HOME_FILING_STATUSES),
            select_field("state", "State", "CA", [(code, name) for code, (name, _) in STATE_TAX_RATES.items()]),
            select_field("payFrequency", "Pay Frequency", "biweekly", [(k, label) for k, (label, _) in PAY_FREQUENCIES.items()]),
            number_field("retirementContributionPercent", "401(k) Contribution", 6, maximum=100, step=0.5, unit="%"),
            number_field("healthInsurance", "Annual Health Insurance", 0, unit="$"),
        ],
        "run": lambda v: calculate_take_home_pay(TakeHomePayInput.model_validate(v)),
        "summary": _take_home_summary,
    },
    "wage-gap-calculator": {
        "fields": _wage_gap_fields(),
        "run": lambda v: calculate_wage_gap(WageGapInput.model_validate({**v, "occupation": int(v["occupation"])})),
        "summary": _wage_gap_summary,
        "table": _wage_gap_table,
    },
    "salary-to-hourly": {
        "fields": [number_field("annualSalary", "Annual Salary", 60000, unit="$")] + HOURS_FIELDS,
        "run": lambda v: salary_to_hourly(SalaryToHourlyInput.model_validate(v)),
        "summary": _salary_to_hourly_summary,
    },
    "hourly-to-salary": {
        "fields": [number_field("hourlyRate", "Hourly Rate", 25, maximum=100000, step=0.01, unit="$")] + HOURS_FIELDS,
        "run": lambda v: hourly_to_salary(HourlyToSalaryInput.model_validate(v)),
        "summary": _hourly_to_salary_summary,
    },
    "overtime-calculator": {
        "fields": [
            number_field("regularRate", "Hourly Rate", 25, maximum=100000, step=0.01, unit="$"),
            number_field("regularHours", "Regular Hours", 40, maximum=168, step=0.5),
            number_field("overtimeHours", "Overtime Hours", 10, maximum=168, step=0.5),
            number_field("overtimeMultiplier", "Overtime Multiplier", 1.5, maximum=5, step=0.25),
        ],
        "run": lambda v: calculate_overtime(OvertimeInput.model_validate(v)),
        "summary": _overtime_summary,
    },
    "tip-calculator": {
        "fields": [
            number_field("billAmount", "Bill Amount", 85, maximum=1_000_000, step=0.01, unit="$"),
            number_field("tipPercentage", "Tip Percentage", 18, maximum=100, step=0.5, unit="%"),
            number_field("numberOfPeople", "Number of People", 2, minimum=1, maximum=100, integer=True),
        ],
        "run": lambda v: calculate_tip(TipInput.model_validate(v)),
        "summary": _tip_summary,
    },
}


def render_calculator(slug: str, query: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Sanitise the query for a calculator and run it.

    Returns:
        Dictionary with the form values, summary rows, optional table and
        share query string, or None for an unknown slug
    """
    form = FORMS.get(slug)
    if form is None:
        return None

    values = read_form_values(form["fields"], query)
    result = form["run"](values)
    table_builder: Optional[Callable] = form.get("table")

    return {
        "fields": form["fields"],
        "values": values,
        "summary": form["summary"](result),
        "table": table_builder(result) if table_builder else None,
        "share_query": urlencode(values),
    }


@router.get("/calculators/{slug}", response_class=HTMLResponse)
def calculator_page(request: Request, slug: str):
    """
    Calculator page with results computed from the query string.

    Raises:
        HTTPException: 404 if the calculator does not exist
    """
    calculator = get_calculator(slug)
    rendered = render_calculator(slug, request.query_params) if calculator else None
    if rendered is None:
        logger.warning(f"Unknown calculator requested: {slug}")
        raise HTTPException(status_code=404, detail="Calculator not found")

    path = f"/calculators/{slug}"
    return templates.TemplateResponse(request, "calculators/calculator.html", {
        "meta": build_metadata(calculator["title"], calculator["description"], path),
        "calculator": calculator,
        "category": get_category(calculator["category"]),
        "share_url": f"{settings.site_url.rstrip('/')}{path}?{rendered['share_query']}",
        **rendered,
    })
