"""
JSON API for the calculation kernels.

Request bodies are the kernel input models (camelCase or snake_case field
names); responses are the result models serialized with camelCase names.
Degenerate numbers never produce an error, only zero-valued results.
Horizons (years, terms, ages) and the number of debts are range-checked
so every request does bounded work; out-of-range values get a 422.

Routes:
    GET  /api/calculators                      - Calculator catalog
    POST /api/calculators/mortgage             - Mortgage payment and amortization
    POST /api/calculators/loan                 - Loan payment
    POST /api/calculators/loan-payoff          - Loan payoff with extra payments
    POST /api/calculators/student-loan         - Student loan repayment plans
    POST /api/calculators/compound-interest    - Compound growth
    POST /api/calculators/retirement           - Retirement projection
    POST /api/calculators/debt-payoff          - Avalanche / snowball simulation
    POST /api/calculators/federal-tax          - Federal income tax
    POST /api/calculators/self-employment-tax  - Self-employment tax
    POST /api/calculators/take-home-pay        - Net pay after taxes
    POST /api/calculators/wage-gap             - Wage gap estimate
    POST /api/calculators/salary-to-hourly     - Salary to hourly conversion
    POST /api/calculators/hourly-to-salary     - Hourly to salary conversion
    POST /api/calculators/overtime             - Overtime pay
    POST /api/calculators/tip                  - Tip and bill split
"""

from typing import List

from fastapi import APIRouter
from pydantic import Field

from calcengine.calculators import (
    CompoundInterestInput, CompoundInterestResult, DebtPayoffInput, DebtPayoffResult,
    FederalTaxInput, FederalTaxResult, HourlyToSalaryInput, HourlyToSalaryResult,
    LoanPaymentInput, LoanPaymentResult, LoanPayoffInput, LoanPayoffResult,
    MortgageInput, MortgageResult, OvertimeInput, OvertimeResult,
    RetirementInput, RetirementResult, SalaryToHourlyInput, SalaryToHourlyResult,
    SelfEmploymentTaxInput, SelfEmploymentTaxResult, StudentLoanInput, StudentLoanResult,
    TakeHomePayInput, TakeHomePayResult, TipInput, TipResult, WageGapInput, WageGapResult,
    calculate_compound_interest, calculate_debt_payoff, calculate_federal_tax,
    calculate_loan_payment, calculate_loan_payoff, calculate_mortgage, calculate_overtime,
    calculate_retirement, calculate_self_employment_tax, calculate_student_loan,
    calculate_take_home_pay, calculate_tip, calculate_wage_gap, hourly_to_salary, salary_to_hourly
)
from calcengine.calculators.debt_payoff import Debt
from calcengine.data.catalog import CALCULATORS, CATEGORIES
from calcengine.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/calculators")

MAX_GROWTH_YEARS = 100
MAX_TERM_YEARS = 50
MAX_TERM_MONTHS = MAX_TERM_YEARS * 12
MAX_AGE = 120
MAX_DEBTS = 25


# ==================== REQUEST MODELS ====================

class MortgageRequest(MortgageInput):
    loan_term_years: int = Field(le=MAX_TERM_YEARS)


class LoanPaymentRequest(LoanPaymentInput):
    term_months: int = Field(le=MAX_TERM_MONTHS)


class LoanPayoffRequest(LoanPayoffInput):
    term_months: int = Field(le=MAX_TERM_MONTHS)


class StudentLoanRequest(StudentLoanInput):
    loan_term_years: int = Field(default=10, le=MAX_TERM_YEARS)


class CompoundInterestRequest(CompoundInterestInput):
    years: float = Field(le=MAX_GROWTH_YEARS)


class RetirementRequest(RetirementInput):
    current_age: int = Field(ge=0, le=MAX_AGE)
    retirement_age: int = Field(ge=0, le=MAX_AGE)


class DebtPayoffRequest(DebtPayoffInput):
    debts: List[Debt] = Field(max_length=MAX_DEBTS)


# ==================== ENDPOINTS ====================

@router.get("")
def list_calculators():
    """Calculator catalog with categories."""
    return {"categories": CATEGORIES, "calculators": CALCULATORS}


@router.post("/mortgage", response_model=MortgageResult)
def mortgage(data: MortgageRequest):
    return calculate_mortgage(data)


@router.post("/loan", response_model=LoanPaymentResult)
def loan(data: LoanPaymentRequest):
    return calculate_loan_payment(data)


@router.post("/loan-payoff", response_model=LoanPayoffResult)
def loan_payoff(data: LoanPayoffRequest):
    return calculate_loan_payoff(data)


@router.post("/student-loan", response_model=StudentLoanResult)
def student_loan(data: StudentLoanRequest):
    return calculate_student_loan(data)


@router.post("/compound-interest", response_model=CompoundInterestResult)
def compound_interest(data: CompoundInterestRequest):
    return calculate_compound_interest(data)


@router.post("/retirement", response_model=RetirementResult)
def retirement(data: RetirementRequest):
    return calculate_retirement(data)


@router.post("/debt-payoff", response_model=DebtPayoffResult)
def debt_payoff(data: DebtPayoffRequest):
    """Simulate a multi-debt payoff plan."""
    logger.info(f"Debt payoff requested: {len(data.debts)} debts, method={data.method}")
    return calculate_debt_payoff(data)


@router.post("/federal-tax", response_model=FederalTaxResult)
def federal_tax(data: FederalTaxInput):
    return calculate_federal_tax(data)


@router.post("/self-employment-tax", response_model=SelfEmploymentTaxResult)
def self_employment_tax(data: SelfEmploymentTaxInput):
    return calculate_self_employment_tax(data)


@router.post("/take-home-pay", response_model=TakeHomePayResult)
def take_home_pay(data: TakeHomePayInput):
    return calculate_take_home_pay(data)


@router.post("/wage-gap", response_model=WageGapResult)
def wage_gap(data: WageGapInput):
    return calculate_wage_gap(data)


@router.post("/salary-to-hourly", response_model=SalaryToHourlyResult)
def salary_to_hourly_route(data: SalaryToHourlyInput):
    return salary_to_hourly(data)


@router.post("/hourly-to-salary", response_model=HourlyToSalaryResult)
def hourly_to_salary_route(data: HourlyToSalaryInput):
    return hourly_to_salary(data)


@router.post("/overtime", response_model=OvertimeResult)
def overtime(data: OvertimeInput):
    return calculate_overtime(data)


@router.post("/tip", response_model=TipResult)
def tip(data: TipInput):
    return calculate_tip(data)
