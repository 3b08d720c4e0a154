"""
Calculation kernels.

Every kernel takes one input model and returns one result model. Kernels are
pure and never raise on degenerate input; they return zero-valued results.
"""

from calcengine.calculators.compound_interest import (
    CompoundingFrequency, CompoundInterestInput, CompoundInterestResult, calculate_compound_interest
)
from calcengine.calculators.debt_payoff import Debt, DebtPayoffInput, DebtPayoffResult, calculate_debt_payoff
from calcengine.calculators.federal_tax import FederalTaxInput, FederalTaxResult, calculate_federal_tax
from calcengine.calculators.loan import (
    LoanPaymentInput, LoanPaymentResult, LoanPayoffInput, LoanPayoffResult,
    calculate_loan_payment, calculate_loan_payoff
)
from calcengine.calculators.mortgage import MortgageInput, MortgageResult, calculate_mortgage
from calcengine.calculators.retirement import RetirementInput, RetirementResult, calculate_retirement
from calcengine.calculators.salary import (
    HourlyToSalaryInput, HourlyToSalaryResult, OvertimeInput, OvertimeResult,
    SalaryToHourlyInput, SalaryToHourlyResult,
    calculate_overtime, hourly_to_salary, salary_to_hourly
)
from calcengine.calculators.self_employment_tax import (
    SelfEmploymentTaxInput, SelfEmploymentTaxResult, calculate_self_employment_tax
)
from calcengine.calculators.student_loan import StudentLoanInput, StudentLoanResult, calculate_student_loan
from calcengine.calculators.take_home_pay import TakeHomePayInput, TakeHomePayResult, calculate_take_home_pay
from calcengine.calculators.tip import TipInput, TipResult, calculate_tip
from calcengine.calculators.wage_gap import WageGapInput, WageGapResult, calculate_wage_gap

__all__ = [
    "CompoundingFrequency", "CompoundInterestInput", "CompoundInterestResult", "calculate_compound_interest",
    "Debt", "DebtPayoffInput", "DebtPayoffResult", "calculate_debt_payoff",
    "FederalTaxInput", "FederalTaxResult", "calculate_federal_tax",
    "LoanPaymentInput", "LoanPaymentResult", "LoanPayoffInput", "LoanPayoffResult",
    "calculate_loan_payment", "calculate_loan_payoff",
    "MortgageInput", "MortgageResult", "calculate_mortgage",
    "RetirementInput", "RetirementResult", "calculate_retirement",
    "HourlyToSalaryInput", "HourlyToSalaryResult", "OvertimeInput", "OvertimeResult",
    "SalaryToHourlyInput", "SalaryToHourlyResult",
    "calculate_overtime", "hourly_to_salary", "salary_to_hourly",
    "SelfEmploymentTaxInput", "SelfEmploymentTaxResult", "calculate_self_employment_tax",
    "StudentLoanInput", "StudentLoanResult", "calculate_student_loan",
    "TakeHomePayInput", "TakeHomePayResult", "calculate_take_home_pay",
    "TipInput", "TipResult", "calculate_tip",
    "WageGapInput", "WageGapResult", "calculate_wage_gap",
]
