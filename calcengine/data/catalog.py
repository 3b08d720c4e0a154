"""
Calculator catalog.

Shared metadata used by the home page, the category hubs, the calculator
pages and GET /api/calculators.
"""

from typing import Dict, List, Optional

MORTGAGE_AND_HOUSING = "mortgage-and-housing"
SALARY_AND_CAREER = "salary-and-career"
RETIREMENT_AND_INVESTING = "retirement-and-investing"
TAX_CALCULATORS = "tax-calculators"
DEBT_AND_LOANS = "debt-and-loans"

CATEGORIES = [
    {
        "slug": MORTGAGE_AND_HOUSING,
        "name": "Mortgage & Housing",
        "description": "Monthly payments, amortization and the cost of owning a home.",
    },
    {
        "slug": SALARY_AND_CAREER,
        "name": "Salary & Career",
        "description": "Convert pay between periods, estimate overtime and see what you take home.",
    },
    {
        "slug": RETIREMENT_AND_INVESTING,
        "name": "Retirement & Investing",
        "description": "Project savings growth and plan for retirement.",
    },
    {
        "slug": TAX_CALCULATORS,
        "name": "Tax Calculators",
        "description": "Estimate federal income tax and self-employment tax.",
    },
    {
        "slug": DEBT_AND_LOANS,
        "name": "Debt & Loans",
        "description": "Plan loan payments and find the fastest way out of debt.",
    },
]

CALCULATORS = [
    # Mortgage & Housing
    {
        "slug": "mortgage-calculator",
        "title": "Mortgage Calculator",
        "description": "Calculate your monthly mortgage payment, total interest, and amortization schedule for any home loan.",
        "icon": "🏡",
        "category": MORTGAGE_AND_HOUSING,
    },
    # Salary & Career
    {
        "slug": "salary-to-hourly",
        "title": "Salary to Hourly Calculator",
        "description": "Convert an annual salary into hourly, daily, weekly, biweekly and monthly pay.",
        "icon": "💵",
        "category": SALARY_AND_CAREER,
    },
    {
        "slug": "hourly-to-salary",
        "title": "Hourly to Salary Calculator",
        "description": "See what an hourly wage works out to per year, month, paycheck and day.",
        "icon": "⏱️",
        "category": SALARY_AND_CAREER,
    },
    {
        "slug": "take-home-pay-calculator",
        "title": "Take-Home Pay Calculator",
        "description": "Estimate your paycheck after federal tax, state tax, FICA and pre-tax deductions.",
        "icon": "💰",
        "category": SALARY_AND_CAREER,
        "also_in": [TAX_CALCULATORS],
    },
    {
        "slug": "overtime-calculator",
        "title": "Overtime Calculator",
        "description": "Work out regular and overtime pay at time-and-a-half or any other multiplier.",
        "icon": "⏰",
        "category": SALARY_AND_CAREER,
    },
    {
        "slug": "tip-calculator",
        "title": "Tip Calculator",
        "description": "Calculate the tip and split the bill evenly between any number of people.",
        "icon": "🧾",
        "category": SALARY_AND_CAREER,
    },
    {
        "slug": "wage-gap-calculator",
        "title": "Wage Gap Calculator",
        "description": "Compare median pay for men and women in your field and see the gap's cost over a career.",
        "icon": "⚖️",
        "category": SALARY_AND_CAREER,
    },
    # Retirement & Investing
    {
        "slug": "retirement-calculator",
        "title": "Retirement Calculator",
        "description": "Project your retirement savings in future and today's dollars.",
        "icon": "🏖️",
        "category": RETIREMENT_AND_INVESTING,
    },
    {
        "slug": "compound-interest-calculator",
        "title": "Compound Interest Calculator",
        "description": "See how savings and regular contributions grow with compound interest.",
        "icon": "📊",
        "category": RETIREMENT_AND_INVESTING,
    },
    # Tax
    {
        "slug": "federal-tax-calculator",
        "title": "Federal Income Tax Calculator",
        "description": "Estimate your federal income tax with a bracket-by-bracket breakdown.",
        "icon": "🏛️",
        "category": TAX_CALCULATORS,
    },
    {
        "slug": "self-employment-tax-calculator",
        "title": "Self-Employment Tax Calculator",
        "description": "Calculate Social Security and Medicare tax on freelance and 1099 income.",
        "icon": "📝",
        "category": TAX_CALCULATORS,
    },
    # Debt & Loans
    {
        "slug": "loan-calculator",
        "title": "Loan Calculator",
        "description": "Find the monthly payment for any loan and how much paying extra saves.",
        "icon": "💳",
        "category": DEBT_AND_LOANS,
    },
    {
        "slug": "student-loan-calculator",
        "title": "Student Loan Calculator",
        "description": "Compare standard, graduated, extended and income-driven repayment plans.",
        "icon": "🎓",
        "category": DEBT_AND_LOANS,
    },
    {
        "slug": "debt-payoff-calculator",
        "title": "Debt Payoff Calculator",
        "description": "Compare the avalanche and snowball methods for paying off multiple debts.",
        "icon": "🎯",
        "category": DEBT_AND_LOANS,
    },
]

_CALCULATORS_BY_SLUG = {c["slug"]: c for c in CALCULATORS}
_CATEGORIES_BY_SLUG = {c["slug"]: c for c in CATEGORIES}


def get_calculator(slug: str) -> Optional[Dict]:
    """Catalog entry for a calculator slug, or None."""
    return _CALCULATORS_BY_SLUG.get(slug)


def get_category(slug: str) -> Optional[Dict]:
    """Category entry for a slug, or None."""
    return _CATEGORIES_BY_SLUG.get(slug)


def calculators_in_category(category_slug: str) -> List[Dict]:
    """
    Calculators listed under a category, including cross-listed ones.

    Catalog order is preserved and each calculator appears once.
    """
    return [
        c for c in CALCULATORS
        if c["category"] == category_slug or category_slug in c.get("also_in", [])
    ]


def catalog_with_categories() -> List[Dict]:
    """Categories with their calculators attached, for the home page."""
    return [
        {**category, "calculators": calculators_in_category(category["slug"])}
        for category in CATEGORIES
    ]
