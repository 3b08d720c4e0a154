"""
Comparison guides shown under /compare.

Each guide is static content: an intro, a side-by-side table, a few
sections and FAQs, plus links to related calculators. The avalanche vs
snowball guide also carries a worked example computed with the debt payoff
simulator.
"""

from typing import Dict, List, Optional

from calcengine.calculators.debt_payoff import AVALANCHE, SNOWBALL, Debt, DebtPayoffInput, calculate_debt_payoff

GUIDES = [
    {
        "slug": "rent-vs-buy",
        "title": "Rent vs Buy: Which Makes More Financial Sense?",
        "short_title": "Rent vs Buy Guide",
        "description": "Weigh the real costs of owning against renting, from down payment and maintenance to opportunity cost and flexibility.",
        "icon": "🔑",
        "intro": (
            "Buying builds equity, but it also ties up a large down payment and adds costs renters never see: "
            "property tax, insurance, maintenance and closing costs. Whether buying wins depends mostly on how "
            "long you stay and how the money you would have put down could grow elsewhere."
        ),
        "table": {
            "headers": ["", "Renting", "Buying"],
            "rows": [
                ["Upfront cash", "Deposit and first month", "Down payment plus 2-5% closing costs"],
                ["Monthly cost", "Rent, usually rising yearly", "Principal, interest, tax, insurance"],
                ["Maintenance", "Landlord pays", "Budget 1-2% of home value per year"],
                ["Builds equity", "No", "Yes, through principal and appreciation"],
                ["Flexibility", "High", "Low; selling costs 6-10%"],
            ],
        },
        "sections": [
            {
                "heading": "The break-even horizon",
                "paragraphs": [
                    "Transaction costs on both ends of a purchase mean buying rarely pays off over short stays. "
                    "A common rule of thumb is five years, but in expensive markets with high price-to-rent "
                    "ratios it can be much longer.",
                ],
            },
            {
                "heading": "Opportunity cost",
                "paragraphs": [
                    "A down payment invested in a diversified portfolio keeps compounding. Compare the equity you "
                    "would build against what that same cash would earn over your expected stay.",
                ],
            },
        ],
        "faqs": [
            {
                "question": "Is rent just throwing money away?",
                "answer": "No. Rent buys housing and flexibility. Mortgage interest, property tax and maintenance "
                          "are unrecoverable costs too; only the principal portion of a payment builds equity.",
            },
        ],
        "related": ["mortgage-calculator", "compound-interest-calculator"],
    },
    {
        "slug": "401k-vs-ira",
        "title": "401(k) vs IRA: Where Should Your Retirement Savings Go?",
        "short_title": "401(k) vs IRA",
        "description": "Compare contribution limits, employer matching, investment choice and fees between workplace 401(k) plans and IRAs.",
        "icon": "🏦",
        "intro": (
            "A 401(k) is offered through an employer and allows much larger contributions, often with a match. "
            "An IRA is opened on your own and usually offers broader investment choice at lower cost. Most "
            "savers benefit from using both."
        ),
        "table": {
            "headers": ["", "401(k)", "IRA"],
            "rows": [
                ["2024 contribution limit", "$23,000 (+$7,500 age 50+)", "$7,000 (+$1,000 age 50+)"],
                ["Employer match", "Often available", "None"],
                ["Investment options", "Plan menu", "Nearly any fund or security"],
                ["Income limits", "None to contribute", "Roth IRA phases out at higher incomes"],
            ],
        },
        "sections": [
            {
                "heading": "A common order of operations",
                "paragraphs": [
                    "Contribute enough to your 401(k) to collect the full employer match, then fund an IRA, then "
                    "return to the 401(k) up to its limit if you can save more.",
                ],
            },
        ],
        "faqs": [
            {
                "question": "Can I contribute to both in the same year?",
                "answer": "Yes. The limits are separate, although deducting traditional IRA contributions is "
                          "restricted when you are covered by a workplace plan and earn above certain thresholds.",
            },
        ],
        "related": ["retirement-calculator", "compound-interest-calculator"],
    },
    {
        "slug": "roth-vs-traditional-ira",
        "title": "Roth vs Traditional IRA: Pay Tax Now or Later?",
        "short_title": "Roth vs Traditional IRA",
        "description": "Understand how Roth and traditional IRAs are taxed and which fits your current and expected future tax bracket.",
        "icon": "🔄",
        "intro": (
            "Traditional IRA contributions may be deductible today and are taxed when withdrawn. Roth "
            "contributions are made with after-tax money and qualified withdrawals are tax-free. The better "
            "choice depends on whether your tax rate is higher now or in retirement."
        ),
        "table": {
            "headers": ["", "Roth IRA", "Traditional IRA"],
            "rows": [
                ["Tax break", "Tax-free qualified withdrawals", "Possible deduction today"],
                ["Required minimum distributions", "None for the original owner", "Yes, starting at age 73"],
                ["Income limits", "Contributions phase out", "Deduction phases out with a workplace plan"],
            ],
        },
        "sections": [
            {
                "heading": "Compare marginal rates",
                "paragraphs": [
                    "If your marginal rate today is lower than the rate you expect in retirement, the Roth usually "
                    "wins. Early-career savers in the 10% or 12% bracket are the classic Roth candidates.",
                ],
            },
        ],
        "faqs": [
            {
                "question": "Can I convert a traditional IRA to a Roth?",
                "answer": "Yes. The converted amount is taxed as ordinary income in the year of conversion.",
            },
        ],
        "related": ["federal-tax-calculator", "retirement-calculator"],
    },
    {
        "slug": "fixed-vs-variable-mortgage",
        "title": "Fixed vs Variable Rate Mortgages",
        "short_title": "Fixed vs Variable Rate Mortgages",
        "description": "Compare the payment certainty of a fixed-rate mortgage with the lower starting rate of an adjustable-rate loan.",
        "icon": "🏠",
        "intro": (
            "A fixed-rate mortgage keeps the same principal and interest payment for the life of the loan. An "
            "adjustable-rate mortgage (ARM) starts lower but resets periodically with market rates, within caps."
        ),
        "table": {
            "headers": ["", "Fixed rate", "Adjustable rate"],
            "rows": [
                ["Starting rate", "Higher", "Lower for the initial period"],
                ["Payment changes", "Never", "After the fixed period, within caps"],
                ["Best for", "Long stays, tight budgets", "Short stays, expected refinance"],
            ],
        },
        "sections": [
            {
                "heading": "Stress-test the worst case",
                "paragraphs": [
                    "Before taking an ARM, calculate the payment at the lifetime cap. If that payment would strain "
                    "your budget, the lower teaser rate is not worth the risk.",
                ],
            },
        ],
        "faqs": [
            {
                "question": "What does 5/1 mean on an ARM?",
                "answer": "The rate is fixed for five years, then adjusts once a year.",
            },
        ],
        "related": ["mortgage-calculator", "loan-calculator"],
    },
    {
        "slug": "avalanche-vs-snowball",
        "title": "Avalanche vs Snowball: Which Debt Payoff Strategy Is Best?",
        "short_title": "Avalanche vs Snowball Method",
        "description": "Compare the debt avalanche and debt snowball side by side: which saves the most interest and which keeps you going.",
        "icon": "🎯",
        "intro": (
            "Both methods pay the minimum on every debt and put any extra money toward one target at a time. "
            "The avalanche targets the highest interest rate; the snowball targets the smallest balance. Money left "
            "over in the month a debt is cleared moves on to the next target."
        ),
        "table": {
            "headers": ["", "Avalanche", "Snowball"],
            "rows": [
                ["Pays first", "Highest interest rate", "Smallest balance"],
                ["Total interest", "Lowest possible", "Equal or higher"],
                ["First debt cleared", "Depends on top-rate balance", "Usually quickly"],
                ["Suits", "Disciplined, analytical savers", "Savers motivated by progress"],
            ],
        },
        "sections": [
            {
                "heading": "When to choose the avalanche",
                "paragraphs": [
                    "Pick the avalanche when rates are far apart, for example credit cards above 20% alongside a "
                    "car loan at 6%. The wider the spread, the more interest it saves.",
                ],
            },
            {
                "heading": "When to choose the snowball",
                "paragraphs": [
                    "Pick the snowball when rates are close together or when early wins keep you on plan. The "
                    "cheapest method is the one you actually finish.",
                ],
            },
        ],
        "faqs": [
            {
                "question": "Can I switch methods partway through?",
                "answer": "Yes. Both methods keep every minimum paid, so changing the target debt never puts an "
                          "account at risk.",
            },
        ],
        "related": ["debt-payoff-calculator", "loan-calculator"],
        "example_debts": [
            {"name": "Credit Card", "balance": 5000, "rate": 22.99, "minPayment": 150},
            {"name": "Car Loan", "balance": 12000, "rate": 6.5, "minPayment": 250},
            {"name": "Personal Loan", "balance": 3000, "rate": 11, "minPayment": 100},
        ],
        "example_extra_payment": 200,
    },
]

_GUIDES_BY_SLUG = {g["slug"]: g for g in GUIDES}


def get_guide(slug: str) -> Optional[Dict]:
    """Guide for a slug, or None."""
    return _GUIDES_BY_SLUG.get(slug)


def payoff_example(guide: Dict) -> Optional[List[Dict]]:
    """
    Run a guide's example debts through both payoff methods.

    Returns one row per method (months, total interest, payoff order), or
    None when the guide has no example.
    """
    if "example_debts" not in guide:
        return None

    debts = [Debt.model_validate(d) for d in guide["example_debts"]]
    rows = []
    for method in (AVALANCHE, SNOWBALL):
        result = calculate_debt_payoff(DebtPayoffInput(
            debts=debts,
            extra_payment=guide.get("example_extra_payment", 0),
            method=method,
        ))
        rows.append({
            "method": method,
            "months": result.months_to_payoff,
            "total_interest": result.total_interest,
            "payoff_order": [entry.name for entry in result.payoff_order],
        })
    return rows
