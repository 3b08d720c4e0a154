"""
Tests for the web pages and the JSON calculator API.
"""

import pytest

from calcengine.data.catalog import CALCULATORS, CATEGORIES
from calcengine.data.guides import GUIDES
from calcengine.routes.calculators import render_calculator


class TestPages:
    """Test suite for the HTML pages."""

    def test_home(self, client):
        """Test the home page lists categories and guides."""
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Free Financial Calculators" in response.text
        assert "/compare/rent-vs-buy" in response.text

    def test_all_calculators(self, client):
        """Test that the index links every calculator."""
        response = client.get("/calculators")

        assert response.status_code == 200
        for calc in CALCULATORS:
            assert f"/calculators/{calc['slug']}" in response.text

    @pytest.mark.parametrize("slug", [c["slug"] for c in CALCULATORS])
    def test_calculator_page_renders_with_defaults(self, client, slug):
        """Test each calculator page renders with no query string."""
        response = client.get(f"/calculators/{slug}")

        assert response.status_code == 200
        assert "Results" in response.text
        assert "Share these results" in response.text

    def test_query_string_prefills_and_computes(self, client):
        """Test that query values drive the calculation and the share link."""
        response = client.get("/calculators/federal-tax-calculator?income=75000&filingStatus=single")

        assert response.status_code == 200
        assert "$8,341" in response.text
        assert "$60,400" in response.text
        assert "filingStatus=single" in response.text

    def test_garbage_query_values_fall_back(self, client):
        """Test that unparsable or unknown values use the field defaults."""
        response = client.get("/calculators/federal-tax-calculator?income=abc&filingStatus=bogus")
        default = client.get("/calculators/federal-tax-calculator")

        assert response.status_code == 200
        assert response.text == default.text

    def test_non_finite_query_value(self, client):
        """Test that Infinity in the query string does not leak into the page."""
        response = client.get("/calculators/mortgage-calculator?homePrice=Infinity")
        default = client.get("/calculators/mortgage-calculator")

        assert response.status_code == 200
        assert response.text == default.text

    def test_text_fields_are_escaped(self, client):
        """Test that debt names from the query string are HTML-escaped."""
        response = client.get("/calculators/debt-payoff-calculator?debt1Name=<script>x</script>")

        assert response.status_code == 200
        assert "<script>x</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_unknown_calculator_renders_404_page(self, client):
        """Test the HTML 404 page for an unknown calculator."""
        response = client.get("/calculators/time-machine")

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]
        assert "Page Not Found" in response.text

    def test_unknown_path_renders_404_page(self, client):
        """Test the HTML 404 page for a path with no route."""
        response = client.get("/definitely/not/here")

        assert response.status_code == 404
        assert "Page Not Found" in response.text

    @pytest.mark.parametrize("slug", [c["slug"] for c in CATEGORIES])
    def test_category_pages(self, client, slug):
        """Test each category hub renders."""
        response = client.get(f"/category/{slug}")

        assert response.status_code == 200

    def test_tax_category_includes_take_home_pay(self, client):
        """Test that a cross-listed calculator shows up on both hubs."""
        response = client.get("/category/tax-calculators")

        assert "/calculators/take-home-pay-calculator" in response.text
        assert "/calculators/self-employment-tax-calculator" in response.text

    def test_unknown_category(self, client):
        """Test 404 for an unknown category."""
        response = client.get("/category/crypto")

        assert response.status_code == 404

    def test_about(self, client):
        """Test the about page."""
        response = client.get("/about")

        assert response.status_code == 200

    def test_page_metadata(self, client):
        """Test that calculator pages carry canonical and OpenGraph tags."""
        response = client.get("/calculators/tip-calculator")

        assert 'rel="canonical"' in response.text
        assert 'property="og:title"' in response.text
        assert "/calculators/tip-calculator" in response.text


class TestGuidePages:
    """Test suite for the comparison guides."""

    def test_guide_index(self, client):
        """Test the guide index lists every guide."""
        response = client.get("/compare")

        assert response.status_code == 200
        for guide in GUIDES:
            assert f"/compare/{guide['slug']}" in response.text

    @pytest.mark.parametrize("slug", [g["slug"] for g in GUIDES])
    def test_guide_pages(self, client, slug):
        """Test each guide renders with its related calculators."""
        response = client.get(f"/compare/{slug}")

        assert response.status_code == 200
        assert "Frequently Asked Questions" in response.text
        assert 'property="og:type" content="article"' in response.text

    def test_avalanche_guide_shows_worked_example(self, client):
        """Test that the avalanche guide runs its example debts."""
        response = client.get("/compare/avalanche-vs-snowball")

        assert "Worked Example" in response.text
        assert "Avalanche" in response.text
        assert "Snowball" in response.text

    def test_unknown_guide(self, client):
        """Test 404 for an unknown guide."""
        response = client.get("/compare/stocks-vs-bonds")

        assert response.status_code == 404


class TestAPI:
    """Test suite for the JSON calculator API."""

    def test_health(self, client):
        """Test the health check."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_catalog(self, client):
        """Test the catalog listing."""
        response = client.get("/api/calculators")
        data = response.json()

        assert response.status_code == 200
        assert len(data["calculators"]) == len(CALCULATORS)
        assert len(data["categories"]) == len(CATEGORIES)

    def test_federal_tax(self, client):
        """Test camelCase input and output on the federal tax endpoint."""
        response = client.post("/api/calculators/federal-tax", json={"income": 75000, "filingStatus": "single"})
        data = response.json()

        assert response.status_code == 200
        assert data["taxableIncome"] == 60400
        assert data["federalTax"] == pytest.approx(8341)
        assert data["bracketBreakdown"][0]["bracket"] == "10%"

    def test_mortgage(self, client):
        """Test the mortgage endpoint."""
        response = client.post("/api/calculators/mortgage", json={
            "homePrice": 400000, "downPayment": 80000, "interestRate": 7, "loanTermYears": 30,
        })
        data = response.json()

        assert response.status_code == 200
        assert data["loanAmount"] == 320000
        assert data["monthlyPayment"] == pytest.approx(2128.97, abs=0.5)
        assert len(data["amortizationSchedule"]) == 30

    def test_debt_payoff(self, client, three_debts):
        """Test the debt payoff endpoint."""
        response = client.post("/api/calculators/debt-payoff", json={
            "debts": three_debts, "extraPayment": 200, "method": "avalanche",
        })
        data = response.json()

        assert response.status_code == 200
        assert data["payoffOrder"][0]["name"] == "Credit Card"
        assert data["monthsToPayoff"] > 0

    def test_tip(self, client):
        """Test the tip endpoint."""
        response = client.post("/api/calculators/tip", json={
            "billAmount": 100, "tipPercentage": 20, "numberOfPeople": 4,
        })

        assert response.json()["perPersonTotal"] == pytest.approx(30)

    def test_wage_gap_uses_bundled_data(self, client):
        """Test the wage gap endpoint against the packaged reference data."""
        response = client.post("/api/calculators/wage-gap", json={"gender": "women", "occupation": 0})
        data = response.json()

        assert response.status_code == 200
        assert data["occupationName"] == "All Occupations"
        assert len(data["careerCost"]) == 3

    def test_invalid_body(self, client):
        """Test that a malformed body is rejected with 422."""
        response = client.post("/api/calculators/mortgage", json={"homePrice": "lots"})

        assert response.status_code == 422

    def test_unknown_endpoint_stays_json(self, client):
        """Test that API 404s are JSON, not the HTML page."""
        response = client.post("/api/calculators/time-machine", json={})

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/json")
        assert response.json()["detail"] == "Not Found"

    @pytest.mark.parametrize("endpoint,body", [
        ("compound-interest", {
            "principal": 1000, "monthlyContribution": 0, "annualRate": 5,
            "years": 20000, "compoundingFrequency": "daily",
        }),
        ("mortgage", {"homePrice": 400000, "downPayment": 80000, "interestRate": 7, "loanTermYears": 5000}),
        ("loan", {"principal": 25000, "annualRate": 7, "termMonths": 100000}),
        ("loan-payoff", {"principal": 25000, "annualRate": 7, "termMonths": 100000, "extraPayment": 50}),
        ("student-loan", {"loanBalance": 35000, "interestRate": 5.5, "loanTermYears": 1000}),
        ("retirement", {
            "currentAge": -100000, "retirementAge": 65, "currentSavings": 0,
            "monthlyContribution": 500, "annualReturn": 7, "inflationRate": 3,
        }),
    ])
    def test_unbounded_horizons_rejected(self, client, endpoint, body):
        """Test that horizons beyond the supported range are rejected with 422."""
        response = client.post(f"/api/calculators/{endpoint}", json=body)

        assert response.status_code == 422

    def test_too_many_debts_rejected(self, client, three_debts):
        """Test that the debt list length is capped."""
        response = client.post("/api/calculators/debt-payoff", json={
            "debts": three_debts * 10, "extraPayment": 200, "method": "avalanche",
        })

        assert response.status_code == 422

    def test_longest_supported_horizons_accepted(self, client):
        """Test the upper limits themselves are still valid requests."""
        mortgage = client.post("/api/calculators/mortgage", json={
            "homePrice": 10_000_000, "downPayment": 0, "interestRate": 7, "loanTermYears": 50,
        })
        growth = client.post("/api/calculators/compound-interest", json={
            "principal": 1000, "monthlyContribution": 100, "annualRate": 5, "years": 100,
        })

        assert mortgage.status_code == 200
        assert len(mortgage.json()["amortizationMonthly"]) == 600
        assert growth.status_code == 200
        assert len(growth.json()["yearlyBreakdown"]) == 100


class TestDebtPayoffPage:
    """Test suite for the debt payoff page form handling."""

    def test_repeated_debt_names_are_kept_apart(self):
        """Test that two slots with the same name both reach the simulation."""
        rendered = render_calculator("debt-payoff-calculator", {
            "debt1Name": "Card", "debt2Name": "Card", "debt3Name": "Card",
        })
        names = [row[1] for row in rendered["table"]["rows"]]

        assert sorted(names) == ["Card", "Card (2)", "Card (3)"]

    def test_repeated_names_shown_on_page(self, client):
        """Test the suffixed name appears in the rendered payoff order."""
        response = client.get("/calculators/debt-payoff-calculator?debt1Name=Card&debt2Name=Card")

        assert response.status_code == 200
        assert "Card (2)" in response.text
