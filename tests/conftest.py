"""
Pytest fixtures and configuration for CalcEngine tests.

This module provides common fixtures used across all test modules,
including the test client and a small wage gap reference data set.
"""

import os

# Keep test runs from writing rotating log files
os.environ.setdefault("CALCENGINE_LOG_TO_FILE", "false")

import pytest
from typing import Generator

from fastapi.testclient import TestClient

from calcengine.data.loader import validate_wage_gap_data
from calcengine.main import app


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """
    Create a test client for the application.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def wage_gap_raw() -> dict:
    """
    Minimal, valid wage gap data with round numbers.
    """
    return {
        "overall": {"gap_cents": 0.8},
        "occupations": [
            {"category": "All Occupations", "men": 60000, "women": 50000},
            {"category": "Legal", "men": 100000, "women": 75000},
        ],
        "education_multipliers": {"bachelors": 1.0, "masters": 1.2},
        "experience_multipliers": {"6-10": 1.0, "0-2": 0.5},
        "state_adjustments": {"National": 1.0, "CA": 1.5},
    }


@pytest.fixture
def wage_gap_data(wage_gap_raw):
    """
    Validated WageGapData built from wage_gap_raw.
    """
    return validate_wage_gap_data(wage_gap_raw)


@pytest.fixture
def three_debts() -> list:
    """
    Credit card, car loan and personal loan used across debt payoff tests.
    """
    return [
        {"name": "Credit Card", "balance": 5000, "rate": 22.99, "minPayment": 150},
        {"name": "Car Loan", "balance": 12000, "rate": 6.5, "minPayment": 250},
        {"name": "Personal Loan", "balance": 3000, "rate": 11, "minPayment": 100},
    ]
