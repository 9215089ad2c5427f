"""
Pytest configuration and shared fixtures.
"""

import os

# Set environment BEFORE importing app modules
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ["SENTRY_DSN"] = ""

import pytest

from risk_api.risk.schemas import RiskInput
from risk_api.risk.service import RiskScorerService


@pytest.fixture
def scorer():
    """Create RiskScorerService instance for testing."""
    return RiskScorerService()


@pytest.fixture
def healthy_input():
    """25 year old, 170cm / 65kg, 115/75, no family history."""
    return RiskInput(
        age=25,
        height=170,
        weight=65,
        systolic=115,
        diastolic=75,
        family_history=(),
    )


@pytest.fixture
def high_risk_input():
    """50 year old, 160cm / 90kg, 145/95, diabetes and cancer in the family."""
    return RiskInput(
        age=50,
        height=160,
        weight=90,
        systolic=145,
        diastolic=95,
        family_history=("diabetes", "cancer"),
    )
