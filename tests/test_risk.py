"""
Tests for risk classification and severity ordering.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from staywatch.schemas.compliance import RiskLevel, RiskThresholds
from staywatch.services.errors import InvalidConfigError
from staywatch.services.risk import classify_risk, risk_action, risk_description, severity_score

DEFAULT = RiskThresholds()


@pytest.mark.parametrize(
    "remaining, level",
    [
        (90, RiskLevel.green),
        (30, RiskLevel.green),
        (29, RiskLevel.amber),
        (10, RiskLevel.amber),
        (9, RiskLevel.red),
        (1, RiskLevel.red),
        (0, RiskLevel.red),
        (-5, RiskLevel.red),
    ],
)
def test_classify_default_thresholds(remaining, level):
    assert classify_risk(remaining, DEFAULT) == level


def test_zero_remaining_is_red_even_with_zero_amber():
    # With amber_min=0, 0 would otherwise fall in amber.
    assert classify_risk(0, RiskThresholds(green_min=5, amber_min=0)) == RiskLevel.red
    assert classify_risk(1, RiskThresholds(green_min=5, amber_min=0)) == RiskLevel.amber


def test_invalid_thresholds_rejected():
    with pytest.raises(ValidationError):
        RiskThresholds(green_min=10, amber_min=10)
    with pytest.raises(ValidationError):
        RiskThresholds(green_min=10, amber_min=-1)
    with pytest.raises(InvalidConfigError):
        classify_risk(5, RiskThresholds.model_construct(green_min=5, amber_min=20))


def test_severity_score_ordering():
    assert severity_score(90, DEFAULT) == 0
    assert severity_score(30, DEFAULT) == 33
    assert severity_score(29, DEFAULT) == 36
    assert severity_score(10, DEFAULT) == 66
    assert severity_score(9, DEFAULT) == 70
    assert severity_score(1, DEFAULT) == 97
    assert severity_score(0, DEFAULT) == 100
    assert severity_score(-5, DEFAULT) == 105


def test_descriptions_and_actions():
    assert "Low" in risk_description(RiskLevel.green)
    assert "Over limit by 5 days" in risk_action(RiskLevel.red, -5)
    assert "Over limit by 1 day." in risk_action(RiskLevel.red, -1)
    assert "nearly reached" in risk_action(RiskLevel.red, 0)
