"""Module E: Risk level from days remaining.

Thresholds come from the company's settings; only the comparison order and the
zero rule are fixed here. Zero days remaining is still compliant (used == limit)
but is always the most severe level, as is anything below zero.
"""
from staywatch.schemas.compliance import RiskLevel, RiskThresholds

# Cap for the green part of the severity score.
_SEVERITY_GREEN_CAP = 90


def classify_risk(days_remaining: int, thresholds: RiskThresholds) -> RiskLevel:
    thresholds.ensure_valid()
    if days_remaining <= 0:
        return RiskLevel.red
    if days_remaining >= thresholds.green_min:
        return RiskLevel.green
    if days_remaining >= thresholds.amber_min:
        return RiskLevel.amber
    return RiskLevel.red


def risk_description(level: RiskLevel) -> str:
    return {
        RiskLevel.green: "Low risk - plenty of days remaining",
        RiskLevel.amber: "Moderate risk - approaching limit",
        RiskLevel.red: "High risk - at or over limit",
    }[level]


def risk_action(level: RiskLevel, days_remaining: int) -> str:
    if level == RiskLevel.green:
        return "Travel planning can proceed normally."
    if level == RiskLevel.amber:
        return "Plan upcoming travel carefully. Consider spreading out visits."
    if days_remaining < 0:
        over = abs(days_remaining)
        return f"Over limit by {over} day{'' if over == 1 else 's'}. Must remain outside the area until compliant."
    return "Limit nearly reached. Avoid new travel to the area unless absolutely necessary."


def severity_score(days_remaining: int, thresholds: RiskThresholds) -> int:
    """Sort key for dashboards, higher is more urgent.

    green 0-33, amber 34-66, red 67-100, over the limit 100 + days over.
    """
    thresholds.ensure_valid()
    if days_remaining < 0:
        return 100 + abs(days_remaining)
    if days_remaining == 0:
        return 100
    if days_remaining < thresholds.amber_min:
        position = thresholds.amber_min - days_remaining
        return 67 + round(position / thresholds.amber_min * 33)
    if days_remaining < thresholds.green_min:
        span = thresholds.green_min - thresholds.amber_min
        position = thresholds.green_min - days_remaining
        return 34 + round(position / span * 32)
    cap = max(_SEVERITY_GREEN_CAP, thresholds.green_min + 1)
    effective = min(days_remaining, cap)
    position = effective - thresholds.green_min
    return max(0, 33 - round(position / (cap - thresholds.green_min) * 33))
