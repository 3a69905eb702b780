"""Compliance engine errors. All are local input/logic failures; nothing here is retried."""
from datetime import date


class ComplianceError(ValueError):
    """Base error for compliance calculation failures."""


class InvalidDateRangeError(ComplianceError):
    """Exit (or range end) falls before entry (or range start)."""

    def __init__(self, start: date, end: date, what: str = "trip"):
        self.start = start
        self.end = end
        super().__init__(f"Invalid {what} date range: end ({end.isoformat()}) is before start ({start.isoformat()})")


class InvalidConfigError(ComplianceError):
    """Configuration that cannot be evaluated deterministically."""

    def __init__(self, config_key: str, reason: str):
        self.config_key = config_key
        self.reason = reason
        super().__init__(f'Invalid configuration "{config_key}": {reason}')
