"""
Errors raised by the risk scoring endpoint.

Messages are fixed: callers never see which field was missing or what
failed internally.
"""


class RiskScoringError(Exception):
    """Base class for errors rendered as {"error": message}."""

    status_code: int = 500
    message: str = "An error occurred while calculating risk"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingParametersError(RiskScoringError):
    """Raised when the body is absent or a required field is missing/falsy."""

    status_code = 400
    message = "Missing required parameters"


class RiskCalculationError(RiskScoringError):
    """Raised when parsing or scoring fails after validation passed."""

    pass
