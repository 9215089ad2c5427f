"""
Risk scoring - turns biometric inputs into an insurance risk score.
"""

from risk_api.risk.service import RiskScorerService, risk_scorer

__all__ = ["RiskScorerService", "risk_scorer"]
