"""
FastAPI router for the risk scoring endpoint
"""

import logging
from typing import Any

from fastapi import APIRouter, Request

from risk_api.core.sentry import capture_exception
from risk_api.risk.exceptions import MissingParametersError, RiskCalculationError
from risk_api.risk.parsing import parse_risk_request
from risk_api.risk.schemas import ErrorResponse, RiskAssessment
from risk_api.risk.service import risk_scorer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["risk"])


async def _read_json_body(request: Request) -> Any:
    """
    Decoded JSON body, or None when the body is empty, not JSON, or not
    sent as application/json.
    """
    media_type = request.headers.get("content-type", "").split(";")[0]
    if media_type.strip().lower() != "application/json":
        return None

    try:
        return await request.json()
    except ValueError:
        return None


@router.post(
    "/calculate-risk",
    response_model=RiskAssessment,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def calculate_risk(request: Request) -> RiskAssessment:
    """
    Score age, BMI, blood pressure and family history.

    Body fields: age, height (cm), weight (kg), systolic, diastolic as numbers
    or numeric strings, plus an optional familyHistory array of condition tags.
    """
    logger.info("Received risk calculation request")

    body = await _read_json_body(request)

    try:
        risk_input = parse_risk_request(body)
        assessment = risk_scorer.calculate(risk_input)
    except MissingParametersError:
        logger.warning("Risk calculation rejected: missing required parameters")
        raise
    except Exception as e:
        logger.exception(f"Error in risk calculation: {e}")
        capture_exception(e)
        raise RiskCalculationError() from e

    logger.info(
        f"Risk calculated: totalScore={assessment.total_score} "
        f"riskCategory={assessment.risk_category.value}"
    )
    return assessment
