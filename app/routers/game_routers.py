import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.dependencies import get_evaluation_services, get_scenario_services
from app.schemas import ScenarioRequest, ScenarioResponse, EvaluateRequest, EvaluationResponse, ErrorResponse
from app.services import ScenarioServices, EvaluationServices

logger = logging.getLogger(__name__)

router = APIRouter()


# Generate scenario (LLM Endpoint)
@router.post("/scenario", response_model=ScenarioResponse, responses={500: {"model": ErrorResponse}})
async def generate_scenario(scenario_request: ScenarioRequest,
                            services: ScenarioServices = Depends(get_scenario_services)):
    """Invent a new classroom scenario for this month"""
    try:
        return await services.generate_scenario(scenario_request)
    except Exception:
        logger.exception("Scenario endpoint error")
        return JSONResponse(status_code=500, content={"error": "Failed to generate scenario"})


# Evaluate decision (LLM Endpoint)
@router.post("/evaluate", response_model=EvaluationResponse, responses={500: {"model": ErrorResponse}})
async def evaluate_decision(evaluate_request: EvaluateRequest,
                            services: EvaluationServices = Depends(get_evaluation_services)):
    """Score the player's choice and return the deltas"""
    try:
        return await services.evaluate(evaluate_request)
    except Exception:
        logger.exception("Evaluate endpoint error")
        return JSONResponse(status_code=500, content={"error": "Failed to evaluate decision"})
