import random

from fastapi import Depends, Request

from app.core.config import Settings
from app.llm import OpenAIClient, get_llm
from app.services import EvaluationServices, ImageServices, SafetyFilter, ScenarioServices


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_safety_filter(request: Request) -> SafetyFilter:
    return request.app.state.safety_filter


def get_rng() -> random.Random:
    """Fresh random source per request"""
    return random.Random()


def get_image_services(llm: OpenAIClient = Depends(get_llm),
                       settings: Settings = Depends(get_app_settings)) -> ImageServices:
    return ImageServices(llm, enabled=settings.IMAGES_ENABLED)


def get_scenario_services(llm: OpenAIClient = Depends(get_llm),
                          images: ImageServices = Depends(get_image_services)) -> ScenarioServices:
    return ScenarioServices(llm, images)


def get_evaluation_services(llm: OpenAIClient = Depends(get_llm),
                            images: ImageServices = Depends(get_image_services),
                            safety_filter: SafetyFilter = Depends(get_safety_filter),
                            rng: random.Random = Depends(get_rng)) -> EvaluationServices:
    return EvaluationServices(llm, images, safety_filter, rng)
