from app.schemas.game_schema import (
    GameStats, ScenarioRequest, EvaluationStats, EvaluateRequest, OptionChoice, CustomChoice, Choice, MONTHS
)
from app.schemas.scenario_schema import ScenarioLLMOption, ScenarioLLMResponse, ScenarioOption, ScenarioResponse
from app.schemas.evaluation_schema import EvaluationLLMResponse, EvaluationResponse, ErrorResponse
