from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.schemas.scenario_schema import text_or_none
from app.core.scoring import coerce_int


# for llm generation
class EvaluationLLMResponse(BaseModel):
    """Scoring as returned by the text model, before noise and clamping"""
    learningDelta: int = 0
    likabilityDelta: int = 0
    studentsDelta: int = 0
    commentary: Optional[str] = None
    logHeadline: Optional[str] = None
    imagePrompt: Optional[str] = None

    @field_validator("learningDelta", "likabilityDelta", "studentsDelta", mode="before")
    @classmethod
    def to_int(cls, value):
        return coerce_int(value)

    @field_validator("commentary", "logHeadline", "imagePrompt", mode="before")
    @classmethod
    def clean_text(cls, value):
        return text_or_none(value)


# sent back to the game client
class EvaluationResponse(BaseModel):
    learningDelta: int
    likabilityDelta: int
    studentsDelta: int
    commentary: str
    logHeadline: str
    decisionImageUrl: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ErrorResponse(BaseModel):
    error: str
