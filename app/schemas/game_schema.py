from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _normalize_month(value):
    """Accept any casing of a full month name"""
    if isinstance(value, str):
        for month in MONTHS:
            if value.strip().lower() == month.lower():
                return month
    raise ValueError(f"month must be one of {', '.join(MONTHS)}")


class GameStats(BaseModel):
    learningScore: int = Field(default=50, ge=0, le=100)
    likabilityScore: int = Field(default=50, ge=0, le=100)
    studentsRemaining: Optional[int] = Field(default=None, ge=0) # defaults to classSize
    classSize: int = Field(default=22, gt=0)

    @model_validator(mode="after")
    def default_students_remaining(self):
        if self.studentsRemaining is None:
            self.studentsRemaining = self.classSize
        return self


# Data sent by the game client to get a new scenario
class ScenarioRequest(BaseModel):
    month: str
    round: int = Field(default=1, ge=1)
    stats: GameStats = Field(default_factory=GameStats)
    usedScenarioIds: List[str] = []

    @field_validator("month", mode="before")
    @classmethod
    def check_month(cls, value):
        return _normalize_month(value)

    @field_validator("stats", "usedScenarioIds", mode="before") # client sends null on the first round
    @classmethod
    def none_to_default(cls, value, info):
        if value is None:
            return {} if info.field_name == "stats" else []
        return value


class EvaluationStats(BaseModel):
    learningScore: int = Field(default=50, ge=0, le=100)
    likabilityScore: int = Field(default=50, ge=0, le=100)
    studentsRemaining: Optional[int] = Field(default=None, ge=0) # defaults to classSize


class OptionChoice(BaseModel):
    type: Literal["option"]
    optionId: Optional[str] = None


class CustomChoice(BaseModel):
    type: Literal["custom"]
    customText: str = ""

    @field_validator("customText", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value


Choice = Annotated[Union[OptionChoice, CustomChoice], Field(discriminator="type")]


# Data sent by the game client once the player picked an answer
class EvaluateRequest(BaseModel):
    scenarioId: Optional[str] = None
    month: str
    round: int = Field(default=1, ge=1)
    classSize: int = Field(default=22, gt=0)
    stats: EvaluationStats = Field(default_factory=EvaluationStats)
    choice: Choice

    @field_validator("month", mode="before")
    @classmethod
    def check_month(cls, value):
        return _normalize_month(value)

    @field_validator("stats", mode="before")
    @classmethod
    def none_to_default(cls, value):
        return {} if value is None else value

    @model_validator(mode="after")
    def default_students_remaining(self):
        if self.stats.studentsRemaining is None:
            self.stats = self.stats.model_copy(update={"studentsRemaining": self.classSize})
        return self
