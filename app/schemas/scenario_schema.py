from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def text_or_none(value: Any) -> Optional[str]:
    """Keep non-empty strings (numbers are stringified), everything else counts as missing"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        value = str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


# for llm generation
class ScenarioLLMOption(BaseModel):
    id: Optional[str] = None
    text: Optional[str] = None

    @field_validator("id", "text", mode="before")
    @classmethod
    def clean_text(cls, value):
        return text_or_none(value)


class ScenarioLLMResponse(BaseModel):
    """Scenario as returned by the text model. Missing or ill typed fields become None / []"""
    id: Optional[str] = None
    title: Optional[str] = None
    prompt: Optional[str] = None
    options: List[ScenarioLLMOption] = []

    @field_validator("id", "title", "prompt", mode="before")
    @classmethod
    def clean_text(cls, value):
        return text_or_none(value)

    @field_validator("options", mode="before")
    @classmethod
    def clean_options(cls, value):
        if not isinstance(value, list):
            return []
        return [option if isinstance(option, dict) else {} for option in value]


# sent back to the game client
class ScenarioOption(BaseModel):
    id: str
    text: str

    model_config = ConfigDict(frozen=True)


class ScenarioResponse(BaseModel):
    id: str
    title: str
    prompt: str
    options: List[ScenarioOption]
    imageUrl: Optional[str] = None

    model_config = ConfigDict(frozen=True)
